from __future__ import annotations

import pytest

from config import get_config


ENV_VARS = ["SUPABASE_URL", "SUPABASE_ANON_KEY", "USE_MOCK_DATA", "SIMULATED_LATENCY_SECONDS", "LOG_LEVEL"]


@pytest.fixture
def blank_env(monkeypatch):
    # Blank (not unset) so a local .env cannot fill them in
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
    return monkeypatch


def test_defaults(blank_env):
    cfg = get_config()

    assert cfg.supabase_url == ""
    assert cfg.supabase_anon_key is None
    assert cfg.default_use_mock is True
    assert cfg.simulated_latency_seconds == 0.0
    assert cfg.log_level == "INFO"
    assert cfg.has_credentials is False


def test_reads_environment(blank_env):
    blank_env.setenv("SUPABASE_URL", " https://abc.supabase.co ")
    blank_env.setenv("SUPABASE_ANON_KEY", "anon")
    blank_env.setenv("USE_MOCK_DATA", "False")
    blank_env.setenv("SIMULATED_LATENCY_SECONDS", "3")
    blank_env.setenv("LOG_LEVEL", "debug")

    cfg = get_config()

    assert cfg.supabase_url == "https://abc.supabase.co"
    assert cfg.supabase_anon_key == "anon"
    assert cfg.default_use_mock is False
    assert cfg.simulated_latency_seconds == 3.0
    assert cfg.log_level == "DEBUG"
    assert cfg.has_credentials is True


@pytest.mark.parametrize("raw", ["soon", "-2"])
def test_bad_latency_is_clamped_or_ignored(blank_env, raw):
    blank_env.setenv("SIMULATED_LATENCY_SECONDS", raw)

    assert get_config().simulated_latency_seconds == 0.0
