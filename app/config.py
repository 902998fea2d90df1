from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so components/styles.py and the Plotly theme agree.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F9FAFB",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents
    "accent_primary": "#2563EB",    # blue 600
    "accent_secondary": "#3B82F6",  # blue 500 (hover)
    "navy_900": "#0B1220",
    "navy_800": "#111C33",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
}


@dataclass(frozen=True)
class AppConfig:
    # Required for “live data” mode (Supabase)
    supabase_url: str

    # Anon/public key. If unset, live-data client creation fails.
    supabase_anon_key: Optional[str]

    # Defaults
    default_use_mock: bool
    simulated_latency_seconds: float
    log_level: str

    @property
    def has_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getfloat(name: str, default: float) -> float:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Never overrides variables already set in the environment
    """
    load_dotenv(override=False)

    return AppConfig(
        supabase_url=_getenv("SUPABASE_URL") or "",
        supabase_anon_key=_getenv("SUPABASE_ANON_KEY"),
        default_use_mock=(_getenv("USE_MOCK_DATA", "true") or "true").lower() == "true",
        simulated_latency_seconds=_getfloat("SIMULATED_LATENCY_SECONDS", 0.0),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
