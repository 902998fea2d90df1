from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_HANDLER_NAME = "dashboard-stdout"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the root logger.

    Streamlit re-runs the entry script on every interaction, so the handler is
    looked up by name instead of being added again.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
