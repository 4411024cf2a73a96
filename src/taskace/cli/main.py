# src/taskace/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (hydrating tasks and theme),
then runs the console front-end in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        kv = getattr(state, "kv", None)
        if kv is not None and hasattr(kv, "close"):
            kv.close()
    except Exception:
        logger.debug("Key-value store close failed.", exc_info=True)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    # The console is the UI itself; only warnings and above go there.
    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/taskace"),
        console_level=max(level, logging.WARNING),
    )

    logger.info("Starting %s...", getattr(settings, "app_name", "taskace"))

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
