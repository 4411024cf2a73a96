# src/taskace/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskace.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Minimum level a record needs to reach the console, by logger family.
# Our own records are gated only by the handler level.
CONSOLE_MIN_LEVELS: dict[str, int] = {
    "py.warnings": logging.WARNING,
}
THIRD_PARTY_MIN_LEVEL = logging.ERROR


class _ConsoleNoiseFilter(logging.Filter):
    """
    The console doubles as the task list UI, so it only gets:
    - taskace records (handler level applies)
    - captured warnings.warn(...) output at WARNING+
    - anything else at ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "taskace" or name.startswith("taskace."):
            return True
        return record.levelno >= CONSOLE_MIN_LEVELS.get(name, THIRD_PARTY_MIN_LEVEL)


def _reset_root(level: int) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    return root


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskace",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send filtered records to stderr and everything to <log_dir>/taskace.log.

    Call once at startup, before the first record is logged.
    Returns the log file path.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / LOG_FILE_NAME

    root = _reset_root(min(console_level, file_level))
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)
    to_file.setFormatter(fmt)
    root.addHandler(to_file)

    logging.captureWarnings(True)
    return log_file
