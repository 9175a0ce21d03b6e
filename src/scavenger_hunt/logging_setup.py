# src/scavenger_hunt/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """Console shows our own logs; the location feed and everything else only when serious."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith("scavenger_hunt."):
            if name.startswith("scavenger_hunt.location."):
                return record.levelno >= logging.WARNING
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/scavenger_hunt",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """Install the console and file handlers on the root logger; returns the log file path."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "scavenger_hunt.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Re-running replaces the handlers instead of stacking them.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    log_file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    log_file_handler.setLevel(file_level)
    log_file_handler.setFormatter(fmt)
    root.addHandler(log_file_handler)

    logging.captureWarnings(True)
    return log_file
