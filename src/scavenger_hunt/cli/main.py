# src/scavenger_hunt/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console checklist
on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import emit, run_console_loop
from ..core.errors import SeedError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings, emit=emit)
    except SeedError as e:
        logger.error("%s", e)
        return 2

    try:
        asyncio.run(run_console_loop(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
