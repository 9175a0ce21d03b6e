# src/scavenger_hunt/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.bootstrap import start_services, stop_services
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PromptFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def emit(text: str) -> None:
    """Immediate user-visible feedback (picker errors, long operations)."""
    print(f"[{_ts_local()}] {text}", flush=True)


async def run_console_loop(state: AppState, *, prompt: PromptFn = input) -> None:
    """
    Interactive checklist.

    Input is read in a worker thread so background services (location feed)
    keep running while the prompt waits.
    """
    logger.info("Console connector started (environment=%s).", state.workflow.environment)
    start_services(state)

    _print_ts("[CONSOLE] Use /tasks to see the checklist, /help for commands, /exit to quit.\n")

    try:
        while True:
            try:
                user_input = (await asyncio.to_thread(prompt, ">>> ")).strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                user_input = "/" + user_input

            try:
                reply = await command_registry.handle(state, user_input, emit=emit)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                _print_ts(reply)
    finally:
        await stop_services(state)
        logger.info("Console connector finished.")
