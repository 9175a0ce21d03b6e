# src/scavenger_hunt/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ..core.models import Coordinate, MediaSourceKind, NoticeKind, Task
from ..core.state import AppState
from ..tasks.workflow import CompletionResult, CompletionStatus

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[
    [AppState, list[str], CommandEmitter | None], str | Awaitable[str]
]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        reply = handler(state, args, emit)
        if inspect.isawaitable(reply):
            reply = await reply
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _task_line(position: int, task: Task) -> str:
    mark = "✅" if task.is_completed else "  "
    return f"{position:>2}. {task.title} {mark}".rstrip()


def _pick_task(state: AppState, args: list[str]) -> Task | str:
    """Resolve "/cmd N" to a task, or return a usage/error string."""
    if not args:
        return "Which task? Give its number from /tasks."
    try:
        position = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]}"
    try:
        return state.registry.at(position)
    except IndexError as e:
        return str(e)


def format_detail(state: AppState, task: Task) -> str:
    lines = [task.title, f"  {task.description}"]
    if task.is_completed:
        photo = task.photo.name if task.photo is not None and task.photo.name else "photo"
        lines.append(f"  ✅ Completed ({photo})")
    else:
        lines.append("  ❌ Not Completed")
    lines.append("  " + state.map_view.describe(task).replace("\n", "\n  "))
    return "\n".join(lines)


def format_result(state: AppState, result: CompletionResult) -> str:
    if result.status == CompletionStatus.SOURCE_UNAVAILABLE:
        notice = result.blocking_notice
        return f"Error: {notice.message if notice else 'Source not available.'}"
    if result.status == CompletionStatus.CANCELLED:
        return "Cancelled. Task is still not completed."
    if result.status == CompletionStatus.ALREADY_COMPLETED:
        return f"'{result.task.title}' is already completed."

    lines = [f"'{result.task.title}' completed."]
    for notice in result.notices:
        if notice.kind == NoticeKind.LOCATION_UNAVAILABLE:
            lines.append(f"⚠️ {notice.message}")
    lines.append(state.map_view.describe(result.task))
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    tasks = state.registry.list()
    done = sum(1 for t in tasks if t.is_completed)
    coordinate = state.location.current_coordinate()
    camera = "yes" if state.media.is_available(MediaSourceKind.CAMERA) else "no"
    return (
        "Status:\n"
        f"  Environment: {state.workflow.environment}\n"
        f"  Camera available: {camera}\n"
        f"  Current location: {coordinate if coordinate is not None else 'not available yet'}\n"
        f"  Completed: {done}/{len(tasks)}"
    )


def cmd_tasks(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    tasks = state.registry.list()
    if not tasks:
        return "No tasks."
    lines = [state.settings.app_name]
    lines.extend(_task_line(i, t) for i, t in enumerate(tasks, start=1))
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = _pick_task(state, args)
    if isinstance(task, str):
        return task
    return format_detail(state, task)


async def _complete(state: AppState, args: list[str], source: MediaSourceKind) -> str:
    task = _pick_task(state, args)
    if isinstance(task, str):
        return task
    result = await state.workflow.complete_with_evidence(task.id, source)
    return format_result(state, result)


async def cmd_library(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return await _complete(state, args, MediaSourceKind.LIBRARY)


async def cmd_camera(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return await _complete(state, args, MediaSourceKind.CAMERA)


def cmd_fix(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /fix LAT LON -> feed one location fix (manual location source only)
    """
    if state.manual_location is None:
        return "Location replay is active; manual fixes are disabled."
    if len(args) != 2:
        return "Usage: /fix LAT LON"
    try:
        coordinate = Coordinate(float(args[0]), float(args[1]))
    except ValueError as e:
        return f"Invalid coordinate: {e}"
    state.manual_location.push(coordinate)
    logger.debug("Manual fix queued %s", coordinate)
    return f"Location fix queued: {coordinate}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show environment, camera and location state.")
registry.register("tasks", cmd_tasks, help_text="List the checklist.", aliases=["list", "ls"])
registry.register("show", cmd_show, help_text="Task details and map: /show N.")
registry.register("library", cmd_library, help_text="Complete task N with a library photo: /library N.")
registry.register("camera", cmd_camera, help_text="Complete task N with a camera photo: /camera N.")
registry.register("fix", cmd_fix, help_text="Feed a location fix: /fix LAT LON.")
