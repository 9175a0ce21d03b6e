# tests/test_commands.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from scavenger_hunt.cli.bootstrap import create_initial_state, start_services, stop_services
from scavenger_hunt.cli.commands import CommandRegistry
from scavenger_hunt.cli.commands import registry as commands
from scavenger_hunt.core.models import Coordinate, Environment
from scavenger_hunt.core.state import AppState

from .fakes import FakePicker, settle


@pytest.mark.asyncio
async def test_command_registry_routes_sync_and_async(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"sync": 0, "async": 0}

    def h_sync(state, args, emit):
        called["sync"] += 1
        if emit is not None:
            emit("note")
        return "sync " + " ".join(args)

    async def h_async(state, args, emit):
        called["async"] += 1
        return "async"

    reg.register("a", h_sync, "a", aliases=["A1"])
    reg.register("b", h_async, "b")

    assert await reg.handle(state, "/a x y", emit=lambda _: None) == "sync x y"
    assert await reg.handle(state, "/a1") == "sync "
    assert await reg.handle(state, "/b") == "async"
    assert called == {"sync": 2, "async": 1}


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_tasks_and_library_completion(state: AppState, picker: FakePicker) -> None:
    listing = await commands.handle(state, "/tasks")
    assert "1. Take a photo of a tree" in listing
    assert "✅" not in listing

    reply = await commands.handle(state, "/library 1")
    assert "completed" in reply
    assert "37.33490, -122.00900" in reply
    assert picker.calls and picker.calls[0] == "library"

    assert "✅" in await commands.handle(state, "/tasks")
    assert "✅ Completed" in await commands.handle(state, "/show 1")
    assert "already completed" in await commands.handle(state, "/library 1")


@pytest.mark.asyncio
async def test_camera_without_camera_shows_error(state: AppState, picker: FakePicker) -> None:
    reply = await commands.handle(state, "/camera 1")
    assert reply == "Error: Camera not available on this device."
    assert picker.calls == []
    assert "Not Completed" in await commands.handle(state, "/show 1")


@pytest.mark.asyncio
async def test_cancelled_pick(state: AppState, picker: FakePicker) -> None:
    picker.results = [None]
    reply = await commands.handle(state, "/library 2")
    assert reply.startswith("Cancelled")
    assert not state.registry.at(2).is_completed


@pytest.mark.asyncio
async def test_bad_task_numbers(state: AppState) -> None:
    assert "Which task" in await commands.handle(state, "/show")
    assert "Not a task number" in await commands.handle(state, "/library x")
    assert "No task #9" in await commands.handle(state, "/camera 9")


@pytest.mark.asyncio
async def test_device_mode_fix_then_complete(settings, picker: FakePicker) -> None:
    device = SimpleNamespace(**{**vars(settings), "environment": Environment.DEVICE})
    state = create_initial_state(settings=device, picker=picker)
    start_services(state)
    try:
        reply = await commands.handle(state, "/library 1")
        assert "Current location not available yet" in reply
        assert state.registry.at(1).location is None

        assert "queued" in await commands.handle(state, "/fix 40.0 -73.9")
        await settle(lambda: state.location.current_coordinate() is not None)

        await commands.handle(state, "/library 2")
        assert state.registry.at(2).location == Coordinate(40.0, -73.9)
        assert "Invalid coordinate" in await commands.handle(state, "/fix 100 0")
        assert "Usage" in await commands.handle(state, "/fix 1")
    finally:
        await stop_services(state)



@pytest.mark.asyncio
async def test_console_picker_errors_reach_the_user(settings) -> None:
    shown: list[str] = []
    state = create_initial_state(
        settings=settings, prompt=lambda _msg: "missing.jpg", emit=shown.append
    )

    reply = await commands.handle(state, "/library 1")

    assert reply.startswith("Cancelled")
    assert len(shown) == 1
    assert "missing.jpg" in shown[0]
    assert not state.registry.at(1).is_completed
