# tests/fakes.py

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable

from scavenger_hunt.core.models import Coordinate, Image, MediaSourceKind


def make_image(name: str = "tree.jpg", source: MediaSourceKind = MediaSourceKind.LIBRARY) -> Image:
    return Image(data=b"\xff\xd8\xff" + name.encode(), source=source, name=name)


class FakePicker:
    """
    Deterministic MediaPicker for unit tests.

    - Returns queued results in order (Image or None for "user cancelled")
    - Once the queue is empty, keeps returning default
    - Captures the requested sources for assertions
    """

    def __init__(self, results: Iterable[Image | None] = (), default: Image | None = None) -> None:
        self.results = list(results)
        self.default = default
        self.calls: list[MediaSourceKind] = []

    async def pick(self, source: MediaSourceKind) -> Image | None:
        self.calls.append(source)
        # Yield once, like a real picker sheet would.
        await asyncio.sleep(0)
        if self.results:
            return self.results.pop(0)
        return self.default


class FakeCoordinateReader:
    """Single-slot reader; counts reads so tests can prove the slot was (not) consulted."""

    def __init__(self, coordinate: Coordinate | None = None) -> None:
        self.coordinate = coordinate
        self.reads = 0

    def current_coordinate(self) -> Coordinate | None:
        self.reads += 1
        return self.coordinate


class FakeLocationSource:
    """Yields the given fixes, then optionally raises or idles forever (like a GPS with no new fix)."""

    def __init__(
        self,
        coordinates: Iterable[Coordinate],
        *,
        fail_with: Exception | None = None,
        idle_after: bool = True,
    ) -> None:
        self.coordinates = list(coordinates)
        self.fail_with = fail_with
        self.idle_after = idle_after

    async def fixes(self) -> AsyncIterator[Coordinate]:
        for coordinate in self.coordinates:
            await asyncio.sleep(0)
            yield coordinate
        if self.fail_with is not None:
            raise self.fail_with
        if self.idle_after:
            await asyncio.Event().wait()


async def settle(predicate=None, rounds: int = 50) -> None:
    """Let background tasks run until predicate() holds (or rounds are exhausted)."""
    for _ in range(rounds):
        if predicate is not None and predicate():
            return
        await asyncio.sleep(0)
