# src/scavenger_hunt/location/sources.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable

from ..core.models import Coordinate

logger = logging.getLogger(__name__)


class ManualLocationSource:
    """
    Fixes pushed by hand (console /fix command).

    Stands in for a GPS receiver: nothing is yielded until the first push().
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Coordinate] = asyncio.Queue()

    def push(self, coordinate: Coordinate) -> None:
        self._queue.put_nowait(coordinate)

    async def fixes(self) -> AsyncIterator[Coordinate]:
        while True:
            yield await self._queue.get()


class ReplayLocationSource:
    """Replays a fixed list of fixes, one every interval_seconds."""

    def __init__(self, coordinates: Iterable[Coordinate], *, interval_seconds: float = 1.0) -> None:
        self._coordinates = list(coordinates)
        self._interval = max(0.0, float(interval_seconds))

    async def fixes(self) -> AsyncIterator[Coordinate]:
        for i, coordinate in enumerate(self._coordinates):
            if i and self._interval:
                await asyncio.sleep(self._interval)
            yield coordinate


def parse_fixes(raw: Iterable[str]) -> list[Coordinate]:
    """Parse "lat,lon" strings; malformed entries are skipped with a warning."""
    out: list[Coordinate] = []
    for item in raw:
        parts = [p.strip() for p in item.split(",")]
        if len(parts) != 2:
            logger.warning("Ignoring malformed fix %r", item)
            continue
        try:
            out.append(Coordinate(float(parts[0]), float(parts[1])))
        except ValueError:
            logger.warning("Ignoring invalid fix %r", item)
    return out
