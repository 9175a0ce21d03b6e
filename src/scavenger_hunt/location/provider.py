# src/scavenger_hunt/location/provider.py

from __future__ import annotations

"""
Location provider.

Owns a single "latest known coordinate" slot fed by a background asyncio task.
Readers never wait: current_coordinate() returns whatever the slot holds right now.
"""

import asyncio
import contextlib
import logging

from ..core.models import Coordinate
from ..core.ports import LocationSource

logger = logging.getLogger(__name__)


class LocationProvider:
    def __init__(self) -> None:
        self._latest: Coordinate | None = None
        self._runner: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._runner is not None and not self._runner.done()

    def current_coordinate(self) -> Coordinate | None:
        return self._latest

    def record_fix(self, coordinate: Coordinate) -> None:
        self._latest = coordinate
        logger.debug("Location fix %s", coordinate)

    def start(self, source: LocationSource) -> None:
        """Start consuming fixes from source. Must be called from a running event loop."""
        if self.running:
            logger.debug("LocationProvider already running")
            return
        self._runner = asyncio.get_running_loop().create_task(
            self._consume(source), name="location-provider"
        )
        logger.info("LocationProvider started source=%s", type(source).__name__)

    async def stop(self) -> None:
        runner, self._runner = self._runner, None
        if runner is None:
            return
        runner.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await runner
        logger.info("LocationProvider stopped")

    async def _consume(self, source: LocationSource) -> None:
        try:
            async for coordinate in source.fixes():
                self.record_fix(coordinate)
        except asyncio.CancelledError:
            raise
        except Exception:
            # Keep the last known fix; location is best-effort.
            logger.exception("Location source failed; keeping last known coordinate")
        else:
            logger.info("Location source finished")
