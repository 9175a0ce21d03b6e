# src/scavenger_hunt/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The workflow depends on Protocols instead of concrete implementations.
This keeps the photo picker and the location feed swappable (console, tests, real hardware).
"""

from collections.abc import AsyncIterator, Callable
from typing import Protocol

from .models import Coordinate, Image, MediaSourceKind, Task


class MediaPicker(Protocol):
    """
    User-facing evidence capture interaction.

    Suspends until the user picks a photo (-> Image) or dismisses the picker (-> None).
    Availability of the source is checked by the caller before pick() is awaited.
    """

    async def pick(self, source: MediaSourceKind) -> Image | None: ...


class LocationSource(Protocol):
    """Continuous stream of location fixes. May never yield (no permission, no fix yet)."""

    def fixes(self) -> AsyncIterator[Coordinate]: ...


class CoordinateReader(Protocol):
    def current_coordinate(self) -> Coordinate | None: ...


TaskObserver = Callable[[Task], None]
