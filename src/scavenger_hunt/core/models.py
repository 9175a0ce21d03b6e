# src/scavenger_hunt/core/models.py

"""
Domain values shared by the registry, the workflow and the front ends.

Everything here is immutable. The registry replaces whole Task values on
update instead of mutating them, so a reader holding a Task never sees a
half-applied change.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from enum import StrEnum


class TaskStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"


class MediaSourceKind(StrEnum):
    """Where evidence is requested from."""

    LIBRARY = "library"
    CAMERA = "camera"


class Environment(StrEnum):
    """
    Execution environment, selected once at startup.

    - SANDBOX: simulator/demo without a reliable GPS signal -> fixed fallback coordinate
    - DEVICE: real hardware -> live location provider
    """

    SANDBOX = "sandbox"
    DEVICE = "device"

    @classmethod
    def parse(cls, raw: str | None, default: Environment | None = None) -> Environment:
        value = (raw or "").strip().lower()
        if value in ("simulator", "sim", "demo"):
            return cls.SANDBOX
        if value in ("real", "hardware"):
            return cls.DEVICE
        try:
            return cls(value)
        except ValueError:
            return default or cls.SANDBOX


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        lat = float(self.latitude)
        lon = float(self.longitude)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ValueError(f"Coordinate must be finite: ({lat}, {lon})")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {lon}")
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    def __str__(self) -> str:
        return f"{self.latitude:.5f}, {self.longitude:.5f}"


# Apple Park; the demo/sandbox location.
DEFAULT_FALLBACK_COORDINATE = Coordinate(37.3349, -122.0090)


@dataclass(frozen=True, slots=True)
class Image:
    """Opaque photo handle produced by a media picker."""

    data: bytes = field(repr=False)
    source: MediaSourceKind
    name: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The user dismissed the picker without choosing a photo."""

    source: MediaSourceKind


@dataclass(frozen=True, slots=True)
class SourceUnavailable:
    """The requested capture source does not exist in this environment."""

    source: MediaSourceKind
    message: str


MediaOutcome = Image | Cancelled | SourceUnavailable


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str

    is_completed: bool = False
    photo: Image | None = None
    location: Coordinate | None = None

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.COMPLETED if self.is_completed else TaskStatus.PENDING

    def invariant_violations(self) -> list[str]:
        problems: list[str] = []
        if self.is_completed != (self.photo is not None):
            problems.append("is_completed must be True exactly when a photo is attached")
        if self.location is not None and not self.is_completed:
            problems.append("location may only be attached to a completed task")
        return problems


class NoticeKind(StrEnum):
    CAMERA_UNAVAILABLE = "camera_unavailable"
    SOURCE_UNAVAILABLE = "source_unavailable"
    LOCATION_UNAVAILABLE = "location_unavailable"


@dataclass(frozen=True, slots=True)
class Notice:
    """
    User-facing message for the non-fatal conditions of a completion attempt.

    Blocking notices are shown as a modal error; the rest are informational.
    """

    kind: NoticeKind
    message: str
    blocking: bool = False


CAMERA_UNAVAILABLE_MESSAGE = "Camera not available on this device."
LOCATION_UNAVAILABLE_MESSAGE = "Current location not available yet"
