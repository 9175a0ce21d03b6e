# src/scavenger_hunt/mapview/annotation.py

from __future__ import annotations

"""
Map annotation view.

Pure projection of Task state: zero markers while a task has no location,
exactly one marker at task.location otherwise. Rendering itself (tiles,
widgets) belongs to the front end; this module only computes what to draw.
"""

import logging
import math
from dataclasses import dataclass

from ..core.models import DEFAULT_FALLBACK_COORDINATE, Coordinate, Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MapRegion:
    center: Coordinate
    latitude_delta: float = 0.01
    longitude_delta: float = 0.01

    def zoom_level(self) -> int:
        """Approximate slippy-map zoom showing longitude_delta degrees across."""
        delta = max(self.longitude_delta, 1e-6)
        return max(0, min(19, round(math.log2(360.0 / delta))))


@dataclass(frozen=True, slots=True)
class MapMarker:
    task_id: str
    coordinate: Coordinate
    tint: str = "red"


@dataclass(frozen=True, slots=True)
class MapSnapshot:
    region: MapRegion
    markers: tuple[MapMarker, ...]

    @property
    def visible(self) -> bool:
        return bool(self.markers)


def osm_url(coordinate: Coordinate, zoom: int = 16) -> str:
    lat, lon = coordinate.latitude, coordinate.longitude
    return (
        f"https://www.openstreetmap.org/?mlat={lat:.5f}&mlon={lon:.5f}"
        f"#map={zoom}/{lat:.5f}/{lon:.5f}"
    )


class MapAnnotationView:
    def __init__(self, region: MapRegion | None = None) -> None:
        self.region = region or MapRegion(center=DEFAULT_FALLBACK_COORDINATE)

    def render(self, task: Task) -> MapSnapshot:
        if task.location is None:
            return MapSnapshot(region=self.region, markers=())
        return MapSnapshot(
            region=self.region,
            markers=(MapMarker(task_id=task.id, coordinate=task.location),),
        )

    def recenter(self, coordinate: Coordinate) -> None:
        self.region = MapRegion(
            center=coordinate,
            latitude_delta=self.region.latitude_delta,
            longitude_delta=self.region.longitude_delta,
        )

    def on_task_changed(self, task: Task) -> None:
        """Workflow observer: follow the freshly attached coordinate."""
        if task.location is not None:
            self.recenter(task.location)
            logger.debug("Map recentered on %s", task.location)

    def describe(self, task: Task) -> str:
        snapshot = self.render(task)
        if not snapshot.visible:
            return "Map: no location attached."
        marker = snapshot.markers[0]
        return (
            f"Map: {marker.tint} marker at {marker.coordinate} "
            f"(span {snapshot.region.latitude_delta:g}°)\n"
            f"  {osm_url(marker.coordinate, snapshot.region.zoom_level())}"
        )
