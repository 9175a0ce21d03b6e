# src/scavenger_hunt/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..location.provider import LocationProvider
from ..location.sources import ManualLocationSource
from ..mapview.annotation import MapAnnotationView
from ..media.acquisition import MediaAcquisition
from ..tasks.registry import TaskRegistry
from ..tasks.workflow import TaskCompletionWorkflow


@dataclass
class AppState:
    # Settings object (config.Settings or a test namespace with the same fields).
    settings: Any

    registry: TaskRegistry
    media: MediaAcquisition
    location: LocationProvider
    workflow: TaskCompletionWorkflow
    map_view: MapAnnotationView

    # Present when fixes are entered by hand (console /fix).
    manual_location: ManualLocationSource | None = None
