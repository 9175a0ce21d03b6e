# src/scavenger_hunt/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- seeds the task registry,
- wires the picker, location provider, workflow and map view into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..core.models import DEFAULT_FALLBACK_COORDINATE, Coordinate, MediaSourceKind
from ..core.ports import LocationSource, MediaPicker
from ..core.state import AppState
from ..location.provider import LocationProvider
from ..location.sources import ManualLocationSource, ReplayLocationSource, parse_fixes
from ..mapview.annotation import MapAnnotationView, MapRegion
from ..media.acquisition import MediaAcquisition
from ..media.pickers import FilePicker, PromptFn
from ..tasks.registry import TaskRegistry
from ..tasks.seed import load_seed
from ..tasks.workflow import TaskCompletionWorkflow

logger = logging.getLogger(__name__)


def _fallback_coordinate(settings) -> Coordinate:
    try:
        return Coordinate(settings.fallback_latitude, settings.fallback_longitude)
    except ValueError:
        logger.warning(
            "Invalid fallback coordinate (%s, %s); using %s",
            settings.fallback_latitude,
            settings.fallback_longitude,
            DEFAULT_FALLBACK_COORDINATE,
        )
        return DEFAULT_FALLBACK_COORDINATE


def create_initial_state(
    *,
    settings=None,
    picker: MediaPicker | None = None,
    prompt: PromptFn | None = None,
    emit: Callable[[str], None] | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the picker injectable makes the app easy to test.
    Without a picker, a console FilePicker is built from prompt (default: input) and emit.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    registry = TaskRegistry.from_seed(load_seed(settings.seed_path))

    sources = [MediaSourceKind.LIBRARY]
    if settings.camera_available:
        sources.append(MediaSourceKind.CAMERA)
    if picker is None:
        picker = FilePicker(settings.library_dir, prompt=prompt or input, emit=emit)
    media = MediaAcquisition(picker, available_sources=sources)

    fallback = _fallback_coordinate(settings)
    span = float(settings.map_span_degrees)
    map_view = MapAnnotationView(MapRegion(center=fallback, latitude_delta=span, longitude_delta=span))

    location = LocationProvider()
    workflow = TaskCompletionWorkflow(
        registry,
        media,
        location,
        environment=settings.environment,
        fallback_coordinate=fallback,
    )
    workflow.subscribe(map_view.on_task_changed)

    manual = None if settings.location_replay else ManualLocationSource()

    logger.info(
        "State ready environment=%s camera=%s tasks=%d",
        settings.environment,
        settings.camera_available,
        len(registry),
    )
    return AppState(
        settings=settings,
        registry=registry,
        media=media,
        location=location,
        workflow=workflow,
        map_view=map_view,
        manual_location=manual,
    )


def location_source_for(state: AppState) -> LocationSource:
    settings = state.settings
    if state.manual_location is not None:
        return state.manual_location
    return ReplayLocationSource(
        parse_fixes(settings.location_replay),
        interval_seconds=settings.location_replay_interval,
    )


def start_services(state: AppState) -> None:
    """Start background services. Must run inside the event loop."""
    state.location.start(location_source_for(state))


async def stop_services(state: AppState) -> None:
    await state.location.stop()
