# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from scavenger_hunt.cli.bootstrap import create_initial_state
from scavenger_hunt.core.models import Environment
from scavenger_hunt.core.state import AppState
from scavenger_hunt.tasks.registry import TaskRegistry
from scavenger_hunt.tasks.seed import DEFAULT_SEED

from .fakes import FakePicker, make_image


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than reading real env/config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Scavenger Hunt",
        log_level="INFO",
        data_dir=tmp_path / "data",
        environment=Environment.SANDBOX,
        camera_available=False,
        fallback_latitude=37.3349,
        fallback_longitude=-122.0090,
        map_span_degrees=0.01,
        library_dir=tmp_path,
        seed_path=None,
        location_replay=[],
        location_replay_interval=0.0,
    )


@pytest.fixture()
def picker() -> FakePicker:
    return FakePicker(default=make_image())


@pytest.fixture()
def state(settings: SimpleNamespace, picker: FakePicker) -> AppState:
    """AppState wired by the real bootstrap, with a fake picker."""
    return create_initial_state(settings=settings, picker=picker)


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry.from_seed(DEFAULT_SEED)
