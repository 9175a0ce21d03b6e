# src/scavenger_hunt/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Environment (sandbox vs. device) is a runtime flag chosen once at startup.
- Malformed values fall back to defaults instead of crashing the app.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.models import DEFAULT_FALLBACK_COORDINATE, Environment

ENV_PREFIX = "SCAVENGER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _env_fixes(name: str) -> list[str]:
    # "lat,lon;lat,lon" (commas live inside a fix, so entries split on ';').
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return []
    return [p.strip() for p in raw.split(";") if p.strip()]


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Environment ----
    environment: Environment
    camera_available: bool
    fallback_latitude: float
    fallback_longitude: float

    # ---- Map ----
    map_span_degrees: float

    # ---- Inputs ----
    library_dir: Path
    seed_path: Path | None
    location_replay: list[str]
    location_replay_interval: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Scavenger Hunt") or "Scavenger Hunt"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/scavenger_hunt"))

        environment = Environment.parse(os.getenv(_k("ENVIRONMENT")), Environment.SANDBOX)
        camera_available = _env_bool(_k("CAMERA_AVAILABLE"), False)

        fallback_latitude = _env_float(_k("FALLBACK_LATITUDE"), DEFAULT_FALLBACK_COORDINATE.latitude)
        fallback_longitude = _env_float(_k("FALLBACK_LONGITUDE"), DEFAULT_FALLBACK_COORDINATE.longitude)

        map_span_degrees = _env_float(_k("MAP_SPAN_DEGREES"), 0.01)
        if map_span_degrees <= 0:
            map_span_degrees = 0.01

        library_dir = _env_path(_k("LIBRARY_DIR"), Path("."))
        seed_path = _env_optional_path(_k("SEED_PATH"))
        location_replay = _env_fixes(_k("LOCATION_REPLAY"))
        location_replay_interval = max(0.0, _env_float(_k("LOCATION_REPLAY_INTERVAL"), 1.0))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            environment=environment,
            camera_available=camera_available,
            fallback_latitude=fallback_latitude,
            fallback_longitude=fallback_longitude,
            map_span_degrees=map_span_degrees,
            library_dir=library_dir,
            seed_path=seed_path,
            location_replay=location_replay,
            location_replay_interval=location_replay_interval,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
