# src/scavenger_hunt/tasks/seed.py

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.errors import SeedError

logger = logging.getLogger(__name__)

SeedEntry = tuple[str, str]

DEFAULT_SEED: list[SeedEntry] = [
    ("Take a photo of a tree", "Find any tree nearby and take a photo"),
    ("Take a photo of a car", "Snap a photo of any parked car"),
]


def load_seed(path: str | Path | None) -> list[SeedEntry]:
    """
    Load the startup checklist.

    The file is a JSON list of {"title": ..., "description": ...} objects.
    No path -> built-in default list.
    """
    if path is None:
        return list(DEFAULT_SEED)

    path = Path(path)
    try:
        data = json.loads(path.read_text("utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedError(f"Cannot read seed file {path}: {e}") from e

    if not isinstance(data, list):
        raise SeedError(f"Seed file {path} must contain a JSON list")

    out: list[SeedEntry] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise SeedError(f"Seed entry #{i} is not an object")
        title = str(item.get("title", "")).strip()
        if not title:
            raise SeedError(f"Seed entry #{i} has no title")
        out.append((title, str(item.get("description", "")).strip()))

    logger.info("Loaded %d seed tasks from %s", len(out), path)
    return out
