# tests/test_seed.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from scavenger_hunt.core.errors import SeedError
from scavenger_hunt.tasks.seed import DEFAULT_SEED, load_seed


def test_default_seed_without_path() -> None:
    assert load_seed(None) == DEFAULT_SEED
    assert load_seed(None) is not DEFAULT_SEED


def test_seed_file(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps(
            [
                {"title": "Find a fountain", "description": "Any public fountain"},
                {"title": "Find a red door"},
            ]
        ),
        "utf-8",
    )
    assert load_seed(path) == [("Find a fountain", "Any public fountain"), ("Find a red door", "")]


@pytest.mark.parametrize(
    "content",
    ["not json", '{"title": "x"}', '[{"description": "no title"}]', '["x"]'],
)
def test_bad_seed_files(tmp_path: Path, content: str) -> None:
    path = tmp_path / "seed.json"
    path.write_text(content, "utf-8")
    with pytest.raises(SeedError):
        load_seed(path)


def test_missing_seed_file(tmp_path: Path) -> None:
    with pytest.raises(SeedError):
        load_seed(tmp_path / "absent.json")
