# tests/test_registry.py

from __future__ import annotations

import dataclasses
import threading

import pytest

from scavenger_hunt.core.errors import TaskNotFoundError
from scavenger_hunt.core.models import Task
from scavenger_hunt.tasks.registry import TaskRegistry


def test_seed_keeps_creation_order_and_unique_ids(registry: TaskRegistry) -> None:
    tasks = registry.list()
    assert [t.title for t in tasks] == ["Take a photo of a tree", "Take a photo of a car"]
    assert len({t.id for t in tasks}) == 2
    assert all(not t.is_completed and t.photo is None and t.location is None for t in tasks)


def test_get_and_update_unknown_id_raise_not_found(registry: TaskRegistry) -> None:
    with pytest.raises(TaskNotFoundError):
        registry.get("missing")
    with pytest.raises(TaskNotFoundError):
        registry.update("missing", lambda t: t)


def test_update_swaps_whole_value(registry: TaskRegistry) -> None:
    original = registry.list()[1]
    updated = registry.update(original.id, lambda t: dataclasses.replace(t, description="changed"))

    assert updated.description == "changed"
    assert registry.get(original.id) is updated
    # Readers holding the old value keep an intact snapshot.
    assert original.description == "Snap a photo of any parked car"
    # Order is unaffected by updates.
    assert registry.list()[1].id == original.id


def test_update_rejects_id_change(registry: TaskRegistry) -> None:
    task = registry.list()[0]
    with pytest.raises(ValueError):
        registry.update(task.id, lambda t: dataclasses.replace(t, id="other"))
    assert registry.get(task.id) is task


def test_duplicate_ids_rejected() -> None:
    task = Task(id="a", title="t", description="d")
    with pytest.raises(ValueError):
        TaskRegistry([task, task])


def test_at_is_one_based(registry: TaskRegistry) -> None:
    assert registry.at(1).title == "Take a photo of a tree"
    with pytest.raises(IndexError):
        registry.at(0)
    with pytest.raises(IndexError):
        registry.at(3)


def test_concurrent_updates_same_id_are_serialized() -> None:
    registry = TaskRegistry([Task(id="counter", title="c", description="0")])

    def bump(t: Task) -> Task:
        return dataclasses.replace(t, description=str(int(t.description) + 1))

    def worker() -> None:
        for _ in range(200):
            registry.update("counter", bump)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert registry.get("counter").description == "1600"
