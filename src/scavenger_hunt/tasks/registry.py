# src/scavenger_hunt/tasks/registry.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from ..core.errors import TaskNotFoundError
from ..core.models import Task, new_task_id

logger = logging.getLogger(__name__)

TaskMutation = Callable[[Task], Task]


class TaskRegistry:
    """
    In-memory, ordered owner of the canonical Task values.

    - list() keeps creation order
    - update() swaps the whole (frozen) Task under a per-task lock,
      so concurrent updates to one id are serialized and readers never see torn state
    - different ids never contend on the same lock

    Nothing is persisted; the registry lives for the process lifetime.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str, Task] = {}
        self._locks: dict[str, threading.Lock] = {}
        # Guards the two dicts above (bookkeeping only, not task contents).
        self._index_lock = threading.Lock()

        for task in tasks:
            self._add(task)

    @classmethod
    def from_seed(cls, seed: Iterable[tuple[str, str]]) -> TaskRegistry:
        """Create one Task per (title, description) pair, in order."""
        registry = cls(
            Task(id=new_task_id(), title=title, description=description)
            for title, description in seed
        )
        logger.info("TaskRegistry seeded total=%d", len(registry))
        return registry

    def _add(self, task: Task) -> None:
        with self._index_lock:
            if task.id in self._tasks:
                raise ValueError(f"Duplicate task id: {task.id}")
            self._tasks[task.id] = task
            self._locks[task.id] = threading.Lock()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def list(self) -> list[Task]:
        with self._index_lock:
            return list(self._tasks.values())

    def get(self, task_id: str) -> Task:
        try:
            return self._tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def at(self, position: int) -> Task:
        """1-based lookup used by front ends that number the checklist."""
        tasks = self.list()
        if position < 1 or position > len(tasks):
            raise IndexError(f"No task #{position} (have {len(tasks)})")
        return tasks[position - 1]

    def update(self, task_id: str, mutation: TaskMutation) -> Task:
        """
        Apply mutation(task) -> task atomically for this id and return the stored result.

        Raises TaskNotFoundError for unknown ids.
        """
        lock = self._locks.get(task_id)
        if lock is None:
            raise TaskNotFoundError(task_id)

        with lock:
            current = self._tasks[task_id]
            updated = mutation(current)
            if updated.id != current.id:
                raise ValueError(f"Mutation changed task id {current.id} -> {updated.id}")
            if updated is not current:
                self._tasks[task_id] = updated
                logger.debug("Task %s updated status=%s", task_id, updated.status)
            return updated
