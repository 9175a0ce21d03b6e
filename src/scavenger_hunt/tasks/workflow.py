# src/scavenger_hunt/tasks/workflow.py

from __future__ import annotations

"""
Task completion workflow.

Pending -> Completed is the only transition, and it is irreversible:

1. acquire a photo (may be cancelled, or the source may be unavailable),
2. attach it and mark the task completed,
3. attach a coordinate according to the environment policy,
4. notify observers.

Photo and coordinate are decoupled: a missing location never blocks or
rolls back a completion. The coordinate is read strictly after step 2.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from enum import StrEnum

from ..core.models import (
    DEFAULT_FALLBACK_COORDINATE,
    LOCATION_UNAVAILABLE_MESSAGE,
    Cancelled,
    Coordinate,
    Environment,
    Image,
    MediaSourceKind,
    Notice,
    NoticeKind,
    SourceUnavailable,
    Task,
)
from ..core.ports import CoordinateReader, TaskObserver
from ..media.acquisition import MediaAcquisition
from .registry import TaskMutation, TaskRegistry

logger = logging.getLogger(__name__)


class CompletionStatus(StrEnum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    SOURCE_UNAVAILABLE = "source_unavailable"
    ALREADY_COMPLETED = "already_completed"


@dataclass(frozen=True, slots=True)
class CompletionResult:
    status: CompletionStatus
    task: Task
    notices: tuple[Notice, ...] = field(default_factory=tuple)

    @property
    def completed(self) -> bool:
        return self.status == CompletionStatus.COMPLETED

    @property
    def blocking_notice(self) -> Notice | None:
        for notice in self.notices:
            if notice.blocking:
                return notice
        return None


def _attach_photo(image: Image) -> TaskMutation:
    def mutation(task: Task) -> Task:
        if task.is_completed:
            return task
        return dataclasses.replace(task, photo=image, is_completed=True)

    return mutation


def _attach_location(coordinate: Coordinate) -> TaskMutation:
    def mutation(task: Task) -> Task:
        if task.location is not None or not task.is_completed:
            return task
        return dataclasses.replace(task, location=coordinate)

    return mutation


class TaskCompletionWorkflow:
    def __init__(
        self,
        registry: TaskRegistry,
        media: MediaAcquisition,
        location: CoordinateReader,
        *,
        environment: Environment = Environment.SANDBOX,
        fallback_coordinate: Coordinate = DEFAULT_FALLBACK_COORDINATE,
    ) -> None:
        self._registry = registry
        self._media = media
        self._location = location
        self._environment = environment
        self._fallback = fallback_coordinate
        self._observers: list[TaskObserver] = []

    @property
    def environment(self) -> Environment:
        return self._environment

    def subscribe(self, observer: TaskObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: TaskObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def resolve_coordinate(self) -> Coordinate | None:
        """Coordinate to attach right now (None -> location not available yet)."""
        if self._environment == Environment.SANDBOX:
            return self._fallback
        return self._location.current_coordinate()

    async def complete_with_evidence(self, task_id: str, source: MediaSourceKind) -> CompletionResult:
        """
        Run one completion attempt for task_id using the given media source.

        Raises TaskNotFoundError for unknown ids. Every other outcome is a CompletionResult.
        """
        task = self._registry.get(task_id)
        # An unavailable source is reported even for completed tasks; acquire() fails fast.
        if task.is_completed and self._media.is_available(source):
            logger.info("Task %s already completed; ignoring %s request", task_id, source)
            return CompletionResult(CompletionStatus.ALREADY_COMPLETED, task)

        outcome = await self._media.acquire(source)

        if isinstance(outcome, SourceUnavailable):
            logger.info("Task %s: %s", task_id, outcome.message)
            kind = (
                NoticeKind.CAMERA_UNAVAILABLE
                if outcome.source == MediaSourceKind.CAMERA
                else NoticeKind.SOURCE_UNAVAILABLE
            )
            notice = Notice(kind, outcome.message, blocking=True)
            return CompletionResult(
                CompletionStatus.SOURCE_UNAVAILABLE, self._registry.get(task_id), (notice,)
            )

        if isinstance(outcome, Cancelled):
            logger.debug("Task %s: evidence capture cancelled", task_id)
            return CompletionResult(CompletionStatus.CANCELLED, self._registry.get(task_id))

        task = self._registry.update(task_id, _attach_photo(outcome))
        if task.photo is not outcome:
            # Completed by a concurrent attempt while this picker was open.
            return CompletionResult(CompletionStatus.ALREADY_COMPLETED, task)
        logger.info("Task %s completed with %s photo %s", task_id, source, outcome.name or "")

        notices: list[Notice] = []
        coordinate = self.resolve_coordinate()
        if coordinate is not None:
            task = self._registry.update(task_id, _attach_location(coordinate))
            logger.info("Task %s location %s (%s)", task_id, coordinate, self._environment)
        else:
            logger.warning("Task %s: current location not available yet", task_id)
            notices.append(Notice(NoticeKind.LOCATION_UNAVAILABLE, LOCATION_UNAVAILABLE_MESSAGE))

        self._notify(task)
        return CompletionResult(CompletionStatus.COMPLETED, task, tuple(notices))

    def _notify(self, task: Task) -> None:
        for observer in list(self._observers):
            try:
                observer(task)
            except Exception:
                logger.exception("Task observer failed task_id=%s", task.id)
