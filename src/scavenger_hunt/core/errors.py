# src/scavenger_hunt/core/errors.py

from __future__ import annotations


class ScavengerHuntError(Exception):
    """Base error for the scavenger hunt core."""


class TaskNotFoundError(ScavengerHuntError, KeyError):
    """A registry operation referenced an unknown task id (programming error)."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"


class SeedError(ScavengerHuntError):
    """The startup seed list could not be loaded."""
