# src/scavenger_hunt/media/acquisition.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.models import (
    CAMERA_UNAVAILABLE_MESSAGE,
    Cancelled,
    MediaOutcome,
    MediaSourceKind,
    SourceUnavailable,
)
from ..core.ports import MediaPicker

logger = logging.getLogger(__name__)


class MediaAcquisition:
    """
    One evidence capture interaction -> tagged outcome.

    Unavailable sources fail fast: the picker is never shown for them.
    """

    def __init__(
        self,
        picker: MediaPicker,
        *,
        available_sources: Iterable[MediaSourceKind] = (MediaSourceKind.LIBRARY,),
    ) -> None:
        self._picker = picker
        self._available = frozenset(available_sources)

    def is_available(self, source: MediaSourceKind) -> bool:
        return source in self._available

    async def acquire(self, source: MediaSourceKind) -> MediaOutcome:
        if not self.is_available(source):
            logger.info("Media source %s unavailable", source)
            message = (
                CAMERA_UNAVAILABLE_MESSAGE
                if source == MediaSourceKind.CAMERA
                else f"Photo {source} not available on this device."
            )
            return SourceUnavailable(source=source, message=message)

        image = await self._picker.pick(source)
        if image is None:
            logger.debug("Media acquisition cancelled source=%s", source)
            return Cancelled(source=source)

        logger.debug("Media acquired source=%s name=%s bytes=%d", source, image.name, image.size)
        return image
