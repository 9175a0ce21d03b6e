# src/scavenger_hunt/media/pickers.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

from ..core.models import Image, MediaSourceKind

logger = logging.getLogger(__name__)

PromptFn = Callable[[str], str]


class FilePicker:
    """
    Console photo picker: asks for an image path and reads its bytes.

    - empty answer -> cancelled
    - relative paths resolve against library_dir
    - unreadable file -> reported via emit and treated as cancelled

    The prompt runs in a worker thread so the event loop (location updates) keeps going.
    """

    def __init__(
        self,
        library_dir: str | Path,
        *,
        prompt: PromptFn = input,
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self._library_dir = Path(library_dir).expanduser()
        self._prompt = prompt
        self._emit = emit

    def resolve(self, raw: str) -> Path:
        path = Path(raw).expanduser()
        if not path.is_absolute():
            path = self._library_dir / path
        return path

    async def pick(self, source: MediaSourceKind) -> Image | None:
        label = "Camera capture" if source == MediaSourceKind.CAMERA else "Photo library"
        answer = await asyncio.to_thread(self._prompt, f"[{label}] image path (empty to cancel): ")
        answer = (answer or "").strip()
        if not answer:
            return None

        path = self.resolve(answer)
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning("Cannot read image %s: %s", path, e)
            if self._emit is not None:
                self._emit(f"Cannot read {path}: {e.strerror or e}")
            return None

        return Image(data=data, source=source, name=path.name)
