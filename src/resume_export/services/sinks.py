"""Destinations for encoded export payloads."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

__all__ = ["DirectorySaveSink", "SaveSink"]


class SaveSink(Protocol):
    """Receives the finished payload of a successful export."""

    def save(self, payload: bytes, filename: str, media_type: str) -> None:
        """Persist *payload* under *filename*."""
        ...


class DirectorySaveSink:
    """Write exports as files into a directory.

    Args:
        output_dir: Target directory; created on first save.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.saved: list[Path] = []

    def save(self, payload: bytes, filename: str, media_type: str) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        # Only the final path component of the filename is honoured.
        output_path = self.output_dir / Path(filename).name
        output_path.write_bytes(payload)
        self.saved.append(output_path)
        logger.info("Saved %s (%s, %d bytes)", output_path, media_type, len(payload))
