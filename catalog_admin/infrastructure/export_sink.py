"""Export sinks.

A sink persists a generated payload as a downloadable file. The catalog
core only produces payload and file name and hands them to a sink.
"""

from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()


class ExportSink(Protocol):
    """Host capability that delivers an export to the user."""

    def deliver(self, payload: bytes, filename: str, mime_type: str) -> None:
        """Persist or hand off one generated file."""
        ...


class FileExportSink:
    """Writes exports into a local directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self.last_path: Path | None = None

    def deliver(self, payload: bytes, filename: str, mime_type: str) -> None:
        """Write the payload under ``directory/filename``.

        Args:
            payload: File content.
            filename: File name, used as-is.
            mime_type: Content type; recorded in the log only.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(payload)
        self.last_path = path
        logger.info("Export written", path=str(path), bytes=len(payload), mime_type=mime_type)
