"""Capacity-bounded chunk file writer."""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional

from chunkpack.models import FileEvent
from chunkpack.models.records import BEGIN, CONTINUED
from chunkpack.protocols import TextClassifier
from chunkpack.utils.text import Utf8TextClassifier

logger = logging.getLogger(__name__)

CHUNK_PREFIX = "chunk"
CHUNK_SUFFIX = ".txt"

HEADERS = {
    BEGIN: "----BEGIN FILE: {path}----\n",
    CONTINUED: "----CONTINUED FILE: {path}----\n",
}
END_FILE = "\n----END FILE: {path}----\n"
END_PART = "\n----END PART OF FILE: {path}----\n"


def chunk_filename(index: int) -> str:
    """Name of the chunk file with the given index."""
    return f"{CHUNK_PREFIX}{index}{CHUNK_SUFFIX}"


def _marker(template: str, rel_path: str) -> bytes:
    return template.format(path=rel_path).encode("utf-8", "surrogateescape")


class ChunkWriter:
    """Appends file contents to chunk files, rotating when a chunk is full.

    Holds the writer state for one run: the index of the next chunk to
    create, the payload bytes left in the open chunk, and the open chunk's
    handle. Delimiter lines are not counted against the capacity; only
    file bytes are.

    Use as a context manager, or call close() to finalize the last chunk.
    """

    def __init__(
        self,
        output_dir: str | Path,
        capacity: int,
        source_root: str | Path,
        classifier: Optional[TextClassifier] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.output_dir = Path(output_dir)
        self.capacity = capacity
        self.source_root = Path(source_root)
        self.classifier = classifier if classifier is not None else Utf8TextClassifier()

        self.next_index = 0
        self.remaining = 0
        self._handle: Optional[BinaryIO] = None

        self.bytes_written = 0
        self.chunk_paths: list[Path] = []

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    @property
    def chunks_created(self) -> int:
        return self.next_index

    def relative_path(self, path: Path) -> str:
        """Path used in delimiter lines, always with / separators."""
        try:
            return path.relative_to(self.source_root).as_posix()
        except ValueError:
            return path.as_posix()

    def append_file(self, path: str | Path) -> FileEvent:
        """Write one source file into the chunk stream.

        The first block decides text vs binary for the whole file. Binary
        files are skipped without touching the writer state.

        Args:
            path: Path of the source file as walked

        Returns:
            FileEvent with status "written" or "binary" and the span of
            chunk indices that received bytes

        Raises:
            OSError: Reading the source or writing a chunk failed
        """
        path = Path(path)
        rel_path = self.relative_path(path)
        event = FileEvent(rel_path=rel_path, size_bytes=0, status="written")

        with open(path, "rb") as src:
            block = src.read(self.capacity)
            if not self.classifier.is_text(block):
                logger.info(f"Skipping non-text file: {path}")
                event.status = "binary"
                event.size_bytes = os.fstat(src.fileno()).st_size
                return event

            # One block of read-ahead tells whether a segment ends the file
            segment_open = False
            while block:
                next_block = src.read(self.capacity)
                segment_open = self._write_block(
                    block, rel_path, event, segment_open, at_eof=not next_block
                )
                event.size_bytes += len(block)
                block = next_block

        return event

    def _write_block(
        self,
        block: bytes,
        rel_path: str,
        event: FileEvent,
        segment_open: bool,
        at_eof: bool,
    ) -> bool:
        """Place one block, splitting it across chunks as needed.

        A segment stays open across blocks while its chunk has room, so
        delimiters only appear at chunk boundaries and at end of file.

        Returns:
            Whether this file's segment is still open in the current chunk
        """
        while block:
            handle = self._current_chunk()

            if not segment_open:
                kind = BEGIN if event.first_chunk is None else CONTINUED
                handle.write(_marker(HEADERS[kind], rel_path))
                segment_open = True
                index = self.next_index - 1
                if event.first_chunk is None:
                    event.first_chunk = index
                event.last_chunk = index

            to_write = min(len(block), self.remaining)
            handle.write(block[:to_write])
            block = block[to_write:]
            self.remaining -= to_write
            self.bytes_written += to_write

            if at_eof and not block:
                handle.write(_marker(END_FILE, rel_path))
                segment_open = False
            elif self.remaining == 0:
                handle.write(_marker(END_PART, rel_path))
                segment_open = False

            if self.remaining == 0:
                self._finalize()

        return segment_open

    def _current_chunk(self) -> BinaryIO:
        """Handle of the chunk with room left, opening a new one if needed."""
        if self.remaining <= 0 or self._handle is None:
            return self._open_next_chunk()
        return self._handle

    def _open_next_chunk(self) -> BinaryIO:
        self._finalize()
        chunk_path = self.output_dir / chunk_filename(self.next_index)
        handle = open(chunk_path, "wb")
        self._handle = handle
        logger.debug(f"Created {chunk_path}")
        self.chunk_paths.append(chunk_path)
        self.next_index += 1
        self.remaining = self.capacity
        return handle

    def _finalize(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def close(self) -> None:
        """Finalize the open chunk, if any."""
        self._finalize()

    def __enter__(self) -> "ChunkWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
