"""Core data models for source files, chunk segments and run results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

BEGIN = "BEGIN"
CONTINUED = "CONTINUED"


@dataclass(frozen=True)
class FileRecord:
    """A source file found during the walk."""

    path: Path
    rel_path: str
    size_bytes: int


@dataclass
class Segment:
    """One delimited region of a chunk file."""

    kind: str  # BEGIN or CONTINUED
    rel_path: str
    payload: bytes
    complete: bool  # False when closed by END PART OF FILE

    @property
    def is_continuation(self) -> bool:
        return self.kind == CONTINUED


@dataclass
class FileEvent:
    """Outcome of offering one file to the pipeline."""

    rel_path: str
    size_bytes: int
    status: str  # "written", "binary" or "filtered"
    first_chunk: Optional[int] = None
    last_chunk: Optional[int] = None


@dataclass
class RunStats:
    """Counters for one chunking run."""

    files_seen: int = 0
    files_written: int = 0
    files_filtered: int = 0
    binary_skipped: int = 0
    bytes_written: int = 0
    chunks_created: int = 0
    chunk_paths: list[Path] = field(default_factory=list)
