"""Run options and environment defaults."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from chunkpack.exceptions import ConfigurationError

DEFAULT_CHUNK_SIZE_KB = 13
VCS_EXCLUDE = "**/.git/**"


def parse_patterns(csv: str | None) -> tuple[str, ...]:
    """Split a comma-separated pattern list, dropping blanks."""
    if not csv:
        return ()
    return tuple(p.strip() for p in csv.split(",") if p.strip())


def env_chunk_size() -> int:
    """Default chunk size in KiB, from CHUNKPACK_CHUNK_SIZE if set."""
    raw = os.getenv("CHUNKPACK_CHUNK_SIZE")
    if raw is None or raw.strip() == "":
        return DEFAULT_CHUNK_SIZE_KB
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"CHUNKPACK_CHUNK_SIZE must be an integer, got {raw!r}")


def env_log_level() -> str:
    return os.getenv("CHUNKPACK_LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class ChunkOptions:
    """Options for one chunking run."""

    source: Path
    output: Path
    chunk_size_kb: int = DEFAULT_CHUNK_SIZE_KB
    include_patterns: tuple[str, ...] = field(default_factory=tuple)
    exclude_patterns: tuple[str, ...] = field(default_factory=tuple)

    @property
    def capacity(self) -> int:
        """Chunk capacity in bytes."""
        return self.chunk_size_kb * 1024

    @property
    def effective_excludes(self) -> tuple[str, ...]:
        """Configured excludes plus the version-control directory."""
        return tuple(self.exclude_patterns) + (VCS_EXCLUDE,)

    def validate(self) -> None:
        if self.chunk_size_kb <= 0:
            raise ConfigurationError(
                f"chunk size must be positive, got {self.chunk_size_kb}"
            )
        if not self.source.is_dir():
            raise ConfigurationError(f"source is not a directory: {self.source}")
