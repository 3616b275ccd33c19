"""Walker for local source folders."""

import os
from pathlib import Path
from typing import Iterator, Optional

from chunkpack.models import FileRecord
from chunkpack.writers.chunk_writer import CHUNK_PREFIX


def _raise(error: OSError) -> None:
    raise error


class FolderIngester:
    """Yields the regular files of a source folder in walk order."""

    def __init__(self, output_dir: Optional[Path] = None) -> None:
        self.output_dir = output_dir.resolve() if output_dir is not None else None

    def ingest(self, source: Path) -> Iterator[FileRecord]:
        """Yield file records from a folder recursively.

        Order is whatever os.walk produces; nothing is sorted.

        Args:
            source: Path to the folder

        Yields:
            FileRecord for each regular file

        Raises:
            OSError: A directory could not be listed
        """
        for root, _, files in os.walk(source, onerror=_raise):
            for filename in files:
                full_path = Path(root) / filename

                if not full_path.is_file():
                    continue

                # Chunks from an earlier or the current run
                if self._is_own_chunk(full_path):
                    continue

                yield FileRecord(
                    path=full_path,
                    rel_path=full_path.relative_to(source).as_posix(),
                    size_bytes=full_path.stat().st_size,
                )

    def _is_own_chunk(self, path: Path) -> bool:
        if self.output_dir is None:
            return False
        return path.name.startswith(CHUNK_PREFIX) and path.parent.resolve() == self.output_dir
