"""Read chunk files back into segments and whole files."""

import re
from pathlib import Path
from typing import Iterator

from chunkpack.exceptions import ChunkFormatError
from chunkpack.models import Segment
from chunkpack.models.records import BEGIN, CONTINUED
from chunkpack.writers.chunk_writer import END_FILE, END_PART, chunk_filename

HEADER_RE = re.compile(rb"----(BEGIN|CONTINUED) FILE: ([^\n]*)----\n")

_KINDS = {b"BEGIN": BEGIN, b"CONTINUED": CONTINUED}


def iter_chunk_paths(output_dir: str | Path) -> Iterator[Path]:
    """Yield chunk0.txt, chunk1.txt, ... until the first missing index."""
    output_dir = Path(output_dir)
    index = 0
    while True:
        path = output_dir / chunk_filename(index)
        if not path.is_file():
            return
        yield path
        index += 1


def _find_trailer(
    data: bytes, start: int, end_file: bytes, end_part: bytes
) -> tuple[int, bytes, bool]:
    """Locate the trailer that closes the segment whose payload begins at start.

    Payloads may contain their own trailer text, so a trailer only counts
    when it is followed by the end of the chunk or by the next header.

    Returns:
        (index, trailer, complete), with index -1 when nothing fits
    """
    search = start
    while True:
        candidates = []
        for trailer, complete in ((end_file, True), (end_part, False)):
            idx = data.find(trailer, search)
            if idx != -1:
                candidates.append((idx, trailer, complete))
        if not candidates:
            return -1, b"", False

        idx, trailer, complete = min(candidates, key=lambda c: c[0])
        end = idx + len(trailer)
        if end == len(data) or HEADER_RE.match(data, end):
            return idx, trailer, complete
        search = idx + 1


def parse_chunk(data: bytes) -> list[Segment]:
    """Split the contents of one chunk file into segments.

    Raises:
        ChunkFormatError: A header or trailer line is missing
    """
    segments = []
    pos = 0

    while pos < len(data):
        header = HEADER_RE.match(data, pos)
        if header is None:
            raise ChunkFormatError(f"Expected a file header at byte {pos}")

        rel_path = header.group(2).decode("utf-8", "surrogateescape")
        start = header.end()

        end_file = END_FILE.format(path=rel_path).encode("utf-8", "surrogateescape")
        end_part = END_PART.format(path=rel_path).encode("utf-8", "surrogateescape")
        idx, trailer, complete = _find_trailer(data, start, end_file, end_part)
        if idx == -1:
            raise ChunkFormatError(f"No end marker for {rel_path} after byte {start}")

        segments.append(
            Segment(
                kind=_KINDS[header.group(1)],
                rel_path=rel_path,
                payload=data[start:idx],
                complete=complete,
            )
        )
        pos = idx + len(trailer)

    return segments


def iter_segments(output_dir: str | Path) -> Iterator[Segment]:
    """Yield every segment of every chunk in index order."""
    for path in iter_chunk_paths(output_dir):
        try:
            yield from parse_chunk(path.read_bytes())
        except ChunkFormatError as e:
            raise ChunkFormatError(f"{path}: {e}") from e


def reassemble(output_dir: str | Path) -> dict[str, bytes]:
    """Rebuild file contents by joining their segments in chunk order."""
    parts: dict[str, list[bytes]] = {}
    for segment in iter_segments(output_dir):
        parts.setdefault(segment.rel_path, []).append(segment.payload)
    return {rel_path: b"".join(chunks) for rel_path, chunks in parts.items()}
