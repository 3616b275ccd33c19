"""
Shared helpers for building source trees in tests.
"""

from pathlib import Path


def write_file(root: Path, rel_path: str, content: bytes) -> Path:
    """Create root/rel_path with the given bytes, parents included."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


def text_bytes(size: int) -> bytes:
    """Printable, non-repeating-per-line text of exactly size bytes."""
    lines = []
    total = 0
    n = 0
    while total < size:
        line = f"line {n:06d}: the quick brown fox jumps over the lazy dog\n".encode()
        lines.append(line)
        total += len(line)
        n += 1
    return b"".join(lines)[:size]
