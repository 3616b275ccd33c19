"""Glob matching with a recursive ``**`` segment wildcard.

``*``, ``?`` and ``[...]`` are matched per path segment with fnmatch, so
they never cross a ``/``. A ``**`` segment matches zero or more whole
segments.
"""

from fnmatch import fnmatchcase
from functools import lru_cache


def _split(path: str) -> tuple[str, ...]:
    return tuple(path.replace("\\", "/").split("/"))


@lru_cache(maxsize=256)
def _pattern_segments(pattern: str) -> tuple[str, ...]:
    # [^...] negates like [!...]
    segments = [seg.replace("[^", "[!") for seg in _split(pattern)]
    # Collapse runs of ** so matching stays linear in the common case
    collapsed: list[str] = []
    for seg in segments:
        if seg == "**" and collapsed and collapsed[-1] == "**":
            continue
        collapsed.append(seg)
    return tuple(collapsed)


def _match(pat: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    if not pat:
        return not parts
    head = pat[0]
    if head == "**":
        rest = pat[1:]
        if not rest:
            return True
        return any(_match(rest, parts[i:]) for i in range(len(parts) + 1))
    if not parts:
        return False
    return fnmatchcase(parts[0], head) and _match(pat[1:], parts[1:])


def match_path(pattern: str, path: str) -> bool:
    """Return True if path matches the glob pattern.

    Args:
        pattern: Glob pattern, e.g. ``**/*.png`` or ``src/**/test_*.py``
        path: File path with ``/`` (or ``\\``) separators

    Returns:
        True on a full-path match
    """
    return _match(_pattern_segments(pattern), _split(path))


def match_any(patterns, path: str) -> bool:
    """Return True if path matches at least one pattern."""
    return any(match_path(p, path) for p in patterns)
