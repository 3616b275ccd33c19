"""Include/exclude decision for walked file paths."""

from pathlib import Path
from typing import Sequence

from chunkpack.config import VCS_EXCLUDE
from chunkpack.utils.globbing import match_any


def should_include(
    path: str | Path,
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
) -> bool:
    """Decide whether a file takes part in the chunking pass.

    Exclude patterns win over include patterns. With no include patterns,
    everything not excluded is included.

    Args:
        path: Walked file path (source root joined with the relative path)
        include_patterns: Glob patterns a file must match, if any are given
        exclude_patterns: Glob patterns that reject a file

    Returns:
        True if the file should be chunked
    """
    path_str = Path(path).as_posix()

    if match_any(exclude_patterns, path_str):
        return False

    if include_patterns:
        return match_any(include_patterns, path_str)

    return True


class PathFilter:
    """Pattern set bound once per run; always excludes VCS metadata."""

    def __init__(
        self,
        include_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self.include_patterns = tuple(include_patterns)
        excludes = tuple(exclude_patterns)
        if VCS_EXCLUDE not in excludes:
            excludes += (VCS_EXCLUDE,)
        self.exclude_patterns = excludes

    def __call__(self, path: str | Path) -> bool:
        return should_include(path, self.include_patterns, self.exclude_patterns)
