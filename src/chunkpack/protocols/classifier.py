"""Protocol for text/binary classification."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextClassifier(Protocol):
    """Decides whether a byte sample is text.

    The chunk writer calls this once per file with the file's first block.
    Uses structural subtyping - no inheritance required.
    """

    def is_text(self, sample: bytes) -> bool:
        """Return True if the sample looks like human-readable text."""
        ...
