"""Text/binary detection utilities."""

import codecs

# How much of a block is inspected
SAMPLE_SIZE = 1024

# Control characters that still count as text
ALLOWED_CONTROLS = {"\t", "\n", "\r", "\f"}


def is_text_content(content: bytes, sample_size: int = SAMPLE_SIZE) -> bool:
    """Detect if content is text: valid UTF-8 without stray control chars.

    Args:
        content: Raw bytes, usually the first block of a file
        sample_size: Number of bytes to sample from the start

    Returns:
        True if content appears to be text
    """
    if not content:
        return True

    sample = content[:sample_size]

    # Null bytes are the strongest binary indicator
    if b"\x00" in sample:
        return False

    # final=False keeps a multi-byte sequence cut off by the sample pending
    # instead of failing on it
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        text = decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return False

    return not any(ch < " " and ch not in ALLOWED_CONTROLS for ch in text)


def is_binary_content(content: bytes, sample_size: int = SAMPLE_SIZE) -> bool:
    """Inverse of is_text_content."""
    return not is_text_content(content, sample_size)


class Utf8TextClassifier:
    """Default TextClassifier backed by is_text_content."""

    def __init__(self, sample_size: int = SAMPLE_SIZE) -> None:
        self.sample_size = sample_size

    def is_text(self, sample: bytes) -> bool:
        return is_text_content(sample, self.sample_size)
