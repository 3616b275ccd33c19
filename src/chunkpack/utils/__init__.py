"""Utility functions for chunkpack."""

from chunkpack.utils.globbing import match_any, match_path
from chunkpack.utils.text import Utf8TextClassifier, is_binary_content, is_text_content

__all__ = [
    "is_text_content",
    "is_binary_content",
    "Utf8TextClassifier",
    "match_path",
    "match_any",
]
