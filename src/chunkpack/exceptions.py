"""
Custom exceptions for chunkpack.

Filesystem errors raised while reading sources or writing chunks are not
wrapped; they propagate as the original OSError.
"""


class ChunkPackError(Exception):
    """Base exception for all chunkpack errors."""
    pass


class ConfigurationError(ChunkPackError):
    """Invalid options (chunk size, source path, patterns)."""
    pass


class OutputDirectoryError(ChunkPackError):
    """The output directory could not be created."""
    pass


class ChunkFormatError(ChunkPackError):
    """A chunk file does not follow the segment framing."""
    pass
