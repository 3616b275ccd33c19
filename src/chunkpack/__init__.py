"""chunkpack - split a source tree into paste-sized text chunks."""

__version__ = "0.1.0"
