"""Chunk file writers for chunkpack."""

from chunkpack.writers.chunk_writer import ChunkWriter, chunk_filename

__all__ = ["ChunkWriter", "chunk_filename"]
