"""Data models for chunkpack."""

from chunkpack.models.records import FileEvent, FileRecord, RunStats, Segment

__all__ = ["FileRecord", "FileEvent", "RunStats", "Segment"]
