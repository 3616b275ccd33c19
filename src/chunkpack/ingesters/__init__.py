"""Source walkers for chunkpack."""

from chunkpack.ingesters.folder_ingester import FolderIngester

__all__ = ["FolderIngester"]
