"""Path filtering for chunkpack."""

from chunkpack.filters.path_filter import PathFilter, should_include

__all__ = ["PathFilter", "should_include"]
