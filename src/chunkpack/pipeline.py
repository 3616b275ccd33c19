"""Driver: walk the source, filter paths, feed the chunk writer."""

import logging
from typing import Callable, Optional

from chunkpack.config import ChunkOptions
from chunkpack.exceptions import OutputDirectoryError
from chunkpack.filters import PathFilter
from chunkpack.ingesters import FolderIngester
from chunkpack.models import FileEvent, RunStats
from chunkpack.protocols import TextClassifier
from chunkpack.writers import ChunkWriter

logger = logging.getLogger(__name__)


def prepare_output(options: ChunkOptions) -> None:
    """Create the output directory, parents included."""
    try:
        options.output.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(
            f"Error creating output directory {options.output}: {e}"
        ) from e


def chunk_directory(
    options: ChunkOptions,
    on_file: Optional[Callable[[FileEvent], None]] = None,
    classifier: Optional[TextClassifier] = None,
) -> RunStats:
    """Chunk every qualifying file under options.source.

    Args:
        options: Validated run options
        on_file: Called once per walked file with its outcome
        classifier: Text classifier; defaults to the UTF-8 classifier

    Returns:
        RunStats for the run

    Raises:
        OutputDirectoryError: The output directory could not be created
        OSError: Walking, reading or writing failed; chunks already
            written are left on disk
    """
    prepare_output(options)

    path_filter = PathFilter(options.include_patterns, options.effective_excludes)
    ingester = FolderIngester(output_dir=options.output)
    stats = RunStats()

    with ChunkWriter(options.output, options.capacity, options.source, classifier) as writer:
        for record in ingester.ingest(options.source):
            stats.files_seen += 1

            if not path_filter(record.path):
                logger.debug(f"Filtered out {record.rel_path}")
                stats.files_filtered += 1
                event = FileEvent(
                    rel_path=record.rel_path,
                    size_bytes=record.size_bytes,
                    status="filtered",
                )
            else:
                event = writer.append_file(record.path)
                if event.status == "binary":
                    stats.binary_skipped += 1
                else:
                    stats.files_written += 1

            if on_file is not None:
                on_file(event)

    stats.bytes_written = writer.bytes_written
    stats.chunks_created = writer.chunks_created
    stats.chunk_paths = list(writer.chunk_paths)

    logger.info(
        f"Chunked {stats.files_written} files ({stats.bytes_written:,} bytes) "
        f"into {stats.chunks_created} chunks -> {options.output}"
    )
    if stats.binary_skipped:
        logger.info(f"Skipped {stats.binary_skipped} non-text files")

    return stats
