"""CLI entry point for chunkpack."""

import argparse
import logging
import sys
from pathlib import Path

from chunkpack.config import ChunkOptions, env_chunk_size, env_log_level, parse_patterns
from chunkpack.exceptions import ChunkPackError
from chunkpack.pipeline import chunk_directory

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log lines to stdout as plain messages."""
    level = "DEBUG" if verbose else env_log_level()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )


def build_parser(default_chunk_size: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkpack",
        usage="%(prog)s [options] <source> <output_folder>",
        description="Split a source tree into fixed-size text chunks for pasting into a chat window",
    )
    parser.add_argument("source", nargs="?", help="Source directory to walk")
    parser.add_argument("output", nargs="?", help="Folder that receives chunk0.txt, chunk1.txt, ...")
    parser.add_argument(
        "-chunksize",
        "--chunksize",
        type=int,
        default=default_chunk_size,
        help=f"Chunk size in KB (default: {default_chunk_size})",
    )
    parser.add_argument(
        "-include",
        "--include",
        default="",
        help="Comma-separated list of glob patterns to include",
    )
    parser.add_argument(
        "-exclude",
        "--exclude",
        default="",
        help="Comma-separated list of glob patterns to exclude (**/.git/** is always excluded)",
    )
    parser.add_argument(
        "-verbose",
        "--verbose",
        action="store_true",
        help="Log every chunk and filtered file",
    )
    return parser


def chunk(
    source: str,
    output: str,
    chunk_size_kb: int,
    include: str = "",
    exclude: str = "",
) -> None:
    """Chunk a source folder into an output folder.

    Args:
        source: Path to the source folder
        output: Path to the folder receiving chunk files
        chunk_size_kb: Chunk capacity in KiB
        include: Comma-separated include globs
        exclude: Comma-separated exclude globs
    """
    options = ChunkOptions(
        source=Path(source),
        output=Path(output),
        chunk_size_kb=chunk_size_kb,
        include_patterns=parse_patterns(include),
        exclude_patterns=parse_patterns(exclude),
    )
    options.validate()

    logger.info(f"Chunking {source} -> {output} ({options.capacity:,} bytes per chunk)")
    chunk_directory(options)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    try:
        default_chunk_size = env_chunk_size()
    except ChunkPackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = build_parser(default_chunk_size)
    args = parser.parse_args(argv)

    if args.source is None or args.output is None:
        parser.print_usage(sys.stderr)
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        chunk(args.source, args.output, args.chunksize, args.include, args.exclude)
    except ChunkPackError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error processing files: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
