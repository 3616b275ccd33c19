"""
Tests for the folder walker.
"""

import tempfile
import unittest
from pathlib import Path

from chunkpack.ingesters import FolderIngester

from tests.helpers import write_file


class TestFolderIngester(unittest.TestCase):
    """Test cases for FolderIngester.ingest."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_yields_nested_files_with_posix_paths(self):
        write_file(self.root, "a.txt", b"abc")
        write_file(self.root, "pkg/sub/b.py", b"x = 1\n")

        records = {r.rel_path: r for r in FolderIngester().ingest(self.root)}

        self.assertEqual(set(records), {"a.txt", "pkg/sub/b.py"})
        self.assertEqual(records["pkg/sub/b.py"].size_bytes, 6)
        self.assertEqual(records["a.txt"].path, self.root / "a.txt")

    def test_skips_chunks_in_output_dir(self):
        """Chunk files in the output folder are not fed back in."""
        output = self.root / "chunks"
        write_file(self.root, "a.txt", b"abc")
        write_file(output, "chunk0.txt", b"old")
        write_file(output, "notes.txt", b"keep")
        write_file(self.root, "other/chunk0.txt", b"unrelated")

        names = {r.rel_path for r in FolderIngester(output).ingest(self.root)}

        self.assertEqual(names, {"a.txt", "chunks/notes.txt", "other/chunk0.txt"})

    def test_empty_folder(self):
        self.assertEqual(list(FolderIngester().ingest(self.root)), [])


if __name__ == "__main__":
    unittest.main()
