"""
Tests for reading chunk files back.
"""

import tempfile
import unittest
from pathlib import Path

from chunkpack.exceptions import ChunkFormatError
from chunkpack.models.records import BEGIN, CONTINUED
from chunkpack.reader import iter_chunk_paths, iter_segments, parse_chunk, reassemble
from chunkpack.writers import ChunkWriter

from tests.helpers import write_file


class TestParseChunk(unittest.TestCase):
    """Test cases for parse_chunk."""

    def test_two_segments(self):
        data = (
            b"----BEGIN FILE: a.txt----\nalpha\n\n----END FILE: a.txt----\n"
            b"----CONTINUED FILE: dir/b.txt----\nbeta\n----END PART OF FILE: dir/b.txt----\n"
        )

        segments = parse_chunk(data)

        self.assertEqual(len(segments), 2)
        self.assertEqual(segments[0].kind, BEGIN)
        self.assertEqual(segments[0].rel_path, "a.txt")
        self.assertEqual(segments[0].payload, b"alpha\n")
        self.assertTrue(segments[0].complete)
        self.assertEqual(segments[1].kind, CONTINUED)
        self.assertTrue(segments[1].is_continuation)
        self.assertEqual(segments[1].rel_path, "dir/b.txt")
        self.assertEqual(segments[1].payload, b"beta")
        self.assertFalse(segments[1].complete)

    def test_payload_mentioning_other_markers(self):
        """Only the trailer for the segment's own path closes it."""
        payload = b"see ----END FILE: other.txt---- here"
        data = b"----BEGIN FILE: a.txt----\n" + payload + b"\n----END FILE: a.txt----\n"

        self.assertEqual(parse_chunk(data)[0].payload, payload)

    def test_payload_containing_its_own_trailer(self):
        """A trailer inside the payload does not close the segment early."""
        payload = b"a\n----END FILE: doc.txt----\nb\n"
        data = (
            b"----BEGIN FILE: doc.txt----\n" + payload + b"\n----END FILE: doc.txt----\n"
            b"----BEGIN FILE: next.txt----\nn\n----END FILE: next.txt----\n"
        )

        segments = parse_chunk(data)

        self.assertEqual([s.rel_path for s in segments], ["doc.txt", "next.txt"])
        self.assertEqual(segments[0].payload, payload)
        self.assertEqual(segments[1].payload, b"n")

    def test_empty_chunk(self):
        self.assertEqual(parse_chunk(b""), [])

    def test_missing_header(self):
        with self.assertRaises(ChunkFormatError):
            parse_chunk(b"stray bytes\n")

    def test_missing_trailer(self):
        with self.assertRaises(ChunkFormatError):
            parse_chunk(b"----BEGIN FILE: a.txt----\nno end in sight")


class TestChunkDirectory(unittest.TestCase):
    """Test cases for reading a whole output folder."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.output = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_iter_chunk_paths_stops_at_gap(self):
        for index in (0, 1, 3):
            (self.output / f"chunk{index}.txt").write_bytes(b"")

        names = [p.name for p in iter_chunk_paths(self.output)]

        self.assertEqual(names, ["chunk0.txt", "chunk1.txt"])

    def test_reassemble_joins_in_chunk_order(self):
        (self.output / "chunk0.txt").write_bytes(
            b"----BEGIN FILE: a.txt----\nfirst \n----END PART OF FILE: a.txt----\n"
        )
        (self.output / "chunk1.txt").write_bytes(
            b"----CONTINUED FILE: a.txt----\nsecond\n----END FILE: a.txt----\n"
            b"----BEGIN FILE: b.txt----\nb\n----END FILE: b.txt----\n"
        )

        self.assertEqual(reassemble(self.output), {"a.txt": b"first second", "b.txt": b"b"})

    def test_round_trip_of_format_documentation(self):
        """A file that quotes the marker lines comes back unchanged."""
        source = self.output / "src"
        content = b"a\n----END FILE: doc.txt----\nb\n----END PART OF FILE: doc.txt----\nc\n"
        path = write_file(source, "doc.txt", content)

        for capacity in (4096, 16):
            with self.subTest(capacity=capacity):
                chunks = self.output / f"chunks{capacity}"
                chunks.mkdir()
                with ChunkWriter(chunks, capacity, source) as writer:
                    writer.append_file(path)

                self.assertEqual(reassemble(chunks), {"doc.txt": content})

    def test_bad_chunk_names_file(self):
        (self.output / "chunk0.txt").write_bytes(b"garbage")

        with self.assertRaises(ChunkFormatError) as ctx:
            list(iter_segments(self.output))

        self.assertIn("chunk0.txt", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
