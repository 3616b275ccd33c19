"""
Tests for ** glob matching.
"""

import unittest

from chunkpack.utils.globbing import match_any, match_path


class TestMatchPath(unittest.TestCase):
    """Test cases for match_path."""

    def test_double_star_matches_any_depth(self):
        """** spans zero or more directories."""
        self.assertTrue(match_path("**/*.png", "a.png"))
        self.assertTrue(match_path("**/*.png", "src/img/a.png"))
        self.assertTrue(match_path("a/**/b", "a/b"))
        self.assertTrue(match_path("a/**/b", "a/x/y/b"))

    def test_single_star_stays_in_segment(self):
        """* never crosses a slash."""
        self.assertTrue(match_path("src/*.go", "src/main.go"))
        self.assertFalse(match_path("src/*.go", "src/pkg/main.go"))
        self.assertFalse(match_path("*.go", "src/main.go"))

    def test_vcs_pattern(self):
        """The version-control exclude matches .git at any depth only."""
        self.assertTrue(match_path("**/.git/**", "repo/.git/config"))
        self.assertTrue(match_path("**/.git/**", ".git/HEAD"))
        self.assertTrue(match_path("**/.git/**", "repo/.git/refs/heads/main"))
        self.assertFalse(match_path("**/.git/**", "repo/.github/workflows/ci.yml"))
        self.assertFalse(match_path("**/.git/**", "repo/.gitignore"))

    def test_absolute_paths(self):
        """Full walked paths, including a leading slash, still match."""
        self.assertTrue(match_path("**/*.png", "/tmp/src/logo.png"))
        self.assertFalse(match_path("**/*.png", "/tmp/src/logo.png.txt"))

    def test_backslash_paths(self):
        """Windows separators are treated as /."""
        self.assertTrue(match_path("src/*.py", "src\\app.py"))

    def test_character_classes(self):
        """? and [...] behave like fnmatch within a segment."""
        self.assertTrue(match_path("?.txt", "a.txt"))
        self.assertFalse(match_path("?.txt", "ab.txt"))
        self.assertTrue(match_path("[ab].txt", "b.txt"))
        self.assertFalse(match_path("[ab].txt", "c.txt"))

    def test_caret_negates_character_class(self):
        """[^a] means the same as [!a]."""
        self.assertTrue(match_path("src/[^a].py", "src/b.py"))
        self.assertFalse(match_path("src/[^a].py", "src/a.py"))
        self.assertEqual(match_path("[^ab]x", "cx"), match_path("[!ab]x", "cx"))

    def test_case_sensitive(self):
        """Matching is case sensitive on every platform."""
        self.assertFalse(match_path("**/*.PNG", "a.png"))

    def test_match_any(self):
        """match_any is true when one of the patterns matches."""
        self.assertTrue(match_any(["**/*.md", "**/*.py"], "pkg/mod.py"))
        self.assertFalse(match_any(["**/*.md"], "pkg/mod.py"))
        self.assertFalse(match_any([], "pkg/mod.py"))


if __name__ == "__main__":
    unittest.main()
