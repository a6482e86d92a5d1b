#!/usr/bin/env python3
"""
Tests for separator-based splitting and chunk utilities.
"""

import unittest

from postchunks.chunk import (
    analyze_chunks,
    preview_chunks,
    repair_closing_tags,
    split_content,
    validate_chunks,
)
from postchunks.exceptions import ChunkingError, InvalidArgumentError


MORE = "<!--more-->"


class TestSplitContent(unittest.TestCase):
    """Test cases for split_content."""

    def test_splits_on_every_occurrence(self):
        chunks = split_content("one<!--more-->two<!--more-->three", MORE)
        self.assertEqual(chunks, ["one", "two", "three"])

    def test_separator_not_found_returns_whole_content(self):
        for text in ["plain text", "<p>Hello</p>\n<p>World</p>", "<!--more"]:
            with self.subTest(text=text):
                self.assertEqual(split_content(text, MORE), [text])

    def test_empty_content_returns_single_empty_chunk(self):
        self.assertEqual(split_content("", MORE), [""])

    def test_separator_at_edges_keeps_empty_chunks(self):
        self.assertEqual(split_content("<!--more-->body", MORE), ["", "body"])
        self.assertEqual(split_content("body<!--more-->", MORE), ["body", ""])
        self.assertEqual(split_content("<!--more-->", MORE), ["", ""])

    def test_separator_is_literal_not_regex(self):
        chunks = split_content("a.*b.*c", ".*")
        self.assertEqual(chunks, ["a", "b", "c"])

        chunks = split_content("a(x)b", "(x)")
        self.assertEqual(chunks, ["a", "b"])

    def test_empty_separator_raises(self):
        with self.assertRaises(InvalidArgumentError):
            split_content("abc", "")

    def test_invalid_argument_is_chunking_and_value_error(self):
        with self.assertRaises(ChunkingError):
            split_content("abc", "")
        with self.assertRaises(ValueError):
            split_content("abc", "")

    def test_non_string_arguments_raise(self):
        with self.assertRaises(InvalidArgumentError):
            split_content(None, MORE)
        with self.assertRaises(InvalidArgumentError):
            split_content("abc", 5)

    def test_deterministic(self):
        text = "<p>A<!--more--></p><p>B</p>"
        self.assertEqual(split_content(text, MORE), split_content(text, MORE))


class TestClosingTagRepair(unittest.TestCase):
    """Test cases for relocating closing tags in front of the separator."""

    def test_closing_tag_moves_before_separator(self):
        chunks = split_content("A<!--more--></p> B", MORE)
        self.assertEqual(chunks, ["A</p> ", "B"])

    def test_whitespace_run_moves_with_closing_tag(self):
        chunks = split_content("A<!--more--> </p>B", MORE)
        self.assertEqual(chunks, ["A </p>", "B"])

    def test_multiple_closing_tags_move_together(self):
        text = "<div><p>Intro<!--more--></p>\n</div><p>Rest</p>"
        chunks = split_content(text, MORE)
        self.assertEqual(chunks, ["<div><p>Intro</p>\n</div>", "<p>Rest</p>"])

    def test_opening_tags_are_not_moved(self):
        chunks = split_content("<p>A</p><!--more--><p>B</p>", MORE)
        self.assertEqual(chunks, ["<p>A</p>", "<p>B</p>"])

    def test_repair_applies_to_each_separator(self):
        text = "<p>1<!--more--></p><p>2<!--more--></p><p>3</p>"
        self.assertEqual(
            repair_closing_tags(text, MORE),
            "<p>1</p><!--more--><p>2</p><!--more--><p>3</p>",
        )

    def test_only_ascii_whitespace_moves_with_closing_tags(self):
        chunks = split_content("A<!--more-->\u00a0</p>B", MORE)
        self.assertEqual(chunks, ["A", "\u00a0</p>B"])

        chunks = split_content("A<!--more--> </p>\u00a0B", MORE)
        self.assertEqual(chunks, ["A </p>", "\u00a0B"])

    def test_non_ascii_tag_names_are_not_moved(self):
        chunks = split_content("A<!--more--></\u00e9>B", MORE)
        self.assertEqual(chunks, ["A", "</\u00e9>B"])

    def test_repair_without_closing_tags_is_identity(self):
        text = "a<!--more-->b"
        self.assertEqual(repair_closing_tags(text, MORE), text)

    def test_round_trip_against_repaired_form(self):
        cases = [
            "a<!--more-->b<!--more-->c",
            "<p>A<!--more--></p><p>B</p>",
            "no separator",
            "",
            "<!--more--></em></strong>tail",
        ]
        for text in cases:
            with self.subTest(text=text):
                chunks = split_content(text, MORE)
                self.assertEqual(MORE.join(chunks), repair_closing_tags(text, MORE))

    def test_round_trip_is_exact_without_trailing_tags(self):
        text = "<p>A</p><!--more--><p>B</p><!--more--><p>C</p>"
        self.assertEqual(MORE.join(split_content(text, MORE)), text)


class TestChunkUtils(unittest.TestCase):
    """Test cases for chunk validation and analysis helpers."""

    def test_validate_chunks(self):
        self.assertTrue(validate_chunks("a|b", ["a", "b"], "|"))
        self.assertFalse(validate_chunks("a|b", ["a", "c"], "|"))
        self.assertFalse(validate_chunks("", [], "|"))

    def test_analyze_chunks(self):
        analysis = analyze_chunks(["ab", "abcd"], MORE)

        self.assertEqual(analysis["num_chunks"], 2)
        self.assertEqual(analysis["total_chars"], 6)
        self.assertEqual(analysis["avg_chunk_size"], 3.0)
        self.assertEqual(analysis["min_chunk_size"], 2)
        self.assertEqual(analysis["max_chunk_size"], 4)
        self.assertEqual(analysis["size_std"], 1.0)
        self.assertEqual(analysis["separator"], repr(MORE))

    def test_analyze_empty_chunks(self):
        analysis = analyze_chunks([], MORE)
        self.assertEqual(analysis["num_chunks"], 0)
        self.assertEqual(analysis["avg_chunk_size"], 0)

    def test_preview_chunks(self):
        previews = preview_chunks(["line one\nline two", "x" * 150], max_preview=100)

        self.assertEqual(previews[0], "Chunk 1: line one\\nline two")
        self.assertTrue(previews[1].startswith("Chunk 2: "))
        self.assertTrue(previews[1].endswith("..."))
        self.assertEqual(len(previews[1]), len("Chunk 2: ") + 100 + 3)


if __name__ == "__main__":
    unittest.main()
