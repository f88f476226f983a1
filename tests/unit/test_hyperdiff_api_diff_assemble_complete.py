"""Unit tests for hyperdiff.api.diff.assemble_complete."""

import random

import pytest

from hyperdiff.api.diff.assemble_complete import assemble_complete
from hyperdiff.api.diff.DiffLine import DiffLine
from hyperdiff.api.diff.DiffLineType import DiffLineType
from hyperdiff.api.diff.myers_diff import myers_diff
from hyperdiff.api.repo.split_lines import split_lines

pytestmark = pytest.mark.diff


def _complete(old, new):
    return assemble_complete(old, new, myers_diff(old, new))


class TestAssembleComplete:
    def test_concrete_substitution(self):
        assert _complete(["a", "b", "c"], ["a", "x", "c"]) == [
            DiffLine.context("a", 1, 1),
            DiffLine.removed("b", 2),
            DiffLine.added("x", 2),
            DiffLine.context("c", 3, 3),
        ]

    def test_added_file(self):
        lines = _complete([], ["a", "b"])
        assert all(line.line_type == DiffLineType.ADDED for line in lines)
        assert all(line.old_line_number is None for line in lines)
        assert [line.new_line_number for line in lines] == [1, 2]

    def test_deleted_file(self):
        lines = _complete(["a", "b"], [])
        assert all(line.line_type == DiffLineType.REMOVED for line in lines)
        assert all(line.new_line_number is None for line in lines)
        assert [line.old_line_number for line in lines] == [1, 2]

    def test_identical_is_all_context(self):
        lines = _complete(["a", "b"], ["a", "b"])
        assert [line.line_type for line in lines] == [DiffLineType.CONTEXT, DiffLineType.CONTEXT]

    def test_both_empty(self):
        assert _complete([], []) == []

    def test_removed_lines_sit_before_following_line(self):
        lines = _complete(["a", "gone", "b"], ["a", "b"])
        assert lines == [
            DiffLine.context("a", 1, 1),
            DiffLine.removed("gone", 2),
            DiffLine.context("b", 3, 2),
        ]

    def test_line_ending_change_is_not_a_change(self):
        old = split_lines("a\nb\n")
        new = split_lines("a\r\nb\r\n")
        lines = _complete(old, new)
        assert all(line.line_type == DiffLineType.CONTEXT for line in lines)

    def test_new_file_reconstructed_without_gaps(self):
        rng = random.Random(99)
        for _ in range(100):
            old = [rng.choice("abcd") for _ in range(rng.randint(0, 15))]
            new = [rng.choice("abcd") for _ in range(rng.randint(0, 15))]
            lines = _complete(old, new)
            kept = [line for line in lines if line.line_type != DiffLineType.REMOVED]
            assert [line.content for line in kept] == new
            assert [line.new_line_number for line in kept] == list(range(1, len(new) + 1))
            gone = [line for line in lines if line.line_type != DiffLineType.ADDED]
            assert [line.content for line in gone] == old
            assert [line.old_line_number for line in gone] == list(range(1, len(old) + 1))
