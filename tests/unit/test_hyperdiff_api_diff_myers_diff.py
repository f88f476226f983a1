"""Unit tests for hyperdiff.api.diff.myers_diff."""

import random

import pytest

from hyperdiff.api.diff.Delete import Delete
from hyperdiff.api.diff.Equal import Equal
from hyperdiff.api.diff.Insert import Insert
from hyperdiff.api.diff.myers_diff import myers_diff
from hyperdiff.api.repo.split_lines import split_lines

pytestmark = pytest.mark.diff


def _apply(old, new, script):
    """Rebuild ``new`` from ``old`` and the script, checking every Equal really matches."""
    out = []
    i = j = 0
    for op in script:
        if isinstance(op, Equal):
            assert op.old_range.start == i and op.new_range.start == j
            assert len(op.old_range) == len(op.new_range)
            for a, b in zip(op.old_range, op.new_range):
                assert old[a] == new[b]
                out.append(old[a])
            i, j = op.old_range.stop, op.new_range.stop
        elif isinstance(op, Delete):
            assert op.old_range.start == i
            i = op.old_range.stop
        else:
            assert op.new_range.start == j
            out.extend(new[k] for k in op.new_range)
            j = op.new_range.stop
    assert i == len(old) and j == len(new)
    return out


def _cost(script):
    return sum(len(op.old_range) if isinstance(op, Delete) else len(op.new_range) for op in script if not isinstance(op, Equal))


def _lcs_length(a, b):
    row = [0] * (len(b) + 1)
    for x in a:
        prev = 0
        for j, y in enumerate(b, start=1):
            cur = row[j]
            row[j] = prev + 1 if x == y else max(row[j], row[j - 1])
            prev = cur
    return row[-1]


class TestDegenerateInputs:
    def test_both_empty(self):
        assert myers_diff([], []) == ()

    def test_empty_old_is_single_insert(self):
        assert myers_diff([], ["a", "b"]) == (Insert(range(0, 2)),)

    def test_empty_new_is_single_delete(self):
        assert myers_diff(["a", "b", "c"], []) == (Delete(range(0, 3)),)

    def test_identical_is_single_equal(self):
        lines = ["a", "b", "c"]
        assert myers_diff(lines, list(lines)) == (Equal(range(0, 3), range(0, 3)),)


class TestScripts:
    def test_single_substitution(self):
        script = myers_diff(["a", "b", "c"], ["a", "x", "c"])
        assert script == (
            Equal(range(0, 1), range(0, 1)),
            Delete(range(1, 2)),
            Insert(range(1, 2)),
            Equal(range(2, 3), range(2, 3)),
        )

    def test_deletes_precede_inserts_in_a_region(self):
        script = myers_diff(["a", "b", "c", "d"], ["a", "x", "y", "d"])
        assert [type(op) for op in script] == [Equal, Delete, Insert, Equal]

    def test_accepts_line_records(self):
        old = split_lines("one\ntwo\n")
        new = split_lines("one\r\ntwo\r\nthree\r\n")
        assert myers_diff(old, new) == (Equal(range(0, 2), range(0, 2)), Insert(range(2, 3)))

    def test_classic_example_is_minimal(self):
        old = list("abcabba")
        new = list("cbabac")
        script = myers_diff(old, new)
        assert _apply(old, new, script) == new
        assert _cost(script) == 5

    def test_deterministic(self):
        old = list("the quick brown fox")
        new = list("the quack brown box")
        assert myers_diff(old, new) == myers_diff(old, new)

    def test_random_inputs_are_minimal(self):
        rng = random.Random(1234)
        for _ in range(200):
            old = [rng.choice("abc") for _ in range(rng.randint(0, 12))]
            new = [rng.choice("abc") for _ in range(rng.randint(0, 12))]
            script = myers_diff(old, new)
            assert _apply(old, new, script) == new
            assert _cost(script) == len(old) + len(new) - 2 * _lcs_length(old, new)

    def test_no_adjacent_ops_of_same_kind(self):
        script = myers_diff(list("abcdefgh"), list("axcyefzh"))
        for first, second in zip(script, script[1:]):
            assert type(first) is not type(second)
