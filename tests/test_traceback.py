#!/usr/bin/env python3
"""
Tests for the traceback walk over a filled matrix.
"""

import pytest
from NWAlign.seq_alignment import (
    AlignmentMatrix,
    CorruptStateError,
    Origin,
    ScoringPolicy,
    TraceBuilder,
)


def filled(seq1, seq2, policy=None):
    matrix = AlignmentMatrix.from_sequences(seq1, seq2, policy)
    matrix.initialize_borders()
    matrix.fill()
    return matrix


def corrupt(matrix, **cells):
    """Replace the origin array with a writable copy and overwrite cells."""
    origins = matrix._origins.copy()
    for (i, j), origin in cells.values():
        origins[i, j] = origin
    matrix._origins = origins
    return matrix


class TestWalk:
    """Test the pairs emitted by the walk."""

    def test_pairs_in_traversal_order(self):
        """Pairs come back terminal-first."""
        pairs = TraceBuilder().walk(filled("A", "AA"))
        assert pairs == [("A", "A"), ("-", "A")]

    def test_to_strings_reverses(self):
        assert TraceBuilder.to_strings([("A", "A"), ("-", "A")]) == ("-A", "AA")

    def test_gap_in_seq2(self):
        """UP moves consume a seq1 symbol against a gap."""
        pairs = TraceBuilder().walk(filled("A", "C", ScoringPolicy(1, -5, -1)))
        assert pairs == [("-", "C"), ("A", "-")]
        assert TraceBuilder.to_strings(pairs) == ("A-", "-C")

    def test_matrix_untouched(self):
        """The walk only reads the matrix."""
        matrix = filled("GATTACA", "GCATGCT")
        before = matrix.scores.copy(), matrix.origins.copy()
        TraceBuilder().walk(matrix)
        assert (matrix.scores == before[0]).all()
        assert (matrix.origins == before[1]).all()

    def test_one_pair_per_step(self):
        """Every step emits one column, so the strings have equal length."""
        a1, a2 = TraceBuilder.to_strings(TraceBuilder().walk(filled("ACGTTGCA", "TGC")))
        assert len(a1) == len(a2)
        assert a1.replace("-", "") == "ACGTTGCA"
        assert a2.replace("-", "") == "TGC"


class TestCorruptState:
    """Test the internal consistency guards."""

    def test_unfilled_matrix(self):
        matrix = AlignmentMatrix.from_sequences("A", "C")
        matrix.initialize_borders()
        with pytest.raises(CorruptStateError, match="filled matrix"):
            TraceBuilder().walk(matrix)

    def test_missing_origin(self):
        matrix = corrupt(filled("A", "C"), terminal=((1, 1), Origin.NONE))
        with pytest.raises(CorruptStateError, match="no origin"):
            TraceBuilder().walk(matrix)

    def test_unknown_origin_code(self):
        matrix = corrupt(filled("A", "C"), terminal=((1, 1), 9))
        with pytest.raises(CorruptStateError):
            TraceBuilder().walk(matrix)

    def test_walk_leaves_matrix(self):
        """An UP origin in column 0 would step to column -1."""
        matrix = corrupt(
            filled("A", "C"),
            terminal=((1, 1), Origin.UP),
            border=((1, 0), Origin.UP),
        )
        with pytest.raises(CorruptStateError, match="leaves the matrix"):
            TraceBuilder().walk(matrix)
