#!/usr/bin/env python3
"""
Tests for scoring weights, sequence pair validation and random sequences.
"""

import pytest
from NWAlign.seq_alignment import (
    DEFAULT_SCORING,
    DNA_ALPHABET,
    InvalidInputError,
    ScoringPolicy,
    SequencePair,
    random_sequence,
)


class TestScoringPolicy:
    """Test the three-weight scoring policy."""

    def test_defaults(self):
        """Defaults reproduce the reference weights."""
        policy = ScoringPolicy()
        assert (policy.match, policy.mismatch, policy.gap) == (1, -1, -2)
        assert DEFAULT_SCORING == policy

    def test_substitution(self):
        """Equal symbols score match, different symbols mismatch."""
        policy = ScoringPolicy(2, -3, -1)
        assert policy.substitution("A", "A") == 2
        assert policy.substitution("A", "G") == -3

    def test_frozen(self):
        """Weights cannot change during a run."""
        policy = ScoringPolicy()
        with pytest.raises(AttributeError):
            policy.gap = -5

    @pytest.mark.parametrize("weights", [(1.5, -1, -2), (1, "x", -2), (True, -1, -2)])
    def test_non_integer_weights_rejected(self, weights):
        """Only integers are accepted as weights."""
        with pytest.raises(InvalidInputError):
            ScoringPolicy(*weights)

    def test_match_below_mismatch_warns(self):
        """A policy that rewards mismatches over matches is suspicious."""
        with pytest.warns(UserWarning, match="below mismatch"):
            ScoringPolicy(match=-1, mismatch=1, gap=-2)

    def test_invalid_input_is_value_error(self):
        """Callers catching ValueError also catch input errors."""
        assert issubclass(InvalidInputError, ValueError)


class TestSequencePair:
    """Test sequence pair validation."""

    def test_shape(self):
        """Rows follow seq2, columns follow seq1."""
        assert SequencePair("ACGT", "AC").shape == (3, 5)

    def test_empty_allowed_here(self):
        """Emptiness is checked when the matrix borders are built."""
        assert SequencePair("AAA", "").shape == (1, 4)

    def test_gap_symbol_rejected(self):
        """The gap symbol cannot appear in an input sequence."""
        with pytest.raises(InvalidInputError, match="gap symbol"):
            SequencePair("AC-G", "ACG")

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInputError, match="must be a string"):
            SequencePair(["A", "C"], "AC")

    def test_alphabet(self):
        """Symbols outside a supplied alphabet are reported."""
        SequencePair("ACGT", "TTGA", alphabet=DNA_ALPHABET)
        with pytest.raises(InvalidInputError, match="'U'"):
            SequencePair("ACGU", "ACG", alphabet=DNA_ALPHABET)

    def test_no_alphabet_accepts_anything(self):
        SequencePair("hello", "world!")


class TestRandomSequence:
    """Test random sequence generation."""

    def test_length_and_alphabet(self):
        seq = random_sequence(50, seed=0)
        assert len(seq) == 50
        assert set(seq) <= set(DNA_ALPHABET)

    def test_seeded_is_reproducible(self):
        assert random_sequence(30, seed=7) == random_sequence(30, seed=7)

    def test_custom_alphabet(self):
        assert set(random_sequence(40, "XY", seed=1)) <= {"X", "Y"}

    def test_zero_length(self):
        assert random_sequence(0, seed=1) == ""

    def test_invalid_arguments(self):
        with pytest.raises(InvalidInputError):
            random_sequence(-1)
        with pytest.raises(InvalidInputError):
            random_sequence(5, "")
