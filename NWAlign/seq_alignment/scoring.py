"""
Scoring weights and validated sequence pairs
"""

import numbers
import warnings
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .errors import InvalidInputError


GAP = '-'
DNA_ALPHABET = "ACGT"


@dataclass(frozen=True)
class ScoringPolicy:
    """
    Linear scoring weights used for every cell of one alignment run.

    Attributes:
        match: Added when two equal symbols are aligned
        mismatch: Added when two different symbols are aligned
        gap: Added for every symbol aligned against a gap
    """
    match: int = 1
    mismatch: int = -1
    gap: int = -2

    def __post_init__(self):
        """Validate that all weights are integers."""
        for field_name in ("match", "mismatch", "gap"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidInputError(
                    f"Scoring weight '{field_name}' must be an integer, got: {value!r}"
                )
            object.__setattr__(self, field_name, int(value))
        if self.match < self.mismatch:
            warnings.warn(
                f"match ({self.match}) scores below mismatch ({self.mismatch}); "
                "alignments will favour substitutions",
                stacklevel=3,
            )

    def substitution(self, a: str, b: str) -> int:
        """Score for aligning symbol a against symbol b"""
        return self.match if a == b else self.mismatch


# Weights of the reference programs
DEFAULT_SCORING = ScoringPolicy()


@dataclass(frozen=True)
class SequencePair:
    """
    The two input sequences of one run.

    seq1 runs along the matrix columns, seq2 along the rows. Empty sequences
    are accepted here and rejected when the matrix borders are built.
    """
    seq1: str
    seq2: str
    alphabet: Optional[str] = None

    def __post_init__(self):
        for field_name in ("seq1", "seq2"):
            seq = getattr(self, field_name)
            if not isinstance(seq, str):
                raise InvalidInputError(
                    f"{field_name} must be a string, got: {type(seq).__name__}"
                )
            if GAP in seq:
                raise InvalidInputError(
                    f"{field_name} contains the gap symbol {GAP!r}"
                )
            if self.alphabet is not None:
                bad = sorted(set(seq) - set(self.alphabet))
                if bad:
                    raise InvalidInputError(
                        f"{field_name} has symbols outside alphabet "
                        f"{self.alphabet!r}: {''.join(bad)!r}"
                    )

    @property
    def shape(self):
        """(rows, cols) of the matrix built for this pair"""
        return len(self.seq2) + 1, len(self.seq1) + 1


def random_sequence(
    length: int,
    alphabet: str = DNA_ALPHABET,
    seed: Optional[int] = None
) -> str:
    """
    Draw a uniform random sequence, e.g. for quick tests of the aligner

    >>> random_sequence(8, seed=1)  # doctest: +SKIP
    'GTATCAGA'
    """
    if length < 0:
        raise InvalidInputError(f"length must be non-negative, got {length}")
    if not alphabet:
        raise InvalidInputError("alphabet must not be empty")
    rng = np.random.default_rng(seed)
    symbols = np.array(list(alphabet))
    return ''.join(rng.choice(symbols, size=length))
