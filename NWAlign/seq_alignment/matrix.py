"""
Needleman-Wunsch scoring matrix

Scores and per-cell provenance live in two numpy arrays of shape
(len(seq2) + 1, len(seq1) + 1). Rows walk seq2, columns walk seq1.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Literal, Optional, Tuple

import numpy as np

from .errors import CorruptStateError, InvalidInputError
from .scoring import DEFAULT_SCORING, ScoringPolicy, SequencePair


class Origin(IntEnum):
    """Which recurrence term produced a cell's score"""
    NONE = 0        # only (0, 0)
    UP = 1          # from (i, j-1): seq1 symbol against a gap
    DIAGONAL = 2    # from (i-1, j-1): seq1 symbol against seq2 symbol
    LEFT = 3        # from (i-1, j): gap against a seq2 symbol


class MatrixState(Enum):
    UNINITIALIZED = "uninitialized"
    BORDERS_SET = "borders_set"
    FILLED = "filled"


FillStrategy = Literal["row", "antidiagonal"]


@dataclass(frozen=True)
class Cell:
    """Read-only view of one matrix position"""
    score: int
    origin: Origin
    row: int
    col: int


def choose_origin(up: int, left: int, diag: int) -> Tuple[int, Origin]:
    """
    Best of the three candidate scores and the term that produced it.

    Ties resolve DIAGONAL > LEFT > UP, so substitutions win over gaps and
    every input has exactly one canonical path.
    """
    best = max(up, left, diag)
    if diag == best:
        return best, Origin.DIAGONAL
    if left == best:
        return best, Origin.LEFT
    return best, Origin.UP


class AlignmentMatrix:
    """Cumulative optimal scores for every prefix pair of one sequence pair"""

    def __init__(self, pair: SequencePair, policy: Optional[ScoringPolicy] = None):
        self.pair = pair
        self.policy = policy if policy is not None else DEFAULT_SCORING
        self.rows, self.cols = pair.shape
        self._scores = np.zeros((self.rows, self.cols), dtype=np.int64)
        self._origins = np.full((self.rows, self.cols), Origin.NONE, dtype=np.int8)
        self.state = MatrixState.UNINITIALIZED

    @classmethod
    def from_sequences(
        cls,
        seq1: str,
        seq2: str,
        policy: Optional[ScoringPolicy] = None,
        alphabet: Optional[str] = None
    ) -> "AlignmentMatrix":
        return cls(SequencePair(seq1, seq2, alphabet), policy)

    # ---------- read access ----------

    @property
    def seq1(self) -> str:
        return self.pair.seq1

    @property
    def seq2(self) -> str:
        return self.pair.seq2

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def scores(self) -> np.ndarray:
        """Read-only view of the score array"""
        view = self._scores.view()
        view.flags.writeable = False
        return view

    @property
    def origins(self) -> np.ndarray:
        """Read-only view of the origin codes (values of Origin)"""
        view = self._origins.view()
        view.flags.writeable = False
        return view

    @property
    def is_filled(self) -> bool:
        return self.state is MatrixState.FILLED

    @property
    def final_score(self) -> int:
        """Optimal global alignment score, stored in the terminal cell"""
        self._require(MatrixState.FILLED, "read the final score")
        return int(self._scores[self.rows - 1, self.cols - 1])

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        i, j = key
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(f"cell ({i}, {j}) outside {self.rows} x {self.cols} matrix")
        return Cell(
            score=int(self._scores[i, j]),
            origin=Origin(int(self._origins[i, j])),
            row=i,
            col=j,
        )

    def __repr__(self) -> str:
        return (
            f"AlignmentMatrix(rows={self.rows}, cols={self.cols}, "
            f"state={self.state.value})"
        )

    # ---------- lifecycle ----------

    def _require(self, state: MatrixState, action: str) -> None:
        if self.state is not state:
            raise CorruptStateError(
                f"cannot {action}: matrix is {self.state.value}, expected {state.value}"
            )

    def initialize_borders(self) -> None:
        """Set row 0 to j * gap and column 0 to i * gap"""
        self._require(MatrixState.UNINITIALIZED, "initialize borders")
        if not self.seq1 or not self.seq2:
            raise InvalidInputError(
                f"Empty sequence: len(seq1)={len(self.seq1)}, len(seq2)={len(self.seq2)}"
            )
        # |score| <= largest weight * path length
        weight = max(abs(self.policy.match), abs(self.policy.mismatch), abs(self.policy.gap))
        if weight * (self.rows + self.cols) > np.iinfo(np.int64).max:
            raise InvalidInputError(
                f"Scoring weights up to {weight} overflow 64-bit scores "
                f"for a {self.rows} x {self.cols} matrix"
            )
        gap = self.policy.gap
        self._scores[0, :] = np.arange(self.cols, dtype=np.int64) * gap
        self._scores[:, 0] = np.arange(self.rows, dtype=np.int64) * gap
        # border origins must step toward (0, 0) under the traceback rules
        self._origins[0, 1:] = Origin.UP
        self._origins[1:, 0] = Origin.LEFT
        self._origins[0, 0] = Origin.NONE
        self.state = MatrixState.BORDERS_SET

    def fill_cell(self, i: int, j: int) -> Cell:
        """Compute one interior cell from its up, left and diagonal neighbours"""
        self._require(MatrixState.BORDERS_SET, "fill a cell")
        if not (1 <= i < self.rows and 1 <= j < self.cols):
            raise IndexError(f"({i}, {j}) is not an interior cell")
        self._fill_cell(i, j)
        return self[i, j]

    def _fill_cell(self, i: int, j: int) -> None:
        s = self._scores
        gap = self.policy.gap
        up = int(s[i, j - 1]) + gap
        left = int(s[i - 1, j]) + gap
        diag = int(s[i - 1, j - 1]) + self.policy.substitution(
            self.seq1[j - 1], self.seq2[i - 1]
        )
        s[i, j], self._origins[i, j] = choose_origin(up, left, diag)

    def fill(self, strategy: FillStrategy = "row", verbose: bool = False) -> None:
        """
        Fill every interior cell, then freeze the arrays.

        Parameters:
        -----------
        strategy : str
            "row" visits cells in row-major order. "antidiagonal" computes
            all cells with i + j == k at once for increasing k; those cells
            never depend on each other. Both give identical matrices.
        verbose : bool
            If True, print fill progress
        """
        self._require(MatrixState.BORDERS_SET, "fill")
        if strategy == "row":
            self._fill_rows(verbose)
        elif strategy == "antidiagonal":
            self._fill_antidiagonals(verbose)
        else:
            raise ValueError(f"Unknown fill strategy: {strategy}")

        self._scores.flags.writeable = False
        self._origins.flags.writeable = False
        self.state = MatrixState.FILLED

    def _fill_rows(self, verbose: bool) -> None:
        if verbose:
            print(f"\nFilling alignment matrix of {self.rows} x {self.cols}")
            print(f"Total cells to compute: {(self.rows - 1) * (self.cols - 1)}")
            print("Computing ", end="")

        step = max(1, (self.rows - 1) // 10)
        for i in range(1, self.rows):
            for j in range(1, self.cols):
                self._fill_cell(i, j)
            if verbose and i % step == 0:
                print("█", end="", flush=True)

        if verbose:
            print(" 100.0%")

    def _fill_antidiagonals(self, verbose: bool) -> None:
        s, o = self._scores, self._origins
        gap = self.policy.gap
        a1 = np.array(list(self.seq1))
        a2 = np.array(list(self.seq2))
        # subst[i-1, j-1] is the diagonal term for cell (i, j)
        subst = np.where(
            a2[:, None] == a1[None, :], self.policy.match, self.policy.mismatch
        ).astype(np.int64)

        last_k = self.rows + self.cols - 2
        if verbose:
            print(f"\nFilling alignment matrix of {self.rows} x {self.cols} "
                  f"by {max(0, last_k - 1)} anti-diagonals")

        for k in range(2, last_k + 1):
            i = np.arange(max(1, k - self.cols + 1), min(self.rows - 1, k - 1) + 1)
            j = k - i
            up = s[i, j - 1] + gap
            left = s[i - 1, j] + gap
            diag = s[i - 1, j - 1] + subst[i - 1, j - 1]
            best = np.maximum(np.maximum(up, left), diag)
            s[i, j] = best
            o[i, j] = np.where(
                diag == best,
                Origin.DIAGONAL,
                np.where(left == best, Origin.LEFT, Origin.UP),
            )

        if verbose:
            print("✓ Matrix computation complete!")
