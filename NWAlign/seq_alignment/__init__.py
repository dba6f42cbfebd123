"""
Sequence Alignment Module
Provides global pairwise alignment with a Needleman-Wunsch matrix and traceback
"""

from .errors import CorruptStateError, InvalidInputError
from .scoring import (
    DEFAULT_SCORING,
    DNA_ALPHABET,
    GAP,
    ScoringPolicy,
    SequencePair,
    random_sequence
)
from .matrix import AlignmentMatrix, Cell, MatrixState, Origin
from .traceback import TraceBuilder
from .pairwise import (
    AlignmentResult,
    GlobalAligner,
    align,
    align_async,
    align_many
)
from .matrix_plot import alignment_path, format_matrix, plot_matrix

__all__ = [
    "AlignmentMatrix",
    "AlignmentResult",
    "Cell",
    "CorruptStateError",
    "DEFAULT_SCORING",
    "DNA_ALPHABET",
    "GAP",
    "GlobalAligner",
    "InvalidInputError",
    "MatrixState",
    "Origin",
    "ScoringPolicy",
    "SequencePair",
    "TraceBuilder",
    "align",
    "align_async",
    "align_many",
    "alignment_path",
    "format_matrix",
    "plot_matrix",
    "random_sequence"
]
