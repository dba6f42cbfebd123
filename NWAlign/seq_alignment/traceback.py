"""
Traceback over a filled AlignmentMatrix
"""

from typing import List, Tuple

from .errors import CorruptStateError
from .matrix import AlignmentMatrix, Origin
from .scoring import GAP


Pair = Tuple[str, str]


class TraceBuilder:
    """Recover the canonical optimal path by following stored origins"""

    def walk(self, matrix: AlignmentMatrix) -> List[Pair]:
        """
        Walk from the terminal cell to (0, 0).

        Returns the aligned (seq1 symbol, seq2 symbol) pairs in traversal
        order, i.e. last column of the alignment first. Use to_strings()
        to turn them into the two aligned sequences.
        """
        if not matrix.is_filled:
            raise CorruptStateError(
                f"traceback needs a filled matrix, got {matrix.state.value}"
            )

        seq1, seq2 = matrix.seq1, matrix.seq2
        origins = matrix.origins
        row, col = matrix.rows - 1, matrix.cols - 1
        # longest legal path visits rows + cols - 1 cells
        max_cells = matrix.rows + matrix.cols - 1
        visited = 1
        pairs: List[Pair] = []

        while row > 0 or col > 0:
            visited += 1
            if visited > max_cells:
                raise CorruptStateError(
                    f"traceback exceeded {max_cells} cells at ({row}, {col})"
                )

            origin = origins[row, col]
            if origin == Origin.DIAGONAL:
                next_row, next_col = row - 1, col - 1
            elif origin == Origin.UP:
                next_row, next_col = row, col - 1
            elif origin == Origin.LEFT:
                next_row, next_col = row - 1, col
            else:
                raise CorruptStateError(
                    f"cell ({row}, {col}) has no origin (code {int(origin)})"
                )
            if next_row < 0 or next_col < 0:
                raise CorruptStateError(
                    f"origin {Origin(int(origin)).name} at ({row}, {col}) leaves the matrix"
                )

            if origin == Origin.DIAGONAL:
                pairs.append((seq1[col - 1], seq2[row - 1]))
            elif origin == Origin.UP:
                pairs.append((seq1[col - 1], GAP))
            else:
                pairs.append((GAP, seq2[row - 1]))
            row, col = next_row, next_col

        return pairs

    @staticmethod
    def to_strings(pairs: List[Pair]) -> Tuple[str, str]:
        """Reverse traversal-order pairs and split them into two aligned strings"""
        forward = pairs[::-1]
        return (
            ''.join(a for a, _ in forward),
            ''.join(b for _, b in forward),
        )
