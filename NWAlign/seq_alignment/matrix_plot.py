"""
Scoring matrix rendering (text table and heatmap)
"""
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .matrix import AlignmentMatrix
from .scoring import GAP


def format_matrix(matrix: AlignmentMatrix, cell_width: int = 4) -> str:
    """
    Scoring matrix as a text table, seq1 across the top and seq2 down the side

    Example:
        >>> m = AlignmentMatrix.from_sequences("AC", "AC")
        >>> m.initialize_borders(); m.fill()
        >>> print(format_matrix(m))
                   A   C
               0  -2  -4
           A  -2   1  -1
           C  -4  -1   2
    """
    fmt = f"{{:>{cell_width}}}"
    header = fmt.format("") + fmt.format("") + "".join(fmt.format(c) for c in matrix.seq1)
    lines = [header]
    side = " " + matrix.seq2
    for i, row in enumerate(matrix.scores):
        label = fmt.format(side[i] if i > 0 else "")
        lines.append(label + "".join(fmt.format(int(v)) for v in row))
    return "\n".join(lines)


def alignment_path(aligned1: str, aligned2: str) -> List[Tuple[int, int]]:
    """Matrix cells (row, col) visited by an alignment, from (0, 0) onward"""
    row, col = 0, 0
    path = [(row, col)]
    for a, b in zip(aligned1, aligned2):
        if a != GAP:
            col += 1
        if b != GAP:
            row += 1
        path.append((row, col))
    return path


def plot_matrix(
    matrix: AlignmentMatrix,
    path: Optional[List[Tuple[int, int]]] = None,
    figsize: Tuple[int, int] = (8, 7),
    annotate: Optional[bool] = None,
    cmap: str = "viridis",
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Heatmap of the scoring matrix with an optional traceback path on top.
    - Columns are labelled with seq1, rows with seq2 (first row/col blank).
    - Scores are written into cells for small matrices unless annotate=False.
    """
    scores = np.asarray(matrix.scores)
    fig, ax = plt.subplots(figsize=figsize)
    im = ax.imshow(scores, cmap=cmap, aspect="auto")
    fig.colorbar(im, ax=ax, label="score")

    ax.set_xticks(range(matrix.cols))
    ax.set_xticklabels([""] + list(matrix.seq1))
    ax.set_yticks(range(matrix.rows))
    ax.set_yticklabels([""] + list(matrix.seq2))
    ax.xaxis.tick_top()

    if annotate is None:
        annotate = scores.size <= 400
    if annotate:
        mid = (scores.max() + scores.min()) / 2
        for (i, j), v in np.ndenumerate(scores):
            ax.text(j, i, str(int(v)), ha="center", va="center", fontsize=8,
                    color="black" if v > mid else "white")

    if path:
        rows, cols = zip(*path)
        ax.plot(cols, rows, color="red", linewidth=2, marker="o", markersize=3)

    if title:
        ax.set_title(title, pad=20)
    fig.tight_layout()
    return fig
