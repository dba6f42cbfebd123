"""
Pairwise Global Sequence Alignment Module
Needleman-Wunsch with linear gap scoring and a single canonical traceback
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .matrix import AlignmentMatrix, FillStrategy
from .scoring import DEFAULT_SCORING, GAP, ScoringPolicy, SequencePair
from .traceback import TraceBuilder


MATCH_MARK, MISMATCH_MARK, GAP_MARK = '|', '.', ' '


@dataclass(frozen=True)
class AlignmentResult:
    """Store alignment results and metadata"""
    seq1_aligned: str
    seq2_aligned: str
    score: int
    match_string: str
    identity: float
    similarity: float
    gaps: int
    seq1_original: str
    seq2_original: str
    matrix: Optional[AlignmentMatrix] = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        """String representation of alignment"""
        return (
            f"Alignment Score: {self.score}\n"
            f"Identity: {self.identity:.2%}\n"
            f"Similarity: {self.similarity:.2%}\n"
            f"Gaps: {self.gaps}\n"
            f"Length: {len(self.seq1_aligned)}\n"
        )

    def as_tuple(self) -> Tuple[int, str, str]:
        """(score, seq1_aligned, seq2_aligned)"""
        return self.score, self.seq1_aligned, self.seq2_aligned

    def blocks(self, width: int = 80) -> Iterator[Tuple[str, str, str]]:
        """seq1, match marks and seq2 cut into columns of at most width"""
        for start in range(0, len(self.seq1_aligned), width):
            window = slice(start, start + width)
            yield (self.seq1_aligned[window],
                   self.match_string[window],
                   self.seq2_aligned[window])

    def plot(self, width: int = 80) -> None:
        """Display alignment with match indicators"""
        print(f"\nSequence 1: {self.seq1_original}")
        print(f"Sequence 2: {self.seq2_original}\n")
        print(self)
        for top, marks, bottom in self.blocks(width):
            print(f"seq1: {top}\n      {marks}\nseq2: {bottom}\n")

    def view(self, width: int = 80) -> None:
        """Alias for plot method"""
        self.plot(width)

    def nmatch(self) -> int:
        """Number of matching positions"""
        return self.match_string.count(MATCH_MARK)


def match_string(aligned1: str, aligned2: str) -> str:
    """'|' for a match, '.' for a mismatch, ' ' where either side is a gap"""
    return ''.join(
        GAP_MARK if GAP in (a, b) else MATCH_MARK if a == b else MISMATCH_MARK
        for a, b in zip(aligned1, aligned2)
    )


def alignment_statistics(aligned1: str, aligned2: str) -> Tuple[float, float, int]:
    """Identity, similarity (fraction of ungapped columns) and gap count"""
    marks = match_string(aligned1, aligned2)
    gaps = aligned1.count(GAP) + aligned2.count(GAP)
    if not marks:
        return 0.0, 0.0, gaps
    matches = marks.count(MATCH_MARK)
    ungapped = len(marks) - marks.count(GAP_MARK)
    return matches / len(marks), ungapped / len(marks), gaps


class GlobalAligner:
    """Global (Needleman-Wunsch) pairwise aligner with linear gaps"""

    def __init__(
        self,
        policy: Optional[ScoringPolicy] = None,
        alphabet: Optional[str] = None,
        strategy: FillStrategy = "row"
    ):
        """
        Parameters:
        -----------
        policy : ScoringPolicy
            Match/mismatch/gap weights (default 1/-1/-2)
        alphabet : str, optional
            If given, every symbol of both sequences must be in it
        strategy : str
            Matrix fill order, "row" or "antidiagonal"
        """
        self.policy = policy if policy is not None else DEFAULT_SCORING
        self.alphabet = alphabet
        self.strategy = strategy
        self.tracer = TraceBuilder()

    def build_matrix(self, seq1: str, seq2: str, verbose: bool = False) -> AlignmentMatrix:
        """Validate the pair, set the borders and fill the matrix"""
        pair = SequencePair(seq1, seq2, self.alphabet)
        matrix = AlignmentMatrix(pair, self.policy)
        matrix.initialize_borders()
        if verbose:
            print(f"✓ Matrix initialized: {matrix.rows} x {matrix.cols}")
        matrix.fill(self.strategy, verbose=verbose)
        return matrix

    def align(
        self,
        seq1: str,
        seq2: str,
        score_only: bool = False,
        verbose: bool = False
    ) -> Union[AlignmentResult, int]:
        """
        Perform global pairwise alignment

        Parameters:
        -----------
        seq1 : str
            First sequence, laid out along the matrix columns
        seq2 : str
            Second sequence, laid out along the matrix rows
        score_only : bool
            If True, return only the alignment score
        verbose : bool
            If True, display progress during alignment

        Returns:
        --------
        AlignmentResult or int
            Alignment result object or score if score_only=True
        """
        if verbose:
            print("\n" + "="*70)
            print("GLOBAL PAIRWISE ALIGNMENT")
            print("="*70)
            print(f"Sequence 1: {seq1}")
            print(f"Sequence 2: {seq2}")
            print(f"Match: {self.policy.match}, Mismatch: {self.policy.mismatch}, "
                  f"Gap: {self.policy.gap}")
            print(f"Fill strategy: {self.strategy}")
            print("="*70)

        matrix = self.build_matrix(seq1, seq2, verbose)
        score = matrix.final_score

        if score_only:
            if verbose:
                print(f"\nFinal score: {score}")
                print("="*70 + "\n")
            return score

        pairs = self.tracer.walk(matrix)
        aligned1, aligned2 = self.tracer.to_strings(pairs)
        if verbose:
            print(f"✓ Traceback complete! Alignment length: {len(aligned1)}")

        identity, similarity, gaps = alignment_statistics(aligned1, aligned2)
        result = AlignmentResult(
            seq1_aligned=aligned1,
            seq2_aligned=aligned2,
            score=score,
            match_string=match_string(aligned1, aligned2),
            identity=identity,
            similarity=similarity,
            gaps=gaps,
            seq1_original=seq1,
            seq2_original=seq2,
            matrix=matrix,
        )

        if verbose:
            print(f"\nALIGNMENT RESULTS")
            print("="*70)
            print(f"Score: {score}")
            print(f"Identity: {identity:.2%} ({result.nmatch()} matches)")
            print(f"Gaps: {gaps}")
            print(f"Length: {len(aligned1)}")
            print("="*70 + "\n")

        return result


def align(
    seq1: str,
    seq2: str,
    policy: Optional[ScoringPolicy] = None,
    alphabet: Optional[str] = None,
    strategy: FillStrategy = "row",
    verbose: bool = False
) -> AlignmentResult:
    """
    Globally align two sequences

    Examples:
    ---------
    >>> result = align("AC", "AC")
    >>> result.score, result.seq1_aligned, result.seq2_aligned
    (2, 'AC', 'AC')
    >>> align("GATTACA", "GCATGCT", ScoringPolicy(2, -1, -2)).view()  # doctest: +SKIP
    """
    aligner = GlobalAligner(policy=policy, alphabet=alphabet, strategy=strategy)
    return aligner.align(seq1, seq2, verbose=verbose)


def align_many(
    pairs: Iterable[Tuple[str, str]],
    policy: Optional[ScoringPolicy] = None,
    alphabet: Optional[str] = None,
    strategy: FillStrategy = "row",
    n_jobs: Optional[int] = None
) -> List[AlignmentResult]:
    """
    Align independent sequence pairs on a thread pool.

    Each pair gets its own matrix. Results come back in input order; the
    first failing pair's exception is raised.
    """
    aligner = GlobalAligner(policy=policy, alphabet=alphabet, strategy=strategy)
    pairs = list(pairs)
    if not pairs:
        return []
    with ThreadPoolExecutor(max_workers=n_jobs) as ex:
        return list(ex.map(lambda p: aligner.align(p[0], p[1]), pairs))


async def align_async(
    seq1: str,
    seq2: str,
    policy: Optional[ScoringPolicy] = None,
    alphabet: Optional[str] = None,
    strategy: FillStrategy = "row"
) -> AlignmentResult:
    """
    Async version: runs align() in the default thread pool.
    (Does not speed up one alignment; only keeps the event loop free.)
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None,
        lambda: align(seq1, seq2, policy=policy, alphabet=alphabet, strategy=strategy)
    )
