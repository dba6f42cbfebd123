"""
Command line driver: align two sequences and print the matrix and alignment
"""
import argparse
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from .seq_alignment import (
    DEFAULT_SCORING,
    DNA_ALPHABET,
    GlobalAligner,
    InvalidInputError,
    ScoringPolicy,
    alignment_path,
    format_matrix,
    plot_matrix,
    random_sequence
)

# Sequences aligned by the reference program when none are given
DEFAULT_SEQ1 = "ATCGTCGAATCGTCGAATCGTCGAA"
DEFAULT_SEQ2 = "TCGGGTACATTCGGGTACATT"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nwalign",
        description="Global (Needleman-Wunsch) pairwise sequence alignment."
    )
    parser.add_argument("seq1", nargs="?", help="First sequence (matrix columns)")
    parser.add_argument("seq2", nargs="?", help="Second sequence (matrix rows)")
    parser.add_argument("--random", nargs=2, type=int, metavar=("LEN1", "LEN2"),
                        help="Align two random sequences of the given lengths")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--match", type=int, default=DEFAULT_SCORING.match,
                        help="Match score (default %(default)s)")
    parser.add_argument("--mismatch", type=int, default=DEFAULT_SCORING.mismatch,
                        help="Mismatch score (default %(default)s)")
    parser.add_argument("--gap", type=int, default=DEFAULT_SCORING.gap,
                        help="Score per gap symbol (default %(default)s)")
    parser.add_argument("--alphabet", default=None,
                        help="Restrict sequences to these symbols, e.g. ACGT")
    parser.add_argument("--strategy", choices=["row", "antidiagonal"], default="row",
                        help="Matrix fill order")
    parser.add_argument("--show-matrix", action="store_true",
                        help="Print the scoring matrix")
    parser.add_argument("--plot", metavar="PATH", default=None,
                        help="Save a heatmap of the matrix with the traceback path")
    parser.add_argument("--width", type=int, default=80, help="Alignment line width")
    parser.add_argument("--verbose", action="store_true", help="Show progress")
    return parser


def select_sequences(parser: argparse.ArgumentParser, args: argparse.Namespace):
    """Explicit sequences, random ones, or the reference pair"""
    if args.random:
        if args.seq1 is not None or args.seq2 is not None:
            parser.error("--random cannot be combined with explicit sequences")
        alphabet = args.alphabet or DNA_ALPHABET
        seq1 = random_sequence(args.random[0], alphabet, seed=args.seed)
        seq2 = random_sequence(args.random[1], alphabet,
                               seed=None if args.seed is None else args.seed + 1)
        return seq1, seq2
    if args.seq1 is not None and args.seq2 is not None:
        return args.seq1, args.seq2
    if args.seq1 is not None:
        parser.error("give both sequences or neither")
    return DEFAULT_SEQ1, DEFAULT_SEQ2


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        seq1, seq2 = select_sequences(parser, args)
        policy = ScoringPolicy(args.match, args.mismatch, args.gap)
        aligner = GlobalAligner(policy, alphabet=args.alphabet, strategy=args.strategy)
        result = aligner.align(seq1, seq2, verbose=args.verbose)
    except InvalidInputError as e:
        print(f"nwalign: error: {e}", file=sys.stderr)
        return 2

    if args.show_matrix:
        print("Scoring Matrix")
        print(format_matrix(result.matrix))
    result.view(args.width)

    if args.plot:
        fig = plot_matrix(
            result.matrix,
            path=alignment_path(result.seq1_aligned, result.seq2_aligned),
            title=f"score = {result.score}",
        )
        fig.savefig(args.plot)
        plt.close(fig)
        print(f"Saved matrix plot to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
