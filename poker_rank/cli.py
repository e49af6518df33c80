"""
Command line: score hands given as arguments or read from a file.

Usage:
  poker-rank As Ks Qs Js Ts                # -> 1
  poker-rank -s 7c 5d 4h 3s 2c             # -> 7462 7c 5d 4h 3s 2c
  poker-rank -f hands.txt --show-class     # one hand per line
  poker-rank --tables data -f hands.txt    # use CSV tables from data/
"""

import sys
import argparse

from tqdm import tqdm

from poker_rank.config import (
    EXIT_OK,
    EXIT_BAD_HAND,
    EXIT_NO_INPUT,
    EXIT_FILE_OPEN,
    EXIT_FILE_READ,
    EXIT_TABLES,
    EXIT_INTERNAL,
)
from poker_rank.errors import InvalidCardToken, UnsupportedHandSize, LookupMiss, TableLoadError
from poker_rank.eval.scorer import HandScorer, class_name
from poker_rank.tables.lookup import load_tables, get_default_tables


def build_parser():
    ap = argparse.ArgumentParser(
        prog="poker-rank",
        description="Rank 5, 6 or 7 card poker hands: 1 = royal flush, 7462 = 7-5-4-3-2 unsuited.",
    )
    ap.add_argument("cards", nargs="*", help="Card tokens, e.g. As Kd Tc 9h 2s")
    ap.add_argument("--file", "-f", default=None, help="Score every hand in file (whitespace-separated tokens, one hand per line)")
    ap.add_argument("--show-hand", "-s", action="store_true", help="Print the hand after its rank")
    ap.add_argument("--show-class", "-c", action="store_true", help="Print the hand class (Flush, Pair, ...)")
    ap.add_argument("--tables", "-t", default=None, metavar="DIR", help="Directory holding flush_lookup.csv and unsuited_lookup.csv")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while scoring a file")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not args.cards and not args.file:
        print("Error: no cards and no --file given", file=sys.stderr)
        return EXIT_NO_INPUT

    try:
        tables = load_tables(args.tables) if args.tables else get_default_tables()
    except TableLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TABLES
    scorer = HandScorer(tables)

    try:
        if args.file:
            return score_file(scorer, args)
        return score_and_print(scorer, args.cards, args)
    except LookupMiss as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL


def score_file(scorer, args):
    try:
        f = open(args.file, encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_OPEN
    with f:
        try:
            lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return EXIT_FILE_READ

    status = EXIT_OK
    for lineno, line in enumerate(tqdm(lines, desc="Scoring", unit="hand", disable=not args.progress), 1):
        tokens = line.split()
        if not tokens:
            continue
        if score_and_print(scorer, tokens, args, where=f"{args.file}:{lineno}") != EXIT_OK:
            status = EXIT_BAD_HAND
    return status


def score_and_print(scorer, tokens, args, where=None):
    """Print `rank [hand] [[class]]`; bad hands are reported on stderr."""
    try:
        rank = scorer.score_tokens(tokens)
    except (InvalidCardToken, UnsupportedHandSize) as e:
        prefix = f"{where}: " if where else ""
        print(f"Error: {prefix}{e}", file=sys.stderr)
        return EXIT_BAD_HAND

    out = str(rank)
    if args.show_hand:
        out += " " + " ".join(tokens)
    if args.show_class:
        out += f" [{class_name(rank)}]"
    print(out)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
