"""
solver/reverse_cli.py

Reverse a shared Wordle grid into the guess chains that could have produced it.
- You give the answer of the day and each row's colors (optionally with the
  letters you know, using '*' for unknown tiles).
- Colors accepted as: 'gybby', '21001', a Python-like list '[0, 0, 2, 2, 2]',
  or a raw pattern code '#81'.
- Without --target, prints the answers consistent with the fully spelled rows.

Run:
  python -m solver.reverse_cli --guesses guesses.txt --target guess \
      --row bbbbb --row ggggg:slugs --mode hard
"""
from __future__ import annotations

import argparse
import csv
import logging
from typing import List, Optional

from wordchain.buckets import pattern_histogram
from wordchain.constraints import NONE, PROGRESS_MODES
from wordchain.feedback import int_to_pattern, parse_pattern_code, pattern_to_text
from wordchain.lexicon import load_lexicon
from wordchain.rows import RowSpec
from wordchain.search import Chain, WordleReverser

logger = logging.getLogger(__name__)

DEFAULT_MAX = 10000


def parse_row(s: str) -> RowSpec:
    """Parse 'PATTERN' or 'PATTERN:GUESS' into a RowSpec.

    Raises ValueError on invalid input.
    """
    pattern, sep, guess = s.partition(":")
    code = parse_pattern_code(pattern)
    return RowSpec(code, guess if sep and guess else None)


def _row_arg(s: str) -> RowSpec:
    try:
        return parse_row(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _write_csv(chains: List[Chain], path: str) -> None:
    width = max((len(c.guesses) for c in chains), default=0)
    fieldnames = ["answer"] + [f"guess{i + 1}" for i in range(width)]
    with open(path, mode="w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(fieldnames)
        for c in chains:
            writer.writerow([c.answer, *c.guesses])


def _print_stats(reverser: WordleReverser, rows: List[RowSpec], target: str) -> None:
    hist = pattern_histogram(reverser.lexicon.common.words(), target)
    print(f"Bucket sizes against '{target}':")
    for i, r in enumerate(rows, 1):
        colors = pattern_to_text(int_to_pattern(r.pattern_code))
        print(f"  row {i}: {colors} (#{r.pattern_code:>3})  {int(hist[r.pattern_code]):>6} words")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Find guess chains that reproduce a Wordle grid")
    ap.add_argument("--guesses", required=True, help="Common guess list (.csv with a 'word' column, or one word per line)")
    ap.add_argument("--answers", default=None, help="Answer list (defaults to the guess list)")
    ap.add_argument("--weird", default=None, help="Fallback list for rows with no common candidate")
    ap.add_argument("--target", default=None, help="Answer of the day")
    ap.add_argument("--row", dest="rows", action="append", type=_row_arg, default=[],
                    help="Row as PATTERN[:GUESS], repeat in row order (e.g. bbybg or ggggg:slugs or ybb**:cr***)")
    ap.add_argument("--mode", choices=PROGRESS_MODES, default=NONE, help="Carry-forward constraints between rows")
    ap.add_argument("--allow-repeat", action="store_true", help="Allow the same word in several rows")
    ap.add_argument("--no-fallback", action="store_true", help="Never use the fallback list")
    ap.add_argument("--max", type=int, default=DEFAULT_MAX, help="Stop after this many chains")
    ap.add_argument("--out", default=None, help="Write chains to this CSV")
    ap.add_argument("--stats", action="store_true", help="Print bucket sizes for each row first")
    ap.add_argument("-l", "--log", default="WARNING",
                    help="Log level, one of [DEBUG, INFO, WARNING, ERROR, CRITICAL]")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log.upper(), logging.WARNING),
                        format='[%(asctime)s | %(name)s | %(levelname)s]: %(message)s')

    lexicon = load_lexicon(args.guesses, args.answers, args.weird)
    reverser = WordleReverser(lexicon=lexicon)
    logger.info("loaded %d guesses, %d answers, %d fallback words",
                len(lexicon.common), len(lexicon.answers), len(lexicon.fallback))

    if args.target is None:
        answers = reverser.filter_answers(args.rows)
        print(f"Possible answers: {len(answers)}")
        if answers:
            print(", ".join(answers))
        return 0

    try:
        search = reverser.enumerate_chains(
            args.rows,
            args.target,
            progress_mode=args.mode,
            no_repeat=not args.allow_repeat,
            use_fallback=not args.no_fallback,
            max_solutions=args.max,
        )
    except (TypeError, ValueError) as e:
        print("Invalid request:", e)
        return 2

    if args.stats:
        _print_stats(reverser, args.rows, search.answer)

    chains: List[Chain] = []
    for chain in search:
        chains.append(chain)
        print(" -> ".join(chain.guesses + (chain.answer,)))
    print(f"Found {len(chains)} chain(s) ({search.steps} candidate checks)")

    if args.out:
        _write_csv(chains, args.out)
        print(f"Wrote chains to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
