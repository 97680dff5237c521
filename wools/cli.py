"""
wools/cli.py

Command-line tools for Wordle.

Run:
  python -m wools.cli filter apple coupe prime
  python -m wools.cli match apple ybbbg
  python -m wools.cli solve coupe:bbbyg
  python -m wools.cli hints apple coupe
  python -m wools.cli dict
  python -m wools.cli open

Words are printed one per line on stdout; logs go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
import webbrowser
from typing import Callable, List, Optional, Sequence, TypeVar

from wools.dictionary import DICTIONARY_FILE_PATH, load_words
from wools.errors import WoolsError
from wools.feedback import derive_pattern
from wools.hints import format_hints, parse_guess_and_hints, parse_hints
from wools.matcher import filter_by_guesses, filter_by_hints, match_by_pattern
from wools.word import Word

log = logging.getLogger(__name__)

DEFAULT_WORDLE_URL = "https://www.nytimes.com/games/wordle/index.html"

T = TypeVar("T")


def _arg(parse: Callable[[str], T]) -> Callable[[str], T]:
    """Wrap a parser so argparse reports its message on failure."""
    def wrapper(s: str) -> T:
        try:
            return parse(s)
        except WoolsError as e:
            raise argparse.ArgumentTypeError(f"{s!r}: {e}") from e
    wrapper.__name__ = parse.__name__
    return wrapper


def _print_words(words: Sequence[Word]) -> None:
    for w in words:
        print(w)


def _load(args: argparse.Namespace) -> List[Word]:
    return load_words(args.dictionary, args.column)


# ---------------------------
# Commands
# ---------------------------

def cmd_filter(args: argparse.Namespace) -> None:
    _print_words(filter_by_guesses(_load(args), args.solution, args.guesses, workers=args.workers))


def cmd_match(args: argparse.Namespace) -> None:
    _print_words(match_by_pattern(_load(args), args.solution, args.hints))


def cmd_solve(args: argparse.Namespace) -> None:
    _print_words(filter_by_hints(_load(args), args.guesses_and_hints, workers=args.workers))


def cmd_hints(args: argparse.Namespace) -> None:
    print(format_hints(derive_pattern(args.solution, args.guess).hints))


def cmd_dict(args: argparse.Namespace) -> None:
    _print_words(_load(args))


def cmd_open(args: argparse.Namespace) -> None:
    log.info("Opening %s", args.url)
    if not webbrowser.open(args.url):
        raise WoolsError(f"no browser available to open {args.url}")


def _positive_int(s: str) -> int:
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wools",
        description="Tools for the Wordle game",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("-d", "--dictionary", default=DICTIONARY_FILE_PATH,
                    help="Path to the dictionary (word per line, or CSV)")
    ap.add_argument("--column", default=None,
                    help="CSV column holding the words (implies CSV)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Be verbose")
    sub = ap.add_subparsers(dest="command", required=True)

    word = _arg(Word)

    p = sub.add_parser("filter", help="Filter the words using the solution and guesses")
    p.add_argument("solution", type=word, help="Five-letter solution")
    p.add_argument("guesses", type=word, nargs="*", help="Five-letter guesses")
    p.add_argument("--workers", type=_positive_int, default=1, help="Worker processes")
    p.set_defaults(func=cmd_filter)

    p = sub.add_parser("match", help="Find the words producing the hints against the solution")
    p.add_argument("solution", type=word, help="Five-letter solution")
    p.add_argument("hints", type=_arg(parse_hints), help="Hints such as gybbg or 21001")
    p.set_defaults(func=cmd_match)

    p = sub.add_parser("solve", help="Filter the words using guesses and their hints")
    p.add_argument("guesses_and_hints", type=_arg(parse_guess_and_hints), nargs="*",
                   metavar="GUESS:HINTS", help="Guess and hints, e.g. coupe:bbbyg")
    p.add_argument("--workers", type=_positive_int, default=1, help="Worker processes")
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser("hints", help="Print the hints a guess gets against the solution")
    p.add_argument("solution", type=word, help="Five-letter solution")
    p.add_argument("guess", type=word, help="Five-letter guess")
    p.set_defaults(func=cmd_hints)

    p = sub.add_parser("dict", help="Display the valid, normalized words of the dictionary")
    p.set_defaults(func=cmd_dict)

    p = sub.add_parser("open", help="Open Wordle in the default browser")
    p.add_argument("-u", "--url", default=DEFAULT_WORDLE_URL, help="Wordle URL")
    p.set_defaults(func=cmd_open)

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        args.func(args)
    except WoolsError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
