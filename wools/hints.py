"""
hints.py

Parsing of feedback typed by a human, and rendering of derived hints.

Accepted feedback forms (case-insensitive, one symbol per position):
  - letters: g/y/b  (green/yellow/black)
  - digits:  2/1/0
  - list:    [0, 1, 2, 2, 0]

A guess and its feedback may be given as one token, joined by a colon:
``coupe:bbbyg``.
"""

from __future__ import annotations

import re
from typing import Iterable, Tuple

from wools.errors import InvalidHintsError, InvalidTokenError
from wools.feedback import Hint, Hints
from wools.word import WORD_SIZE, Word

SEPARATOR = ":"

_SYMBOLS = {
    "g": Hint.CORRECT, "2": Hint.CORRECT,
    "y": Hint.PRESENT, "1": Hint.PRESENT,
    "b": Hint.ABSENT, "0": Hint.ABSENT,
}
_LETTERS = {Hint.CORRECT: "g", Hint.PRESENT: "y", Hint.ABSENT: "b"}
_LIST_ITEM = re.compile(r"[012]")


def parse_hints(s: str) -> Hints:
    """Parse a WORD_SIZE-symbol feedback string into Hints.
    Raises InvalidHintsError on invalid input.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        items = [x.strip() for x in s[1:-1].split(",")]
        if len(items) != WORD_SIZE:
            raise InvalidHintsError(f"list form must contain exactly {WORD_SIZE} 0/1/2 values")
        for x in items:
            if not _LIST_ITEM.fullmatch(x):
                raise InvalidHintsError(f"unknown hint value {x!r} in list form: use only 0/1/2")
        return tuple(Hint(int(x)) for x in items)

    if len(s) != WORD_SIZE:
        raise InvalidHintsError(f"hints must be length {WORD_SIZE} (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return tuple(_SYMBOLS[ch] for ch in s)
    except KeyError as e:
        raise InvalidHintsError(f"unknown hint symbol {e.args[0]!r}: use only g/y/b or 2/1/0") from None


def format_hints(hints: Iterable[Hint]) -> str:
    """Render hints as g/y/b letters."""
    return "".join(_LETTERS[Hint(h)] for h in hints)


def parse_guess_and_hints(token: str) -> Tuple[Word, Hints]:
    """Split a ``guess:hints`` token and parse both halves."""
    parts = token.split(SEPARATOR)
    if len(parts) != 2:
        raise InvalidTokenError(
            f"expected GUESS{SEPARATOR}HINTS with a single '{SEPARATOR}', got {token!r}"
        )
    guess, hints = parts
    return Word(guess.strip()), parse_hints(hints)
