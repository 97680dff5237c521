"""
feedback.py

Wordle feedback: per-position hints and the pattern a guess produces.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

from wools.errors import InvalidHintsError
from wools.word import WORD_SIZE, Word


class Hint(IntEnum):
    """
    Feedback for one position of a guess.

    The integer values match the usual 0/1/2 feedback lists:
    - 0 = absent  (letter not in the solution, or every occurrence already used)
    - 1 = present (letter in the solution at another position)
    - 2 = correct (letter matches the solution at this position)
    """

    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


Hints = Tuple[Hint, ...]


@dataclass(frozen=True)
class Pattern:
    """A guess together with the WORD_SIZE hints it received."""

    guess: Word
    hints: Hints

    def __post_init__(self) -> None:
        try:
            hints = tuple(Hint(h) for h in self.hints)
        except ValueError as e:
            raise InvalidHintsError("hints must be integers in {0,1,2}") from e
        if len(hints) != WORD_SIZE:
            raise InvalidHintsError(f"pattern must have exactly {WORD_SIZE} hints")
        # frozen: store the coerced values
        object.__setattr__(self, "guess", Word(self.guess))
        object.__setattr__(self, "hints", hints)

    @classmethod
    def from_solution_and_guess(cls, solution: Word, guess: Word) -> "Pattern":
        """
        Compute the feedback for `guess` against a known `solution`.

        Duplicate letters follow the official two-pass rule:

        1) GREENS PASS: every position where guess and solution agree is
           correct, and uses up one occurrence of that letter.
        2) YELLOWS PASS: remaining positions, left to right, are present while
           the letter still has unused occurrences in the solution, else absent.

        With one 'p' in the solution and two misplaced 'p' in the guess, the
        leftmost one is present and the other one absent:

        >>> Pattern.from_solution_and_guess(Word("prism"), Word("apple")).hints[1:3]
        (<Hint.PRESENT: 1>, <Hint.ABSENT: 0>)
        """
        hints = [Hint.ABSENT] * WORD_SIZE
        remaining = Counter(solution)

        # Pass 1: mark greens and decrement availability
        for i, (g, s) in enumerate(zip(guess, solution)):
            if g == s:
                hints[i] = Hint.CORRECT
                remaining[g] -= 1

        # Pass 2: mark yellows where counts allow (else absent)
        for i, g in enumerate(guess):
            if hints[i] is Hint.CORRECT:
                continue
            if remaining[g] > 0:
                hints[i] = Hint.PRESENT
                remaining[g] -= 1

        return cls(Word(guess), tuple(hints))

    @classmethod
    def from_guess_and_hints(cls, guess: Word, hints: Iterable[int]) -> "Pattern":
        """
        Build a pattern from feedback reported by an outside source.

        `hints` may hold Hint members or their integer values.
        """
        return cls(guess, tuple(hints))

    @property
    def solved(self) -> bool:
        return all(h is Hint.CORRECT for h in self.hints)


def derive_pattern(solution: Word, guess: Word) -> Pattern:
    """Shorthand for Pattern.from_solution_and_guess."""
    return Pattern.from_solution_and_guess(solution, guess)
