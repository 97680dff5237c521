"""
constraints.py

Turns a feedback pattern into count-bounded predicates over candidate words.

Every constraint reads "the number of positions in P holding letter c is at
least (or at most) k". Position rules (a green locks a slot, a yellow or gray
forbids it) are the single-position case; letter counts ("exactly two e's",
"one more o somewhere else") use every slot not already locked by a green.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Tuple

from wools.feedback import Hint, Pattern
from wools.word import WORD_SIZE

log = logging.getLogger(__name__)


class Bound(Enum):
    AT_LEAST = ">="
    AT_MOST = "<="


@dataclass(frozen=True)
class Constraint:
    char: str
    positions: FrozenSet[int]
    count: int
    bound: Bound

    @classmethod
    def lock(cls, position: int, char: str) -> "Constraint":
        return cls(char, frozenset((position,)), 1, Bound.AT_LEAST)

    @classmethod
    def forbid(cls, position: int, char: str) -> "Constraint":
        return cls(char, frozenset((position,)), 0, Bound.AT_MOST)

    @classmethod
    def at_least(cls, count: int, positions: Iterable[int], char: str) -> "Constraint":
        return cls(char, frozenset(positions), count, Bound.AT_LEAST)

    @classmethod
    def at_most(cls, count: int, positions: Iterable[int], char: str) -> "Constraint":
        return cls(char, frozenset(positions), count, Bound.AT_MOST)

    def occurrences(self, word: str) -> int:
        """Number of this constraint's positions where `word` holds its letter."""
        return sum(1 for i in self.positions if word[i] == self.char)

    def matches(self, word: str) -> bool:
        n = self.occurrences(word)
        if self.bound is Bound.AT_LEAST:
            return n >= self.count
        return n <= self.count

    def __str__(self) -> str:
        slots = ",".join(str(i) for i in sorted(self.positions))
        return f"#{self.char}@{{{slots}}} {self.bound.value} {self.count}"


def _free_positions(locked: Iterable[int]) -> List[int]:
    """All positions except `locked`."""
    locked = set(locked)
    return [i for i in range(WORD_SIZE) if i not in locked]


@dataclass(frozen=True)
class ConstraintSet:
    """Conjunction of the constraints implied by a single pattern."""

    constraints: Tuple[Constraint, ...]

    @classmethod
    def from_pattern(cls, pattern: Pattern) -> "ConstraintSet":
        """
        Derive the constraints a candidate must satisfy to be consistent with
        `pattern`.

        - Green  = the letter is locked at that slot
        - Yellow = the letter is forbidden at that slot, and each yellow asks for
                   one more occurrence among the slots not locked by a green
        - Gray   = the letter is forbidden at that slot, and the letter occurs
                   among the unlocked slots at most as often as it was yellow
        """
        constraints: List[Constraint] = []
        hints_by_char: Dict[str, List[Tuple[int, Hint]]] = defaultdict(list)

        for i, (ch, hint) in enumerate(zip(pattern.guess, pattern.hints)):
            hints_by_char[ch].append((i, hint))

        for ch, hints in hints_by_char.items():
            # Slot-level constraints
            for i, hint in hints:
                if hint is Hint.CORRECT:
                    constraints.append(Constraint.lock(i, ch))
                else:
                    constraints.append(Constraint.forbid(i, ch))

            # Letter-count constraints over the slots not locked by a green
            yellows = sum(1 for _, h in hints if h is Hint.PRESENT)
            grays = sum(1 for _, h in hints if h is Hint.ABSENT)
            if yellows == 0 and grays == 0:
                continue

            free = _free_positions(i for i, h in hints if h is Hint.CORRECT)
            if yellows > 0:
                constraints.append(Constraint.at_least(yellows, free, ch))
            if grays > 0:
                constraints.append(Constraint.at_most(yellows, free, ch))

        log.debug("%s -> %s", pattern.guess, ", ".join(str(c) for c in constraints))
        return cls(tuple(constraints))

    def matches(self, word: str) -> bool:
        """Return True iff `word` satisfies every constraint."""
        return all(c.matches(word) for c in self.constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def __len__(self) -> int:
        return len(self.constraints)
