"""
matcher.py

Filters candidate words against one or more constraint sets.

Candidates are kept in their original order. The vectorized path encodes the
word list as a (n, WORD_SIZE) uint8 array and evaluates each constraint as a
column count, returning a 0/1 int8 mask aligned with the input.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import List, Sequence, Tuple

import numpy as np

from wools.constraints import Bound, ConstraintSet
from wools.feedback import Hint, Pattern, derive_pattern
from wools.word import WORD_SIZE, Word

log = logging.getLogger(__name__)


def matches_all(word: str, constraint_sets: Sequence[ConstraintSet]) -> bool:
    """Return True iff `word` satisfies every set (short-circuits)."""
    return all(cs.matches(word) for cs in constraint_sets)


def _encode(words: Sequence[str]) -> np.ndarray:
    """Letters of `words` as a (n, WORD_SIZE) uint8 array."""
    if not words:
        return np.zeros((0, WORD_SIZE), dtype=np.uint8)
    buf = "".join(words).encode("ascii")
    return np.frombuffer(buf, dtype=np.uint8).reshape(len(words), WORD_SIZE)


def candidate_mask(words: Sequence[str], constraint_sets: Sequence[ConstraintSet]) -> np.ndarray:
    """Return a 0/1 int8 mask over `words`: 1 where every constraint holds."""
    letters = _encode(words)
    keep = np.ones(len(words), dtype=bool)

    for cs in constraint_sets:
        for c in cs:
            cols = sorted(c.positions)
            counts = (letters[:, cols] == ord(c.char)).sum(axis=1)
            if c.bound is Bound.AT_LEAST:
                keep &= counts >= c.count
            else:
                keep &= counts <= c.count

    return keep.astype(np.int8)


def _chunks(words: Sequence[Word], n: int) -> List[Sequence[Word]]:
    size = -(-len(words) // n)  # ceil
    return [words[i:i + size] for i in range(0, len(words), size)]


def filter_words(
    words: Sequence[Word],
    constraint_sets: Sequence[ConstraintSet],
    *,
    workers: int = 1,
) -> List[Word]:
    """
    Keep only the words satisfying every constraint set, preserving order.

    With `workers` > 1 the list is split into contiguous chunks that are
    evaluated in a process pool; masks are concatenated back in input order.
    """
    if workers < 1:
        raise ValueError("workers must be a positive integer")
    words = list(words)

    if workers == 1 or len(words) < 2:
        mask = candidate_mask(words, constraint_sets)
    else:
        chunks = _chunks(words, workers)
        log.debug(
            "Filtering %d words in %d chunks with %d workers",
            len(words), len(chunks), workers,
        )
        with ProcessPoolExecutor(workers) as executor:
            masks = list(executor.map(candidate_mask, chunks, repeat(list(constraint_sets))))
        mask = np.concatenate(masks) if masks else np.zeros(0, dtype=np.int8)

    out = [w for w, keep in zip(words, mask) if keep]
    log.debug("%d of %d candidates remain", len(out), len(words))
    return out


# ---------------------------
# Composed operations
# ---------------------------

def filter_by_guesses(
    words: Sequence[Word],
    solution: Word,
    guesses: Sequence[Word],
    *,
    workers: int = 1,
) -> List[Word]:
    """
    Filter out the words using a known solution and the guesses made against
    it, so that only the possible solutions remain.
    """
    constraint_sets = [
        ConstraintSet.from_pattern(derive_pattern(solution, g)) for g in guesses
    ]
    return filter_words(words, constraint_sets, workers=workers)


def filter_by_hints(
    words: Sequence[Word],
    guesses_and_hints: Sequence[Tuple[Word, Sequence[Hint]]],
    *,
    workers: int = 1,
) -> List[Word]:
    """
    Filter out the words using guesses and the hints reported for them, when
    the solution is unknown.
    """
    constraint_sets = [
        ConstraintSet.from_pattern(Pattern.from_guess_and_hints(g, hints))
        for g, hints in guesses_and_hints
    ]
    return filter_words(words, constraint_sets, workers=workers)


def match_by_pattern(
    words: Sequence[Word],
    solution: Word,
    hints: Sequence[Hint],
) -> List[Word]:
    """
    Find the words which, guessed against `solution`, produce exactly `hints`.

    This compares whole hint sequences rather than constraints: the result is
    the set of guesses indistinguishable from each other under that feedback.
    """
    target = Pattern.from_guess_and_hints(solution, hints).hints
    return [w for w in words if derive_pattern(solution, w).hints == target]
