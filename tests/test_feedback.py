from collections import Counter
from itertools import product

import pytest

from wools.errors import InvalidHintsError
from wools.feedback import Hint, Pattern, derive_pattern
from wools.word import WORD_SIZE, Word

C, P, A = Hint.CORRECT, Hint.PRESENT, Hint.ABSENT

POOL = ["apple", "prime", "plume", "torch", "watch", "soles", "toner", "poser",
        "tonal", "swoop", "leech", "tepee", "gloat", "altar", "allot", "total",
        "press", "spree", "abbey", "cabin", "stunt", "attic", "eerie", "geese"]


# --- golden cases (solution, guess, expected) ---
@pytest.mark.parametrize("solution,guess,expected", [
    ("watch", "prime", (A, A, A, A, A)),   # no overlap
    ("story", "stare", (C, C, A, C, A)),
    ("store", "salsa", (C, A, A, A, A)),   # extra 's' after a green
    ("prime", "sharp", (A, A, A, P, P)),
    ("prism", "apple", (A, P, A, A, A)),   # misplaced twice, once in solution
    ("stunt", "attic", (A, C, P, A, A)),
    ("leech", "tepee", (A, C, A, P, A)),
    ("gloat", "altar", (A, C, P, C, A)),   # misplaced first, green later
    ("toner", "poser", (A, C, A, C, C)),
    ("tonal", "swoop", (A, A, P, A, A)),
    ("total", "allot", (P, P, A, P, P)),
    ("cabin", "abbey", (P, A, C, A, A)),
    ("spree", "press", (P, P, P, P, A)),
])
def test_derive_pattern_golden(solution, guess, expected):
    assert derive_pattern(Word(solution), Word(guess)).hints == expected


def test_earlier_duplicate_gets_present_later_gets_absent():
    hints = derive_pattern(Word("prism"), Word("apple")).hints
    assert hints[1] is Hint.PRESENT
    assert hints[2] is Hint.ABSENT


def test_pattern_does_not_keep_the_solution():
    pattern = derive_pattern(Word("apple"), Word("coupe"))
    assert pattern.guess == "coupe"
    assert pattern == Pattern(Word("coupe"), (A, A, A, P, C))


@pytest.mark.parametrize("solution,guess", list(product(POOL, POOL)))
def test_hints_are_total_and_conserve_counts(solution, guess):
    hints = derive_pattern(Word(solution), Word(guess)).hints
    assert len(hints) == WORD_SIZE
    assert all(isinstance(h, Hint) for h in hints)

    found = Counter(g for g, h in zip(guess, hints) if h is not Hint.ABSENT)
    available = Counter(solution)
    for ch, n in found.items():
        assert n <= available[ch]
    # greens only where the letters agree
    for i, h in enumerate(hints):
        assert (h is Hint.CORRECT) == (guess[i] == solution[i])


@pytest.mark.parametrize("word", POOL)
def test_self_match_is_all_correct(word):
    pattern = derive_pattern(Word(word), Word(word))
    assert pattern.hints == (C,) * WORD_SIZE
    assert pattern.solved


def test_from_guess_and_hints_keeps_hints():
    hints = (A, C, P, A, A)
    pattern = Pattern.from_guess_and_hints(Word("attic"), hints)
    assert pattern.hints == hints
    assert not pattern.solved


def test_from_guess_and_hints_accepts_integers():
    pattern = Pattern.from_guess_and_hints(Word("attic"), [0, 2, 1, 0, 0])
    assert pattern.hints == (A, C, P, A, A)


def test_from_guess_and_hints_rejects_wrong_length():
    with pytest.raises(InvalidHintsError):
        Pattern.from_guess_and_hints(Word("attic"), [0, 2, 1, 0])


def test_from_guess_and_hints_rejects_unknown_values():
    with pytest.raises(InvalidHintsError):
        Pattern.from_guess_and_hints(Word("attic"), [0, 2, 1, 0, 3])


def test_pattern_coerces_integer_hints():
    pattern = Pattern(Word("apple"), (2, 2, 2, 2, 2))
    assert pattern.hints == (C,) * WORD_SIZE
    assert all(isinstance(h, Hint) for h in pattern.hints)
    assert pattern.solved


def test_pattern_normalizes_guess():
    assert Pattern("APPLE", (0, 0, 0, 0, 0)).guess == "apple"


def test_pattern_rejects_unknown_values():
    with pytest.raises(InvalidHintsError):
        Pattern(Word("apple"), (2, 2, 2, 2, 5))
