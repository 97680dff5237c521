"""
word.py

Fixed-length, normalized word values.
"""

from __future__ import annotations

import string

from wools.errors import InvalidWordError

WORD_SIZE = 5

# Lowercased characters that are folded to plain ASCII letters
_TRANSLITERATION = str.maketrans({
    "é": "e", "ê": "e", "ë": "e",
    "ó": "o", "ô": "o", "ö": "o",
    "à": "a",
    "ü": "u",
    "ñ": "n",
})
_LETTERS = frozenset(string.ascii_lowercase)


class Word(str):
    """
    A word of exactly WORD_SIZE lowercase ASCII letters.

    Construction normalizes the input: it is lowercased and a few accented
    characters are transliterated (``Word("SAUTÉ") == "saute"``). Since Word is
    a ``str``, it is immutable and indexes, iterates, hashes and orders like
    the underlying string.

    Raises
    ------
    InvalidWordError
        If the input does not have WORD_SIZE characters, or still contains
        characters outside a-z after normalization.
    """

    __slots__ = ()

    def __new__(cls, text: str) -> "Word":
        if isinstance(text, Word):
            return text
        if not isinstance(text, str):
            raise TypeError("word must be a string")
        if len(text) != WORD_SIZE:
            raise InvalidWordError(f"word is not {WORD_SIZE}-character long")

        normalized = text.lower().translate(_TRANSLITERATION)
        if len(normalized) != WORD_SIZE or not set(normalized) <= _LETTERS:
            raise InvalidWordError("word contains non-alphabetical characters")
        return super().__new__(cls, normalized)

    def __repr__(self) -> str:
        return f"Word({str.__repr__(self)})"
