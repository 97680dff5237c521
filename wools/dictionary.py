"""
dictionary.py

Loads candidate words from a dictionary file.

Plain word-per-line files (such as /usr/share/dict/american-english) and CSV
files with a word column are both supported. Entries are normalized through
Word; entries that are not valid words are skipped and duplicates are dropped,
keeping the first occurrence.
"""

from __future__ import annotations

import csv
import logging
import os
from typing import Iterable, List, Optional

import pandas as pd

from wools.errors import DictionaryError, InvalidWordError
from wools.word import Word

log = logging.getLogger(__name__)

DICTIONARY_FILE_PATH = "/usr/share/dict/american-english"
DEFAULT_COLUMN = "word"


def _read_raw(path: str, column: Optional[str]) -> List[str]:
    """Read the raw entries of a dictionary as strings."""
    is_csv = column is not None or path.lower().endswith(".csv")
    try:
        if is_csv:
            column = column or DEFAULT_COLUMN
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
            if column not in df.columns:
                raise DictionaryError(f"column '{column}' not found in {path}")
        else:
            column = DEFAULT_COLUMN
            df = pd.read_table(
                path,
                header=None,
                names=[column],
                usecols=[0],
                dtype=str,
                keep_default_na=False,
                quoting=csv.QUOTE_NONE,
                on_bad_lines="skip",
                encoding="utf-8",
            )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise DictionaryError(f"cannot read dictionary {path}: {e}") from e
    except pd.errors.EmptyDataError:
        raise DictionaryError(f"dictionary {path} is empty") from None

    return df[column].tolist()


def normalize_words(raw: Iterable[str]) -> List[Word]:
    """Keep the valid words of `raw`, normalized, first occurrence only."""
    clean: List[Word] = []
    seen = set()
    skipped = 0

    for val in raw:
        try:
            w = Word(val)
        except (InvalidWordError, TypeError) as e:
            log.debug("Skipping %r: %s", val, e)
            skipped += 1
            continue
        if w in seen:
            continue
        seen.add(w)
        clean.append(w)

    log.info("Skipped %d invalid entries", skipped)
    return clean


def load_words(path: str = DICTIONARY_FILE_PATH, column: Optional[str] = None) -> List[Word]:
    """
    Load the valid, normalized and deduplicated words of a dictionary.

    Parameters
    ----------
    path : str
        Path to a word-per-line file, or to a CSV file.
    column : str, optional
        Column holding the words. Implies CSV; CSV files default to "word".

    Raises
    ------
    DictionaryError
        If the file cannot be read, lacks the column, or holds no valid word.
    """
    path = os.fspath(path)
    words = normalize_words(_read_raw(path, column))
    if not words:
        raise DictionaryError(f"no valid words in {path}")
    log.info("Loaded %d words from %s", len(words), path)
    return words
