"""Podwords: English jargon wordlist for spell-checking Perl documentation."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ._errors import PodwordsChecksumError, PodwordsError, PodwordsVersionError
from ._plural import InflectPluralizer, Pluralizer
from ._store import WordlistStore
from ._tokenizer import MAX_WORD_LENGTH
from ._types import Token, TokenKind
from ._wordlist import Wordlist

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "is_stopword",
    "learn_stopwords",
    "strip_stopwords",
    "InflectPluralizer",
    "MAX_WORD_LENGTH",
    "Pluralizer",
    "PodwordsChecksumError",
    "PodwordsError",
    "PodwordsVersionError",
    "Token",
    "TokenKind",
    "Wordlist",
    "WordlistStore",
]


def load(
    data_dir: Path | str | None = None,
    *,
    pluralizer: Pluralizer | None = None,
) -> Wordlist:
    """Load a seed list and return a ready-to-use Wordlist.

    Args:
        data_dir: Directory holding ``wordlist`` and ``manifest.json``.
            If None, uses the bundled package data.
        pluralizer: Pluralization oracle. If None, uses inflect.
    """
    from ._loader import build_seed_table, load_seed_words

    if data_dir is None:
        return Wordlist(pluralizer=pluralizer)
    table = build_seed_table(load_seed_words(data_dir), pluralizer)
    return Wordlist(WordlistStore(table, pluralizer))


_default_lock = threading.Lock()
_default: Wordlist | None = None


def _default_wordlist() -> Wordlist:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Wordlist()
    return _default


def learn_stopwords(text: str) -> None:
    """Apply learn directives to the process-wide default Wordlist."""
    _default_wordlist().learn_stopwords(text)


def is_stopword(word: str) -> bool:
    """Check a word against the process-wide default Wordlist."""
    return _default_wordlist().is_stopword(word)


def strip_stopwords(text: str) -> str:
    """Filter text through the process-wide default Wordlist."""
    return _default_wordlist().strip_stopwords(text)
