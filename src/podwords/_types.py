"""Data structures for podwords."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(enum.Enum):
    TOO_LONG = "too_long"   # longer than max_word_length, never inspected
    EMPTY = "empty"         # nothing left after punctuation stripping
    SIGIL = "sigil"         # code or markup noise
    STOPWORD = "stopword"   # known jargon, dropped whole
    PARTIAL = "partial"     # hyphen compound with some parts dropped
    KEPT = "kept"           # passed through to the spell-checker


@dataclass(slots=True, frozen=True)
class Token:
    raw: str          # whitespace-delimited token as it appeared
    word: str         # after punctuation/possessive stripping
    kind: TokenKind
    remainder: str    # emitted text, "" when dropped
