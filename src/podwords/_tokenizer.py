"""Token splitting, word extraction and sigil detection."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MAX_WORD_LENGTH = 50

# Closing/terminal punctuation trimmed from the end of a token. Periods are
# left alone so abbreviations like "Ph.D." survive.
_TRAILING_PUNCT = "){]'\":;,?!"
_LEADING_PUNCT = "`\"'(["
_POSSESSIVE = "'s"

_SIGIL_START = frozenset("&%$@:<*\\_")
_STRANGE_CHARS = frozenset("%^&#$@_<>()[]{}\\*:+/=|`~")

# no-break space -> space, soft hyphen -> deleted
_CONTROL_TABLE = str.maketrans({"\xa0": " ", "\xad": None})


def normalize_text(text: str) -> str:
    """Replace no-break spaces with spaces and drop soft hyphens."""
    return text.translate(_CONTROL_TABLE)


def split_tokens(text: str) -> list[str]:
    """Return the whitespace-delimited tokens of text, in order."""
    return text.split()


def strip_possessive(word: str) -> str:
    """Remove one trailing 's (any case)."""
    if word[-2:].lower() == _POSSESSIVE:
        return word[:-2]
    return word


def extract_word(token: str) -> str:
    """Trim edge punctuation and a possessive suffix from a raw token.

    The passes run in a fixed order: trailing punctuation, then the
    possessive, then leading punctuation. The result may be empty.
    """
    word = token.rstrip(_TRAILING_PUNCT)
    word = strip_possessive(word)
    word = word.lstrip(_LEADING_PUNCT)
    if word:
        logger.debug("Found word: <%s>", word)
    return word


def is_sigil_or_strange(word: str) -> bool:
    """True if word looks like code or markup rather than prose."""
    if not word:
        return False
    if word[0] in _SIGIL_START:
        return True
    return any(ch in _STRANGE_CHARS for ch in word)
