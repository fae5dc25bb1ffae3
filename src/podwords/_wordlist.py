"""Wordlist: per-session stopword filter with learnable vocabulary."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._learn import LearnEngine
from ._loader import build_seed_table, load_seed_words, seed_table
from ._matcher import StopwordMatcher
from ._store import WordlistStore
from ._tokenizer import (
    MAX_WORD_LENGTH,
    extract_word,
    is_sigil_or_strange,
    normalize_text,
    split_tokens,
)
from ._types import Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._plural import Pluralizer

logger = logging.getLogger(__name__)


class Wordlist:
    """Strips known jargon from text before it reaches a spell-checker.

    Each instance owns its own ``WordlistStore``. Without an explicit store
    it starts from a copy of the bundled seed list, so learning words in one
    session never leaks into another.
    """

    __slots__ = ("_store", "_matcher", "_learner", "_max_word_length")

    def __init__(
        self,
        store: WordlistStore | None = None,
        *,
        pluralizer: Pluralizer | None = None,
        max_word_length: int = MAX_WORD_LENGTH,
    ) -> None:
        if store is None:
            if pluralizer is None:
                table = seed_table()
            else:
                table = build_seed_table(load_seed_words(), pluralizer)
            store = WordlistStore(table, pluralizer)
        self._store = store
        self._matcher = StopwordMatcher(store)
        self._learner = LearnEngine(store)
        self._max_word_length = max_word_length

    @property
    def wordlist(self) -> WordlistStore:
        return self._store

    @property
    def max_word_length(self) -> int:
        return self._max_word_length

    def copy(self) -> Wordlist:
        """Return an independent session starting from this one's words."""
        return Wordlist(
            self._store.snapshot(), max_word_length=self._max_word_length
        )

    # -- Public API --

    def learn_stopwords(self, text: str) -> None:
        """Add ``word`` / remove ``!word`` entries for each token in text."""
        self._learner.learn(text)

    def is_stopword(self, word: str) -> bool:
        return self._matcher.is_stopword(word)

    def strip_stopwords(self, text: str) -> str:
        """Return the words of text that are not stopwords.

        Each surviving word is followed by a single space, so the result
        carries a trailing space whenever it is non-empty.
        """
        return "".join(
            f"{tok.remainder} " for tok in self._iter_tokens(text) if tok.remainder
        )

    def classify(self, text: str) -> list[Token]:
        """Return one Token per whitespace-delimited token of text."""
        return list(self._iter_tokens(text))

    # -- Internal --

    def _iter_tokens(self, text: str) -> Iterator[Token]:
        logger.debug("Content: <%s>", text)
        for raw in split_tokens(normalize_text(text)):
            if len(raw) > self._max_word_length:
                yield Token(raw, "", TokenKind.TOO_LONG, "")
                continue

            word = extract_word(raw)
            if not word:
                yield Token(raw, word, TokenKind.EMPTY, "")
                continue

            if is_sigil_or_strange(word):
                if word != "_":
                    logger.debug("rejecting {%s}", word)
                yield Token(raw, word, TokenKind.SIGIL, "")
                continue

            remainder = self._matcher.resolve(word)
            if not remainder:
                kind = TokenKind.STOPWORD
            elif remainder == word:
                kind = TokenKind.KEPT
            else:
                kind = TokenKind.PARTIAL
            yield Token(raw, word, kind, remainder)
