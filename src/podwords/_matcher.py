"""StopwordMatcher: decides how much of an extracted word to drop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._store import WordlistStore

logger = logging.getLogger(__name__)


class StopwordMatcher:
    __slots__ = ("_store",)

    def __init__(self, store: WordlistStore) -> None:
        self._store = store

    def is_stopword(self, word: str) -> bool:
        """True if word, or its lowercase form, is in the wordlist."""
        if self._store.contains(word):
            logger.debug('Rejecting "%s" as a stopword', word)
            return True
        return False

    def resolve(self, word: str) -> str:
        """Return the part of word that still needs spell-checking.

        An empty string means the whole word is known. The whole word is
        always tried first, so a listed hyphenated or dotted entry is
        dropped intact before any decomposition.
        """
        if self.is_stopword(word):
            return ""

        if "-" in word:
            # Keep whatever parts aren't stopwords. Dropping a middle part
            # joins its neighbours: "a-stop-b" -> "a-b". Trailing empty
            # parts are discarded, so a bare dash like "--" leaves nothing.
            parts = word.split("-")
            while parts and not parts[-1]:
                parts.pop()
            keep = [part for part in parts if not self.is_stopword(part)]
            return "-".join(keep)

        if word.endswith("."):
            # end of sentence or an ellipsis
            if self.is_stopword(word.rstrip(".")):
                return ""
            return word

        return word
