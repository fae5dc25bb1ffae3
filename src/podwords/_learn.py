"""LearnEngine: applies learn/unlearn directives from free text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._tokenizer import split_tokens, strip_possessive

if TYPE_CHECKING:
    from ._store import WordlistStore

logger = logging.getLogger(__name__)

_NEGATION = "!"


class LearnEngine:
    """Interpret each token of a text as a wordlist directive.

    ``word`` adds the word and its plural; ``!word`` removes both. A
    trailing 's is stripped before learning, matching how words are
    extracted when filtering. Directives apply in order, so the last one
    for a given word wins.
    """

    __slots__ = ("_store",)

    def __init__(self, store: WordlistStore) -> None:
        self._store = store

    def learn(self, text: str) -> None:
        for token in split_tokens(text):
            if token.startswith(_NEGATION) and len(token) > 1:
                negation = token[1:]
                self._store.remove(negation)
                logger.debug("Unlearning stopword %s", token)
            else:
                word = strip_possessive(token)
                self._store.add(word)
                logger.debug("Learning stopword %s", word)
