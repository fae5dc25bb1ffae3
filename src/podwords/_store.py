"""WordlistStore: the mutable set of words not worth flagging."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._plural import default_pluralizer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._plural import Pluralizer


class WordlistStore:
    """Case-sensitive word set that keeps every word's plural alongside it.

    Lookups fall back to the lowercase form, so a lowercase entry also
    matches capitalized text. The store belongs to one filtering session;
    use ``snapshot()`` to hand an independent copy to another.
    """

    __slots__ = ("_words", "_pluralizer")

    def __init__(
        self,
        words: Iterable[str] = (),
        pluralizer: Pluralizer | None = None,
    ) -> None:
        self._words: set[str] = set(words)
        self._pluralizer = pluralizer or default_pluralizer()

    @classmethod
    def from_words(
        cls, words: Iterable[str], pluralizer: Pluralizer | None = None
    ) -> WordlistStore:
        """Build a store from singular words, registering each plural too."""
        store = cls(pluralizer=pluralizer)
        for word in words:
            store.add(word)
        return store

    @property
    def pluralizer(self) -> Pluralizer:
        return self._pluralizer

    def contains(self, word: str) -> bool:
        words = self._words
        return word in words or word.lower() in words

    __contains__ = contains

    def add(self, word: str) -> None:
        self._words.add(word)
        self._words.add(self._pluralizer.plural(word))

    def remove(self, word: str) -> None:
        self._words.discard(word)
        self._words.discard(self._pluralizer.plural(word))

    def snapshot(self) -> WordlistStore:
        return WordlistStore(self._words, self._pluralizer)

    def freeze(self) -> frozenset[str]:
        return frozenset(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordlistStore({len(self._words)} words)"
