"""Pluralization oracle used to keep singular and plural entries in step."""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import Protocol

import inflect


class Pluralizer(Protocol):
    def plural(self, word: str) -> str: ...


class InflectPluralizer:
    """English pluralization backed by the ``inflect`` engine.

    Results are memoized per instance; the seed list alone pluralizes
    every entry once at load time.
    """

    __slots__ = ("_engine", "_cached")

    def __init__(self, cache_size: int = 16384) -> None:
        self._engine = inflect.engine()
        self._cached = lru_cache(maxsize=cache_size)(self._plural)

    def _plural(self, word: str) -> str:
        return self._engine.plural(word)

    def plural(self, word: str) -> str:
        if not word:
            return word
        return self._cached(word)


_default_lock = threading.Lock()
_default: InflectPluralizer | None = None


def default_pluralizer() -> InflectPluralizer:
    """Return the process-wide InflectPluralizer, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = InflectPluralizer()
    return _default
