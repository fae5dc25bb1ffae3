"""Shared fixtures for podwords tests."""

import pytest

from podwords import Wordlist, WordlistStore


class StubPluralizer:
    """Deterministic pluralizer: known irregulars, otherwise append "s"."""

    IRREGULAR = {
        "index": "indices",
        "child": "children",
        "regex": "regexes",
    }

    def plural(self, word):
        if not word:
            return word
        return self.IRREGULAR.get(word, word + "s")


SEED = [
    "a",
    "auto",
    "chroot",
    "index",
    "list",
    "returns",
    "sentence",
    "stringify",
    "the",
    "vivify",
    "wantarray",
]


@pytest.fixture
def pluralizer():
    return StubPluralizer()


@pytest.fixture
def store(pluralizer):
    return WordlistStore.from_words(SEED, pluralizer)


@pytest.fixture
def wordlist(store):
    """A fresh session over the small stub-pluralized seed."""
    return Wordlist(store)


@pytest.fixture(scope="session")
def bundled():
    """Load the bundled seed list once for all tests."""
    import podwords

    return podwords.load()
