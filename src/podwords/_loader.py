"""Seed wordlist loading, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ._errors import PodwordsChecksumError, PodwordsError, PodwordsVersionError
from ._plural import default_pluralizer

if TYPE_CHECKING:
    from ._plural import Pluralizer

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_seed_lock = threading.Lock()
_seed_table: frozenset[str] | None = None


def _default_data_dir() -> Path:
    return Path(str(resources.files("podwords") / "data"))


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise PodwordsError(f"manifest.json not found in {data_dir}")
    with open(manifest_path, encoding="utf-8") as f:
        return json.load(f)


def load_seed_words(data_dir: Path | str | None = None) -> list[str]:
    """Validate the data directory and return the seed words, one per line.

    Line terminators are removed; blank lines are skipped. Duplicates are
    kept, since inserting them into a set is harmless.
    """
    if data_dir is None:
        data_dir = _default_data_dir()
    else:
        data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise PodwordsVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )

    wordlist_path = data_dir / "wordlist"
    if not wordlist_path.exists():
        raise PodwordsError(f"Missing data file: {wordlist_path}")
    expected = manifest.get("files", {}).get("wordlist")
    if expected is None:
        raise PodwordsError("No checksum in manifest for wordlist")
    actual = _sha256(wordlist_path)
    if actual != expected:
        raise PodwordsChecksumError(
            f"Checksum mismatch for wordlist: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )

    with open(wordlist_path, encoding="utf-8") as f:
        words = [line.rstrip("\r\n") for line in f]
    words = [w for w in words if w]
    logger.info("Loaded %d seed words from %s", len(words), data_dir)
    return words


def build_seed_table(
    words: list[str], pluralizer: Pluralizer | None = None
) -> frozenset[str]:
    """Return an immutable table holding every word and its plural."""
    pluralizer = pluralizer or default_pluralizer()
    table: set[str] = set()
    for word in words:
        table.add(word)
        table.add(pluralizer.plural(word))
    return frozenset(table)


def seed_table() -> frozenset[str]:
    """Return the bundled seed table, building it once per process."""
    global _seed_table
    if _seed_table is None:
        with _seed_lock:
            if _seed_table is None:
                _seed_table = build_seed_table(load_seed_words())
    return _seed_table
