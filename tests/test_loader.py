"""Tests for seed loading and manifest validation."""

import hashlib
import json
import shutil
import tempfile
from pathlib import Path

import pytest

import podwords
from podwords._errors import PodwordsChecksumError, PodwordsError, PodwordsVersionError
from podwords._loader import (
    _default_data_dir,
    build_seed_table,
    load_seed_words,
    seed_table,
)


def _copy_bundled(tmpdir):
    for f in _default_data_dir().iterdir():
        if f.is_file():
            shutil.copy2(f, tmpdir)


def _write_seed(tmpdir, text):
    path = Path(tmpdir) / "wordlist"
    path.write_text(text, encoding="utf-8")
    digest = hashlib.sha256(path.read_bytes()).hexdigest()
    manifest = {"version": "1.0", "files": {"wordlist": digest}}
    with open(Path(tmpdir) / "manifest.json", "w") as f:
        json.dump(manifest, f)


def test_load_default():
    words = load_seed_words()
    assert len(words) > 200
    for word in ("autovivify", "backreference", "chroot", "stringify", "wantarray"):
        assert word in words


def test_bundled_seed_is_clean():
    """No blank lines, no possessives, no stray whitespace."""
    words = load_seed_words()
    for word in words:
        assert word
        assert word == word.strip()
        assert not word.endswith("'s")


def test_load_explicit_path():
    assert load_seed_words(_default_data_dir()) == load_seed_words()


def test_line_endings_and_blanks():
    with tempfile.TemporaryDirectory() as tmpdir:
        _write_seed(tmpdir, "foo\r\nbar\n\nbaz\nfoo\n")
        assert load_seed_words(tmpdir) == ["foo", "bar", "baz", "foo"]


def test_build_seed_table(pluralizer):
    table = build_seed_table(["foo", "index", "foo"], pluralizer)
    assert isinstance(table, frozenset)
    assert table == {"foo", "foos", "index", "indices"}


def test_seed_table_is_shared():
    assert seed_table() is seed_table()
    assert "chroot" in seed_table()
    assert "chroots" in seed_table()


def test_load_custom_dir(pluralizer):
    with tempfile.TemporaryDirectory() as tmpdir:
        _write_seed(tmpdir, "frobnicate\n")
        wl = podwords.load(tmpdir, pluralizer=pluralizer)
    assert wl.is_stopword("frobnicate")
    assert wl.is_stopword("frobnicates")
    assert not wl.is_stopword("chroot")


def test_missing_directory():
    with pytest.raises(PodwordsError, match="manifest.json not found"):
        load_seed_words("/nonexistent/path")


def test_missing_wordlist():
    with tempfile.TemporaryDirectory() as tmpdir:
        _copy_bundled(tmpdir)
        (Path(tmpdir) / "wordlist").unlink()
        with pytest.raises(PodwordsError, match="Missing data file"):
            load_seed_words(tmpdir)


def test_missing_checksum():
    with tempfile.TemporaryDirectory() as tmpdir:
        _copy_bundled(tmpdir)
        manifest_path = Path(tmpdir) / "manifest.json"
        with open(manifest_path, "w") as f:
            json.dump({"version": "1.0", "files": {}}, f)
        with pytest.raises(PodwordsError, match="No checksum in manifest"):
            load_seed_words(tmpdir)


def test_version_mismatch():
    """Tampered version should raise PodwordsVersionError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        _copy_bundled(tmpdir)
        manifest_path = Path(tmpdir) / "manifest.json"
        with open(manifest_path) as f:
            manifest = json.load(f)
        manifest["version"] = "99.0"
        with open(manifest_path, "w") as f:
            json.dump(manifest, f)
        with pytest.raises(PodwordsVersionError, match="got .99.0."):
            load_seed_words(tmpdir)


def test_checksum_mismatch():
    """Tampered wordlist should raise PodwordsChecksumError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        _copy_bundled(tmpdir)
        with open(Path(tmpdir) / "wordlist", "ab") as f:
            f.write(b"tampered\n")
        with pytest.raises(PodwordsChecksumError, match="Checksum mismatch for wordlist"):
            load_seed_words(tmpdir)


def test_error_hierarchy():
    assert issubclass(PodwordsVersionError, PodwordsError)
    assert issubclass(PodwordsChecksumError, PodwordsError)
