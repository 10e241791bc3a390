"""
Pytest tests for the address file.
"""

from __future__ import annotations

import pytest

from creator_watch.errors import FileError
from creator_watch.storage import load_addresses, save_addresses


def test_round_trip_preserves_order(tmp_path):
    addresses = ["z", "a", "m", "a", "Ünïcode"]
    path = save_addresses(tmp_path / "addresses.json", addresses)
    assert load_addresses(path) == addresses


def test_save_overwrites_and_creates_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "addresses.json"
    save_addresses(path, ["one", "two", "three"])
    save_addresses(path, ["four"])
    assert load_addresses(path) == ["four"]
    assert not path.with_name("addresses.json.tmp").exists()


def test_missing_file(tmp_path):
    with pytest.raises(FileError) as exc:
        load_addresses(tmp_path / "missing.json")
    assert exc.value.path.endswith("missing.json")


@pytest.mark.parametrize("content", ["", "not json", "null", '"abc"', '{"items": []}', "[1, 2]", '["a", null]'])
def test_invalid_structure(tmp_path, content):
    path = tmp_path / "addresses.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(FileError):
        load_addresses(path)


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(FileError):
        load_addresses(tmp_path)


def test_parent_is_a_file_is_file_error(tmp_path):
    """An output path under a regular file fails as FileError, not a raw OSError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(FileError) as exc:
        save_addresses(blocker / "addresses.json", ["a"])
    assert exc.value.path.endswith("addresses.json")
    assert blocker.read_text(encoding="utf-8") == "x"
