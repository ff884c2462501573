from __future__ import annotations

from pathlib import Path

from docstore.paths import db_file_name, db_file_path, ensure_dir, identity_tag


def test_identity_tag_is_hex_md5():
    assert identity_tag("test") == "098f6bcd4621d373cade4e832627b4f6"
    assert identity_tag("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert len(identity_tag("people")) == 32


def test_db_file_name():
    assert db_file_name("test") == "098f6bcd4621d373cade4e832627b4f6.json"


def test_string_base_path_is_a_prefix():
    assert db_file_path("/var/db/", "test") == Path("/var/db/098f6bcd4621d373cade4e832627b4f6.json")
    assert db_file_path("/var/db/app-", "test") == Path("/var/db/app-098f6bcd4621d373cade4e832627b4f6.json")


def test_path_base_path_is_a_directory():
    assert db_file_path(Path("/var/db"), "test") == Path("/var/db/098f6bcd4621d373cade4e832627b4f6.json")


def test_ensure_dir(tmp_path):
    target = tmp_path / "a" / "b"
    assert ensure_dir(target) == target
    assert target.is_dir()
    ensure_dir(target)
