"""Tests for the command-line entry point."""

import re

import pytest

from rest_options.__main__ import main


@pytest.fixture
def sqlite_env(monkeypatch, tmp_path):
    monkeypatch.setenv("REST_OPTIONS_STORE", "sqlite")
    monkeypatch.setenv("REST_OPTIONS_STORE_PATH", str(tmp_path / "options.db"))


def test_generate_key_prints_key(sqlite_env, capsys):
    assert main(["generate-key"]) == 0
    out = capsys.readouterr().out.strip()
    assert re.fullmatch(r"[0-9a-f]{64}", out)


def test_set_restrictions(sqlite_env, tmp_path, capsys):
    names = tmp_path / "names.txt"
    names.write_text("blogname\n\n timezone \n")
    assert main(["set-restrictions", "allow_only", "--list-file", str(names)]) == 0
    assert capsys.readouterr().out.strip() == "allow_only: blogname, timezone"


def test_set_restrictions_without_list(sqlite_env, capsys):
    assert main(["set-restrictions", "allow_all"]) == 0
    assert capsys.readouterr().out.strip() == "allow_all: (empty list)"


def test_config_error_exit_code(monkeypatch, capsys):
    monkeypatch.setenv("REST_OPTIONS_STORE", "sqlite")
    monkeypatch.setenv("REST_OPTIONS_STORE_PATH", "")
    assert main(["generate-key"]) == 1
    assert "error:" in capsys.readouterr().err


def test_unknown_restriction_type_exits():
    with pytest.raises(SystemExit):
        main(["set-restrictions", "allow_some"])


def test_undecodable_list_file_exit_code(sqlite_env, tmp_path, capsys):
    names = tmp_path / "names.txt"
    names.write_bytes(b"blogname\n\xff\xfe\n")
    assert main(["set-restrictions", "allow_only", "--list-file", str(names)]) == 1
    assert "error:" in capsys.readouterr().err


def test_missing_list_file_exit_code(sqlite_env, tmp_path, capsys):
    assert main(["set-restrictions", "allow_only", "--list-file", str(tmp_path / "nope")]) == 1
    assert "error:" in capsys.readouterr().err
