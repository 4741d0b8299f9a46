from __future__ import annotations

import pytest

from mandrill_client import credentials
from mandrill_client.errors import ConfigurationError


def test_explicit_key_wins_over_env_and_files(tmp_path, monkeypatch) -> None:
    key_file = tmp_path / "mandrill.key"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.setenv(credentials.ENV_APIKEY, "env-key")

    assert credentials.resolve_apikey("  arg-key ", paths=[str(key_file)]) == "arg-key"


def test_env_wins_over_files(tmp_path, monkeypatch) -> None:
    key_file = tmp_path / "mandrill.key"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.setenv(credentials.ENV_APIKEY, " env-key\n")

    assert credentials.resolve_apikey(None, paths=[str(key_file)]) == "env-key"


def test_blank_argument_falls_through_to_env(monkeypatch) -> None:
    monkeypatch.setenv(credentials.ENV_APIKEY, "env-key")

    assert credentials.resolve_apikey("   ", paths=[]) == "env-key"


def test_files_used_in_order_skipping_blank(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(credentials.ENV_APIKEY, raising=False)
    blank = tmp_path / "home.key"
    blank.write_text("  \n", encoding="utf-8")
    second = tmp_path / "etc.key"
    second.write_text("\tetc-key \n", encoding="utf-8")
    missing = tmp_path / "missing.key"

    paths = [str(missing), str(blank), str(second)]
    assert credentials.apikey_from_files(paths) == "etc-key"
    assert credentials.resolve_apikey(paths=paths) == "etc-key"


def test_home_path_is_expanded(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".mandrill.key").write_text("home-key", encoding="utf-8")

    assert credentials.apikey_from_files(["~/.mandrill.key"]) == "home-key"


def test_apikey_from_env_uses_given_mapping() -> None:
    assert credentials.apikey_from_env({credentials.ENV_APIKEY: "x"}) == "x"
    assert credentials.apikey_from_env({credentials.ENV_APIKEY: "  "}) is None
    assert credentials.apikey_from_env({}) is None


def test_missing_everywhere_raises(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(credentials.ENV_APIKEY, raising=False)

    with pytest.raises(ConfigurationError, match="Mandrill API key"):
        credentials.resolve_apikey(None, paths=[str(tmp_path / "nope.key")])


def test_default_paths() -> None:
    assert credentials.KEY_FILE_PATHS == ("~/.mandrill.key", "/etc/mandrill.key")


def test_undecodable_key_file_falls_through(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv(credentials.ENV_APIKEY, raising=False)
    bad = tmp_path / "home.key"
    bad.write_bytes(b"\xff\xfe\x00garbage")
    good = tmp_path / "etc.key"
    good.write_text("etc-key\n", encoding="utf-8")

    assert credentials.resolve_apikey(paths=[str(bad), str(good)]) == "etc-key"


def test_unreadable_key_file_falls_through(tmp_path, monkeypatch) -> None:
    locked = tmp_path / "home.key"
    locked.write_text("locked-key", encoding="utf-8")
    good = tmp_path / "etc.key"
    good.write_text("etc-key", encoding="utf-8")
    real_open = open

    def _open(path, *args, **kwargs):
        if str(path) == str(locked):
            raise PermissionError(13, "Permission denied", str(path))
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr(credentials, "open", _open, raising=False)

    assert credentials.apikey_from_files([str(locked), str(good)]) == "etc-key"
