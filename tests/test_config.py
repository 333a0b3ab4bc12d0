# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core import config
from core.config import AppSettings, write_user_env_vars


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_STORE_HOST", "es.internal")
    monkeypatch.setenv("TODO_STORE_PORT", "9300")
    monkeypatch.setenv("TODO_STORE_SCHEME", "https")
    monkeypatch.setenv("TODO_STORE_PASSWORD", "pw")
    monkeypatch.setenv("TODO_INDEX_NAME", "chores")

    settings = AppSettings(_env_file=None)

    assert settings.store_url == "https://es.internal:9300"
    assert settings.index_name == "chores"
    assert settings.store_auth() == ("elastic", "pw")


def test_password_is_not_leaked_in_repr() -> None:
    settings = AppSettings(_env_file=None, store_password="hunter2")
    assert "hunter2" not in repr(settings)


def test_empty_username_disables_auth() -> None:
    settings = AppSettings(_env_file=None, store_username="")
    assert settings.store_auth() is None


def test_invalid_scheme_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, store_scheme="ftp")


def test_write_user_env_vars_merges_existing(tmp_path: Path) -> None:
    env_path = tmp_path / "todo" / ".env"
    write_user_env_vars({"TODO_STORE_HOST": "a", "TODO_STORE_PORT": "1"}, env_path)
    write_user_env_vars({"TODO_STORE_HOST": "b"}, env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "TODO_STORE_HOST=b" in lines
    assert "TODO_STORE_PORT=1" in lines


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert config.get_user_env_file() == tmp_path / "todo-search" / ".env"


def test_read_env_file_skips_comments_and_junk(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text('# A=1\nB="two"\nnot a pair\nC=\n', encoding="utf-8")
    assert config.read_env_file(env_path) == {"B": "two", "C": ""}
    assert config.read_env_file(tmp_path / "missing") == {}
