# tests/conftest.py

from __future__ import annotations

import pytest

from cli.context import AppContext
from core.config import AppSettings

from .fakes import FakeTodoStore


@pytest.fixture()
def settings() -> AppSettings:
    """
    Settings built from explicit values only.

    `_env_file=None` keeps a developer's .env (or user config) out of the
    tests; init kwargs take precedence over environment variables.
    """
    return AppSettings(
        _env_file=None,
        store_host="store.test",
        store_port=9200,
        store_scheme="http",
        store_username="elastic",
        store_password="s3cret",
        index_name="todo",
        refresh_on_write=True,
        log_level="WARNING",
    )


@pytest.fixture()
def store() -> FakeTodoStore:
    return FakeTodoStore()


@pytest.fixture()
def app_context(settings: AppSettings, store: FakeTodoStore) -> AppContext:
    """AppContext whose store factory always hands out the same fake store."""
    return AppContext(settings=settings, store_factory=lambda _settings: store)
