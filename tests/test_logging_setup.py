# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from core.logging_setup import resolve_level, setup_logging


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    """setup_logging rewires the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    library_levels = {n: logging.getLogger(n).level for n in ("httpx", "httpcore")}
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    for name, lvl in library_levels.items():
        logging.getLogger(name).setLevel(lvl)


def test_resolve_level_from_name() -> None:
    assert resolve_level("info") == logging.INFO
    assert resolve_level("ERROR") == logging.ERROR
    assert resolve_level(None) == logging.WARNING
    assert resolve_level("chatty") == logging.WARNING


def test_verbose_forces_debug() -> None:
    assert resolve_level("ERROR", verbose=True) == logging.DEBUG


def test_setup_logging_installs_single_rich_handler(restore_logging) -> None:
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)


def test_http_libraries_held_at_warning(restore_logging) -> None:
    setup_logging(logging.DEBUG)
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING

    setup_logging(logging.ERROR)
    assert logging.getLogger("httpx").level == logging.ERROR
