"""Output helpers for the CLI.

Keeps command functions free of formatting details: usage text, item lines
and error rendering all live here.
"""

from __future__ import annotations

import json
from typing import Iterable

import typer
from rich.console import Console
from rich.table import Table
from rich.traceback import Traceback

from core.domain.errors import StoreError
from core.domain.models import Item

USAGE_LINES = (
    "usage:",
    "  todo list [TERM]   list items, optionally matching a given term",
    "  todo add ITEM      add an item to the list",
    "  todo check TERM    check items that match a given term",
    "  todo clear         clear all items",
)


def print_usage() -> None:
    for line in USAGE_LINES:
        typer.echo(line)


def print_items(items: Iterable[Item]) -> None:
    """One `[X] text` / `[ ] text` line per item, in store order."""

    for item in items:
        typer.echo(str(item))


def render_store_error(error: StoreError, console: Console) -> None:
    """Print a store error to `console` (expected to be a stderr console).

    Structured errors become a status line plus one indented `key: value`
    line per field of the store's error object. Anything else falls back
    to the raw exception detail.
    """

    if error.is_structured:
        console.print(f"Error {error.status}", markup=False, highlight=False)
        for key, value in (error.error or {}).items():
            console.print(
                f"  {key}: {json.dumps(value, ensure_ascii=False)}",
                markup=False,
                highlight=False,
            )
        return
    render_exception(error, console)


def render_exception(exc: BaseException, console: Console) -> None:
    """Raw failure detail: the traceback of `exc`."""

    if exc.__traceback__ is not None:
        console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
    else:
        console.print(f"{type(exc).__name__}: {exc}", markup=False, highlight=False)
    if isinstance(exc, StoreError) and exc.body:
        console.print(exc.body, markup=False, highlight=False)


def build_status_table(title: str) -> Table:
    """Three-column check/status/details table used by `todo doctor`."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
