"""CLI entrypoint: the `todo` command.

Dispatches `list`, `add`, `check` and `clear` to `TodoService` and maps
failures to exit codes:

- no arguments: usage text, exit 0
- `add`/`check` without their argument: one-line usage, exit 0
- unknown command: "Unknown command", exit 1
- invalid configuration, store or transport failure: details on stderr, exit 1
"""

from __future__ import annotations

import logging
from typing import Callable

import click
import httpx
import typer
from pydantic import ValidationError
from typer.core import TyperGroup

from cli import doctor
from cli.context import AppContext, err_console, require_settings
from cli.ui_components import print_items, print_usage, render_exception, render_store_error
from core.domain.errors import StoreError
from core.logging_setup import resolve_level, setup_logging
from core.services.todo_service import TodoService

logger = logging.getLogger(__name__)

# Anything after the first positional argument is ignored, as are dash-prefixed item texts.
_LENIENT_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}


class TodoGroup(TyperGroup):
    """Root group that answers unknown commands with "Unknown command" / exit 1."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            typer.echo("Unknown command")
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=TodoGroup,
    invoke_without_command=True,
    add_completion=False,
    help="Manage a todo list kept in a search store.",
)
app.add_typer(doctor.app, name="doctor")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    if ctx.invoked_subcommand is None:
        print_usage()
        raise typer.Exit(0)

    app_ctx = ctx.ensure_object(AppContext)
    try:
        level_name = app_ctx.load_settings().log_level
    except ValidationError:
        # Reported by the command that needs the settings; setup-store does not.
        level_name = None

    setup_logging(resolve_level(level_name, verbose=verbose))


def _run(ctx: typer.Context, operation: Callable[[TodoService], object]) -> int:
    """Run one store operation and return the process exit status."""

    settings = require_settings(ctx)
    store = ctx.ensure_object(AppContext).store_factory(settings)
    try:
        operation(TodoService(store))
    except StoreError as exc:
        logger.debug("store error", exc_info=True)
        render_store_error(exc, err_console)
        return 1
    except httpx.HTTPError as exc:
        render_exception(exc, err_console)
        return 1
    finally:
        close = getattr(store, "close", None)
        if callable(close):
            close()
    return 0


@app.command("list", context_settings=_LENIENT_ARGS)
def list_command(
    ctx: typer.Context,
    term: str = typer.Argument("", help="Only show items whose text matches this term."),
) -> None:
    """List items, optionally matching a given term."""

    status = _run(ctx, lambda service: print_items(service.list_items(term)))
    raise typer.Exit(status)


@app.command("add", context_settings=_LENIENT_ARGS)
def add_command(
    ctx: typer.Context,
    item: str | None = typer.Argument(None, help="Text of the new item."),
) -> None:
    """Add an item to the list."""

    if item is None:
        typer.echo("usage: todo add ITEM")
        raise typer.Exit(0)
    status = _run(ctx, lambda service: service.add_item(item))
    raise typer.Exit(status)


@app.command("check", context_settings=_LENIENT_ARGS)
def check_command(
    ctx: typer.Context,
    term: str | None = typer.Argument(None, help="Check items matching this term."),
) -> None:
    """Check items that match a given term."""

    if term is None:
        typer.echo("usage: todo check TERM")
        raise typer.Exit(0)
    status = _run(ctx, lambda service: service.check_items(term))
    raise typer.Exit(status)


@app.command("clear", context_settings=_LENIENT_ARGS)
def clear_command(ctx: typer.Context) -> None:
    """Clear all items."""

    status = _run(ctx, lambda service: service.clear_items())
    raise typer.Exit(status)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
