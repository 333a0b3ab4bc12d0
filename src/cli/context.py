"""Per-invocation CLI state shared through `ctx.obj`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.elasticsearch_store import ElasticsearchTodoStore
from core.config import AppSettings
from core.interfaces.store import TodoStore

err_console = Console(stderr=True)


@dataclass
class AppContext:
    """Settings are loaded on first use, so `doctor setup-store` can run
    (and repair) a configuration that does not validate."""

    settings: AppSettings | None = None
    store_factory: Callable[[AppSettings], TodoStore] = ElasticsearchTodoStore

    def load_settings(self) -> AppSettings:
        if self.settings is None:
            self.settings = AppSettings()
        return self.settings


def require_settings(ctx: typer.Context) -> AppSettings:
    """Settings for a command that needs them; invalid config exits 1."""

    app_ctx = ctx.ensure_object(AppContext)
    try:
        return app_ctx.load_settings()
    except ValidationError as exc:
        err_console.print(f"Invalid configuration:\n{exc}", markup=False, highlight=False)
        raise typer.Exit(1)
