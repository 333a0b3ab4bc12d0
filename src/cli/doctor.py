"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console

from adapters.elasticsearch_store import ElasticsearchTodoStore
from cli.context import require_settings
from cli.ui_components import build_status_table
from core.config import write_user_env_vars
from core.domain.errors import StoreError

app = typer.Typer(no_args_is_help=True, help="Store diagnostics and configuration checks.")

_console = Console()


def _check_cluster(store: ElasticsearchTodoStore) -> tuple[bool, str]:
    try:
        info = store.info()
    except StoreError as exc:
        return False, str(exc)
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"
    version = info.get("version", {}).get("number", "?")
    return True, f"{info.get('cluster_name', 'unknown cluster')} (version {version})"


def _check_index(store: ElasticsearchTodoStore) -> tuple[bool, str]:
    try:
        exists = store.index_exists()
    except (StoreError, httpx.HTTPError) as exc:
        return False, str(exc)
    if exists:
        return True, "present"
    return True, "missing (created on first `todo add`)"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics against the configured store."""

    settings = require_settings(ctx)

    table = build_status_table("todo doctor")

    table.add_row("Store URL", "OK", settings.store_url)
    if settings.store_username and settings.store_password:
        table.add_row("Credentials", "OK", f"user {settings.store_username}")
    elif settings.store_username:
        table.add_row("Credentials", "WARN", "user set but TODO_STORE_PASSWORD is empty")
    else:
        table.add_row("Credentials", "OPTIONAL", "authentication disabled")

    with ElasticsearchTodoStore(settings) as store:
        ok_cluster, detail_cluster = _check_cluster(store)
        table.add_row("Cluster", "OK" if ok_cluster else "FAIL", detail_cluster)

        if ok_cluster:
            ok_index, detail_index = _check_index(store)
            table.add_row(f"Index '{settings.index_name}'", "OK" if ok_index else "FAIL", detail_index)

    _console.print(table)

    if not ok_cluster:
        raise typer.Exit(1)


@app.command(name="setup-store")
def setup_store() -> None:
    """Interactive store setup (stores connection settings in the user config .env)."""

    host = typer.prompt("Store host", default="localhost", show_default=True).strip()
    port = typer.prompt("Store port", default=9200, type=int, show_default=True)
    scheme = typer.prompt("Scheme (http/https)", default="http", show_default=True).strip().lower()
    username = typer.prompt("Username", default="elastic", show_default=True).strip()
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=False).strip()

    if not host:
        raise typer.BadParameter("host is required")
    if scheme not in {"http", "https"}:
        raise typer.BadParameter("scheme must be http or https")

    env_path = write_user_env_vars(
        {
            "TODO_STORE_HOST": host,
            "TODO_STORE_PORT": str(port),
            "TODO_STORE_SCHEME": scheme,
            "TODO_STORE_USERNAME": username,
            "TODO_STORE_PASSWORD": password,
        }
    )

    _console.print(f"[green]Saved store config to:[/green] {env_path}")
