"""Core configuration.

Settings come from environment variables (pydantic-settings) so that the
store credentials never live in the code. The per-user `.env` lets the
installed CLI work without a project checkout.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "todo-search"


def get_user_config_dir() -> Path:
    """%APPDATA%, ~/Library/Application Support or $XDG_CONFIG_HOME (~/.config)."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=VALUE pairs of a .env file; comments and lines without '=' are skipped."""

    if not path.exists():
        return {}
    pairs: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if sep and key and not key.startswith("#"):
            pairs[key] = value.strip().strip("\"'")
    return pairs


def write_user_env_vars(values: dict[str, str], env_path: Path | None = None) -> Path:
    """Merge `values` into the user's .env (private on POSIX: it holds the password)."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = {**read_env_file(env_path), **values}
    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# {APP_DIR_NAME} user config (.env)\n{body}", encoding="utf-8")
    if not sys.platform.startswith("win"):
        env_path.chmod(0o600)
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Every field maps to a `TODO_<FIELD>` environment variable, e.g.
    `TODO_STORE_PASSWORD` or `TODO_INDEX_NAME`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    store_host: str = Field(
        default="localhost",
        min_length=1,
        description="Host name of the search store.",
    )
    store_port: int = Field(
        default=9200,
        ge=1,
        le=65535,
        description="HTTP port of the search store.",
    )
    store_scheme: str = Field(
        default="http",
        pattern=r"^https?$",
        description="URL scheme used to reach the store (http/https).",
    )
    store_username: str | None = Field(
        default="elastic",
        description="Basic-auth user. Leave empty to disable authentication.",
    )
    store_password: SecretStr | None = Field(
        default=None,
        description="Basic-auth password. Never hard-coded; supply via env or .env.",
    )
    index_name: str = Field(
        default="todo",
        min_length=1,
        description="Index (collection) holding the todo items.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    verify_tls: bool = Field(
        default=True,
        description="Verify server certificates when store_scheme is https.",
    )
    refresh_on_write: bool = Field(
        default=True,
        description="Ask the store to refresh after writes so `list` sees them at once.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for diagnostics on stderr.",
    )

    @property
    def store_url(self) -> str:
        return f"{self.store_scheme}://{self.store_host}:{self.store_port}"

    def store_auth(self) -> tuple[str, str] | None:
        """Basic-auth pair for httpx, or None when no user is configured."""

        if not self.store_username:
            return None
        password = self.store_password.get_secret_value() if self.store_password else ""
        return (self.store_username, password)
