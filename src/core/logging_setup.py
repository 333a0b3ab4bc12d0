"""Logging configuration for the CLI.

Diagnostics go to stderr through Rich so they never mix with command output
(item lines, usage text) on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_NOISY_LIBRARIES = ("httpx", "httpcore")


def resolve_level(name: str | None, *, verbose: bool = False) -> int:
    """Map a level name (`"info"`, `"DEBUG"`...) to a logging constant."""

    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(str(name or "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int = logging.WARNING) -> None:
    """Configure the root logger once, very early in the command callback."""

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates on repeated invocations.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    for name in _NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
