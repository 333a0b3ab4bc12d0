"""Errors raised across the core/adapter boundary."""

from __future__ import annotations

from typing import Any


class StoreError(Exception):
    """The store answered, but with an error status.

    `error` holds the store's structured error object (`{"type": ...,
    "reason": ...}`) when the response carried one; otherwise it is None and
    `body` keeps the raw response text.
    """

    def __init__(
        self,
        status: int,
        error: dict[str, Any] | None = None,
        body: str = "",
    ) -> None:
        self.status = status
        self.error = error
        self.body = body
        reason = (error or {}).get("reason") or body or "no detail"
        super().__init__(f"store returned HTTP {status}: {reason}")

    @property
    def is_structured(self) -> bool:
        return self.error is not None
