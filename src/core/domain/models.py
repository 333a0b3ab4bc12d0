"""Domain models (Pydantic v2).

The domain knows nothing about HTTP or the CLI: these models describe *what*
a todo item is, the adapters decide *how* it is stored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Item(BaseModel):
    """An entry in the todo list.

    The same shape is used as the stored document (`_source`), so extra
    fields written by other tools are ignored when decoding.
    """

    model_config = ConfigDict(extra="ignore")

    text: str = Field(
        default="",
        description="Free-form content of the todo entry.",
    )
    done: bool = Field(
        default=False,
        description="Whether the entry has been checked off.",
    )

    @classmethod
    def from_hit(cls, hit: dict[str, Any]) -> "Item":
        """Build an `Item` from one search hit (`hits.hits[n]`)."""

        source = hit.get("_source")
        return cls.model_validate(source if isinstance(source, dict) else {})

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def __str__(self) -> str:
        return f"[{'X' if self.done else ' '}] {self.text}"
