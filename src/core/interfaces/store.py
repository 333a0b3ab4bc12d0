"""Todo store contract.

A structural Protocol: the Elasticsearch adapter and the in-memory fake used
in tests both satisfy it without inheriting from anything.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Item


@runtime_checkable
class TodoStore(Protocol):
    """The four requests the app ever sends to the store.

    Each method issues exactly one request. Failures raise
    `core.domain.errors.StoreError` (store answered with an error) or
    `httpx.HTTPError` (transport failure).
    """

    def search_term(self, term: str) -> list[Item]:
        """Items whose `text` field matches `term` exactly; all items for an empty term."""

        ...

    def index_item(self, item: Item) -> str:
        """Store `item` as a new document and return the store-assigned id."""

        ...

    def update_done_by_term(self, term: str) -> int:
        """Set `done = true` on every item matching `term`; return how many were updated."""

        ...

    def delete_all(self) -> int:
        """Delete every item; return how many were deleted."""

        ...
