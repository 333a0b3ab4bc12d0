"""Todo operations.

The CLI delegates every command to `TodoService`, which keeps printing and
exit codes out of the core logic and lets tests drive it with a fake store.
"""

from __future__ import annotations

import logging

from core.domain.models import Item
from core.interfaces.store import TodoStore

logger = logging.getLogger(__name__)


class TodoService:
    """List, add, check and clear todo items in a `TodoStore`."""

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    def list_items(self, term: str = "") -> list[Item]:
        items = self._store.search_term(term)
        logger.debug("list term=%r -> %d item(s)", term, len(items))
        return items

    def add_item(self, text: str) -> Item:
        """Create a new, unchecked item. Duplicates and empty text are allowed."""

        item = Item(text=text, done=False)
        doc_id = self._store.index_item(item)
        logger.debug("added item id=%s text=%r", doc_id, text)
        return item

    def check_items(self, term: str) -> int:
        """Mark every item matching `term` as done in a single request."""

        updated = self._store.update_done_by_term(term)
        logger.debug("check term=%r -> %d updated", term, updated)
        return updated

    def clear_items(self) -> int:
        deleted = self._store.delete_all()
        logger.debug("clear -> %d deleted", deleted)
        return deleted
