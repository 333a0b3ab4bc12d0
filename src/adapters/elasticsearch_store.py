"""Elasticsearch-backed todo store.

Implements `core.interfaces.store.TodoStore` over the REST API:
`_search` with a term query, `_doc` to index, `_update_by_query` with a
painless script and `_delete_by_query`. One HTTP request per operation.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import StoreError
from core.domain.models import Item

logger = logging.getLogger(__name__)

CHECK_SCRIPT = "ctx._source.done = true"


def term_query(term: str) -> dict[str, Any]:
    """Exact-match query on `text`. An empty term means "no filter"."""

    if term == "":
        return {"match_all": {}}
    return {"term": {"text": term}}


def _decode_error(response: httpx.Response) -> StoreError:
    try:
        payload = response.json()
    except ValueError:
        return StoreError(response.status_code, None, response.text)

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        status = payload.get("status")
        return StoreError(
            status if isinstance(status, int) else response.status_code,
            payload["error"],
            response.text,
        )
    return StoreError(response.status_code, None, response.text)


def _malformed(response: httpx.Response) -> StoreError:
    """A success status with a body this client cannot read."""

    return StoreError(response.status_code, None, response.text)


def _decode_body(response: httpx.Response) -> dict[str, Any]:
    if not response.content:
        return {}
    try:
        payload = response.json()
    except ValueError as exc:
        raise _malformed(response) from exc
    return payload if isinstance(payload, dict) else {}


def _count(response: httpx.Response, key: str) -> int:
    value = _decode_body(response).get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _malformed(response)
    return value


class ElasticsearchTodoStore:
    """Todo items stored as documents in one Elasticsearch index."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_client(self._settings)
        self._index = quote(self._settings.index_name, safe="")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ElasticsearchTodoStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _write_params(self) -> dict[str, str]:
        return {"refresh": "true"} if self._settings.refresh_on_write else {}

    def _send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s %s", method, path, json)
        response = self._client.request(method, path, json=json, params=params)
        if not response.is_success:
            raise _decode_error(response)
        return response

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        return _decode_body(self._send(method, path, **kwargs))

    def search_term(self, term: str) -> list[Item]:
        response = self._send(
            "POST",
            f"/{self._index}/_search",
            json={"query": term_query(term)},
        )
        hits = _decode_body(response).get("hits")
        hits = hits.get("hits") if isinstance(hits, dict) else None
        if not isinstance(hits, list):
            return []
        try:
            return [Item.from_hit(hit) for hit in hits if isinstance(hit, dict)]
        except ValidationError as exc:
            raise _malformed(response) from exc

    def index_item(self, item: Item) -> str:
        payload = self._request(
            "POST",
            f"/{self._index}/_doc",
            json=item.to_document(),
            params=self._write_params(),
        )
        return str(payload.get("_id") or "")

    def update_done_by_term(self, term: str) -> int:
        response = self._send(
            "POST",
            f"/{self._index}/_update_by_query",
            json={
                "query": {"term": {"text": term}},
                "script": {"source": CHECK_SCRIPT, "lang": "painless"},
            },
            params=self._write_params(),
        )
        return _count(response, "updated")

    def delete_all(self) -> int:
        response = self._send(
            "POST",
            f"/{self._index}/_delete_by_query",
            json={"query": {"match_all": {}}},
            params=self._write_params(),
        )
        return _count(response, "deleted")

    # Diagnostics (used by `todo doctor`).

    def info(self) -> dict[str, Any]:
        """Cluster banner from `GET /` (name, version...)."""

        return self._request("GET", "/")

    def index_exists(self) -> bool:
        response = self._client.head(f"/{self._index}")
        if response.status_code == 404:
            return False
        if not response.is_success:
            raise _decode_error(response)
        return True
