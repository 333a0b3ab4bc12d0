"""httpx wrapper.

Centralizes base URL, authentication, timeouts and TLS settings so every
store request behaves the same. Tests pass a `transport` to swap the network
for an `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` bound to the configured store."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": "todo-search/0.1",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.store_url,
        auth=settings.store_auth(),
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        verify=settings.verify_tls,
        headers=headers,
        transport=transport,
    )
