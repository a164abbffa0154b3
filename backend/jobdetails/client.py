"""HTTP client for the entity REST resources.

`EntityClient` is the Python counterpart of a per-entity client-side
service: it talks to one `/api/<entities>` collection over an
`httpx.Client`. Any `httpx.Client` works, including FastAPI's
`TestClient`.
"""

from __future__ import annotations

from typing import Any, Sequence

import httpx

from .config import settings


def build_client(base_url: str, *, timeout: float | None = None, extra_headers: dict[str, str] | None = None) -> httpx.Client:
    """Create an `httpx.Client` with JSON defaults and the configured timeout."""
    headers = {"Accept": "application/json"}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS),
        headers=headers,
    )


class EntityClient:
    def __init__(self, http: httpx.Client, resource_url: str):
        self.http = http
        self.resource_url = resource_url.rstrip("/")

    def find(self, entity_id: int) -> dict[str, Any]:
        r = self.http.get(f"{self.resource_url}/{entity_id}")
        r.raise_for_status()
        return r.json()

    def query(self, page: int | None = None, size: int | None = None, sort: Sequence[str] | None = None) -> tuple[list[dict[str, Any]], int]:
        """Fetch one page; returns the items and the `X-Total-Count` value."""
        params: list[tuple[str, Any]] = []
        if page is not None:
            params.append(("page", page))
        if size is not None:
            params.append(("size", size))
        for s in sort or ():
            params.append(("sort", s))
        r = self.http.get(self.resource_url, params=params)
        r.raise_for_status()
        total = int(r.headers.get("X-Total-Count", len(r.json())))
        return r.json(), total

    def create(self, entity: dict[str, Any]) -> dict[str, Any]:
        r = self.http.post(self.resource_url, json=entity)
        r.raise_for_status()
        return r.json()

    def update(self, entity: dict[str, Any]) -> dict[str, Any]:
        r = self.http.put(self.resource_url, json=entity)
        r.raise_for_status()
        return r.json()

    def delete(self, entity_id: int) -> None:
        r = self.http.delete(f"{self.resource_url}/{entity_id}")
        r.raise_for_status()
