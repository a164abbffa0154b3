"""Page requests, page results and pagination response headers.

`Pageable` is built from the `page`, `size` and `sort` query parameters.
`sort` may be repeated; each value is `field[,field...][,asc|desc]` and a
trailing direction applies to every field listed before it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar
from urllib.parse import urlencode

T = TypeVar("T")

_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class SortOrder:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class Pageable:
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    content: List[T]
    total: int
    page: int
    size: int
    sort: tuple[SortOrder, ...] = field(default_factory=tuple)

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return int(math.ceil(self.total / self.size))


def parse_sort(values: Sequence[str] | None) -> tuple[SortOrder, ...]:
    """Turn raw `sort` query values into `SortOrder`s.

    Empty tokens are ignored. Field names are validated later by the
    repository, which knows the entity's columns.
    """
    orders: list[SortOrder] = []
    for raw in values or ():
        tokens = [t.strip() for t in raw.split(",") if t.strip()]
        if not tokens:
            continue
        descending = False
        if tokens[-1].lower() in _DIRECTIONS:
            descending = tokens.pop().lower() == "desc"
        orders.extend(SortOrder(field=name, descending=descending) for name in tokens)
    return tuple(orders)


def build_pageable(page: int, size: int | None, sort: Sequence[str] | None, *, default_size: int, max_size: int) -> Pageable:
    """Clamp page/size to sane bounds and parse the sort parameters."""
    page = max(0, page)
    size = default_size if size is None or size < 1 else min(size, max_size)
    return Pageable(page=page, size=size, sort=parse_sort(sort))


def _page_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?{urlencode({'page': page, 'size': size})}"


def generate_pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    """Return `X-Total-Count` and `Link` headers for a result page.

    Link relations are emitted in the order next, prev, last, first.
    """
    links = []
    if page.page + 1 < page.total_pages:
        links.append(f'<{_page_uri(base_url, page.page + 1, page.size)}>; rel="next"')
    if page.page > 0:
        links.append(f'<{_page_uri(base_url, page.page - 1, page.size)}>; rel="prev"')
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(f'<{_page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_url, 0, page.size)}>; rel="first"')
    return {
        "X-Total-Count": str(page.total),
        "Link": ",".join(links),
    }
