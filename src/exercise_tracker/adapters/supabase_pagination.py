"""Range-based paging over PostgREST's per-request row cap."""

from collections.abc import Callable
from typing import Any

# Hosted Supabase returns at most this many rows per request by default.
DEFAULT_PAGE_SIZE = 1000


def fetch_all(
    build_request: Callable[[], Any],
    page_size: int = DEFAULT_PAGE_SIZE,
    limit: int | None = None,
) -> list[dict[str, object]]:
    """Collect rows page by page until a short page or ``limit`` is reached.

    ``build_request`` must return a fresh, ordered query builder on each call.
    """
    rows: list[dict[str, object]] = []
    while limit is None or len(rows) < limit:
        start = len(rows)
        size = page_size if limit is None else min(page_size, limit - start)
        response = build_request().range(start, start + size - 1).execute()
        page = response.data or []
        rows.extend(page)
        if len(page) < size:
            break
    return rows
