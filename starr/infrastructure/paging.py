"""
Collects a number of records from a paged endpoint.

History, queue and blocklist endpoints answer one page at a time. The helpers
here turn a "fetch page N of size S" coroutine into a single aggregated
result holding as many records as the caller asked for.
"""

import logging
from typing import Awaitable, Callable, TypeVar

from .api_models import PagedResult

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=PagedResult)

# Page size used when the caller gives no usable hint.
DEFAULT_PER_PAGE = 500

PageFetcher = Callable[[int, int], Awaitable[P]]


def set_per_page(records: int, per_page: int) -> int:
    """
    Picks a usable first page size.

    Args:
        records: Number of records wanted; 0 means all of them.
        per_page: Caller's hint; values of 1 or less mean "choose for me".
    """
    if per_page <= 1:
        if records > DEFAULT_PER_PAGE or records == 0:
            return DEFAULT_PER_PAGE
        return records

    if per_page > records and records != 0:
        return records

    return per_page


def adjust_per_page(records: int, total: int, collected: int, per_page: int) -> int:
    """Shrinks the next page so it asks for no more than is wanted or exists."""
    remaining = records - collected
    if per_page > remaining > 0:
        per_page = remaining

    remaining = total - collected
    if per_page > remaining:
        per_page = remaining

    return per_page


async def collect_pages(fetch: PageFetcher, records: int = 0, per_page: int = 0) -> P:
    """
    Fetches pages in ascending order until enough records are gathered.

    The loop stops once the collected count reaches the server total, the
    requested count (when non-zero), or a page comes back empty. The result
    carries the final page's sort values; its `page_size` is set to the
    server total.

    The page size can shrink after the first page while the page number still
    counts up in units of the new size. Page 2 may then cover offsets already
    read, so the result can hold repeated records. Callers that need distinct
    records should pass `per_page >= records`, which fits them in one page.

    Args:
        fetch: Coroutine function taking (page, page_size).
        records: Number of records wanted; 0 means all.
        per_page: Page size hint.

    Returns:
        The aggregated result. Errors from `fetch` propagate unchanged.
    """

    per_page = set_per_page(records, per_page)
    collected = []
    page = 1

    while True:
        current = await fetch(page, per_page)
        collected.extend(current.records)

        if (
            len(collected) >= current.total_records
            or (records != 0 and len(collected) >= records)
            or not current.records
        ):
            break

        per_page = adjust_per_page(records, current.total_records, len(collected), per_page)
        page += 1

    if records > 0:
        collected = collected[:records]

    logger.debug(
        f"Collected {len(collected)} of {current.total_records} records in {page} page(s)."
    )

    return current.model_copy(
        update={
            "page": 1,
            "page_size": current.total_records,
            "records": collected,
        }
    )
