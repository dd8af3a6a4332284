import asyncio

from starr.infrastructure.api_models import PagedResult
from starr.infrastructure.paging import (
    DEFAULT_PER_PAGE,
    adjust_per_page,
    collect_pages,
    set_per_page,
)


class TestSetPerPage:
    def test_no_hint(self):
        assert set_per_page(0, 0) == DEFAULT_PER_PAGE
        assert set_per_page(20, 0) == 20
        assert set_per_page(5000, 1) == DEFAULT_PER_PAGE

    def test_hint_capped_by_records(self):
        assert set_per_page(20, 100) == 20
        assert set_per_page(0, 100) == 100
        assert set_per_page(300, 100) == 100


class TestAdjustPerPage:
    def test_shrinks_to_what_is_wanted(self):
        assert adjust_per_page(records=25, total=100, collected=20, per_page=20) == 5

    def test_shrinks_to_what_exists(self):
        assert adjust_per_page(records=0, total=45, collected=40, per_page=20) == 5

    def test_unchanged(self):
        assert adjust_per_page(records=0, total=100, collected=20, per_page=20) == 20


def _server(total: int):
    calls = []

    async def fetch(page: int, size: int) -> PagedResult[int]:
        start = sum(s for _, s in calls)
        calls.append((page, size))
        records = list(range(start, min(start + size, total)))
        return PagedResult[int](
            page=page,
            page_size=size,
            sort_key="date",
            total_records=total,
            records=records,
        )

    return fetch, calls


class TestCollectPages:
    def test_all_records(self):
        fetch, calls = _server(25)

        result = asyncio.run(collect_pages(fetch, records=0, per_page=10))

        assert result.records == list(range(25))
        assert result.page == 1
        assert result.page_size == 25
        assert result.sort_key == "date"
        assert calls == [(1, 10), (2, 10), (3, 5)]

    def test_stops_at_records_wanted(self):
        fetch, calls = _server(100)

        result = asyncio.run(collect_pages(fetch, records=15, per_page=10))

        assert len(result.records) == 15
        assert calls == [(1, 10), (2, 5)]

    def test_empty_server(self):
        fetch, calls = _server(0)

        result = asyncio.run(collect_pages(fetch, records=20))

        assert result.records == []
        assert calls == [(1, 20)]


def _offset_server(total: int):
    """Answers page N of size S with the records at offset (N - 1) * S."""
    calls = []

    async def fetch(page: int, size: int) -> PagedResult[int]:
        calls.append((page, size))
        start = (page - 1) * size
        return PagedResult[int](
            page=page,
            page_size=size,
            total_records=total,
            records=list(range(start, min(start + size, total))),
        )

    return fetch, calls


class TestShrinkingPages:
    def test_second_page_overlaps_after_shrink(self):
        fetch, calls = _offset_server(100)

        result = asyncio.run(collect_pages(fetch, records=15, per_page=10))

        assert calls == [(1, 10), (2, 5)]
        assert result.records == list(range(10)) + [5, 6, 7, 8, 9]

    def test_one_page_when_per_page_covers_records(self):
        fetch, calls = _offset_server(100)

        result = asyncio.run(collect_pages(fetch, records=15, per_page=15))

        assert calls == [(1, 15)]
        assert result.records == list(range(15))
