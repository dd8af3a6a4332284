import asyncio

from conftest import Recorder, make_handle
from starr.services.prowlarr import models
from starr.services.prowlarr.client import Prowlarr


class TestSearchInput:
    def test_defaults(self):
        assert models.SearchInput(query="ubuntu").params() == [
            ("query", "ubuntu"),
            ("type", "search"),
            ("limit", "100"),
            ("offset", "0"),
        ]

    def test_categories_and_indexers_repeat(self):
        search = models.SearchInput(
            query="ubuntu", type="tvsearch", indexer_ids=[1, 2], categories=[5000], limit=10
        )

        assert search.params()[-3:] == [
            ("categories", "5000"),
            ("indexerIds", "1"),
            ("indexerIds", "2"),
        ]


class TestProwlarr:
    def test_search(self):
        recorder = Recorder(
            payload=[{"guid": "abc", "indexerId": 3, "title": "Ubuntu 22.04", "categories": [{"id": 4000, "name": "PC", "subCategories": [{"id": 4010}]}]}]
        )
        prowlarr = make_handle(Prowlarr, recorder, url="http://index.local:9696")

        results = asyncio.run(prowlarr.search(models.SearchInput(query="ubuntu")))

        assert recorder.last.url.path == "/api/v1/search"
        assert recorder.last.url.query == b"query=ubuntu&type=search&limit=100&offset=0"
        assert results[0].indexer_id == 3
        assert results[0].categories[0].sub_categories[0].id == 4010

    def test_grab(self):
        recorder = Recorder(payload={"guid": "abc", "indexerId": 3})
        prowlarr = make_handle(Prowlarr, recorder)

        result = asyncio.run(prowlarr.grab("abc", 3))

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v1/search"
        assert recorder.last_json() == {"guid": "abc", "indexerId": 3}
        assert result.guid == "abc"
