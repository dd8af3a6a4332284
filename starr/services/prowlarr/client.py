"""
The Prowlarr handle: indexer management and cross-indexer search, on API v1.
"""

from typing import List

from ...application.domain import App
from ...infrastructure.base_client import BaseClient
from ...infrastructure.request import Request
from ...infrastructure.resources import (
    CommandMixin,
    DownloadClientMixin,
    IndexerMixin,
    NotificationMixin,
    SystemMixin,
    TagMixin,
)

from . import models


class Prowlarr(
    TagMixin,
    SystemMixin,
    CommandMixin,
    IndexerMixin,
    DownloadClientMixin,
    NotificationMixin,
    BaseClient,
):
    """Async handle for one Prowlarr instance."""

    app = App.PROWLARR
    api_version = "v1"

    _indexer_output = models.IndexerOutput
    _notification_output = models.NotificationOutput

    async def search(self, search: models.SearchInput) -> List[models.Search]:
        return await self._list("search", models.Search, search.params())

    async def grab(self, guid: str, indexer_id: int) -> models.Search:
        """Sends a search result to the download client it is routed to."""
        return await self.grab_search(models.Search(guid=guid, indexer_id=indexer_id))

    async def grab_search(self, search: models.Search) -> models.Search:
        body = models.Grab(guid=search.guid, indexer_id=search.indexer_id)
        return await self.post_into(Request("search", body=body), models.Search)
