"""
Prowlarr wire models.
"""

import dataclasses
from datetime import datetime
from typing import List, Optional

from ...application.domain import QueryPairs
from ...infrastructure import api_models as common
from ...infrastructure.api_models import StarrModel

DEFAULT_SEARCH_LIMIT = 100


class Category(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    sub_categories: Optional[List["Category"]] = None


class Capabilities(StarrModel):
    supports_raw_search: Optional[bool] = None
    limits_max: Optional[int] = None
    limits_default: Optional[int] = None
    search_params: Optional[List[str]] = None
    tv_search_params: Optional[List[str]] = None
    movie_search_params: Optional[List[str]] = None
    music_search_params: Optional[List[str]] = None
    book_search_params: Optional[List[str]] = None
    categories: Optional[List[Category]] = None


class IndexerInput(StarrModel):
    enable: Optional[bool] = None
    redirect: Optional[bool] = None
    priority: Optional[int] = None
    id: Optional[int] = None
    app_profile_id: Optional[int] = None
    config_contract: Optional[str] = None
    implementation: Optional[str] = None
    name: Optional[str] = None
    protocol: Optional[str] = None
    tags: Optional[List[int]] = None
    fields: Optional[List[common.FieldInput]] = None


class IndexerOutput(IndexerInput):
    supports_rss: Optional[bool] = None
    supports_search: Optional[bool] = None
    supports_redirect: Optional[bool] = None
    sort_name: Optional[str] = None
    privacy: Optional[str] = None
    definition_name: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    encoding: Optional[str] = None
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    added: Optional[datetime] = None
    capabilities: Optional[Capabilities] = None
    indexer_urls: Optional[List[str]] = None
    legacy_urls: Optional[List[str]] = None
    fields: Optional[List[common.FieldOutput]] = None


class NotificationOutput(common.NotificationOutput):
    on_grab: Optional[bool] = None
    supports_on_health_issue: Optional[bool] = None
    supports_on_application_update: Optional[bool] = None


class Search(StarrModel):
    """One release found by a Prowlarr search."""

    guid: Optional[str] = None
    age: Optional[int] = None
    age_hours: Optional[float] = None
    age_minutes: Optional[float] = None
    size: Optional[int] = None
    files: Optional[int] = None
    grabs: Optional[int] = None
    indexer_id: Optional[int] = None
    indexer: Optional[str] = None
    title: Optional[str] = None
    sort_title: Optional[str] = None
    imdb_id: Optional[int] = None
    tmdb_id: Optional[int] = None
    tvdb_id: Optional[int] = None
    tv_maze_id: Optional[int] = None
    publish_date: Optional[datetime] = None
    comment_url: Optional[str] = None
    download_url: Optional[str] = None
    info_url: Optional[str] = None
    indexer_flags: Optional[List[str]] = None
    categories: Optional[List[Category]] = None
    protocol: Optional[str] = None
    file_name: Optional[str] = None
    info_hash: Optional[str] = None
    seeders: Optional[int] = None
    leechers: Optional[int] = None


class Grab(StarrModel):
    guid: Optional[str] = None
    indexer_id: Optional[int] = None


class CommandRequest(StarrModel):
    name: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class SearchInput:
    """
    A search across the configured indexers.

    `type` defaults to `search`; a `limit` below 1 becomes 100.
    """

    query: str
    type: str = ""
    indexer_ids: List[int] = dataclasses.field(default_factory=list)
    categories: List[int] = dataclasses.field(default_factory=list)
    limit: int = 0
    offset: int = 0

    def params(self) -> QueryPairs:
        pairs = [
            ("query", self.query),
            ("type", self.type or "search"),
            ("limit", str(self.limit if self.limit >= 1 else DEFAULT_SEARCH_LIMIT)),
            ("offset", str(self.offset)),
        ]
        pairs.extend(("categories", str(c)) for c in self.categories)
        pairs.extend(("indexerIds", str(i)) for i in self.indexer_ids)
        return pairs
