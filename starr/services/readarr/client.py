"""
The Readarr handle: authors, books and book files, on API v1.
"""

from typing import List

from ...application.domain import App
from ...infrastructure.base_client import BaseClient, require_id
from ...infrastructure.request import Request, join_path
from ...infrastructure.resources import (
    CalendarMixin,
    CommandMixin,
    DownloadClientMixin,
    ExclusionMixin,
    FeedMixin,
    HistoryMixin,
    ImportListMixin,
    IndexerBulkMixin,
    IndexerMixin,
    ManualImportMixin,
    MetadataProfileMixin,
    NotificationMixin,
    QualityProfileMixin,
    QueueMixin,
    RemotePathMappingMixin,
    RootFolderMixin,
    SettingsMixin,
    SystemMixin,
    TagMixin,
)

from . import models


class Readarr(
    TagMixin,
    SystemMixin,
    CommandMixin,
    IndexerMixin,
    IndexerBulkMixin,
    DownloadClientMixin,
    NotificationMixin,
    ImportListMixin,
    QualityProfileMixin,
    MetadataProfileMixin,
    RootFolderMixin,
    RemotePathMappingMixin,
    SettingsMixin,
    QueueMixin,
    HistoryMixin,
    CalendarMixin,
    FeedMixin,
    ExclusionMixin,
    ManualImportMixin,
    BaseClient,
):
    """Async handle for one Readarr instance."""

    app = App.READARR
    api_version = "v1"

    _notification_output = models.NotificationOutput
    _import_list_output = models.ImportListOutput
    _naming_model = models.Naming
    _media_management_model = models.MediaManagement
    _indexer_config_model = models.IndexerConfig
    _metadata_profile_model = models.MetadataProfile
    _queue_record = models.QueueRecord
    _queue_defaults = {"includeUnknownAuthorItems": "true"}
    _history_record = models.HistoryRecord
    _fail_with_form = True
    _calendar_model = models.Book
    _exclusion_model = models.Exclusion
    _manual_import_output = models.ManualImportOutput

    # --- Authors ---

    async def get_author_by_id(self, author_id: int) -> models.Author:
        return await self._get_one("author", author_id, models.Author)

    async def update_author(
        self, author_id: int, author: models.Author, move_files: bool = True
    ) -> models.Author:
        require_id(author_id, "author ID")
        body = author.model_copy(update={"id": author_id})
        return await self.put_into(
            Request(join_path("author", str(author_id)), {"moveFiles": move_files}, body=body),
            models.Author,
        )

    # --- Books ---

    async def get_book(self, grid_id: str = "") -> List[models.Book]:
        """Lists books, or only the one whose title slug is `grid_id`."""
        query = {"titleSlug": grid_id} if grid_id else None
        return await self._list("book", models.Book, query)

    async def get_book_by_id(self, book_id: int) -> models.Book:
        return await self._get_one("book", book_id, models.Book)

    async def add_book(self, book: models.AddBookInput) -> models.Book:
        return await self.post_into(Request("book", body=book), models.Book)

    async def update_book(
        self, book_id: int, book: models.Book, move_files: bool = True
    ) -> models.Book:
        require_id(book_id, "book ID")
        body = book.model_copy(update={"id": book_id})
        return await self.put_into(
            Request(join_path("book", str(book_id)), {"moveFiles": move_files}, body=body),
            models.Book,
        )

    async def lookup(self, term: str) -> List[models.Book]:
        """Searches for books by name. An empty term returns nothing."""
        if not term:
            return []
        return await self._list("book/lookup", models.Book, {"term": term})

    # --- Book Files ---

    async def get_book_files_for_author(self, author_id: int) -> List[models.BookFile]:
        return await self._list("bookfile", models.BookFile, {"authorId": author_id})

    async def get_book_files_for_book(self, book_id: int) -> List[models.BookFile]:
        return await self._list("bookfile", models.BookFile, {"bookId": book_id})

    async def get_book_files(self, file_ids: List[int]) -> List[models.BookFile]:
        if not file_ids:
            return []
        return await self._list("bookfile", models.BookFile, {"bookFileIds": list(file_ids)})

    async def update_book_file(self, book_file: models.BookFile) -> models.BookFile:
        return await self._update("bookfile", book_file, models.BookFile)

    async def delete_book_file(self, file_id: int) -> None:
        await self._delete("bookfile", file_id)

    async def delete_book_files(self, *file_ids: int) -> None:
        await self.delete_any(
            Request("bookfile/bulk", body={"bookFileIds": list(file_ids)})
        )

    async def get_rename(self, author_id: int, book_id: int = -1) -> List[models.Rename]:
        query = [("authorId", author_id)]
        if book_id != -1:
            query.append(("bookId", book_id))
        return await self._list("rename", models.Rename, query)
