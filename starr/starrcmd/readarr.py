"""
Readarr custom-script event records.
"""

import dataclasses
from datetime import datetime
from typing import ClassVar, List

from ..application.domain import App

from .parser import Event, env


@dataclasses.dataclass(frozen=True)
class ReadarrApplicationUpdate:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.APPLICATION_UPDATE

    previous_version: str = env("readarr_update_previousversion")
    new_version: str = env("readarr_update_newversion")
    message: str = env("readarr_update_message")


@dataclasses.dataclass(frozen=True)
class ReadarrHealthIssue:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.HEALTH_ISSUE

    message: str = env("readarr_health_issue_message")
    issue_type: str = env("readarr_health_issue_type")
    wiki: str = env("readarr_health_issue_wiki")
    level: str = env("readarr_health_issue_level")


@dataclasses.dataclass(frozen=True)
class ReadarrGrab:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.GRAB

    release_group: str = env("readarr_release_releasegroup")
    author_name: str = env("readarr_author_name")
    release_title: str = env("readarr_release_title")
    grids: str = env("readarr_release_grids")
    download_client: str = env("readarr_download_client")
    quality_version: str = env("readarr_release_qualityversion")
    release_indexer: str = env("readarr_release_indexer")
    download_id: str = env("readarr_download_id")
    quality: str = env("readarr_release_quality")
    titles: List[str] = env("readarr_release_booktitles", sep="|")
    ids: List[int] = env("readarr_release_bookids", sep="|")
    release_dates: List[datetime] = env("readarr_release_bookreleasedates", sep=",")
    author_grid: int = env("readarr_author_grid")
    size: int = env("readarr_release_size")
    book_count: int = env("readarr_release_bookcount")
    author_id: int = env("readarr_author_id")


@dataclasses.dataclass(frozen=True)
class ReadarrBookDelete:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.BOOK_DELETE

    author_name: str = env("readarr_author_name")
    title: str = env("readarr_book_title")
    path: str = env("readarr_author_path")
    author_id: str = env("readarr_author_id")
    grid: int = env("readarr_book_goodreadsid")
    author_grid: int = env("readarr_author_goodreadsid")
    id: int = env("readarr_book_id")
    deleted_files: bool = env("readarr_book_deletedfiles")


@dataclasses.dataclass(frozen=True)
class ReadarrBookFileDelete:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.BOOK_FILE_DELETE

    reason: str = env("readarr_delete_reason")
    author_name: str = env("readarr_author_name")
    id: str = env("readarr_book_id")
    title: str = env("readarr_book_title")
    path: str = env("readarr_bookfile_path")
    quality: str = env("readarr_bookfile_quality")
    release_group: str = env("readarr_bookfile_releasegroup")
    scene_name: str = env("readarr_bookfile_scenename")
    edition_name: str = env("readarr_bookfile_edition_name")
    edition_isbn13: str = env("readarr_bookfile_edition_isbn13")
    edition_asin: str = env("readarr_bookfile_edition_asin")
    author_id: int = env("readarr_author_id")
    author_grid: int = env("readarr_author_goodreadsid")
    grid: int = env("readarr_book_goodreadsid")
    file_id: int = env("readarr_bookfile_id")
    quality_version: int = env("readarr_bookfile_qualityversion")
    edition_id: int = env("readarr_bookfile_edition_id")
    edition_grid: int = env("readarr_bookfile_edition_goodreadsid")


@dataclasses.dataclass(frozen=True)
class ReadarrAuthorDelete:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.AUTHOR_DELETE

    author_name: str = env("readarr_author_name")
    path: str = env("readarr_author_path")
    author_id: int = env("readarr_author_id")
    author_grid: int = env("readarr_author_goodreadsid")
    deleted_files: bool = env("readarr_author_deletedfiles")


@dataclasses.dataclass(frozen=True)
class ReadarrRename:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.RENAME

    author_name: str = env("readarr_author_name")
    path: str = env("readarr_author_path")
    author_id: int = env("readarr_author_id")
    author_grid: int = env("readarr_author_grid")


@dataclasses.dataclass(frozen=True)
class ReadarrDownload:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.DOWNLOAD

    author_name: str = env("readarr_author_name")
    path: str = env("readarr_author_path")
    title: str = env("readarr_book_title")
    release_date: str = env("readarr_book_releasedate")
    download_client: str = env("readarr_download_client")
    download_id: str = env("readarr_download_id")
    added_book_paths: List[str] = env("readarr_addedbookpaths", sep="|")
    deleted_paths: List[str] = env("readarr_deletedpaths", sep="|")
    author_id: int = env("readarr_author_id")
    author_grid: int = env("readarr_author_grid")
    id: int = env("readarr_book_id")
    grid: int = env("readarr_book_grid")


@dataclasses.dataclass(frozen=True)
class ReadarrTrackRetag:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.TRACK_RETAG

    release_date: datetime = env("readarr_book_releasedate")
    author_name: str = env("readarr_author_name")
    path: str = env("readarr_author_path")
    title: str = env("readarr_book_title")
    file_path: str = env("readarr_bookfile_path")
    quality: str = env("readarr_bookfile_quality")
    release_group: str = env("readarr_bookfile_releasegroup")
    scene_name: str = env("readarr_bookfile_scenename")
    tags_diff: str = env("readarr_tags_diff")
    author_id: int = env("readarr_author_id")
    author_grid: int = env("readarr_author_grid")
    id: int = env("readarr_book_id")
    grid: int = env("readarr_book_grid")
    file_id: int = env("readarr_bookfile_id")
    quality_version: int = env("readarr_bookfile_qualityversion")
    scrubbed: bool = env("readarr_tags_scrubbed")


@dataclasses.dataclass(frozen=True)
class ReadarrTest:
    app: ClassVar[App] = App.READARR
    event: ClassVar[Event] = Event.TEST
