"""
Readarr wire models and query filters.
"""

import dataclasses
from datetime import datetime
from typing import Any, List, Optional

from ...application.domain import QueryPairs, format_calendar_time
from ...infrastructure import api_models as common
from ...infrastructure.api_models import StarrModel
from ...infrastructure.request import render_value


class Statistics(StarrModel):
    book_count: Optional[int] = None
    book_file_count: Optional[int] = None
    total_book_count: Optional[int] = None
    size_on_disk: Optional[int] = None
    percent_of_books: Optional[float] = None


# --- Authors ---

class Author(StarrModel):
    id: Optional[int] = None
    status: Optional[str] = None
    author_name: Optional[str] = None
    foreign_author_id: Optional[str] = None
    title_slug: Optional[str] = None
    overview: Optional[str] = None
    links: Optional[List[common.Link]] = None
    images: Optional[List[common.Image]] = None
    path: Optional[str] = None
    quality_profile_id: Optional[int] = None
    metadata_profile_id: Optional[int] = None
    genres: Optional[List[Any]] = None
    clean_name: Optional[str] = None
    sort_name: Optional[str] = None
    tags: Optional[List[int]] = None
    added: Optional[datetime] = None
    ratings: Optional[common.Ratings] = None
    statistics: Optional[Statistics] = None
    last_book: Optional["AuthorBook"] = None
    next_book: Optional["AuthorBook"] = None
    ended: Optional[bool] = None
    monitored: Optional[bool] = None


class AddBookOptions(StarrModel):
    add_type: Optional[str] = None
    search_for_new_book: Optional[bool] = None


class AuthorBook(StarrModel):
    """The abbreviated book an author record points at."""

    id: Optional[int] = None
    author_metadata_id: Optional[int] = None
    foreign_book_id: Optional[str] = None
    title_slug: Optional[str] = None
    title: Optional[str] = None
    release_date: Optional[datetime] = None
    links: Optional[List[common.Link]] = None
    genres: Optional[List[Any]] = None
    ratings: Optional[common.Ratings] = None
    clean_title: Optional[str] = None
    monitored: Optional[bool] = None
    any_edition_ok: Optional[bool] = None
    last_info_sync: Optional[datetime] = None
    added: Optional[datetime] = None
    add_options: Optional[AddBookOptions] = None


Author.model_rebuild()


# --- Books ---

class Edition(StarrModel):
    id: Optional[int] = None
    book_id: Optional[int] = None
    foreign_edition_id: Optional[str] = None
    title_slug: Optional[str] = None
    isbn13: Optional[str] = None
    asin: Optional[str] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    format: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = None
    release_date: Optional[datetime] = None
    images: Optional[List[common.Image]] = None
    links: Optional[List[common.Link]] = None
    ratings: Optional[common.Ratings] = None
    monitored: Optional[bool] = None
    manual_add: Optional[bool] = None
    is_ebook: Optional[bool] = None


class Book(StarrModel):
    id: Optional[int] = None
    title: Optional[str] = None
    series_title: Optional[str] = None
    author_title: Optional[str] = None
    overview: Optional[str] = None
    author_id: Optional[int] = None
    foreign_book_id: Optional[str] = None
    title_slug: Optional[str] = None
    monitored: Optional[bool] = None
    any_edition_ok: Optional[bool] = None
    ratings: Optional[common.Ratings] = None
    release_date: Optional[datetime] = None
    added: Optional[datetime] = None
    page_count: Optional[int] = None
    genres: Optional[List[str]] = None
    author: Optional[Author] = None
    images: Optional[List[common.Image]] = None
    links: Optional[List[common.Link]] = None
    statistics: Optional[Statistics] = None
    editions: Optional[List[Edition]] = None
    disambiguation: Optional[str] = None
    remote_cover: Optional[str] = None


class AddAuthorOptions(StarrModel):
    search_for_missing_books: Optional[bool] = None
    monitored: Optional[bool] = None
    monitor: Optional[str] = None
    books_to_monitor: Optional[List[int]] = None


class AddBookAuthor(StarrModel):
    monitored: Optional[bool] = None
    quality_profile_id: Optional[int] = None
    metadata_profile_id: Optional[int] = None
    foreign_author_id: Optional[str] = None
    root_folder_path: Optional[str] = None
    tags: Optional[List[int]] = None
    add_options: Optional[AddAuthorOptions] = None


class AddBookEdition(StarrModel):
    title: Optional[str] = None
    title_slug: Optional[Any] = None
    images: Optional[List[common.Image]] = None
    foreign_edition_id: Optional[str] = None
    monitored: Optional[bool] = None
    manual_add: Optional[bool] = None


class AddBookInput(StarrModel):
    """
    Adds a book, and its author when the author is not yet known.

    `foreign_book_id` and each edition's `foreign_edition_id` are Goodreads
    identifiers.
    """

    monitored: Optional[bool] = None
    tags: Optional[List[int]] = None
    add_options: Optional[AddBookOptions] = None
    author: Optional[AddBookAuthor] = None
    editions: Optional[List[AddBookEdition]] = None
    foreign_book_id: Optional[str] = None


# --- Book Files ---

class AudioMediaInfo(StarrModel):
    audio_format: Optional[str] = None
    audio_bitrate: Optional[int] = None
    audio_channels: Optional[int] = None
    audio_bits: Optional[int] = None
    audio_sample_rate: Optional[int] = None


class AudioCountry(StarrModel):
    two_letter_code: Optional[str] = None
    name: Optional[str] = None


class AudioTags(StarrModel):
    title: Optional[str] = None
    clean_title: Optional[str] = None
    authors: Optional[List[str]] = None
    author_title: Optional[str] = None
    book_title: Optional[str] = None
    series_title: Optional[str] = None
    series_index: Optional[str] = None
    isbn: Optional[str] = None
    asin: Optional[str] = None
    goodreads_id: Optional[str] = None
    author_mbid: Optional[str] = common.alias("authorMBId")
    book_mbid: Optional[str] = common.alias("bookMBId")
    release_mbid: Optional[str] = common.alias("releaseMBId")
    recording_mbid: Optional[str] = common.alias("recordingMBId")
    track_mbid: Optional[str] = common.alias("trackMBId")
    disc_number: Optional[int] = None
    disc_count: Optional[int] = None
    country: Optional[AudioCountry] = None
    year: Optional[int] = None
    publisher: Optional[str] = None
    label: Optional[str] = None
    source: Optional[str] = None
    catalog_number: Optional[str] = None
    disambiguation: Optional[str] = None
    duration: Optional[str] = None
    quality: Optional[common.Quality] = None
    media_info: Optional[AudioMediaInfo] = None
    track_numbers: Optional[List[int]] = None
    language: Optional[str] = None
    release_group: Optional[str] = None
    release_hash: Optional[str] = None


class BookFile(StarrModel):
    id: Optional[int] = None
    author_id: Optional[int] = None
    book_id: Optional[int] = None
    path: Optional[str] = None
    size: Optional[int] = None
    date_added: Optional[datetime] = None
    quality: Optional[common.Quality] = None
    quality_weight: Optional[int] = None
    quality_cutoff_not_met: Optional[bool] = None
    audio_tags: Optional[AudioTags] = None


# --- Profiles and Settings ---

class MetadataProfile(common.MetadataProfile):
    min_popularity: Optional[float] = None
    skip_missing_date: Optional[bool] = None
    skip_missing_isbn: Optional[bool] = None
    skip_parts_and_sets: Optional[bool] = None
    skip_series_secondary: Optional[bool] = None
    allowed_languages: Optional[str] = None


class Naming(StarrModel):
    id: Optional[int] = None
    rename_books: Optional[bool] = None
    replace_illegal_characters: Optional[bool] = None
    include_author_name: Optional[bool] = None
    include_book_title: Optional[bool] = None
    include_quality: Optional[bool] = None
    replace_spaces: Optional[bool] = None
    colon_replacement_format: Optional[Any] = None
    standard_book_format: Optional[str] = None
    author_folder_format: Optional[str] = None


class MediaManagement(StarrModel):
    id: Optional[int] = None
    skip_free_space_check_when_importing: Optional[bool] = None
    auto_unmonitor_previously_downloaded_books: Optional[bool] = None
    set_permissions_linux: Optional[bool] = None
    create_empty_author_folders: Optional[bool] = None
    delete_empty_folders: Optional[bool] = None
    watch_library_for_changes: Optional[bool] = None
    copy_using_hardlinks: Optional[bool] = None
    import_extra_files: Optional[bool] = None
    minimum_free_space_when_importing: Optional[int] = None
    recycle_bin_cleanup_days: Optional[int] = None
    recycle_bin: Optional[str] = None
    download_propers_and_repacks: Optional[str] = None
    file_date: Optional[str] = None
    rescan_after_refresh: Optional[str] = None
    allow_fingerprinting: Optional[str] = None
    chmod_folder: Optional[str] = None
    chown_group: Optional[str] = None
    extra_file_extensions: Optional[str] = None


class IndexerConfig(StarrModel):
    id: Optional[int] = None
    maximum_size: Optional[int] = None
    minimum_age: Optional[int] = None
    retention: Optional[int] = None
    rss_sync_interval: Optional[int] = None


class NotificationOutput(common.NotificationOutput):
    on_release_import: Optional[bool] = None
    on_author_delete: Optional[bool] = None
    on_book_delete: Optional[bool] = None
    on_book_file_delete: Optional[bool] = None
    on_book_file_delete_for_upgrade: Optional[bool] = None
    on_download_failure: Optional[bool] = None
    on_import_failure: Optional[bool] = None
    on_book_retag: Optional[bool] = None


class ImportListOutput(common.ImportListOutput):
    enable_automatic_add: Optional[bool] = None
    should_monitor_existing: Optional[bool] = None
    should_search: Optional[bool] = None
    metadata_profile_id: Optional[int] = None
    monitor_new_items: Optional[str] = None
    should_monitor: Optional[str] = None


class Exclusion(StarrModel):
    id: Optional[int] = None
    foreign_id: Optional[str] = None
    author_name: Optional[str] = None


class Rename(common.Rename):
    id: Optional[int] = None
    author_id: Optional[int] = None
    book_id: Optional[int] = None
    book_file_id: Optional[int] = None


# --- Paged Records ---

class QueueRecord(common.QueueRecord):
    author_id: Optional[int] = None
    book_id: Optional[int] = None
    download_forced: Optional[bool] = None


class HistoryRecord(common.HistoryRecord):
    book_id: Optional[int] = None
    author_id: Optional[int] = None


# --- Manual Import ---

class ManualImportInput(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    name: Optional[str] = None
    author_id: Optional[int] = common.alias("authorID")
    book_id: Optional[int] = common.alias("bookID")
    foreign_edition_id: Optional[int] = None
    quality: Optional[common.Quality] = None
    release_group: Optional[str] = None
    download_id: Optional[str] = None
    additional_file: Optional[bool] = None
    replace_existing_files: Optional[bool] = None
    disable_release_switching: Optional[bool] = None
    rejections: Optional[List[common.Rejection]] = None


class ManualImportOutput(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    author: Optional[Author] = None
    book: Optional[Book] = None
    foreign_edition_id: Optional[int] = None
    quality: Optional[common.Quality] = None
    release_group: Optional[str] = None
    quality_weight: Optional[int] = None
    download_id: Optional[str] = None
    audio_tags: Optional[AudioTags] = None
    additional_file: Optional[bool] = None
    replace_existing_files: Optional[bool] = None
    disable_release_switching: Optional[bool] = None
    rejections: Optional[List[common.Rejection]] = None


class CommandRequest(StarrModel):
    name: Optional[str] = None
    book_ids: Optional[List[int]] = None
    book_id: Optional[int] = None


# --- Query Filters ---

@dataclasses.dataclass(frozen=True)
class Calendar:
    """Calendar filter; switches left as None are not sent."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    unmonitored: Optional[bool] = None
    include_author: Optional[bool] = None

    def params(self) -> QueryPairs:
        pairs = []
        if self.end:
            pairs.append(("end", format_calendar_time(self.end)))
        if self.include_author is not None:
            pairs.append(("includeAuthor", render_value(self.include_author)))
        if self.start:
            pairs.append(("start", format_calendar_time(self.start)))
        if self.unmonitored is not None:
            pairs.append(("unmonitored", render_value(self.unmonitored)))
        return pairs


@dataclasses.dataclass(frozen=True)
class Feed:
    past_days: int = 0
    future_days: int = 0
    tags: List[int] = dataclasses.field(default_factory=list)
    unmonitored: bool = False

    def params(self) -> QueryPairs:
        return [
            ("futureDays", str(self.future_days)),
            ("pastDays", str(self.past_days)),
            ("tags", ",".join(str(t) for t in self.tags)),
            ("unmonitored", render_value(self.unmonitored)),
        ]


@dataclasses.dataclass(frozen=True)
class ManualImportParams:
    folder: str = ""
    download_id: str = ""
    author_id: int = 0
    replace_existing_files: bool = False
    filter_existing_files: bool = False

    def params(self) -> QueryPairs:
        return [
            ("folder", self.folder),
            ("downloadId", self.download_id),
            ("authorId", str(self.author_id)),
            ("replaceExistingFiles", render_value(self.replace_existing_files)),
            ("filterExistingFiles", render_value(self.filter_existing_files)),
        ]
