"""
Radarr wire models and query filters.
"""

import dataclasses
import enum
from datetime import datetime
from typing import Any, List, Optional

from ...application.domain import QueryPairs, format_calendar_time
from ...infrastructure import api_models as common
from ...infrastructure.api_models import StarrModel
from ...infrastructure.request import render_value


class Availability(str, enum.Enum):
    """Minimum availability of a movie."""

    TO_BE_ANNOUNCED = "tba"
    ANNOUNCED = "announced"
    IN_CINEMAS = "inCinemas"
    RELEASED = "released"
    DELETED = "deleted"


class ReleaseType(str, enum.Enum):
    CINEMA = "cinemaRelease"
    DIGITAL = "digitalRelease"
    PHYSICAL = "physicalRelease"


# --- Movies ---

class AlternativeTitle(StarrModel):
    id: Optional[int] = None
    movie_metadata_id: Optional[int] = None
    movie_id: Optional[int] = None
    title: Optional[str] = None
    source_type: Optional[str] = None
    source_id: Optional[int] = None
    votes: Optional[int] = None
    vote_count: Optional[int] = None
    language: Optional[common.Value] = None


class Collection(StarrModel):
    name: Optional[str] = None
    tmdb_id: Optional[int] = None
    images: Optional[List[common.Image]] = None


class MediaInfo(StarrModel):
    id: Optional[int] = None
    audio_bitrate: Optional[int] = None
    audio_channels: Optional[float] = None
    audio_codec: Optional[str] = None
    audio_languages: Optional[str] = None
    audio_stream_count: Optional[int] = None
    video_bit_depth: Optional[int] = None
    video_bitrate: Optional[int] = None
    video_codec: Optional[str] = None
    video_dynamic_range_type: Optional[str] = None
    video_fps: Optional[float] = None
    resolution: Optional[str] = None
    run_time: Optional[str] = None
    scan_type: Optional[str] = None
    subtitles: Optional[str] = None


class MovieFile(StarrModel):
    id: Optional[int] = None
    movie_id: Optional[int] = None
    relative_path: Optional[str] = None
    path: Optional[str] = None
    size: Optional[int] = None
    date_added: Optional[datetime] = None
    scene_name: Optional[str] = None
    indexer_flags: Optional[int] = None
    quality: Optional[common.Quality] = None
    custom_formats: Optional[List[common.CustomFormat]] = None
    custom_format_score: Optional[int] = None
    media_info: Optional[MediaInfo] = None
    original_file_path: Optional[str] = None
    quality_cutoff_not_met: Optional[bool] = None
    languages: Optional[List[common.Value]] = None
    release_group: Optional[str] = None
    edition: Optional[str] = None


class AddMovieOptions(StarrModel):
    search_for_movie: Optional[bool] = None
    monitor: Optional[str] = None


class Movie(StarrModel):
    id: Optional[int] = None
    title: Optional[str] = None
    path: Optional[str] = None
    minimum_availability: Optional[Availability] = None
    quality_profile_id: Optional[int] = None
    tmdb_id: Optional[int] = None
    original_title: Optional[str] = None
    alternate_titles: Optional[List[AlternativeTitle]] = None
    secondary_year_source_id: Optional[int] = None
    sort_title: Optional[str] = None
    size_on_disk: Optional[int] = None
    status: Optional[str] = None
    overview: Optional[str] = None
    in_cinemas: Optional[datetime] = None
    physical_release: Optional[datetime] = None
    digital_release: Optional[datetime] = None
    images: Optional[List[common.Image]] = None
    website: Optional[str] = None
    year: Optional[int] = None
    you_tube_trailer_id: Optional[str] = None
    studio: Optional[str] = None
    folder_name: Optional[str] = None
    runtime: Optional[int] = None
    clean_title: Optional[str] = None
    imdb_id: Optional[str] = None
    title_slug: Optional[str] = None
    certification: Optional[str] = None
    genres: Optional[List[str]] = None
    tags: Optional[List[int]] = None
    added: Optional[datetime] = None
    ratings: Optional[Any] = None
    movie_file: Optional[MovieFile] = None
    collection: Optional[Collection] = None
    has_file: Optional[bool] = None
    is_available: Optional[bool] = None
    monitored: Optional[bool] = None
    popularity: Optional[float] = None
    original_language: Optional[common.Value] = None
    add_options: Optional[AddMovieOptions] = None


class AddMovieInput(StarrModel):
    title: Optional[str] = None
    title_slug: Optional[str] = None
    minimum_availability: Optional[Availability] = None
    root_folder_path: Optional[str] = None
    tmdb_id: Optional[int] = None
    quality_profile_id: Optional[int] = None
    profile_id: Optional[int] = None
    year: Optional[int] = None
    images: Optional[List[common.Image]] = None
    add_options: Optional[AddMovieOptions] = None
    tags: Optional[List[int]] = None
    monitored: Optional[bool] = None


class BulkEdit(StarrModel):
    """Input for the movie editor; the delete-only switches are ignored on edit."""

    movie_ids: List[int] = []
    monitored: Optional[bool] = None
    quality_profile_id: Optional[int] = None
    minimum_availability: Optional[Availability] = None
    root_folder_path: Optional[str] = None
    tags: Optional[List[int]] = None
    apply_tags: Optional[str] = None
    move_files: Optional[bool] = None
    delete_files: Optional[bool] = None
    add_import_exclusion: Optional[bool] = None


# --- Releases, Exclusions and Restrictions ---

class Release(StarrModel):
    guid: Optional[str] = None
    quality: Optional[common.Quality] = None
    custom_formats: Optional[List[Any]] = None
    custom_format_score: Optional[int] = None
    quality_weight: Optional[int] = None
    age: Optional[int] = None
    age_hours: Optional[float] = None
    age_minutes: Optional[float] = None
    size: Optional[int] = None
    indexer_id: Optional[int] = None
    indexer: Optional[str] = None
    release_group: Optional[str] = None
    release_hash: Optional[str] = None
    title: Optional[str] = None
    scene_source: Optional[bool] = None
    movie_titles: Optional[List[str]] = None
    languages: Optional[List[common.Value]] = None
    mapped_movie_id: Optional[int] = None
    approved: Optional[bool] = None
    temporarily_rejected: Optional[bool] = None
    rejected: Optional[bool] = None
    tmdb_id: Optional[int] = None
    imdb_id: Optional[int] = None
    rejections: Optional[List[str]] = None
    publish_date: Optional[datetime] = None
    comment_url: Optional[str] = None
    download_url: Optional[str] = None
    info_url: Optional[str] = None
    download_allowed: Optional[bool] = None
    release_weight: Optional[int] = None
    edition: Optional[str] = None
    magnet_url: Optional[str] = None
    info_hash: Optional[str] = None
    seeders: Optional[int] = None
    leechers: Optional[int] = None
    protocol: Optional[str] = None
    indexer_flags: Optional[List[str]] = None


class GrabRelease(StarrModel):
    """The fields the release endpoint requires to start a download."""

    guid: Optional[str] = None
    indexer_id: Optional[int] = None
    languages: Optional[List[common.Value]] = None
    should_override: bool = True
    movie_id: Optional[int] = None


class Exclusion(StarrModel):
    id: Optional[int] = None
    tmdb_id: Optional[int] = None
    title: Optional[str] = common.alias("movieTitle")
    year: Optional[int] = common.alias("movieYear")


class Restriction(StarrModel):
    id: Optional[int] = None
    tags: Optional[List[int]] = None
    required: Optional[str] = None
    ignored: Optional[str] = None


class Rename(common.Rename):
    id: Optional[int] = None
    movie_id: Optional[int] = None
    movie_file_id: Optional[int] = None


# --- Settings ---

class Naming(StarrModel):
    id: Optional[int] = None
    rename_movies: Optional[bool] = None
    replace_illegal_characters: Optional[bool] = None
    colon_replacement_format: Optional[str] = None
    standard_movie_format: Optional[str] = None
    movie_folder_format: Optional[str] = None


class MediaManagement(StarrModel):
    id: Optional[int] = None
    auto_rename_folders: Optional[bool] = None
    auto_unmonitor_previously_downloaded_movies: Optional[bool] = None
    copy_using_hardlinks: Optional[bool] = None
    create_empty_movie_folders: Optional[bool] = None
    delete_empty_folders: Optional[bool] = None
    enable_media_info: Optional[bool] = None
    import_extra_files: Optional[bool] = None
    paths_default_static: Optional[bool] = None
    set_permissions_linux: Optional[bool] = None
    skip_free_space_check_when_importing: Optional[bool] = None
    minimum_free_space_when_importing: Optional[int] = None
    recycle_bin_cleanup_days: Optional[int] = None
    chmod_folder: Optional[str] = None
    chown_group: Optional[str] = None
    download_propers_and_repacks: Optional[str] = None
    extra_file_extensions: Optional[str] = None
    file_date: Optional[str] = None
    recycle_bin: Optional[str] = None
    rescan_after_refresh: Optional[str] = None


class IndexerConfig(StarrModel):
    id: Optional[int] = None
    whitelisted_hardcoded_subs: Optional[str] = None
    maximum_size: Optional[int] = None
    minimum_age: Optional[int] = None
    retention: Optional[int] = None
    rss_sync_interval: Optional[int] = None
    availability_delay: Optional[int] = None
    prefer_indexer_flags: Optional[bool] = None
    allow_hardcoded_subs: Optional[bool] = None


class NotificationOutput(common.NotificationOutput):
    on_movie_added: Optional[bool] = None
    on_movie_delete: Optional[bool] = None
    on_movie_file_delete: Optional[bool] = None
    on_movie_file_delete_for_upgrade: Optional[bool] = None


class ImportListOutput(common.ImportListOutput):
    monitor: Optional[str] = None
    minimum_availability: Optional[Availability] = None


# --- Paged Records ---

class QueueRecord(common.QueueRecord):
    movie_id: Optional[int] = None
    custom_formats: Optional[List[common.CustomFormat]] = None
    has_post_import_category: Optional[bool] = common.alias(
        "downloadClientHasPostImportCategory"
    )


class HistoryRecord(common.HistoryRecord):
    movie_id: Optional[int] = None
    languages: Optional[List[common.Value]] = None
    custom_formats: Optional[List[common.CustomFormat]] = None


class BlocklistRecord(common.BlocklistRecord):
    movie_id: Optional[int] = None
    movie: Optional[Movie] = None
    custom_formats: Optional[List[common.CustomFormat]] = None


# --- Manual Import ---

class ManualImportInput(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    movie_id: Optional[int] = None
    movie: Optional[Movie] = None
    quality: Optional[common.Quality] = None
    languages: Optional[List[common.Value]] = None
    release_group: Optional[str] = None
    download_id: Optional[str] = None
    custom_formats: Optional[List[common.CustomFormat]] = None
    custom_format_score: Optional[int] = None
    rejections: Optional[List[common.Rejection]] = None


class ManualImportOutput(ManualImportInput):
    relative_path: Optional[str] = None
    folder_name: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    quality_weight: Optional[int] = None


# --- Commands ---

class CommandRequest(StarrModel):
    name: Optional[str] = None
    movie_ids: Optional[List[int]] = None


# --- Query Filters ---

@dataclasses.dataclass(frozen=True)
class Calendar:
    """Calendar filter. `unmonitored` is always sent; unset bounds are not."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    unmonitored: bool = False

    def params(self) -> QueryPairs:
        pairs = []
        if self.end:
            pairs.append(("end", format_calendar_time(self.end)))
        if self.start:
            pairs.append(("start", format_calendar_time(self.start)))
        pairs.append(("unmonitored", render_value(self.unmonitored)))
        return pairs


@dataclasses.dataclass(frozen=True)
class Feed:
    """iCal feed filter; the service defaults are 7 past and 28 future days."""

    past_days: int = 0
    future_days: int = 0
    tags: List[int] = dataclasses.field(default_factory=list)
    unmonitored: bool = False
    release_types: List[ReleaseType] = dataclasses.field(default_factory=list)
    as_all_day: bool = False

    def params(self) -> QueryPairs:
        return [
            ("asAllDay", render_value(self.as_all_day)),
            ("futureDays", str(self.future_days)),
            ("pastDays", str(self.past_days)),
            ("releaseTypes", ",".join(ReleaseType(t).value for t in self.release_types)),
            ("tags", ",".join(str(t) for t in self.tags)),
            ("unmonitored", render_value(self.unmonitored)),
        ]


@dataclasses.dataclass(frozen=True)
class ManualImportParams:
    folder: str = ""
    download_id: str = ""
    movie_id: int = 0
    filter_existing_files: bool = False

    def params(self) -> QueryPairs:
        return [
            ("folder", self.folder),
            ("downloadId", self.download_id),
            ("movieId", str(self.movie_id)),
            ("filterExistingFiles", render_value(self.filter_existing_files)),
        ]
