"""
Sonarr wire models and query filters.
"""

import dataclasses
import enum
from datetime import datetime
from typing import Any, List, Optional

from ...application.domain import QueryPairs, format_calendar_time
from ...infrastructure import api_models as common
from ...infrastructure.api_models import StarrModel
from ...infrastructure.request import render_value


class HistoryFilter(enum.IntEnum):
    """Values for the history `eventType` filter."""

    UNKNOWN = 0
    GRABBED = 1
    SERIES_FOLDER_IMPORTED = 2
    DOWNLOAD_FOLDER_IMPORTED = 3
    DOWNLOAD_FAILED = 4
    DELETED = 5
    RENAMED = 6
    IMPORT_FAILED = 7


# --- Series and Episodes ---

class Statistics(StarrModel):
    season_count: Optional[int] = None
    episode_file_count: Optional[int] = None
    episode_count: Optional[int] = None
    total_episode_count: Optional[int] = None
    size_on_disk: Optional[int] = None
    percent_of_episodes: Optional[float] = None
    previous_airing: Optional[datetime] = None


class Season(StarrModel):
    monitored: Optional[bool] = None
    season_number: Optional[int] = None
    statistics: Optional[Statistics] = None


class AlternateTitle(StarrModel):
    season_number: Optional[int] = None
    title: Optional[str] = None


class AddSeriesOptions(StarrModel):
    search_for_missing_episodes: Optional[bool] = None
    search_for_cutoff_unmet_episodes: Optional[bool] = None
    ignore_episodes_with_files: Optional[bool] = None
    ignore_episodes_without_files: Optional[bool] = None


class Series(StarrModel):
    id: Optional[int] = None
    ended: Optional[bool] = None
    monitored: Optional[bool] = None
    season_folder: Optional[bool] = None
    use_scene_numbering: Optional[bool] = None
    runtime: Optional[int] = None
    year: Optional[int] = None
    language_profile_id: Optional[int] = None
    quality_profile_id: Optional[int] = None
    tvdb_id: Optional[int] = None
    tv_maze_id: Optional[int] = None
    tv_rage_id: Optional[int] = None
    air_time: Optional[str] = None
    certification: Optional[str] = None
    clean_title: Optional[str] = None
    imdb_id: Optional[str] = None
    network: Optional[str] = None
    overview: Optional[str] = None
    path: Optional[str] = None
    series_type: Optional[str] = None
    sort_title: Optional[str] = None
    status: Optional[str] = None
    title: Optional[str] = None
    title_slug: Optional[str] = None
    root_folder_path: Optional[str] = None
    added: Optional[datetime] = None
    first_aired: Optional[datetime] = None
    next_airing: Optional[datetime] = None
    previous_airing: Optional[datetime] = None
    ratings: Optional[common.Ratings] = None
    statistics: Optional[Statistics] = None
    tags: Optional[List[int]] = None
    genres: Optional[List[str]] = None
    alternate_titles: Optional[List[AlternateTitle]] = None
    seasons: Optional[List[Season]] = None
    images: Optional[List[common.Image]] = None


class AddSeriesInput(StarrModel):
    """Input for adding and updating a series."""

    id: Optional[int] = None
    monitored: Optional[bool] = None
    season_folder: Optional[bool] = None
    use_scene_numbering: Optional[bool] = None
    language_profile_id: Optional[int] = None
    quality_profile_id: Optional[int] = None
    tvdb_id: Optional[int] = None
    imdb_id: Optional[str] = None
    tv_maze_id: Optional[int] = None
    tv_rage_id: Optional[int] = None
    path: Optional[str] = None
    series_type: Optional[str] = None
    title: Optional[str] = None
    title_slug: Optional[str] = None
    root_folder_path: Optional[str] = None
    tags: Optional[List[int]] = None
    seasons: Optional[List[Season]] = None
    images: Optional[List[common.Image]] = None
    add_options: Optional[AddSeriesOptions] = None


class Episode(StarrModel):
    id: Optional[int] = None
    absolute_episode_number: Optional[int] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    series_id: Optional[int] = None
    tvdb_id: Optional[int] = None
    episode_file_id: Optional[int] = None
    air_date_utc: Optional[datetime] = None
    air_date: Optional[str] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    unverified_scene_numbering: Optional[bool] = None
    has_file: Optional[bool] = None
    monitored: Optional[bool] = None
    images: Optional[List[common.Image]] = None
    series: Optional[Series] = None


class MediaInfo(StarrModel):
    audio_bitrate: Optional[int] = None
    audio_channels: Optional[float] = None
    audio_codec: Optional[str] = None
    audio_languages: Optional[str] = None
    audio_stream_count: Optional[int] = None
    video_bit_depth: Optional[int] = None
    video_bitrate: Optional[int] = None
    video_codec: Optional[str] = None
    video_fps: Optional[float] = None
    resolution: Optional[str] = None
    run_time: Optional[str] = None
    scan_type: Optional[str] = None
    subtitles: Optional[str] = None


class EpisodeFile(StarrModel):
    id: Optional[int] = None
    series_id: Optional[int] = None
    season_number: Optional[int] = None
    relative_path: Optional[str] = None
    path: Optional[str] = None
    size: Optional[int] = None
    date_added: Optional[datetime] = None
    scene_name: Optional[str] = None
    release_group: Optional[str] = None
    language: Optional[common.Value] = None
    quality: Optional[common.Quality] = None
    media_info: Optional[MediaInfo] = None
    quality_cutoff_not_met: Optional[bool] = None
    language_cutoff_not_met: Optional[bool] = None
    custom_formats: Optional[List[common.CustomFormat]] = None


class MonitoredSeries(StarrModel):
    id: Optional[int] = None
    monitored: Optional[bool] = None


class MonitoringOptions(StarrModel):
    monitor: Optional[str] = None


class SeasonPass(StarrModel):
    series: List[MonitoredSeries] = []
    monitoring_options: Optional[MonitoringOptions] = None


# --- Language Profiles ---

class Language(StarrModel):
    allowed: Optional[bool] = None
    language: Optional[common.Value] = None


class LanguageProfile(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    upgrade_allowed: Optional[bool] = None
    cutoff: Optional[common.Value] = None
    languages: Optional[List[Language]] = None


# --- Parse ---

class SeriesTitleInfo(StarrModel):
    year: Optional[int] = None
    title: Optional[str] = None
    title_without_year: Optional[str] = None


class ParsedEpisodeInfo(StarrModel):
    episode_numbers: Optional[List[int]] = None
    absolute_episode_numbers: Optional[List[int]] = None
    special_absolute_episode_numbers: Optional[List[Any]] = None
    languages: Optional[List[common.Value]] = None
    season_number: Optional[int] = None
    season_part: Optional[int] = None
    full_season: Optional[bool] = None
    is_partial_season: Optional[bool] = None
    is_multi_season: Optional[bool] = None
    is_season_extra: Optional[bool] = None
    is_split_episode: Optional[bool] = None
    is_mini_series: Optional[bool] = None
    special: Optional[bool] = None
    is_daily: Optional[bool] = None
    is_absolute_numbering: Optional[bool] = None
    is_possible_special_episode: Optional[bool] = None
    is_possible_scene_season_special: Optional[bool] = None
    release_title: Optional[str] = None
    series_title: Optional[str] = None
    release_group: Optional[str] = None
    release_hash: Optional[str] = None
    release_tokens: Optional[str] = None
    release_type: Optional[str] = None
    series_title_info: Optional[SeriesTitleInfo] = None
    quality: Optional[common.Quality] = None


class ParseOutput(StarrModel):
    id: Optional[int] = None
    title: Optional[str] = None
    series: Optional[Series] = None
    episodes: Optional[List[Episode]] = None
    languages: Optional[List[common.Value]] = None
    custom_formats: Optional[List[common.CustomFormat]] = None
    custom_format_score: Optional[int] = None
    parsed_episode_info: Optional[ParsedEpisodeInfo] = None


# --- Releases ---

class ReleaseSceneMapping(StarrModel):
    title: Optional[str] = None
    season_number: Optional[int] = None
    scene_season_number: Optional[int] = None
    scene_origin: Optional[str] = None
    comment: Optional[str] = None


class ReleaseEpisodeInfo(StarrModel):
    id: Optional[int] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    absolute_episode_number: Optional[int] = None
    title: Optional[str] = None


class Release(StarrModel):
    id: Optional[int] = None
    guid: Optional[str] = None
    quality: Optional[common.Quality] = None
    quality_weight: Optional[int] = None
    age: Optional[int] = None
    age_hours: Optional[float] = None
    age_minutes: Optional[float] = None
    size: Optional[int] = None
    indexer_id: Optional[int] = None
    indexer: Optional[str] = None
    release_group: Optional[str] = None
    sub_group: Optional[str] = None
    release_hash: Optional[str] = None
    title: Optional[str] = None
    full_season: Optional[bool] = None
    scene_source: Optional[bool] = None
    season_number: Optional[int] = None
    languages: Optional[List[common.Value]] = None
    language_weight: Optional[int] = None
    air_date: Optional[str] = None
    series_title: Optional[str] = None
    episode_numbers: Optional[List[int]] = None
    absolute_episode_numbers: Optional[List[int]] = None
    mapped_season_number: Optional[int] = None
    mapped_episode_numbers: Optional[List[int]] = None
    mapped_absolute_episode_numbers: Optional[List[int]] = None
    mapped_series_id: Optional[int] = None
    mapped_episode_info: Optional[List[ReleaseEpisodeInfo]] = None
    approved: Optional[bool] = None
    temporarily_rejected: Optional[bool] = None
    rejected: Optional[bool] = None
    tvdb_id: Optional[int] = None
    tv_rage_id: Optional[int] = None
    rejections: Optional[List[str]] = None
    publish_date: Optional[datetime] = None
    comment_url: Optional[str] = None
    download_url: Optional[str] = None
    info_url: Optional[str] = None
    episode_requested: Optional[bool] = None
    download_allowed: Optional[bool] = None
    release_weight: Optional[int] = None
    custom_formats: Optional[List[common.CustomFormat]] = None
    custom_format_score: Optional[int] = None
    scene_mapping: Optional[ReleaseSceneMapping] = None
    magnet_url: Optional[str] = None
    info_hash: Optional[str] = None
    seeders: Optional[int] = None
    leechers: Optional[int] = None
    protocol: Optional[str] = None
    indexer_flags: Optional[int] = None
    is_daily: Optional[bool] = None
    is_absolute_numbering: Optional[bool] = None
    is_possible_special_episode: Optional[bool] = None
    special: Optional[bool] = None
    series_id: Optional[int] = None
    episode_id: Optional[int] = None
    episode_ids: Optional[List[int]] = None
    download_client_id: Optional[int] = None
    download_client: Optional[str] = None
    should_override: Optional[bool] = None


class Grab(StarrModel):
    """What the service answers after a release is grabbed."""

    guid: Optional[str] = None
    quality_weight: Optional[int] = None
    age: Optional[int] = None
    age_hours: Optional[float] = None
    age_minutes: Optional[float] = None
    size: Optional[int] = None
    indexer_id: Optional[int] = None
    full_season: Optional[bool] = None
    scene_source: Optional[bool] = None
    season_number: Optional[int] = None
    language_weight: Optional[int] = None
    approved: Optional[bool] = None
    temporarily_rejected: Optional[bool] = None
    rejected: Optional[bool] = None
    tvdb_id: Optional[int] = None
    tv_rage_id: Optional[int] = None
    publish_date: Optional[datetime] = None
    episode_requested: Optional[bool] = None
    download_allowed: Optional[bool] = None
    release_weight: Optional[int] = None
    custom_format_score: Optional[int] = None
    protocol: Optional[str] = None
    indexer_flags: Optional[int] = None
    is_daily: Optional[bool] = None
    is_absolute_numbering: Optional[bool] = None
    is_possible_special_episode: Optional[bool] = None
    special: Optional[bool] = None


class Exclusion(StarrModel):
    id: Optional[int] = None
    tvdb_id: Optional[int] = None
    title: Optional[str] = None


class Rename(common.Rename):
    id: Optional[int] = None
    series_id: Optional[int] = None
    season_number: Optional[int] = None
    episode_numbers: Optional[List[int]] = None
    episode_file_id: Optional[int] = None


# --- Settings ---

class Naming(StarrModel):
    id: Optional[int] = None
    rename_episodes: Optional[bool] = None
    replace_illegal_characters: Optional[bool] = None
    colon_replacement_format: Optional[Any] = None
    multi_episode_style: Optional[int] = None
    daily_episode_format: Optional[str] = None
    anime_episode_format: Optional[str] = None
    series_folder_format: Optional[str] = None
    season_folder_format: Optional[str] = None
    specials_folder_format: Optional[str] = None
    standard_episode_format: Optional[str] = None


class MediaManagement(StarrModel):
    id: Optional[int] = None
    use_script_import: Optional[bool] = None
    auto_unmonitor_previously_downloaded_episodes: Optional[bool] = None
    copy_using_hardlinks: Optional[bool] = None
    create_empty_series_folders: Optional[bool] = None
    delete_empty_folders: Optional[bool] = None
    enable_media_info: Optional[bool] = None
    import_extra_files: Optional[bool] = None
    set_permissions_linux: Optional[bool] = None
    skip_free_space_check_when_importing: Optional[bool] = None
    minimum_free_space_when_importing: Optional[int] = None
    recycle_bin_cleanup_days: Optional[int] = None
    script_import_path: Optional[str] = None
    chmod_folder: Optional[str] = None
    chown_group: Optional[str] = None
    download_propers_and_repacks: Optional[str] = None
    episode_title_required: Optional[str] = None
    extra_file_extensions: Optional[str] = None
    file_date: Optional[str] = None
    recycle_bin: Optional[str] = None
    rescan_after_refresh: Optional[str] = None


class IndexerConfig(StarrModel):
    id: Optional[int] = None
    maximum_size: Optional[int] = None
    minimum_age: Optional[int] = None
    retention: Optional[int] = None
    rss_sync_interval: Optional[int] = None


class NotificationOutput(common.NotificationOutput):
    on_series_delete: Optional[bool] = None
    on_episode_file_delete: Optional[bool] = None
    on_episode_file_delete_for_upgrade: Optional[bool] = None


class ImportListOutput(common.ImportListOutput):
    enable_automatic_add: Optional[bool] = None
    season_folder: Optional[bool] = None
    min_refresh_interval: Optional[str] = None
    series_type: Optional[str] = None
    should_monitor: Optional[str] = None


# --- Paged Records ---

class QueueRecord(common.QueueRecord):
    series_id: Optional[int] = None
    episode_id: Optional[int] = None
    language: Optional[common.Value] = None


class HistoryRecord(common.HistoryRecord):
    episode_id: Optional[int] = None
    series_id: Optional[int] = None
    language: Optional[Language] = None
    language_cutoff_not_met: Optional[bool] = None


class BlocklistRecord(common.BlocklistRecord):
    series_id: Optional[int] = None
    episode_ids: Optional[List[int]] = None
    series: Optional[Series] = None
    custom_formats: Optional[List[common.CustomFormat]] = None


# --- Manual Import ---

class ManualImportInput(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    series_id: Optional[int] = None
    season_number: Optional[int] = None
    episodes: Optional[List[Episode]] = None
    episode_ids: Optional[List[int]] = None
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
    series: Optional[Series] = None
    episode_file_id: Optional[int] = None
    quality_weight: Optional[int] = None


# --- Commands ---

class CommandRequest(StarrModel):
    name: Optional[str] = None
    series_id: Optional[int] = None
    series_ids: Optional[List[int]] = None
    episode_id: Optional[int] = None
    episode_ids: Optional[List[int]] = None
    season_number: Optional[int] = None
    files: Optional[List[int]] = None


# --- Query Filters ---

@dataclasses.dataclass(frozen=True)
class Calendar:
    """Calendar filter. Unset switches are not sent."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    unmonitored: Optional[bool] = None
    include_series: Optional[bool] = None
    include_episode_file: Optional[bool] = None
    include_episode_images: Optional[bool] = None

    def params(self) -> QueryPairs:
        pairs = []
        if self.end:
            pairs.append(("end", format_calendar_time(self.end)))
        if self.include_episode_file is not None:
            pairs.append(("includeEpisodeFile", render_value(self.include_episode_file)))
        if self.include_episode_images is not None:
            pairs.append(("includeEpisodeImages", render_value(self.include_episode_images)))
        if self.include_series is not None:
            pairs.append(("includeSeries", render_value(self.include_series)))
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
    premieres_only: bool = False
    as_all_day: bool = False

    def params(self) -> QueryPairs:
        return [
            ("asAllDay", render_value(self.as_all_day)),
            ("futureDays", str(self.future_days)),
            ("pastDays", str(self.past_days)),
            ("premieresOnly", render_value(self.premieres_only)),
            ("tags", ",".join(str(t) for t in self.tags)),
            ("unmonitored", render_value(self.unmonitored)),
        ]


@dataclasses.dataclass(frozen=True)
class ManualImportParams:
    folder: str = ""
    download_id: str = ""
    series_id: int = 0
    season_number: int = 0
    filter_existing_files: bool = False

    def params(self) -> QueryPairs:
        return [
            ("folder", self.folder),
            ("downloadId", self.download_id),
            ("seriesId", str(self.series_id)),
            ("seasonNumber", str(self.season_number)),
            ("filterExistingFiles", render_value(self.filter_existing_files)),
        ]


@dataclasses.dataclass(frozen=True)
class EpisodeFilter:
    """Filter for listing episodes; zero and empty values are not sent."""

    series_id: int = 0
    season_number: int = 0
    episode_ids: List[int] = dataclasses.field(default_factory=list)
    episode_file_id: int = 0
    include_images: bool = False

    def params(self) -> QueryPairs:
        pairs = []
        if self.series_id > 0:
            pairs.append(("seriesId", str(self.series_id)))
        if self.season_number > 0:
            pairs.append(("seasonNumber", str(self.season_number)))
        pairs.extend(("episodeIds", str(i)) for i in self.episode_ids)
        if self.episode_file_id > 0:
            pairs.append(("episodeFileId", str(self.episode_file_id)))
        if self.include_images:
            pairs.append(("includeImages", "true"))
        return pairs


@dataclasses.dataclass(frozen=True)
class ReleaseSearch:
    series_id: int = 0
    episode_id: int = 0
    season_number: int = 0

    def params(self) -> QueryPairs:
        return [
            ("seriesId", str(self.series_id)),
            ("episodeId", str(self.episode_id)),
            ("seasonNumber", str(self.season_number)),
        ]
