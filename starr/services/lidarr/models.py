"""
Lidarr wire models and query filters.
"""

import dataclasses
from datetime import datetime
from typing import Any, List, Optional

from ...application.domain import QueryPairs, format_calendar_time
from ...infrastructure import api_models as common
from ...infrastructure.api_models import StarrModel
from ...infrastructure.request import render_value


# --- Artists and Albums ---

class Statistics(StarrModel):
    album_count: Optional[int] = None
    track_file_count: Optional[int] = None
    track_count: Optional[int] = None
    total_track_count: Optional[int] = None
    size_on_disk: Optional[int] = None
    percent_of_tracks: Optional[float] = None


class Media(StarrModel):
    medium_number: Optional[int] = None
    medium_name: Optional[str] = None
    medium_format: Optional[str] = None


class Release(StarrModel):
    """One edition of an album."""

    id: Optional[int] = None
    album_id: Optional[int] = None
    foreign_release_id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    duration: Optional[int] = None
    track_count: Optional[int] = None
    media: Optional[List[Media]] = None
    medium_count: Optional[int] = None
    disambiguation: Optional[str] = None
    country: Optional[List[str]] = None
    label: Optional[List[str]] = None
    format: Optional[str] = None
    monitored: Optional[bool] = None


class ArtistAddOptions(StarrModel):
    monitor: Optional[str] = None
    monitored: Optional[bool] = None
    search_for_missing_albums: Optional[bool] = None


class AlbumAddOptions(StarrModel):
    search_for_new_album: Optional[bool] = None


class Artist(StarrModel):
    id: Optional[int] = None
    status: Optional[str] = None
    last_info_sync: Optional[datetime] = None
    artist_name: Optional[str] = None
    foreign_artist_id: Optional[str] = None
    tadb_id: Optional[int] = None
    discogs_id: Optional[int] = None
    quality_profile_id: Optional[int] = None
    metadata_profile_id: Optional[int] = None
    overview: Optional[str] = None
    artist_type: Optional[str] = None
    disambiguation: Optional[str] = None
    root_folder_path: Optional[str] = None
    path: Optional[str] = None
    clean_name: Optional[str] = None
    sort_name: Optional[str] = None
    links: Optional[List[common.Link]] = None
    images: Optional[List[common.Image]] = None
    genres: Optional[List[str]] = None
    tags: Optional[List[int]] = None
    added: Optional[datetime] = None
    ratings: Optional[common.Ratings] = None
    statistics: Optional[Statistics] = None
    last_album: Optional["Album"] = None
    next_album: Optional["Album"] = None
    add_options: Optional[ArtistAddOptions] = None
    album_folder: Optional[bool] = None
    monitored: Optional[bool] = None
    ended: Optional[bool] = None


class Album(StarrModel):
    id: Optional[int] = None
    title: Optional[str] = None
    disambiguation: Optional[str] = None
    overview: Optional[str] = None
    artist_id: Optional[int] = None
    foreign_album_id: Optional[str] = None
    profile_id: Optional[int] = None
    duration: Optional[int] = None
    album_type: Optional[str] = None
    secondary_types: Optional[List[Any]] = None
    medium_count: Optional[int] = None
    ratings: Optional[common.Ratings] = None
    release_date: Optional[datetime] = None
    releases: Optional[List[Release]] = None
    genres: Optional[List[str]] = None
    media: Optional[List[Media]] = None
    artist: Optional[Artist] = None
    links: Optional[List[common.Link]] = None
    images: Optional[List[common.Image]] = None
    statistics: Optional[Statistics] = None
    remote_cover: Optional[str] = None
    add_options: Optional[AlbumAddOptions] = None
    monitored: Optional[bool] = None
    any_release_ok: Optional[bool] = None
    grabbed: Optional[bool] = None


Artist.model_rebuild()


class AddAlbumInputRelease(StarrModel):
    foreign_release_id: Optional[str] = None
    title: Optional[str] = None
    media: Optional[List[Media]] = None
    monitored: Optional[bool] = None


class AddAlbumInput(StarrModel):
    foreign_album_id: Optional[str] = None
    monitored: Optional[bool] = None
    releases: Optional[List[AddAlbumInputRelease]] = None
    add_options: Optional[AlbumAddOptions] = None
    artist: Optional[Artist] = None


# --- Tracks and Files ---

class MediaInfo(StarrModel):
    id: Optional[int] = None
    audio_channels: Optional[int] = None
    audio_bit_rate: Optional[str] = None
    audio_codec: Optional[str] = None
    audio_bits: Optional[str] = None
    audio_sample_rate: Optional[str] = None


class AudioMediaInfo(StarrModel):
    audio_format: Optional[str] = None
    audio_bitrate: Optional[int] = None
    audio_channels: Optional[int] = None
    audio_bits: Optional[int] = None
    audio_sample_rate: Optional[int] = None


class AudioCountry(StarrModel):
    two_letter_code: Optional[str] = None
    name: Optional[str] = None


class ArtistTitleInfo(StarrModel):
    title: Optional[str] = None
    title_without_year: Optional[str] = None
    year: Optional[int] = None


class AudioTags(StarrModel):
    title: Optional[str] = None
    clean_title: Optional[str] = None
    artist_title: Optional[str] = None
    album_title: Optional[str] = None
    artist_title_info: Optional[ArtistTitleInfo] = None
    artist_mbid: Optional[str] = common.alias("artistMBId")
    album_mbid: Optional[str] = common.alias("albumMBId")
    release_mbid: Optional[str] = common.alias("releaseMBId")
    recording_mbid: Optional[str] = common.alias("recordingMBId")
    track_mbid: Optional[str] = common.alias("trackMBId")
    disc_number: Optional[int] = None
    disc_count: Optional[int] = None
    country: Optional[AudioCountry] = None
    year: Optional[int] = None
    label: Optional[str] = None
    catalog_number: Optional[str] = None
    disambiguation: Optional[str] = None
    duration: Optional[str] = None
    quality: Optional[common.Quality] = None
    media_info: Optional[AudioMediaInfo] = None
    track_numbers: Optional[List[int]] = None
    release_group: Optional[str] = None
    release_hash: Optional[str] = None


class TrackFile(StarrModel):
    id: Optional[int] = None
    artist_id: Optional[int] = None
    album_id: Optional[int] = None
    path: Optional[str] = None
    size: Optional[int] = None
    date_added: Optional[datetime] = None
    quality: Optional[common.Quality] = None
    quality_weight: Optional[int] = None
    media_info: Optional[MediaInfo] = None
    cutoff_not_met: Optional[bool] = common.alias("qualityCutoffNotMet")
    audio_tags: Optional[AudioTags] = None


class Track(StarrModel):
    id: Optional[int] = None
    artist_id: Optional[int] = None
    foreign_track_id: Optional[str] = None
    foreign_recording_id: Optional[str] = None
    track_file_id: Optional[int] = None
    album_id: Optional[int] = None
    explicit: Optional[bool] = None
    absolute_track_number: Optional[int] = None
    track_number: Optional[str] = None
    title: Optional[str] = None
    duration: Optional[int] = None
    medium_number: Optional[int] = None
    has_file: Optional[bool] = None
    ratings: Optional[common.Ratings] = None
    grabbed: Optional[bool] = None
    artist: Optional[Artist] = None
    track_file: Optional[TrackFile] = None


# --- Profiles and Settings ---

class AlbumType(StarrModel):
    album_type: Optional[common.Value] = None
    allowed: Optional[bool] = None


class ReleaseStatus(StarrModel):
    release_status: Optional[common.Value] = None
    allowed: Optional[bool] = None


class MetadataProfile(common.MetadataProfile):
    primary_album_types: Optional[List[AlbumType]] = None
    secondary_album_types: Optional[List[AlbumType]] = None
    release_statuses: Optional[List[ReleaseStatus]] = None


class Naming(StarrModel):
    id: Optional[int] = None
    rename_tracks: Optional[bool] = None
    replace_illegal_characters: Optional[bool] = None
    include_artist_name: Optional[bool] = None
    include_album_title: Optional[bool] = None
    include_quality: Optional[bool] = None
    replace_spaces: Optional[bool] = None
    colon_replacement_format: Optional[Any] = None
    standard_track_format: Optional[str] = None
    multi_disc_track_format: Optional[str] = None
    artist_folder_format: Optional[str] = None


class MediaManagement(StarrModel):
    id: Optional[int] = None
    skip_free_space_check_when_importing: Optional[bool] = None
    copy_using_hardlinks: Optional[bool] = None
    import_extra_files: Optional[bool] = None
    watch_library_for_changes: Optional[bool] = None
    auto_unmonitor_previously_downloaded_tracks: Optional[bool] = None
    create_empty_artist_folders: Optional[bool] = None
    delete_empty_folders: Optional[bool] = None
    set_permissions_linux: Optional[bool] = None
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
    on_track_retag: Optional[bool] = None
    on_download_failure: Optional[bool] = None
    on_import_failure: Optional[bool] = None


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
    artist_name: Optional[str] = None


class Rename(common.Rename):
    id: Optional[int] = None
    artist_id: Optional[int] = None
    album_id: Optional[int] = None
    track_numbers: Optional[List[int]] = None
    track_file_id: Optional[int] = None


# --- Paged Records ---

class QueueRecord(common.QueueRecord):
    artist_id: Optional[int] = None
    album_id: Optional[int] = None
    download_forced: Optional[bool] = None
    has_post_import_category: Optional[bool] = common.alias(
        "downloadClientHasPostImportCategory"
    )


class HistoryRecord(common.HistoryRecord):
    album_id: Optional[int] = None
    artist_id: Optional[int] = None
    track_id: Optional[int] = None


class BlocklistRecord(common.BlocklistRecord):
    artist_id: Optional[int] = None
    album_ids: Optional[List[int]] = None


# --- Manual Import ---

class ManualImportInput(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    name: Optional[str] = None
    artist_id: Optional[int] = common.alias("artistID")
    album_id: Optional[int] = common.alias("albumID")
    album_release_id: Optional[int] = None
    tracks: Optional[List[Track]] = None
    track_ids: Optional[List[int]] = None
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
    artist: Optional[Artist] = None
    album: Optional[Album] = None
    album_release_id: Optional[int] = None
    tracks: Optional[List[Track]] = None
    quality: Optional[common.Quality] = None
    release_group: Optional[str] = None
    quality_weight: Optional[int] = None
    download_id: Optional[str] = None
    audio_tags: Optional[AudioTags] = None
    additional_file: Optional[bool] = None
    replace_existing_files: Optional[bool] = None
    disable_release_switching: Optional[bool] = None
    rejections: Optional[List[common.Rejection]] = None


# --- Commands ---

class CommandRequest(StarrModel):
    name: Optional[str] = None
    album_ids: Optional[List[int]] = None
    album_id: Optional[int] = None
    folders: Optional[List[str]] = None
    artist_id: Optional[int] = None


# --- Query Filters ---

@dataclasses.dataclass(frozen=True)
class Calendar:
    """Calendar filter. Both switches are always sent; unset bounds are not."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None
    unmonitored: bool = False
    include_artist: bool = False

    def params(self) -> QueryPairs:
        pairs = []
        if self.end:
            pairs.append(("end", format_calendar_time(self.end)))
        pairs.append(("includeArtist", render_value(self.include_artist)))
        if self.start:
            pairs.append(("start", format_calendar_time(self.start)))
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
    artist_id: int = 0
    replace_existing_files: bool = False
    filter_existing_files: bool = False

    def params(self) -> QueryPairs:
        return [
            ("folder", self.folder),
            ("downloadId", self.download_id),
            ("artistId", str(self.artist_id)),
            ("replaceExistingFiles", render_value(self.replace_existing_files)),
            ("filterExistingFiles", render_value(self.filter_existing_files)),
        ]
