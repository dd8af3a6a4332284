"""
Lidarr custom-script event records.
"""

import dataclasses
from datetime import datetime
from typing import ClassVar, List

from ..application.domain import App

from .parser import Event, env


@dataclasses.dataclass(frozen=True)
class LidarrApplicationUpdate:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.APPLICATION_UPDATE

    previous_version: str = env("lidarr_update_previousversion")
    new_version: str = env("lidarr_update_newversion")
    message: str = env("lidarr_update_message")


@dataclasses.dataclass(frozen=True)
class LidarrHealthIssue:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.HEALTH_ISSUE

    message: str = env("lidarr_health_issue_message")
    issue_type: str = env("lidarr_health_issue_type")
    wiki: str = env("lidarr_health_issue_wiki")
    level: str = env("lidarr_health_issue_level")


@dataclasses.dataclass(frozen=True)
class LidarrGrab:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.GRAB

    download_client: str = env("lidarr_download_client")
    album_count: int = env("lidarr_release_albumcount")
    size: int = env("lidarr_release_size")
    release_dates: List[datetime] = env("lidarr_release_albumreleasedates", sep=",")
    artist_id: int = env("lidarr_artist_id")
    artist_name: str = env("lidarr_artist_name")
    mbid: str = env("lidarr_artist_mbid")
    indexer: str = env("lidarr_release_indexer")
    quality_version: int = env("lidarr_release_qualityversion")
    quality: str = env("lidarr_release_quality")
    release_group: str = env("lidarr_release_releasegroup")
    release_title: str = env("lidarr_release_title")
    album_mbids: List[str] = env("lidarr_release_albummbids", sep="|")
    download_id: str = env("lidarr_download_id")
    titles: List[str] = env("lidarr_release_albumtitles", sep="|")
    artist_type: str = env("lidarr_artist_type")


@dataclasses.dataclass(frozen=True)
class LidarrAlbumDownload:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.ALBUM_DOWNLOAD

    artist_id: int = env("lidarr_artist_id")
    artist_name: str = env("lidarr_artist_name")
    path: str = env("lidarr_artist_path")
    artist_mbid: str = env("lidarr_artist_mbid")
    artist_type: str = env("lidarr_artist_type")
    album_id: int = env("lidarr_album_id")
    title: str = env("lidarr_album_title")
    mbid: str = env("lidarr_album_mbid")
    album_release_mbid: str = env("lidarr_albumrelease_mbid")
    release_date: datetime = env("lidarr_album_releasedate")
    download_client: str = env("lidarr_download_client")
    download_id: str = env("lidarr_download_id")
    added_track_paths: List[str] = env("lidarr_addedtrackpaths", sep="|")
    deleted_paths: List[str] = env("lidarr_deletedpaths", sep="|")


@dataclasses.dataclass(frozen=True)
class LidarrRename:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.RENAME

    artist_id: int = env("lidarr_artist_id")
    artist_name: str = env("lidarr_artist_name")
    path: str = env("lidarr_artist_path")
    artist_mbid: str = env("lidarr_artist_mbid")
    artist_type: str = env("lidarr_artist_type")


@dataclasses.dataclass(frozen=True)
class LidarrTrackRetag:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.TRACK_RETAG

    artist_id: int = env("lidarr_artist_id")
    artist_name: str = env("lidarr_artist_name")
    path: str = env("lidarr_artist_path")
    artist_mbid: str = env("lidarr_artist_mbid")
    artist_type: str = env("lidarr_artist_type")
    id: int = env("lidarr_album_id")
    title: str = env("lidarr_album_title")
    mbid: str = env("lidarr_album_mbid")
    album_release_mbid: str = env("lidarr_albumrelease_mbid")
    release_date: datetime = env("lidarr_album_releasedate")
    file_id: int = env("lidarr_trackfile_id")
    track_count: str = env("lidarr_trackfile_trackcount")
    file_path: str = env("lidarr_trackfile_path")
    track_numbers: List[int] = env("lidarr_trackfile_tracknumbers", sep=",")
    track_titles: List[str] = env("lidarr_trackfile_tracktitles", sep="|")
    quality: str = env("lidarr_trackfile_quality")
    quality_version: int = env("lidarr_trackfile_qualityversion")
    release_group: str = env("lidarr_trackfile_releasegroup")
    scene_name: str = env("lidarr_trackfile_scenename")
    tags_diff: str = env("lidarr_tags_diff")
    tags_scrubbed: bool = env("lidarr_tags_scrubbed")


@dataclasses.dataclass(frozen=True)
class LidarrTest:
    app: ClassVar[App] = App.LIDARR
    event: ClassVar[Event] = Event.TEST
