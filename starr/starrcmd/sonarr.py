"""
Sonarr custom-script event records.
"""

import dataclasses
from datetime import datetime
from typing import ClassVar, List

from ..application.domain import App

from .parser import Event, env


@dataclasses.dataclass(frozen=True)
class SonarrApplicationUpdate:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.APPLICATION_UPDATE

    previous_version: str = env("sonarr_update_previousversion")
    new_version: str = env("sonarr_update_newversion")
    message: str = env("sonarr_update_message")


@dataclasses.dataclass(frozen=True)
class SonarrHealthIssue:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.HEALTH_ISSUE

    message: str = env("sonarr_health_issue_message")
    issue_type: str = env("sonarr_health_issue_type")
    wiki: str = env("sonarr_health_issue_wiki")
    level: str = env("sonarr_health_issue_level")


@dataclasses.dataclass(frozen=True)
class SonarrGrab:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.GRAB

    quality: str = env("sonarr_release_quality")
    title: str = env("sonarr_series_title")
    download_client: str = env("sonarr_download_client")
    release_title: str = env("sonarr_release_title")
    download_id: str = env("sonarr_download_id")
    release_indexer: str = env("sonarr_release_indexer")
    series_type: str = env("sonarr_series_type")
    release_group: str = env("sonarr_release_releasegroup")
    imdb_id: str = env("sonarr_series_imdbid")
    episode_numbers: List[int] = env("sonarr_release_episodenumbers", sep=",")
    episode_air_dates: List[str] = env("sonarr_release_episodeairdates", sep=",")
    episode_titles: List[str] = env("sonarr_release_episodetitles", sep="|")
    abs_episode_numbers: List[int] = env("sonarr_release_absoluteepisodenumbers", sep=",")
    episode_air_dates_utc: List[datetime] = env("sonarr_release_episodeairdatesutc", sep=",")
    quality_version: int = env("sonarr_release_qualityversion")
    series_id: int = env("sonarr_series_id")
    episode_count: int = env("sonarr_release_episodecount")
    size: int = env("sonarr_release_size")
    tvdb_id: int = env("sonarr_series_tvdbid")
    tvmaze_id: int = env("sonarr_series_tvmazeid")
    season_number: int = env("sonarr_release_seasonnumber")


@dataclasses.dataclass(frozen=True)
class SonarrDownload:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.DOWNLOAD

    title: str = env("sonarr_series_title")
    source_folder: str = env("sonarr_episodefile_sourcefolder")
    quality: str = env("sonarr_episodefile_quality")
    release_group: str = env("sonarr_episodefile_releasegroup")
    download_client: str = env("sonarr_download_client")
    episode_path: str = env("sonarr_episodefile_path")
    scene_name: str = env("sonarr_episodefile_scenename")
    path: str = env("sonarr_series_path")
    source_path: str = env("sonarr_episodefile_sourcepath")
    download_id: str = env("sonarr_download_id")
    series_type: str = env("sonarr_series_type")
    imdb_id: str = env("sonarr_series_imdbid")
    relative_path: str = env("sonarr_episodefile_relativepath")
    episode_ids: List[int] = env("sonarr_episodefile_episodeids", sep=",")
    episode_numbers: List[int] = env("sonarr_episodefile_episodenumbers", sep=",")
    episode_air_dates: List[str] = env("sonarr_episodefile_episodeairdates", sep=",")
    episode_titles: List[str] = env("sonarr_episodefile_episodetitles", sep="|")
    episode_air_dates_utc: List[datetime] = env("sonarr_episodefile_episodeairdatesutc", sep=",")
    deleted_relative_paths: List[str] = env("sonarr_deletedrelativepaths", sep="|")
    deleted_paths: List[str] = env("sonarr_deletedpaths", sep="|")
    series_id: int = env("sonarr_series_id")
    quality_version: int = env("sonarr_episodefile_qualityversion")
    file_id: int = env("sonarr_episodefile_id")
    tvdb_id: int = env("sonarr_series_tvdbid")
    tvmaze_id: int = env("sonarr_series_tvmazeid")
    episode_count: int = env("sonarr_episodefile_episodecount")
    season_number: int = env("sonarr_episodefile_seasonnumber")
    is_upgrade: bool = env("sonarr_isupgrade")


@dataclasses.dataclass(frozen=True)
class SonarrRename:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.RENAME

    title: str = env("sonarr_series_title")
    path: str = env("sonarr_series_path")
    imdb_id: str = env("sonarr_series_imdbid")
    series_type: str = env("sonarr_series_type")
    file_ids: List[int] = env("sonarr_episodefile_ids", sep=",")
    relative_paths: List[str] = env("sonarr_episodefile_relativepaths", sep="|")
    paths: List[str] = env("sonarr_episodefile_paths", sep="|")
    previous_relative_paths: List[str] = env("sonarr_episodefile_previousrelativepaths", sep="|")
    previous_paths: List[str] = env("sonarr_episodefile_previouspaths", sep="|")
    id: int = env("sonarr_series_id")
    tvdb_id: int = env("sonarr_series_tvdbid")
    tvmaze_id: int = env("sonarr_series_tvmazeid")


@dataclasses.dataclass(frozen=True)
class SonarrSeriesDelete:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.SERIES_DELETE

    title: str = env("sonarr_series_title")
    path: str = env("sonarr_series_path")
    imdb_id: str = env("sonarr_series_imdbid")
    series_type: str = env("sonarr_series_type")
    deleted_files: str = env("sonarr_series_deletedfiles")
    id: int = env("sonarr_series_id")
    tvdb_id: int = env("sonarr_series_tvdbid")
    tvmaze_id: int = env("sonarr_series_tvmazeid")


@dataclasses.dataclass(frozen=True)
class SonarrEpisodeFileDelete:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.EPISODE_FILE_DELETE

    reason: str = env("sonarr_episodefile_deletereason")
    title: str = env("sonarr_series_title")
    path: str = env("sonarr_series_path")
    imdb_id: str = env("sonarr_series_imdbid")
    series_type: str = env("sonarr_series_type")
    relative_path: str = env("sonarr_episodefile_relativepath")
    file_path: str = env("sonarr_episodefile_path")
    season_number: str = env("sonarr_episodefile_seasonnumber")
    quality: str = env("sonarr_episodefile_quality")
    quality_version: str = env("sonarr_episodefile_qualityversion")
    release_group: str = env("sonarr_episodefile_releasegroup")
    scene_name: str = env("sonarr_episodefile_scenename")
    episode_ids: List[int] = env("sonarr_episodefile_episodeids", sep=",")
    episode_numbers: List[int] = env("sonarr_episodefile_episodenumbers", sep=",")
    episode_air_dates: List[str] = env("sonarr_episodefile_episodeairdates", sep=",")
    episode_air_dates_utc: List[datetime] = env("sonarr_episodefile_episodeairdatesutc", sep=",")
    episode_titles: List[str] = env("sonarr_episodefile_episodetitles", sep="|")
    id: int = env("sonarr_series_id")
    tvdb_id: int = env("sonarr_series_tvdbid")
    tvmaze_id: int = env("sonarr_series_tvmazeid")
    file_id: int = env("sonarr_episodefile_id")
    episode_count: int = env("sonarr_episodefile_episodecount")


@dataclasses.dataclass(frozen=True)
class SonarrTest:
    app: ClassVar[App] = App.SONARR
    event: ClassVar[Event] = Event.TEST
