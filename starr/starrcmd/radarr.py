"""
Radarr custom-script event records.
"""

import dataclasses
from datetime import datetime
from typing import ClassVar, List

from ..application.domain import App

from .parser import Event, env


@dataclasses.dataclass(frozen=True)
class RadarrApplicationUpdate:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.APPLICATION_UPDATE

    previous_version: str = env("radarr_update_previousversion")
    new_version: str = env("radarr_update_newversion")
    message: str = env("radarr_update_message")


@dataclasses.dataclass(frozen=True)
class RadarrDownload:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.DOWNLOAD

    release_date: datetime = env("radarr_movie_physical_release_date")
    in_cinemas: datetime = env("radarr_movie_in_cinemas_date")
    file_path: str = env("radarr_moviefile_path")
    imdb_id: str = env("radarr_movie_imdbid")
    scene_name: str = env("radarr_moviefile_scenename")
    release_group: str = env("radarr_moviefile_releasegroup")
    download_id: str = env("radarr_download_id")
    source_folder: str = env("radarr_moviefile_sourcefolder")
    path: str = env("radarr_movie_path")
    relative_path: str = env("radarr_moviefile_relativepath")
    download_client: str = env("radarr_download_client")
    source_path: str = env("radarr_moviefile_sourcepath")
    quality: str = env("radarr_moviefile_quality")
    title: str = env("radarr_movie_title")
    deleted_relative_paths: List[str] = env("radarr_deletedrelativepaths", sep="|")
    deleted_paths: List[str] = env("radarr_deletedpaths", sep="|")
    file_id: int = env("radarr_moviefile_id")
    year: int = env("radarr_movie_year")
    tmdb_id: int = env("radarr_movie_tmdbid")
    id: int = env("radarr_movie_id")
    quality_version: int = env("radarr_moviefile_qualityversion")
    is_upgrade: bool = env("radarr_isupgrade")


@dataclasses.dataclass(frozen=True)
class RadarrGrab:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.GRAB

    release_date: datetime = env("radarr_movie_physical_release_date")
    in_cinemas: datetime = env("radarr_movie_in_cinemas_date")
    release_group: str = env("radarr_release_releasegroup")
    imdb_id: str = env("radarr_movie_imdbid")
    download_id: str = env("radarr_download_id")
    release_title: str = env("radarr_release_title")
    quality: str = env("radarr_release_quality")
    download_client: str = env("radarr_download_client")
    release_indexer: str = env("radarr_release_indexer")
    title: str = env("radarr_movie_title")
    quality_version: int = env("radarr_release_qualityversion")
    indexer_flags: int = env("radarr_indexerflags")
    size: int = env("radarr_release_size")
    year: int = env("radarr_movie_year")
    tmdb_id: int = env("radarr_movie_tmdbid")
    id: int = env("radarr_movie_id")


@dataclasses.dataclass(frozen=True)
class RadarrHealthIssue:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.HEALTH_ISSUE

    message: str = env("radarr_health_issue_message")
    issue_type: str = env("radarr_health_issue_type")
    wiki: str = env("radarr_health_issue_wiki")
    level: str = env("radarr_health_issue_level")


@dataclasses.dataclass(frozen=True)
class RadarrMovieFileDelete:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.MOVIE_FILE_DELETE

    reason: str = env("radarr_moviefile_deletereason")
    file_path: str = env("radarr_moviefile_path")
    scene_name: str = env("radarr_moviefile_scenename")
    imdb_id: str = env("radarr_movie_imdbid")
    release_group: str = env("radarr_moviefile_releasegroup")
    path: str = env("radarr_movie_path")
    relative_path: str = env("radarr_moviefile_relativepath")
    tmdb_id: str = env("radarr_movie_tmdbid")
    quality: str = env("radarr_moviefile_quality")
    title: str = env("radarr_movie_title")
    file_id: int = env("radarr_moviefile_id")
    year: int = env("radarr_movie_year")
    size: int = env("radarr_moviefile_size")
    id: int = env("radarr_movie_id")
    quality_version: int = env("radarr_moviefile_qualityversion")


@dataclasses.dataclass(frozen=True)
class RadarrMovieDelete:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.MOVIE_DELETE

    title: str = env("radarr_movie_title")
    path: str = env("radarr_movie_path")
    imdb_id: str = env("radarr_movie_imdbid")
    delete_files: str = env("radarr_movie_deletedfiles")
    id: int = env("radarr_movie_id")
    year: int = env("radarr_movie_year")
    tmdb_id: int = env("radarr_movie_tmdbid")
    size: int = env("radarr_movie_folder_size")


@dataclasses.dataclass(frozen=True)
class RadarrRename:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.RENAME

    in_cinemas: datetime = env("radarr_movie_in_cinemas_date")
    release_date: datetime = env("radarr_movie_physical_release_date")
    path: str = env("radarr_movie_path")
    imdb_id: str = env("radarr_movie_imdbid")
    file_ids: List[int] = env("radarr_moviefile_ids", sep=",")
    relative_paths: List[str] = env("radarr_moviefile_relativepaths", sep="|")
    paths: List[str] = env("radarr_moviefile_paths", sep="|")
    previous_relative_paths: List[str] = env("radarr_moviefile_previousrelativepaths", sep="|")
    previous_paths: List[str] = env("radarr_moviefile_previouspaths", sep="|")
    id: int = env("radarr_movie_id")
    year: int = env("radarr_movie_year")
    tmdb_id: int = env("radarr_movie_tmdbid")


@dataclasses.dataclass(frozen=True)
class RadarrTest:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.TEST
