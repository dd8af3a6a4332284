"""
The Radarr handle: movies and everything around them, on API v3.
"""

from typing import List, Optional

from ...application.domain import App
from ...infrastructure.base_client import BaseClient, require_id
from ...infrastructure.request import Request, join_path
from ...infrastructure.resources import (
    BlocklistMixin,
    CalendarMixin,
    CommandMixin,
    CustomFormatMixin,
    DelayProfileMixin,
    DownloadClientMixin,
    ExclusionMixin,
    FeedMixin,
    HistoryMixin,
    ImportListMixin,
    IndexerMixin,
    ManualImportMixin,
    NotificationMixin,
    QualityDefinitionMixin,
    QualityProfileMixin,
    QueueMixin,
    ReleaseProfileMixin,
    RemotePathMappingMixin,
    RootFolderMixin,
    SettingsMixin,
    SystemMixin,
    TagMixin,
)

from . import models


class Radarr(
    TagMixin,
    SystemMixin,
    CommandMixin,
    IndexerMixin,
    DownloadClientMixin,
    NotificationMixin,
    ImportListMixin,
    QualityProfileMixin,
    QualityDefinitionMixin,
    CustomFormatMixin,
    DelayProfileMixin,
    ReleaseProfileMixin,
    RootFolderMixin,
    RemotePathMappingMixin,
    SettingsMixin,
    QueueMixin,
    HistoryMixin,
    BlocklistMixin,
    CalendarMixin,
    FeedMixin,
    ExclusionMixin,
    ManualImportMixin,
    BaseClient,
):
    """Async handle for one Radarr instance."""

    app = App.RADARR
    api_version = "v3"

    _notification_output = models.NotificationOutput
    _import_list_output = models.ImportListOutput
    _naming_model = models.Naming
    _media_management_model = models.MediaManagement
    _indexer_config_model = models.IndexerConfig
    _queue_record = models.QueueRecord
    _queue_defaults = {"includeUnknownMovieItems": "true"}
    _history_record = models.HistoryRecord
    _blocklist_record = models.BlocklistRecord
    _calendar_model = models.Movie
    _exclusion_path = "exclusions"
    _exclusion_model = models.Exclusion
    _manual_import_output = models.ManualImportOutput

    # --- Movies ---

    async def get_movie(
        self, tmdb_id: int = 0, exclude_local_covers: bool = False
    ) -> List[models.Movie]:
        """
        Lists movies. A non-zero `tmdb_id` narrows the list to that movie,
        in which case `exclude_local_covers` is not sent.
        """
        if tmdb_id:
            query = {"tmdbId": tmdb_id}
        else:
            query = {"excludeLocalCovers": exclude_local_covers}
        return await self._list("movie", models.Movie, query)

    async def get_movie_by_id(self, movie_id: int) -> models.Movie:
        return await self._get_one("movie", movie_id, models.Movie)

    async def add_movie(self, movie: models.AddMovieInput) -> models.Movie:
        return await self.post_into(Request("movie", body=movie), models.Movie)

    async def update_movie(
        self, movie_id: int, movie: models.Movie, move_files: bool = False
    ) -> models.Movie:
        """Replaces movie `movie_id`; the body carries that id whatever `movie.id` holds."""
        require_id(movie_id, "movie ID")
        return await self.put_into(
            Request(
                join_path("movie", str(movie_id)),
                {"moveFiles": move_files},
                body=movie.model_copy(update={"id": movie_id}),
            ),
            models.Movie,
        )

    async def delete_movie(
        self, movie_id: int, delete_files: bool = False, add_import_exclusion: bool = False
    ) -> None:
        await self._delete(
            "movie",
            movie_id,
            {"deleteFiles": delete_files, "addImportExclusion": add_import_exclusion},
        )

    async def lookup(self, term: str) -> List[models.Movie]:
        """Searches for movies by name. An empty term returns nothing."""
        if not term:
            return []
        return await self._list("movie/lookup", models.Movie, {"term": term})

    async def lookup_id(self, movie_id: int) -> models.Movie:
        """Looks up a movie by its local id."""
        require_id(movie_id, "movie ID")
        return await self.get_into(
            Request(join_path("movie/lookup", str(movie_id))), models.Movie
        )

    async def lookup_tmdb(self, tmdb_id: int) -> models.Movie:
        return await self.get_into(
            Request("movie/lookup/tmdb", {"tmdbId": tmdb_id}), models.Movie
        )

    async def lookup_imdb(self, imdb_id: str) -> models.Movie:
        return await self.get_into(
            Request("movie/lookup/imdb", {"imdbId": imdb_id}), models.Movie
        )

    async def edit_movies(self, edit: models.BulkEdit) -> List[models.Movie]:
        return await self.put_into(
            Request("movie/editor", body=edit), List[models.Movie]
        )

    async def delete_movies(self, edit: models.BulkEdit) -> None:
        await self.delete_any(Request("movie/editor", body=edit))

    # --- Movie Files ---

    async def get_movie_file(self, movie_id: int) -> List[models.MovieFile]:
        return await self._list("moviefile", models.MovieFile, {"movieId": movie_id})

    async def get_movie_file_by_id(self, file_id: int) -> models.MovieFile:
        return await self._get_one("moviefile", file_id, models.MovieFile)

    async def get_movie_files(self, file_ids: List[int]) -> List[models.MovieFile]:
        return await self._list(
            "moviefile", models.MovieFile, {"movieFileIds": list(file_ids)}
        )

    async def update_movie_file(self, movie_file: models.MovieFile) -> models.MovieFile:
        return await self._update("moviefile", movie_file, models.MovieFile)

    async def delete_movie_files(self, *file_ids: int) -> None:
        await self.delete_any(
            Request("moviefile/bulk", body={"movieFileIds": list(file_ids)})
        )

    # --- Releases ---

    async def search_release(self, movie_id: int) -> List[models.Release]:
        return await self._list("release", models.Release, {"movieId": movie_id})

    async def grab_release(
        self, release: models.Release, movie_id: Optional[int] = None
    ) -> models.Release:
        """
        Downloads a release found by `search_release`.

        Without a `movie_id` the grab is tied to the release's mapped movie,
        which the service does not always fill in.
        """
        grab = models.GrabRelease(
            guid=release.guid,
            indexer_id=release.indexer_id,
            languages=release.languages,
            movie_id=movie_id or release.mapped_movie_id,
        )
        return await self.post_into(Request("release", body=grab), models.Release)

    async def get_rename(self, movie_id: int) -> List[models.Rename]:
        return await self._list("rename", models.Rename, {"movieId": movie_id})

    # --- Restrictions ---

    async def get_restrictions(self) -> List[models.Restriction]:
        return await self._list("restriction", models.Restriction)

    async def get_restriction(self, restriction_id: int) -> models.Restriction:
        return await self._get_one("restriction", restriction_id, models.Restriction)

    async def add_restriction(self, restriction: models.Restriction) -> models.Restriction:
        return await self._create("restriction", restriction, models.Restriction)

    async def update_restriction(self, restriction: models.Restriction) -> models.Restriction:
        return await self._update("restriction", restriction, models.Restriction)

    async def delete_restriction(self, restriction_id: int) -> None:
        await self._delete("restriction", restriction_id)

    # --- Exclusions ---

    async def add_exclusions(self, exclusions: List[models.Exclusion]) -> None:
        """Adds several exclusions in one call; identifiers are not sent."""
        cleared = [e.model_copy(update={"id": None}) for e in exclusions]
        await self.post_into(Request("exclusions/bulk", body=cleared))
