"""
The Lidarr handle: artists, albums, tracks and track files, on API v1.
"""

from typing import List

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
    MetadataProfileMixin,
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


class Lidarr(
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
    MetadataProfileMixin,
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
    """Async handle for one Lidarr instance."""

    app = App.LIDARR
    api_version = "v1"

    _notification_output = models.NotificationOutput
    _import_list_output = models.ImportListOutput
    _naming_model = models.Naming
    _media_management_model = models.MediaManagement
    _indexer_config_model = models.IndexerConfig
    _metadata_profile_model = models.MetadataProfile
    _queue_record = models.QueueRecord
    _queue_defaults = {"includeUnknownArtistItems": "true"}
    _history_record = models.HistoryRecord
    _blocklist_record = models.BlocklistRecord
    _fail_with_form = True
    _calendar_model = models.Album
    _exclusion_model = models.Exclusion
    _manual_import_output = models.ManualImportOutput

    # --- Albums ---

    async def get_album(self, mb_id: str = "") -> List[models.Album]:
        """Lists albums, or only the one with the MusicBrainz id `mb_id`."""
        query = {"ForeignAlbumId": mb_id} if mb_id else None
        return await self._list("album", models.Album, query)

    async def get_album_by_id(self, album_id: int) -> models.Album:
        return await self._get_one("album", album_id, models.Album)

    async def add_album(self, album: models.AddAlbumInput) -> models.Album:
        return await self.post_into(Request("album", body=album), models.Album)

    async def update_album(
        self, album_id: int, album: models.Album, move_files: bool = False
    ) -> models.Album:
        require_id(album_id, "album ID")
        body = album.model_copy(update={"id": album_id})
        return await self.put_into(
            Request(join_path("album", str(album_id)), {"moveFiles": move_files}, body=body),
            models.Album,
        )

    async def delete_album(
        self, album_id: int, delete_files: bool = False, add_import_exclusion: bool = False
    ) -> None:
        await self._delete(
            "album",
            album_id,
            {"deleteFiles": delete_files, "addImportListExclusion": add_import_exclusion},
        )

    async def lookup(self, term: str) -> List[models.Album]:
        """Searches for albums by name. An empty term returns nothing."""
        if not term:
            return []
        return await self._list("album/lookup", models.Album, {"term": term})

    # --- Artists ---

    async def get_artist(self, mb_id: str = "") -> List[models.Artist]:
        query = {"mbId": mb_id} if mb_id else None
        return await self._list("artist", models.Artist, query)

    async def get_artist_by_id(self, artist_id: int) -> models.Artist:
        return await self._get_one("artist", artist_id, models.Artist)

    async def add_artist(self, artist: models.Artist) -> models.Artist:
        return await self._create("artist", artist, models.Artist)

    async def update_artist(self, artist: models.Artist, move_files: bool = False) -> models.Artist:
        return await self._update("artist", artist, models.Artist, {"moveFiles": move_files})

    async def delete_artist(
        self, artist_id: int, delete_files: bool = False, add_import_exclusion: bool = False
    ) -> None:
        await self._delete(
            "artist",
            artist_id,
            {"deleteFiles": delete_files, "addImportListExclusion": add_import_exclusion},
        )

    # --- Tracks ---

    async def get_tracks(self, *track_ids: int) -> List[models.Track]:
        return await self._list("track", models.Track, {"trackIds": list(track_ids)})

    async def get_tracks_by_album(self, album_id: int) -> List[models.Track]:
        return await self._list("track", models.Track, {"albumId": album_id})

    async def get_tracks_by_artist(self, artist_id: int) -> List[models.Track]:
        return await self._list("track", models.Track, {"artistId": artist_id})

    async def get_tracks_by_album_release(self, release_id: int) -> List[models.Track]:
        return await self._list("track", models.Track, {"albumReleaseId": release_id})

    # --- Track Files ---

    async def get_track_files_for_artist(self, artist_id: int) -> List[models.TrackFile]:
        return await self._list("trackfile", models.TrackFile, {"artistId": artist_id})

    async def get_track_files_for_album(self, album_id: int) -> List[models.TrackFile]:
        return await self._list("trackfile", models.TrackFile, {"albumId": album_id})

    async def get_track_files(self, file_ids: List[int]) -> List[models.TrackFile]:
        """Fetches track files by id; no ids means no request."""
        if not file_ids:
            return []
        return await self._list(
            "trackfile", models.TrackFile, {"trackFileIds": list(file_ids)}
        )

    async def update_track_file(self, track_file: models.TrackFile) -> models.TrackFile:
        return await self._update("trackfile", track_file, models.TrackFile)

    async def delete_track_file(self, file_id: int) -> None:
        await self._delete("trackfile", file_id)

    async def delete_track_files(self, *file_ids: int) -> None:
        await self.delete_any(
            Request("trackfile/bulk", body={"trackFileIDs": list(file_ids)})
        )

    # --- Renames ---

    async def get_rename(self, artist_id: int, album_id: int = -1) -> List[models.Rename]:
        """Lists pending renames; an album id of -1 checks the whole artist."""
        query = [("artistId", artist_id)]
        if album_id != -1:
            query.append(("albumId", album_id))
        return await self._list("rename", models.Rename, query)
