"""
The Sonarr handle: series, episodes and their files, on API v3.
"""

from typing import List

from ...application.domain import App
from ...infrastructure import api_models as common
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
    IndexerBulkMixin,
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


class Sonarr(
    TagMixin,
    SystemMixin,
    CommandMixin,
    IndexerMixin,
    IndexerBulkMixin,
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
    """Async handle for one Sonarr instance."""

    app = App.SONARR
    api_version = "v3"

    _notification_output = models.NotificationOutput
    _import_list_output = models.ImportListOutput
    _naming_model = models.Naming
    _media_management_model = models.MediaManagement
    _indexer_config_model = models.IndexerConfig
    _queue_record = models.QueueRecord
    _queue_defaults = {"includeUnknownSeriesItems": "true"}
    _history_record = models.HistoryRecord
    _blocklist_record = models.BlocklistRecord
    _calendar_model = models.Episode
    _exclusion_model = models.Exclusion
    _manual_import_output = models.ManualImportOutput

    # --- Series ---

    async def get_all_series(self) -> List[models.Series]:
        return await self._list("series", models.Series)

    async def get_series(self, tvdb_id: int = 0) -> List[models.Series]:
        """Lists series, or only the one with `tvdb_id` when it is non-zero."""
        query = {"tvdbId": tvdb_id} if tvdb_id else None
        return await self._list("series", models.Series, query)

    async def get_series_by_id(self, series_id: int) -> models.Series:
        return await self._get_one("series", series_id, models.Series)

    async def add_series(self, series: models.AddSeriesInput) -> models.Series:
        return await self._create("series", series, models.Series)

    async def update_series(
        self, series: models.AddSeriesInput, move_files: bool = True
    ) -> models.Series:
        return await self._update(
            "series", series, models.Series, {"moveFiles": move_files}
        )

    async def delete_series(
        self, series_id: int, delete_files: bool = False, import_exclude: bool = False
    ) -> None:
        await self._delete(
            "series",
            series_id,
            {"deleteFiles": delete_files, "addImportListExclusion": import_exclude},
        )

    async def lookup(self, term: str) -> List[models.Series]:
        """Searches for series by name. An empty term returns nothing."""
        if not term:
            return []
        return await self.get_series_lookup(term)

    async def get_series_lookup(self, term: str = "", tvdb_id: int = 0) -> List[models.Series]:
        """Searches by name, or by TVDB id when `tvdb_id` is positive."""
        if tvdb_id > 0:
            term = f"tvdbid:{tvdb_id}"
        return await self._list("series/lookup", models.Series, {"term": term})

    # --- Episodes ---

    async def get_series_episodes(self, episode_filter: models.EpisodeFilter) -> List[models.Episode]:
        return await self._list("episode", models.Episode, episode_filter.params())

    async def get_episode_by_id(self, episode_id: int) -> models.Episode:
        return await self._get_one("episode", episode_id, models.Episode)

    async def monitor_episode(self, episode_ids: List[int], monitor: bool) -> List[models.Episode]:
        return await self.put_into(
            Request(
                "episode/monitor",
                body={"episodeIds": list(episode_ids), "monitored": monitor},
            ),
            List[models.Episode],
        )

    # --- Episode Files ---

    async def get_episode_files(self, *file_ids: int) -> List[models.EpisodeFile]:
        ids = ",".join(str(i) for i in file_ids)
        return await self._list("episodefile", models.EpisodeFile, {"episodeFileIds": ids})

    async def get_series_episode_files(self, series_id: int) -> List[models.EpisodeFile]:
        return await self._list("episodefile", models.EpisodeFile, {"seriesId": series_id})

    async def update_episode_file_quality(self, file_id: int, quality_id: int) -> models.EpisodeFile:
        """Changes the recorded quality of an episode file."""
        require_id(file_id, "episode file ID")
        body = models.EpisodeFile(
            id=file_id,
            quality=common.Quality(quality=common.BaseQuality(id=quality_id)),
        )
        return await self.put_into(
            Request(join_path("episodefile", str(file_id)), body=body),
            models.EpisodeFile,
        )

    async def delete_episode_file(self, file_id: int) -> None:
        await self._delete("episodefile", file_id)

    async def update_season_pass(self, season_pass: models.SeasonPass) -> None:
        """Changes monitoring for many series at once."""
        await self.post_into(Request("seasonpass", body=season_pass))

    # --- Language Profiles ---

    async def get_language_profiles(self) -> List[models.LanguageProfile]:
        return await self._list("languageprofile", models.LanguageProfile)

    async def get_language_profile(self, profile_id: int) -> models.LanguageProfile:
        return await self._get_one("languageprofile", profile_id, models.LanguageProfile)

    async def add_language_profile(self, profile: models.LanguageProfile) -> models.LanguageProfile:
        return await self._create("languageprofile", profile, models.LanguageProfile)

    async def update_language_profile(
        self, profile: models.LanguageProfile
    ) -> models.LanguageProfile:
        return await self._update("languageprofile", profile, models.LanguageProfile)

    async def delete_language_profile(self, profile_id: int) -> None:
        await self._delete("languageprofile", profile_id)

    # --- Parse, Releases and Renames ---

    async def parse(self, title: str = "", path: str = "") -> models.ParseOutput:
        """Asks the service how it would read a release title or file path."""
        return await self.get_into(
            Request("parse", {"title": title, "path": path}), models.ParseOutput
        )

    async def search_release(self, search: models.ReleaseSearch) -> List[models.Release]:
        return await self._list("release", models.Release, search.params())

    async def grab_release(self, release: models.Release) -> models.Grab:
        return await self.post_into(
            Request("release", body={"guid": release.guid, "indexerId": release.indexer_id}),
            models.Grab,
        )

    async def get_rename(self, series_id: int, season_number: int = -1) -> List[models.Rename]:
        """Lists pending renames; a season number of -1 checks every season."""
        query = [("seriesId", series_id)]
        if season_number != -1:
            query.append(("seasonNumber", season_number))
        return await self._list("rename", models.Rename, query)
