"""
Operations shared by several Starr services.

Each mixin covers one resource family and is combined with BaseClient in the
per-service handles. Where the wire shape differs between services, the
mixin reads a class attribute (model, path or default) that the handle
overrides.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..application.domain import PageRequest, QueueDeleteOpts
from ..application.exceptions import AggregateError, StarrError

from . import api_models as models
from .base_client import require_id
from .paging import collect_pages
from .request import Request, join_path


class TagMixin:
    async def get_tags(self) -> List[models.Tag]:
        """Returns every tag."""
        return await self._list("tag", models.Tag)

    async def get_tag(self, tag_id: int) -> models.Tag:
        """Returns one tag by id."""
        return await self._get_one("tag", tag_id, models.Tag)

    async def add_tag(self, tag: models.Tag) -> models.Tag:
        """Creates a tag and returns it with its new id."""
        return await self._create("tag", tag, models.Tag)

    async def update_tag(self, tag: models.Tag) -> models.Tag:
        """Renames the tag with `tag.id`."""
        return await self._update("tag", tag, models.Tag)

    async def delete_tag(self, tag_id: int) -> None:
        """Removes a tag."""
        await self._delete("tag", tag_id)


class SystemMixin:
    _system_status_model = models.SystemStatus

    async def get_system_status(self):
        """Returns version, platform and start-up details of the service."""
        return await self.get_into(Request("system/status"), self._system_status_model)

    async def get_backup_files(self) -> List[models.Backup]:
        """Lists the backups the service has written."""
        return await self._list("system/backup", models.Backup)


class CommandMixin:
    """Background commands; each service declares its own request model."""

    async def get_commands(self) -> List[models.CommandResponse]:
        """Returns the commands that are queued or running."""
        return await self._list("command", models.CommandResponse)

    async def send_command(self, command) -> models.CommandResponse:
        """
        Dispatches a command.

        A command without a name is not sent; an empty response comes back.
        """
        if command is None or not command.name:
            return models.CommandResponse()

        return await self.post_into(
            Request("command", body=command), models.CommandResponse
        )

    async def get_command_status(self, command_id: int) -> models.CommandResponse:
        """Returns the current state of a dispatched command."""
        return await self._get_one("command", command_id, models.CommandResponse)


# --- Providers ---

class IndexerMixin:
    _indexer_output = models.IndexerOutput

    async def get_indexers(self) -> list:
        """Lists the configured indexers."""
        return await self._list("indexer", self._indexer_output)

    async def get_indexer(self, indexer_id: int):
        """Returns one indexer by id."""
        return await self._get_one("indexer", indexer_id, self._indexer_output)

    async def add_indexer(self, indexer, force: bool = True):
        """Creates an indexer; `force` saves it even if its test fails."""
        return await self._create(
            "indexer", indexer, self._indexer_output, {"forceSave": force}
        )

    async def update_indexer(self, indexer, force: bool = False):
        """Replaces the indexer with `indexer.id`; `force` skips the test."""
        return await self._update(
            "indexer", indexer, self._indexer_output, {"forceSave": force}
        )

    async def delete_indexer(self, indexer_id: int) -> None:
        """Removes an indexer."""
        await self._delete("indexer", indexer_id)

    async def test_indexer(self, indexer) -> None:
        """Asks the service to validate the settings; failure raises StatusError."""
        await self.post_into(Request("indexer/test", body=indexer))


class IndexerBulkMixin:
    """Bulk indexer edits, offered by Sonarr and Readarr."""

    async def update_indexers(self, bulk: models.BulkIndexer):
        """Applies one set of changes to every indexer in `bulk.ids`."""
        return await self.put_into(
            Request("indexer/bulk", body=bulk), self._indexer_output
        )


class DownloadClientMixin:
    _download_client_output = models.DownloadClientOutput

    async def get_download_clients(self) -> list:
        """Lists the configured download clients."""
        return await self._list("downloadclient", self._download_client_output)

    async def get_download_client(self, client_id: int):
        """Returns one download client by id."""
        return await self._get_one(
            "downloadclient", client_id, self._download_client_output
        )

    async def add_download_client(self, download_client, force: bool = True):
        """Creates a download client; `force` saves it even if its test fails."""
        return await self._create(
            "downloadclient",
            download_client,
            self._download_client_output,
            {"forceSave": force},
        )

    async def update_download_client(self, download_client, force: bool = False):
        """Replaces the download client with `download_client.id`."""
        return await self._update(
            "downloadclient",
            download_client,
            self._download_client_output,
            {"forceSave": force},
        )

    async def delete_download_client(self, client_id: int) -> None:
        """Removes a download client."""
        await self._delete("downloadclient", client_id)

    async def test_download_client(self, download_client) -> None:
        """Asks the service to validate the settings; failure raises StatusError."""
        await self.post_into(Request("downloadclient/test", body=download_client))


class NotificationMixin:
    """Notification connections. These are saved without `forceSave`."""

    _notification_output = models.NotificationOutput

    async def get_notifications(self) -> list:
        """Lists the configured notifications."""
        return await self._list("notification", self._notification_output)

    async def get_notification(self, notification_id: int):
        """Returns one notification by id."""
        return await self._get_one(
            "notification", notification_id, self._notification_output
        )

    async def add_notification(self, notification):
        """Creates a notification."""
        return await self._create(
            "notification", notification, self._notification_output
        )

    async def update_notification(self, notification):
        """Replaces the notification with `notification.id`."""
        return await self._update(
            "notification", notification, self._notification_output
        )

    async def delete_notification(self, notification_id: int) -> None:
        """Removes a notification."""
        await self._delete("notification", notification_id)

    async def test_notification(self, notification) -> None:
        """Asks the service to send a test message; failure raises StatusError."""
        await self.post_into(Request("notification/test", body=notification))


class ImportListMixin:
    _import_list_output = models.ImportListOutput

    async def get_import_lists(self) -> list:
        """Lists the configured import lists."""
        return await self._list("importlist", self._import_list_output)

    async def get_import_list(self, list_id: int):
        """Returns one import list by id."""
        return await self._get_one("importlist", list_id, self._import_list_output)

    async def add_import_list(self, import_list, force: bool = True):
        """Creates an import list; `force` saves it even if its test fails."""
        return await self._create(
            "importlist", import_list, self._import_list_output, {"forceSave": force}
        )

    async def update_import_list(self, import_list, force: bool = False):
        """Replaces the import list with `import_list.id`."""
        return await self._update(
            "importlist", import_list, self._import_list_output, {"forceSave": force}
        )

    async def delete_import_list(self, list_id: int) -> None:
        """Removes an import list."""
        await self._delete("importlist", list_id)

    async def test_import_list(self, import_list) -> None:
        """Asks the service to validate the settings; failure raises StatusError."""
        await self.post_into(Request("importlist/test", body=import_list))


# --- Profiles and Settings ---

class QualityProfileMixin:
    _quality_profile_model = models.QualityProfile

    async def get_quality_profiles(self) -> list:
        """Lists the quality profiles."""
        return await self._list("qualityprofile", self._quality_profile_model)

    async def get_quality_profile(self, profile_id: int):
        """Returns one quality profile by id."""
        return await self._get_one("qualityprofile", profile_id, self._quality_profile_model)

    async def add_quality_profile(self, profile):
        """Creates a quality profile."""
        return await self._create("qualityprofile", profile, self._quality_profile_model)

    async def update_quality_profile(self, profile):
        """Replaces the quality profile with `profile.id`."""
        return await self._update("qualityprofile", profile, self._quality_profile_model)

    async def delete_quality_profile(self, profile_id: int) -> None:
        """Removes a quality profile."""
        await self._delete("qualityprofile", profile_id)


class QualityDefinitionMixin:
    async def get_quality_definitions(self) -> List[models.QualityDefinition]:
        """Lists the size limits of every quality."""
        return await self._list("qualitydefinition", models.QualityDefinition)

    async def get_quality_definition(self, definition_id: int) -> models.QualityDefinition:
        """Returns one quality definition by id."""
        return await self._get_one(
            "qualitydefinition", definition_id, models.QualityDefinition
        )

    async def update_quality_definition(
        self, definition: models.QualityDefinition
    ) -> models.QualityDefinition:
        """Replaces the quality definition with `definition.id`."""
        return await self._update("qualitydefinition", definition, models.QualityDefinition)

    async def update_quality_definitions(
        self, definitions: Sequence[models.QualityDefinition]
    ) -> List[models.QualityDefinition]:
        """Replaces several quality definitions in one call."""
        return await self.put_into(
            Request("qualitydefinition/update", body=list(definitions)),
            List[models.QualityDefinition],
        )


class CustomFormatMixin:
    async def get_custom_formats(self) -> List[models.CustomFormat]:
        """Lists the custom formats."""
        return await self._list("customformat", models.CustomFormat)

    async def get_custom_format(self, format_id: int) -> models.CustomFormat:
        """Returns one custom format by id."""
        return await self._get_one("customformat", format_id, models.CustomFormat)

    async def add_custom_format(self, custom_format: models.CustomFormat) -> models.CustomFormat:
        """Creates a custom format."""
        return await self._create("customformat", custom_format, models.CustomFormat)

    async def update_custom_format(self, custom_format: models.CustomFormat) -> models.CustomFormat:
        """Replaces the custom format with `custom_format.id`."""
        return await self._update("customformat", custom_format, models.CustomFormat)

    async def delete_custom_format(self, format_id: int) -> None:
        """Removes a custom format."""
        await self._delete("customformat", format_id)


class DelayProfileMixin:
    async def get_delay_profiles(self) -> List[models.DelayProfile]:
        """Lists the delay profiles."""
        return await self._list("delayprofile", models.DelayProfile)

    async def get_delay_profile(self, profile_id: int) -> models.DelayProfile:
        """Returns one delay profile by id."""
        return await self._get_one("delayprofile", profile_id, models.DelayProfile)

    async def add_delay_profile(self, profile: models.DelayProfile) -> models.DelayProfile:
        """Creates a delay profile."""
        return await self._create("delayprofile", profile, models.DelayProfile)

    async def update_delay_profile(self, profile: models.DelayProfile) -> models.DelayProfile:
        """Replaces the delay profile with `profile.id`."""
        return await self._update("delayprofile", profile, models.DelayProfile)

    async def delete_delay_profile(self, profile_id: int) -> None:
        """Removes a delay profile."""
        await self._delete("delayprofile", profile_id)


class ReleaseProfileMixin:
    async def get_release_profiles(self) -> List[models.ReleaseProfile]:
        """Lists the release profiles."""
        return await self._list("releaseprofile", models.ReleaseProfile)

    async def get_release_profile(self, profile_id: int) -> models.ReleaseProfile:
        """Returns one release profile by id."""
        return await self._get_one("releaseprofile", profile_id, models.ReleaseProfile)

    async def add_release_profile(self, profile: models.ReleaseProfile) -> models.ReleaseProfile:
        """Creates a release profile."""
        return await self._create("releaseprofile", profile, models.ReleaseProfile)

    async def update_release_profile(self, profile: models.ReleaseProfile) -> models.ReleaseProfile:
        """Replaces the release profile with `profile.id`."""
        return await self._update("releaseprofile", profile, models.ReleaseProfile)

    async def delete_release_profile(self, profile_id: int) -> None:
        """Removes a release profile."""
        await self._delete("releaseprofile", profile_id)


class MetadataProfileMixin:
    _metadata_profile_model = models.MetadataProfile

    async def get_metadata_profiles(self) -> list:
        """Lists the metadata profiles."""
        return await self._list("metadataprofile", self._metadata_profile_model)

    async def get_metadata_profile(self, profile_id: int):
        """Returns one metadata profile by id."""
        return await self._get_one(
            "metadataprofile", profile_id, self._metadata_profile_model
        )

    async def add_metadata_profile(self, profile):
        """Creates a metadata profile."""
        return await self._create("metadataprofile", profile, self._metadata_profile_model)

    async def update_metadata_profile(self, profile):
        """Replaces the metadata profile with `profile.id`."""
        return await self._update("metadataprofile", profile, self._metadata_profile_model)

    async def delete_metadata_profile(self, profile_id: int) -> None:
        """Removes a metadata profile."""
        await self._delete("metadataprofile", profile_id)


class RootFolderMixin:
    async def get_root_folders(self) -> List[models.RootFolder]:
        """Lists the root folders with their free space."""
        return await self._list("rootfolder", models.RootFolder)

    async def get_root_folder(self, folder_id: int) -> models.RootFolder:
        """Returns one root folder by id."""
        return await self._get_one("rootfolder", folder_id, models.RootFolder)

    async def add_root_folder(self, folder: models.RootFolder) -> models.RootFolder:
        """Adds a root folder."""
        return await self._create("rootfolder", folder, models.RootFolder)

    async def delete_root_folder(self, folder_id: int) -> None:
        """Removes a root folder; its media stays on disk."""
        await self._delete("rootfolder", folder_id)


class RemotePathMappingMixin:
    async def get_remote_path_mappings(self) -> List[models.RemotePathMapping]:
        """Lists the remote path mappings."""
        return await self._list("remotepathmapping", models.RemotePathMapping)

    async def get_remote_path_mapping(self, mapping_id: int) -> models.RemotePathMapping:
        """Returns one remote path mapping by id."""
        return await self._get_one("remotepathmapping", mapping_id, models.RemotePathMapping)

    async def add_remote_path_mapping(
        self, mapping: models.RemotePathMapping
    ) -> models.RemotePathMapping:
        """Creates a remote path mapping."""
        return await self._create("remotepathmapping", mapping, models.RemotePathMapping)

    async def update_remote_path_mapping(
        self, mapping: models.RemotePathMapping
    ) -> models.RemotePathMapping:
        """Replaces the remote path mapping with `mapping.id`."""
        return await self._update("remotepathmapping", mapping, models.RemotePathMapping)

    async def delete_remote_path_mapping(self, mapping_id: int) -> None:
        """Removes a remote path mapping."""
        await self._delete("remotepathmapping", mapping_id)


class SettingsMixin:
    """
    Singleton settings documents: naming, media management, indexer and
    download client configuration. Each is fetched whole and put back whole.
    """

    _naming_model: Any = None
    _media_management_model: Any = None
    _indexer_config_model: Any = None
    _download_client_config_model = models.DownloadClientConfig

    async def get_naming(self):
        """Returns the file and folder naming settings."""
        return await self.get_into(Request("config/naming"), self._naming_model)

    async def update_naming(self, naming):
        """Replaces the naming settings."""
        return await self.put_into(
            Request("config/naming", body=naming),
            self._naming_model,
        )

    async def get_media_management(self):
        """Returns the media management settings."""
        return await self.get_into(
            Request("config/mediamanagement"), self._media_management_model
        )

    async def update_media_management(self, media_management):
        """Replaces the media management settings."""
        return await self.put_into(
            Request("config/mediamanagement", body=media_management),
            self._media_management_model,
        )

    async def get_indexer_config(self):
        """Returns the global indexer settings."""
        return await self.get_into(Request("config/indexer"), self._indexer_config_model)

    async def update_indexer_config(self, indexer_config):
        """Replaces the global indexer settings."""
        return await self.put_into(
            Request(
                join_path("config/indexer", str(indexer_config.id or "")),
                body=indexer_config,
            ),
            self._indexer_config_model,
        )

    async def get_download_client_config(self):
        """Returns the global download client settings."""
        return await self.get_into(
            Request("config/downloadclient"), self._download_client_config_model
        )

    async def update_download_client_config(self, download_client_config):
        """Replaces the global download client settings."""
        return await self.put_into(
            Request(
                join_path("config/downloadclient", str(download_client_config.id or "")),
                body=download_client_config,
            ),
            self._download_client_config_model,
        )


# --- Paged Resources ---

class QueueMixin:
    """
    The download queue. `_queue_defaults` holds the per-service
    `includeUnknown...Items` switch.
    """

    _queue_record = models.QueueRecord
    _queue_defaults: Dict[str, str] = {}

    async def get_queue(self, records: int = 0, per_page: int = 0) -> models.PagedResult:
        """Returns up to `records` queue items (0 for all), `per_page` at a time."""

        async def fetch(page: int, size: int):
            return await self.get_queue_page(PageRequest(page=page, page_size=size))

        return await collect_pages(fetch, records, per_page)

    async def get_queue_page(self, params: PageRequest) -> models.PagedResult:
        """Returns one queue page, sorted by time left unless told otherwise."""
        params = params.with_defaults(sort_key="timeleft", **self._queue_defaults)
        return await self.get_into(
            Request("queue", params.params()), models.PagedResult[self._queue_record]
        )

    async def delete_queue(self, queue_id: int, opts: Optional[QueueDeleteOpts] = None) -> None:
        """Removes a queue item; with no options it is also removed from the client."""
        await self._delete("queue", queue_id, (opts or QueueDeleteOpts()).params())

    async def queue_grab(self, *queue_ids: int) -> None:
        """Forces the download of pending queue items."""
        await self.post_into(
            Request("queue/grab/bulk", body=models.BulkIds(ids=list(queue_ids)))
        )


class HistoryMixin:
    """
    Grab, import and failure history.

    Services disagree on how to mark an item failed: some take the id in the
    path, others a form body. `_fail_with_form` selects the latter.
    """

    _history_record = models.HistoryRecord
    _fail_with_form = False

    async def get_history(self, records: int = 0, per_page: int = 0) -> models.PagedResult:
        """Returns up to `records` history items (0 for all), `per_page` at a time."""

        async def fetch(page: int, size: int):
            return await self.get_history_page(PageRequest(page=page, page_size=size))

        return await collect_pages(fetch, records, per_page)

    async def get_history_page(self, params: PageRequest) -> models.PagedResult:
        """Returns one history page, sorted by date unless told otherwise."""
        params = params.with_defaults(sort_key="date")
        return await self.get_into(
            Request("history", params.params()), models.PagedResult[self._history_record]
        )

    async def fail(self, history_id: int) -> None:
        """Marks a history item as failed, triggering a new search."""
        require_id(history_id, "history ID")

        if self._fail_with_form:
            req = Request("history/failed", body={"id": history_id}, form=True)
        else:
            req = Request(join_path("history/failed", str(history_id)))

        await self.post_into(req)


class BlocklistMixin:
    _blocklist_record = models.BlocklistRecord

    async def get_blocklist(self, records: int = 0, per_page: int = 0) -> models.PagedResult:
        """Returns up to `records` blocklist items (0 for all), `per_page` at a time."""

        async def fetch(page: int, size: int):
            return await self.get_blocklist_page(PageRequest(page=page, page_size=size))

        return await collect_pages(fetch, records, per_page)

    async def get_blocklist_page(self, params: PageRequest) -> models.PagedResult:
        """Returns one blocklist page."""
        params = params.with_defaults(sort_key="date")
        return await self.get_into(
            Request("blocklist", params.params()),
            models.PagedResult[self._blocklist_record],
        )

    async def delete_blocklist(self, blocklist_id: int) -> None:
        """Removes one release from the blocklist."""
        await self._delete("blocklist", blocklist_id)

    async def delete_blocklists(self, ids: Sequence[int]) -> None:
        """Removes several releases from the blocklist in one call."""
        await self.delete_any(
            Request("blocklist/bulk", body=models.BulkIds(ids=list(ids)))
        )


# --- Calendar, Feed and Files ---

class CalendarMixin:
    """`_calendar_model` is the entry type: movie, episode, album or book."""

    _calendar_model: Any = None

    async def get_calendar(self, calendar) -> list:
        """Lists the entries that fall inside the calendar filter."""
        return await self.get_into(
            Request("calendar", calendar.params()), List[self._calendar_model]
        )

    async def get_calendar_id(self, calendar_id: int):
        """Returns one calendar entry by id."""
        return await self._get_one("calendar", calendar_id, self._calendar_model)


class FeedMixin:
    async def get_feed(self, feed) -> bytes:
        """
        Returns the iCal feed. The feed lives outside the API prefix and takes
        the API key as a query parameter.
        """
        uri = f"feed/{self.api_version}/calendar/{self.app.lower}.ics"
        req = Request(uri, feed.params(), api=False)

        async with self.get(req) as response:
            return await self._read(response, self._redact(self.url(req)))


class ExclusionMixin:
    """
    Import list exclusions. Radarr names the resource `exclusions`; the other
    services use `importlistexclusion`.
    """

    _exclusion_path = "importlistexclusion"
    _exclusion_model: Any = None

    async def get_exclusions(self) -> list:
        """Lists the import list exclusions."""
        return await self._list(self._exclusion_path, self._exclusion_model)

    async def add_exclusion(self, exclusion):
        """Creates an exclusion."""
        return await self._create(self._exclusion_path, exclusion, self._exclusion_model)

    async def update_exclusion(self, exclusion):
        """Replaces the exclusion with `exclusion.id`."""
        return await self._update(self._exclusion_path, exclusion, self._exclusion_model)

    async def delete_exclusions(self, ids: Sequence[int]) -> None:
        """
        Deletes exclusions one at a time.

        Every id is attempted; failures are gathered into one AggregateError.
        """
        errors = []
        for exclusion_id in ids:
            try:
                await self._delete(self._exclusion_path, exclusion_id)
            except StarrError as e:
                errors.append(f"{exclusion_id}: {e}")

        if errors:
            raise AggregateError(errors)


class ManualImportMixin:
    _manual_import_output: Any = None

    async def manual_import(self, params) -> list:
        """Lists importable files matching the given folder/download filters."""
        return await self.get_into(
            Request("manualimport", params.params()), List[self._manual_import_output]
        )

    async def manual_import_reprocess(self, manual_import) -> None:
        """Sends edited manual import items back for another pass."""
        await self.post_into(Request("manualimport", body=manual_import))
