"""
Pydantic models shared by more than one Starr service.

The services speak camelCase JSON. Models declare snake_case fields and an
alias generator maps them to the wire names. Every field is optional: the
services omit values freely, and an unset field is left out of request
payloads. Unknown fields are kept so that an object fetched, edited and sent
back loses nothing the model does not declare.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def alias(name: str):
    """An optional field whose wire name does not follow from its own."""
    return Field(default=None, alias=name)


class StarrModel(BaseModel):
    """Base for every wire model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class PagedResult(StarrModel, Generic[T]):
    """A page of records, or the aggregate of several pages."""

    page: int = 0
    page_size: int = 0
    sort_key: str = ""
    sort_direction: str = ""
    total_records: int = 0
    records: List[T] = []


# --- Common Values ---

class Value(StarrModel):
    """An id/name pair, used for languages and similar lookups."""

    id: Optional[int] = None
    name: Optional[str] = None


class BaseQuality(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    source: Optional[str] = None
    resolution: Optional[int] = None
    modifier: Optional[str] = None


class QualityRevision(StarrModel):
    version: Optional[int] = None
    real: Optional[int] = None
    is_repack: Optional[bool] = None


class Quality(StarrModel):
    """A quality with its revision, or a quality profile item."""

    id: Optional[int] = None
    name: Optional[str] = None
    quality: Optional[BaseQuality] = None
    revision: Optional[QualityRevision] = None
    items: Optional[List["Quality"]] = None
    allowed: Optional[bool] = None


class StatusMessage(StarrModel):
    title: Optional[str] = None
    messages: Optional[List[str]] = None


class Link(StarrModel):
    url: Optional[str] = None
    name: Optional[str] = None


class Image(StarrModel):
    cover_type: Optional[str] = None
    url: Optional[str] = None
    remote_url: Optional[str] = None
    extension: Optional[str] = None


class Ratings(StarrModel):
    votes: Optional[int] = None
    value: Optional[float] = None
    popularity: Optional[float] = None


class Path(StarrModel):
    name: Optional[str] = None
    path: Optional[str] = None


class KeyValue(StarrModel):
    key: Optional[str] = None
    value: Optional[int] = None


class SelectOption(StarrModel):
    dividers_after: Optional[bool] = None
    order: Optional[int] = None
    value: Optional[int] = None
    name: Optional[str] = None
    hint: Optional[str] = None


class FieldInput(StarrModel):
    """A provider setting as sent to the service."""

    name: Optional[str] = None
    value: Any = None


class FieldOutput(StarrModel):
    """A provider setting as described by the service."""

    advanced: Optional[bool] = None
    order: Optional[int] = None
    help_link: Optional[str] = None
    help_text: Optional[str] = None
    hidden: Optional[str] = None
    label: Optional[str] = None
    name: Optional[str] = None
    section: Optional[str] = None
    select_options_provider_action: Optional[str] = None
    type: Optional[str] = None
    privacy: Optional[str] = None
    value: Any = None
    select_options: Optional[List[SelectOption]] = None


# --- Shared Resources ---

class Tag(StarrModel):
    id: Optional[int] = None
    label: Optional[str] = None


class SystemStatus(StarrModel):
    app_data: Optional[str] = None
    app_name: Optional[str] = None
    authentication: Optional[str] = None
    branch: Optional[str] = None
    build_time: Optional[datetime] = None
    instance_name: Optional[str] = None
    is_admin: Optional[bool] = None
    is_debug: Optional[bool] = None
    is_docker: Optional[bool] = None
    is_linux: Optional[bool] = None
    is_osx: Optional[bool] = None
    is_production: Optional[bool] = None
    is_windows: Optional[bool] = None
    migration_version: Optional[int] = None
    mode: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    package_update_mechanism: Optional[str] = None
    runtime_name: Optional[str] = None
    runtime_version: Optional[str] = None
    start_time: Optional[datetime] = None
    startup_path: Optional[str] = None
    url_base: Optional[str] = None
    version: Optional[str] = None


class Backup(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    path: Optional[str] = None
    type: Optional[str] = None
    size: Optional[int] = None
    time: Optional[datetime] = None


class CommandResponse(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    command_name: Optional[str] = None
    message: Optional[str] = None
    priority: Optional[str] = None
    status: Optional[str] = None
    queued: Optional[datetime] = None
    started: Optional[datetime] = None
    ended: Optional[datetime] = None
    state_change_time: Optional[datetime] = None
    last_execution_time: Optional[datetime] = None
    duration: Optional[str] = None
    trigger: Optional[str] = None
    send_updates_to_client: Optional[bool] = None
    update_scheduled_task: Optional[bool] = None
    body: Optional[Dict[str, Any]] = None


class IndexerInput(StarrModel):
    enable_automatic_search: Optional[bool] = None
    enable_interactive_search: Optional[bool] = None
    enable_rss: Optional[bool] = None
    download_client_id: Optional[int] = None
    priority: Optional[int] = None
    id: Optional[int] = None
    config_contract: Optional[str] = None
    implementation: Optional[str] = None
    name: Optional[str] = None
    protocol: Optional[str] = None
    tags: Optional[List[int]] = None
    fields: Optional[List[FieldInput]] = None


class IndexerOutput(IndexerInput):
    supports_rss: Optional[bool] = None
    supports_search: Optional[bool] = None
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    fields: Optional[List[FieldOutput]] = None


class DownloadClientInput(StarrModel):
    enable: Optional[bool] = None
    remove_completed_downloads: Optional[bool] = None
    remove_failed_downloads: Optional[bool] = None
    priority: Optional[int] = None
    id: Optional[int] = None
    config_contract: Optional[str] = None
    implementation: Optional[str] = None
    name: Optional[str] = None
    protocol: Optional[str] = None
    tags: Optional[List[int]] = None
    fields: Optional[List[FieldInput]] = None


class DownloadClientOutput(DownloadClientInput):
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    fields: Optional[List[FieldOutput]] = None


class NotificationInput(StarrModel):
    """Event switches differ per service and travel as extra fields."""

    on_grab: Optional[bool] = None
    on_download: Optional[bool] = None
    on_upgrade: Optional[bool] = None
    on_rename: Optional[bool] = None
    on_health_issue: Optional[bool] = None
    on_application_update: Optional[bool] = None
    include_health_warnings: Optional[bool] = None
    id: Optional[int] = None
    name: Optional[str] = None
    implementation: Optional[str] = None
    config_contract: Optional[str] = None
    tags: Optional[List[int]] = None
    fields: Optional[List[FieldInput]] = None


class NotificationOutput(NotificationInput):
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    fields: Optional[List[FieldOutput]] = None


class ImportListInput(StarrModel):
    enable_auto: Optional[bool] = None
    enabled: Optional[bool] = None
    search_on_add: Optional[bool] = None
    list_order: Optional[int] = None
    id: Optional[int] = None
    quality_profile_id: Optional[int] = None
    config_contract: Optional[str] = None
    implementation: Optional[str] = None
    list_type: Optional[str] = None
    name: Optional[str] = None
    root_folder_path: Optional[str] = None
    tags: Optional[List[int]] = None
    fields: Optional[List[FieldInput]] = None


class ImportListOutput(ImportListInput):
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    fields: Optional[List[FieldOutput]] = None


class RootFolder(StarrModel):
    id: Optional[int] = None
    path: Optional[str] = None
    name: Optional[str] = None
    accessible: Optional[bool] = None
    free_space: Optional[int] = None
    unmapped_folders: Optional[List[Path]] = None


class RemotePathMapping(StarrModel):
    id: Optional[int] = None
    host: Optional[str] = None
    remote_path: Optional[str] = None
    local_path: Optional[str] = None


class DownloadClientConfig(StarrModel):
    id: Optional[int] = None
    enable_completed_download_handling: Optional[bool] = None
    auto_redownload_failed: Optional[bool] = None
    check_for_finished_download_interval: Optional[int] = None
    download_client_working_folders: Optional[str] = None


class QualityDefinition(StarrModel):
    id: Optional[int] = None
    weight: Optional[int] = None
    min_size: Optional[float] = None
    max_size: Optional[float] = None
    preferred_size: Optional[float] = None
    title: Optional[str] = None
    quality: Optional[BaseQuality] = None


class FormatItem(StarrModel):
    format: Optional[int] = None
    name: Optional[str] = None
    score: Optional[int] = None


class QualityProfile(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    upgrade_allowed: Optional[bool] = None
    cutoff: Optional[int] = None
    items: Optional[List[Quality]] = None
    min_format_score: Optional[int] = None
    cutoff_format_score: Optional[int] = None
    format_items: Optional[List[FormatItem]] = None
    language: Optional[Value] = None


class CustomFormatSpec(StarrModel):
    name: Optional[str] = None
    implementation: Optional[str] = None
    implementation_name: Optional[str] = None
    info_link: Optional[str] = None
    negate: Optional[bool] = None
    required: Optional[bool] = None
    fields: Optional[List[FieldOutput]] = None


class CustomFormat(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    include_custom_format_when_renaming: Optional[bool] = None
    specifications: Optional[List[CustomFormatSpec]] = None


class DelayProfile(StarrModel):
    id: Optional[int] = None
    enable_usenet: Optional[bool] = None
    enable_torrent: Optional[bool] = None
    bypass_if_highest_quality: Optional[bool] = None
    usenet_delay: Optional[int] = None
    torrent_delay: Optional[int] = None
    order: Optional[int] = None
    tags: Optional[List[int]] = None
    preferred_protocol: Optional[str] = None


class ReleaseProfile(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None
    enabled: Optional[bool] = None
    required: Any = None
    ignored: Any = None
    indexer_id: Optional[int] = None
    tags: Optional[List[int]] = None


class MetadataProfile(StarrModel):
    id: Optional[int] = None
    name: Optional[str] = None


class Rejection(StarrModel):
    reason: Optional[str] = None
    type: Optional[str] = None


class QueueRecord(StarrModel):
    id: Optional[int] = None
    title: Optional[str] = None
    size: Optional[float] = None
    sizeleft: Optional[float] = None
    timeleft: Optional[str] = None
    estimated_completion_time: Optional[datetime] = None
    status: Optional[str] = None
    tracked_download_status: Optional[str] = None
    tracked_download_state: Optional[str] = None
    status_messages: Optional[List[StatusMessage]] = None
    download_id: Optional[str] = None
    protocol: Optional[str] = None
    download_client: Optional[str] = None
    indexer: Optional[str] = None
    output_path: Optional[str] = None
    error_message: Optional[str] = None
    quality: Optional[Quality] = None
    languages: Optional[List[Value]] = None


class HistoryRecord(StarrModel):
    id: Optional[int] = None
    source_title: Optional[str] = None
    quality: Optional[Quality] = None
    quality_cutoff_not_met: Optional[bool] = None
    date: Optional[datetime] = None
    download_id: Optional[str] = None
    event_type: Optional[str] = None
    data: Optional[Dict[str, Any]] = None


class BlocklistRecord(StarrModel):
    id: Optional[int] = None
    date: Optional[datetime] = None
    source_title: Optional[str] = None
    protocol: Optional[str] = None
    indexer: Optional[str] = None
    message: Optional[str] = None
    quality: Optional[Quality] = None
    languages: Optional[List[Value]] = None


class BulkIds(StarrModel):
    ids: List[int] = []


class BulkIndexer(StarrModel):
    """Changes applied to every indexer in `ids`. `apply_tags` is add, remove or replace."""

    ids: List[int] = []
    tags: Optional[List[int]] = None
    apply_tags: Optional[str] = None
    enable_rss: Optional[bool] = None
    enable_automatic_search: Optional[bool] = None
    enable_interactive_search: Optional[bool] = None
    priority: Optional[int] = None


class Rename(StarrModel):
    existing_path: Optional[str] = None
    new_path: Optional[str] = None
