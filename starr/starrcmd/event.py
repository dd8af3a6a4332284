"""
Detects which service launched a custom script, and with which event.

A Starr service runs a custom script with `{service}_eventtype` and a set of
`{service}_*` variables in its environment. `CmdEvent.from_environ()` takes
a snapshot of that environment and records the service and event type; the
`get_*` methods then decode the matching record.

    event = CmdEvent.from_environ()
    if event.type == Event.GRAB:
        grab = event.get_radarr_grab()
"""

import dataclasses
import logging
import os
from typing import Mapping, Optional, Type, TypeVar, Union

from ..application.domain import App
from ..application.exceptions import InvalidEventError, NoEventFoundError

from . import lidarr, prowlarr, radarr, readarr, sonarr
from .parser import Event, fill

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Probe order when more than one service variable is set.
PROBE_ORDER = (App.RADARR, App.SONARR, App.LIDARR, App.READARR, App.PROWLARR)


@dataclasses.dataclass(frozen=True)
class CmdEvent:
    """
    The service and event type of one custom-script invocation.

    `type` is an Event member, or the raw string when the service reported
    an event this library does not know.
    """

    app: App
    type: Union[Event, str]
    environ: Mapping[str, str] = dataclasses.field(repr=False, default_factory=dict)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "CmdEvent":
        """
        Reads the event from `environ`, or from the process environment.

        Raises:
            NoEventFoundError: If no `{service}_eventtype` variable is set.
        """

        snapshot = dict(os.environ if environ is None else environ)

        for app in PROBE_ORDER:
            value = snapshot.get(f"{app.lower}_eventtype", "")
            if not value:
                continue

            try:
                event_type: Union[Event, str] = Event(value)
            except ValueError:
                logger.warning(f"Unknown {app} event type '{value}'.")
                event_type = value

            return cls(app=app, type=event_type, environ=snapshot)

        raise NoEventFoundError("no custom script event found in the environment")

    def get(self, record_cls: Type[R]) -> R:
        """
        Decodes the environment into `record_cls`.

        Raises:
            InvalidEventError: If `record_cls` belongs to another service or
                event type than the one detected.
            EventParseError: If a variable does not parse as its field.
        """

        wanted_app, wanted = record_cls.app, record_cls.event
        if wanted_app != self.app or wanted != self.type:
            raise InvalidEventError(
                f"incorrect event type requested: requested '{wanted_app} {wanted}' "
                f"have '{self.app} {self.type}'"
            )

        return fill(record_cls, self.environ)

    # --- Radarr ---

    def get_radarr_application_update(self) -> radarr.RadarrApplicationUpdate:
        return self.get(radarr.RadarrApplicationUpdate)

    def get_radarr_download(self) -> radarr.RadarrDownload:
        return self.get(radarr.RadarrDownload)

    def get_radarr_grab(self) -> radarr.RadarrGrab:
        return self.get(radarr.RadarrGrab)

    def get_radarr_health_issue(self) -> radarr.RadarrHealthIssue:
        return self.get(radarr.RadarrHealthIssue)

    def get_radarr_movie_file_delete(self) -> radarr.RadarrMovieFileDelete:
        return self.get(radarr.RadarrMovieFileDelete)

    def get_radarr_movie_delete(self) -> radarr.RadarrMovieDelete:
        return self.get(radarr.RadarrMovieDelete)

    def get_radarr_rename(self) -> radarr.RadarrRename:
        return self.get(radarr.RadarrRename)

    def get_radarr_test(self) -> radarr.RadarrTest:
        return self.get(radarr.RadarrTest)

    # --- Sonarr ---

    def get_sonarr_application_update(self) -> sonarr.SonarrApplicationUpdate:
        return self.get(sonarr.SonarrApplicationUpdate)

    def get_sonarr_health_issue(self) -> sonarr.SonarrHealthIssue:
        return self.get(sonarr.SonarrHealthIssue)

    def get_sonarr_grab(self) -> sonarr.SonarrGrab:
        return self.get(sonarr.SonarrGrab)

    def get_sonarr_download(self) -> sonarr.SonarrDownload:
        return self.get(sonarr.SonarrDownload)

    def get_sonarr_rename(self) -> sonarr.SonarrRename:
        return self.get(sonarr.SonarrRename)

    def get_sonarr_series_delete(self) -> sonarr.SonarrSeriesDelete:
        return self.get(sonarr.SonarrSeriesDelete)

    def get_sonarr_episode_file_delete(self) -> sonarr.SonarrEpisodeFileDelete:
        return self.get(sonarr.SonarrEpisodeFileDelete)

    def get_sonarr_test(self) -> sonarr.SonarrTest:
        return self.get(sonarr.SonarrTest)

    # --- Lidarr ---

    def get_lidarr_application_update(self) -> lidarr.LidarrApplicationUpdate:
        return self.get(lidarr.LidarrApplicationUpdate)

    def get_lidarr_health_issue(self) -> lidarr.LidarrHealthIssue:
        return self.get(lidarr.LidarrHealthIssue)

    def get_lidarr_grab(self) -> lidarr.LidarrGrab:
        return self.get(lidarr.LidarrGrab)

    def get_lidarr_album_download(self) -> lidarr.LidarrAlbumDownload:
        return self.get(lidarr.LidarrAlbumDownload)

    def get_lidarr_rename(self) -> lidarr.LidarrRename:
        return self.get(lidarr.LidarrRename)

    def get_lidarr_track_retag(self) -> lidarr.LidarrTrackRetag:
        return self.get(lidarr.LidarrTrackRetag)

    def get_lidarr_test(self) -> lidarr.LidarrTest:
        return self.get(lidarr.LidarrTest)

    # --- Readarr ---

    def get_readarr_application_update(self) -> readarr.ReadarrApplicationUpdate:
        return self.get(readarr.ReadarrApplicationUpdate)

    def get_readarr_health_issue(self) -> readarr.ReadarrHealthIssue:
        return self.get(readarr.ReadarrHealthIssue)

    def get_readarr_grab(self) -> readarr.ReadarrGrab:
        return self.get(readarr.ReadarrGrab)

    def get_readarr_book_delete(self) -> readarr.ReadarrBookDelete:
        return self.get(readarr.ReadarrBookDelete)

    def get_readarr_book_file_delete(self) -> readarr.ReadarrBookFileDelete:
        return self.get(readarr.ReadarrBookFileDelete)

    def get_readarr_author_delete(self) -> readarr.ReadarrAuthorDelete:
        return self.get(readarr.ReadarrAuthorDelete)

    def get_readarr_rename(self) -> readarr.ReadarrRename:
        return self.get(readarr.ReadarrRename)

    def get_readarr_download(self) -> readarr.ReadarrDownload:
        return self.get(readarr.ReadarrDownload)

    def get_readarr_track_retag(self) -> readarr.ReadarrTrackRetag:
        return self.get(readarr.ReadarrTrackRetag)

    def get_readarr_test(self) -> readarr.ReadarrTest:
        return self.get(readarr.ReadarrTest)

    # --- Prowlarr ---

    def get_prowlarr_application_update(self) -> prowlarr.ProwlarrApplicationUpdate:
        return self.get(prowlarr.ProwlarrApplicationUpdate)

    def get_prowlarr_health_issue(self) -> prowlarr.ProwlarrHealthIssue:
        return self.get(prowlarr.ProwlarrHealthIssue)

    def get_prowlarr_test(self) -> prowlarr.ProwlarrTest:
        return self.get(prowlarr.ProwlarrTest)


RECORDS = {
    (record.app, record.event): record
    for module in (radarr, sonarr, lidarr, readarr, prowlarr)
    for record in vars(module).values()
    if isinstance(record, type) and dataclasses.is_dataclass(record) and hasattr(record, "event")
}


def record_for(event: CmdEvent) -> Optional[type]:
    """Returns the record class declared for the detected event, if any."""
    return RECORDS.get((event.app, event.type))
