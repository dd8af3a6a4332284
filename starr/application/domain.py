"""
This module defines the core domain values for the library.

These classes describe how to reach a service and how to ask it for pages
of records. They are plain, technology-agnostic values: the infrastructure
layer turns them into HTTP requests.
"""

import dataclasses
import enum
from datetime import datetime, timezone
from typing import List, Optional, Tuple

# Default request timeout, in seconds.
DEFAULT_TIMEOUT = 10.0

QueryPairs = List[Tuple[str, str]]


def format_calendar_time(value: datetime) -> str:
    """
    Renders a calendar filter bound in UTC with milliseconds and a literal Z.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


# --- Domain Models ---

class App(str, enum.Enum):
    """The Starr services this library speaks to."""

    LIDARR = "Lidarr"
    PROWLARR = "Prowlarr"
    RADARR = "Radarr"
    READARR = "Readarr"
    SONARR = "Sonarr"

    @property
    def lower(self) -> str:
        return self.value.lower()

    def __str__(self) -> str:
        return self.value


class Sorting(str, enum.Enum):
    """Sort direction accepted by paged endpoints."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    @classmethod
    def parse(cls, value: str) -> "Sorting":
        """Any value other than `descending` (case-insensitive) sorts ascending."""
        if value and value.lower() == cls.DESCENDING.value:
            return cls.DESCENDING
        return cls.ASCENDING


@dataclasses.dataclass(frozen=True)
class Config:
    """
    Connection descriptor for one service endpoint.

    The URL is stored without a trailing slash. No scheme is inferred: a URL
    without one fails at the first request, not here.
    """

    url: str
    api_key: str
    valid_ssl: bool = False
    timeout: float = DEFAULT_TIMEOUT
    http_user: str = ""
    http_pass: str = ""
    username: str = ""
    password: str = ""
    max_body: int = 0

    def __post_init__(self):
        object.__setattr__(self, "url", self.url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"Config(url={self.url!r}, api_key=<redacted>, "
            f"valid_ssl={self.valid_ssl}, timeout={self.timeout})"
        )


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """
    Input for one page of a paged endpoint (history, queue, blocklist).

    Unset values fall back to page 1, 10 records, `date`, ascending.
    `filter` is an app-specific eventType enum value; zero means no filter.
    `extra` holds additional query pairs rendered after the paging values.
    """

    page: int = 0
    page_size: int = 0
    sort_key: str = ""
    sort_direction: Optional[Sorting] = None
    filter: int = 0
    extra: Tuple[Tuple[str, str], ...] = ()

    def with_defaults(self, sort_key: str = "", **extra: str) -> "PageRequest":
        """
        Returns a copy with `sort_key` and the `extra` pairs set, but only
        where the caller left them unset.
        """
        present = {key for key, _ in self.extra}
        added = tuple(
            (key, value) for key, value in extra.items() if key not in present
        )
        return dataclasses.replace(
            self,
            sort_key=self.sort_key or sort_key,
            extra=self.extra + added,
        )

    def params(self) -> QueryPairs:
        """Renders the request as ordered query pairs."""
        direction = self.sort_direction or Sorting.ASCENDING
        pairs = [
            ("page", str(self.page if self.page > 0 else 1)),
            ("pageSize", str(self.page_size if self.page_size > 0 else 10)),
            ("sortKey", self.sort_key or "date"),
            ("sortDirection", Sorting.parse(direction).value),
        ]

        if self.filter > 0:
            pairs.append(("eventType", str(int(self.filter))))

        pairs.extend(self.extra)
        return pairs


@dataclasses.dataclass(frozen=True)
class QueueDeleteOpts:
    """Options for removing an item from a download queue."""

    remove_from_client: Optional[bool] = None
    blocklist: bool = False
    skip_redownload: bool = False
    change_category: bool = False

    def params(self) -> QueryPairs:
        # The service removes from the client unless told otherwise.
        remove = True if self.remove_from_client is None else self.remove_from_client
        pairs = [("removeFromClient", "true" if remove else "false")]

        if self.blocklist:
            pairs.append(("blocklist", "true"))
        if self.skip_redownload:
            pairs.append(("skipRedownload", "true"))
        if self.change_category:
            pairs.append(("changeCategory", "true"))

        return pairs
