"""
Fills event records from custom-script environment variables.

Each record is a dataclass whose fields are declared with `env()`, naming the
variable that feeds it and, for list fields, the separator between items.
"""

import dataclasses
import enum
import re
import typing
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..application.exceptions import EventParseError, EventSchemaError

# Custom scripts receive dates as `M/D/YYYY h:mm:ss AM/PM`.
DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_INT = re.compile(r"[+-]?\d+")


class Event(str, enum.Enum):
    """The event types a service reports in `{service}_eventtype`."""

    TEST = "Test"
    HEALTH_ISSUE = "HealthIssue"
    APPLICATION_UPDATE = "ApplicationUpdate"
    GRAB = "Grab"
    RENAME = "Rename"
    DOWNLOAD = "Download"
    TRACK_RETAG = "TrackRetag"
    ALBUM_DOWNLOAD = "AlbumDownload"
    MOVIE_FILE_DELETE = "MovieFileDelete"
    MOVIE_DELETE = "MovieDelete"
    BOOK_DELETE = "BookDelete"
    AUTHOR_DELETE = "AuthorDelete"
    BOOK_FILE_DELETE = "BookFileDelete"
    SERIES_DELETE = "SeriesDelete"
    EPISODE_FILE_DELETE = "EpisodeFileDelete"

    def __str__(self) -> str:
        return self.value


def env(name: str, sep: Optional[str] = None):
    """Declares a record field fed by the environment variable `name`."""
    return dataclasses.field(default=None, metadata={"env": name.lower(), "sep": sep})


def parse_date(value: str) -> datetime:
    return datetime.strptime(value.strip(), DATE_FORMAT).replace(tzinfo=timezone.utc)


def parse_int(value: str) -> int:
    if not _INT.fullmatch(value):
        raise ValueError("parsing integer: invalid syntax")
    return int(value)


def parse_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError("parsing boolean: invalid syntax")


_SCALARS = {
    str: lambda value: value,
    int: parse_int,
    bool: parse_bool,
    datetime: parse_date,
}

_ZERO = {str: "", int: 0, bool: False, datetime: None}


def _element_type(hint: Any) -> Any:
    """Returns the item type of `List[X]`, or None for scalar hints."""
    if typing.get_origin(hint) in (list, List):
        (item,) = typing.get_args(hint)
        return item
    return None


def fill(record_cls: type, environ: Mapping[str, str]) -> Any:
    """
    Builds a `record_cls` from `environ`.

    Variables that are unset or empty leave their field at its zero value.

    Raises:
        EventParseError: If a value does not parse as its field's type.
        EventSchemaError: If the record declares a field the parser cannot
            handle, such as a list without a separator.
    """

    if not dataclasses.is_dataclass(record_cls):
        raise EventSchemaError(f"{record_cls!r} is not an event record dataclass")

    hints = typing.get_type_hints(record_cls)
    values: Dict[str, Any] = {}

    for field in dataclasses.fields(record_cls):
        name = field.metadata.get("env")
        if not name:
            continue

        hint = hints[field.name]
        item = _element_type(hint)
        raw = environ.get(name, "")

        if item is not None:
            values[field.name] = _parse_list(name, raw, item, field.metadata.get("sep"))
        else:
            values[field.name] = _parse_scalar(name, raw, hint)

    return record_cls(**values)


def _parse_scalar(name: str, raw: str, hint: Any) -> Any:
    parser = _SCALARS.get(hint)
    if parser is None:
        raise EventSchemaError(f"unsupported field type for {name}: {hint!r}")

    if raw == "":
        return _ZERO[hint]

    try:
        return parser(raw)
    except ValueError as e:
        raise EventParseError(name, raw, str(e)) from e


def _parse_list(name: str, raw: str, item: Any, sep: Optional[str]) -> List[Any]:
    if not sep:
        raise EventSchemaError(f"list field {name} declares no separator")

    parser = _SCALARS.get(item)
    if parser is None or item is bool:
        raise EventSchemaError(f"unsupported list item type for {name}: {item!r}")

    if raw == "":
        return []

    result = []
    for part in raw.split(sep):
        try:
            result.append(parser(part))
        except ValueError as e:
            raise EventParseError(name, raw, f"({sep}) {part}: {e}") from e
    return result
