"""
The request value and the URL composer shared by every service handle.
"""

import dataclasses
from collections import abc
import enum
import re
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

API_PREFIX = "api"

_REDACTED = "<redacted>"
_SLASHES = re.compile(r"/+")

QueryInput = Union[Mapping[str, Any], Sequence[Tuple[str, Any]], None]


def render_value(value: Any) -> str:
    """Renders a query scalar in its canonical wire form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return render_value(value.value)
    return str(value)


def render_query(query: QueryInput) -> Tuple[Tuple[str, str], ...]:
    """
    Flattens query input into ordered (key, value) string pairs.

    Sequence values produce one pair per element, in order. None values are
    dropped.
    """
    if not query:
        return ()

    items: Iterable[Tuple[str, Any]]
    items = query.items() if isinstance(query, abc.Mapping) else query

    pairs = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, render_value(v)) for v in value)
        else:
            pairs.append((key, render_value(value)))
    return tuple(pairs)


def join_path(*segments: str) -> str:
    """Joins path segments with exactly one slash between them."""
    parts = [_SLASHES.sub("/", s).strip("/") for s in segments if s]
    return "/".join(p for p in parts if p)


def compose_url(
    base_url: str,
    version: str,
    uri: str,
    query: QueryInput = None,
    api: bool = True,
) -> str:
    """
    Renders `{base}/api/{version}/{uri}?{query}`.

    When `api` is false the prefix and version are left out, which is how
    feed and ping endpoints are addressed.
    """
    path = join_path(API_PREFIX, version, uri) if api else join_path(uri)
    url = base_url.rstrip("/") + "/" + path if path else base_url.rstrip("/")

    encoded = urlencode(render_query(query))
    return f"{url}?{encoded}" if encoded else url


def redact(text: str, secret: str) -> str:
    """Replaces every occurrence of `secret` in `text`."""
    if not secret:
        return text
    return text.replace(secret, _REDACTED)


@dataclasses.dataclass(frozen=True)
class Request:
    """
    One call against a service.

    Attributes:
        uri: Path below the API prefix, e.g. `movie/12`.
        query: Ordered query pairs; mappings and pair sequences are accepted
            and flattened on construction.
        body: Value encoded once as the request payload.
        form: Send `body` as `application/x-www-form-urlencoded`.
        api: Whether `uri` lives under `/api/{version}/`.
    """

    uri: str
    query: Any = ()
    body: Any = None
    form: bool = False
    api: bool = True

    def __post_init__(self):
        object.__setattr__(self, "query", render_query(self.query))

    def url(self, base_url: str, version: str, extra: Optional[QueryInput] = None) -> str:
        query = self.query + render_query(extra)
        return compose_url(base_url, version, self.uri, query, api=self.api)

    def __str__(self) -> str:
        encoded = urlencode(self.query)
        return f"{self.uri}?{encoded}" if encoded else self.uri
