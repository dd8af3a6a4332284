"""Base class for the async Starr service handles."""

import contextlib
import logging
from typing import Any, AsyncIterator, List, Optional, Type, TypeVar

import httpx

from ..application.domain import App, Config
from ..application.exceptions import (
    AuthenticationError,
    InvalidArgumentError,
    StatusError,
    TransportError,
)

from .codec import decode_body, decode_error_message, encode_body
from .request import QueryInput, Request, join_path, redact

T = TypeVar("T")


def require_id(value: Optional[int], what: str = "ID") -> int:
    """Returns `value` if it is a positive identifier."""
    if value is None or value < 1:
        raise InvalidArgumentError(f"invalid {what}: {value}")
    return value


class BaseClient:
    """
    A base handle that owns the HTTP pipeline for one service.

    Subclasses set `app` and `api_version` and expose typed operations that
    build a Request and hand it to one of the verb methods below. The handle
    keeps no per-call state, so one instance may serve concurrent tasks.
    """

    app: App
    api_version: str = "v3"

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        """
        Initializes the handle.

        Args:
            config: Connection descriptor for the service.
            client: An optional httpx.AsyncClient. When omitted, a client is
                    created from the config and closed by `aclose()`.
        """

        self.logger = logging.getLogger(self.__class__.__name__)

        if not config.api_key:
            self.logger.warning(
                f"No API key configured for {config.url}; "
                f"requests will likely be rejected."
            )

        self.config = config
        self._owns_client = client is None
        self.client = client if client is not None else self.default_client(config)

    @staticmethod
    def default_client(config: Config) -> httpx.AsyncClient:
        """Builds a client that honours the TLS flag and never follows redirects."""
        return httpx.AsyncClient(
            verify=config.valid_ssl,
            timeout=config.timeout,
            follow_redirects=False,
        )

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    # --- Request building ---

    def url(self, req: Request) -> str:
        """Renders the full URL of a request, API key included for feeds."""
        extra = None if req.api else [("apikey", self.config.api_key)]
        return req.url(self.config.url, self.api_version, extra)

    def _redact(self, text: str) -> str:
        return redact(text, self.config.api_key)

    def _send_kwargs(self) -> dict:
        if self.config.http_user or self.config.http_pass:
            return {"auth": httpx.BasicAuth(self.config.http_user, self.config.http_pass)}
        return {}

    def _truncate(self, data: bytes, marker: str) -> str:
        text = self._redact(data.decode("utf-8", errors="replace"))
        limit = self.config.max_body
        if limit > 0 and len(text) > limit:
            return text[:limit] + f" <{marker} truncated>"
        return text

    # --- Pipeline ---

    async def _send(self, method: str, req: Request) -> httpx.Response:
        """
        Sends a request and returns the open, streaming response.

        Raises:
            TransportError: If no response was received.
            StatusError: If the status is outside [200, 300).
        """

        url = self.url(req)
        safe_url = self._redact(url)
        content, content_type = encode_body(req.body, req.form)

        headers = {"X-Api-Key": self.config.api_key}
        if content_type:
            headers["Content-Type"] = content_type

        request = self.client.build_request(
            method,
            url,
            content=content,
            headers=headers,
            timeout=self.config.timeout,
        )

        try:
            response = await self.client.send(
                request, stream=True, follow_redirects=False, **self._send_kwargs()
            )
        except httpx.RequestError as e:
            raise TransportError(f"{method} {safe_url}: {e}", url=safe_url) from e

        if content and self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Sent ({method}) {len(content)} bytes to {safe_url}: "
                f"{self._truncate(content, 'body')}"
            )

        if 200 <= response.status_code < 300:
            return response

        body = await self._read(response, safe_url)
        message = decode_error_message(body)
        self.logger.debug(
            f"({method}) {safe_url} failed with {response.status_code}: "
            f"{self._truncate(body, 'data')}"
        )
        raise StatusError(response.status_code, message, safe_url, body)

    async def _read(self, response: httpx.Response, safe_url: str) -> bytes:
        """Drains and releases a streaming response."""
        try:
            return await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(f"reading {safe_url}: {e}", url=safe_url) from e
        finally:
            await response.aclose()

    async def _into(self, method: str, req: Request, target: Any) -> Any:
        response = await self._send(method, req)
        safe_url = self._redact(self.url(req))
        data = await self._read(response, safe_url)

        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"({method}) {safe_url} answered {response.status_code}: "
                f"{self._truncate(data, 'data')}"
            )

        if target is None:
            return None
        return decode_body(data, target, safe_url)

    # --- Verb entry points ---

    @contextlib.asynccontextmanager
    async def stream(self, method: str, req: Request) -> AsyncIterator[httpx.Response]:
        """
        Yields the raw response for `req`; it is closed when the block exits.

        Use this for payloads that are not JSON (feeds, backups).
        """
        response = await self._send(method, req)
        try:
            yield response
        finally:
            await response.aclose()

    def get(self, req: Request):
        return self.stream("GET", req)

    def post(self, req: Request):
        return self.stream("POST", req)

    def put(self, req: Request):
        return self.stream("PUT", req)

    async def get_into(self, req: Request, target: Type[T]) -> T:
        return await self._into("GET", req, target)

    async def post_into(self, req: Request, target: Optional[Type[T]] = None) -> T:
        return await self._into("POST", req, target)

    async def put_into(self, req: Request, target: Optional[Type[T]] = None) -> T:
        return await self._into("PUT", req, target)

    async def delete_into(self, req: Request, target: Optional[Type[T]] = None) -> T:
        return await self._into("DELETE", req, target)

    async def delete_any(self, req: Request) -> None:
        """Performs a DELETE and discards the response body."""
        await self._into("DELETE", req, None)

    # --- Resource shapes ---

    async def _list(self, path: str, model: Type[T], query: QueryInput = None) -> List[T]:
        return await self.get_into(Request(path, query), List[model])

    async def _get_one(self, path: str, item_id: int, model: Type[T]) -> T:
        require_id(item_id)
        return await self.get_into(Request(join_path(path, str(item_id))), model)

    async def _create(self, path: str, item: Any, model: Type[T], query: QueryInput = None) -> T:
        """POSTs `item` with its identifier cleared; the service assigns one."""
        if "id" in type(item).model_fields:
            item = item.model_copy(update={"id": None})
        return await self.post_into(Request(path, query, body=item), model)

    async def _update(self, path: str, item: Any, model: Type[T], query: QueryInput = None) -> T:
        """PUTs `item` to `{path}/{item.id}`; the body repeats the identifier."""
        item_id = require_id(item.id)
        return await self.put_into(
            Request(join_path(path, str(item_id)), query, body=item), model
        )

    async def _delete(self, path: str, item_id: int, query: QueryInput = None) -> None:
        require_id(item_id)
        await self.delete_any(Request(join_path(path, str(item_id)), query))

    # --- Session helpers ---

    async def ping(self) -> None:
        """Checks that the service is reachable; the endpoint needs no API prefix."""
        await self._into("GET", Request("ping", api=False), None)

    async def login(self) -> None:
        """
        Logs in with the configured username and password.

        The session cookie lands in the client's cookie jar and is sent with
        every later request.

        Raises:
            AuthenticationError: If the service rejects the credentials.
        """

        url = self.config.url + "/login"
        safe_url = self._redact(url)
        try:
            response = await self.client.post(
                url,
                data={"username": self.config.username, "password": self.config.password},
                headers={"X-Api-Key": self.config.api_key},
                timeout=self.config.timeout,
                follow_redirects=False,
            )
        except httpx.RequestError as e:
            raise TransportError(f"POST {safe_url}: {e}", url=safe_url) from e

        if response.status_code >= 400:
            raise StatusError(
                response.status_code,
                decode_error_message(response.content),
                safe_url,
                response.content,
            )

        if "loginFailed" in response.headers.get("location", "") or not self.client.cookies:
            raise AuthenticationError(
                f"authenticating as user '{self.config.username}' failed"
            )

        self.logger.info(f"Logged in to {self.config.url} as {self.config.username}.")

    async def get_url(self) -> str:
        """
        Asks the service where it lives.

        Returns the redirect target when the configured URL redirects, which
        reveals a missing URL base, and the configured URL otherwise.

        Raises:
            AuthenticationError: If the service redirects to its login page.
        """

        try:
            response = await self.client.get(
                self.config.url,
                headers={"X-Api-Key": self.config.api_key},
                timeout=self.config.timeout,
                follow_redirects=False,
            )
        except httpx.RequestError as e:
            raise TransportError(f"GET {self.config.url}: {e}", url=self.config.url) from e

        location = response.headers.get("location")
        if not location:
            return self.config.url

        target = str(response.url.join(location))
        if "/login" in target:
            raise AuthenticationError(
                f"redirected to login page while checking URL {self.config.url}"
            )

        return target
