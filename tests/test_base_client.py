import asyncio

import httpx
import pytest

from conftest import API_KEY, Recorder, make_handle
from starr.application.domain import Config
from starr.application.exceptions import (
    AuthenticationError,
    DecodeError,
    InvalidArgumentError,
    StatusError,
    TransportError,
)
from starr.infrastructure.base_client import require_id
from starr.services.radarr.client import Radarr


class TestPipeline:
    def test_api_key_header_is_sent(self):
        recorder = Recorder(payload=[{"id": 1, "label": "hd"}])
        radarr = make_handle(Radarr, recorder)

        tags = asyncio.run(radarr.get_tags())

        assert tags[0].label == "hd"
        assert recorder.last.headers["X-Api-Key"] == API_KEY
        assert recorder.last.method == "GET"
        assert str(recorder.last.url) == "http://starr.local:7878/api/v3/tag"

    def test_status_error_carries_code_and_message(self):
        recorder = Recorder(status=404, payload={"message": "NotFound"})
        radarr = make_handle(Radarr, recorder)

        with pytest.raises(StatusError) as info:
            asyncio.run(radarr.delete_custom_format(2))

        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/v3/customformat/2"
        assert info.value.code == 404
        assert info.value.message == "NotFound"
        assert "404" in str(info.value)

    def test_transport_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        radarr = make_handle(Radarr, refuse)

        with pytest.raises(TransportError) as info:
            asyncio.run(radarr.get_tags())
        assert "connection refused" in str(info.value)

    def test_decode_error(self):
        radarr = make_handle(Radarr, Recorder(content=b"<html>login</html>"))

        with pytest.raises(DecodeError):
            asyncio.run(radarr.get_tags())

    def test_api_key_is_redacted_from_errors(self):
        radarr = make_handle(Radarr, Recorder(status=500, content=b"boom"))

        with pytest.raises(StatusError) as info:
            asyncio.run(radarr.ping())

        assert API_KEY not in str(info.value)
        assert "<redacted>" in info.value.url

    def test_ping_skips_the_api_prefix(self):
        recorder = Recorder(payload={"status": "OK"})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.ping())

        assert recorder.last.url.path == "/ping"
        assert recorder.last.url.params["apikey"] == API_KEY

    def test_basic_auth(self):
        recorder = Recorder(payload=[])
        radarr = make_handle(Radarr, recorder, http_user="user", http_pass="pass")

        asyncio.run(radarr.get_tags())

        assert recorder.last.headers["Authorization"].startswith("Basic ")

    def test_invalid_id_fails_before_any_request(self):
        recorder = Recorder(payload={})
        radarr = make_handle(Radarr, recorder)

        with pytest.raises(InvalidArgumentError):
            asyncio.run(radarr.get_tag(0))
        assert recorder.requests == []


class TestCancellation:
    def test_cancelling_the_task_cancels_the_call(self):
        async def scenario():
            started = asyncio.Event()

            async def hang(request):
                started.set()
                await asyncio.sleep(3600)

            radarr = make_handle(Radarr, hang)
            task = asyncio.create_task(radarr.get_tags())
            await started.wait()
            task.cancel()
            await task

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(scenario())

    def test_cancelled_before_paging_sends_nothing(self):
        calls = []

        async def history(request):
            calls.append(request)
            return httpx.Response(200, json={"totalRecords": 0, "records": []})

        async def scenario():
            radarr = make_handle(Radarr, history)
            task = asyncio.create_task(radarr.get_history(per_page=10))
            task.cancel()
            await task

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(scenario())

        assert calls == []

    def test_cancelling_mid_paging_stops_the_next_page(self):
        calls = []

        async def scenario():
            second_page = asyncio.Event()

            async def history(request):
                calls.append(request)
                if len(calls) == 1:
                    records = [{"id": n} for n in range(10)]
                    return httpx.Response(200, json={"totalRecords": 30, "records": records})
                second_page.set()
                await asyncio.sleep(3600)

            radarr = make_handle(Radarr, history)
            task = asyncio.create_task(radarr.get_history(per_page=10))
            await second_page.wait()
            task.cancel()
            await task

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(scenario())

        assert len(calls) == 2
        assert calls[0].url.params["page"] == "1"
        assert calls[1].url.params["page"] == "2"


class TestSession:
    def test_login_failure(self):
        recorder = Recorder(status=302, headers={"location": "/login?loginFailed=true"})
        radarr = make_handle(Radarr, recorder, username="admin", password="bad")

        with pytest.raises(AuthenticationError):
            asyncio.run(radarr.login())

        assert recorder.last.url.path == "/login"
        assert b"username=admin" in recorder.last.content

    def test_get_url_follows_one_redirect(self):
        recorder = Recorder(status=302, headers={"location": "/radarr/"})
        radarr = make_handle(Radarr, recorder)

        assert asyncio.run(radarr.get_url()) == "http://starr.local:7878/radarr/"

    def test_get_url_without_redirect(self):
        radarr = make_handle(Radarr, Recorder(status=200, content=b""))

        assert asyncio.run(radarr.get_url()) == "http://starr.local:7878"


class TestConfig:
    def test_trailing_slash_is_stripped(self):
        assert Config(url="http://host/radarr/", api_key="k").url == "http://host/radarr"

    def test_repr_hides_the_key(self):
        assert "secret" not in repr(Config(url="http://host", api_key="secret"))


def test_require_id():
    assert require_id(3) == 3
    with pytest.raises(InvalidArgumentError):
        require_id(None)
    with pytest.raises(InvalidArgumentError):
        require_id(-1)
