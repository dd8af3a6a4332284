import asyncio
import inspect

import httpx
import pytest

from conftest import Recorder, make_handle
from starr.application.domain import QueueDeleteOpts
from starr.application.exceptions import AggregateError
from starr.infrastructure import resources
from starr.infrastructure.api_models import (
    DelayProfile,
    DownloadClientInput,
    ImportListInput,
    IndexerInput,
    NotificationInput,
)
from starr.services.lidarr.client import Lidarr
from starr.services.radarr import models as radarr_models
from starr.services.radarr.client import Radarr
from starr.services.sonarr.client import Sonarr


class TestBlocklist:
    def test_empty_blocklist_takes_one_request(self):
        recorder = Recorder(payload={"page": 1, "pageSize": 20, "totalRecords": 0, "records": []})
        radarr = make_handle(Radarr, recorder)

        result = asyncio.run(radarr.get_blocklist(records=20))

        assert result.records == []
        assert len(recorder.requests) == 1
        assert recorder.last.url.path == "/api/v3/blocklist"
        assert recorder.last.url.query == (
            b"page=1&pageSize=20&sortKey=date&sortDirection=ascending"
        )

    def test_bulk_delete_sends_ids_in_the_body(self):
        recorder = Recorder()
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.delete_blocklists([4, 5]))

        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/v3/blocklist/bulk"
        assert recorder.last_json() == {"ids": [4, 5]}


class TestCommand:
    def test_send_command(self):
        recorder = Recorder(payload={"id": 1234, "name": "MoviesSearch", "body": {"mapstring": "mapinterface"}})
        radarr = make_handle(Radarr, recorder)
        command = radarr_models.CommandRequest(name="MoviesSearch", movie_ids=[1, 3, 7])

        response = asyncio.run(radarr.send_command(command))

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v3/command"
        assert recorder.last_json() == {"name": "MoviesSearch", "movieIds": [1, 3, 7]}
        assert response.id == 1234
        assert response.body == {"mapstring": "mapinterface"}

    def test_unnamed_command_is_not_sent(self):
        recorder = Recorder()
        radarr = make_handle(Radarr, recorder)

        response = asyncio.run(radarr.send_command(radarr_models.CommandRequest()))

        assert response.id is None
        assert recorder.requests == []


class TestDelayProfile:
    def test_update_puts_to_the_profile_path(self):
        recorder = Recorder(payload={"id": 10, "usenetDelay": 30})
        radarr = make_handle(Radarr, recorder)

        profile = asyncio.run(radarr.update_delay_profile(DelayProfile(id=10, usenet_delay=30)))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v3/delayprofile/10"
        assert recorder.last_json() == {"id": 10, "usenetDelay": 30}
        assert profile.usenet_delay == 30


class TestProviders:
    def test_add_clears_the_id_and_forces_save(self):
        recorder = Recorder(payload={"id": 3, "name": "sab"})
        radarr = make_handle(Radarr, recorder)

        created = asyncio.run(
            radarr.add_download_client(DownloadClientInput(id=99, name="sab", enable=True))
        )

        assert recorder.last.url.path == "/api/v3/downloadclient"
        assert recorder.last.url.params["forceSave"] == "true"
        assert "id" not in recorder.last_json()
        assert created.id == 3

    def test_update_does_not_force_by_default(self):
        recorder = Recorder(payload={"id": 3})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.update_download_client(DownloadClientInput(id=3, name="sab")))

        assert recorder.last.url.path == "/api/v3/downloadclient/3"
        assert recorder.last.url.params["forceSave"] == "false"
        assert recorder.last_json()["id"] == 3

    def test_indexer_add_forces_and_update_does_not(self):
        recorder = Recorder(payload={"id": 4, "name": "nzbgeek"})
        sonarr = make_handle(Sonarr, recorder)

        asyncio.run(sonarr.add_indexer(IndexerInput(name="nzbgeek")))

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v3/indexer"
        assert recorder.last.url.params["forceSave"] == "true"

        asyncio.run(sonarr.update_indexer(IndexerInput(id=4, name="nzbgeek")))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v3/indexer/4"
        assert recorder.last.url.params["forceSave"] == "false"

    def test_import_list_add_without_force(self):
        recorder = Recorder(payload={"id": 2})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.add_import_list(ImportListInput(name="trakt"), force=False))

        assert recorder.last.url.path == "/api/v3/importlist"
        assert recorder.last.url.params["forceSave"] == "false"
        assert recorder.last_json() == {"name": "trakt"}

    def test_notifications_never_send_force_save(self):
        recorder = Recorder(payload={"id": 6, "name": "discord"})
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.add_notification(NotificationInput(name="discord")))

        assert recorder.last.url.path == "/api/v1/notification"
        assert "forceSave" not in recorder.last.url.params

        asyncio.run(lidarr.update_notification(NotificationInput(id=6, name="discord")))

        assert recorder.last.url.path == "/api/v1/notification/6"
        assert "forceSave" not in recorder.last.url.params


class TestQueue:
    def test_page_defaults(self):
        recorder = Recorder(payload={"totalRecords": 0, "records": []})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.get_queue(records=5))

        params = recorder.last.url.params
        assert params["pageSize"] == "5"
        assert params["sortKey"] == "timeleft"
        assert params["includeUnknownMovieItems"] == "true"

    def test_delete_options(self):
        recorder = Recorder()
        sonarr = make_handle(Sonarr, recorder)

        asyncio.run(sonarr.delete_queue(8, QueueDeleteOpts(blocklist=True)))

        assert recorder.last.url.path == "/api/v3/queue/8"
        assert recorder.last.url.query == b"removeFromClient=true&blocklist=true"


class TestHistoryFail:
    def test_radarr_puts_the_id_in_the_path(self):
        recorder = Recorder()
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.fail(12))

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/api/v3/history/failed/12"
        assert recorder.last.content == b""

    def test_lidarr_posts_a_form(self):
        recorder = Recorder()
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.fail(12))

        assert recorder.last.url.path == "/api/v1/history/failed"
        assert recorder.last.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert recorder.last.content == b"id=12"


class TestExclusions:
    def test_every_id_is_attempted(self):
        seen = []

        def answer(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            if request.url.path.endswith("/2"):
                return httpx.Response(404, json={"message": "NotFound"})
            return httpx.Response(200)

        radarr = make_handle(Radarr, answer)

        with pytest.raises(AggregateError) as info:
            asyncio.run(radarr.delete_exclusions([1, 2, 3]))

        assert seen == ["/api/v3/exclusions/1", "/api/v3/exclusions/2", "/api/v3/exclusions/3"]
        assert len(info.value.errors) == 1
        assert info.value.errors[0].startswith("2:")

    def test_bulk_add_strips_ids(self):
        recorder = Recorder()
        radarr = make_handle(Radarr, recorder)

        asyncio.run(
            radarr.add_exclusions([radarr_models.Exclusion(id=5, tmdb_id=603, title="The Matrix")])
        )

        assert recorder.last.url.path == "/api/v3/exclusions/bulk"
        assert recorder.last_json() == [{"tmdbId": 603, "movieTitle": "The Matrix"}]


class TestLookup:
    def test_empty_term_short_circuits(self):
        recorder = Recorder()
        radarr = make_handle(Radarr, recorder)

        assert asyncio.run(radarr.lookup("")) == []
        assert recorder.requests == []


class TestFeed:
    def test_feed_is_outside_the_api_prefix(self):
        recorder = Recorder(content=b"BEGIN:VCALENDAR")
        radarr = make_handle(Radarr, recorder)

        data = asyncio.run(radarr.get_feed(radarr_models.Feed(past_days=1)))

        assert data == b"BEGIN:VCALENDAR"
        assert recorder.last.url.path == "/feed/v3/calendar/radarr.ics"
        assert recorder.last.url.params["apikey"] == "0123456789abcdef"


def test_public_mixin_operations_are_documented():
    undocumented = [
        f"{name}.{attr}"
        for name, cls in inspect.getmembers(resources, inspect.isclass)
        if name.endswith("Mixin") and cls.__module__ == resources.__name__
        for attr, member in vars(cls).items()
        if inspect.iscoroutinefunction(member)
        and not attr.startswith("_")
        and not inspect.getdoc(member)
    ]

    assert undocumented == []
