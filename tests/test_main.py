import asyncio
import json

import pytest

from starr.__main__ import build_parser, run_application, show_event

EVENT_VARIABLES = (
    "radarr_eventtype",
    "sonarr_eventtype",
    "lidarr_eventtype",
    "readarr_eventtype",
    "prowlarr_eventtype",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in EVENT_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestParser:
    def test_status(self):
        args = build_parser().parse_args(["--log-level", "debug", "status", "radarr"])

        assert args.command == "status"
        assert args.service == "radarr"
        assert args.log_level == "debug"

    def test_unknown_service(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["status", "plex"])


class TestShowEvent:
    def test_prints_the_decoded_record(self, clean_env, capsys):
        clean_env.setenv("radarr_eventtype", "Rename")
        clean_env.setenv("radarr_moviefile_ids", "3,4")

        show_event()

        output = json.loads(capsys.readouterr().out)
        assert output["app"] == "Radarr"
        assert output["eventType"] == "Rename"
        assert output["record"]["file_ids"] == [3, 4]

    def test_missing_event_exits_with_an_error(self, clean_env):
        args = build_parser().parse_args(["--log-level", "INFO", "event"])

        with pytest.raises(SystemExit) as info:
            asyncio.run(run_application(args))

        assert info.value.code == 1
