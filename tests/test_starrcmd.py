import dataclasses
from datetime import datetime, timezone
from typing import ClassVar, List

import pytest

from starr.application.domain import App
from starr.application.exceptions import (
    EventParseError,
    EventSchemaError,
    InvalidEventError,
    NoEventFoundError,
)
from starr.starrcmd.event import CmdEvent, record_for
from starr.starrcmd.parser import Event, env, fill, parse_bool, parse_date, parse_int
from starr.starrcmd.radarr import RadarrGrab, RadarrRename
from starr.starrcmd.sonarr import SonarrGrab


class TestCmdEvent:
    def test_radarr_grab(self):
        event = CmdEvent.from_environ(
            {
                "radarr_eventtype": "Grab",
                "radarr_release_size": "123456778",
                "radarr_movie_year": "2012",
                "radarr_movie_in_cinemas_date": "11/22/2005 12:00:00 AM",
            }
        )

        grab = event.get_radarr_grab()

        assert event.app == App.RADARR
        assert event.type == Event.GRAB
        assert grab.size == 123456778
        assert grab.year == 2012
        assert grab.in_cinemas == datetime(2005, 11, 22, 0, 0, 0, tzinfo=timezone.utc)
        assert grab.title == ""
        assert grab.release_date is None

    def test_radarr_rename_lists(self):
        event = CmdEvent.from_environ(
            {
                "radarr_eventtype": "Rename",
                "radarr_moviefile_ids": "3,4,5,6,7,8",
                "radarr_moviefile_relativepaths": "/here|/there|/every/where",
            }
        )

        rename = event.get_radarr_rename()

        assert rename.file_ids == [3, 4, 5, 6, 7, 8]
        assert rename.relative_paths == ["/here", "/there", "/every/where"]
        assert rename.paths == []

    def test_no_event(self):
        with pytest.raises(NoEventFoundError):
            CmdEvent.from_environ({"PATH": "/usr/bin"})

    def test_reads_the_process_environment(self, monkeypatch):
        monkeypatch.setenv("sonarr_eventtype", "Test")

        event = CmdEvent.from_environ()

        assert event.app == App.SONARR
        assert event.type == Event.TEST

    def test_wrong_event_type(self):
        event = CmdEvent.from_environ({"radarr_eventtype": "Download"})

        with pytest.raises(InvalidEventError):
            event.get_radarr_grab()

    def test_wrong_service(self):
        event = CmdEvent.from_environ({"radarr_eventtype": "Grab"})

        with pytest.raises(InvalidEventError):
            event.get(SonarrGrab)

    def test_unknown_event_type_is_kept(self):
        event = CmdEvent.from_environ({"lidarr_eventtype": "SomethingNew"})

        assert event.app == App.LIDARR
        assert event.type == "SomethingNew"
        assert record_for(event) is None

    def test_parse_error(self):
        event = CmdEvent.from_environ({"radarr_eventtype": "Grab", "radarr_movie_year": "20x2"})

        with pytest.raises(EventParseError) as info:
            event.get(RadarrGrab)

        assert info.value.name == "radarr_movie_year"
        assert info.value.value == "20x2"

    def test_list_item_parse_error(self):
        event = CmdEvent.from_environ({"radarr_eventtype": "Rename", "radarr_moviefile_ids": "3,x"})

        with pytest.raises(EventParseError):
            event.get(RadarrRename)

    def test_record_for(self):
        event = CmdEvent.from_environ({"radarr_eventtype": "Rename"})

        assert record_for(event) is RadarrRename


@dataclasses.dataclass(frozen=True)
class _NoSeparator:
    app: ClassVar[App] = App.RADARR
    event: ClassVar[Event] = Event.TEST

    ids: List[int] = env("radarr_ids")


@dataclasses.dataclass(frozen=True)
class _BoolList:
    flags: List[bool] = env("radarr_flags", sep=",")


@dataclasses.dataclass(frozen=True)
class _Unsupported:
    ratio: float = env("radarr_ratio")


class TestSchema:
    def test_list_without_separator(self):
        with pytest.raises(EventSchemaError):
            fill(_NoSeparator, {})

    def test_list_of_bool(self):
        with pytest.raises(EventSchemaError):
            fill(_BoolList, {"radarr_flags": "true"})

    def test_unsupported_type(self):
        with pytest.raises(EventSchemaError):
            fill(_Unsupported, {"radarr_ratio": "1.5"})

    def test_schema_error_is_a_type_error(self):
        assert issubclass(EventSchemaError, TypeError)


class TestScalars:
    def test_bool(self):
        for value in ("1", "t", "T", "TRUE", "true", "True"):
            assert parse_bool(value) is True
        for value in ("0", "f", "F", "FALSE", "false", "False"):
            assert parse_bool(value) is False
        with pytest.raises(ValueError):
            parse_bool("yes")

    def test_int(self):
        assert parse_int("-12") == -12
        assert parse_int("+7") == 7
        with pytest.raises(ValueError):
            parse_int("1.5")
        with pytest.raises(ValueError):
            parse_int(" 1")

    def test_date(self):
        assert parse_date("3/4/2021 1:05:09 PM") == datetime(
            2021, 3, 4, 13, 5, 9, tzinfo=timezone.utc
        )
        with pytest.raises(ValueError):
            parse_date("2021-03-04")
