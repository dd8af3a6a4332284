import asyncio
from datetime import datetime, timezone

from conftest import Recorder, make_handle
from starr.services.lidarr import models
from starr.services.lidarr.client import Lidarr

WHEN = datetime(2020, 2, 20, 4, 20, 20, tzinfo=timezone.utc)


class TestCalendar:
    def test_calendar(self):
        recorder = Recorder(
            payload=[
                {
                    "id": 3722,
                    "title": "Mount Westmore",
                    "releaseDate": "2022-12-09T00:00:00Z",
                    "artistId": 12,
                }
            ]
        )
        lidarr = make_handle(Lidarr, recorder, url="http://music.local:8686/")

        albums = asyncio.run(
            lidarr.get_calendar(models.Calendar(start=WHEN, end=WHEN, unmonitored=True))
        )

        assert str(recorder.last.url) == (
            "http://music.local:8686/api/v1/calendar"
            "?end=2020-02-20T04%3A20%3A20.000Z&includeArtist=false"
            "&start=2020-02-20T04%3A20%3A20.000Z&unmonitored=true"
        )
        assert len(albums) == 1
        assert albums[0].id == 3722
        assert albums[0].title == "Mount Westmore"
        assert albums[0].release_date == datetime(2022, 12, 9, tzinfo=timezone.utc)

    def test_unset_bounds_are_omitted(self):
        assert models.Calendar().params() == [
            ("includeArtist", "false"),
            ("unmonitored", "false"),
        ]


class TestAlbums:
    def test_get_album_by_musicbrainz_id(self):
        recorder = Recorder(payload=[])
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.get_album("mbid-1"))

        assert recorder.last.url.path == "/api/v1/album"
        assert recorder.last.url.params["ForeignAlbumId"] == "mbid-1"

    def test_delete_album_options(self):
        recorder = Recorder()
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.delete_album(5, delete_files=True))

        assert recorder.last.url.path == "/api/v1/album/5"
        assert recorder.last.url.query == b"deleteFiles=true&addImportListExclusion=false"

    def test_update_album_sends_the_path_id_in_the_body(self):
        recorder = Recorder(payload={"id": 5})
        lidarr = make_handle(Lidarr, recorder)
        album = models.Album(id=7, title="Kid A")

        asyncio.run(lidarr.update_album(5, album, move_files=True))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v1/album/5"
        assert recorder.last.url.query == b"moveFiles=true"
        assert recorder.last_json() == {"id": 5, "title": "Kid A"}
        assert album.id == 7


class TestTracks:
    def test_track_ids_repeat(self):
        recorder = Recorder(payload=[])
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.get_tracks(1, 2))

        assert recorder.last.url.query == b"trackIds=1&trackIds=2"

    def test_no_track_file_ids_means_no_request(self):
        recorder = Recorder(payload=[])
        lidarr = make_handle(Lidarr, recorder)

        assert asyncio.run(lidarr.get_track_files([])) == []
        assert recorder.requests == []

    def test_bulk_delete_track_files(self):
        recorder = Recorder()
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.delete_track_files(3, 4))

        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/api/v1/trackfile/bulk"
        assert recorder.last_json() == {"trackFileIDs": [3, 4]}

    def test_track_file_aliases(self):
        track_file = models.TrackFile.model_validate({"id": 1, "qualityCutoffNotMet": True})
        assert track_file.cutoff_not_met is True


class TestRename:
    def test_whole_artist(self):
        recorder = Recorder(payload=[])
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.get_rename(7))

        assert recorder.last.url.query == b"artistId=7"

    def test_one_album(self):
        recorder = Recorder(payload=[])
        lidarr = make_handle(Lidarr, recorder)

        asyncio.run(lidarr.get_rename(7, album_id=9))

        assert recorder.last.url.query == b"artistId=7&albumId=9"


class TestArtists:
    def test_add_artist_drops_the_id(self):
        recorder = Recorder(payload={"id": 40, "artistName": "Westside Connection"})
        lidarr = make_handle(Lidarr, recorder)

        artist = asyncio.run(
            lidarr.add_artist(models.Artist(id=1, artist_name="Westside Connection"))
        )

        assert "id" not in recorder.last_json()
        assert artist.id == 40
