import asyncio
from datetime import datetime, timezone

import pytest

from conftest import Recorder, make_handle
from starr.application.exceptions import InvalidArgumentError
from starr.infrastructure.api_models import BulkIndexer, QualityDefinition
from starr.services.radarr import models as radarr_models
from starr.services.radarr.client import Radarr
from starr.services.readarr import models as readarr_models
from starr.services.readarr.client import Readarr
from starr.services.sonarr import models as sonarr_models
from starr.services.sonarr.client import Sonarr


class TestRadarr:
    def test_get_movie_by_tmdb_id(self):
        recorder = Recorder(payload=[{"id": 1, "title": "Heat", "tmdbId": 949}])
        radarr = make_handle(Radarr, recorder)

        movies = asyncio.run(radarr.get_movie(tmdb_id=949))

        assert recorder.last.url.query == b"tmdbId=949"
        assert movies[0].tmdb_id == 949

    def test_list_movies(self):
        recorder = Recorder(payload=[])
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.get_movie())

        assert recorder.last.url.query == b"excludeLocalCovers=false"

    def test_update_movie(self):
        recorder = Recorder(payload={"id": 4, "title": "Ronin"})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.update_movie(4, radarr_models.Movie(id=4, title="Ronin"), move_files=True))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v3/movie/4"
        assert recorder.last.url.query == b"moveFiles=true"
        assert recorder.last_json() == {"id": 4, "title": "Ronin"}

    def test_update_movie_sends_the_path_id_in_the_body(self):
        recorder = Recorder(payload={"id": 5, "title": "Ronin"})
        radarr = make_handle(Radarr, recorder)
        movie = radarr_models.Movie(title="Ronin")

        asyncio.run(radarr.update_movie(5, movie))

        assert recorder.last.url.path == "/api/v3/movie/5"
        assert recorder.last_json() == {"id": 5, "title": "Ronin"}
        assert movie.id is None

    def test_update_movie_overrides_a_stale_body_id(self):
        recorder = Recorder(payload={"id": 5})
        radarr = make_handle(Radarr, recorder)

        asyncio.run(radarr.update_movie(5, radarr_models.Movie(id=9, title="Ronin")))

        assert recorder.last_json()["id"] == 5

    def test_lookup_id(self):
        recorder = Recorder(payload={"id": 5, "title": "Heat", "tmdbId": 949})
        radarr = make_handle(Radarr, recorder)

        movie = asyncio.run(radarr.lookup_id(5))

        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/api/v3/movie/lookup/5"
        assert movie.tmdb_id == 949

    def test_lookup_id_needs_an_id(self):
        recorder = Recorder(payload={})
        radarr = make_handle(Radarr, recorder)

        with pytest.raises(InvalidArgumentError):
            asyncio.run(radarr.lookup_id(0))

        assert recorder.requests == []

    def test_update_quality_definitions(self):
        recorder = Recorder(payload=[{"id": 1, "title": "HDTV-720p"}, {"id": 2}])
        radarr = make_handle(Radarr, recorder)

        definitions = asyncio.run(
            radarr.update_quality_definitions(
                [
                    QualityDefinition(id=1, title="HDTV-720p", max_size=100),
                    QualityDefinition(id=2, min_size=1.5),
                ]
            )
        )

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v3/qualitydefinition/update"
        assert recorder.last_json() == [
            {"id": 1, "title": "HDTV-720p", "maxSize": 100},
            {"id": 2, "minSize": 1.5},
        ]
        assert [d.id for d in definitions] == [1, 2]

    def test_filter_switches_render_lowercase(self):
        assert radarr_models.Calendar(unmonitored=True).params() == [("unmonitored", "true")]
        assert dict(radarr_models.Feed().params())["asAllDay"] == "false"
        assert radarr_models.ManualImportParams(filter_existing_files=True).params()[-1] == (
            "filterExistingFiles",
            "true",
        )


class TestSonarr:
    def test_lookup_by_tvdb_id(self):
        recorder = Recorder(payload=[])
        sonarr = make_handle(Sonarr, recorder, url="http://tv.local:8989")

        asyncio.run(sonarr.get_series_lookup(tvdb_id=81189))

        assert recorder.last.url.path == "/api/v3/series/lookup"
        assert recorder.last.url.params["term"] == "tvdbid:81189"

    def test_episode_filter_repeats_ids(self):
        recorder = Recorder(payload=[])
        sonarr = make_handle(Sonarr, recorder)

        asyncio.run(
            sonarr.get_series_episodes(
                sonarr_models.EpisodeFilter(series_id=2, episode_ids=[10, 11])
            )
        )

        assert recorder.last.url.query == b"seriesId=2&episodeIds=10&episodeIds=11"

    def test_rename_for_every_season(self):
        recorder = Recorder(payload=[])
        sonarr = make_handle(Sonarr, recorder)

        asyncio.run(sonarr.get_rename(3))

        assert recorder.last.url.query == b"seriesId=3"

    def test_episode_file_quality(self):
        recorder = Recorder(payload={"id": 6})
        sonarr = make_handle(Sonarr, recorder)

        asyncio.run(sonarr.update_episode_file_quality(6, 9))

        assert recorder.last.url.path == "/api/v3/episodefile/6"
        assert recorder.last_json() == {"id": 6, "quality": {"quality": {"id": 9}}}

    def test_bulk_indexer_update(self):
        recorder = Recorder(payload={"id": 1, "name": "nzbgeek"})
        sonarr = make_handle(Sonarr, recorder)

        indexer = asyncio.run(
            sonarr.update_indexers(BulkIndexer(ids=[1, 2], apply_tags="add", tags=[3]))
        )

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v3/indexer/bulk"
        assert recorder.last_json() == {"ids": [1, 2], "tags": [3], "applyTags": "add"}
        assert indexer.name == "nzbgeek"


class TestReadarr:
    def test_api_version(self):
        recorder = Recorder(payload=[])
        readarr = make_handle(Readarr, recorder, url="http://books.local:8787")

        asyncio.run(readarr.get_book("the-hobbit"))

        assert str(recorder.last.url) == "http://books.local:8787/api/v1/book?titleSlug=the-hobbit"

    def test_update_book_moves_files_by_default(self):
        recorder = Recorder(payload={"id": 2})
        readarr = make_handle(Readarr, recorder)

        asyncio.run(readarr.update_book(2, readarr_models.Book(id=2)))

        assert recorder.last.url.path == "/api/v1/book/2"
        assert recorder.last.url.params["moveFiles"] == "true"

    def test_bulk_delete_book_files(self):
        recorder = Recorder()
        readarr = make_handle(Readarr, recorder)

        asyncio.run(readarr.delete_book_files(1, 2))

        assert recorder.last.url.path == "/api/v1/bookfile/bulk"
        assert recorder.last_json() == {"bookFileIds": [1, 2]}

    def test_update_book_sends_the_path_id_in_the_body(self):
        recorder = Recorder(payload={"id": 2})
        readarr = make_handle(Readarr, recorder)

        asyncio.run(readarr.update_book(2, readarr_models.Book(id=8, title="Dune")))

        assert recorder.last.url.path == "/api/v1/book/2"
        assert recorder.last_json() == {"id": 2, "title": "Dune"}

    def test_update_author_sends_the_path_id_in_the_body(self):
        recorder = Recorder(payload={"id": 3})
        readarr = make_handle(Readarr, recorder)
        author = readarr_models.Author(author_name="Frank Herbert")

        asyncio.run(readarr.update_author(3, author))

        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/api/v1/author/3"
        assert recorder.last_json() == {"id": 3, "authorName": "Frank Herbert"}
        assert author.id is None

    def test_bulk_indexer_update(self):
        recorder = Recorder(payload={"id": 4})
        readarr = make_handle(Readarr, recorder)

        asyncio.run(readarr.update_indexers(BulkIndexer(ids=[4], enable_rss=False)))

        assert recorder.last.url.path == "/api/v1/indexer/bulk"
        assert recorder.last_json() == {"ids": [4], "enableRss": False}

    def test_calendar_switches_are_optional(self):
        when = datetime(2021, 1, 1, tzinfo=timezone.utc)

        assert readarr_models.Calendar(start=when).params() == [
            ("start", "2021-01-01T00:00:00.000Z"),
        ]
        assert readarr_models.Calendar(include_author=True).params() == [
            ("includeAuthor", "true"),
        ]
