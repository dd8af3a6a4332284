from starr.application.domain import App, Sorting
from starr.infrastructure.request import (
    Request,
    compose_url,
    join_path,
    redact,
    render_query,
    render_value,
)


class TestRenderValue:
    def test_bools_are_lowercase(self):
        assert render_value(True) == "true"
        assert render_value(False) == "false"

    def test_enums_render_their_value(self):
        assert render_value(Sorting.DESCENDING) == "descending"
        assert render_value(App.RADARR) == "Radarr"

    def test_numbers(self):
        assert render_value(7) == "7"


class TestRenderQuery:
    def test_empty(self):
        assert render_query(None) == ()
        assert render_query({}) == ()

    def test_lists_repeat_the_key_in_order(self):
        pairs = render_query([("movieIds", [3, 1, 2]), ("x", "y")])
        assert pairs == (("movieIds", "3"), ("movieIds", "1"), ("movieIds", "2"), ("x", "y"))

    def test_none_values_are_dropped(self):
        assert render_query({"a": None, "b": 1}) == (("b", "1"),)

    def test_mapping_order_is_kept(self):
        assert render_query({"z": 1, "a": 2}) == (("z", "1"), ("a", "2"))


class TestComposeUrl:
    def test_api_prefix_and_version(self):
        assert compose_url("http://host:7878", "v3", "movie") == "http://host:7878/api/v3/movie"

    def test_trailing_and_leading_slashes_collapse(self):
        url = compose_url("http://host/radarr/", "v3", "/movie/12/")
        assert url == "http://host/radarr/api/v3/movie/12"

    def test_query_is_encoded(self):
        url = compose_url("http://host", "v1", "search", [("query", "a b&c")])
        assert url == "http://host/api/v1/search?query=a+b%26c"

    def test_non_api_paths_skip_the_prefix(self):
        url = compose_url("http://host", "v3", "ping", api=False)
        assert url == "http://host/ping"


class TestRequest:
    def test_query_is_flattened_on_construction(self):
        req = Request("movie", {"tmdbId": 5, "skip": None})
        assert req.query == (("tmdbId", "5"),)

    def test_url_appends_extra_pairs(self):
        req = Request("feed/v3/calendar/radarr.ics", [("pastDays", "1")], api=False)
        url = req.url("http://host", "v3", [("apikey", "k")])
        assert url == "http://host/feed/v3/calendar/radarr.ics?pastDays=1&apikey=k"

    def test_str(self):
        assert str(Request("movie", {"a": 1})) == "movie?a=1"
        assert str(Request("movie")) == "movie"


def test_join_path():
    assert join_path("history/failed", "12") == "history/failed/12"
    assert join_path("", "a//b", "") == "a/b"


def test_redact():
    assert redact("http://h/?apikey=secret", "secret") == "http://h/?apikey=<redacted>"
    assert redact("nothing", "") == "nothing"
