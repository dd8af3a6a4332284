from unittest import mock

import pytest
from dependency_injector import providers

from starr.application.exceptions import ConfigurationError
from starr.infrastructure.containers import SERVICES, Container, service_config
from starr.services.radarr.client import Radarr


SETTINGS = {
    "radarr": {
        "url": "http://localhost:7878/",
        "api_key": "abc",
        "timeout": 5,
        "valid_ssl": True,
    },
    "sonarr": {"api_key": "no-url"},
}


class TestServiceConfig:
    def test_builds_a_config(self):
        config = service_config(SETTINGS, "radarr")

        assert config.url == "http://localhost:7878"
        assert config.api_key == "abc"
        assert config.timeout == 5.0
        assert config.valid_ssl is True
        assert config.http_user == ""

    def test_missing_url(self):
        with pytest.raises(ConfigurationError):
            service_config(SETTINGS, "sonarr")

    def test_missing_section(self):
        with pytest.raises(ConfigurationError):
            service_config(SETTINGS, "lidarr")


class TestContainer:
    def test_services(self):
        assert SERVICES == ("lidarr", "prowlarr", "radarr", "readarr", "sonarr")

    def test_each_handle_owns_its_client(self):
        container = Container()
        container.config.override(providers.Object(SETTINGS))

        first, second = container.radarr(), container.radarr()

        assert isinstance(first, Radarr)
        assert first.config.url == "http://localhost:7878"
        assert first.client is not second.client
        assert first._owns_client is True

    def test_client_honours_the_section_tls_flag(self):
        container = Container()
        container.config.override(providers.Object(SETTINGS))

        with mock.patch("starr.infrastructure.base_client.httpx.AsyncClient") as client_cls:
            handle = container.radarr()

        client_cls.assert_called_once_with(verify=True, timeout=5.0, follow_redirects=False)
        assert handle.client is client_cls.return_value

    def test_client_skips_verification_when_valid_ssl_is_off(self):
        container = Container()
        settings = dict(SETTINGS, lidarr={"url": "https://lidarr.lan", "valid_ssl": False})
        container.config.override(providers.Object(settings))

        with mock.patch("starr.infrastructure.base_client.httpx.AsyncClient") as client_cls:
            container.lidarr()

        assert client_cls.call_args.kwargs["verify"] is False
