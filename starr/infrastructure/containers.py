"""
Dependency Injection container for the starr command line.

This container uses the `dependency-injector` library to wire the settings
and a handle factory per service. Each handle builds its own HTTP client
from its section, so `valid_ssl` and `timeout` apply per service.
"""

from dependency_injector import containers, providers

from ..application.domain import DEFAULT_TIMEOUT, App, Config
from ..application.exceptions import ConfigurationError
from ..services.lidarr.client import Lidarr
from ..services.prowlarr.client import Prowlarr
from ..services.radarr.client import Radarr
from ..services.readarr.client import Readarr
from ..services.sonarr.client import Sonarr
from ..settings import settings

SERVICES = tuple(app.lower for app in App)


def service_config(settings, section: str) -> Config:
    """
    Builds the connection descriptor for one service from its settings section.

    Raises:
        ConfigurationError: If the section is missing or has no URL.
    """

    values = settings.get(section)
    if not values or not values.get("url"):
        raise ConfigurationError(f"No [{section}] section with a url in the settings.")

    return Config(
        url=str(values.get("url")),
        api_key=str(values.get("api_key", "")),
        valid_ssl=bool(values.get("valid_ssl", False)),
        timeout=float(values.get("timeout", DEFAULT_TIMEOUT)),
        http_user=str(values.get("http_user", "")),
        http_pass=str(values.get("http_pass", "")),
        username=str(values.get("username", "")),
        password=str(values.get("password", "")),
        max_body=int(values.get("max_body", 0)),
    )


class Container(containers.DeclarativeContainer):
    """DI container for wiring the service handles."""

    cli_args = providers.Configuration()

    config = providers.Object(settings)

    radarr = providers.Factory(
        Radarr,
        config=providers.Factory(service_config, settings=config, section="radarr"),
    )

    sonarr = providers.Factory(
        Sonarr,
        config=providers.Factory(service_config, settings=config, section="sonarr"),
    )

    lidarr = providers.Factory(
        Lidarr,
        config=providers.Factory(service_config, settings=config, section="lidarr"),
    )

    readarr = providers.Factory(
        Readarr,
        config=providers.Factory(service_config, settings=config, section="readarr"),
    )

    prowlarr = providers.Factory(
        Prowlarr,
        config=providers.Factory(service_config, settings=config, section="prowlarr"),
    )
