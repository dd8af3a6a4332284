"""
Prowlarr custom-script event records. Prowlarr reports only three events.
"""

import dataclasses
from typing import ClassVar

from ..application.domain import App

from .parser import Event, env


@dataclasses.dataclass(frozen=True)
class ProwlarrApplicationUpdate:
    app: ClassVar[App] = App.PROWLARR
    event: ClassVar[Event] = Event.APPLICATION_UPDATE

    previous_version: str = env("prowlarr_update_previousversion")
    new_version: str = env("prowlarr_update_newversion")
    message: str = env("prowlarr_update_message")


@dataclasses.dataclass(frozen=True)
class ProwlarrHealthIssue:
    app: ClassVar[App] = App.PROWLARR
    event: ClassVar[Event] = Event.HEALTH_ISSUE

    message: str = env("prowlarr_health_issue_message")
    issue_type: str = env("prowlarr_health_issue_type")
    wiki: str = env("prowlarr_health_issue_wiki")
    level: str = env("prowlarr_health_issue_level")


@dataclasses.dataclass(frozen=True)
class ProwlarrTest:
    app: ClassVar[App] = App.PROWLARR
    event: ClassVar[Event] = Event.TEST
