"""Detect which Starr application started a custom script, and for which event."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from starr.starrcmd.parser import EnvParseError, fill_from_env

T = TypeVar("T")


class Event(str, Enum):
    """Every event type a Starr application hands to a custom script."""

    TEST = "Test"
    HEALTH_ISSUE = "HealthIssue"
    APPLICATION_UPDATE = "ApplicationUpdate"
    GRAB = "Grab"
    RENAME = "Rename"
    DOWNLOAD = "Download"
    TRACK_RETAG = "TrackRetag"
    ALBUM_DOWNLOAD = "AlbumDownload"
    MOVIE_FILE_DELETE = "MovieFileDelete"
    MOVIE_DELETE = "MovieDelete"
    BOOK_DELETE = "BookDelete"
    AUTHOR_DELETE = "AuthorDelete"
    BOOK_FILE_DELETE = "BookFileDelete"
    SERIES_DELETE = "SeriesDelete"
    EPISODE_FILE_DELETE = "EpisodeFileDelete"

    def __str__(self) -> str:
        return self.value


class App(str, Enum):
    """The Starr applications, in the order their event variables are checked."""

    RADARR = "Radarr"
    SONARR = "Sonarr"
    LIDARR = "Lidarr"
    READARR = "Readarr"
    PROWLARR = "Prowlarr"

    def __str__(self) -> str:
        return self.value

    @property
    def event_variable(self) -> str:
        """Name of the variable holding this application's event type."""
        return f"{self.value.lower()}_eventtype"


class InvalidEventError(Exception):
    """Event data was requested for an event other than the current one."""

    def __init__(self, message: str = "incorrect event type requested") -> None:
        super().__init__(message)


class NoEventFoundError(LookupError):
    """No application event type variable is set."""

    def __init__(self, message: str = "no eventType environment variable found") -> None:
        super().__init__(message)


def _to_event(value: str) -> Event | str:
    try:
        return Event(value)
    except ValueError:
        return value


@dataclass
class CmdEvent:
    """The current event type and the application that raised it."""

    app: App | None = None
    type: Event | str = ""

    def get(self, wanted: Event, output_cls: type[T], environ: Mapping[str, str] | None = None) -> T:
        """Read ``output_cls`` from the environment if the current event is ``wanted``."""
        if self.type != wanted:
            raise InvalidEventError(
                f"incorrect event type requested: requested '{wanted}' have '{self.type}'"
            )
        try:
            return fill_from_env(output_cls, environ)
        except EnvParseError as err:
            raise EnvParseError(f"reading environment: {err}") from err


def new(environ: Mapping[str, str] | None = None) -> CmdEvent:
    """Return the current event and its application, or raise NoEventFoundError."""
    env = os.environ if environ is None else environ
    for app in App:
        value = env.get(app.event_variable, "")
        if value:
            return CmdEvent(app=app, type=_to_event(value))
    raise NoEventFoundError()


def new_must(environ: Mapping[str, str] | None = None) -> CmdEvent:
    """Return the current event; a missing event is a fatal NoEventFoundError."""
    return new(environ)


def new_must_no_panic(environ: Mapping[str, str] | None = None) -> CmdEvent:
    """Return the current event, or an empty CmdEvent when there is none."""
    try:
        return new(environ)
    except NoEventFoundError:
        return CmdEvent()