"""Connection settings shared by every Starr application client, and the errors they raise."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_TIMEOUT = 30.0
"""Seconds a request may take when no timeout is given."""


class StarrError(Exception):
    """Base class for every error raised while talking to a Starr application."""

    default_message = "starr error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidStatusCodeError(StarrError):
    """The server answered with a status code outside 200-299."""

    default_message = "invalid status code, <200||>299"


class NilClientError(StarrError):
    """A request was attempted without an HTTP client."""

    default_message = "http.Client must not be nil"


class NilInterfaceError(StarrError):
    """Data was to be decoded into nothing."""

    default_message = "cannot unmarshal data into a nil or empty interface"


class InvalidAPIKeyError(StarrError):
    """The server rejected the API key."""

    default_message = "API Key may be incorrect"


class RequestError(StarrError):
    """Bad input was given for a request."""

    default_message = "request error"


@dataclass
class Config:
    """What is needed to reach Radarr, Sonarr, Lidarr, Readarr or Prowlarr.

    At a minimum provide a URL and an API key. ``http_user`` and ``http_pass``
    are for HTTP basic auth; ``username`` and ``password`` are for non-API
    paths with native authentication enabled.
    """

    api_key: str = field(default="", repr=False)
    url: str = ""
    http_pass: str = field(default="", repr=False)
    http_user: str = ""
    username: str = ""
    password: str = field(default="", repr=False)
    timeout: float = DEFAULT_TIMEOUT


def new_config(api_key: str, app_url: str, timeout: float = 0) -> Config:
    """Build a Config; a zero timeout selects DEFAULT_TIMEOUT."""
    return Config(api_key=api_key, url=app_url, timeout=timeout or DEFAULT_TIMEOUT)