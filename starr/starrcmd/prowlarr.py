"""Prowlarr custom script events and readers for their environment data."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from starr.starrcmd.event import CmdEvent, Event
from starr.starrcmd.parser import env_field


@dataclass
class ProwlarrApplicationUpdate:
    """The ApplicationUpdate event."""

    previous_version: str = env_field("prowlarr_update_previousversion")
    new_version: str = env_field("prowlarr_update_newversion")
    message: str = env_field("prowlarr_update_message")


@dataclass
class ProwlarrHealthIssue:
    """The HealthIssue event."""

    message: str = env_field("prowlarr_health_issue_message")
    issue_type: str = env_field("prowlarr_health_issue_type")
    wiki: str = env_field("prowlarr_health_issue_wiki")
    level: str = env_field("prowlarr_health_issue_level")


@dataclass
class ProwlarrTest:
    """The Test event; it carries no data."""


def get_prowlarr_application_update(
    cmd: CmdEvent, environ: Mapping[str, str] | None = None
) -> ProwlarrApplicationUpdate:
    """Return the ApplicationUpdate event data."""
    return cmd.get(Event.APPLICATION_UPDATE, ProwlarrApplicationUpdate, environ)


def get_prowlarr_health_issue(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ProwlarrHealthIssue:
    """Return the HealthIssue event data."""
    return cmd.get(Event.HEALTH_ISSUE, ProwlarrHealthIssue, environ)


def get_prowlarr_test(cmd: CmdEvent, environ: Mapping[str, str] | None = None) -> ProwlarrTest:
    """Return the Test event data."""
    return cmd.get(Event.TEST, ProwlarrTest, environ)