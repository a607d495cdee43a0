import pytest

from starr.starrcmd.event import App, Event, InvalidEventError, new
from starr.starrcmd.prowlarr import (
    ProwlarrTest,
    get_prowlarr_application_update,
    get_prowlarr_health_issue,
    get_prowlarr_test,
)


def _env(event, **values):
    env = {"prowlarr_eventtype": event.value}
    env.update(values)
    return env


def test_application_update():
    env = _env(
        Event.APPLICATION_UPDATE,
        prowlarr_update_previousversion="4.0.3.5875",
        prowlarr_update_newversion="4.0.4.5909",
        prowlarr_update_message="Prowlarr updated from 4.0.3.5875 to 4.0.4.5909",
    )
    cmd = new(env)
    assert cmd.app == App.PROWLARR
    info = get_prowlarr_application_update(cmd, env)
    assert info.message == "Prowlarr updated from 4.0.3.5875 to 4.0.4.5909"
    assert info.new_version == "4.0.4.5909"
    assert info.previous_version == "4.0.3.5875"


def test_health_issue():
    env = _env(
        Event.HEALTH_ISSUE,
        prowlarr_health_issue_type="SomeIssueTypeForProwlarr",
        prowlarr_health_issue_wiki="https://wiki.example.com/prowlarr",
        prowlarr_health_issue_level="Error",
        prowlarr_health_issue_message="Lists unavailable due to failures: List name here",
    )
    info = get_prowlarr_health_issue(new(env), env)
    assert info.message == "Lists unavailable due to failures: List name here"
    assert info.wiki == "https://wiki.example.com/prowlarr"
    assert info.level == "Error"
    assert info.issue_type == "SomeIssueTypeForProwlarr"


def test_test_event():
    env = _env(Event.TEST)
    assert get_prowlarr_test(new(env), env) == ProwlarrTest()


def test_missing_values_are_empty():
    env = _env(Event.APPLICATION_UPDATE)
    info = get_prowlarr_application_update(new(env), env)
    assert (info.message, info.new_version, info.previous_version) == ("", "", "")


def test_wrong_event_raises():
    env = _env(Event.TEST)
    with pytest.raises(InvalidEventError, match="requested 'HealthIssue' have 'Test'"):
        get_prowlarr_health_issue(new(env), env)