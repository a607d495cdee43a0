import pytest

from starr.config import (
    DEFAULT_TIMEOUT,
    Config,
    InvalidAPIKeyError,
    InvalidStatusCodeError,
    NilClientError,
    NilInterfaceError,
    RequestError,
    StarrError,
    new_config,
)


def test_new_config_zero_timeout_uses_default():
    config = new_config("placeholder", "http://localhost:8989", 0)
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.timeout == 30
    assert config.api_key == "placeholder"
    assert config.url == "http://localhost:8989"


def test_new_config_keeps_explicit_timeout():
    config = new_config("placeholder", "http://localhost:7878", 5)
    assert config.timeout == 5


def test_new_config_leaves_auth_fields_empty():
    config = new_config("placeholder", "http://localhost:8686", 0)
    assert (config.http_user, config.http_pass, config.username, config.password) == ("", "", "", "")


def test_config_repr_hides_api_key():
    config = Config(api_key="placeholder", url="http://localhost:8989")
    assert "placeholder" not in repr(config)
    assert "http://localhost:8989" in repr(config)


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (InvalidStatusCodeError, "invalid status code, <200||>299"),
        (NilClientError, "http.Client must not be nil"),
        (NilInterfaceError, "cannot unmarshal data into a nil or empty interface"),
        (InvalidAPIKeyError, "API Key may be incorrect"),
        (RequestError, "request error"),
    ],
)
def test_errors_have_default_messages_and_share_base(error_cls, message):
    error = error_cls()
    assert str(error) == message
    assert isinstance(error, StarrError)


def test_error_accepts_custom_message():
    error = InvalidStatusCodeError("status 404")
    assert str(error) == "status 404"
    assert isinstance(error, StarrError)