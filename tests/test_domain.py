import dataclasses

import pytest

from modrinth_client.application.domain import (
    API_BASE_URL,
    ClientConfig,
    FileExt,
)
from modrinth_client.application.exceptions import ConfigurationError


def test_user_agent_from_name_only() -> None:
    assert ClientConfig("my-launcher").user_agent == "my-launcher"


def test_user_agent_with_version_and_contact() -> None:
    config = ClientConfig("my-launcher", version="1.2.0", contact="me@example.com")
    assert config.user_agent == "my-launcher/1.2.0 (me@example.com)"


def test_user_agent_with_contact_only() -> None:
    assert ClientConfig("app", contact="site").user_agent == "app (site)"


def test_config_is_immutable() -> None:
    config = ClientConfig("app")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.token = "mrp_x"  # type: ignore[misc]


def test_token_is_not_shown_in_repr() -> None:
    assert "mrp_secret" not in repr(ClientConfig("app", token="mrp_secret"))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"application": ""},
        {"application": "   "},
        {"application": "app", "token": ""},
        {"application": "app", "token": "two words"},
        {"application": "app", "token": "line\nbreak"},
        {"application": "app\n"},
        {"application": "app", "base_url": "ftp://example.com"},
    ],
)
def test_invalid_configuration_is_rejected(kwargs) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(ConfigurationError):
        ClientConfig(**kwargs)


def test_from_settings_treats_empty_strings_as_unset() -> None:
    config = ClientConfig.from_settings(
        {
            "application": "modrinth-client",
            "version": "0.1.0",
            "contact": "",
            "token": "",
            "base_url": "https://staging-api.modrinth.com/v2/",
            "timeout": 5,
        }
    )
    assert config.user_agent == "modrinth-client/0.1.0"
    assert config.token is None
    assert not config.is_authenticated
    assert config.base_url == "https://staging-api.modrinth.com/v2/"
    assert config.timeout == 5.0


def test_from_settings_uses_defaults() -> None:
    config = ClientConfig.from_settings({"application": "app", "token": "mrp_abc"})
    assert config.base_url == API_BASE_URL
    assert config.is_authenticated


def test_file_ext_content_type() -> None:
    assert FileExt.PNG.content_type == "image/png"
    assert FileExt("webp") is FileExt.WEBP
    assert str(FileExt.SVGZ) == "svgz"
