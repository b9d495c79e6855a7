import httpx
import pytest

from modrinth_client.application.exceptions import SerializationError
from modrinth_client.infrastructure.urls import (
    bool_param,
    join_all,
    json_param,
    with_query,
)

BASE = "https://api.modrinth.com/v2/"


def test_join_all_has_no_duplicate_slashes() -> None:
    url = join_all(BASE, ["project", "AANobbMI"])
    assert url == "https://api.modrinth.com/v2/project/AANobbMI"
    assert url.endswith("/project/AANobbMI")


def test_join_all_accepts_base_without_trailing_slash() -> None:
    assert join_all("https://api.modrinth.com/v2", ["project", "sodium", "check"]) == (
        "https://api.modrinth.com/v2/project/sodium/check"
    )


def test_join_all_encodes_each_segment_as_one_component() -> None:
    assert join_all(BASE, ["user", "a b"]) == "https://api.modrinth.com/v2/user/a%20b"


def test_with_query_keeps_order_and_encodes_values() -> None:
    url = with_query(
        join_all(BASE, ["project", "sodium", "gallery"]),
        [("ext", "png"), ("featured", "true"), ("title", "A & B")],
    )
    parsed = httpx.URL(url)
    assert parsed.path == "/v2/project/sodium/gallery"
    assert list(parsed.params.multi_items()) == [
        ("ext", "png"),
        ("featured", "true"),
        ("title", "A & B"),
    ]
    assert "A & B" not in url


def test_with_query_without_params_returns_url_unchanged() -> None:
    assert with_query(BASE + "projects", []) == BASE + "projects"


def test_json_param_is_compact() -> None:
    assert json_param(["AANobbMI", "P7dR8mSH"]) == '["AANobbMI","P7dR8mSH"]'


def test_json_param_raises_serialization_error() -> None:
    with pytest.raises(SerializationError):
        json_param({"ids": {object()}})


def test_bool_param() -> None:
    assert bool_param(True) == "true"
    assert bool_param(False) == "false"
