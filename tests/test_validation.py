import string

import pytest

from modrinth_client.application.domain import HashAlgorithm
from modrinth_client.application.exceptions import (
    InvalidFormatError,
    NotBase62Error,
    NotSha1Error,
    NotSha512Error,
)
from modrinth_client.application.validation import (
    check_file_hash,
    check_file_hashes,
    check_id_slug,
    check_id_slugs,
    check_sha1_hash,
    check_sha512_hash,
    is_id_slug,
    is_sha1_hash,
    is_sha512_hash,
    string_list,
)

VALID_SHA1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


@pytest.mark.parametrize(
    "value",
    ["AANobbMI", "ok-zoomer", "fabric-api", "P7dR8mSH", "a", "-", "123", string.ascii_letters + string.digits + "-"],
)
def test_valid_ids_and_slugs_pass(value: str) -> None:
    assert is_id_slug(value)
    check_id_slug(value)


@pytest.mark.parametrize(
    "value",
    ["bad/slug", "with space", "under_score", "dot.ted", "query?x=1", "ümlaut", "tab\t", "../etc", "percent%2F"],
)
def test_ids_with_disallowed_characters_fail(value: str) -> None:
    assert not is_id_slug(value)
    with pytest.raises(NotBase62Error) as excinfo:
        check_id_slug(value)
    assert excinfo.value.value == value


def test_empty_id_is_rejected() -> None:
    with pytest.raises(NotBase62Error):
        check_id_slug("")


def test_collection_validation_reports_first_failure() -> None:
    with pytest.raises(NotBase62Error) as excinfo:
        check_id_slugs(["AANobbMI", "bad/one", "bad two"])
    assert excinfo.value.value == "bad/one"


def test_collection_validation_passes_when_all_members_pass() -> None:
    check_id_slugs(["AANobbMI", "P7dR8mSH", "ok-zoomer"])
    check_id_slugs([])


def test_sha1_accepts_40_lowercase_hex_characters() -> None:
    assert is_sha1_hash(VALID_SHA1)
    check_sha1_hash(VALID_SHA1, "0" * 40)


@pytest.mark.parametrize(
    "value",
    [
        VALID_SHA1[:39],
        VALID_SHA1 + "0",
        "",
        VALID_SHA1[:39] + "A",
        VALID_SHA1.upper(),
        "g" * 40,
        " " + VALID_SHA1[1:],
    ],
)
def test_sha1_rejects_wrong_length_case_or_characters(value: str) -> None:
    assert not is_sha1_hash(value)
    with pytest.raises(NotSha1Error):
        check_sha1_hash(value)


def test_format_errors_share_a_base_class() -> None:
    assert issubclass(NotBase62Error, InvalidFormatError)
    assert issubclass(NotSha1Error, InvalidFormatError)
    assert issubclass(InvalidFormatError, ValueError)


def test_collection_check_rejects_a_single_string() -> None:
    with pytest.raises(TypeError):
        check_id_slugs("AANobbMI")


def test_collection_check_returns_a_list() -> None:
    assert check_id_slugs(("AANobbMI", "ok-zoomer")) == ["AANobbMI", "ok-zoomer"]


def test_string_list_rejects_str_and_bytes() -> None:
    assert string_list(iter(["fabric", "quilt"])) == ["fabric", "quilt"]
    with pytest.raises(TypeError):
        string_list("fabric", "loaders")
    with pytest.raises(TypeError):
        string_list(b"fabric")


def test_sha512_accepts_128_lowercase_hex_characters() -> None:
    assert is_sha512_hash("0f" * 64)
    check_sha512_hash("0f" * 64)
    check_file_hash(HashAlgorithm.SHA512, "0f" * 64)


@pytest.mark.parametrize("value", ["0f" * 63, "0F" * 64, VALID_SHA1, "z" * 128])
def test_sha512_rejects_wrong_length_case_or_characters(value: str) -> None:
    assert not is_sha512_hash(value)
    with pytest.raises(NotSha512Error):
        check_file_hash(HashAlgorithm.SHA512, value)


def test_file_hash_check_defaults_to_sha1_rules() -> None:
    check_file_hash(HashAlgorithm.SHA1, VALID_SHA1)
    with pytest.raises(NotSha1Error):
        check_file_hash(HashAlgorithm.SHA1, "0f" * 64)


def test_file_hashes_collection_rejects_a_single_string() -> None:
    with pytest.raises(TypeError):
        check_file_hashes(HashAlgorithm.SHA1, VALID_SHA1)
    assert check_file_hashes(HashAlgorithm.SHA1, (VALID_SHA1,)) == [VALID_SHA1]
