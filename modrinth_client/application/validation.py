"""
Pre-flight validation of identifiers passed to the API.

Every call that embeds a user-supplied id, slug or file hash in a URL runs it
through these checks first, so malformed input fails locally with a clear
error instead of producing a confusing response from the remote service.
"""

import string
from typing import Iterable, List

from .domain import HashAlgorithm
from .exceptions import NotBase62Error, NotSha1Error, NotSha512Error

_ID_SLUG_CHARS = frozenset(string.ascii_letters + string.digits + "-")
_HEX_CHARS = frozenset("0123456789abcdef")
_SHA1_LENGTH = 40
_SHA512_LENGTH = 128


def is_id_slug(value: str) -> bool:
    """Return True if `value` is a non-empty string of [a-zA-Z0-9-]."""
    return bool(value) and all(char in _ID_SLUG_CHARS for char in value)


def _is_hex_digest(value: str, length: int) -> bool:
    return len(value) == length and all(char in _HEX_CHARS for char in value)


def is_sha1_hash(value: str) -> bool:
    """Return True if `value` is exactly 40 lowercase hex digits."""
    return _is_hex_digest(value, _SHA1_LENGTH)


def is_sha512_hash(value: str) -> bool:
    """Return True if `value` is exactly 128 lowercase hex digits."""
    return _is_hex_digest(value, _SHA512_LENGTH)


def check_id_slug(*inputs: str) -> None:
    """
    Verify that every input is a valid project, version or user id or slug.

    Inputs are checked in order and the first invalid one is reported.

    Args:
        inputs: The ids or slugs to check.

    Raises:
        NotBase62Error: If an input is empty or contains a character
                        that is not an ASCII letter, digit, or hyphen.
    """
    for value in inputs:
        if not is_id_slug(value):
            raise NotBase62Error(value)


def string_list(values: Iterable[str], name: str = "values") -> List[str]:
    """
    Copy a collection of strings into a list.

    Raises:
        TypeError: If `values` is a single string, which would otherwise be
                   split into one-character items.
    """
    if isinstance(values, (str, bytes)):
        raise TypeError(
            f"{name} must be a collection of strings, not a single string: "
            f"{values!r}"
        )
    return list(values)


def check_id_slugs(inputs: Iterable[str]) -> List[str]:
    """Collection form of `check_id_slug`, returning the inputs as a list."""
    values = string_list(inputs, "ids")
    check_id_slug(*values)
    return values


def check_sha1_hash(*inputs: str) -> None:
    """
    Verify that every input is a SHA1 file hash as used by the API.

    Args:
        inputs: The hashes to check.

    Raises:
        NotSha1Error: If an input is not 40 lowercase hexadecimal characters.
    """
    for value in inputs:
        if not is_sha1_hash(value):
            raise NotSha1Error(value)


def check_sha512_hash(*inputs: str) -> None:
    """
    Verify that every input is a SHA512 file hash as used by the API.

    Raises:
        NotSha512Error: If an input is not 128 lowercase hexadecimal characters.
    """
    for value in inputs:
        if not is_sha512_hash(value):
            raise NotSha512Error(value)


def check_file_hash(algorithm: HashAlgorithm, *inputs: str) -> None:
    """Verify that every input is a file hash of the given algorithm."""
    if HashAlgorithm(algorithm) is HashAlgorithm.SHA512:
        check_sha512_hash(*inputs)
    else:
        check_sha1_hash(*inputs)


def check_file_hashes(
    algorithm: HashAlgorithm, inputs: Iterable[str]
) -> List[str]:
    """Collection form of `check_file_hash`, returning the inputs as a list."""
    values = string_list(inputs, "hashes")
    check_file_hash(algorithm, *values)
    return values
