"""
Core exceptions for the Modrinth client.

This module defines a hierarchy of custom exceptions to allow for granular
error handling and clear separation of failure domains: local pre-flight
checks, client configuration, and communication with the remote service.
"""

from typing import Optional


class ModrinthError(Exception):
    """Base exception for all library-specific errors."""
    pass


# --- Configuration Errors ---

class ConfigurationError(ModrinthError):
    """Raised for errors related to client configuration."""
    pass


# --- Validation Errors (raised before any network call) ---

class InvalidFormatError(ModrinthError, ValueError):
    """Base class for identifiers rejected before a request is sent."""

    def __init__(self, value: str, message: str):
        super().__init__(message)
        self.value = value


class NotBase62Error(InvalidFormatError):
    """
    Raised when an id or slug contains characters outside [a-zA-Z0-9-].

    The name is historical: hyphens are accepted so that slugs such as
    'ok-zoomer' pass, even though they are not part of the base62 alphabet.
    """

    def __init__(self, value: str):
        super().__init__(
            value, f"{value!r} is not a valid project/version/user id or slug"
        )


class NotSha1Error(InvalidFormatError):
    """Raised when a value is not a 40 character lowercase hex SHA1 hash."""

    def __init__(self, value: str):
        super().__init__(value, f"{value!r} is not a valid SHA1 hash")


class NotSha512Error(InvalidFormatError):
    """Raised when a value is not a 128 character lowercase hex SHA512 hash."""

    def __init__(self, value: str):
        super().__init__(value, f"{value!r} is not a valid SHA512 hash")


# --- Infrastructure Errors ---

class InfrastructureError(ModrinthError):
    """Base class for errors related to the remote API and its transport."""
    pass


class NetworkError(InfrastructureError):
    """Raised when the request could not be delivered or answered."""
    pass


class HTTPStatusError(InfrastructureError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, body: str, url: Optional[str] = None):
        super().__init__(f"HTTP {status_code} from {url or 'Modrinth'}: {body}")
        self.status_code = status_code
        self.body = body
        self.url = url


class DeserializationError(InfrastructureError):
    """Raised when a response body does not match the expected structure."""
    pass


class SerializationError(InfrastructureError):
    """Raised when a request parameter or payload cannot be JSON-encoded."""
    pass
