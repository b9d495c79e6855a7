"""
This module defines the core domain values for the client.

These are technology-agnostic: the immutable configuration every request is
built from, and the enumerated values accepted as request parameters.
"""

import dataclasses
import enum
from typing import Any, Optional

from .exceptions import ConfigurationError

API_BASE_URL = "https://api.modrinth.com/v2/"
STAGING_API_BASE_URL = "https://staging-api.modrinth.com/v2/"

DEFAULT_TIMEOUT = 30.0


# --- Request Values ---

class FileExt(str, enum.Enum):
    """Image formats accepted for gallery uploads."""

    PNG = "png"
    JPEG = "jpeg"
    BMP = "bmp"
    GIF = "gif"
    WEBP = "webp"
    SVG = "svg"
    SVGZ = "svgz"
    RGB = "rgb"

    def __str__(self) -> str:
        return self.value

    @property
    def content_type(self) -> str:
        return f"image/{self.value}"


class HashAlgorithm(str, enum.Enum):
    """Hash algorithms the API can look version files up by."""

    SHA1 = "sha1"
    SHA512 = "sha512"

    def __str__(self) -> str:
        return self.value


# --- Client Configuration ---

def _is_header_safe(value: str) -> bool:
    return value.isascii() and all(char.isprintable() for char in value)


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings shared by every request a client makes.

    Modrinth asks API consumers to identify themselves, so an application
    name is mandatory. It is combined with the optional version and contact
    into the User-Agent header, e.g. 'my-launcher/1.2.0 (me@example.com)'.
    The token, when present, is sent as-is in the Authorization header.
    """

    application: str
    version: Optional[str] = None
    contact: Optional[str] = None
    token: Optional[str] = dataclasses.field(default=None, repr=False)
    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.application or not self.application.strip():
            raise ConfigurationError(
                "An application name is required to build the User-Agent."
            )
        if not _is_header_safe(self.user_agent):
            raise ConfigurationError(
                f"User-Agent {self.user_agent!r} is not a valid header value."
            )
        if self.token is not None and (
            not self.token
            or " " in self.token
            or not _is_header_safe(self.token)
        ):
            raise ConfigurationError(
                "Authentication token is empty or not a valid header value."
            )
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Base URL {self.base_url!r} must be an http(s) URL."
            )

    @property
    def user_agent(self) -> str:
        agent = self.application
        if self.version:
            agent += f"/{self.version}"
        if self.contact:
            agent += f" ({self.contact})"
        return agent

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @classmethod
    def from_settings(cls, section: Any) -> "ClientConfig":
        """
        Build a config from the `[client]` section of the Dynaconf settings.

        Empty strings in the settings file mean "not set".
        """

        def _optional(key: str) -> Optional[str]:
            value = section.get(key)
            return str(value) if value not in (None, "") else None

        return cls(
            application=str(section.get("application") or ""),
            version=_optional("version"),
            contact=_optional("contact"),
            token=_optional("token"),
            base_url=str(section.get("base_url") or API_BASE_URL),
            timeout=float(section.get("timeout") or DEFAULT_TIMEOUT),
        )
