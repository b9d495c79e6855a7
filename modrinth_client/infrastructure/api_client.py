"""HTTP client for the Modrinth v2 API."""

from typing import Optional

import httpx

from ..application.domain import ClientConfig

from .base_client import BaseClient
from .calls.projects import ProjectCalls
from .calls.tags import TagCalls
from .calls.users import UserCalls
from .calls.versions import VersionCalls


class ModrinthClient(ProjectCalls, VersionCalls, UserCalls, TagCalls, BaseClient):
    """
    A client exposing the Modrinth API as typed coroutines.

    Each call validates its identifiers, builds the request URL and performs
    a single request. The client holds no mutable state besides the shared
    HTTP connection, so one instance can serve any number of concurrent calls.

    Example:
        config = ClientConfig("my-launcher", version="1.0.0")
        async with ModrinthClient(config) as modrinth:
            sodium = await modrinth.get_project("sodium")
    """

    def __init__(
        self,
        config: ClientConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initializes the client adapter."""
        super().__init__(config, client)
        if not config.is_authenticated:
            self.logger.debug(
                "No token configured; authenticated calls will be rejected "
                "by the API."
            )
