"""
Dependency Injection container for the Modrinth client.

This container uses the `dependency-injector` library to wire the settings,
the immutable client configuration, the shared HTTP transport and the API
client together.
"""

from dependency_injector import containers, providers
import httpx

from ..application.domain import ClientConfig
from ..settings import load_settings

from .api_client import ModrinthClient


class Container(containers.DeclarativeContainer):
    """DI container for wiring the client components."""

    config = providers.Singleton(load_settings)

    client_config = providers.Singleton(
        ClientConfig.from_settings,
        section=config.provided.client,
    )

    http_client = providers.Singleton(
        httpx.AsyncClient,
        timeout=client_config.provided.timeout,
    )

    modrinth = providers.Factory(
        ModrinthClient,
        config=client_config,
        client=http_client,
    )
