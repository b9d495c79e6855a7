import pytest

from modrinth_client.infrastructure.api_client import ModrinthClient

from helpers import FakeModrinth, make_client


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake() -> FakeModrinth:
    return FakeModrinth()


@pytest.fixture
def modrinth(fake: FakeModrinth) -> ModrinthClient:
    return make_client(fake, version="1.0.0", contact="ci@example.com")


@pytest.fixture
def authed_modrinth(fake: FakeModrinth) -> ModrinthClient:
    return make_client(fake, token="mrp_testtoken")
