from typing import Any, Dict, List, Tuple

import httpx

from modrinth_client.application.domain import ClientConfig
from modrinth_client.infrastructure.api_client import ModrinthClient

SODIUM: Dict[str, Any] = {
    "id": "AANobbMI",
    "slug": "sodium",
    "title": "Sodium",
    "description": "The fastest rendering optimization mod",
    "project_type": "mod",
    "categories": ["optimization"],
    "client_side": "required",
    "server_side": "unsupported",
    "downloads": 10,
    "followers": 2,
    "team": "4reLOAKe",
    "published": "2021-01-03T07:55:28.133019Z",
    "updated": "2023-06-10T15:02:19.117478Z",
    "license": {"id": "LGPL-3.0-only", "name": "GNU Lesser General Public License v3.0 only", "url": None},
    "versions": ["yaoBL9D9"],
    "game_versions": ["1.20.1"],
    "loaders": ["fabric", "quilt"],
    "gallery": [],
    "some_new_field": "ignored",
}

SODIUM_VERSION: Dict[str, Any] = {
    "id": "yaoBL9D9",
    "project_id": "AANobbMI",
    "author_id": "DzLrfrbK",
    "name": "Sodium 0.4.10",
    "version_number": "mc1.20.1-0.4.10",
    "version_type": "release",
    "game_versions": ["1.20.1"],
    "loaders": ["fabric"],
    "featured": True,
    "date_published": "2023-06-10T15:02:19.117478Z",
    "downloads": 5,
    "dependencies": [
        {"project_id": "P7dR8mSH", "version_id": None, "dependency_type": "required"}
    ],
    "files": [
        {
            "hashes": {"sha1": "a" * 40, "sha512": "b" * 128},
            "url": "https://cdn.modrinth.com/data/AANobbMI/versions/yaoBL9D9/sodium.jar",
            "filename": "sodium.jar",
            "primary": True,
            "size": 1024,
        }
    ],
}


class FakeModrinth:
    """Records requests and answers them from registered routes."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Tuple[int, Dict[str, Any]]] = {}

    def route(self, method: str, path: str, status: int = 200, **kwargs):
        self.routes[(method, "/v2/" + path)] = (status, kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not_found"})
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(fake: FakeModrinth, **config) -> ModrinthClient:
    config.setdefault("application", "test-suite")
    transport = httpx.MockTransport(fake.handler)
    return ModrinthClient(
        ClientConfig(**config), httpx.AsyncClient(transport=transport)
    )


