"""Base class for the async Modrinth HTTP client."""

import logging
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..application.domain import ClientConfig
from ..application.exceptions import DeserializationError

from .decorators import translate_http_errors
from .urls import json_param

T = TypeVar("T")


class BaseClient:
    """
    A base client that owns the transport and the immutable configuration.

    Every request carries the configured User-Agent and, when a token was
    supplied, an Authorization header. Each call is a single round trip
    whose JSON body is validated into the requested type.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initializes the base client.

        Args:
            config: The immutable client configuration.
            client: An instance of httpx.AsyncClient. When omitted, one is
                    created from `config` and closed by `aclose()`.
        """

        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.timeout)
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def aclose(self):
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    def _headers(self, content_type: Optional[str] = None) -> dict:
        """Builds the headers attached to every request."""
        headers = {"User-Agent": self.config.user_agent}
        if self.config.token is not None:
            headers["Authorization"] = self.config.token
        if content_type is not None:
            headers["Content-Type"] = content_type
        return headers

    @translate_http_errors
    async def _execute(
        self,
        method: str,
        url: str,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ) -> httpx.Response:
        """Executes the raw HTTP request and checks its status."""
        self.logger.debug(f"{method} {url}")
        response = await self.client.request(
            method,
            url,
            content=content,
            headers=self._headers(content_type),
            timeout=self.config.timeout,
        )
        response.raise_for_status()
        return response

    def _parse(self, response: httpx.Response, target: Type[T]) -> T:
        """Validates a response body against the target type."""
        try:
            return TypeAdapter(target).validate_json(response.content)
        except ValidationError as e:
            raise DeserializationError(
                f"Unexpected response from {response.request.url}: {e}"
            ) from e

    async def get(self, url: str, target: Type[T]) -> T:
        """
        Send a GET request and deserialize the JSON body.

        Raises:
            NetworkError: If the request could not be completed.
            HTTPStatusError: If the API answered with a non-2xx status.
            DeserializationError: If the body does not match `target`.
        """
        response = await self._execute("GET", url)
        return self._parse(response, target)

    async def post(
        self,
        url: str,
        body: bytes,
        content_type: str,
        target: Optional[Type[T]] = None,
    ) -> Optional[T]:
        """Send raw bytes (e.g. an image upload) with the given content type."""
        response = await self._execute(
            "POST", url, content=bytes(body), content_type=content_type
        )
        return self._parse(response, target) if target is not None else None

    async def post_json(
        self,
        url: str,
        payload: Any,
        target: Optional[Type[T]] = None,
    ) -> Optional[T]:
        """Send a JSON payload, deserializing the response if `target` is given."""
        response = await self._execute(
            "POST",
            url,
            content=json_param(payload).encode(),
            content_type="application/json",
        )
        return self._parse(response, target) if target is not None else None

    async def delete(self, url: str):
        """Send a DELETE request, discarding the response body."""
        await self._execute("DELETE", url)
