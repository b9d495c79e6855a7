"""
Infrastructure-specific decorators, providing cross-cutting concerns like
translating transport failures into the library's error hierarchy.
"""

import functools
import logging

import httpx

from ..application.exceptions import HTTPStatusError, NetworkError

logger = logging.getLogger(__name__)


def _log_failure(fn_name: str, exception: Exception):
    """Log a failed request with details about the exception."""
    logger.warning(
        f"{fn_name} failed due to {type(exception).__name__}: {exception}"
    )


def translate_http_errors(func):
    """
    Convert httpx exceptions raised by an async request method into
    NetworkError or HTTPStatusError. Any request-level failure, including
    transport errors, undecodable bodies and redirect loops, is a NetworkError.

    The request is never retried: the first failure is logged and raised.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except httpx.HTTPStatusError as e:
            _log_failure(func.__name__, e)
            raise HTTPStatusError(
                status_code=e.response.status_code,
                body=e.response.text,
                url=str(e.request.url),
            ) from e
        except httpx.RequestError as e:
            _log_failure(func.__name__, e)
            raise NetworkError(f"Request to Modrinth failed: {e}") from e

    return wrapper
