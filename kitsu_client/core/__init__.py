"""Core functionality for kitsu-client."""

from .search import Search
from .errors import (
    KitsuError, InvalidUrlError, TransportError, HTTPStatusError,
    BadRequestError, UnauthorizedError, UnexpectedStatusError, DecodeError,
    classify_status,
)
from .decoder import decode
from .http_client import API_URL, build_target, http_get
from .async_http_client import async_http_get, build_async_client

__all__ = [
    "Search",
    "KitsuError", "InvalidUrlError", "TransportError", "HTTPStatusError",
    "BadRequestError", "UnauthorizedError", "UnexpectedStatusError", "DecodeError",
    "classify_status", "decode",
    "API_URL", "build_target", "http_get", "async_http_get", "build_async_client",
]
