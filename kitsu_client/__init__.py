"""kitsu-client package.

Blocking (`KitsuRequester`, requests) and asynchronous (`AsyncKitsuRequester`,
httpx) clients for the Kitsu edge API.
"""
from importlib.metadata import version, PackageNotFoundError

from .core import (
    API_URL, Search,
    KitsuError, InvalidUrlError, TransportError, HTTPStatusError,
    BadRequestError, UnauthorizedError, UnexpectedStatusError, DecodeError,
)
from .requesters import KitsuRequester, AsyncKitsuRequester

try:
    __version__ = version("kitsu-client")
except PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    "API_URL", "Search", "KitsuRequester", "AsyncKitsuRequester",
    "KitsuError", "InvalidUrlError", "TransportError", "HTTPStatusError",
    "BadRequestError", "UnauthorizedError", "UnexpectedStatusError", "DecodeError",
    "__version__",
]
