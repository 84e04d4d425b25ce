"""Request targets and the blocking dispatcher for kitsu-client."""

import logging
from typing import Any, Optional
from urllib.parse import urlsplit

import requests

from .decoder import decode
from .errors import InvalidUrlError, TransportError, classify_status
from .search import Search

logger = logging.getLogger(__name__)

# Constants
API_URL = "https://kitsu.io/api/edge"
SCHEMES = {"http", "https"}


def build_target(path: str, search: Optional[Search] = None, base: str = API_URL) -> str:
    """Join base, path and the encoded filters into an absolute URL.

    The `?` separator is only added when there is at least one filter.
    Raises InvalidUrlError when the result is not a usable absolute URL.
    """
    url = base + path
    if search:
        url += "?" + search.query

    for ch in url:
        if ch.isspace() or not ch.isprintable():
            raise InvalidUrlError(url, f"invalid character {ch!r}")
    try:
        parts = urlsplit(url)
        parts.port  # raises on a malformed port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e
    if parts.scheme not in SCHEMES:
        raise InvalidUrlError(url, "relative URL without a base" if not parts.scheme else f"unsupported scheme {parts.scheme!r}")
    if not parts.hostname:
        raise InvalidUrlError(url, "empty host")
    return url


def http_get(session: requests.Session, url: str, shape: Any) -> Any:
    """Issue one GET on `session` and decode the body as `shape`.

    Blocks until the whole body has been received.
    """
    logger.debug("GET %s", url)
    try:
        r = session.get(url)
    except requests.RequestException as e:
        raise TransportError(str(e)) from e
    logger.debug("GET %s -> %s", url, r.status_code)

    err = classify_status(r.status_code, r)
    if err is not None:
        raise err
    try:
        body = r.content
    except requests.RequestException as e:
        raise TransportError(str(e)) from e
    return decode(body, shape)
