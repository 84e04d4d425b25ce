"""Non-blocking dispatcher for kitsu-client, built on httpx."""

import logging
from typing import Any

import httpx

from .decoder import decode
from .errors import TransportError, classify_status

logger = logging.getLogger(__name__)


def build_async_client(**kw) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` that behaves like a default `requests.Session`.

    No timeout and redirects are followed; extra keyword arguments go to httpx.
    """
    kw.setdefault("timeout", None)
    kw.setdefault("follow_redirects", True)
    return httpx.AsyncClient(**kw)


async def async_http_get(client: httpx.AsyncClient, url: str, shape: Any) -> Any:
    """Issue one GET on `client` and decode the body as `shape`.

    The body is streamed chunk by chunk and only decoded once complete.
    """
    logger.debug("GET %s", url)
    try:
        async with client.stream("GET", url) as r:
            logger.debug("GET %s -> %s", url, r.status_code)
            err = classify_status(r.status_code, r)
            if err is not None:
                try:
                    await r.aread()
                except httpx.HTTPError as e:
                    raise err from e
                raise err
            body = b"".join([chunk async for chunk in r.aiter_bytes()])
    except httpx.HTTPError as e:
        raise TransportError(str(e)) from e
    return decode(body, shape)
