"""Error taxonomy for kitsu-client.

Every failed call raises exactly one of the exceptions below. They are
terminal: nothing in this package retries or swallows them.
"""

from typing import Any, Optional

OK = 200
BAD_REQUEST = 400
UNAUTHORIZED = 401


class KitsuError(Exception):
    """Base class for every error raised by kitsu-client."""

    kind = "kitsu"


class InvalidUrlError(KitsuError):
    """The request target could not be parsed as an absolute URL.

    Raised before any network call is attempted.
    """

    kind = "invalid_url"

    def __init__(self, url: str, reason: str):
        super().__init__(f"invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(KitsuError):
    """The transport failed to complete the exchange (connection, timeout, I/O)."""

    kind = "transport"


class HTTPStatusError(KitsuError):
    """The exchange completed with a status other than 200.

    `response` is whatever the transport returned (a `requests.Response` or
    an `httpx.Response`), kept for caller inspection.
    """

    kind = "status"

    def __init__(self, response: Any):
        self.response = response
        self.status_code: int = response.status_code
        super().__init__(f"{self.status_code} from {_response_url(response)}")


class BadRequestError(HTTPStatusError):
    kind = "bad_request"


class UnauthorizedError(HTTPStatusError):
    kind = "unauthorized"


class UnexpectedStatusError(HTTPStatusError):
    kind = "unexpected_status"


class DecodeError(KitsuError):
    """A 200 body was not valid JSON or did not match the expected shape."""

    kind = "decode"


def classify_status(status_code: int, response: Any) -> Optional[HTTPStatusError]:
    """Map a completed exchange to its error, or None when the body should be decoded."""
    if status_code == OK:
        return None
    if status_code == BAD_REQUEST:
        return BadRequestError(response)
    if status_code == UNAUTHORIZED:
        return UnauthorizedError(response)
    return UnexpectedStatusError(response)


def _response_url(response: Any) -> str:
    # httpx raises when a response has no request attached
    try:
        return str(response.url)
    except (AttributeError, RuntimeError):
        return "<unknown>"
