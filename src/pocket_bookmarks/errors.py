"""Exceptions raised by the Pocket client.

Every failure of a client call surfaces as a PocketError subclass, with the
underlying exception (if any) chained as __cause__.
"""


class PocketError(Exception):
    """Base class for all client errors."""


class SerializationError(PocketError):
    """The retrieve options could not be encoded."""


class RequestBuildError(PocketError):
    """The HTTP request could not be constructed (e.g. malformed host)."""


class FetchError(PocketError):
    """The authenticated request did not produce a usable response."""


class TransportError(FetchError):
    """The transport failed to deliver the request (network, timeout)."""


class UnexpectedStatusError(FetchError):
    """The server answered with a status other than the expected one."""

    def __init__(self, status_code: int, status_text: str, detail: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        self.detail = detail
        super().__init__(f"unexpected status code '{status_text}': {detail}")


class BodyReadError(PocketError):
    """The response body could not be read."""


class DecodeError(PocketError):
    """The response body is not the JSON shape we expect."""
