"""Pocket API client for retrieving bookmarks.

Authentication uses the consumer key and access token as query parameters on
every request, matching Pocket's v3 API. Only the /get endpoint is modeled.

The client does not own its HTTP connection: it is handed a transport (an
httpx.Client, or anything else with a compatible send method) and never
closes it.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from .errors import (
    BodyReadError,
    FetchError,
    RequestBuildError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from .models import Bookmark, RetrieveOptions
from .parser import parse_retrieve_response

logger = logging.getLogger(__name__)

ENDPOINT_RETRIEVE = "/get"
CONTENT_TYPE = "application/json charset=utf-8"
X_ERROR_HEADER = "X-Error"

# Seconds before an in-flight request is aborted
DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Anything that can send a prepared request, e.g. httpx.Client."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


@dataclass(frozen=True)
class ClientConfig:
    host: str
    consumer_key: str
    access_token: str
    username: str  # stored for reference, not sent with any request


class PocketClient:
    """Client for Pocket's retrieve endpoint."""

    def __init__(
        self,
        transport: Transport,
        host: str,
        consumer_key: str,
        access_token: str,
        username: str,
    ):
        try:
            retrieve_options = RetrieveOptions().to_json()
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"could not marshal retrieve options: {e}"
            ) from e

        self._config = ClientConfig(
            host=host,
            consumer_key=consumer_key,
            access_token=access_token,
            username=username,
        )
        self._transport = transport
        # Immutable bytes: every request gets its own stream over them
        self._retrieve_options = retrieve_options

    @classmethod
    def from_config(cls, transport: Transport, config: ClientConfig) -> "PocketClient":
        return cls(
            transport,
            config.host,
            config.consumer_key,
            config.access_token,
            config.username,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def retrieve_options(self) -> bytes:
        return self._retrieve_options

    def retrieve(
        self, timeout: float | None = DEFAULT_TIMEOUT
    ) -> dict[str, Bookmark]:
        """Fetch the tagged bookmarks, keyed by item_id.

        Args:
            timeout: Seconds before the request is aborted (None = wait forever).

        Raises:
            RequestBuildError: The host does not form a valid URL.
            FetchError: The transport failed or the status was not 200; the
                TransportError or UnexpectedStatusError is its __cause__.
            BodyReadError: The response body could not be read.
            DecodeError: The body is not the expected JSON.
        """
        url = self._config.host + ENDPOINT_RETRIEVE
        try:
            request = httpx.Request(
                "POST",
                url,
                content=self._retrieve_options,
                extensions={"timeout": httpx.Timeout(timeout).as_dict()},
            )
        except httpx.InvalidURL as e:
            raise RequestBuildError(
                f"could not create request for fetch bookmarks: {e}"
            ) from e

        logger.info("Fetching bookmarks from %s", url)
        try:
            response = self._send(
                request, self._config.access_token, httpx.codes.OK
            )
        except FetchError as e:
            raise FetchError(f"could not fetch bookmarks: {e}") from e

        try:
            body = response.read()
        except httpx.HTTPError as e:
            raise BodyReadError(f"could not read response body: {e}") from e
        finally:
            response.close()

        bookmarks = parse_retrieve_response(body)
        logger.info("Retrieved %d bookmarks", len(bookmarks))
        return bookmarks

    def _send(
        self,
        request: httpx.Request,
        access_token: str,
        expected_status: int,
    ) -> httpx.Response:
        """Authenticate and dispatch a request, checking the status code.

        The returned response is neither read nor closed; that is left to
        the caller.
        """
        request.headers["Content-Type"] = CONTENT_TYPE
        request.url = request.url.copy_set_param(
            "consumer_key", self._config.consumer_key
        ).copy_set_param("access_token", access_token)

        try:
            response = self._transport.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"could not make request: {e}") from e

        if response.status_code != expected_status:
            detail = response.headers.get(X_ERROR_HEADER, "")
            logger.debug(
                "Got status %d (expected %d): %s",
                response.status_code,
                expected_status,
                detail,
            )
            response.close()
            raise UnexpectedStatusError(
                response.status_code, response.reason_phrase, detail
            )

        return response
