"""
HTTP client abstraction for the TikTok Open SDK.

Provides a testable, observable interface for HTTP requests using
httpx as the default implementation. The client only performs GET and
POST, encodes request bodies according to their Content-Type, and
never turns HTTP error statuses into exceptions: callers receive the
response and decide. Transport failures (timeouts, connection errors)
propagate as the httpx exceptions that raised them.
"""

from __future__ import annotations

import abc
import json
import logging
import typing
import urllib.parse
from dataclasses import dataclass, field

import httpx

from .constants import ContentType, HttpDefaults
from .exceptions import UnsupportedContentTypeError, UnsupportedMethodError

_logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST")

_JSON_CONTENT_TYPES = (ContentType.JSON, ContentType.JSON_UTF8)


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class HttpClientConfig:
    """Configuration for HTTP client behavior.

    Attributes:
        read_timeout: Seconds to wait for response data
        open_timeout: Seconds to wait for the connection to open
        enable_logging: Enable debug logging of requests/responses
    """

    read_timeout: float = HttpDefaults.READ_TIMEOUT
    open_timeout: float = HttpDefaults.OPEN_TIMEOUT
    enable_logging: bool = True

    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout, connect=self.open_timeout)


# =============================================================================
# Response
# =============================================================================


@dataclass
class HttpResponse:
    """HTTP response wrapper adapting httpx.Response to our interface."""

    _raw: httpx.Response
    _text: str | None = field(init=False, default=None)

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def is_success(self) -> bool:
        """True for 2xx responses, as classified by the transport."""
        return self._raw.is_success

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._raw.headers)

    @property
    def body(self) -> bytes:
        return self._raw.content

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = self._raw.text
        return self._text


# =============================================================================
# Body encoding
# =============================================================================


def _header_value(headers: typing.Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def _form_value(value: typing.Any) -> str:
    return "" if value is None else str(value)


def encode_body(body: typing.Mapping[str, typing.Any], content_type: str | None) -> bytes:
    """Serialize a request body for the given Content-Type.

    Args:
        body: Mapping of body fields
        content_type: The request's Content-Type header value

    Returns:
        The encoded body

    Raises:
        UnsupportedContentTypeError: If the content type is neither form nor JSON
    """
    if content_type == ContentType.FORM:
        pairs = [(str(key), _form_value(value)) for key, value in body.items()]
        return urllib.parse.urlencode(pairs).encode()

    if content_type in _JSON_CONTENT_TYPES:
        return json.dumps(body).encode()

    raise UnsupportedContentTypeError(content_type)


def _masked_headers(headers: typing.Mapping[str, str]) -> dict[str, str]:
    masked = dict(headers)
    for key in masked:
        if key.lower() == "authorization":
            masked[key] = "Bearer ***"
    return masked


# =============================================================================
# Abstract Client
# =============================================================================


class HttpClient(abc.ABC):
    """Abstract HTTP client for the SDK.

    Method checks and body encoding are shared; implementations only
    provide send(), which receives the already-encoded body.
    """

    def request(
        self,
        method: str,
        url: str,
        params: typing.Mapping[str, typing.Any] | None = None,
        headers: typing.Mapping[str, str] | None = None,
        body: typing.Mapping[str, typing.Any] | None = None,
    ) -> HttpResponse:
        """Perform an HTTP request.

        Args:
            method: "GET" or "POST" (case-insensitive)
            url: Request URL
            params: Query string parameters
            headers: Request headers
            body: Body fields, encoded according to the Content-Type header

        Returns:
            HttpResponse, whatever its status code

        Raises:
            UnsupportedMethodError: If the method is not GET or POST
            UnsupportedContentTypeError: If a body is given with an unsupported Content-Type
            httpx.TransportError: If the request could not be completed
        """
        verb = str(method).upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(str(method))

        headers = dict(headers or {})
        content = None
        if body is not None:
            content = encode_body(body, _header_value(headers, "Content-Type"))

        query = {key: _form_value(value) for key, value in (params or {}).items()}

        return self.send(verb, url, params=query, headers=headers, content=content)

    def get(
        self,
        url: str,
        params: typing.Mapping[str, typing.Any] | None = None,
        headers: typing.Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return self.request("GET", url, params=params, headers=headers)

    def post(
        self,
        url: str,
        params: typing.Mapping[str, typing.Any] | None = None,
        headers: typing.Mapping[str, str] | None = None,
        body: typing.Mapping[str, typing.Any] | None = None,
    ) -> HttpResponse:
        return self.request("POST", url, params=params, headers=headers, body=body)

    @abc.abstractmethod
    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        content: bytes | None,
    ) -> HttpResponse:
        """Send an already-encoded request.

        Args:
            method: Upper-case HTTP method
            url: Request URL
            params: Query string parameters
            headers: Request headers
            content: Encoded body, or None for no body

        Returns:
            HttpResponse
        """
        pass


# =============================================================================
# httpx Implementation
# =============================================================================


class HttpxHttpClient(HttpClient):
    """Default HTTP client using httpx.

    Features:
    - Connection pooling via httpx.Client
    - Separate connect and read timeouts
    - Debug logging of requests/responses with bearer tokens masked

    Example:
        >>> with HttpxHttpClient() as client:
        ...     response = client.post(
        ...         "https://example.com/api",
        ...         headers={"Content-Type": "application/x-www-form-urlencoded"},
        ...         body={"key": "value"},
        ...     )
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        """Initialize HTTP client.

        Args:
            config: Client configuration (uses defaults if None)
        """
        self.config = config or HttpClientConfig()
        self._client = httpx.Client(timeout=self.config.timeout())

    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        content: bytes | None,
    ) -> HttpResponse:
        if self.config.enable_logging:
            _logger.debug(
                "HTTP %s %s (params=%s, headers=%s)",
                method,
                url,
                params,
                _masked_headers(headers),
            )

        response = self._client.request(
            method,
            url,
            params=params or None,
            headers=headers,
            content=content,
        )

        if self.config.enable_logging:
            _logger.debug(
                "HTTP %s from %s (body=%d bytes)",
                response.status_code,
                url,
                len(response.content),
            )

        return HttpResponse(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# =============================================================================
# Mock Client for Testing
# =============================================================================


class MockHttpClient(HttpClient):
    """Mock HTTP client for testing.

    Returns predefined responses without making network requests.
    Tracks all requests made for test assertions.

    Example:
        >>> mock = MockHttpClient(status_code=200, json_response={"access_token": "test"})
        >>> response = mock.post("https://example.com")
        >>> assert response.status_code == 200
        >>> assert len(mock.requests) == 1
    """

    def __init__(
        self,
        status_code: int = 200,
        json_response: typing.Any = None,
        text_response: str = "",
        raise_error: BaseException | type[BaseException] | None = None,
    ) -> None:
        """Initialize mock client.

        Args:
            status_code: HTTP status code to return
            json_response: JSON response body (serialized on each request)
            text_response: Text response body (used if json_response is None)
            raise_error: Exception to raise on every request (for testing errors)
        """
        self.status_code = status_code
        self.json_response = json_response
        self.text_response = text_response
        self.raise_error = raise_error

        self.requests: list[dict[str, typing.Any]] = []

    @property
    def last_request(self) -> dict[str, typing.Any]:
        return self.requests[-1]

    def send(
        self,
        method: str,
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        content: bytes | None,
    ) -> HttpResponse:
        """Record request and return mock response."""
        self.requests.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "headers": headers,
                "content": content,
            }
        )

        if self.raise_error:
            raise self.raise_error

        if self.json_response is not None:
            body = json.dumps(self.json_response).encode()
        else:
            body = self.text_response.encode()

        mock_response = httpx.Response(
            status_code=self.status_code,
            content=body,
            request=httpx.Request(method, url),
        )

        return HttpResponse(mock_response)


__all__ = [
    "SUPPORTED_METHODS",
    "HttpClient",
    "HttpClientConfig",
    "HttpResponse",
    "HttpxHttpClient",
    "MockHttpClient",
    "encode_body",
]
