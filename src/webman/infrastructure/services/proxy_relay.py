"""Outbound HTTP relay for the browser front-end.

Re-issues one HTTP request described by the caller and normalizes the
upstream response into a ProxyResult. JSON bodies are returned verbatim;
anything else is base64 encoded so arbitrary bytes survive the JSON
envelope.
"""

import base64
import json
import re

import httpx

from webman.core.exceptions import BadRequestError, UpstreamError
from webman.core.logging import get_logger
from webman.domain.entities import BodyEncoding, ProxyResult

logger = get_logger(__name__)

# RFC 7230 token characters
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

# Requested when the caller sets no Accept-Encoding; decoded transparently
_TRANSPARENT_ENCODING = "gzip"


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def encode_body(body: bytes) -> tuple[str, BodyEncoding]:
    """Encode an upstream body for the JSON envelope.

    Args:
        body: Raw upstream bytes.

    Returns:
        The UTF-8 text unchanged when it parses as JSON, otherwise the
        standard base64 encoding, together with the encoding used.
    """
    try:
        text = body.decode("utf-8")
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        return base64.b64encode(body).decode("ascii"), BodyEncoding.BASE64
    return text, BodyEncoding.JSON


def first_header_values(headers: httpx.Headers) -> dict[str, str]:
    """Collapse headers to the first value seen for each name.

    Names are compared case-insensitively; the first spelling is kept.
    """
    collapsed: dict[str, str] = {}
    seen: set[str] = set()
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        collapsed[name] = raw_value.decode(headers.encoding)
    return collapsed


class ProxyRelay:
    """Relays a single HTTP request and captures the full response."""

    def __init__(
        self,
        timeout: float | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the relay.

        Args:
            timeout: Seconds before the outbound call is abandoned; None never times out.
            follow_redirects: Whether to follow upstream redirects.
            transport: Optional httpx transport, used to mock the upstream.
        """
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.transport = transport

    def build_request(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: dict[str, str] | None,
        body: bytes | None,
    ) -> httpx.Request:
        """Build the outbound request without touching the network.

        Raises:
            BadRequestError: If the method or URL cannot form a valid request.
        """
        method = method or "GET"
        if not _METHOD_RE.match(method):
            raise BadRequestError(f"invalid method {method!r}")

        try:
            request = client.build_request(
                method,
                url,
                headers=headers or {},
                content=body or None,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
            raise BadRequestError(f"invalid request: {e}") from e

        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise BadRequestError(f"unsupported URL {url!r}")
        return request

    async def relay(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> ProxyResult:
        """Issue the request and normalize the response.

        When the caller sets no Accept-Encoding, gzip is requested and
        decoded here, and the now stale Content-Encoding and Content-Length
        headers are dropped. A caller-chosen Accept-Encoding gets the
        upstream bytes exactly as sent.

        Args:
            method: HTTP method; empty means GET.
            url: Absolute http(s) target URL.
            headers: Header name to value mapping, applied verbatim.
            body: Raw request body; sent only when non-empty.

        Returns:
            ProxyResult with status, first-value headers and encoded body.

        Raises:
            BadRequestError: If the request cannot be built.
            UpstreamError: If sending or reading the response fails.
        """
        caller_encoding = any(
            name.lower() == "accept-encoding" for name in (headers or {})
        )

        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            transport=self.transport,
        ) as client:
            request = self.build_request(client, method, url, headers, body)
            if not caller_encoding:
                request.headers["Accept-Encoding"] = _TRANSPARENT_ENCODING

            logger.debug("Relaying request", method=request.method, url=str(request.url))
            try:
                response = await client.send(request, stream=True)
                try:
                    if caller_encoding:
                        content = b"".join([chunk async for chunk in response.aiter_raw()])
                    else:
                        content = await response.aread()
                finally:
                    await response.aclose()
            except httpx.HTTPError as e:
                logger.warning(
                    "Upstream request failed",
                    method=request.method,
                    url=str(request.url),
                    error=str(e),
                    exc_type=type(e).__name__,
                )
                raise UpstreamError(str(e) or type(e).__name__) from e

        response_headers = first_header_values(response.headers)
        content_encoding = response.headers.get("Content-Encoding", "").strip().lower()
        if not caller_encoding and content_encoding == _TRANSPARENT_ENCODING:
            response_headers = {
                name: value
                for name, value in response_headers.items()
                if name.lower() not in ("content-encoding", "content-length")
            }

        encoded, encoding = encode_body(content)
        logger.info(
            "Upstream responded",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            body_bytes=len(content),
            encoding=encoding.value,
        )
        return ProxyResult(
            status_code=response.status_code,
            headers=response_headers,
            body=encoded,
            encoding=encoding,
        )
