"""Single round-trip transport over a caller-owned httpx client."""

import asyncio
import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import structlog

from .exceptions import RequestConstructionError, ResponseReadError, TransportError
from .methods import Method
from .models import Request, Response, parse_set_cookies

logger = structlog.get_logger()

# RFC 9110 token characters
_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def _method_name(method: Method | str) -> str:
    name = method.value if isinstance(method, Method) else method
    if name == "":
        return Method.GET.value
    if not isinstance(name, str) or not _METHOD_TOKEN.match(name):
        raise RequestConstructionError(cause=ValueError(f"invalid method {name!r}"))
    return name


def merge_query(url: str, params: dict[str, str]) -> str:
    """
    Add params to the query string of url.

    Existing pairs are kept, params are appended (a repeated key gets several
    values), and the whole query is re-encoded sorted by key. The sort is
    stable, so values of the same key keep their order.

    Raises:
        ValueError: If the URL cannot be split
    """
    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    pairs.extend(params.items())
    pairs.sort(key=lambda pair: pair[0])
    return urlunsplit(parts._replace(query=urlencode(pairs)))


def _header_pairs(request: Request) -> list[tuple[str, str]]:
    pairs = [(name, value) for name, values in request.header.items() for value in values]
    if not request.cookies:
        return pairs

    # Cookies join any Cookie value the caller already set into a single header.
    existing = [value for name, value in pairs if name.lower() == "cookie"][:1]
    pairs = [(name, value) for name, value in pairs if name.lower() != "cookie"]
    values = existing + [cookie.to_header_value() for cookie in request.cookies]
    pairs.append(("Cookie", "; ".join(values)))
    return pairs


def build_request(request: Request) -> httpx.Request:
    """
    Build the wire request for a Request.

    The header set is exactly `request.header` plus the synthesized Cookie
    header. Client default headers are never merged in; httpx only adds the
    Host and Content-Length it derives from the URL and body.

    Raises:
        RequestConstructionError: If the method, URL or headers are malformed
    """
    method = _method_name(request.method)
    try:
        url = merge_query(request.url, request.params)
        return httpx.Request(
            method,
            url,
            headers=_header_pairs(request),
            content=request.body,
        )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise RequestConstructionError(cause=e) from e


def _collect_headers(headers: httpx.Headers) -> dict[str, list[str]]:
    collected: dict[str, list[str]] = {}
    seen: dict[str, str] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        name = seen.setdefault(name.lower(), name)
        collected.setdefault(name, []).append(raw_value.decode(headers.encoding))
    return collected


def _to_response(native: httpx.Response, body: bytes) -> Response:
    response = Response(
        body=body,
        header=_collect_headers(native.headers),
        cookies=parse_set_cookies(native.headers.get_list("set-cookie")),
        status_code=native.status_code,
    )
    logger.debug(
        "Response received",
        status_code=response.status_code,
        body_size=len(body),
    )
    return response


async def _round_trip(client: httpx.AsyncClient, wire: httpx.Request) -> Response:
    try:
        native = await client.send(wire, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Sending request failed", url=str(wire.url), error=str(e))
        raise TransportError(cause=e) from e

    try:
        body = await native.aread()
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug("Reading response failed", url=str(wire.url), error=str(e))
        raise ResponseReadError(cause=e) from e
    finally:
        await native.aclose()

    return _to_response(native, body)


async def send(
    client: httpx.AsyncClient,
    request: Request,
    *,
    deadline: float | None = None,
) -> Response:
    """
    Send a request and return the fully buffered response.

    Performs exactly one round trip on the caller's client; nothing is retried.

    Args:
        client: Caller-owned async client, reused across calls
        request: Request to send
        deadline: Optional limit in seconds for the whole round trip

    Returns:
        Response with body, headers, cookies and status code

    Raises:
        RequestConstructionError: If the request cannot be built
        TransportError: If the request cannot be delivered or the deadline expires
        ResponseReadError: If the body cannot be fully read
    """
    wire = build_request(request)
    logger.debug("Sending request", method=wire.method, url=str(wire.url))

    if deadline is None:
        return await _round_trip(client, wire)

    try:
        return await asyncio.wait_for(_round_trip(client, wire), timeout=deadline)
    except TimeoutError as e:
        logger.debug("Request deadline expired", url=str(wire.url), deadline=deadline)
        raise TransportError("sending request: deadline exceeded", cause=e) from e


def send_sync(client: httpx.Client, request: Request) -> Response:
    """
    Blocking variant of `send` for an httpx.Client.

    Deadlines come from the client's own timeout configuration.
    """
    wire = build_request(request)
    logger.debug("Sending request", method=wire.method, url=str(wire.url))

    try:
        native = client.send(wire, stream=True)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Sending request failed", url=str(wire.url), error=str(e))
        raise TransportError(cause=e) from e

    try:
        body = native.read()
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug("Reading response failed", url=str(wire.url), error=str(e))
        raise ResponseReadError(cause=e) from e
    finally:
        native.close()

    return _to_response(native, body)
