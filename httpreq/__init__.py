"""
httpreq - send HTTP requests described as plain data.

Builds one request from a `Request` value, sends it on a caller-owned httpx
client, and returns a fully buffered `Response`. `send_parse` additionally
checks the status code and decodes the JSON body into a caller-chosen type.

Example:
    ```python
    import httpx
    from pydantic import BaseModel

    from httpreq import Method, Request, send, send_parse

    class Item(BaseModel):
        id: int
        name: str

    async with httpx.AsyncClient() as client:
        request = Request(
            method=Method.GET,
            url="https://api.example.com/items/42",
            header={"Accept": ["application/json"]},
            params={"expand": "owner"},
        )

        # Raw response
        response = await send(client, request)

        # Typed result, only 200 accepted
        item = await send_parse(client, request, Item, 200)
    ```
"""

from .config import ClientConfig
from .exceptions import (
    HttpReqError,
    RequestConstructionError,
    ResponseReadError,
    TransportError,
    UnacceptableStatusError,
    UnmarshalError,
)
from .methods import Method
from .models import Cookie, Request, Response, parse_set_cookies
from .parse import decode, send_parse, send_parse_sync
from .transport import build_request, merge_query, send, send_sync
from .version import __version__

__all__ = [
    # Operations
    "send",
    "send_sync",
    "send_parse",
    "send_parse_sync",
    "build_request",
    "merge_query",
    "decode",
    # Configuration
    "ClientConfig",
    # Models
    "Method",
    "Cookie",
    "Request",
    "Response",
    "parse_set_cookies",
    # Exceptions
    "HttpReqError",
    "RequestConstructionError",
    "TransportError",
    "ResponseReadError",
    "UnacceptableStatusError",
    "UnmarshalError",
    # Version
    "__version__",
]
