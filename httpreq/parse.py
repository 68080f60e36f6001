"""Typed JSON decoding on top of the transport."""

from typing import Any, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import UnacceptableStatusError, UnmarshalError
from .models import Request, Response
from .transport import send, send_sync

logger = structlog.get_logger()

T = TypeVar("T")


def decode(body: bytes, result_type: type[T] | Any) -> T:
    """
    Decode a JSON body into result_type.

    result_type can be anything pydantic validates: a BaseModel, a dataclass,
    a TypedDict, or a builtin/generic type such as `dict[str, int]`.

    Raises:
        UnmarshalError: If the body is not valid JSON or does not fit result_type
    """
    try:
        return TypeAdapter(result_type).validate_json(body)
    except PydanticValidationError as e:
        raise UnmarshalError(cause=e) from e


def _check_status(response: Response, acceptable: tuple[int, ...]) -> None:
    if acceptable and response.status_code not in acceptable:
        logger.debug(
            "Unacceptable status code",
            status_code=response.status_code,
            acceptable=list(acceptable),
        )
        raise UnacceptableStatusError(response.status_code)


async def send_parse(
    client: httpx.AsyncClient,
    request: Request,
    result_type: type[T] | Any,
    *acceptable: int,
    deadline: float | None = None,
) -> T:
    """
    Send a request and decode its JSON body into result_type.

    Meant for callers who know the response structure. If acceptable status
    codes are given, any other status is an error; with none given every
    status is decoded. Callers expecting an empty body (204 No Content)
    should use `send` instead.

    Args:
        client: Caller-owned async client
        request: Request to send
        result_type: Type to decode the body into
        *acceptable: Status codes to accept
        deadline: Optional limit in seconds for the round trip

    Returns:
        Fully populated instance of result_type

    Raises:
        RequestConstructionError, TransportError, ResponseReadError: From `send`
        UnacceptableStatusError: If the status is not acceptable
        UnmarshalError: If the body cannot be decoded into result_type
    """
    response = await send(client, request, deadline=deadline)
    _check_status(response, acceptable)
    return decode(response.body, result_type)


def send_parse_sync(
    client: httpx.Client,
    request: Request,
    result_type: type[T] | Any,
    *acceptable: int,
) -> T:
    """Blocking variant of `send_parse` for an httpx.Client."""
    response = send_sync(client, request)
    _check_status(response, acceptable)
    return decode(response.body, result_type)
