"""Data models for httpreq."""

import re
from dataclasses import dataclass, field
from datetime import timezone
from email.utils import parsedate_to_datetime

from .methods import Method

# RFC 9110 token characters
_COOKIE_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_MAX_AGE = re.compile(r"^-?[0-9]+$")


@dataclass
class Cookie:
    """A cookie sent with a request or received in a response."""

    name: str
    value: str
    path: str | None = None
    domain: str | None = None
    expires: int | None = None
    max_age: int | None = None
    secure: bool = False
    http_only: bool = False
    same_site: str | None = None

    def to_header_value(self) -> str:
        """
        Render the cookie as a `name=value` pair for a Cookie header.

        CR/LF in the name become `-`. Characters that cannot appear in a
        cookie value (`"`, `;`, `\\`, control and non-ASCII characters) are
        dropped, and a value containing a space or a comma is quoted.
        """
        name = self.name.replace("\r", "-").replace("\n", "-")
        value = "".join(ch for ch in self.value if _is_cookie_value_char(ch))
        if " " in value or "," in value:
            value = f'"{value}"'
        return f"{name}={value}"

    @classmethod
    def from_set_cookie(cls, line: str) -> "Cookie | None":
        """
        Parse one Set-Cookie header value.

        No cookie policy is applied: deletion cookies, foreign domains and
        repeated names are all returned as sent. `max_age` holds the raw
        Max-Age seconds (0 or negative means delete). Unknown attributes are
        ignored.

        Returns:
            The parsed Cookie, or None if the name or value is malformed
        """
        parts = line.split(";")
        name, sep, value = parts[0].partition("=")
        name = name.strip()
        value = value.strip()
        if not sep or not _COOKIE_NAME.match(name):
            return None
        if len(value) > 1 and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        if not all(_is_cookie_value_char(ch) for ch in value):
            return None

        cookie = cls(name=name, value=value)
        for attr in parts[1:]:
            key, _, val = attr.partition("=")
            key = key.strip().lower()
            val = val.strip()
            if key == "secure":
                cookie.secure = True
            elif key == "httponly":
                cookie.http_only = True
            elif key == "samesite":
                cookie.same_site = val or None
            elif key == "domain":
                cookie.domain = val or None
            elif key == "path":
                cookie.path = val or None
            elif key == "max-age" and _MAX_AGE.match(val):
                cookie.max_age = int(val)
            elif key == "expires":
                cookie.expires = _parse_expires(val)
        return cookie


def _is_cookie_value_char(ch: str) -> bool:
    return " " <= ch < "\x7f" and ch not in '";\\'


def _parse_expires(value: str) -> int | None:
    try:
        expires = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return int(expires.timestamp())


def parse_set_cookies(lines: list[str]) -> list[Cookie]:
    """Parse Set-Cookie header values in order, skipping malformed ones."""
    cookies = []
    for line in lines:
        cookie = Cookie.from_set_cookie(line)
        if cookie is not None:
            cookies.append(cookie)
    return cookies


@dataclass
class Request:
    """
    Everything needed to build one HTTP request.

    `method` can be any string or a `Method`. `url` must be the full address.
    `header`, `cookies` and `body` are optional. `params` are URL-encoded
    and added to any query string already present in `url`.

    Nothing is validated here; a malformed method or URL fails when sent.
    httpx upper-cases the method on the wire, so `"purge"` is sent as
    `PURGE`; an empty method is sent as `GET`.
    """

    method: Method | str
    url: str
    header: dict[str, list[str]] = field(default_factory=dict)
    cookies: list[Cookie] = field(default_factory=list)
    body: bytes = b""
    params: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """A fully buffered HTTP response."""

    body: bytes
    header: dict[str, list[str]]
    cookies: list[Cookie]
    status_code: int

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of a header, matching the name case-insensitively."""
        wanted = name.lower()
        for key, values in self.header.items():
            if key.lower() == wanted and values:
                return values[0]
        return default
