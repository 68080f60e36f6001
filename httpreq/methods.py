"""HTTP method names."""

from enum import Enum


class Method(str, Enum):
    """HTTP verbs. Requests accept any string; these are conveniences."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"
