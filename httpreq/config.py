"""Configuration for httpx clients used with httpreq."""

from dataclasses import dataclass

import httpx


@dataclass
class ClientConfig:
    """
    Configuration for building a caller-owned httpx client.

    httpreq never creates clients on its own: every call takes the client
    explicitly. This config is a convenience for building one.

    Attributes:
        timeout: Connect/read/write/pool timeout in seconds (default: 5.0)
        follow_redirects: Whether the client follows redirects (default: False)
        max_connections: Maximum number of pooled connections (default: 100)
        max_keepalive_connections: Maximum idle keep-alive connections (default: 20)

    Example:
        ```python
        config = ClientConfig(timeout=10.0, follow_redirects=True)
        async with config.async_client() as client:
            response = await send(client, request)
        ```
    """

    timeout: float = 5.0
    follow_redirects: bool = False
    max_connections: int = 100
    max_keepalive_connections: int = 20

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")

        if self.max_connections <= 0:
            raise ValueError("max_connections must be greater than 0")

        if self.max_keepalive_connections < 0:
            raise ValueError("max_keepalive_connections must be non-negative")

        if self.max_keepalive_connections > self.max_connections:
            raise ValueError("max_keepalive_connections must be <= max_connections")

    @property
    def limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
        )

    def async_client(self) -> httpx.AsyncClient:
        """Build an httpx.AsyncClient. The caller owns and closes it."""
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            limits=self.limits,
        )

    def client(self) -> httpx.Client:
        """Build an httpx.Client. The caller owns and closes it."""
        return httpx.Client(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            limits=self.limits,
        )
