"""Tests for ClientConfig."""

import httpx
import pytest

from httpreq import ClientConfig


def test_config_defaults():
    """Test default configuration values."""
    config = ClientConfig()
    assert config.timeout == 5.0
    assert config.follow_redirects is False
    assert config.max_connections == 100
    assert config.max_keepalive_connections == 20


def test_config_custom_values():
    """Test configuration with custom values."""
    config = ClientConfig(timeout=10.0, follow_redirects=True, max_connections=5)
    assert config.timeout == 10.0
    assert config.follow_redirects is True
    assert config.max_connections == 5


def test_config_invalid_timeout():
    """Test that invalid timeout raises ValueError."""
    with pytest.raises(ValueError, match="timeout must be greater than 0"):
        ClientConfig(timeout=0)


def test_config_invalid_max_connections():
    """Test that invalid max_connections raises ValueError."""
    with pytest.raises(ValueError, match="max_connections must be greater than 0"):
        ClientConfig(max_connections=0)


def test_config_negative_keepalive():
    """Test that negative keep-alive limit raises ValueError."""
    with pytest.raises(ValueError, match="max_keepalive_connections must be non-negative"):
        ClientConfig(max_keepalive_connections=-1)


def test_config_keepalive_above_max():
    """Test that keep-alive limit cannot exceed the connection limit."""
    with pytest.raises(ValueError, match="max_keepalive_connections must be <= max_connections"):
        ClientConfig(max_connections=5, max_keepalive_connections=10)


@pytest.mark.asyncio
async def test_async_client_uses_config():
    """Test that the async client is built from the config."""
    config = ClientConfig(timeout=7.5, follow_redirects=True)
    async with config.async_client() as client:
        assert isinstance(client, httpx.AsyncClient)
        assert client.timeout.read == 7.5
        assert client.follow_redirects is True


def test_sync_client_uses_config():
    """Test that the sync client is built from the config."""
    config = ClientConfig(timeout=3.0)
    with config.client() as client:
        assert isinstance(client, httpx.Client)
        assert client.timeout.connect == 3.0
        assert client.follow_redirects is False
