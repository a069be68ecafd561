"""Shared httpx.AsyncClient for connection pooling across feeds."""

import httpx

from tubefeed.config import get_settings

_client: httpx.AsyncClient | None = None


def _build_client() -> httpx.AsyncClient:
    settings = get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout, connect=settings.http_connect_timeout),
        headers={"User-Agent": settings.user_agent},
    )


def get_http_client() -> httpx.AsyncClient:
    """Return the shared httpx.AsyncClient. Falls back to creating one if not initialized."""
    global _client
    if _client is None:
        _client = _build_client()
    return _client


async def init_http_client() -> None:
    """Initialize the shared client. Call before the first request."""
    global _client
    _client = _build_client()


async def close_http_client() -> None:
    """Close the shared client. Call on shutdown."""
    global _client
    if _client:
        await _client.aclose()
        _client = None
