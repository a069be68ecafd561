"""Entry point that opens pages through a shared Actions context."""

import logging

import httpx

from tubefeed.config import Settings as ClientSettings
from tubefeed.constants import SETTINGS_BROWSE_ID
from tubefeed.core.actions import Actions
from tubefeed.http_client import close_http_client, init_http_client
from tubefeed.youtube.channel import Channel
from tubefeed.youtube.settings import Settings

logger = logging.getLogger(__name__)


class Innertube:
    """
    Opens channel and settings pages.

    Use as an async context manager to own the shared HTTP client's lifetime,
    or pass a client of your own.
    """

    def __init__(self, settings: ClientSettings | None = None, client: httpx.AsyncClient | None = None):
        self.actions = Actions(settings, client)
        self._owns_client = client is None

    async def __aenter__(self) -> "Innertube":
        if self._owns_client:
            await init_http_client()
        return self

    async def __aexit__(self, *exc) -> None:
        if self._owns_client:
            await close_http_client()

    async def get_channel(self, channel_id: str) -> Channel:
        logger.info("Fetching channel %s", channel_id)
        response = await self.actions.browse(channel_id)
        return Channel(self.actions, response)

    async def get_settings(self) -> Settings:
        if not self.actions.settings.cookie:
            logger.warning("No cookie configured, the settings page needs a signed-in session")
        response = await self.actions.browse(SETTINGS_BROWSE_ID)
        return Settings(self.actions, response)
