"""Actions context: executes endpoint calls handed to it by parsed content."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from tubefeed.config import Settings, get_settings
from tubefeed.constants import BROWSE_PATH, CLIENT_NAME_ID
from tubefeed.errors import TransportError
from tubefeed.http_client import get_http_client
from tubefeed.parser import ParsedResponse, parse_response

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    """Raw result of an endpoint call."""

    success: bool
    status_code: int
    data: dict[str, Any]


class Actions:
    """Sends InnerTube requests. Never retries; errors propagate to the caller."""

    def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_http_client()

    def build_context(self) -> dict[str, Any]:
        return {
            "client": {
                "clientName": self.settings.client_name,
                "clientVersion": self.settings.client_version,
                "hl": self.settings.hl,
                "gl": self.settings.gl,
            }
        }

    def build_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
            "X-YouTube-Client-Name": CLIENT_NAME_ID,
            "X-YouTube-Client-Version": self.settings.client_version,
        }
        if self.settings.cookie:
            headers["Cookie"] = self.settings.cookie
        return headers

    async def execute(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        parse: bool = False,
    ) -> ApiResponse | ParsedResponse:
        """
        POST ``payload`` to an API path.

        Args:
            path: API path relative to the configured base URL, e.g. ``/browse``.
            payload: Request body; the client context is added when missing.
            parse: Return a ParsedResponse instead of an ApiResponse.

        Raises:
            TransportError: On connection failures, non-2xx responses and
                bodies that are not JSON.
        """
        body = dict(payload or {})
        body.setdefault("context", self.build_context())
        if not path.startswith("/"):
            path = f"/{path}"
        url = f"{self.settings.api_base_url}{path}"

        logger.debug("POST %s (%s)", url, ", ".join(k for k in body if k != "context"))
        try:
            resp = await self.client.post(
                url,
                params={"prettyPrint": "false"},
                headers=self.build_headers(),
                json=body,
            )
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", path, e)
            status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            raise TransportError(f"Request to {path} failed: {e}", {"path": path, "status_code": status}) from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Response from %s is not JSON: %s", path, e)
            raise TransportError(
                f"Response from {path} is not JSON",
                {"path": path, "status_code": resp.status_code, "content_type": resp.headers.get("content-type")},
            ) from e
        if parse:
            return parse_response(data)
        return ApiResponse(success=resp.is_success, status_code=resp.status_code, data=data)

    async def browse(self, browse_id: str, params: str | None = None, parse: bool = False):
        payload: dict[str, Any] = {"browseId": browse_id}
        if params:
            payload["params"] = params
        return await self.execute(BROWSE_PATH, payload, parse=parse)
