"""Callable endpoint descriptors extracted from interactive elements."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tubefeed.constants import BROWSE_PATH, CONTINUATION_REQUEST_PATHS, SEARCH_PATH
from tubefeed.errors import InnertubeError
from tubefeed.parser.helpers import YTNode

if TYPE_CHECKING:
    from tubefeed.core.actions import Actions

logger = logging.getLogger(__name__)

# Prefix of webCommandMetadata.apiUrl that the configured base URL already covers
_API_PREFIX = "/youtubei/v1"

# Endpoint names that can be called without an apiUrl in the metadata
_DEFAULT_PATHS = {
    "browseEndpoint": BROWSE_PATH,
    "searchEndpoint": SEARCH_PATH,
}


@dataclass(frozen=True)
class EndpointMetadata:
    url: str | None = None
    api_url: str | None = None
    page_type: str | None = None
    send_post: bool = False


class NavigationEndpoint(YTNode):
    """
    Target plus parameters of a request hidden behind a chip, tab, link or
    continuation. Calling it re-issues the request every time.
    """

    type = "NavigationEndpoint"

    def __init__(self, data: dict[str, Any] | None = None, parser=None):
        data = data if isinstance(data, dict) else {}
        self.name: str | None = next(
            (k for k in data if k.endswith(("Endpoint", "Command")) and isinstance(data[k], dict)),
            None,
        )
        self.payload: dict[str, Any] = dict(data[self.name]) if self.name else {}

        web_meta = (data.get("commandMetadata") or {}).get("webCommandMetadata") or {}
        self.metadata = EndpointMetadata(
            url=web_meta.get("url"),
            api_url=web_meta.get("apiUrl"),
            page_type=web_meta.get("webPageType"),
            send_post=bool(web_meta.get("sendPost")),
        )
        self.api_path = self._resolve_api_path()

    def _resolve_api_path(self) -> str | None:
        if self.metadata.api_url:
            api_url = self.metadata.api_url
            if api_url.startswith(_API_PREFIX):
                api_url = api_url[len(_API_PREFIX):]
            return api_url
        if self.name == "continuationCommand":
            return CONTINUATION_REQUEST_PATHS.get(self.payload.get("request", ""), BROWSE_PATH)
        return _DEFAULT_PATHS.get(self.name or "")

    @property
    def is_empty(self) -> bool:
        return self.name is None

    def build_payload(self, **extra: Any) -> dict[str, Any]:
        """Request body for this endpoint, before the client context is added."""
        if self.name == "continuationCommand":
            payload: dict[str, Any] = {"continuation": self.payload.get("token")}
        elif self.name == "browseEndpoint":
            payload = {"browseId": self.payload.get("browseId")}
            if self.payload.get("params"):
                payload["params"] = self.payload["params"]
        else:
            payload = dict(self.payload)
        payload.update({k: v for k, v in extra.items() if v is not None})
        return payload

    async def call(self, actions: "Actions", parse: bool = False, **extra: Any):
        """
        Invoke the endpoint through the actions context.

        Args:
            actions: Transport used to send the request.
            parse: Return a ParsedResponse instead of the raw ApiResponse.
            **extra: Fields merged into the payload (e.g. ``query``).
        """
        if self.api_path is None:
            raise InnertubeError(
                f"Endpoint {self.name or '(empty)'} has no API target",
                {"name": self.name, "metadata": self.metadata},
            )
        logger.debug("Calling %s via %s", self.name, self.api_path)
        return await actions.execute(self.api_path, self.build_payload(**extra), parse=parse)

    def __repr__(self) -> str:
        return f"<NavigationEndpoint {self.name} {self.metadata.url or self.api_path}>"
