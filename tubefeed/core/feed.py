"""Base feed: a parsed response plus the continuation protocol."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from tubefeed.core.actions import Actions, ApiResponse
from tubefeed.errors import NoContinuationError, TypeMismatchError
from tubefeed.parser import Memo, ObservedArray, ParsedResponse, YTNode, parse_response
from tubefeed.parser.classes import ContinuationItem, Video

logger = logging.getLogger(__name__)

Seed = Mapping[str, Iterable[YTNode]]


class Feed:
    """
    A page of results.

    Args:
        actions: Transport used for every endpoint call the feed makes.
        data: Raw response (dict or ApiResponse), or a ParsedResponse.
        already_parsed: ``data`` is a ParsedResponse and must not be parsed again.
        seed: Memo entries, keyed by shape tag, that replace this page's own
            entries for those tags. Used to carry filter context into
            continuation pages that omit it.

    Feeds never change after construction; every transition (continuation,
    filter, tab) returns a new feed.
    """

    def __init__(
        self,
        actions: Actions,
        data: Any,
        already_parsed: bool = False,
        *,
        seed: Seed | None = None,
    ):
        self._actions = actions

        if already_parsed or isinstance(data, ParsedResponse):
            if not isinstance(data, ParsedResponse):
                raise TypeMismatchError(
                    f"already_parsed is set but got {type(data).__name__}, not a ParsedResponse"
                )
            self._page = data
        else:
            raw = data.data if isinstance(data, ApiResponse) else data
            self._page = parse_response(raw)

        memo = Memo.concat(self._primary_memo(self._page), self._page.continuation_contents_memo)
        self._memo = memo.seeded(seed) if seed else memo

    @staticmethod
    def _primary_memo(page: ParsedResponse) -> Memo:
        if page.on_response_received_commands is not None:
            return page.on_response_received_commands_memo
        if page.on_response_received_endpoints is not None:
            return page.on_response_received_endpoints_memo
        if page.contents is not None:
            return page.contents_memo
        if page.on_response_received_actions is not None:
            return page.on_response_received_actions_memo
        return Memo()

    @property
    def actions(self) -> Actions:
        return self._actions

    @property
    def page(self) -> ParsedResponse:
        return self._page

    @property
    def memo(self) -> Memo:
        return self._memo

    @property
    def contents(self) -> YTNode | ObservedArray | None:
        """Main content of the page: the contents node, or the continuation actions."""
        if self._page.contents is not None:
            if self._page.contents.is_array():
                return self._page.contents.array()
            return self._page.contents.item()
        return (
            self._page.on_response_received_actions
            or self._page.on_response_received_endpoints
            or self._page.on_response_received_commands
        )

    @property
    def page_contents(self) -> YTNode | ObservedArray | None:
        """Content of the selected tab on a tabbed page, otherwise ``contents``."""
        contents = self.contents
        if isinstance(contents, YTNode) and contents.key("tabs").is_present():
            tab = contents.key("tabs").parsed().array().get(selected=True)
            return tab.content if tab is not None else None
        return contents

    @property
    def videos(self) -> ObservedArray:
        return self._memo.get_type(Video)

    @property
    def has_continuation(self) -> bool:
        return self._memo.has_type(ContinuationItem)

    async def get_continuation_data(self) -> ParsedResponse:
        """
        Fetch the next page.

        Raises:
            NoContinuationError: The page has no continuation, i.e. the feed ended.
        """
        continuations = self._memo.get_type(ContinuationItem)
        if not continuations:
            raise NoContinuationError("There are no continuations", {"tags": sorted(self._memo)})
        if len(continuations) > 1:
            logger.debug("Page has %d continuations, following the first one", len(continuations))
        continuation = continuations[0]
        return await continuation.endpoint.call(self._actions, parse=True)

    async def get_continuation(self) -> "Feed":
        return Feed(self._actions, await self.get_continuation_data(), True)
