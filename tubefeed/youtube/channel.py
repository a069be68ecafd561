"""Channel page and the lists reached from it."""

import logging
from typing import Any

from tubefeed.constants import (
    TAB_ABOUT,
    TAB_CHANNELS,
    TAB_COMMUNITY,
    TAB_HOME,
    TAB_LIVE,
    TAB_PLAYLISTS,
    TAB_SHORTS,
    TAB_VIDEOS,
)
from tubefeed.core.feed import Feed
from tubefeed.core.filterable_feed import FilterableFeed
from tubefeed.core.tabbed_feed import TabbedFeed
from tubefeed.errors import InvalidStructureError, TabNotFoundError
from tubefeed.parser.classes import (
    AppendContinuationItemsAction,
    C4TabbedHeader,
    CarouselHeader,
    ChannelAboutFullMetadata,
    ChannelMetadata,
    ChipCloudChip,
    ExpandableTab,
    FeedFilterChipBar,
    InteractiveTabbedHeader,
    MicroformatData,
    ReloadContinuationItemsCommand,
    SubscribeButton,
    Tab,
)

logger = logging.getLogger(__name__)


class Channel(TabbedFeed, FilterableFeed):
    """A channel page, opened on whichever tab the response has selected."""

    def __init__(self, actions, data, already_parsed=False):
        super().__init__(actions, data, already_parsed)
        page = self.page

        header = page.header.item() if page.header is not None else None
        self.header = header.as_(C4TabbedHeader, CarouselHeader, InteractiveTabbedHeader) if header else None

        metadata_node = page.metadata.item() if page.metadata is not None else None
        metadata = metadata_node.as_(ChannelMetadata) if metadata_node else None
        microformat = page.microformat.as_(MicroformatData) if page.microformat else None

        if metadata is None and page.contents is None:
            raise InvalidStructureError("Invalid channel", {"has_header": header is not None})

        self.metadata: dict[str, Any] = {
            **(metadata.to_dict() if metadata else {}),
            **(microformat.to_dict() if microformat else {}),
        }
        self.subscribe_button: SubscribeButton | None = page.header_memo.first_of_type(SubscribeButton)

        root = page.contents.item() if page.contents is not None and page.contents.is_item() else None
        if root is not None and root.key("tabs").is_present():
            self.current_tab = (
                root.key("tabs").parsed().array().filter_type(Tab, ExpandableTab).get(selected=True)
            )
        else:
            self.current_tab = None

    async def apply_filter(self, target: str | ChipCloudChip) -> "FilteredChannelList":
        """
        Apply a filter to the current tab. Use ``filters`` to list the available ones.

        Raises:
            FilterNotFoundError: No chip has the given text.
        """
        feed = await self.get_filtered_feed(target)
        return FilteredChannelList(self.actions, feed.page, True)

    async def _open_tab(self, url: str) -> "Channel":
        tab = await self.get_tab_by_url(url)
        return Channel(self.actions, tab.page, True)

    async def get_home(self) -> "Channel":
        return await self._open_tab(TAB_HOME)

    async def get_videos(self) -> "Channel":
        return await self._open_tab(TAB_VIDEOS)

    async def get_shorts(self) -> "Channel":
        return await self._open_tab(TAB_SHORTS)

    async def get_live_streams(self) -> "Channel":
        return await self._open_tab(TAB_LIVE)

    async def get_playlists(self) -> "Channel":
        return await self._open_tab(TAB_PLAYLISTS)

    async def get_community(self) -> "Channel":
        return await self._open_tab(TAB_COMMUNITY)

    async def get_channels(self) -> "Channel":
        return await self._open_tab(TAB_CHANNELS)

    async def get_about(self) -> ChannelAboutFullMetadata | None:
        """Retrieve the about block. Unlike the other tabs this does not return a Channel."""
        tab = await self.get_tab_by_url(TAB_ABOUT)
        return tab.memo.first_of_type(ChannelAboutFullMetadata)

    @property
    def has_home(self) -> bool:
        return self.has_tab_with_url(TAB_HOME)

    @property
    def has_videos(self) -> bool:
        return self.has_tab_with_url(TAB_VIDEOS)

    @property
    def has_shorts(self) -> bool:
        return self.has_tab_with_url(TAB_SHORTS)

    @property
    def has_live_streams(self) -> bool:
        return self.has_tab_with_url(TAB_LIVE)

    @property
    def has_playlists(self) -> bool:
        return self.has_tab_with_url(TAB_PLAYLISTS)

    @property
    def has_community(self) -> bool:
        return self.has_tab_with_url(TAB_COMMUNITY)

    @property
    def has_about(self) -> bool:
        return self.has_tab_with_url(TAB_ABOUT)

    @property
    def has_search(self) -> bool:
        return self.memo.has_type(ExpandableTab)

    async def search(self, query: str) -> "Channel":
        """Search within the channel."""
        tab = self.memo.first_of_type(ExpandableTab)
        if tab is None:
            raise TabNotFoundError("Search tab not found", key="search", available=self.tab_urls)
        page = await tab.endpoint.call(self.actions, parse=True, query=query)
        return Channel(self.actions, page, True)

    async def get_continuation(self) -> "ChannelListContinuation":
        page = await self.get_continuation_data()
        return ChannelListContinuation(self.actions, page, True)


class ChannelListContinuation(Feed):
    """Next page of an unfiltered channel list."""

    @property
    def contents(self) -> AppendContinuationItemsAction | ReloadContinuationItemsCommand | None:
        actions = self.page.on_response_received_actions or self.page.on_response_received_endpoints
        return actions[0] if actions else None

    async def get_continuation(self) -> "ChannelListContinuation":
        page = await self.get_continuation_data()
        return ChannelListContinuation(self.actions, page, True)


def _is_filter_bar_refresh(action) -> bool:
    items = getattr(action, "contents", None) or []
    return all(isinstance(item, FeedFilterChipBar) for item in items)


class FilteredChannelList(FilterableFeed):
    """A channel list with a filter applied. Keeps its filters across continuations."""

    @property
    def contents(self) -> AppendContinuationItemsAction | ReloadContinuationItemsCommand | None:
        actions = self.page.on_response_received_actions or []
        # The first reload of a filtered page only refreshes the filter bar
        if len(actions) > 1 and _is_filter_bar_refresh(actions[0]):
            actions = actions.without(0)
        return actions[0] if actions else None

    async def apply_filter(self, target: str | ChipCloudChip) -> "FilteredChannelList":
        feed = await self.get_filtered_feed(target)
        return FilteredChannelList(self.actions, feed.page, True)

    async def get_continuation(self) -> "FilteredChannelList":
        page = await self.get_continuation_data()
        return FilteredChannelList(self.actions, page, True, seed=self.filter_seed())
