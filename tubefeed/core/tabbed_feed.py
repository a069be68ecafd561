"""Tab selection capability."""

import logging

from tubefeed.core.feed import Feed
from tubefeed.errors import TabNotFoundError
from tubefeed.parser import ObservedArray
from tubefeed.parser.classes import Tab
from tubefeed.utils import last_path_segment

logger = logging.getLogger(__name__)


class TabbedFeed(Feed):
    """Feed whose page is split into tabs, each reachable by title or URL fragment."""

    def __init__(self, actions, data, already_parsed=False, **kwargs):
        super().__init__(actions, data, already_parsed, **kwargs)
        self._tabs: ObservedArray = self.page.contents_memo.get_type(Tab)

    @property
    def tabs(self) -> list[str]:
        return [tab.title for tab in self._tabs]

    @property
    def tab_urls(self) -> list[str]:
        return [url for url in (last_path_segment(tab.endpoint.metadata.url) for tab in self._tabs) if url]

    @property
    def title(self) -> str | None:
        selected = self._tabs.get(selected=True)
        return selected.title if selected else None

    def _find_tab_by_url(self, url: str) -> Tab | None:
        for tab in self._tabs:
            if last_path_segment(tab.endpoint.metadata.url) == url:
                return tab
        return None

    def has_tab_with_url(self, url: str) -> bool:
        return self._find_tab_by_url(url) is not None

    async def _open(self, tab: Tab) -> "TabbedFeed":
        if tab.selected:
            return self
        logger.debug("Opening tab %s", tab.title)
        response = await tab.endpoint.call(self.actions, parse=True)
        return TabbedFeed(self.actions, response, True)

    async def get_tab_by_name(self, title: str) -> "TabbedFeed":
        tab = next((tab for tab in self._tabs if tab.title.lower() == title.lower()), None)
        if tab is None:
            raise TabNotFoundError(f'Tab "{title}" not found', key=title, available=self.tabs)
        return await self._open(tab)

    async def get_tab_by_url(self, url: str) -> "TabbedFeed":
        """
        Select a tab by the last segment of its URL, e.g. ``videos``.

        Returns this feed when the tab is already selected, otherwise the
        feed of the freshly loaded tab.
        """
        tab = self._find_tab_by_url(url)
        if tab is None:
            raise TabNotFoundError(f'Tab "{url}" not found', key=url, available=self.tab_urls)
        return await self._open(tab)
