"""Account settings page."""

import logging
from dataclasses import dataclass

from tubefeed.core.actions import Actions, ApiResponse
from tubefeed.errors import (
    InvalidStructureError,
    OptionNotFoundError,
    SidebarItemNotFoundError,
    SidebarUnavailableError,
)
from tubefeed.parser import ObservedArray, ParsedResponse, parse_response
from tubefeed.parser.classes import (
    CompactLink,
    ItemSection,
    PageIntroduction,
    SectionList,
    SettingsOptions,
    SettingsSidebar,
    SettingsSwitch,
    Tab,
    TwoColumnBrowseResults,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsSection:
    title: str | None
    contents: ObservedArray


class Settings:
    """A settings page: a sidebar of sub-pages and sections of options."""

    def __init__(self, actions: Actions, response: ApiResponse):
        self._actions = actions
        self._page = parse_response(response.data)

        self.sidebar: SettingsSidebar | None = (
            self._page.sidebar.as_(SettingsSidebar) if self._page.sidebar else None
        )

        root = self._page.contents.item() if self._page.contents is not None else None
        browse = root.as_(TwoColumnBrowseResults) if root else None
        tab = browse.tabs.array().as_(Tab).get(selected=True) if browse and browse.tabs else None
        if tab is None:
            raise InvalidStructureError("Target tab not found")

        section_list = tab.content.as_(SectionList) if tab.content else None
        sections = section_list.contents.filter_type(ItemSection) if section_list else ObservedArray()

        # The first section only holds the page introduction
        self.introduction: PageIntroduction | None = (
            sections[0].contents.first_of_type(PageIntroduction) if sections else None
        )
        self.sections: list[SettingsSection] = [
            SettingsSection(
                title=str(section.header.title) if section.header else None,
                contents=section.contents,
            )
            for section in sections[1:]
        ]

    @property
    def page(self) -> ParsedResponse:
        return self._page

    async def select_sidebar_item(self, target_item: str | CompactLink) -> "Settings":
        """Open a page from the sidebar menu. Use ``sidebar_items`` to list them."""
        if self.sidebar is None:
            raise SidebarUnavailableError("Sidebar not available", key=str(target_item))

        if isinstance(target_item, str):
            item = self.sidebar.items.get(title=target_item)
            if item is None:
                raise SidebarItemNotFoundError(
                    f'Item "{target_item}" not found', key=target_item, available=self.sidebar_items
                )
        elif isinstance(target_item, CompactLink):
            item = target_item
        else:
            raise TypeError(f"Invalid item: {target_item!r}")

        logger.debug("Opening settings page %s", item.title)
        response = await item.endpoint.call(self._actions, parse=False)
        return Settings(self._actions, response)

    def _options(self):
        for section in self.sections:
            for el in section.contents:
                options = el.as_(SettingsOptions)
                if options is not None and options.options:
                    yield from options.options

    def get_setting_option(self, name: str) -> SettingsSwitch:
        """Find a switch by title. Use ``setting_options`` to list them."""
        for option in self._options():
            if isinstance(option, SettingsSwitch) and str(option.title) == name:
                return option
        raise OptionNotFoundError(f'Option "{name}" not found', key=name, available=self.setting_options)

    @property
    def setting_options(self) -> list[str]:
        titles = (str(option.title) for option in self._options() if hasattr(option, "title"))
        return [title for title in titles if title]

    @property
    def sidebar_items(self) -> list[str]:
        if self.sidebar is None:
            raise SidebarUnavailableError("Sidebar not available")
        return [item.title for item in self.sidebar.items]
