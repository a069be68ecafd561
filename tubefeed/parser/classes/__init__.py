"""Shape catalog. Importing this package registers every shape below."""

from tubefeed.parser.classes.chips import ChipCloudChip, FeedFilterChipBar
from tubefeed.parser.classes.continuations import (
    AppendContinuationItemsAction,
    ContinuationAction,
    ContinuationItem,
    ReloadContinuationItemsCommand,
)
from tubefeed.parser.classes.headers import (
    C4TabbedHeader,
    CarouselHeader,
    InteractiveTabbedHeader,
    SubscribeButton,
)
from tubefeed.parser.classes.metadata import ChannelAboutFullMetadata, ChannelMetadata, MicroformatData
from tubefeed.parser.classes.misc import Text, Thumbnail
from tubefeed.parser.classes.navigation_endpoint import EndpointMetadata, NavigationEndpoint
from tubefeed.parser.classes.settings import (
    CompactLink,
    PageIntroduction,
    SettingsOptions,
    SettingsSidebar,
    SettingsSwitch,
)
from tubefeed.parser.classes.tabs import (
    ExpandableTab,
    Grid,
    ItemSection,
    ItemSectionHeader,
    RichGrid,
    RichItem,
    SectionList,
    Tab,
    TwoColumnBrowseResults,
)
from tubefeed.parser.classes.videos import GridVideo, Video

__all__ = [
    "AppendContinuationItemsAction",
    "C4TabbedHeader",
    "CarouselHeader",
    "ChannelAboutFullMetadata",
    "ChannelMetadata",
    "ChipCloudChip",
    "CompactLink",
    "ContinuationAction",
    "ContinuationItem",
    "EndpointMetadata",
    "ExpandableTab",
    "FeedFilterChipBar",
    "Grid",
    "GridVideo",
    "InteractiveTabbedHeader",
    "ItemSection",
    "ItemSectionHeader",
    "MicroformatData",
    "NavigationEndpoint",
    "PageIntroduction",
    "ReloadContinuationItemsCommand",
    "RichGrid",
    "RichItem",
    "SectionList",
    "SettingsOptions",
    "SettingsSidebar",
    "SettingsSwitch",
    "SubscribeButton",
    "Tab",
    "Text",
    "Thumbnail",
    "TwoColumnBrowseResults",
    "Video",
]
