"""Typed, navigable parsing of InnerTube responses with feed pagination and filters."""

from tubefeed.client import Innertube
from tubefeed.core import Actions, ApiResponse, Feed, FilterableFeed, TabbedFeed
from tubefeed.errors import (
    FilterNotFoundError,
    InnertubeError,
    InvalidStructureError,
    NoContinuationError,
    NotFoundError,
    OptionNotFoundError,
    SidebarItemNotFoundError,
    SidebarUnavailableError,
    TabNotFoundError,
    TransportError,
    TypeMismatchError,
)
from tubefeed.parser import parse_response
from tubefeed.youtube import Channel, ChannelListContinuation, FilteredChannelList, Settings

__version__ = "0.1.0"

__all__ = [
    "Actions",
    "ApiResponse",
    "Channel",
    "ChannelListContinuation",
    "Feed",
    "FilterNotFoundError",
    "FilterableFeed",
    "FilteredChannelList",
    "InnertubeError",
    "Innertube",
    "InvalidStructureError",
    "NoContinuationError",
    "NotFoundError",
    "OptionNotFoundError",
    "Settings",
    "SidebarItemNotFoundError",
    "SidebarUnavailableError",
    "TabNotFoundError",
    "TabbedFeed",
    "TransportError",
    "TypeMismatchError",
    "parse_response",
]
