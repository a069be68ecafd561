from tubefeed.core.actions import Actions, ApiResponse
from tubefeed.core.feed import Feed
from tubefeed.core.filterable_feed import FilterableFeed
from tubefeed.core.tabbed_feed import TabbedFeed

__all__ = ["Actions", "ApiResponse", "Feed", "FilterableFeed", "TabbedFeed"]
