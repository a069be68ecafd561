"""Filter chip capability."""

import logging

from tubefeed.core.feed import Feed
from tubefeed.errors import FilterNotFoundError, InnertubeError
from tubefeed.parser import ObservedArray
from tubefeed.parser.classes import ChipCloudChip, FeedFilterChipBar

logger = logging.getLogger(__name__)


class FilterableFeed(Feed):
    """Feed with a filter chip bar."""

    @property
    def filter_chips(self) -> ObservedArray:
        return self.memo.get_type(ChipCloudChip)

    @property
    def filters(self) -> list[str]:
        return [chip.text for chip in self.filter_chips]

    @property
    def applied_filter(self) -> ChipCloudChip | None:
        return self.filter_chips.get(is_selected=True)

    def filter_seed(self) -> dict[str, ObservedArray]:
        """Filter context of this page, for continuation pages that come without it."""
        return {
            FeedFilterChipBar.type: self.memo.get_type(FeedFilterChipBar),
            ChipCloudChip.type: self.memo.get_type(ChipCloudChip),
        }

    def resolve_filter(self, target: str | ChipCloudChip) -> ChipCloudChip:
        if isinstance(target, ChipCloudChip):
            return target
        if not isinstance(target, str):
            raise TypeError(f"Filter must be a str or ChipCloudChip, got {type(target).__name__}")
        chip = self.filter_chips.get(text=target)
        if chip is None:
            raise FilterNotFoundError(f"Filter {target} not found", key=target, available=self.filters)
        return chip

    async def get_filtered_feed(self, target: str | ChipCloudChip) -> Feed:
        chip = self.resolve_filter(target)
        if chip.endpoint is None:
            raise InnertubeError(f"Filter {chip.text} has no endpoint", {"filter": chip.text})
        logger.debug("Applying filter %s", chip.text)
        response = await chip.endpoint.call(self.actions, parse=True)
        return Feed(self.actions, response, True)

    async def apply_filter(self, target: str | ChipCloudChip) -> "FilterableFeed":
        feed = await self.get_filtered_feed(target)
        return FilterableFeed(self.actions, feed.page, True)

    async def get_continuation(self) -> "FilterableFeed":
        page = await self.get_continuation_data()
        return FilterableFeed(self.actions, page, True, seed=self.filter_seed())
