"""Filter chips."""

from tubefeed.parser.classes.misc import Text
from tubefeed.parser.classes.navigation_endpoint import NavigationEndpoint
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class ChipCloudChip(YTNode):
    type = "ChipCloudChip"

    def __init__(self, data, parser):
        self.text = str(Text(data.get("text")))
        self.is_selected = bool(data.get("isSelected", False))
        raw_endpoint = data.get("navigationEndpoint")
        self.endpoint = NavigationEndpoint(raw_endpoint) if raw_endpoint else None

    def __repr__(self) -> str:
        return f"<ChipCloudChip {self.text!r}{' selected' if self.is_selected else ''}>"


@register_shape
class FeedFilterChipBar(YTNode):
    type = "FeedFilterChipBar"

    def __init__(self, data, parser):
        self.contents = parser.parse_array(data.get("contents"), ChipCloudChip)
        self.style = data.get("styleType")
