"""Browse layout shapes: tab containers, tabs and the lists inside them."""

from tubefeed.parser.classes.misc import Text
from tubefeed.parser.classes.navigation_endpoint import NavigationEndpoint
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class Tab(YTNode):
    type = "Tab"

    def __init__(self, data, parser):
        self.title = str(Text(data.get("title"))) or "N/A"
        self.selected = bool(data.get("selected", False))
        self.endpoint = NavigationEndpoint(data.get("endpoint"))
        self.content = parser.parse_item(data.get("content"))


@register_shape
class ExpandableTab(YTNode):
    """The channel search box, rendered as a tab that expands into a text field."""

    type = "ExpandableTab"

    def __init__(self, data, parser):
        self.title = str(Text(data.get("title"))) or "N/A"
        self.selected = bool(data.get("selected", False))
        self.endpoint = NavigationEndpoint(data.get("endpoint"))
        self.content = parser.parse_item(data.get("content"))


@register_shape
class TwoColumnBrowseResults(YTNode):
    type = "TwoColumnBrowseResults"

    def __init__(self, data, parser):
        self.tabs = parser.parse(data.get("tabs"), Tab, ExpandableTab)
        self.secondary_contents = parser.parse(data.get("secondaryContents"))


@register_shape
class SectionList(YTNode):
    type = "SectionList"

    def __init__(self, data, parser):
        self.target_id = data.get("targetId")
        self.contents = parser.parse_array(data.get("contents"))
        self.header = parser.parse_item(data.get("header"))


@register_shape
class ItemSectionHeader(YTNode):
    type = "ItemSectionHeader"

    def __init__(self, data, parser):
        self.title = Text(data.get("title"))


@register_shape
class ItemSection(YTNode):
    type = "ItemSection"

    def __init__(self, data, parser):
        self.header = parser.parse_item(data.get("header"), ItemSectionHeader)
        self.contents = parser.parse_array(data.get("contents"))
        self.target_id = data.get("targetId") or data.get("sectionIdentifier")


@register_shape
class RichGrid(YTNode):
    type = "RichGrid"

    def __init__(self, data, parser):
        # The filter chip bar of a channel tab lives in the grid header
        self.header = parser.parse_item(data.get("header"))
        self.contents = parser.parse_array(data.get("contents"))
        self.target_id = data.get("targetId")


@register_shape
class RichItem(YTNode):
    type = "RichItem"

    def __init__(self, data, parser):
        self.content = parser.parse_item(data.get("content"))


@register_shape
class Grid(YTNode):
    type = "Grid"

    def __init__(self, data, parser):
        self.items = parser.parse_array(data.get("items"))
        self.target_id = data.get("targetId")
