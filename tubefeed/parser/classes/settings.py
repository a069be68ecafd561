"""Account settings page shapes."""

from tubefeed.parser.classes.misc import Text, Thumbnail
from tubefeed.parser.classes.navigation_endpoint import NavigationEndpoint
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class CompactLink(YTNode):
    type = "CompactLink"

    def __init__(self, data, parser):
        self.title = str(Text(data.get("title")))
        self.endpoint = NavigationEndpoint(data.get("navigationEndpoint") or data.get("serviceEndpoint"))
        self.style = data.get("style")


@register_shape
class SettingsSidebar(YTNode):
    type = "SettingsSidebar"

    def __init__(self, data, parser):
        self.title = Text(data.get("title"))
        self.items = parser.parse_array(data.get("items"), CompactLink)


@register_shape
class PageIntroduction(YTNode):
    type = "PageIntroduction"

    def __init__(self, data, parser):
        self.header_text = str(Text(data.get("headerText")))
        self.body_text = str(Text(data.get("bodyText")))
        self.page_title = str(Text(data.get("pageTitle")))
        self.header_icon_type = (data.get("headerIcon") or {}).get("iconType")
        self.image = Thumbnail.from_response(data.get("image"))


@register_shape
class SettingsSwitch(YTNode):
    type = "SettingsSwitch"

    def __init__(self, data, parser):
        self.title = Text(data.get("title"))
        self.subtitle = Text(data.get("subtitle"))
        self.enabled = bool(data.get("enabled", False))
        self.enable_endpoint = NavigationEndpoint(data.get("enableServiceEndpoint"))
        self.disable_endpoint = NavigationEndpoint(data.get("disableServiceEndpoint"))
        self.item_id = data.get("itemId")


@register_shape
class SettingsOptions(YTNode):
    type = "SettingsOptions"

    def __init__(self, data, parser):
        self.title = Text(data.get("title"))
        self.text = str(Text(data.get("text"))) or None
        self.options = parser.parse_array(data.get("options")) if "options" in data else None
