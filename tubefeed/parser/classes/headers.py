"""Channel page headers and the subscribe button they carry."""

from tubefeed.parser.classes.misc import Text, Thumbnail
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class SubscribeButton(YTNode):
    type = "SubscribeButton"

    def __init__(self, data, parser):
        self.title = Text(data.get("buttonText"))
        self.subscribed = bool(data.get("subscribed", False))
        self.enabled = bool(data.get("enabled", True))
        self.channel_id = data.get("channelId")
        self.subscribed_text = Text(data.get("subscribedButtonText"))
        self.unsubscribed_text = Text(data.get("unsubscribedButtonText"))


@register_shape
class C4TabbedHeader(YTNode):
    type = "C4TabbedHeader"

    def __init__(self, data, parser):
        self.channel_id = data.get("channelId")
        self.title = data.get("title")
        self.avatar = Thumbnail.from_response(data.get("avatar"))
        self.banner = Thumbnail.from_response(data.get("banner"))
        self.subscribers = Text(data.get("subscriberCountText"))
        self.videos_count = Text(data.get("videosCountText"))
        self.channel_handle = Text(data.get("channelHandleText"))
        self.subscribe_button = parser.parse_item(data.get("subscribeButton"), SubscribeButton)


@register_shape
class CarouselHeader(YTNode):
    type = "CarouselHeader"

    def __init__(self, data, parser):
        self.contents = parser.parse_array(data.get("contents"))


@register_shape
class InteractiveTabbedHeader(YTNode):
    type = "InteractiveTabbedHeader"

    def __init__(self, data, parser):
        self.title = Text(data.get("title"))
        self.description = Text(data.get("description"))
        self.metadata = Text(data.get("metadata"))
        self.banner = Thumbnail.from_response(data.get("banner"))
        self.box_art = Thumbnail.from_response(data.get("boxArt"))
        self.buttons = parser.parse_array(data.get("buttons"))
