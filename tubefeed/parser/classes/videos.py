"""Video items listed by feeds."""

from tubefeed.parser.classes.misc import Text, Thumbnail
from tubefeed.parser.classes.navigation_endpoint import NavigationEndpoint
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class Video(YTNode):
    type = "Video"

    def __init__(self, data, parser):
        self.id = data.get("videoId")
        self.title = Text(data.get("title"))
        self.description_snippet = Text(data.get("descriptionSnippet"))
        self.thumbnails = Thumbnail.from_response(data.get("thumbnail"))
        self.published = Text(data.get("publishedTimeText"))
        self.view_count = Text(data.get("viewCountText"))
        self.short_view_count = Text(data.get("shortViewCountText"))
        self.duration = Text(data.get("lengthText"))
        self.endpoint = NavigationEndpoint(data.get("navigationEndpoint"))


@register_shape
class GridVideo(Video):
    """Grid variant of a video; also filed under ``Video``."""

    type = "GridVideo"
