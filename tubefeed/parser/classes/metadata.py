"""Channel metadata blocks."""

from tubefeed.parser.classes.misc import Text, Thumbnail
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class ChannelMetadata(YTNode):
    type = "ChannelMetadata"

    def __init__(self, data, parser):
        self.title = data.get("title")
        self.description = data.get("description")
        self.url = data.get("channelUrl")
        self.rss_url = data.get("rssUrl")
        self.vanity_channel_url = data.get("vanityChannelUrl")
        self.external_id = data.get("externalId")
        self.is_family_safe = data.get("isFamilySafe")
        self.keywords = [k for k in (data.get("keywords") or "").split(" ") if k]
        self.avatar = Thumbnail.from_response(data.get("avatar"))
        self.available_countries = data.get("availableCountryCodes") or []


@register_shape
class MicroformatData(YTNode):
    type = "MicroformatData"

    def __init__(self, data, parser):
        self.url_canonical = data.get("urlCanonical")
        self.title = data.get("title")
        self.description = data.get("description")
        self.thumbnail = Thumbnail.from_response(data.get("thumbnail"))
        self.site_name = data.get("siteName")
        self.app_name = data.get("appName")
        self.og_type = data.get("ogType")
        self.tag_names = data.get("tags") or []
        self.family_safe = data.get("familySafe")
        self.noindex = data.get("noindex")
        self.unlisted = data.get("unlisted")


@register_shape
class ChannelAboutFullMetadata(YTNode):
    type = "ChannelAboutFullMetadata"

    def __init__(self, data, parser):
        self.id = data.get("channelId")
        self.name = Text(data.get("title"))
        self.description = Text(data.get("description"))
        self.views = Text(data.get("viewCountText"))
        self.joined = Text(data.get("joinedDateText"))
        self.country = Text(data.get("country"))
        self.canonical_channel_url = data.get("canonicalChannelUrl")
        self.avatar = Thumbnail.from_response(data.get("avatar"))
