"""Continuation items and the actions that deliver continuation pages."""

from tubefeed.parser.classes.navigation_endpoint import NavigationEndpoint
from tubefeed.parser.helpers import YTNode
from tubefeed.parser.parser import register_shape


@register_shape
class ContinuationItem(YTNode):
    """Marker at the end of a list: more items can be fetched through ``endpoint``."""

    type = "ContinuationItem"

    def __init__(self, data, parser):
        self.trigger = data.get("trigger")
        raw_endpoint = data.get("continuationEndpoint")
        if raw_endpoint is None:
            # "Show more" variant keeps the command on its button
            raw_endpoint = ((data.get("button") or {}).get("buttonRenderer") or {}).get("command")
        self.endpoint = NavigationEndpoint(raw_endpoint)


class ContinuationAction(YTNode):
    """Lineage tag shared by both ways a continuation page delivers its items."""

    type = "ContinuationAction"

    def __init__(self, data, parser):
        self.target_id = data.get("targetId")
        self.contents = parser.parse_array(data.get("continuationItems"))


@register_shape
class AppendContinuationItemsAction(ContinuationAction):
    type = "AppendContinuationItemsAction"


@register_shape
class ReloadContinuationItemsCommand(ContinuationAction):
    type = "ReloadContinuationItemsCommand"

    def __init__(self, data, parser):
        super().__init__(data, parser)
        self.slot = data.get("slot")
