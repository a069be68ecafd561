from tubefeed.youtube.channel import Channel, ChannelListContinuation, FilteredChannelList
from tubefeed.youtube.settings import Settings, SettingsSection

__all__ = ["Channel", "ChannelListContinuation", "FilteredChannelList", "Settings", "SettingsSection"]
