"""Builders for raw InnerTube-shaped responses used across the test suite."""

CHANNEL_ID = "UCtestchannel000000000000"


def browse_endpoint(url, params=None, browse_id=CHANNEL_ID):
    browse = {"browseId": browse_id}
    if params:
        browse["params"] = params
    return {
        "clickTrackingParams": "CAAQ",
        "commandMetadata": {
            "webCommandMetadata": {
                "url": url,
                "webPageType": "WEB_PAGE_TYPE_CHANNEL",
                "apiUrl": "/youtubei/v1/browse",
            }
        },
        "browseEndpoint": browse,
    }


def continuation_endpoint(token):
    return {
        "clickTrackingParams": "CBAQ",
        "commandMetadata": {"webCommandMetadata": {"sendPost": True, "apiUrl": "/youtubei/v1/browse"}},
        "continuationCommand": {"token": token, "request": "CONTINUATION_REQUEST_TYPE_BROWSE"},
    }


def continuation_item(token):
    return {
        "continuationItemRenderer": {
            "trigger": "CONTINUATION_TRIGGER_ON_ITEM_SHOWN",
            "continuationEndpoint": continuation_endpoint(token),
        }
    }


def video(video_id, title=None):
    return {
        "richItemRenderer": {
            "content": {
                "videoRenderer": {
                    "videoId": video_id,
                    "title": {"runs": [{"text": title or f"Video {video_id}"}]},
                    "publishedTimeText": {"simpleText": "2 days ago"},
                    "shortViewCountText": {"simpleText": "1K views"},
                    "lengthText": {"simpleText": "3:45"},
                    "thumbnail": {
                        "thumbnails": [
                            {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg", "width": 120, "height": 90},
                            {"url": f"https://i.ytimg.com/vi/{video_id}/hq.jpg", "width": 480, "height": 360},
                        ]
                    },
                }
            }
        }
    }


def chip(text, selected=False):
    return {
        "chipCloudChipRenderer": {
            "text": {"simpleText": text},
            "isSelected": selected,
            "navigationEndpoint": continuation_endpoint(f"filter-{text.lower()}"),
        }
    }


def chip_bar(texts, selected=None):
    selected = selected if selected is not None else texts[0]
    return {
        "feedFilterChipBarRenderer": {
            "contents": [chip(text, text == selected) for text in texts],
            "styleType": "FEED_FILTER_CHIP_BAR_STYLE_TYPE_CHANNEL_PAGE_GRID",
        }
    }


def rich_grid(video_ids, chips=None, next_token=None):
    contents = [video(video_id) for video_id in video_ids]
    if next_token:
        contents.append(continuation_item(next_token))
    grid = {"contents": contents, "targetId": "browse-feed-videos"}
    if chips:
        grid["header"] = chip_bar(chips)
    return {"richGridRenderer": grid}


def tab(title, fragment, selected=False, content=None):
    body = {
        "endpoint": browse_endpoint(f"/@testchannel/{fragment}", params=f"tab-{fragment}"),
        "title": title,
        "selected": selected,
    }
    if content is not None:
        body["content"] = content
    return {"tabRenderer": body}


def search_tab():
    return {
        "expandableTabRenderer": {
            "endpoint": browse_endpoint("/@testchannel/search", params="tab-search"),
            "title": "Search",
            "selected": False,
        }
    }


def about_content():
    return {
        "sectionListRenderer": {
            "contents": [
                {
                    "itemSectionRenderer": {
                        "contents": [
                            {
                                "channelAboutFullMetadataRenderer": {
                                    "channelId": CHANNEL_ID,
                                    "title": {"simpleText": "Test Channel"},
                                    "description": {"simpleText": "All about testing."},
                                    "viewCountText": {"simpleText": "1,234 views"},
                                    "joinedDateText": {"runs": [{"text": "Joined "}, {"text": "Jan 1, 2015"}]},
                                    "country": {"simpleText": "Germany"},
                                }
                            }
                        ]
                    }
                }
            ]
        }
    }


def channel_response(
    selected="videos",
    video_ids=("v1", "v2"),
    chips=("All", "Videos", "Shorts"),
    next_token="videos-page-2",
    with_metadata=True,
    with_search=True,
):
    """A channel browse response with the ``selected`` tab populated."""
    contents_by_fragment = {
        "featured": {"sectionListRenderer": {"contents": []}},
        "videos": rich_grid(video_ids, chips=chips, next_token=next_token),
        "about": about_content(),
    }
    tabs = [
        tab("Home", "featured", selected == "featured", contents_by_fragment["featured"] if selected == "featured" else None),
        tab("Videos", "videos", selected == "videos", contents_by_fragment["videos"] if selected == "videos" else None),
        tab("About", "about", selected == "about", contents_by_fragment["about"] if selected == "about" else None),
    ]
    if with_search:
        tabs.append(search_tab())

    response = {
        "responseContext": {"visitorData": "abc"},
        "contents": {"twoColumnBrowseResultsRenderer": {"tabs": tabs}},
        "header": {
            "c4TabbedHeaderRenderer": {
                "channelId": CHANNEL_ID,
                "title": "Test Channel",
                "subscriberCountText": {"simpleText": "1.2M subscribers"},
                "channelHandleText": {"runs": [{"text": "@testchannel"}]},
                "subscribeButton": {
                    "subscribeButtonRenderer": {
                        "buttonText": {"runs": [{"text": "Subscribe"}]},
                        "subscribed": False,
                        "enabled": True,
                        "channelId": CHANNEL_ID,
                    }
                },
            }
        },
    }
    if with_metadata:
        response["metadata"] = {
            "channelMetadataRenderer": {
                "title": "Test Channel",
                "description": "A channel for tests.",
                "externalId": CHANNEL_ID,
                "channelUrl": f"https://www.youtube.com/channel/{CHANNEL_ID}",
                "vanityChannelUrl": "http://www.youtube.com/@testchannel",
                "keywords": "testing python",
                "isFamilySafe": True,
            }
        }
        response["microformat"] = {
            "microformatDataRenderer": {
                "urlCanonical": f"https://www.youtube.com/channel/{CHANNEL_ID}",
                "title": "Test Channel",
                "tags": ["testing", "python"],
                "familySafe": True,
            }
        }
    return response


def filtered_response(chips, selected, video_ids, next_token=None):
    """Response to a chip click: a filter bar refresh followed by the list itself."""
    body = [video(video_id) for video_id in video_ids]
    if next_token:
        body.append(continuation_item(next_token))
    return {
        "responseContext": {},
        "onResponseReceivedActions": [
            {
                "reloadContinuationItemsCommand": {
                    "targetId": "browse-feed-filters",
                    "continuationItems": [chip_bar(list(chips), selected)],
                    "slot": "RELOAD_CONTINUATION_SLOT_HEADER",
                }
            },
            {
                "reloadContinuationItemsCommand": {
                    "targetId": "browse-feed-videos",
                    "continuationItems": body,
                    "slot": "RELOAD_CONTINUATION_SLOT_BODY",
                }
            },
        ],
    }


def append_response(video_ids, next_token=None):
    """A plain continuation page. Carries no filter bar."""
    items = [video(video_id) for video_id in video_ids]
    if next_token:
        items.append(continuation_item(next_token))
    return {
        "responseContext": {},
        "onResponseReceivedActions": [
            {
                "appendContinuationItemsAction": {
                    "continuationItems": items,
                    "targetId": "browse-feed-videos",
                }
            }
        ],
    }


def settings_switch(title, enabled=False):
    return {
        "settingsSwitchRenderer": {
            "title": {"runs": [{"text": title}]},
            "subtitle": {"simpleText": f"{title} subtitle"},
            "enabled": enabled,
            "enableServiceEndpoint": {"setSettingEndpoint": {"settingItemId": "1", "boolValue": True}},
            "disableServiceEndpoint": {"setSettingEndpoint": {"settingItemId": "1", "boolValue": False}},
            "itemId": title.lower().replace(" ", "_"),
        }
    }


def compact_link(title, browse_id):
    return {
        "compactLinkRenderer": {
            "title": {"simpleText": title},
            "navigationEndpoint": {
                "commandMetadata": {
                    "webCommandMetadata": {"url": f"/account_{browse_id}", "apiUrl": "/youtubei/v1/browse"}
                },
                "browseEndpoint": {"browseId": browse_id},
            },
        }
    }


def settings_response(intro="Account", with_sidebar=True, selected=True):
    sections = [
        {
            "itemSectionRenderer": {
                "contents": [
                    {
                        "pageIntroductionRenderer": {
                            "headerText": {"simpleText": intro},
                            "bodyText": {"simpleText": "Choose how you appear."},
                            "pageTitle": {"simpleText": intro},
                        }
                    }
                ]
            }
        },
        {
            "itemSectionRenderer": {
                "header": {"itemSectionHeaderRenderer": {"title": {"simpleText": "Notifications"}}},
                "contents": [
                    {
                        "settingsOptionsRenderer": {
                            "title": {"simpleText": "Your preferences"},
                            "options": [
                                settings_switch("Subscriptions", enabled=True),
                                settings_switch("Recommended videos"),
                            ],
                        }
                    }
                ],
            }
        },
        {
            "itemSectionRenderer": {
                "header": {"itemSectionHeaderRenderer": {"title": {"simpleText": "Info"}}},
                "contents": [{"settingsOptionsRenderer": {"text": {"simpleText": "Just text, no options"}}}],
            }
        },
    ]
    response = {
        "responseContext": {},
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "selected": selected,
                            "content": {"sectionListRenderer": {"contents": sections}},
                        }
                    }
                ]
            }
        },
    }
    if with_sidebar:
        response["sidebar"] = {
            "settingsSidebarRenderer": {
                "title": {"simpleText": "Settings"},
                "items": [
                    compact_link("Account", "SPaccount_overview"),
                    compact_link("Notifications", "SPaccount_notifications"),
                ],
            }
        }
    return response
