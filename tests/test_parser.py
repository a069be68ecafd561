"""Tests for the response parser, shape classification and endpoint descriptors."""

import asyncio

import pytest

from tubefeed.errors import InnertubeError, InvalidStructureError
from tubefeed.parser import Parser, YTNode, get_shape, parse_response, register_shape
from tubefeed.parser.classes import (
    C4TabbedHeader,
    ChannelMetadata,
    ChipCloudChip,
    ContinuationItem,
    MicroformatData,
    NavigationEndpoint,
    SubscribeButton,
    Tab,
    Text,
    Thumbnail,
)
from tubefeed.utils import last_path_segment, sanitize_shape_key
from tests import responses


class TestClassification:
    def test_sanitize_shape_key(self):
        assert sanitize_shape_key("tabRenderer") == "Tab"
        assert sanitize_shape_key("appendContinuationItemsAction") == "AppendContinuationItemsAction"
        assert sanitize_shape_key("c4TabbedHeaderRenderer") == "C4TabbedHeader"

    def test_unknown_shapes_are_skipped(self):
        parser = Parser()
        items = parser.parse_array([{"somethingNewRenderer": {"a": 1}}, responses.chip("All"), "junk", {}])

        assert [item.type for item in items] == ["ChipCloudChip"]
        assert set(parser.memo) == {"ChipCloudChip"}

    def test_valid_types_restrict_classification(self):
        parser = Parser()
        assert parser.parse_item(responses.chip("All"), Tab) is None
        assert parser.memo.get_type(ChipCloudChip) == []

    def test_registered_shape_is_parsed(self):
        @register_shape
        class TestBadge(YTNode):
            type = "TestBadge"

            def __init__(self, data, parser):
                self.label = data.get("label")

        node = Parser().parse_item({"testBadgeRenderer": {"label": "LIVE"}})
        assert get_shape("TestBadge") is TestBadge
        assert node.label == "LIVE"

    def test_parse_array_rejects_non_lists(self):
        with pytest.raises(TypeError):
            Parser().parse_array({"tabRenderer": {}})


class TestParseResponse:
    def test_regions_get_their_own_memo(self):
        page = parse_response(responses.channel_response())

        assert isinstance(page.header.item(), C4TabbedHeader)
        assert page.header_memo.get_type(SubscribeButton)
        assert not page.contents_memo.get_type(SubscribeButton)
        assert len(page.contents_memo.get_type(ChipCloudChip)) == 3
        assert isinstance(page.metadata.item(), ChannelMetadata)
        assert isinstance(page.microformat, MicroformatData)

    def test_continuation_page(self):
        page = parse_response(responses.append_response(["v1"], next_token="next"))

        assert page.contents is None
        assert len(page.on_response_received_actions) == 1
        assert page.on_response_received_actions_memo.get_type(ContinuationItem)

    def test_degraded_response_is_accepted(self):
        page = parse_response({"metadata": {"channelMetadataRenderer": {"title": "Only metadata"}}})
        assert page.contents is None
        assert page.contents_memo.get_type(Tab) == []
        assert page.metadata.item().title == "Only metadata"

    def test_no_anchor_is_invalid(self):
        with pytest.raises(InvalidStructureError) as exc_info:
            parse_response({"responseContext": {}, "trackingParams": "x"})
        assert exc_info.value.info["keys"] == ["responseContext", "trackingParams"]

    def test_non_object_is_invalid(self):
        with pytest.raises(InvalidStructureError):
            parse_response(["not", "an", "object"])

    def test_parsed_response_is_frozen(self):
        page = parse_response(responses.append_response(["v1"]))
        with pytest.raises(AttributeError):
            page.contents = None

    def test_microformat_is_memoized(self):
        page = parse_response(responses.channel_response())

        assert page.microformat.tag_names == ["testing", "python"]
        assert page.header_memo.get_type(MicroformatData) == []

    def test_field_named_like_a_node_method_does_not_break_the_memo(self):
        @register_shape
        class TestLabelled(YTNode):
            type = "TestLabelled"

            def __init__(self, data, parser):
                self.tags = data.get("tags") or []

        parser = Parser()
        node = parser.parse_item({"testLabelledRenderer": {"tags": ["a", "b"]}})

        assert node.tags == ["a", "b"]
        assert parser.memo.get_type(TestLabelled) == [node]

    def test_region_memos_are_read_only(self):
        page = parse_response(responses.channel_response())
        memo = page.contents_memo

        assert memo.frozen
        assert isinstance(memo["ChipCloudChip"], tuple)
        with pytest.raises(TypeError):
            memo["ChipCloudChip"] = []
        with pytest.raises(TypeError):
            memo.pop("ChipCloudChip")
        with pytest.raises(TypeError):
            memo.add(memo["ChipCloudChip"][0])
        assert len(memo.get_type(ChipCloudChip)) == 3


class TestNullFields:
    def test_tab_with_null_command_metadata(self):
        page = parse_response(
            {
                "contents": {
                    "tabRenderer": {
                        "title": "Videos",
                        "selected": True,
                        "endpoint": {
                            "commandMetadata": None,
                            "browseEndpoint": {"browseId": responses.CHANNEL_ID, "params": "tab-videos"},
                        },
                    }
                }
            }
        )

        tab = page.contents.item()
        assert isinstance(tab, Tab)
        assert tab.endpoint.metadata.url is None
        assert tab.endpoint.api_path == "/browse"

    def test_null_web_command_metadata(self):
        endpoint = NavigationEndpoint(
            {"commandMetadata": {"webCommandMetadata": None}, "continuationCommand": {"token": "tok"}}
        )
        assert endpoint.api_path == "/browse"
        assert endpoint.build_payload() == {"continuation": "tok"}

    def test_continuation_item_with_null_button(self):
        item = Parser().parse_item({"continuationItemRenderer": {"trigger": "X", "button": None}})

        assert isinstance(item, ContinuationItem)
        assert item.endpoint.is_empty

    def test_page_introduction_with_null_icon(self):
        node = Parser().parse_item(
            {"pageIntroductionRenderer": {"headerText": {"simpleText": "Hi"}, "headerIcon": None}}
        )

        assert node.header_text == "Hi"
        assert node.header_icon_type is None


class TestNavigationEndpoint:
    def test_browse_endpoint(self):
        endpoint = NavigationEndpoint(responses.browse_endpoint("/@testchannel/videos", params="tab-videos"))

        assert endpoint.name == "browseEndpoint"
        assert endpoint.api_path == "/browse"
        assert endpoint.metadata.url == "/@testchannel/videos"
        assert endpoint.build_payload() == {"browseId": responses.CHANNEL_ID, "params": "tab-videos"}
        assert endpoint.build_payload(query="python")["query"] == "python"

    def test_continuation_command(self):
        endpoint = NavigationEndpoint(responses.continuation_endpoint("tok"))

        assert endpoint.name == "continuationCommand"
        assert endpoint.api_path == "/browse"
        assert endpoint.build_payload() == {"continuation": "tok"}

    def test_continuation_without_api_url_uses_request_type(self):
        endpoint = NavigationEndpoint(
            {"continuationCommand": {"token": "tok", "request": "CONTINUATION_REQUEST_TYPE_SEARCH"}}
        )
        assert endpoint.api_path == "/search"

    def test_calling_an_endpoint_without_target_fails(self, fake_actions):
        endpoint = NavigationEndpoint({"setSettingEndpoint": {"settingItemId": "1"}})
        with pytest.raises(InnertubeError):
            asyncio.run(endpoint.call(fake_actions))
        assert fake_actions.calls == []


class TestValues:
    def test_text_forms(self):
        assert str(Text({"simpleText": "Hello"})) == "Hello"
        assert str(Text({"runs": [{"text": "Hel"}, {"text": "lo"}]})) == "Hello"
        assert str(Text({"content": "Hello"})) == "Hello"
        assert str(Text(None)) == ""
        assert Text(None).is_empty()

    def test_thumbnails_widest_first(self):
        thumbs = Thumbnail.from_response(
            {"thumbnails": [{"url": "a", "width": 10}, {"url": "b", "width": 30}, {"width": 50}]}
        )
        assert [t.url for t in thumbs] == ["b", "a"]

    def test_last_path_segment(self):
        assert last_path_segment("/@chan/videos") == "videos"
        assert last_path_segment("/@chan/videos/?view=0") == "videos"
        assert last_path_segment(None) is None
