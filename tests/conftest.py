"""Shared fixtures for the tubefeed test suite."""

import pytest

from tubefeed.core.actions import ApiResponse
from tubefeed.parser import parse_response
from tests import responses


class FakeActions:
    """
    Stands in for the transport: answers every call from a table of raw responses.

    Responses are keyed by continuation token, then by search query
    (``search:<query>``), then by browse params, then by browse id.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    @staticmethod
    def route_key(payload):
        if "continuation" in payload:
            return payload["continuation"]
        if "query" in payload:
            return f"search:{payload['query']}"
        return payload.get("params") or payload.get("browseId")

    async def execute(self, path, payload=None, parse=False):
        payload = payload or {}
        self.calls.append((path, payload))
        data = self.routes[self.route_key(payload)]
        if parse:
            return parse_response(data)
        return ApiResponse(success=True, status_code=200, data=data)


@pytest.fixture
def fake_actions():
    return FakeActions()


@pytest.fixture
def channel_actions():
    """Actions serving a channel's tabs, filters and continuation pages."""
    chips = ["All", "Videos", "Shorts"]
    return FakeActions(
        {
            "tab-featured": responses.channel_response(selected="featured"),
            "tab-videos": responses.channel_response(selected="videos"),
            "tab-about": responses.channel_response(selected="about"),
            "search:python": responses.channel_response(selected="videos", video_ids=("s1",)),
            "videos-page-2": responses.append_response(["v3", "v4"], next_token="videos-page-3"),
            "videos-page-3": responses.append_response(["v5"]),
            "filter-all": responses.filtered_response(chips, "All", ["v1", "v2"], next_token="videos-page-2"),
            "filter-videos": responses.filtered_response(chips, "Videos", ["v1"], next_token="videos-page-2"),
            "filter-shorts": responses.filtered_response(
                chips, "Shorts", ["sh1", "sh2"], next_token="shorts-page-2"
            ),
            "shorts-page-2": responses.append_response(["sh3"], next_token="shorts-page-3"),
            "shorts-page-3": responses.append_response(["sh4"]),
        }
    )


@pytest.fixture
def channel_raw():
    return responses.channel_response(selected="videos")
