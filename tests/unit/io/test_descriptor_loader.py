"""Unit tests for HttpDescriptorLoader using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from connect_to_forge.exceptions import DescriptorDownloadError, DescriptorParseError
from connect_to_forge.io.descriptor_loader import HttpDescriptorLoader

URL = "https://app.example.com/atlassian-connect.json"


def loader_for(handler) -> HttpDescriptorLoader:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpDescriptorLoader(client=client)


class TestFetch:
    def test_valid_descriptor(self) -> None:
        body = {"key": "abc", "baseUrl": "https://x", "scopes": ["READ"]}

        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == URL
            return httpx.Response(200, json=body)

        descriptor = loader_for(handler).fetch(URL)
        assert descriptor.key == "abc"
        assert descriptor.scopes == ["READ"]

    def test_http_error_status(self) -> None:
        loader = loader_for(lambda request: httpx.Response(404, text="nope"))
        with pytest.raises(DescriptorDownloadError) as exc_info:
            loader.fetch(URL)
        assert exc_info.value.context["status_code"] == 404
        assert "publicly reachable" in exc_info.value.get_recovery_hint()

    def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DescriptorDownloadError) as exc_info:
            loader_for(handler).fetch(URL)
        assert "status_code" not in exc_info.value.context

    def test_invalid_json(self) -> None:
        loader = loader_for(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(DescriptorParseError):
            loader.fetch(URL)

    def test_json_array(self) -> None:
        loader = loader_for(lambda request: httpx.Response(200, text=json.dumps([1])))
        with pytest.raises(DescriptorParseError, match="JSON object"):
            loader.fetch(URL)

    def test_missing_required_field(self) -> None:
        loader = loader_for(lambda request: httpx.Response(200, json={"key": "abc"}))
        with pytest.raises(DescriptorParseError) as exc_info:
            loader.fetch(URL)
        assert exc_info.value.context["field_name"] == "baseUrl"
