"""Unit tests for version lookup and update checks (radnt.version)."""

from __future__ import annotations

from importlib import metadata
from unittest.mock import patch

import httpx
import pytest

from radnt.config import Config
from radnt.version import check_for_updates, get_current_version, get_latest_version, is_newer

pytestmark = pytest.mark.unit


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _release(version: str):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/pypi/radnt/json"
        return httpx.Response(200, json={"info": {"version": version}})
    return handler


class TestGetCurrentVersion:
    def test_installed(self):
        with patch("radnt.version.metadata.version", return_value="1.2.0"):
            assert get_current_version() == "1.2.0"

    def test_not_installed(self):
        with patch(
            "radnt.version.metadata.version",
            side_effect=metadata.PackageNotFoundError("radnt"),
        ):
            assert get_current_version() == "unknown"


class TestGetLatestVersion:
    async def test_success(self):
        async with _client(_release("2.0.1")) as client:
            assert await get_latest_version(Config(), client) == "2.0.1"

    async def test_http_error(self):
        async with _client(lambda request: httpx.Response(500)) as client:
            assert await get_latest_version(Config(), client) is None

    async def test_not_json(self):
        async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            assert await get_latest_version(Config(), client) is None

    async def test_missing_key(self):
        async with _client(lambda request: httpx.Response(200, json={"releases": {}})) as client:
            assert await get_latest_version(Config(), client) is None

    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        async with _client(handler) as client:
            assert await get_latest_version(Config(), client) is None

    async def test_does_not_close_injected_client(self):
        client = _client(_release("2.0.1"))
        await get_latest_version(Config(), client)
        assert not client.is_closed
        await client.aclose()


class TestIsNewer:
    @pytest.mark.parametrize(
        ("latest", "current", "expected"),
        [
            ("1.3.0", "1.2.0", True),
            ("1.10.0", "1.9.0", True),
            ("1.2.0", "1.2.0", False),
            ("1.1.9", "1.2.0", False),
            ("2.0.0rc1", "1.9.9", True),
            ("2.0.0", "unknown", False),
            ("garbage", "1.0.0", False),
        ],
    )
    def test_compare(self, latest: str, current: str, expected: bool):
        assert is_newer(latest, current) is expected


class TestCheckForUpdates:
    async def test_announces_newer_release(self, capsys):
        with patch("radnt.version.get_current_version", return_value="1.0.0"):
            async with _client(_release("1.4.0")) as client:
                assert await check_for_updates(Config(), client) == "1.4.0"
        out = capsys.readouterr().out
        assert "Update available!" in out
        assert "pip install --upgrade radnt" in out

    async def test_up_to_date(self, capsys):
        with patch("radnt.version.get_current_version", return_value="1.4.0"):
            async with _client(_release("1.4.0")) as client:
                assert await check_for_updates(Config(), client) is None
        assert capsys.readouterr().out == ""

    async def test_offline(self):
        with patch("radnt.version.get_current_version", return_value="1.0.0"):
            async with _client(lambda request: httpx.Response(503)) as client:
                assert await check_for_updates(Config(), client) is None
