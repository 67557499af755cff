"""네트워크 모듈 테스트 — requests 모킹, 로컬 aiohttp 서버."""

import asyncio

import pytest
import requests
from aiohttp import web

import net.fetch
from errors import FetchError
from net.fetch import fetch_bytes, fetch_bytes_async
from renderer.image import ImageValue


class _FakeResponse:
    def __init__(self, content: bytes, status: int = 200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_fetch_bytes_returns_body(monkeypatch):
    seen = {}

    def fake_get(url, timeout):
        seen["url"], seen["timeout"] = url, timeout
        return _FakeResponse(b"payload")

    monkeypatch.setattr(net.fetch.requests, "get", fake_get)
    assert fetch_bytes("http://example.test/a", timeout=3) == b"payload"
    assert seen == {"url": "http://example.test/a", "timeout": 3}


def test_fetch_bytes_http_error(monkeypatch):
    monkeypatch.setattr(net.fetch.requests, "get", lambda url, timeout: _FakeResponse(b"", 404))
    with pytest.raises(FetchError) as exc:
        fetch_bytes("http://example.test/missing")
    assert exc.value.url == "http://example.test/missing"


def test_fetch_bytes_connection_error(monkeypatch):
    def refuse(url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(net.fetch.requests, "get", refuse)
    with pytest.raises(FetchError):
        fetch_bytes("http://example.test/")


def test_image_from_network(monkeypatch):
    png = ImageValue.blank(5, 4, (1, 2, 3, 255)).to_bytes()
    monkeypatch.setattr(net.fetch.requests, "get", lambda url, timeout: _FakeResponse(png))
    assert ImageValue.from_network("http://example.test/t.png").size == (5, 4)


async def _serve_and_fetch(path: str) -> bytes:
    async def handler(request):
        return web.Response(body=b"async payload")

    app = web.Application()
    app.router.add_get("/font.ttf", handler)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    try:
        port = runner.addresses[0][1]
        return await fetch_bytes_async(f"http://127.0.0.1:{port}{path}")
    finally:
        await runner.cleanup()


def test_fetch_bytes_async_reads_body():
    assert asyncio.run(_serve_and_fetch("/font.ttf")) == b"async payload"


def test_fetch_bytes_async_http_error():
    with pytest.raises(FetchError):
        asyncio.run(_serve_and_fetch("/nope"))
