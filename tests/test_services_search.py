"""Tests for the search service helper."""

from __future__ import annotations

import httpx
import pytest

from search_viewer.services.search_service import fetch_search_results, parse_search_payload

BASE_URL = "http://localhost:8080"


class FakeClock:
    def __init__(self, *ticks: float) -> None:
        self._ticks = list(ticks)

    def now(self) -> float:
        return self._ticks.pop(0)


@pytest.mark.asyncio
async def test_fetch_keeps_encoded_query_and_times_request() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[
                {"where": "https://b.test", "title": "B", "count": 2, "score": 0.9},
                {"where": "https://a.test", "title": "A", "count": 1, "score": 0.1},
            ],
        )

    clock = FakeClock(10.0, 10.75)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        results, elapsed = await fetch_search_results(
            client=client,
            base_url=BASE_URL,
            encoded_query="cats%20dogs",
            now=clock.now,
        )

    assert seen[0].url.raw_path == b"/api/search?q=cats%20dogs"
    assert [r.where for r in results] == ["https://b.test", "https://a.test"]
    assert elapsed == pytest.approx(0.75)


@pytest.mark.asyncio
async def test_fetch_raises_on_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await fetch_search_results(client=client, base_url=BASE_URL, encoded_query="cats")


def test_parse_search_payload_empty_body() -> None:
    assert parse_search_payload(httpx.Response(200, content=b"")) == []


def test_parse_search_payload_rejects_malformed_entries() -> None:
    with pytest.raises(ValueError):
        parse_search_payload(httpx.Response(200, json=[{"title": "no source"}]))
