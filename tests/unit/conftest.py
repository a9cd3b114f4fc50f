"""Shared fixtures for unit tests: raw Last.fm payloads and a fake upstream."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from math import ceil
from types import SimpleNamespace
from typing import Any

import aiohttp
import pytest

from scrobble.feed import ChunkPolicy, LastFMClient, LastFMConfig

BASE_UTS = 1_700_000_000


def _attr(total: int, page: int, limit: int, user: str = "tester") -> dict[str, str]:
    return {
        "user": user,
        "page": str(page),
        "perPage": str(limit),
        "total": str(total),
        "totalPages": str(ceil(total / limit) if total else 0),
    }


def _image() -> list[dict[str, str]]:
    return [
        {"size": "small", "#text": "https://lastfm.freetls.fastly.net/i/u/34s/x.png"},
        {"size": "large", "#text": ""},
    ]


def raw_recent_track(i: int, *, now_playing: bool = False, extended: bool = False) -> dict:
    track: dict[str, Any] = {
        "artist": {"mbid": "", "#text": f"Artist {i}"},
        "streamable": "0",
        "image": _image(),
        "mbid": f"mbid-{i}",
        "album": {"mbid": "", "#text": f"Album {i}"},
        "name": f"Track {i}",
        "url": f"https://www.last.fm/music/Artist+{i}/_/Track+{i}",
    }
    if extended:
        track["artist"] = {
            "url": f"https://www.last.fm/music/Artist+{i}",
            "name": f"Artist {i}",
            "image": _image(),
            "mbid": "",
        }
        track["loved"] = "1" if i % 2 == 0 else "0"
    if now_playing:
        track["@attr"] = {"nowplaying": "true"}
    else:
        track["date"] = {"uts": str(BASE_UTS - i * 60), "#text": "14 Nov 2023, 22:13"}
    return track


def raw_loved_track(i: int) -> dict:
    return {
        "artist": {
            "url": f"https://www.last.fm/music/Artist+{i}",
            "name": f"Artist {i}",
            "mbid": "",
        },
        "date": {"uts": str(BASE_UTS - i * 3600), "#text": "14 Nov 2023, 22:13"},
        "mbid": "",
        "url": f"https://www.last.fm/music/Artist+{i}/_/Loved+{i}",
        "name": f"Loved {i}",
        "image": _image(),
        "streamable": {"fulltrack": "0", "#text": "0"},
    }


def raw_top_track(i: int) -> dict:
    return {
        "streamable": {"fulltrack": "0", "#text": "0"},
        "mbid": "",
        "name": f"Top {i}",
        "image": _image(),
        "artist": {
            "url": f"https://www.last.fm/music/Artist+{i}",
            "name": f"Artist {i}",
            "mbid": "",
        },
        "url": f"https://www.last.fm/music/Artist+{i}/_/Top+{i}",
        "duration": "215",
        "@attr": {"rank": str(i + 1)},
        "playcount": str(10_000 - i),
    }


def recent_payload(
    total: int,
    page: int = 1,
    limit: int = 50,
    *,
    now_playing: bool = False,
    extended: bool = False,
) -> dict:
    start = (page - 1) * limit
    tracks = [raw_recent_track(i, extended=extended) for i in range(start, min(start + limit, total))]
    if now_playing and page == 1:
        tracks.insert(0, raw_recent_track(-1, now_playing=True, extended=extended))
    return {"recenttracks": {"track": tracks, "@attr": _attr(total, page, limit)}}


def loved_payload(total: int, page: int = 1, limit: int = 50) -> dict:
    start = (page - 1) * limit
    tracks = [raw_loved_track(i) for i in range(start, min(start + limit, total))]
    return {"lovedtracks": {"track": tracks, "@attr": _attr(total, page, limit)}}


def top_payload(total: int, page: int = 1, limit: int = 50) -> dict:
    start = (page - 1) * limit
    tracks = [raw_top_track(i) for i in range(start, min(start + limit, total))]
    return {"toptracks": {"track": tracks, "@attr": _attr(total, page, limit)}}


_PAYLOADS = {
    "user.getRecentTracks": recent_payload,
    "user.getLovedTracks": loved_payload,
    "user.getTopTracks": top_payload,
}


class FakeLastFM:
    """In-memory stand-in for RESTTransport serving a fixed dataset.

    Attributes:
        calls: Query dicts received, in dispatch order
        max_in_flight: Peak number of concurrent ``get`` calls observed
    """

    def __init__(
        self,
        total: int,
        *,
        now_playing: bool = False,
        fail_pages: dict[int, Any] | None = None,
        delay: float = 0.01,
    ) -> None:
        self.total = total
        self.now_playing = now_playing
        self.fail_pages = fail_pages or {}
        self.delay = delay
        self.calls: list[dict[str, Any]] = []
        self.completed: list[int] = []
        self.cancelled: list[int] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    @property
    def pages(self) -> list[int]:
        return [int(c["page"]) for c in self.calls]

    async def get(self, path: str, params: dict[str, Any] | None = None, headers=None) -> Any:
        params = dict(params or {})
        self.calls.append(params)
        page = int(params["page"])
        limit = int(params["limit"])
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # Later pages answer first so completion order differs from page order
            await asyncio.sleep(self.delay / page)
            failure = self.fail_pages.get(page)
            if isinstance(failure, BaseException):
                raise failure
            if failure is not None:
                return failure
            builder = _PAYLOADS[params["method"]]
            if builder is recent_payload:
                payload = builder(self.total, page, limit, now_playing=self.now_playing)
            else:
                payload = builder(self.total, page, limit)
            self.completed.append(page)
            return payload
        except asyncio.CancelledError:
            self.cancelled.append(page)
            raise
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> LastFMConfig:
    return LastFMConfig(api_key="test-key", username="tester")


@pytest.fixture
def make_client(config):
    """Factory building a LastFMClient over a FakeLastFM dataset."""

    def _make(
        total: int, *, policy: ChunkPolicy | None = None, **kwargs: Any
    ) -> tuple[LastFMClient, FakeLastFM]:
        fake = FakeLastFM(total, **kwargs)
        cfg = replace(config, policy=policy) if policy is not None else config
        return LastFMClient(cfg, transport=fake), fake

    return _make


@pytest.fixture
def connection_error() -> aiohttp.ClientConnectionError:
    return aiohttp.ClientConnectionError("connection reset by peer")


@pytest.fixture
def payloads() -> SimpleNamespace:
    """Raw payload builders, for tests that feed adapters directly."""
    return SimpleNamespace(
        recent=recent_payload,
        loved=loved_payload,
        top=top_payload,
        recent_track=raw_recent_track,
        loved_track=raw_loved_track,
        top_track=raw_top_track,
    )
