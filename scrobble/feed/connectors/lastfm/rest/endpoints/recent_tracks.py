"""Last.fm recent tracks endpoint definition and adapter.

``user.getRecentTracks`` accepts ``from``/``to`` bounds (Unix seconds) and
an ``extended`` flag that swaps the compact artist for the full object and
adds the user's ``loved`` flag. A track playing right now is prepended to
page 1 with ``@attr.nowplaying`` set and no ``date``.
"""

from __future__ import annotations

from typing import Any

from scrobble.feed.connectors.lastfm.rest.endpoints.common import (
    build_path,
    page_fields,
    paged_query,
    to_artist,
    to_images,
    unix_seconds,
)
from scrobble.feed.connectors.lastfm.rest.schemas import LastFMRecentTrack, RecentTracksResponse
from scrobble.feed.core import LastFMMethod
from scrobble.feed.models import Album, PageResult, RecentTrack
from scrobble.feed.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the recent tracks endpoint."""
    q = paged_query(LastFMMethod.RECENT_TRACKS, params)
    if params.get("from") is not None:
        q["from"] = unix_seconds(params["from"])
    if params.get("to") is not None:
        q["to"] = unix_seconds(params["to"])
    if params.get("extended"):
        q["extended"] = 1
    return q


def to_recent_track(raw: LastFMRecentTrack) -> RecentTrack:
    return RecentTrack(
        mbid=raw.mbid,
        name=raw.name,
        url=raw.url,
        artist=to_artist(raw.artist),
        images=to_images(raw.image),
        album=Album(title=raw.album.title, mbid=raw.album.mbid),
        played_at=raw.date.timestamp if raw.date else None,
        now_playing=bool(raw.attr and raw.attr.nowplaying),
        streamable=raw.streamable,
        loved=raw.loved,
    )


SPEC = RestEndpointSpec(
    id="recent_tracks",
    api_method=LastFMMethod.RECENT_TRACKS,
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing recent tracks into a PageResult."""

    schema_name = "RecentTracksResponse"

    def parse(self, response: Any, params: dict[str, Any]) -> PageResult:
        body = RecentTracksResponse.model_validate(response).recenttracks
        return PageResult(
            tracks=[to_recent_track(t) for t in body.track],
            **page_fields(body.attr),
        )
