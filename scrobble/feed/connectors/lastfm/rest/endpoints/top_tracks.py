"""Last.fm top tracks endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from scrobble.feed.connectors.lastfm.rest.endpoints.common import (
    build_path,
    page_fields,
    paged_query,
    to_artist,
    to_images,
)
from scrobble.feed.connectors.lastfm.rest.schemas import TopTracksResponse
from scrobble.feed.core import LastFMMethod, Period
from scrobble.feed.models import PageResult, TopTrack
from scrobble.feed.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the top tracks endpoint."""
    q = paged_query(LastFMMethod.TOP_TRACKS, params)
    period = params.get("period")
    if period is not None:
        q["period"] = Period(period).value
    return q


SPEC = RestEndpointSpec(
    id="top_tracks",
    api_method=LastFMMethod.TOP_TRACKS,
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing top tracks into a PageResult."""

    schema_name = "TopTracksResponse"

    def parse(self, response: Any, params: dict[str, Any]) -> PageResult:
        body = TopTracksResponse.model_validate(response).toptracks
        tracks = [
            TopTrack(
                mbid=t.mbid,
                name=t.name,
                url=t.url,
                artist=to_artist(t.artist),
                images=to_images(t.image),
                rank=t.attr.rank,
                playcount=t.playcount,
                duration=t.duration,
                streamable=t.streamable,
            )
            for t in body.track
        ]
        return PageResult(tracks=tracks, **page_fields(body.attr))
