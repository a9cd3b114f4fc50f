"""Last.fm loved tracks endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from scrobble.feed.connectors.lastfm.rest.endpoints.common import (
    build_path,
    page_fields,
    paged_query,
    to_artist,
    to_images,
)
from scrobble.feed.connectors.lastfm.rest.schemas import LovedTracksResponse
from scrobble.feed.core import LastFMMethod
from scrobble.feed.models import LovedTrack, PageResult
from scrobble.feed.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the loved tracks endpoint."""
    return paged_query(LastFMMethod.LOVED_TRACKS, params)


SPEC = RestEndpointSpec(
    id="loved_tracks",
    api_method=LastFMMethod.LOVED_TRACKS,
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing loved tracks into a PageResult."""

    schema_name = "LovedTracksResponse"

    def parse(self, response: Any, params: dict[str, Any]) -> PageResult:
        body = LovedTracksResponse.model_validate(response).lovedtracks
        tracks = [
            LovedTrack(
                mbid=t.mbid,
                name=t.name,
                url=t.url,
                artist=to_artist(t.artist),
                images=to_images(t.image),
                loved_at=t.date.timestamp,
                streamable=t.streamable,
            )
            for t in body.track
        ]
        return PageResult(tracks=tracks, **page_fields(body.attr))
