"""Last.fm track info endpoint definition and adapter.

A track is identified either by ``mbid`` or by the ``artist``/``track``
pair. When ``username`` is sent, the response includes the user's
playcount and loved flag for the track.
"""

from __future__ import annotations

from typing import Any

from scrobble.feed.connectors.lastfm.rest.endpoints.common import build_path, to_artist, to_images
from scrobble.feed.connectors.lastfm.rest.schemas import TrackInfoResponse
from scrobble.feed.core import LastFMMethod
from scrobble.feed.models import Album, TrackInfo
from scrobble.feed.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the track info endpoint."""
    q: dict[str, Any] = {"method": LastFMMethod.TRACK_INFO.value}
    if params.get("mbid"):
        q["mbid"] = params["mbid"]
    elif params.get("artist") and params.get("track"):
        q["artist"] = params["artist"]
        q["track"] = params["track"]
    else:
        raise ValueError("track info requires either mbid or both artist and track")
    if params.get("user"):
        q["username"] = params["user"]
    if params.get("autocorrect"):
        q["autocorrect"] = 1
    return q


SPEC = RestEndpointSpec(
    id="track_info",
    api_method=LastFMMethod.TRACK_INFO,
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing track info into a TrackInfo."""

    schema_name = "TrackInfoResponse"

    def parse(self, response: Any, params: dict[str, Any]) -> TrackInfo:
        raw = TrackInfoResponse.model_validate(response).track
        album = None
        if raw.album is not None:
            album = Album(
                title=raw.album.title,
                mbid=raw.album.mbid,
                artist=raw.album.artist or None,
                url=raw.album.url,
                images=to_images(raw.album.image),
            )
        return TrackInfo(
            name=raw.name,
            mbid=raw.mbid,
            url=raw.url,
            duration_ms=raw.duration,
            listeners=raw.listeners,
            playcount=raw.playcount,
            artist=to_artist(raw.artist),
            album=album,
            top_tags=[tag.name for tag in raw.toptags.tag] if raw.toptags else [],
            user_playcount=raw.userplaycount,
            user_loved=raw.userloved,
        )
