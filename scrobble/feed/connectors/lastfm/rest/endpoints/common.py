"""Helpers shared by the Last.fm endpoint definitions."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from scrobble.feed.connectors.lastfm.config import API_PATH
from scrobble.feed.connectors.lastfm.rest.schemas import (
    LastFMArtist,
    LastFMImage,
    LastFMTextArtist,
    PageAttr,
)
from scrobble.feed.core import LastFMMethod
from scrobble.feed.models import Artist, Image
from scrobble.feed.runtime.chunking import API_MAX_LIMIT


def build_path(_params: dict[str, Any]) -> str:
    return API_PATH


def paged_query(method: LastFMMethod, params: dict[str, Any]) -> dict[str, Any]:
    """Base query for a paginated user method."""
    return {
        "method": method.value,
        "user": params["user"],
        "limit": min(int(params.get("limit", API_MAX_LIMIT)), API_MAX_LIMIT),
        "page": int(params.get("page", 1)),
    }


def unix_seconds(value: datetime | int) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)


def to_images(raw: list[LastFMImage]) -> list[Image]:
    return [Image(size=img.size, url=img.url) for img in raw if img.url]


def to_artist(raw: LastFMArtist | LastFMTextArtist) -> Artist:
    if isinstance(raw, LastFMTextArtist):
        return Artist(name=raw.name, mbid=raw.mbid)
    return Artist(name=raw.name, mbid=raw.mbid, url=raw.url, images=to_images(raw.image))


def page_fields(attr: PageAttr) -> dict[str, int]:
    """PageResult metadata from an ``@attr`` block."""
    return {
        "page": max(attr.page, 1),
        "per_page": max(attr.per_page, 1),
        "total": attr.total,
        "total_pages": attr.total_pages,
    }
