"""Last.fm REST API raw response schemas.

This module defines Pydantic models for raw Last.fm API responses.
These models represent the exact structure returned by Last.fm before
conversion to domain models.

Last.fm encodes almost every scalar as a string: counts are numeric
strings, flags are ``"0"``/``"1"`` (or ``"true"``/``"false"``), timestamps
are Unix seconds in ``uts``. A list with a single element is sometimes
collapsed into a bare object. The validators below normalize all of that.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

_TRUE = {"1", "true", "yes"}
_FALSE = {"0", "false", "no", ""}


def _to_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        lowered = v.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError(f"cannot interpret {v!r} as a boolean flag")


def _to_int(v: Any) -> int:
    if isinstance(v, bool):
        raise ValueError("boolean is not a count")
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip().lstrip("-").isdigit():
        return int(v.strip())
    if v is None or v == "":
        return 0
    raise ValueError(f"cannot interpret {v!r} as an integer")


def _ensure_list(v: Any) -> list[Any]:
    if v is None:
        return []
    if not isinstance(v, list):
        return [v]
    return v


def _streamable(v: Any) -> bool:
    # Either a bare flag or {"fulltrack": "0", "#text": "0"}
    if isinstance(v, dict):
        return _to_bool(v.get("fulltrack", "0")) or _to_bool(v.get("#text", "0"))
    return _to_bool(v)


Flag = Annotated[bool, BeforeValidator(_to_bool)]
Count = Annotated[int, BeforeValidator(_to_int)]
Streamable = Annotated[bool, BeforeValidator(_streamable)]


class _Raw(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LastFMImage(_Raw):
    size: str = ""
    url: str = Field("", alias="#text")


class LastFMDate(_Raw):
    """``{"uts": "1700000000", "#text": "14 Nov 2023, 22:13"}``"""

    uts: Count
    text: str = Field("", alias="#text")

    @property
    def timestamp(self) -> datetime:
        return datetime.fromtimestamp(self.uts, tz=UTC)


class LastFMArtist(_Raw):
    """Full artist object (loved, top and extended recent tracks)."""

    name: str
    mbid: str = ""
    url: str | None = None
    image: Annotated[list[LastFMImage], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )


class LastFMTextArtist(_Raw):
    """Compact artist object (``{"mbid": "...", "#text": "Name"}``)."""

    mbid: str = ""
    name: str = Field(..., alias="#text")


class LastFMTextAlbum(_Raw):
    mbid: str = ""
    title: str = Field("", alias="#text")


class PageAttr(_Raw):
    """Pagination block found under ``@attr``."""

    user: str = ""
    page: Count
    per_page: Count = Field(..., alias="perPage")
    total: Count
    total_pages: Count = Field(..., alias="totalPages")


class NowPlayingAttr(_Raw):
    nowplaying: Flag = False


class RankAttr(_Raw):
    rank: Count


class _RawTrack(_Raw):
    name: str
    mbid: str = ""
    url: str
    image: Annotated[list[LastFMImage], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )


class LastFMLovedTrack(_RawTrack):
    artist: LastFMArtist
    date: LastFMDate
    streamable: Streamable = False


class LastFMRecentTrack(_RawTrack):
    # Extended responses carry the full artist object
    artist: LastFMArtist | LastFMTextArtist
    album: LastFMTextAlbum = Field(default_factory=LastFMTextAlbum)
    date: LastFMDate | None = None
    attr: NowPlayingAttr | None = Field(None, alias="@attr")
    streamable: Streamable = False
    loved: Flag | None = None


class LastFMTopTrack(_RawTrack):
    artist: LastFMArtist
    duration: Count = 0
    playcount: Count
    attr: RankAttr = Field(..., alias="@attr")
    streamable: Streamable = False


class LovedTracksBody(_Raw):
    track: Annotated[list[LastFMLovedTrack], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )
    attr: PageAttr = Field(..., alias="@attr")


class RecentTracksBody(_Raw):
    track: Annotated[list[LastFMRecentTrack], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )
    attr: PageAttr = Field(..., alias="@attr")


class TopTracksBody(_Raw):
    track: Annotated[list[LastFMTopTrack], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )
    attr: PageAttr = Field(..., alias="@attr")


class LovedTracksResponse(_Raw):
    lovedtracks: LovedTracksBody


class RecentTracksResponse(_Raw):
    recenttracks: RecentTracksBody


class TopTracksResponse(_Raw):
    toptracks: TopTracksBody


class LastFMTag(_Raw):
    name: str
    url: str = ""


class LastFMTopTags(_Raw):
    tag: Annotated[list[LastFMTag], BeforeValidator(_ensure_list)] = Field(default_factory=list)


class LastFMInfoAlbum(_Raw):
    title: str
    artist: str = ""
    mbid: str = ""
    url: str | None = None
    image: Annotated[list[LastFMImage], BeforeValidator(_ensure_list)] = Field(
        default_factory=list
    )


class LastFMTrackInfo(_Raw):
    name: str
    mbid: str = ""
    url: str
    duration: Count = 0
    listeners: Count = 0
    playcount: Count = 0
    artist: LastFMArtist
    album: LastFMInfoAlbum | None = None
    toptags: LastFMTopTags | None = None
    userplaycount: Count | None = None
    userloved: Flag | None = None


class TrackInfoResponse(_Raw):
    track: LastFMTrackInfo
