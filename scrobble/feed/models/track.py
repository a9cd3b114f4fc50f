"""Track data models.

Architecture:
    ``Track`` is a tagged union discriminated by ``kind``. Every variant
    shares the identity fields (mbid, name, url, artist, images); the
    variant-specific fields mirror what each Last.fm method returns once
    coerced to native types.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .common import Album, Artist, Image


class BaseTrack(BaseModel):
    """Identity fields shared by every track variant."""

    mbid: str = ""
    name: str = Field(..., min_length=1)
    url: str
    artist: Artist
    images: list[Image] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class LovedTrack(BaseTrack):
    """A track the user marked as loved."""

    kind: Literal["loved"] = "loved"
    loved_at: datetime
    streamable: bool = False


class RecentTrack(BaseTrack):
    """A scrobble from the user's listening history.

    ``played_at`` is absent while the track is playing. ``loved`` is only
    known when the history was requested in extended mode.
    """

    kind: Literal["recent"] = "recent"
    album: Album = Field(default_factory=Album)
    played_at: datetime | None = None
    now_playing: bool = False
    streamable: bool = False
    loved: bool | None = None

    @property
    def extended(self) -> bool:
        """Whether the record came from an extended history request."""
        return self.loved is not None


class TopTrack(BaseTrack):
    """A ranked entry in the user's top tracks."""

    kind: Literal["top"] = "top"
    rank: int = Field(..., ge=1)
    playcount: int = Field(..., ge=0)
    duration: int = Field(0, ge=0, description="Duration in seconds")
    streamable: bool = False


Track = Annotated[Union[LovedTrack, RecentTrack, TopTrack], Field(discriminator="kind")]
