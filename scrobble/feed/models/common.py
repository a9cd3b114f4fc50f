"""Shared building blocks for track models."""

from pydantic import BaseModel, ConfigDict, Field


class Image(BaseModel):
    """Artwork reference at one size."""

    size: str
    url: str = ""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class Artist(BaseModel):
    """Artist reference attached to a track.

    ``url`` and ``images`` are only populated by responses that carry the
    full artist object (loved, top, extended recent tracks).
    """

    name: str = Field(..., min_length=1)
    mbid: str = ""
    url: str | None = None
    images: list[Image] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class Album(BaseModel):
    """Album reference attached to a recent track or track info."""

    title: str = ""
    mbid: str = ""
    artist: str | None = None
    url: str | None = None
    images: list[Image] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
