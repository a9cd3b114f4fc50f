"""Track info data model (``track.getInfo``)."""

from pydantic import BaseModel, ConfigDict, Field

from .common import Album, Artist


class TrackInfo(BaseModel):
    """Metadata for a single track, optionally scoped to a user.

    ``user_playcount`` and ``user_loved`` are only set when the lookup was
    made on behalf of a username.
    """

    name: str = Field(..., min_length=1)
    mbid: str = ""
    url: str
    duration_ms: int = Field(0, ge=0)
    listeners: int = Field(0, ge=0)
    playcount: int = Field(0, ge=0)
    artist: Artist
    album: Album | None = None
    top_tags: list[str] = Field(default_factory=list)
    user_playcount: int | None = None
    user_loved: bool | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
