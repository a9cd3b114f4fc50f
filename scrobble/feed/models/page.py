"""Paged track list returned by one Last.fm call."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .track import Track


class PageResult(BaseModel):
    """One upstream page of tracks plus its pagination metadata.

    Attributes:
        tracks: Tracks in the order Last.fm returned them
        page: 1-based page number
        per_page: Page size the response was produced with
        total: Total number of items available across all pages
        total_pages: Number of pages at ``per_page``
    """

    tracks: list[Track] = Field(default_factory=list)
    page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_page_size(self) -> PageResult:
        """Scrobbled tracks never exceed the page size.

        A now-playing row is prepended to recent tracks on top of the
        requested limit, so it is not counted.
        """
        if len(self.scrobbled) > self.per_page:
            raise ValueError(
                f"page holds {len(self.scrobbled)} tracks, more than per_page={self.per_page}"
            )
        return self

    @property
    def scrobbled(self) -> list[Track]:
        """Tracks excluding a now-playing row."""
        return [t for t in self.tracks if not getattr(t, "now_playing", False)]

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
