"""Last.fm REST endpoint definitions."""

from . import loved_tracks, recent_tracks, top_tracks, track_info

__all__ = ["loved_tracks", "recent_tracks", "top_tracks", "track_info"]
