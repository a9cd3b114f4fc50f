"""Last.fm REST connector: raw schemas and endpoint definitions."""
