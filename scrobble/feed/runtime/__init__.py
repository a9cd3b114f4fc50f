"""Runtime layer: REST execution and pagination chunking."""
