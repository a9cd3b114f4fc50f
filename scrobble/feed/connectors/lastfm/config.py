"""Last.fm connector configuration.

This module centralizes the REST endpoint location and the client settings
read from the environment, so the endpoints and the client stay small.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from scrobble.feed.core import ConfigurationError
from scrobble.feed.runtime.chunking import ChunkPolicy

# Last.fm serves every method from a single path; the method is a query parameter
BASE_URL = "https://ws.audioscrobbler.com"
API_PATH = "/2.0/"

DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "LASTFM_API_KEY"
USERNAME_ENV = "LASTFM_USERNAME"


@dataclass(frozen=True)
class LastFMConfig:
    """Settings for one logical client bound to one user.

    Attributes:
        api_key: Last.fm API key
        username: User whose tracks are fetched
        base_url: REST base URL
        timeout: Per-call timeout in seconds
        policy: Pagination chunking policy
    """

    api_key: str = field(repr=False)
    username: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    policy: ChunkPolicy = field(default_factory=ChunkPolicy)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("Last.fm api_key must be a non-empty string")
        if not self.username:
            raise ConfigurationError("Last.fm username must be a non-empty string")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_env(
        cls,
        username: str | None = None,
        *,
        policy: ChunkPolicy | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> LastFMConfig:
        """Build configuration from ``LASTFM_API_KEY`` / ``LASTFM_USERNAME``.

        Args:
            username: Username, overriding ``LASTFM_USERNAME``
            policy: Optional chunking policy
            timeout: Per-call timeout in seconds

        Raises:
            ConfigurationError: If the API key or username is missing
        """
        api_key = os.environ.get(API_KEY_ENV, "").strip()
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} is not set")
        user = username or os.environ.get(USERNAME_ENV, "").strip()
        if not user:
            raise ConfigurationError(f"username not given and {USERNAME_ENV} is not set")
        return cls(
            api_key=api_key,
            username=user,
            timeout=timeout,
            policy=policy or ChunkPolicy(),
        )

    @property
    def default_params(self) -> dict[str, str]:
        """Query parameters sent with every call."""
        return {"api_key": self.api_key, "format": "json"}
