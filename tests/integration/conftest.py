"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from scrobble.feed import LastFMClient

# Skip all integration tests unless RUN_SCROBBLE_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SCROBBLE_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_SCROBBLE_NETWORK_TESTS=1 to run",
)

# A long-standing public account with a large scrobble history
DEFAULT_USERNAME = "RJ"


@pytest_asyncio.fixture
async def live_client():
    """Client for the live API; needs LASTFM_API_KEY."""
    if not os.environ.get("LASTFM_API_KEY"):
        pytest.skip("LASTFM_API_KEY is not set")
    username = os.environ.get("LASTFM_USERNAME", DEFAULT_USERNAME)
    client = LastFMClient.from_env(username)
    yield client
    await client.close()
