#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from scrobble.feed import LastFMClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a Last.fm user's recent scrobbles")
    p.add_argument("username", nargs="?", default=None, help="defaults to LASTFM_USERNAME")
    p.add_argument("limit", nargs="?", type=int, default=1200)
    p.add_argument("--extended", action="store_true", help="include artist details and loved flag")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with LastFMClient.from_env(args.username) as client:
        playing = await client.get_currently_playing_track()
        tracks = await client.get_all_recent_tracks(limit=args.limit, extended=args.extended)

    print("=" * 78)
    print(f"User        : {client.username}")
    if playing is not None:
        print(f"Now playing : {playing.artist.name} - {playing.name}")
    print(f"Scrobbles   : {len(tracks)}")
    print("=" * 78)
    print(f"{'Played at':25} | {'Artist':22} | {'Track':24}")
    print("-" * 78)
    for t in tracks[:25]:
        played = t.played_at.isoformat() if t.played_at else "-"
        print(f"{played:25} | {t.artist.name[:22]:22} | {t.name[:24]:24}")
    if len(tracks) > 25:
        print(f"... {len(tracks) - 25} more")
    print("=" * 78)


if __name__ == "__main__":
    asyncio.run(main())
