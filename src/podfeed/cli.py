"""Command-line interface for podfeed.

Provides commands for parsing podcast feeds from a URL or a local file.
"""

import argparse
import json
import sys
from pathlib import Path

from podfeed.errors import PodcastFeedError
from podfeed.ingestion import get_podcast
from podfeed.logging import setup_logging
from podfeed.models import Podcast
from podfeed.parsing import parse_feed


def _print_podcast(podcast: Podcast, max_episodes: int) -> None:
    print(f"\nPodcast: {podcast.title}")
    print(f"Author: {podcast.author}")
    print(f"Updated: {podcast.updated}")
    if podcast.categories:
        print(f"Categories: {', '.join(podcast.categories)}")
    print(f"Episodes found: {len(podcast.episodes)}\n")

    for i, ep in enumerate(podcast.episodes[:max_episodes], 1):
        duration = f"{ep.duration // 60}m" if ep.duration else "N/A"
        print(f"{i}. {ep.title}")
        print(f"   Published: {ep.published}")
        print(f"   Duration: {duration}")
        if ep.enclosure and ep.enclosure.url:
            print(f"   Audio: {ep.enclosure.url}")
        print()


def _write_output(podcast: Podcast, output: str | None) -> None:
    if not output:
        return
    output_path = Path(output)
    output_path.write_text(json.dumps(podcast.model_dump(mode="json"), indent=2))
    print(f"Saved feed data to: {output_path}")


def cmd_parse_feed(args: argparse.Namespace) -> int:
    """Fetch and parse an RSS feed and display episode information."""
    try:
        podcast = get_podcast(args.feed_url)
    except PodcastFeedError as e:
        print(f"Error: {e.message}")
        return 1

    _print_podcast(podcast, args.max_episodes)
    _write_output(podcast, args.output)
    return 0


def cmd_parse_file(args: argparse.Namespace) -> int:
    """Parse a feed stored in a local file."""
    feed_path = Path(args.feed_file)
    if not feed_path.exists():
        print(f"Error: File not found: {feed_path}")
        return 1

    try:
        podcast = parse_feed(feed_path.read_text(encoding="utf-8"))
    except PodcastFeedError as e:
        print(f"Error: {e.message}")
        return 1

    _print_podcast(podcast, args.max_episodes)
    _write_output(podcast, args.output)
    return 0


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="podfeed",
        description="Podcast RSS feed parser",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse-feed command
    feed_parser = subparsers.add_parser("parse-feed", help="Fetch and parse an RSS feed")
    feed_parser.add_argument("feed_url", help="RSS feed URL")
    feed_parser.add_argument(
        "--max-episodes", "-n", type=int, default=10, help="Max episodes to display"
    )
    feed_parser.add_argument("--output", "-o", help="Output JSON file path")
    feed_parser.set_defaults(func=cmd_parse_feed)

    # parse-file command
    file_parser = subparsers.add_parser("parse-file", help="Parse a local feed file")
    file_parser.add_argument("feed_file", help="Path to the feed XML file")
    file_parser.add_argument(
        "--max-episodes", "-n", type=int, default=10, help="Max episodes to display"
    )
    file_parser.add_argument("--output", "-o", help="Output JSON file path")
    file_parser.set_defaults(func=cmd_parse_file)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    setup_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
