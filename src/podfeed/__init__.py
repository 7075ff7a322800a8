"""podfeed - Podcast RSS feed parser.

Converts podcast RSS feeds (with iTunes, Podlove chapter and content
extensions) into clean, typed records of a show and its episodes.
"""

from podfeed.errors import (
    FeedFetchError,
    FeedHTTPError,
    FeedParseError,
    FeedTimeoutError,
    PodcastFeedError,
)
from podfeed.ingestion import FeedFetcher, get_podcast
from podfeed.models import Chapter, Enclosure, Episode, Owner, Podcast
from podfeed.parsing import FeedParser, parse_feed

__version__ = "0.1.0"

__all__ = [
    "Chapter",
    "Enclosure",
    "Episode",
    "FeedFetchError",
    "FeedFetcher",
    "FeedHTTPError",
    "FeedParseError",
    "FeedParser",
    "FeedTimeoutError",
    "Owner",
    "Podcast",
    "PodcastFeedError",
    "get_podcast",
    "parse_feed",
]
