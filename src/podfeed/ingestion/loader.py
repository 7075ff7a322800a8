"""Fetch-then-parse loading of podcast feeds."""

import structlog

from podfeed.errors import FeedParseError
from podfeed.ingestion.fetcher import FeedFetcher
from podfeed.models import Podcast
from podfeed.parsing import FeedParser

logger = structlog.get_logger(__name__)


def get_podcast(
    feed_url: str,
    fetcher: FeedFetcher | None = None,
    parser: FeedParser | None = None,
) -> Podcast:
    """Fetch a podcast feed and parse it into a :class:`Podcast`.

    Args:
        feed_url: URL of the RSS feed.
        fetcher: Transport to use; a default FeedFetcher if None.
        parser: Parser to use; a default FeedParser if None.

    Returns:
        Podcast: Parsed podcast with ``feed`` set to ``feed_url``.

    Raises:
        FeedFetchError: If the feed could not be retrieved.
        FeedParseError: If the document is not well-formed XML.
    """
    fetcher = fetcher or FeedFetcher()
    parser = parser or FeedParser()

    document = fetcher.fetch(feed_url)

    try:
        podcast = parser.parse(document)
    except FeedParseError as e:
        logger.error("Failed to parse feed", url=feed_url, error=e.message)
        raise FeedParseError(e.message, feed_url=feed_url) from e

    podcast.feed = feed_url

    logger.info(
        "Loaded podcast",
        url=feed_url,
        podcast=podcast.title,
        episode_count=len(podcast.episodes),
    )
    return podcast
