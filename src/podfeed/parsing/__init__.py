"""Feed parsing module: XML parse events to normalized podcast records."""

from podfeed.parsing.duration import parse_duration
from podfeed.parsing.rss_parser import FeedParser, parse_feed

__all__ = ["FeedParser", "parse_feed", "parse_duration"]
