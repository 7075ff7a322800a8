"""Podcast ingestion module for fetching and loading feeds."""

from podfeed.ingestion.fetcher import FeedFetcher
from podfeed.ingestion.loader import get_podcast

__all__ = ["FeedFetcher", "get_podcast"]
