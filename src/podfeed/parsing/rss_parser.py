"""Streaming parser for podcast RSS feeds.

Walks the parse events of a feed document once, keeping a stack of open
elements. Dispatch tables apply child text to the podcast, owner and
episode models; structural extractors read attributes of images,
categories, enclosures and chapters. The collected record is normalized
once the document ends.
"""

import structlog
from lxml import etree

from podfeed.errors import FeedParseError
from podfeed.models import Podcast
from podfeed.parsing.context import ParseState, TagContext
from podfeed.parsing.events import EndTag, StartTag, Text, iter_events
from podfeed.parsing.extractors import (
    CATEGORY_TAG,
    category_path,
    extract_chapter,
    extract_enclosure,
    extract_image,
    open_episode,
    open_owner,
)
from podfeed.parsing.fields import CHANNEL_FIELDS, apply_text
from podfeed.parsing.finalize import finalize_podcast

logger = structlog.get_logger(__name__)


class FeedParser:
    """Parses podcast feed documents into :class:`Podcast` records.

    The parser holds no per-document state, so one instance can be reused
    and shared freely.
    """

    def __init__(self) -> None:
        self.logger = logger.bind(component="feed_parser")

    def parse(self, document: str) -> Podcast:
        """Parse a complete feed document.

        Args:
            document: Feed XML as text.

        Returns:
            Podcast: Finalized podcast with episodes newest first.

        Raises:
            FeedParseError: If the document is not well-formed XML.
        """
        state = ParseState()

        try:
            for event in iter_events(document):
                if isinstance(event, StartTag):
                    self._handle_start(state, event)
                elif isinstance(event, Text):
                    self._handle_text(state, event)
                else:
                    self._handle_end(state, event)
        except (etree.XMLSyntaxError, UnicodeEncodeError) as e:
            raise FeedParseError(f"Failed to parse podcast feed: {e}") from e

        podcast = finalize_podcast(state.podcast)

        self.logger.debug(
            "Parsed feed",
            title=podcast.title,
            episode_count=len(podcast.episodes),
            category_count=len(podcast.categories),
        )
        return podcast

    def _handle_start(self, state: ParseState, event: StartTag) -> None:
        context = state.stack.push(event.name, event.attributes)
        parent = state.stack.parent
        if parent is None:
            return

        name = context.name
        if name == "channel":
            context.target = state.podcast
            context.fields = CHANNEL_FIELDS
        elif name == "itunes:image" and parent.name == "channel":
            image = extract_image(context)
            if image:
                state.podcast.image = image
        elif name == "itunes:owner" and parent.name == "channel":
            open_owner(state, context)
        elif name == CATEGORY_TAG:
            path = category_path(state, context)
            if path:
                state.podcast.categories.append(path)
        elif name == "item" and parent.name == "channel":
            open_episode(state, context)
        elif state.episode is not None:
            self._handle_episode_child(state, context, parent)

    def _handle_episode_child(
        self, state: ParseState, context: TagContext, parent: TagContext
    ) -> None:
        episode = state.episode
        if context.name == "itunes:image":
            image = extract_image(context)
            if image and parent.target is episode:
                episode.image = image
        elif context.name == "enclosure":
            episode.enclosure = extract_enclosure(context)
        elif context.name == "psc:chapter":
            chapter = extract_chapter(context)
            if chapter is not None:
                episode.chapters.append(chapter)

    def _handle_text(self, state: ParseState, event: Text) -> None:
        text = event.text.strip()
        if not text:
            return

        context = state.stack.current
        parent = state.stack.parent
        if context is None or parent is None:
            return

        if parent.fields is not None and parent.target is not None:
            rule = parent.fields.get(context.name)
            if rule is not None:
                apply_text(parent.target, context.name, rule, text)

        if state.episode is not None and context.name == "category":
            state.episode.categories.append(text)

    def _handle_end(self, state: ParseState, event: EndTag) -> None:
        context = state.stack.pop()
        if (
            context is not None
            and state.episode is not None
            and context.target is state.episode
        ):
            state.podcast.episodes.append(state.episode)
            state.episode = None


def parse_feed(document: str) -> Podcast:
    """Parse a podcast feed document into a :class:`Podcast`.

    Raises:
        FeedParseError: If the document is not well-formed XML.
    """
    return FeedParser().parse(document)
