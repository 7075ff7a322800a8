"""Attribute-driven handling of special feed elements.

These run when an element opens and read its attributes, unlike the
dispatch tables which act on text content.
"""

from podfeed.models import Chapter, Enclosure, Episode, Owner
from podfeed.parsing.context import ParseState, TagContext
from podfeed.parsing.duration import parse_chapter_start, parse_int
from podfeed.parsing.fields import EPISODE_FIELDS, OWNER_FIELDS

CATEGORY_TAG = "itunes:category"
CATEGORY_SEPARATOR = ">"


def extract_image(context: TagContext) -> str | None:
    """Return the ``href`` of an ``itunes:image`` element, if any."""
    return context.attributes.get("href") or None


def open_owner(state: ParseState, context: TagContext) -> Owner:
    """Start populating a fresh owner block."""
    owner = Owner()
    state.podcast.owner = owner
    context.target = owner
    context.fields = OWNER_FIELDS
    return owner


def category_path(state: ParseState, context: TagContext) -> str | None:
    """Build the ``>``-joined path of a (possibly nested) category element.

    Returns None when the element itself carries no label.
    """
    label = context.attributes.get("text")
    if not label:
        return None

    path = [label]
    for ancestor in state.stack.ancestors():
        if ancestor.name != CATEGORY_TAG:
            break
        parent_label = ancestor.attributes.get("text")
        if parent_label:
            path.append(parent_label)
    return CATEGORY_SEPARATOR.join(reversed(path))


def open_episode(state: ParseState, context: TagContext) -> Episode:
    """Make a fresh episode the current target."""
    episode = Episode()
    state.episode = episode
    context.target = episode
    context.fields = EPISODE_FIELDS
    return episode


def extract_enclosure(context: TagContext) -> Enclosure:
    """Read the media file attributes of an ``enclosure`` element."""
    attributes = context.attributes
    length = attributes.get("length")
    return Enclosure(
        filesize=parse_int(length) if length else None,
        type=attributes.get("type"),
        url=attributes.get("url"),
    )


def extract_chapter(context: TagContext) -> Chapter | None:
    """Read a ``psc:chapter`` marker; markers without start or title are skipped."""
    start = context.attributes.get("start")
    title = context.attributes.get("title")
    if not start or not title:
        return None
    return Chapter(start=parse_chapter_start(start), title=title)
