"""Data models for parsed podcast feeds.

Every field except the collections is optional, since real-world feeds
omit metadata freely. Datetimes are always timezone-aware UTC.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Chapter(BaseModel):
    """A chapter marker within an episode."""

    start: int = Field(ge=0, description="Chapter start offset in seconds")
    title: str = Field(description="Chapter title")


class Enclosure(BaseModel):
    """The media file attached to an episode."""

    filesize: int | None = Field(default=None, description="Media file size in bytes")
    type: str | None = Field(default=None, description="MIME type of the media file")
    url: str | None = Field(default=None, description="Direct URL to the media file")


class Owner(BaseModel):
    """Contact information of the podcast owner."""

    name: str | None = Field(default=None, description="Owner name")
    email: str | None = Field(default=None, description="Owner contact email")


class Episode(BaseModel):
    """Represents a single podcast episode."""

    guid: str | None = Field(default=None, description="Globally unique identifier")
    title: str | None = Field(default=None, description="Episode title")
    subtitle: str | None = Field(default=None, description="Short subtitle or tagline")
    description: str | None = Field(default=None, description="Plain text description")
    summary: str | None = Field(default=None, description="Episode summary")
    content: str | None = Field(default=None, description="Full HTML show notes")
    image: str | None = Field(default=None, description="Episode artwork URL")
    published: datetime | None = Field(default=None, description="Publication date")
    duration: int | None = Field(default=None, ge=0, description="Duration in seconds")
    enclosure: Enclosure | None = Field(default=None, description="Attached media file")
    chapters: list[Chapter] = Field(default_factory=list, description="Chapter markers")
    categories: list[str] = Field(default_factory=list, description="Episode categories")


class Podcast(BaseModel):
    """Represents a podcast feed with metadata and episodes."""

    title: str | None = Field(default=None, description="Podcast title")
    subtitle: str | None = Field(default=None, description="Short subtitle or tagline")
    summary: str | None = Field(default=None, description="Brief summary")
    description: str | None = Field(default=None, description="Detailed description")
    link: str | None = Field(default=None, description="Podcast website URL")
    image: str | None = Field(default=None, description="Podcast artwork URL")
    language: str | None = Field(default=None, description="Language code, e.g. en-us")
    copyright: str | None = Field(default=None, description="Copyright notice")
    author: str | None = Field(default=None, description="Primary author")
    ttl: int | None = Field(default=None, description="Time-to-live in minutes")
    updated: datetime | None = Field(
        default=None, description="Last update (falls back to newest episode)"
    )
    owner: Owner | None = Field(default=None, description="Podcast owner")
    episodes: list[Episode] = Field(
        default_factory=list, description="Episodes, newest first"
    )
    feed: str | None = Field(default=None, description="URL of the source feed")
    categories: list[str] = Field(
        default_factory=list,
        description="Sorted unique categories, hierarchies joined with '>'",
    )
