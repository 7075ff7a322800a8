"""Field dispatch tables mapping child tag text onto model fields.

A dispatch table belongs to an open element (``channel``, ``item``,
``itunes:owner``) and says what to do with the text of each of its
direct children.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from enum import StrEnum
from typing import Any

from dateutil import parser as dateutil_parser
from pydantic import BaseModel

from podfeed.parsing.duration import parse_duration, parse_int

_RE_REGION_CODE = re.compile(r"\w\w-\w\w", re.IGNORECASE)

Transform = Callable[[str], dict[str, Any]]


class FieldAction(StrEnum):
    COPY = "copy"
    RENAME = "rename"
    TRANSFORM = "transform"


@dataclass(frozen=True)
class FieldRule:
    """How the text of one child tag is applied to the target model.

    COPY stores under the tag name, RENAME under ``key``, and TRANSFORM
    merges the mapping returned by ``transform``. Text stored by COPY and
    RENAME is appended (space separated) to any value already present.
    """

    action: FieldAction
    key: str | None = None
    transform: Transform | None = None

    @classmethod
    def copy(cls) -> "FieldRule":
        return cls(FieldAction.COPY)

    @classmethod
    def rename(cls, key: str) -> "FieldRule":
        return cls(FieldAction.RENAME, key=key)

    @classmethod
    def transformed(cls, transform: Transform) -> "FieldRule":
        return cls(FieldAction.TRANSFORM, transform=transform)


FieldTable = Mapping[str, FieldRule]


def apply_text(target: BaseModel, tag: str, rule: FieldRule, text: str) -> None:
    """Apply the trimmed, non-empty ``text`` of child ``tag`` to ``target``."""
    if rule.action is FieldAction.TRANSFORM:
        for key, value in rule.transform(text).items():  # type: ignore[misc]
            setattr(target, key, value)
        return

    key = rule.key if rule.action is FieldAction.RENAME else tag
    previous = getattr(target, key)
    setattr(target, key, f"{previous} {text}" if previous else text)


def normalize_language(text: str) -> dict[str, Any]:
    """Normalize a language code to ``xx-yy`` form (``en`` -> ``en-us``, ``de`` -> ``de-de``)."""
    language = text
    if not _RE_REGION_CODE.search(text):
        language = "en-us" if language == "en" else f"{language}-{language}"
    return {"language": language.lower()}


def _ensure_utc(dt: datetime) -> datetime | None:
    try:
        return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def parse_date(text: str) -> datetime | None:
    """Parse an RFC 822 or free-form date into an aware UTC datetime.

    Returns None when the text cannot be understood as a date.
    """
    try:
        return _ensure_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError):
        pass

    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, TypeError, OverflowError):
        return None
    return _ensure_utc(parsed)


def _int_field(key: str) -> Transform:
    def transform(text: str) -> dict[str, Any]:
        value = parse_int(text)
        return {} if value is None else {key: value}

    return transform


def _date_field(key: str) -> Transform:
    def transform(text: str) -> dict[str, Any]:
        value = parse_date(text)
        return {} if value is None else {key: value}

    return transform


def _duration_field(text: str) -> dict[str, Any]:
    return {"duration": parse_duration(text)}


CHANNEL_FIELDS: FieldTable = {
    "title": FieldRule.copy(),
    "link": FieldRule.copy(),
    "copyright": FieldRule.copy(),
    "language": FieldRule.transformed(normalize_language),
    "itunes:subtitle": FieldRule.rename("subtitle"),
    "itunes:summary": FieldRule.rename("summary"),
    "description": FieldRule.copy(),
    "itunes:author": FieldRule.rename("author"),
    "ttl": FieldRule.transformed(_int_field("ttl")),
    "pubDate": FieldRule.transformed(_date_field("updated")),
}

EPISODE_FIELDS: FieldTable = {
    "title": FieldRule.copy(),
    "itunes:subtitle": FieldRule.rename("subtitle"),
    "guid": FieldRule.copy(),
    "description": FieldRule.copy(),
    "itunes:summary": FieldRule.rename("summary"),
    "pubDate": FieldRule.transformed(_date_field("published")),
    "itunes:duration": FieldRule.transformed(_duration_field),
    "content:encoded": FieldRule.rename("content"),
}

OWNER_FIELDS: FieldTable = {
    "itunes:name": FieldRule.rename("name"),
    "itunes:email": FieldRule.rename("email"),
}
