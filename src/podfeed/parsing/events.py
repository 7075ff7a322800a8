"""Pull-based XML parse events built on lxml's iterparse.

``iter_events`` turns a feed document into a flat stream of
:class:`StartTag`, :class:`Text` and :class:`EndTag` events in document
order, with namespaced names reported as ``prefix:local``.
"""

import io
import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from lxml import etree

_RE_XML_DECL_ENCODING = re.compile(
    r'(<\?xml[^>]*encoding=["\'])([^"\']+)(["\'][^>]*\?>)', re.IGNORECASE
)

# Canonical prefixes for the namespaces podcast feeds use, whatever prefix
# the document itself declares.
KNOWN_NAMESPACES: dict[str, str] = {
    "http://www.itunes.com/dtds/podcast-1.0.dtd": "itunes",
    "http://www.itunes.com/DTDs/Podcast-1.0.dtd": "itunes",
    "http://purl.org/rss/1.0/modules/content/": "content",
    "http://podlove.org/simple-chapters": "psc",
    "http://podlove.org/simple-chapters/": "psc",
    "http://www.w3.org/2005/Atom": "atom",
    "http://search.yahoo.com/mrss/": "media",
    "http://purl.org/dc/elements/1.1/": "dc",
    "https://podcastindex.org/namespace/1.0": "podcast",
}

# URI declared for a canonical prefix a feed uses without declaring it.
DEFAULT_NAMESPACE_URIS: dict[str, str] = {}
for _uri, _prefix in KNOWN_NAMESPACES.items():
    DEFAULT_NAMESPACE_URIS.setdefault(_prefix, _uri)

# XML declaration, comments, processing instructions and doctype (with an
# optional internal subset) ahead of the root element's name.
_RE_ROOT_TAG = re.compile(
    r"\A(?:\s+|<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^\[>]*(?:\[.*?\])?\s*>)*<[^\s/>]+",
    re.DOTALL | re.IGNORECASE,
)


@dataclass(frozen=True)
class StartTag:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class EndTag:
    name: str


ParseEvent = StartTag | Text | EndTag


def _qualified_name(tag: str, prefix: str | None = None) -> str:
    if not tag.startswith("{"):
        return tag
    qname = etree.QName(tag)
    known = KNOWN_NAMESPACES.get(qname.namespace)
    if known is not None:
        return f"{known}:{qname.localname}"
    if prefix:
        return f"{prefix}:{qname.localname}"
    return qname.localname


def _declare_known_prefixes(content: str) -> str:
    """Declare well-known prefixes the document uses but never declares.

    Feeds often use ``itunes:`` and friends without an ``xmlns:itunes``
    declaration. Those prefixes are bound on the root element so the
    document parses; prefixes outside ``KNOWN_NAMESPACES`` are left alone.
    """
    missing = [
        prefix
        for prefix in DEFAULT_NAMESPACE_URIS
        if re.search(rf"[<\s/]{prefix}:[A-Za-z_]", content)
        and not re.search(rf"xmlns:{prefix}\s*=", content)
    ]
    if not missing:
        return content

    root = _RE_ROOT_TAG.match(content)
    if root is None:
        return content

    declarations = "".join(
        f' xmlns:{prefix}="{DEFAULT_NAMESPACE_URIS[prefix]}"' for prefix in missing
    )
    return content[: root.end()] + declarations + content[root.end() :]


def _prepare_document(document: str) -> bytes:
    """Encode the document as UTF-8 with a matching XML declaration.

    Raises:
        UnicodeEncodeError: If the text holds lone surrogates.
    """
    content = document.lstrip("\ufeff \t\r\n")
    if content.startswith("<?xml"):
        content = _RE_XML_DECL_ENCODING.sub(r"\1utf-8\3", content, count=1)
    return _declare_known_prefixes(content).encode("utf-8")


def iter_events(document: str) -> Iterator[ParseEvent]:
    """Iterate over the parse events of an XML document.

    Text is emitted before the event that follows it in the document, so
    children always arrive between their parent's StartTag and EndTag.

    Entities declared in an internal DTD subset are expanded into text;
    external entities are never loaded.

    Raises:
        lxml.etree.XMLSyntaxError: If the document is not well-formed.
        UnicodeEncodeError: If the text holds lone surrogates.
    """
    source = io.BytesIO(_prepare_document(document))
    pending: tuple[etree._Element, str] | None = None

    for action, node in etree.iterparse(
        source,
        events=("start", "end", "comment", "pi"),
        resolve_entities="internal",
        no_network=True,
        huge_tree=True,
    ):
        # Text preceding this event is complete now: either the text of the
        # previously opened element or the tail of the previously closed one.
        if pending is not None:
            owner, attr = pending
            text = getattr(owner, attr)
            if text:
                yield Text(text)

        if action == "start":
            yield StartTag(
                _qualified_name(node.tag, node.prefix),
                {_qualified_name(key): value for key, value in node.attrib.items()},
            )
            pending = (node, "text")
        elif action == "end":
            yield EndTag(_qualified_name(node.tag, node.prefix))
            pending = (node, "tail")
        else:
            pending = (node, "tail")
