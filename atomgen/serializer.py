"""Render a Feed as an Atom 1.0 document (RFC 4287)."""

import logging
from typing import Any, List

from lxml import etree
from lxml.builder import ElementMaker

from atomgen.config import (
    ATOM_NS,
    XML_HEADER,
    OUTPUT_ENCODING,
    INDENT,
    LINK_REL_ALTERNATE,
    HTML_TEXT_TYPE,
)
from atomgen.exceptions import FeedSerializationError
from atomgen.utils import format_rfc3339, gen_id

log = logging.getLogger("atomgen.serializer")

A = ElementMaker(namespace=ATOM_NS, nsmap={None: ATOM_NS})


def _link(href: str) -> etree._Element:
    return A.link(href=href, rel=LINK_REL_ALTERNATE)


def _author(author: Any) -> etree._Element:
    children = [A.name(author.name)]
    if author.email:
        children.append(A.email(author.email))
    if author.uri:
        children.append(A.uri(author.uri))
    return A.author(*children)


def _category(category: Any) -> etree._Element:
    attrs = {"term": category.term}
    if category.scheme:
        attrs["scheme"] = category.scheme
    if category.label:
        attrs["label"] = category.label
    return A.category(attrs)


def _entry(entry: Any) -> etree._Element:
    children: List[etree._Element] = [
        A.title(entry.title),
        _link(entry.link),
        A.updated(format_rfc3339(entry.pub_date)),
        A.id(gen_id(entry)),
    ]
    if entry.description:
        children.append(A.summary(entry.description, type=HTML_TEXT_TYPE))
    if entry.content:
        children.append(A.content(entry.content, type=HTML_TEXT_TYPE))
    children.extend(_author(a) for a in entry.authors)
    children.extend(_category(c) for c in entry.categories)
    return A.entry(*children)


def build_tree(feed: Any) -> etree._Element:
    """Build the <feed> element tree without serializing it."""
    children: List[etree._Element] = [
        A.title(feed.title),
        _link(feed.link),
        # L'id du feed réutilise son lien
        A.id(feed.link),
        A.updated(format_rfc3339(feed.pub_date)),
    ]
    children.extend(_author(a) for a in feed.authors)
    children.extend(_entry(e) for e in feed.entries)
    return A.feed(*children)


def generate_xml(feed: Any) -> bytes:
    """
    Serialize the feed to UTF-8 XML bytes, prefixed with the XML declaration
    and indented one space per level.

    Raises FeedSerializationError if a value cannot be rendered as XML. The
    feed is not validated first; call Feed.validate() for that.
    """
    try:
        root = build_tree(feed)
        etree.indent(root, space=INDENT)
        body = etree.tostring(root, encoding=OUTPUT_ENCODING, xml_declaration=False)
    except (ValueError, TypeError, KeyError, etree.LxmlError) as e:
        log.error("Échec de génération du feed %r: %s", getattr(feed, "title", ""), e)
        raise FeedSerializationError(f"Cannot serialize feed: {e}") from e

    data = XML_HEADER.encode(OUTPUT_ENCODING) + b"\n" + body
    log.debug("Feed généré: %d entrée(s), %d octets.", len(feed.entries), len(data))
    return data
