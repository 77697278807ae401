"""Centralized constants for Atom feed generation."""

from datetime import datetime, timezone

# =========================
# Namespace & document
# =========================
ATOM_NS: str = "http://www.w3.org/2005/Atom"
XML_HEADER: str = '<?xml version="1.0" encoding="UTF-8"?>'
OUTPUT_ENCODING: str = "UTF-8"
INDENT: str = " "

# =========================
# Element attributes
# =========================
LINK_REL_ALTERNATE: str = "alternate"
HTML_TEXT_TYPE: str = "html"

# =========================
# Dates
# =========================
# Stand-in for an unset pub_date when serializing an unvalidated feed
ZERO_DATETIME: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)
