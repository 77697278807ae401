import re
import logging
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import urlsplit, unquote

from atomgen.config import ZERO_DATETIME

log = logging.getLogger("atomgen.utils")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _as_aware(dt: Optional[datetime]) -> datetime:
    if dt is None:
        return ZERO_DATETIME
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def is_zero_date(dt: Optional[datetime]) -> bool:
    """True for an unset date or one equal to the zero datetime (0001-01-01 UTC)."""
    return _as_aware(dt) == ZERO_DATETIME


def format_rfc3339(dt: Optional[datetime]) -> str:
    """RFC 3339 timestamp with whole seconds; UTC is written as 'Z'."""
    out = _as_aware(dt).replace(microsecond=0).isoformat()
    if out.endswith("+00:00"):
        out = out[:-6] + "Z"
    return out


def format_tag_date(dt: Optional[datetime]) -> str:
    return _as_aware(dt).date().isoformat()


def _split_link(link: str):
    if _CONTROL_CHARS.search(link):
        raise ValueError(f"malformed link: {link!r}")
    u = urlsplit(link)
    # La query reste brute, seuls host, path et fragment sont vérifiés
    for part in (u.netloc, u.path, u.fragment):
        if _BAD_ESCAPE.search(part):
            raise ValueError(f"malformed escape in link: {link!r}")
    return u


def gen_id(entry: Any) -> str:
    """
    Build a stable tag: URI for an entry from its link and publication date:

        tag:<host>,<YYYY-MM-DD>:<path>[/<fragment>]

    A link that does not parse as a URL is returned unchanged.
    """
    link = entry.link or ""
    try:
        u = _split_link(link)
    except ValueError as e:
        log.debug("Lien non analysable, id brut utilisé: %s", e)
        return link

    host = u.netloc.rpartition("@")[2]
    path = unquote(u.path)
    out = f"tag:{host},{format_tag_date(entry.pub_date)}:{path}"
    if u.fragment:
        if not path.endswith("/"):
            out += "/"
        out += unquote(u.fragment)
    return out
