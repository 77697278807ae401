"""Generate Atom feeds (RFC 4287) and check them against the mandatory fields."""

from atomgen.exceptions import AtomGenError, FeedSerializationError
from atomgen.models import Author, Category, Entry, Feed
from atomgen.serializer import generate_xml
from atomgen.utils import gen_id

__all__ = [
    "AtomGenError",
    "FeedSerializationError",
    "Author",
    "Category",
    "Entry",
    "Feed",
    "generate_xml",
    "gen_id",
]
