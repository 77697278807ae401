class AtomGenError(Exception):
    """Base class for errors raised by atomgen."""


class FeedSerializationError(AtomGenError):
    """Raised when a feed cannot be rendered to XML."""
