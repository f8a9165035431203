"""Exception types raised by tagpicture."""


class PictureError(Exception):
    """Base class for picture errors."""


class InvalidArgumentError(PictureError, ValueError):
    """A caller passed a missing or too-short payload or stream request."""
