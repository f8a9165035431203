"""Image header sniffing.

Maps a picture payload to an ImageFormat, and an ImageFormat to its MIME
type. Both functions are total: they never raise.
"""

from io import BytesIO

from PIL import Image, UnidentifiedImageError
from PIL.Image import DecompressionBombError

from ._enums import ImageFormat


_PIL_FORMATS = {
    'JPEG': ImageFormat.JPEG,
    'GIF': ImageFormat.GIF,
    'PNG': ImageFormat.PNG,
    'BMP': ImageFormat.BMP,
    'TIFF': ImageFormat.TIFF,
    'WEBP': ImageFormat.WEBP,
}

_MIME_TYPES = {
    ImageFormat.JPEG: 'image/jpeg',
    ImageFormat.GIF: 'image/gif',
    ImageFormat.PNG: 'image/png',
    ImageFormat.BMP: 'image/bmp',
    ImageFormat.TIFF: 'image/tiff',
    ImageFormat.WEBP: 'image/webp',
}

_MIME_FALLBACK = 'image/*'


def detect_format(data):
    """Detect the container format of an image from its header.

    Pillow only parses the header here; pixels are never decoded.

    Args:
        data: Raw picture bytes (any length, including empty or None).

    Returns:
        An ImageFormat member. UNDEFINED when fewer than 3 bytes are
        available, UNSUPPORTED when the header is not recognized.
    """
    if data is None or len(data) < 3:
        return ImageFormat.UNDEFINED
    try:
        with Image.open(BytesIO(bytes(data))) as img:
            fmt = (img.format or '').upper()
    except (UnidentifiedImageError, DecompressionBombError, OSError,
            ValueError, SyntaxError):
        return ImageFormat.UNSUPPORTED
    return _PIL_FORMATS.get(fmt, ImageFormat.UNSUPPORTED)


def mime_type_for(image_format):
    """Return the MIME type for an ImageFormat ('image/*' if unknown)."""
    return _MIME_TYPES.get(image_format, _MIME_FALLBACK)
