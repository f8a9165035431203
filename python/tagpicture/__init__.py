"""tagpicture - Embedded audio tag pictures with dialect-independent identity.

Models one picture embedded in an audio file's tag (ID3v2, APEv2, FLAC,
MP4, ...) with a canonical identity key, a content hash and a semantic
equivalence test, so pictures from different tag dialects can be compared,
deduplicated and used as dict keys.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("tagpicture")
except Exception:
    __version__ = "0.0.0"

version = tuple(int(x) for x in __version__.split('.')[:3])
version_string = __version__

from ._enums import ImageFormat, PictureType, TagType  # noqa: E402
from ._errors import InvalidArgumentError, PictureError  # noqa: E402
from ._hashing import fnv1a_32  # noqa: E402
from ._imageutils import detect_format, mime_type_for  # noqa: E402
from ._nativecode import NativeCode  # noqa: E402
from .picture import EmbeddedPicture  # noqa: E402

__all__ = [
    'EmbeddedPicture', 'NativeCode', 'PictureType', 'TagType', 'ImageFormat',
    'detect_format', 'mime_type_for', 'fnv1a_32',
    'PictureError', 'InvalidArgumentError',
    '__version__', 'version', 'version_string',
]
