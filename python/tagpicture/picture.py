"""Embedded picture model.

An EmbeddedPicture describes one picture stored in an audio file's tag,
whatever tag dialect it came from. Two classifications coexist on every
picture: the dialect's own native code (an ID3v2 picture type byte, an
APEv2 item key, ...) and the cross-dialect generic PictureType.

Two comparisons are provided and must not be confused:

* ``==`` and ``hash()`` compare identity keys (see identity_key()). This is
  the contract dicts and sets rely on.
* equals_proper() tells whether two pictures are the same picture, matching
  on the native code within one dialect or on the generic type across
  dialects. Prefer it when deduplicating.
"""

import functools
import logging

from ._enums import ImageFormat, PictureType, TagType
from ._errors import InvalidArgumentError
from ._hashing import fnv1a_32
from ._imageutils import detect_format, mime_type_for
from ._nativecode import NativeCode

LOGGER = logging.getLogger(__name__)

# Shortest payload accepted as picture data
MIN_DATA_SIZE = 3

# Scales the tag type ordinal inside identity keys. Assumes small ordinals;
# no bound is enforced on native codes.
TAG_TYPE_MULTIPLIER = 10000000


def _strict_length(value, length):
    """Left-pad ``value`` with zeroes to ``length`` chars, truncating longer values."""
    return str(value).rjust(length, '0')[:length]


def _check_data(data):
    if data is None or len(data) < MIN_DATA_SIZE:
        raise InvalidArgumentError(
            f'picture data should not be None and be at least '
            f'{MIN_DATA_SIZE} bytes long')
    return data if isinstance(data, bytes) else bytes(data)


# ──────────────────────────────────────────────────────────────
# EmbeddedPicture
# ──────────────────────────────────────────────────────────────

@functools.total_ordering
class EmbeddedPicture:
    """A picture embedded in an audio tag.

    Attributes:
        pic_type: Generic PictureType (UNSUPPORTED if none applies).
        position: 1-based rank among pictures sharing the same type or
            native code within one tag.
        tag_type: TagType the native code belongs to (ANY if none).
        native_code_numeric: Numeric native code; -1 when the textual form
            is in use, 0 when unset.
        native_code_str: Textual native code, or None.
        description: Free text, not part of identity.
        content_hash: FNV-1a hash of the payload, 0 until compute_hash().
        marked_for_deletion: Set when the next tag write should drop the
            picture.
        transient_flag: Scratch value owned by the caller.
    """

    __slots__ = ('pic_type', 'position', 'tag_type', 'native_code_numeric',
                 'native_code_str', 'description', 'content_hash',
                 'marked_for_deletion', 'transient_flag',
                 '_data', '_native_format', '_warn')

    def __init__(self, pic_type=PictureType.UNSUPPORTED, position=1,
                 tag_type=TagType.ANY, native_code=None, data=None,
                 description='', warn=None):
        self._warn = warn if warn is not None else LOGGER.warning
        self.pic_type = PictureType.from_value(pic_type, PictureType.UNSUPPORTED)
        self.position = position
        self.tag_type = TagType.from_value(tag_type, int(tag_type))
        self._set_native_code(NativeCode.coerce(native_code, self._warn))
        self.description = description
        self.content_hash = 0
        self.marked_for_deletion = False
        self.transient_flag = 0
        if data is None:
            self._data = None
            self._native_format = ImageFormat.UNDEFINED
        else:
            self._data = _check_data(data)
            self._native_format = detect_format(self._data)

    # ── Alternate constructors ──

    @classmethod
    def from_binary_data(cls, data, pic_type=PictureType.GENERIC,
                         tag_type=TagType.ANY, native_code=None, position=1,
                         description='', warn=None):
        """Build a picture from its raw bytes.

        Raises:
            InvalidArgumentError: if ``data`` is None or shorter than 3 bytes.
        """
        data = _check_data(data)
        return cls(pic_type, position, tag_type, native_code, data,
                   description, warn)

    @classmethod
    def from_stream(cls, stream, length, pic_type, tag_type, native_code,
                    position=1, description='', warn=None):
        """Build a picture from ``length`` bytes read at the stream's position.

        A short read is zero-filled up to ``length`` and reported as a
        warning.

        Raises:
            InvalidArgumentError: if ``stream`` is None or ``length`` < 3.
        """
        if stream is None or length < MIN_DATA_SIZE:
            raise InvalidArgumentError(
                f'stream should not be None and at least {MIN_DATA_SIZE} '
                f'bytes should be read')
        data = stream.read(length)
        if len(data) < length:
            (warn if warn is not None else LOGGER.warning)(
                f'picture data truncated: expected {length} bytes, '
                f'read {len(data)}')
            data = bytes(data) + b'\x00' * (length - len(data))
        return cls(pic_type, position, tag_type, native_code, data,
                   description, warn)

    @classmethod
    def from_native_code(cls, tag_type, native_code, position=1, warn=None):
        """Build a payload-less picture known only by its native code."""
        return cls(PictureType.UNSUPPORTED, position, tag_type, native_code,
                   warn=warn)

    def copy(self, copy_data=True):
        """Return a copy of this picture.

        With ``copy_data`` the payload is duplicated into a new buffer;
        otherwise the copy shares this picture's payload object.
        """
        other = type(self).__new__(type(self))
        for klass in type(self).__mro__:
            slots = klass.__dict__.get('__slots__', ())
            if isinstance(slots, str):
                slots = (slots,)
            for attr in slots:
                if attr in ('__dict__', '__weakref__'):
                    continue
                if hasattr(self, attr):
                    setattr(other, attr, getattr(self, attr))
        if hasattr(self, '__dict__'):
            other.__dict__.update(self.__dict__)
        if copy_data and self._data is not None:
            # bytes(some_bytes) returns the very same object
            other._data = bytes(bytearray(self._data))
        return other

    def __copy__(self):
        return self.copy(copy_data=False)

    def __deepcopy__(self, memo):
        return self.copy()

    # ── Payload ──

    @property
    def data(self):
        """Raw picture bytes, or None if not attached yet."""
        return self._data

    @property
    def native_format(self):
        return self._native_format

    @property
    def mime_type(self):
        return mime_type_for(self._native_format)

    def attach_data(self, data):
        """Attach the payload to a picture built without one.

        Raises:
            InvalidArgumentError: if a payload is already attached, or
                ``data`` is None or shorter than 3 bytes.
        """
        if self._data is not None:
            raise InvalidArgumentError('picture data is already set')
        self._data = _check_data(data)
        self._native_format = detect_format(self._data)

    def compute_hash(self):
        """Hash the payload with FNV-1a, store it in content_hash and return it."""
        self.content_hash = fnv1a_32(self._data) if self._data is not None else 0
        return self.content_hash

    # ── Native code ──

    @property
    def native_code(self):
        if self.native_code_str is not None:
            return NativeCode.textual(self.native_code_str)
        if self.native_code_numeric:
            return NativeCode.numeric(self.native_code_numeric)
        return NativeCode.NONE

    def _set_native_code(self, code):
        if code.is_textual:
            self.native_code_str = code.value
            self.native_code_numeric = -1
        elif code.is_numeric:
            self.native_code_str = None
            self.native_code_numeric = code.value
        else:
            self.native_code_str = None
            self.native_code_numeric = 0

    # ── Equivalence ──

    def equals_proper(self, other):
        """Return True if ``other`` depicts the same picture.

        Positions must match, then either the native codes match within the
        same tag dialect or both generic types are equal and supported.
        """
        return (self.position == other.position
                and (self._equals_native(other) or self._equals_generic(other)))

    def _equals_native(self, other):
        if self.tag_type == TagType.ANY or self.tag_type != other.tag_type:
            return False
        if self.native_code_numeric > 0 and \
                self.native_code_numeric == other.native_code_numeric:
            return True
        return bool(self.native_code_str) and \
            self.native_code_str == other.native_code_str

    def _equals_generic(self, other):
        return (self.pic_type != PictureType.UNSUPPORTED
                and self.pic_type == other.pic_type)

    # ── Identity ──

    def identity_key(self):
        """Return the canonical key used for hashing, equality and ordering.

        Two-digit position, then the dialect-scaled native code when one is
        set, else 'T' and the two-digit generic type.
        """
        return _strict_length(self.position, 2) + self._value_key()

    def _value_key(self):
        tag = int(self.tag_type)
        if self.native_code_numeric > 0 and tag > 0:
            return f'{TAG_TYPE_MULTIPLIER * tag}N{self.native_code_numeric}'
        if self.native_code_str and tag > 0:
            return f'{TAG_TYPE_MULTIPLIER * tag}N{self.native_code_str}'
        if self.pic_type != PictureType.UNSUPPORTED:
            return 'T' + _strict_length(int(self.pic_type), 2)
        self._warn('unsupported picture detected, but no native picture '
                   'code found')
        return ''

    def __str__(self):
        return self.identity_key()

    def __hash__(self):
        return fnv1a_32(self.identity_key().encode('latin-1', 'replace'))

    def __eq__(self, other):
        if not isinstance(other, EmbeddedPicture):
            return NotImplemented
        if type(other) is not type(self):
            return False
        return self.identity_key() == other.identity_key()

    def __lt__(self, other):
        if not isinstance(other, EmbeddedPicture):
            return NotImplemented
        return self.identity_key() < other.identity_key()

    def __repr__(self):
        size = len(self._data) if self._data is not None else 0
        return (f'EmbeddedPicture(pic_type={self.pic_type!r}, '
                f'tag_type={self.tag_type!r}, native_code={self.native_code!r}, '
                f'position={self.position}, format={self._native_format!r}, '
                f'{size} bytes)')
