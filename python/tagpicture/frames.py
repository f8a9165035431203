"""Conversion between mutagen picture objects and EmbeddedPicture.

Supports ID3v2 APIC frames, FLAC Picture blocks, MP4 'covr' items and
APEv2 cover art items. Containers are read and written by mutagen; this
module only converts the already parsed objects.
"""

import collections

from mutagen.apev2 import BINARY, APEValue
from mutagen.flac import Picture
from mutagen.id3 import APIC, Encoding
from mutagen.mp4 import AtomDataType, MP4Cover

from ._enums import ImageFormat, PictureType, TagType
from ._errors import InvalidArgumentError
from .codes import (
    ape_from_generic, generic_from_ape, generic_from_id3, id3_from_generic,
    is_ape_picture_key,
)
from .picture import EmbeddedPicture

# Native code given to MP4 cover items
MP4_COVER_CODE = 'covr'

_MP4_IMAGE_FORMATS = {
    ImageFormat.JPEG: AtomDataType.JPEG,
    ImageFormat.PNG: AtomDataType.PNG,
    ImageFormat.GIF: AtomDataType.GIF,
    ImageFormat.BMP: AtomDataType.BMP,
}


def _rank(pictures):
    """Number pictures sharing the same identity from 1, in tag order."""
    seen = collections.Counter()
    for pic in pictures:
        key = pic.identity_key()
        seen[key] += 1
        pic.position = seen[key]
    return pictures


def _require_data(picture):
    if picture.data is None:
        raise InvalidArgumentError('picture has no data to serialize')
    return picture.data


def _id3_code(picture, tag_type):
    if picture.tag_type == tag_type and picture.native_code_numeric > 0:
        return picture.native_code_numeric
    return id3_from_generic(picture.pic_type)


# ──────────────────────────────────────────────────────────────
# Reading
# ──────────────────────────────────────────────────────────────

def from_apic(frame, position=1, warn=None):
    """Build an EmbeddedPicture from an ID3v2 APIC frame."""
    code = int(frame.type)
    return EmbeddedPicture.from_binary_data(
        frame.data, generic_from_id3(code), TagType.ID3V2, code, position,
        description=frame.desc, warn=warn)


def from_flac_picture(picture, position=1, warn=None):
    """Build an EmbeddedPicture from a FLAC picture block."""
    code = int(picture.type)
    return EmbeddedPicture.from_binary_data(
        picture.data, generic_from_id3(code), TagType.NATIVE, code, position,
        description=picture.desc, warn=warn)


def from_mp4_cover(cover, position=1, warn=None):
    """Build an EmbeddedPicture from an MP4Cover."""
    return EmbeddedPicture.from_binary_data(
        bytes(cover), PictureType.FRONT, TagType.NATIVE, MP4_COVER_CODE,
        position, warn=warn)


def from_ape_value(key, value, position=1, warn=None):
    """Build an EmbeddedPicture from an APEv2 cover art item.

    The binary value holds a NUL-terminated description followed by the
    picture bytes.
    """
    raw = getattr(value, 'value', value)
    desc, sep, data = bytes(raw).partition(b'\x00')
    if not sep:
        desc, data = b'', desc
    return EmbeddedPicture.from_binary_data(
        data, generic_from_ape(key), TagType.APE, key, position,
        description=desc.decode('utf-8', 'replace'), warn=warn)


def pictures_from_id3(tags, warn=None):
    """Return the pictures of an ID3 tag, positions assigned."""
    return _rank([from_apic(f, warn=warn) for f in tags.getall('APIC')])


def pictures_from_flac(pictures, warn=None):
    """Return EmbeddedPictures for a list of FLAC pictures."""
    return _rank([from_flac_picture(p, warn=warn) for p in pictures])


def pictures_from_mp4(tags, warn=None):
    """Return the 'covr' pictures of MP4 tags."""
    covers = tags.get(MP4_COVER_CODE) or []
    return _rank([from_mp4_cover(c, warn=warn) for c in covers])


def pictures_from_apev2(tags, warn=None):
    """Return the cover art items of an APEv2 tag."""
    result = []
    for key, value in tags.items():
        if not is_ape_picture_key(key):
            continue
        if getattr(value, 'kind', BINARY) != BINARY:
            continue
        result.append(from_ape_value(key, value, warn=warn))
    return _rank(result)


# ──────────────────────────────────────────────────────────────
# Writing
# ──────────────────────────────────────────────────────────────

def to_apic(picture):
    """Serialize an EmbeddedPicture to an ID3v2 APIC frame."""
    data = _require_data(picture)
    return APIC(encoding=Encoding.UTF8, mime=picture.mime_type,
                type=_id3_code(picture, TagType.ID3V2),
                desc=picture.description, data=data)


def to_flac_picture(picture):
    """Serialize an EmbeddedPicture to a FLAC picture block."""
    data = _require_data(picture)
    pic = Picture()
    pic.type = _id3_code(picture, TagType.NATIVE)
    pic.mime = picture.mime_type
    pic.desc = picture.description
    pic.data = data
    return pic


def to_mp4_cover(picture):
    """Serialize an EmbeddedPicture to an MP4Cover (JPEG if unknown)."""
    data = _require_data(picture)
    imageformat = _MP4_IMAGE_FORMATS.get(picture.native_format,
                                         AtomDataType.JPEG)
    return MP4Cover(data, imageformat=imageformat)


def to_ape_item(picture):
    """Serialize an EmbeddedPicture to an APEv2 (key, value) pair."""
    data = _require_data(picture)
    if picture.tag_type == TagType.APE and picture.native_code_str:
        key = picture.native_code_str
    else:
        key = ape_from_generic(picture.pic_type)
    raw = picture.description.encode('utf-8') + b'\x00' + data
    return key, APEValue(raw, BINARY)
