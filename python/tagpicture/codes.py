"""Native picture code tables.

Translates between each dialect's own picture codes and the generic
PictureType:

* ID3v2 APIC frames and FLAC / Vorbis METADATA_BLOCK_PICTURE blocks share the
  same 0-20 numeric picture type byte.
* APEv2 stores pictures as binary items keyed 'Cover Art (...)'.
"""

from ._enums import PictureType


# ID3v2 / FLAC picture type byte -> generic type. Codes 7-20 keep their value.
_ID3_TO_GENERIC = {
    0: PictureType.GENERIC,
    1: PictureType.ICON,
    2: PictureType.UNSUPPORTED,  # "other file icon" has no generic role
    3: PictureType.FRONT,
    4: PictureType.BACK,
    5: PictureType.LEAFLET,
    6: PictureType.CD,
}
for _code in range(7, 21):
    _ID3_TO_GENERIC[_code] = PictureType.from_value(_code)
del _code

_GENERIC_TO_ID3 = {
    v: k for k, v in _ID3_TO_GENERIC.items() if v != PictureType.UNSUPPORTED
}

APE_PICTURE_KEYS = [
    'Cover Art (Other)', 'Cover Art (Icon)', 'Cover Art (Other Icon)',
    'Cover Art (Front)', 'Cover Art (Back)', 'Cover Art (Leaflet)',
    'Cover Art (Media)', 'Cover Art (Lead Artist)', 'Cover Art (Artist)',
    'Cover Art (Conductor)', 'Cover Art (Band)', 'Cover Art (Composer)',
    'Cover Art (Lyricist)', 'Cover Art (Recording Location)',
    'Cover Art (During Recording)', 'Cover Art (During Performance)',
    'Cover Art (Video Capture)', 'Cover Art (Fish)',
    'Cover Art (Illustration)', 'Cover Art (Band Logotype)',
    'Cover Art (Publisher Logotype)',
]

# APEv2 keys follow the ID3v2 code order
_APE_TO_GENERIC = {
    key.upper(): _ID3_TO_GENERIC[code]
    for code, key in enumerate(APE_PICTURE_KEYS)
}


def generic_from_id3(code):
    """Map an ID3v2/FLAC picture type byte to a generic PictureType."""
    try:
        return _ID3_TO_GENERIC.get(int(code), PictureType.UNSUPPORTED)
    except (TypeError, ValueError):
        return PictureType.UNSUPPORTED


def id3_from_generic(pic_type):
    """Map a generic PictureType to an ID3v2/FLAC picture type byte.

    Types with no ID3v2 counterpart encode as 0 ("other").
    """
    return _GENERIC_TO_ID3.get(pic_type, 0)


def is_ape_picture_key(key):
    """Return True if ``key`` names an APEv2 cover art item."""
    return key.upper() in _APE_TO_GENERIC


def generic_from_ape(key):
    """Map an APEv2 item key (any case) to a generic PictureType."""
    return _APE_TO_GENERIC.get(key.upper(), PictureType.UNSUPPORTED)


def ape_from_generic(pic_type):
    """Map a generic PictureType to its APEv2 item key."""
    return APE_PICTURE_KEYS[id3_from_generic(pic_type)]
