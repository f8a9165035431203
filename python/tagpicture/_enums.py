"""Int-valued enumerations shared by the picture model.

Provides PictureType (the cross-dialect picture role taxonomy), TagType
(tag dialects) and ImageFormat (sniffed payload formats).
"""


# ──────────────────────────────────────────────────────────────
# Enum factory
# ──────────────────────────────────────────────────────────────

def _make_int_enum(name, members):
    """Create a simple int-enum class with named members."""

    class EnumMeta(type):
        def __iter__(cls):
            return iter(cls._members.values())
        def __contains__(cls, item):
            return item in cls._by_value
        def __len__(cls):
            return len(cls._members)

    class IntEnum(int, metaclass=EnumMeta):
        _name = ''
        _members = {}
        _by_value = {}
        def __new__(cls, val, mname=None):
            obj = int.__new__(cls, val)
            obj._name = mname or ''
            return obj
        def __repr__(self):
            return f'<{name}.{self._name}: {int(self)}>'
        def __str__(self):
            return f'{name}.{self._name}'

        @property
        def name(self):
            return self._name

        @classmethod
        def from_value(cls, val, default=None):
            """Return the member whose value is ``val``, or ``default``."""
            try:
                return cls._by_value.get(int(val), default)
            except (TypeError, ValueError):
                return default

    IntEnum.__name__ = name
    IntEnum.__qualname__ = name
    member_dict = {}
    for mname, mval in members:
        inst = IntEnum(mval, mname)
        setattr(IntEnum, mname, inst)
        member_dict[mname] = inst
    IntEnum._members = member_dict
    IntEnum._by_value = {int(m): m for m in member_dict.values()}
    return IntEnum


# ──────────────────────────────────────────────────────────────
# Enumerations
# ──────────────────────────────────────────────────────────────

# Generic picture roles, independent of the tag dialect they came from.
PictureType = _make_int_enum('PictureType', [
    ('UNSUPPORTED', 99), ('GENERIC', 1), ('FRONT', 2), ('BACK', 3),
    ('CD', 4), ('ICON', 5), ('LEAFLET', 6), ('LEAD_ARTIST', 7),
    ('ARTIST', 8), ('CONDUCTOR', 9), ('BAND', 10), ('COMPOSER', 11),
    ('LYRICIST', 12), ('RECORDING_LOCATION', 13),
    ('DURING_RECORDING', 14), ('DURING_PERFORMANCE', 15),
    ('MOVIE_CAPTURE', 16), ('FISHIE', 17), ('ILLUSTRATION', 18),
    ('BAND_LOGO', 19), ('PUBLISHER_LOGO', 20),
])

# ANY doubles as the "no dialect" sentinel.
TagType = _make_int_enum('TagType', [
    ('ANY', 0), ('ID3V1', 1), ('ID3V2', 2), ('APE', 3),
    ('NATIVE', 4), ('LYRICS3', 5),
])

ImageFormat = _make_int_enum('ImageFormat', [
    ('JPEG', 1), ('GIF', 2), ('PNG', 3), ('BMP', 4), ('TIFF', 5),
    ('WEBP', 6), ('UNDEFINED', 98), ('UNSUPPORTED', 99),
])
