"""Native picture codes.

Every tag dialect labels its pictures with whatever code it naturally has:
ID3v2 and FLAC use a small integer, APEv2 uses the item key string. NativeCode
is the tagged variant holding one of those shapes (or none at all), and
NativeCode.coerce() is the single place where raw caller values are
normalized into it.
"""

NONE = 'none'
NUMERIC = 'numeric'
TEXTUAL = 'textual'


class NativeCode:
    """A dialect-specific picture code: none, numeric or textual."""

    __slots__ = ('kind', 'value')

    def __init__(self, kind, value=None):
        if kind not in (NONE, NUMERIC, TEXTUAL):
            raise ValueError(f'unknown native code kind: {kind!r}')
        self.kind = kind
        self.value = value

    @classmethod
    def numeric(cls, code):
        return cls(NUMERIC, int(code))

    @classmethod
    def textual(cls, code):
        return cls(TEXTUAL, str(code))

    @classmethod
    def coerce(cls, value, warn):
        """Normalize a raw native code supplied by a tag reader.

        Accepts a str, an int or a single byte. None means "no code".
        Any other shape yields NativeCode.NONE and reports one warning
        through ``warn``.
        """
        if isinstance(value, NativeCode):
            return value
        if value is None:
            return cls.NONE
        if isinstance(value, str):
            return cls.textual(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.numeric(value)
        if isinstance(value, (bytes, bytearray)) and len(value) == 1:
            return cls.numeric(value[0])
        warn('native picture code type is not supported; expected byte, '
             f'int or str; found {type(value).__name__}')
        return cls.NONE

    @property
    def is_numeric(self):
        return self.kind == NUMERIC

    @property
    def is_textual(self):
        return self.kind == TEXTUAL

    def __eq__(self, other):
        if not isinstance(other, NativeCode):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind == NONE:
            return 'NativeCode.NONE'
        return f'NativeCode.{self.kind}({self.value!r})'


NativeCode.NONE = NativeCode(NONE)
