"""Conversion tests between mutagen picture objects and EmbeddedPicture.

Uses mutagen's own frame and block classes, built in memory.
"""
import io

import pytest
from PIL import Image

from mutagen.apev2 import BINARY, TEXT, APEValue
from mutagen.flac import Picture
from mutagen.id3 import APIC, ID3, TIT2, Encoding
from mutagen.mp4 import AtomDataType, MP4Cover

from tagpicture import (
    EmbeddedPicture, ImageFormat, InvalidArgumentError, PictureType, TagType,
)
from tagpicture.frames import (
    from_apic, from_ape_value, from_flac_picture, from_mp4_cover,
    pictures_from_apev2, pictures_from_flac, pictures_from_id3,
    pictures_from_mp4, to_ape_item, to_apic, to_flac_picture, to_mp4_cover,
)


def make_image(fmt, size=(2, 2)):
    buf = io.BytesIO()
    Image.new('RGB', size, (200, 30, 30)).save(buf, fmt)
    return buf.getvalue()


JPEG = make_image('JPEG')
PNG = make_image('PNG')


def make_apic(pic_type=3, desc='', data=JPEG, mime='image/jpeg'):
    return APIC(encoding=Encoding.UTF8, mime=mime, type=pic_type,
                desc=desc, data=data)


def make_flac_picture(pic_type=3, desc='', data=JPEG):
    pic = Picture()
    pic.type = pic_type
    pic.mime = 'image/jpeg'
    pic.desc = desc
    pic.data = data
    return pic


# ──────────────────────────────────────────────────────────────
# ID3v2
# ──────────────────────────────────────────────────────────────

class TestID3:
    """APIC frames."""

    def test_from_apic(self):
        pic = from_apic(make_apic(3, desc='front'))
        assert pic.tag_type == TagType.ID3V2
        assert pic.native_code_numeric == 3
        assert pic.pic_type == PictureType.FRONT
        assert pic.description == 'front'
        assert pic.data == JPEG
        assert pic.native_format == ImageFormat.JPEG

    def test_from_apic_unmapped_code(self):
        pic = from_apic(make_apic(2))
        assert pic.pic_type == PictureType.UNSUPPORTED
        assert pic.identity_key() == '0120000000N2'

    def test_from_apic_too_short(self):
        with pytest.raises(InvalidArgumentError):
            from_apic(make_apic(data=b'\xff\xd8'))

    def test_pictures_from_id3_positions(self):
        tags = ID3()
        tags.add(TIT2(encoding=Encoding.UTF8, text=['title']))
        tags.add(make_apic(3, desc='a'))
        tags.add(make_apic(3, desc='b', data=PNG, mime='image/png'))
        tags.add(make_apic(4, desc='c'))
        pics = pictures_from_id3(tags)
        assert len(pics) == 3
        fronts = [p for p in pics if p.native_code_numeric == 3]
        backs = [p for p in pics if p.native_code_numeric == 4]
        assert sorted(p.position for p in fronts) == [1, 2]
        assert [p.position for p in backs] == [1]
        assert len(set(pics)) == 3

    def test_pictures_from_empty_id3(self):
        assert pictures_from_id3(ID3()) == []

    def test_to_apic_round_trip(self):
        pic = from_apic(make_apic(6, desc='disc'))
        frame = to_apic(pic)
        assert int(frame.type) == 6
        assert frame.mime == 'image/jpeg'
        assert frame.desc == 'disc'
        assert frame.data == JPEG
        back = from_apic(frame)
        assert back == pic
        assert back.equals_proper(pic)

    def test_to_apic_generic_with_dialect_but_no_code(self):
        pic = EmbeddedPicture.from_binary_data(JPEG, PictureType.FRONT, TagType.ID3V2)
        assert int(to_apic(pic).type) == 3

    def test_to_apic_other_type_round_trip(self):
        pic = from_apic(make_apic(0))
        assert pic.pic_type == PictureType.GENERIC
        assert int(to_apic(pic).type) == 0

    def test_to_apic_without_data(self):
        with pytest.raises(InvalidArgumentError):
            to_apic(EmbeddedPicture(PictureType.FRONT))

    def test_to_apic_from_generic(self):
        pic = EmbeddedPicture.from_binary_data(PNG, PictureType.CD)
        frame = to_apic(pic)
        assert int(frame.type) == 6
        assert frame.mime == 'image/png'

    def test_to_apic_from_other_dialect(self):
        pic = EmbeddedPicture.from_binary_data(
            JPEG, PictureType.BACK, TagType.APE, 'Cover Art (Back)')
        assert int(to_apic(pic).type) == 4


# ──────────────────────────────────────────────────────────────
# FLAC
# ──────────────────────────────────────────────────────────────

class TestFLAC:
    """FLAC picture blocks."""

    def test_from_flac_picture(self):
        pic = from_flac_picture(make_flac_picture(4, desc='back'))
        assert pic.tag_type == TagType.NATIVE
        assert pic.native_code_numeric == 4
        assert pic.pic_type == PictureType.BACK
        assert pic.description == 'back'

    def test_pictures_from_flac(self):
        pics = pictures_from_flac([
            make_flac_picture(3), make_flac_picture(3), make_flac_picture(8),
        ])
        assert [p.position for p in pics] == [1, 2, 1]

    def test_to_flac_picture(self):
        pic = EmbeddedPicture.from_binary_data(PNG, PictureType.ARTIST, description='me')
        block = to_flac_picture(pic)
        assert block.type == 8
        assert block.mime == 'image/png'
        assert block.desc == 'me'
        assert block.data == PNG

    def test_to_flac_picture_generic_with_dialect_but_no_code(self):
        pic = EmbeddedPicture.from_binary_data(JPEG, PictureType.FRONT, TagType.NATIVE)
        assert to_flac_picture(pic).type == 3

    def test_to_flac_picture_without_data(self):
        with pytest.raises(InvalidArgumentError):
            to_flac_picture(EmbeddedPicture.from_native_code(TagType.NATIVE, 3))

    def test_cross_dialect_equivalence(self):
        id3_pic = from_apic(make_apic(3))
        flac_pic = from_flac_picture(make_flac_picture(3, data=PNG))
        assert id3_pic.equals_proper(flac_pic)
        assert id3_pic != flac_pic


# ──────────────────────────────────────────────────────────────
# MP4
# ──────────────────────────────────────────────────────────────

class TestMP4:
    """MP4 'covr' items."""

    def test_from_mp4_cover(self):
        pic = from_mp4_cover(MP4Cover(JPEG))
        assert pic.tag_type == TagType.NATIVE
        assert pic.native_code_str == 'covr'
        assert pic.pic_type == PictureType.FRONT
        assert pic.data == JPEG

    def test_pictures_from_mp4(self):
        tags = {'covr': [
            MP4Cover(JPEG),
            MP4Cover(PNG, imageformat=MP4Cover.FORMAT_PNG),
        ]}
        pics = pictures_from_mp4(tags)
        assert [p.position for p in pics] == [1, 2]
        assert pics[1].native_format == ImageFormat.PNG

    def test_pictures_from_mp4_without_covers(self):
        assert pictures_from_mp4({}) == []

    def test_to_mp4_cover(self):
        cover = to_mp4_cover(EmbeddedPicture.from_binary_data(PNG, PictureType.FRONT))
        assert cover.imageformat == AtomDataType.PNG
        assert bytes(cover) == PNG

    def test_to_mp4_cover_unknown_format(self):
        cover = to_mp4_cover(EmbeddedPicture.from_binary_data(b'abcd', PictureType.FRONT))
        assert cover.imageformat == AtomDataType.JPEG

    def test_to_mp4_cover_without_data(self):
        with pytest.raises(InvalidArgumentError):
            to_mp4_cover(EmbeddedPicture(PictureType.FRONT))


# ──────────────────────────────────────────────────────────────
# APEv2
# ──────────────────────────────────────────────────────────────

class TestAPE:
    """APEv2 cover art items."""

    def test_from_ape_value(self):
        value = APEValue(b'cover.jpg\x00' + JPEG, BINARY)
        pic = from_ape_value('Cover Art (Front)', value)
        assert pic.tag_type == TagType.APE
        assert pic.native_code_str == 'Cover Art (Front)'
        assert pic.native_code_numeric == -1
        assert pic.pic_type == PictureType.FRONT
        assert pic.description == 'cover.jpg'
        assert pic.data == JPEG

    def test_from_ape_value_without_description(self):
        pic = from_ape_value('Cover Art (Back)', APEValue(b'\x00' + PNG, BINARY))
        assert pic.description == ''
        assert pic.data == PNG

    def test_pictures_from_apev2_skips_other_items(self):
        tags = {
            'Title': APEValue('a title', TEXT),
            'Cover Art (Front)': APEValue(b'f\x00' + JPEG, BINARY),
            'Cover Art (Back)': APEValue(b'b\x00' + PNG, BINARY),
        }
        pics = pictures_from_apev2(tags)
        assert sorted(p.pic_type for p in pics) == [PictureType.FRONT, PictureType.BACK]
        assert all(p.position == 1 for p in pics)

    def test_to_ape_item_round_trip(self):
        pic = from_ape_value('Cover Art (Front)', APEValue(b'x\x00' + JPEG, BINARY))
        key, value = to_ape_item(pic)
        assert key == 'Cover Art (Front)'
        assert value.kind == BINARY
        assert from_ape_value(key, value).equals_proper(pic)

    def test_to_ape_item_from_generic(self):
        pic = EmbeddedPicture.from_binary_data(JPEG, PictureType.LEAFLET)
        key, _ = to_ape_item(pic)
        assert key == 'Cover Art (Leaflet)'

    def test_to_ape_item_without_data(self):
        pic = EmbeddedPicture.from_native_code(TagType.APE, 'Cover Art (Front)')
        with pytest.raises(InvalidArgumentError):
            to_ape_item(pic)
