import pytest

from bmfont.font import Channel, FontData, Glyph, Kerning
from bmfont.shape import Coordinates, Dimensions


def test_glyph_flat_views():
    glyph = Glyph(65, Coordinates(1, 2), Dimensions(3, 4), Coordinates(5, 6))
    assert (glyph.x, glyph.y, glyph.width, glyph.height) == (1, 2, 3, 4)
    assert (glyph.offset_x, glyph.offset_y) == (5, 6)

    glyph.x = 10
    glyph.height = 40
    glyph.offset_y = -2
    assert glyph.texture_coordinates == Coordinates(10, 2)
    assert glyph.texture_dimensions == Dimensions(3, 40)
    assert glyph.offset == Coordinates(5, -2)


def test_glyph_channel_flags():
    assert Glyph(1, channel=15).channel_flags == Channel.ALL
    flags = Glyph(1, channel=12).channel_flags
    assert Channel.RED in flags
    assert Channel.ALPHA in flags
    assert Channel.BLUE not in flags


def test_kerning_identity_is_pair():
    assert Kerning(1, 2, 5) == Kerning(1, 2, -5)
    assert Kerning(1, 2) != Kerning(2, 1)
    assert len({Kerning(1, 2, 5), Kerning(1, 2, -5)}) == 1


def test_glyph_table():
    font = FontData()
    font.add_glyph(Glyph(65, advance=1)).add_glyph(Glyph(66))
    font.add_glyph(Glyph(65, advance=2))
    assert font.codes == [65, 66]
    assert font.get_glyph(65).advance == 2
    assert font.get_glyph(67) is None

    font.remove_glyph(65)
    assert not font.has_glyph(65)
    font.clear_glyphs()
    assert font.glyphs == []


def test_kerning_collection():
    font = FontData()
    font.add_kerning(Kerning(1, 2, 3)).add_kerning(Kerning(1, 2, 4))
    assert font.kernings == [Kerning(1, 2)]
    assert font.kerning_amount(1, 2) == 4

    font.remove_kerning(1, 2)
    assert font.get_kerning(1, 2) is None


def test_pages():
    font = FontData()
    font.add_page(0, 'b.png').add_page(0, 'a.png').add_page(2, 'c.png')
    assert font.pages == ['a.png', 'b.png', 'c.png']

    font.remove_page('b.png')
    font.remove_page(0)
    assert font.pages == ['c.png']
    assert font.page_path(0) == 'c.png'

    font.clear_pages()
    assert font.pages == []


def test_page_out_of_range():
    font = FontData()
    with pytest.raises(IndexError):
        font.add_page(1, 'a.png')
    with pytest.raises(IndexError):
        font.add_page(-1, 'a.png')


def test_page_path_relative_to_font():
    font = FontData()
    font.filepath = 'fonts/arial.fnt'
    font.add_page(0, 'arial_0.png')
    assert font.page_path(0) == 'fonts/arial_0.png'


def test_clear_keeps_metadata():
    font = FontData()
    font.face = 'Arial'
    font.scale_w = 512
    font.add_glyph(Glyph(1))
    font.clear_glyphs().clear_kernings().clear_pages()
    assert font.face == 'Arial'
    assert font.scale == Dimensions(512, 0)


def test_negative_page_id_refused():
    font = FontData()
    font.add_page(0, 'a.png').add_page(1, 'b.png')
    for page_id in (-1, 2):
        with pytest.raises(IndexError):
            font.get_page(page_id)
        with pytest.raises(IndexError):
            font.page_path(page_id)
        with pytest.raises(IndexError):
            font.remove_page(page_id)
    assert font.pages == ['a.png', 'b.png']


def test_remove_unknown_page_name():
    font = FontData()
    font.add_page(0, 'a.png')
    font.remove_page('missing.png')
    assert font.pages == ['a.png']
