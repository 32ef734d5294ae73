import string

import pytest

from ohmimetro.font import FONT, glyph


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


def test_letter_a_matches_table():
    assert glyph("A") == bytes((0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00))


def test_tilde_is_last_entry():
    assert glyph("~") == FONT[-8:]


def test_table_covers_printable_range():
    joined = b"".join(glyph(chr(code)) for code in range(ord(" "), ord("~") + 1))
    assert joined == bytes(FONT)


@pytest.mark.parametrize("char", ["\n", "\t", "\x7f", "é", "\x00"])
def test_unprintable_falls_back_to_space(char):
    assert glyph(char) == glyph(" ")


def test_every_printable_glyph_has_eight_columns():
    chars = string.ascii_letters + string.digits + string.punctuation
    assert all(len(glyph(c)) == 8 for c in chars)


def test_visible_characters_are_not_blank():
    chars = string.ascii_letters + string.digits + string.punctuation
    blank = [c for c in chars if glyph(c) == bytes(8)]
    assert blank == []


def test_glyphs_are_distinct_for_letters():
    glyphs = {glyph(c) for c in string.ascii_uppercase}
    assert len(glyphs) == 26


@pytest.mark.parametrize("bad", ["", "AB"])
def test_requires_single_character(bad):
    with pytest.raises(ValueError):
        glyph(bad)