import pytest

from shellbar.icons import Icon, icon_text


def test_none_icon_has_no_glyph():
    assert Icon.NONE.glyph() == ""


def test_app_launcher_glyph():
    assert Icon.APP_LAUNCHER.glyph() == "󱗼"


def test_refresh_and_reboot_share_a_glyph():
    assert Icon.REFRESH.glyph() == Icon.REBOOT.glyph()


@pytest.mark.parametrize("name", [icon.name for icon in Icon if icon is not Icon.NONE])
def test_every_icon_is_a_single_character(name):
    glyph, _font = icon_text(Icon[name])
    assert len(glyph) == 1


@pytest.mark.parametrize("icon", list(Icon))
def test_icon_text_uses_symbol_font(icon):
    assert icon_text(icon) == (icon.glyph(), "Symbols Nerd Font")


def test_glyphs_are_distinct_apart_from_known_duplicate():
    glyphs = [icon_text(icon)[0] for icon in Icon if icon is not Icon.REBOOT]
    assert len(glyphs) > 1
    assert len(set(glyphs)) == len(glyphs)