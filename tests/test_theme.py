from __future__ import annotations

from apps.desktop.ui.theme import COLOR_ACCENTS, DARK_COLORS, LIGHT_COLORS, Theme


def test_explicit_modes() -> None:
    assert Theme("dark").colors is DARK_COLORS
    assert Theme("light", system_dark=True).colors is LIGHT_COLORS


def test_system_and_unknown_modes_follow_platform() -> None:
    assert Theme("system", system_dark=True).is_dark
    assert not Theme("system", system_dark=False).is_dark
    assert Theme("", system_dark=True).is_dark


def test_color_accent() -> None:
    assert Theme(color="rose").accent == COLOR_ACCENTS["rose"]
    assert Theme(color="blue").accent == COLOR_ACCENTS["default"]
    assert Theme(color="").accent == COLOR_ACCENTS["default"]


def test_zoom_scales_fonts() -> None:
    assert Theme(zoom=100).font_size("base") == "15px"
    assert Theme(zoom=200).font_size("base") == "30px"
    assert Theme(zoom=0).font_size("base") == "15px"


def test_stylesheet_uses_settings() -> None:
    qss = Theme("dark", color="green", zoom=150).get_stylesheet()
    assert COLOR_ACCENTS["green"] in qss
    assert DARK_COLORS["background"] in qss
    assert "font-size: 42px" in qss
