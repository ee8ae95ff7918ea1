"""
Design system theme module.
Turns the persisted theme/color/zoom settings into a QSS stylesheet.
"""

from __future__ import annotations

from typing import Dict, Literal

# Design tokens: spacing (8px grid)
SPACING = {
    "xs": "4px",
    "sm": "8px",
    "md": "12px",
    "lg": "16px",
    "xl": "24px",
}

# Font sizes in px at 100% zoom
FONT_SIZES = {
    "sm": 13,
    "base": 15,
    "lg": 17,
    "2xl": 28,
}

FONT_FAMILY = "Segoe UI, -apple-system, BlinkMacSystemFont, sans-serif"

# Accent per theme color name
COLOR_ACCENTS = {
    "default": "#3b82f6",
    "purple": "#8b5cf6",
    "green": "#10b981",
    "orange": "#f97316",
    "rose": "#f43f5e",
    "slate": "#64748b",
}

LIGHT_COLORS = {
    "background": "#F5F5F7",
    "surface": "#FFFFFF",
    "surface_secondary": "#F9F9F9",
    "text_primary": "#000000",
    "text_secondary": "#6E6E73",
    "text_tertiary": "#8E8E93",
    "border": "#E5E5EA",
    "border_light": "#F2F2F7",
}

DARK_COLORS = {
    "background": "#000000",
    "surface": "#1C1C1E",
    "surface_secondary": "#2C2C2E",
    "text_primary": "#FFFFFF",
    "text_secondary": "#98989D",
    "text_tertiary": "#636366",
    "border": "#38383A",
    "border_light": "#2C2C2E",
}

ThemeMode = Literal["light", "dark", "system"]


class Theme:
    """Stylesheet builder for one combination of mode, accent color and zoom.

    ``system`` follows ``system_dark``, which the caller reads from the
    platform. Unknown color names use the default accent and a zoom of zero
    or less means 100%.
    """

    def __init__(self, mode: str = "system", color: str = "default", zoom: int = 100, system_dark: bool = False):
        self.mode = mode
        if mode == "dark":
            self.is_dark = True
        elif mode == "light":
            self.is_dark = False
        else:
            self.is_dark = system_dark
        self.colors = DARK_COLORS if self.is_dark else LIGHT_COLORS
        self.accent = COLOR_ACCENTS.get(color, COLOR_ACCENTS["default"])
        self.scale = (zoom if zoom > 0 else 100) / 100

    def font_size(self, key: str) -> str:
        return f"{max(1, round(FONT_SIZES[key] * self.scale))}px"

    def font_sizes(self) -> Dict[str, str]:
        return {key: self.font_size(key) for key in FONT_SIZES}

    def get_stylesheet(self) -> str:
        """Generate complete QSS stylesheet for current settings."""
        colors = self.colors
        accent = self.accent
        fs = self.font_sizes()

        return f"""
        QMainWindow {{
            background-color: {colors["background"]};
            color: {colors["text_primary"]};
        }}

        QLabel {{
            font-family: {FONT_FAMILY};
            font-size: {fs["base"]};
            color: {colors["text_primary"]};
        }}

        QLabel#TitleLabel {{
            font-size: {fs["2xl"]};
            font-weight: 700;
        }}

        QLabel#SectionLabel {{
            font-size: {fs["lg"]};
            font-weight: 600;
        }}

        QLabel#HintLabel {{
            font-size: {fs["sm"]};
            color: {colors["text_secondary"]};
        }}

        QFrame#Card {{
            background-color: {colors["surface"]};
            border-radius: 16px;
            border: 1px solid {colors["border"]};
        }}

        QFrame#AppRail {{
            background-color: {colors["surface_secondary"]};
            border-right: 1px solid {colors["border"]};
        }}

        QFrame#Sidebar {{
            background-color: {colors["surface"]};
            border-right: 1px solid {colors["border"]};
        }}

        QPushButton#PrimaryButton {{
            background-color: {accent};
            color: #FFFFFF;
            border: none;
            border-radius: 20px;
            padding: {SPACING["sm"]} {SPACING["xl"]};
            font-family: {FONT_FAMILY};
            font-size: {fs["base"]};
            font-weight: 600;
            min-height: 36px;
        }}

        QPushButton#PrimaryButton:hover {{
            background-color: {self._adjust_brightness(accent, -10)};
        }}

        QPushButton#PrimaryButton:pressed {{
            background-color: {self._adjust_brightness(accent, -20)};
        }}

        QPushButton#SecondaryButton {{
            background-color: {colors["surface_secondary"]};
            color: {accent};
            border: 1px solid {colors["border"]};
            border-radius: 20px;
            padding: {SPACING["sm"]} {SPACING["xl"]};
            font-family: {FONT_FAMILY};
            font-size: {fs["base"]};
            font-weight: 500;
            min-height: 36px;
        }}

        QPushButton#SecondaryButton:hover {{
            background-color: {colors["border_light"]};
        }}

        QComboBox, QSpinBox {{
            background-color: {colors["surface"]};
            color: {colors["text_primary"]};
            border: 1px solid {colors["border"]};
            border-radius: 8px;
            padding: {SPACING["xs"]} {SPACING["sm"]};
            font-family: {FONT_FAMILY};
            font-size: {fs["base"]};
            min-height: 32px;
        }}

        QComboBox:focus, QSpinBox:focus {{
            border-color: {accent};
        }}

        QCheckBox {{
            font-family: {FONT_FAMILY};
            font-size: {fs["base"]};
            color: {colors["text_primary"]};
            spacing: {SPACING["sm"]};
        }}

        QCheckBox::indicator {{
            width: 20px;
            height: 20px;
            border-radius: 6px;
            border: 2px solid {colors["border"]};
            background-color: {colors["surface"]};
        }}

        QCheckBox::indicator:checked {{
            background-color: {accent};
            border-color: {accent};
        }}
        """

    def _adjust_brightness(self, hex_color: str, percent: int) -> str:
        """Adjust color brightness (simple approximation)."""
        hex_color = hex_color.lstrip("#")
        r, g, b = int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16)

        factor = 1 + (percent / 100)
        r = max(0, min(255, int(r * factor)))
        g = max(0, min(255, int(g * factor)))
        b = max(0, min(255, int(b * factor)))

        return f"#{r:02x}{g:02x}{b:02x}"
