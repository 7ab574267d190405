"""
Theme Builder - PassField
=========================

Builds the application stylesheet from semantic colors, typography
and the component styles.
"""

from constants import ObjectNames
from exceptions import ThemeError
from .semantic_colors import SemanticColors
from .typography import Typography
from .components import forms

AVAILABLE_THEMES = ("light", "dark")


class ThemeBuilder:
    """
    Build the complete stylesheet.

    Usage:
        >>> theme = ThemeBuilder("light", font_size=16, font_family="Inter")
        >>> stylesheet = theme.build()
        >>> app.setStyleSheet(stylesheet)
    """

    def __init__(
        self,
        theme_name: str = "light",
        font_size: int = 16,
        font_family: str = "Inter",
    ):
        """
        Args:
            theme_name: 'light' or 'dark'
            font_size: Base font size in pixels
            font_family: Font family name

        Raises:
            ThemeError: unknown theme name or non-positive font size
        """
        if theme_name not in AVAILABLE_THEMES:
            raise ThemeError(theme_name, f"expected one of {AVAILABLE_THEMES}", code="THEME_UNKNOWN")
        if font_size <= 0:
            raise ThemeError(theme_name, f"invalid font size {font_size}", code="THEME_FONT_SIZE")

        self.theme_name = theme_name
        self.font_size = font_size
        self.font_family = font_family

        self.colors = SemanticColors.get(theme_name)
        self.sizes = Typography.scale(font_size)

    def build(self) -> str:
        parts = [
            self._get_base_styles(),
            forms.get_styles(self),
        ]
        return "\n\n".join(parts)

    def _get_base_styles(self) -> str:
        c = self.colors
        s = self.sizes

        return f"""
        /* ========== BASE STYLES ========== */

        QWidget {{
            background-color: {c["bg_main"]};
            color: {c["content_xx_high"]};
            font-size: {s["body_medium"].size}px;
            font-family: '{self.font_family}', 'Segoe UI', Arial, sans-serif;
        }}

        QLabel {{
            background: transparent;
        }}

        QLabel#{ObjectNames.TITLE} {{
            font-size: {s["title_large"].size}px;
            font-weight: {s["title_large"].weight};
            color: {c["content_xx_high"]};
        }}
        """
