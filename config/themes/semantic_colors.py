"""
Semantic Color System - PassField
=================================

Maps raw palette values to the roles the password field uses.

    content_xx_high  label + outline in the normal state
    content_danger   label + outline in the error state
    content_warning  rule hint lines
    content_medium   placeholder text
"""

from .palettes import ColorPalette


class SemanticColors:

    @staticmethod
    def _from_palette(palette: dict) -> dict:
        return {
            # ========== Content ==========
            "content_xx_high": palette["gray_900"],
            "content_high": palette["gray_700"],
            "content_medium": palette["gray_500"],
            "content_danger": palette["red_600"],
            "content_warning": palette["amber_700"],

            # ========== Backgrounds ==========
            "bg_main": palette["surface"],
            "bg_input": palette["surface_input"],
            "bg_input_error": palette["red_50"],
        }

    @staticmethod
    def get_light():
        """Semantic colors for the LIGHT theme"""
        return SemanticColors._from_palette(ColorPalette.LIGHT)

    @staticmethod
    def get_dark():
        """Semantic colors for the DARK theme"""
        return SemanticColors._from_palette(ColorPalette.DARK)

    @classmethod
    def get(cls, theme_name: str):
        """Get semantic colors by theme name"""
        if theme_name.lower() == "dark":
            return cls.get_dark()
        return cls.get_light()
