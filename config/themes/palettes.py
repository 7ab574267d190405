"""
Color Palettes for PassField Themes
===================================

Contains raw color values organized by theme.
Use semantic_colors.py for named purposes.
"""

class ColorPalette:
    """
    Base color palettes for light and dark themes.

    Usage:
        >>> palette = ColorPalette.LIGHT
        >>> danger = palette["red_600"]
    """

    LIGHT = {
        # Neutrals
        "gray_500": "#6B7280",
        "gray_700": "#374151",
        "gray_900": "#111827",

        # Reds (Danger)
        "red_50": "#FEF2F2",
        "red_600": "#DC2626",

        # Ambers (Warning)
        "amber_700": "#B45309",

        # Surfaces
        "surface": "#FFFFFF",
        "surface_input": "#FFFFFF",
    }

    DARK = {
        # Neutrals - inverted
        "gray_500": "#9CA3AF",
        "gray_700": "#E5E7EB",
        "gray_900": "#F9FAFB",

        # Reds (Danger)
        "red_50": "#3B1212",
        "red_600": "#F87171",

        # Ambers (Warning)
        "amber_700": "#FBBF24",

        # Surfaces
        "surface": "#111827",
        "surface_input": "#1F2937",
    }
