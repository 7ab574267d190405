"""
PassField Themes Module
=======================

Semantic colors, typography, spacing and the stylesheet builder.

Quick Start:
    >>> from config.themes import ThemeBuilder
    >>> theme = ThemeBuilder("light", font_size=16)
    >>> stylesheet = theme.build()
    >>> app.setStyleSheet(stylesheet)
"""

from .builder import ThemeBuilder, AVAILABLE_THEMES
from .palettes import ColorPalette
from .semantic_colors import SemanticColors
from .typography import Typography, TextStyle
from .spacing import Spacing
from .border_radius import BorderRadius

__all__ = [
    "ThemeBuilder",
    "AVAILABLE_THEMES",
    "ColorPalette",
    "SemanticColors",
    "Typography",
    "TextStyle",
    "Spacing",
    "BorderRadius",
]
