"""
Theme Manager - PassField
=========================

• Builds the stylesheet with ThemeBuilder (config/themes)
• Reads defaults from Config (.env / environment / settings.json)
• Safe QApplication handling
"""

import logging
from typing import Optional, Dict, Union
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QObject, Signal

from exceptions import ThemeError

logger = logging.getLogger(__name__)

# --------------------------------------------------
# Font size mapping
# --------------------------------------------------
FONT_SIZE_MAP: Dict[str, int] = {
    "small": 14,
    "medium": 16,
    "large": 18,
    "xlarge": 20,
}

# --------------------------------------------------
# Defaults
# --------------------------------------------------
DEFAULT_THEME = "light"
DEFAULT_FONT_SIZE = 16
DEFAULT_FONT_FAMILY = "Inter"


def resolve_font_size(value: Union[int, str, None]) -> int:
    """Map "small".."xlarge", a digit string or an int to pixels."""
    if value is None:
        return DEFAULT_FONT_SIZE
    if isinstance(value, int):
        return value
    value = str(value).strip().lower()
    if value.isdigit():
        return int(value)
    return FONT_SIZE_MAP.get(value, DEFAULT_FONT_SIZE)


class ThemeManager(QObject):
    """Centralized Theme Manager (one shared instance via get_instance())."""

    theme_changed = Signal(str)   # emitted after a theme is applied, carries its name

    _instance: Optional["ThemeManager"] = None

    def __init__(self) -> None:
        super().__init__()
        self.current_theme = DEFAULT_THEME
        self.current_font_size = DEFAULT_FONT_SIZE
        self.current_font_family = DEFAULT_FONT_FAMILY

    @classmethod
    def get_instance(cls) -> "ThemeManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    # --------------------------------------------------
    # Apply theme
    # --------------------------------------------------
    def apply_theme(
        self,
        theme_name: Optional[str] = None,
        font_size: Optional[Union[int, str]] = None,
        font_family: Optional[str] = None,
    ) -> bool:
        from core.config import Config
        from config.themes import ThemeBuilder, AVAILABLE_THEMES

        config = Config.get_instance()

        theme_name = theme_name or config.get_choice("PASSFIELD_THEME", AVAILABLE_THEMES, DEFAULT_THEME)
        font_family = font_family or config.get("PASSFIELD_FONT_FAMILY", DEFAULT_FONT_FAMILY)
        font_size = resolve_font_size(font_size or config.get("PASSFIELD_FONT_SIZE"))

        logger.info(f"Applying theme: {theme_name} | {font_family} {font_size}px")

        try:
            stylesheet = ThemeBuilder(
                theme_name=theme_name,
                font_size=font_size,
                font_family=font_family,
            ).build()

            app = QApplication.instance()
            if app is None:
                raise ThemeError(theme_name, "QApplication not initialized", code="THEME_NO_APP")

            app.setStyleSheet(stylesheet)

        except ThemeError:
            logger.exception("Theme application failed")
            return False

        self.current_theme = theme_name
        self.current_font_size = font_size
        self.current_font_family = font_family

        logger.info("Theme applied successfully")
        self.theme_changed.emit(theme_name)
        return True

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------
    def get_current_theme(self) -> str:
        return self.current_theme

    def get_current_font_size(self) -> int:
        return self.current_font_size

    def get_current_font_family(self) -> str:
        return self.current_font_family
