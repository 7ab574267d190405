"""
Typography Scale System
=======================

Named text styles shared by the stylesheet and the widgets.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TextStyle:
    size: int          # px
    weight: int        # CSS weight, 100-900
    line_height: int   # px


class Typography:
    """
    Text styles relative to a base size (16px by default).

    Usage:
        >>> styles = Typography.scale(16)
        >>> styles["label_small"].size
        14
    """

    @staticmethod
    def scale(base_size: int = 16) -> dict:
        return {
            "label_small": TextStyle(base_size - 2, 550, base_size + 1),
            "body_medium": TextStyle(base_size, 400, base_size + 6),
            "title_large": TextStyle(base_size + 6, 700, base_size + 12),
        }
