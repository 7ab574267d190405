"""
Spacing System
==============

Provides consistent spacing values (pixels).
"""

class Spacing:
    """
    Standard spacing scale.

    Usage:
        >>> layout.setContentsMargins(Spacing.L, Spacing.L, Spacing.L, Spacing.L)
        >>> padding = f"{Spacing.px('xs')} {Spacing.px('s')}"  # "8px 12px"
    """

    XS = 8
    S = 12
    M = 16
    L = 20

    @classmethod
    def get(cls, size: str) -> int:
        """
        Get spacing value by name.

        Example:
            >>> Spacing.get("m")
            16
        """
        size_upper = size.upper()
        if size_upper in ("XS", "S", "M", "L"):
            return getattr(cls, size_upper)
        return cls.M  # Default

    @classmethod
    def px(cls, size: str) -> str:
        return f"{cls.get(size)}px"
