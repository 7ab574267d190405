"""
Border Radius System
====================

Provides consistent border radius values.
"""

class BorderRadius:
    """
    Usage:
        >>> BorderRadius.INPUT  # "12px"
    """

    INPUT = "12px"
