"""
Components Package
==================

UI component styles for the PassField theme system.
"""

from . import forms

__all__ = [
    "forms",
]
