# core/__init__.py
"""
PassField Core Module
=====================

Public API:
    - Form state: derive_form_state, FormState, FieldStatus, ColorRole
    - Configuration: Config
    - Logging: LoggingConfig

Qt-backed pieces (PasswordFormModel, ThemeManager) are imported from
their own modules so the pure logic stays importable without PySide6.
"""

from .form_state import derive_form_state, FormState, FieldStatus, ColorRole
from .config import Config
from .logging_config import LoggingConfig

__all__ = [
    "derive_form_state",
    "FormState",
    "FieldStatus",
    "ColorRole",
    "Config",
    "LoggingConfig",
]

__version__ = "1.0.0"
