"""
exceptions.py
=============
PassField — Hierarchical Exception System

All application exceptions inherit from PassFieldError so callers
can catch the full hierarchy with a single except clause when needed.

Password validation itself never raises: a failing rule is a normal
state of the form, not an error.

Structure
---------
PassFieldError
├── ConfigurationError
└── ThemeError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PassFieldError(Exception):
    """Base exception for all PassField errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "CONFIG_MISSING"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PassFieldError):
    """Raised when the application configuration is invalid or incomplete."""

    def __init__(self, message: str = "", *, key: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.key = key


# ─── Theme ───────────────────────────────────────────────────────────────────

class ThemeError(PassFieldError):
    """Raised when a stylesheet cannot be built or applied."""

    def __init__(self, theme_name: str = "", reason: str = "", **kwargs):
        msg = f"Theme '{theme_name}' could not be applied" if theme_name else "Theme could not be applied"
        if reason:
            msg += f": {reason}"
        super().__init__(msg, **kwargs)
        self.theme_name = theme_name
        self.reason = reason
