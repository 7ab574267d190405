"""
PassField Constants - Single Source of Truth
=============================================

Literal UI strings used by the password field.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""


class StatusText:
    """
    Status line shown above the input.

    Usage:
        from constants import StatusText
        label.setText(StatusText.ERROR)
    """

    ENABLED = "Enabled state"
    ERROR = "Error state"


class RuleHints:
    """
    Hint line per password rule, keyed by the PasswordValidationResult field.
    """

    LENGTH = "At least 8 characters"
    UPPERCASE = "One uppercase letter"
    NUMBER = "One number"
    SPECIAL = "One special character"

    BY_RULE = {
        "length_valid": LENGTH,
        "has_upper_case": UPPERCASE,
        "has_number": NUMBER,
        "has_special_char": SPECIAL,
    }

    BULLET = "•"


class FieldLabels:
    """Static texts of the input screen."""

    TITLE = "Text input"
    INPUT = "Input"
    OPTIONAL = "Optional"
    PLACEHOLDER = "Placeholder"


class ObjectNames:
    """
    Qt object names - the stylesheet selects on these.
    """

    TITLE = "title"
    STATUS = "field-status"
    LABEL = "field-label"
    LABEL_OPTIONAL = "field-label-optional"
    INPUT = "password-input"
    RULE_HINT = "rule-hint"
