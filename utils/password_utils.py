# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure password rule checks — zero Qt dependency.

Every predicate classifies characters through ``unicodedata.category`` so
that uppercase, letter and digit mean the same thing for all four rules,
on ASCII and non-ASCII input alike.
"""
import unicodedata
from dataclasses import dataclass
from typing import Tuple

MIN_PASSWORD_LENGTH = 8

# Rule order used everywhere hints are rendered
RULE_ORDER: Tuple[str, ...] = (
    "length_valid",
    "has_upper_case",
    "has_number",
    "has_special_char",
)


@dataclass(frozen=True)
class PasswordValidationResult:
    length_valid: bool
    has_upper_case: bool
    has_number: bool
    has_special_char: bool

    @property
    def all_valid(self) -> bool:
        return (
            self.length_valid
            and self.has_upper_case
            and self.has_number
            and self.has_special_char
        )

    def failed_rules(self) -> Tuple[str, ...]:
        """Names of the failing rules, in RULE_ORDER."""
        return tuple(rule for rule in RULE_ORDER if not getattr(self, rule))


def _is_upper(ch: str) -> bool:
    return unicodedata.category(ch) == "Lu"


def _is_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def _is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def validate_password(password: str) -> PasswordValidationResult:
    """
    Returns the four independent rule checks for ``password``.

      length_valid      len >= 8 (code points)
      has_upper_case    any char in category Lu
      has_number        any char in category Nd
      has_special_char  any char that is neither a letter nor a digit
                        (whitespace, punctuation, symbols, marks...)

    Never raises; an empty string fails every rule.

    Two choices are deliberate: length counts code points, not UTF-16
    units (an emoji is one character), and uppercase is category Lu only,
    so Other_Uppercase symbols such as "Ⓐ" (category So) count as special.
    """
    return PasswordValidationResult(
        length_valid=len(password) >= MIN_PASSWORD_LENGTH,
        has_upper_case=any(_is_upper(c) for c in password),
        has_number=any(_is_digit(c) for c in password),
        has_special_char=any(not (_is_letter(c) or _is_digit(c)) for c in password),
    )
