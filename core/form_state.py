"""
Form State - PassField
======================

Derives everything the password field shows from the current text.

    derive_form_state("")           -> CLEAN   (no styling, no hints)
    derive_form_state("Password1!") -> VALID
    derive_form_state("Password1")  -> INVALID (hint: "One special character")

Pure Python, no Qt: the widget only calls derive_form_state() on every
text change and renders the result.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from constants import RuleHints, StatusText
from utils.password_utils import PasswordValidationResult, validate_password


class FieldStatus(str, Enum):
    CLEAN = "clean"
    VALID = "valid"
    INVALID = "invalid"


class ColorRole(str, Enum):
    """Two-valued selector for label and outline colours."""
    NORMAL = "normal"
    ERROR = "error"


@dataclass(frozen=True)
class FormState:
    password: str
    validation: PasswordValidationResult

    @property
    def has_started_typing(self) -> bool:
        return self.password != ""

    @property
    def is_error(self) -> bool:
        return self.has_started_typing and not self.validation.all_valid

    @property
    def status(self) -> FieldStatus:
        if not self.has_started_typing:
            return FieldStatus.CLEAN
        return FieldStatus.INVALID if self.is_error else FieldStatus.VALID

    @property
    def status_text(self) -> str:
        return StatusText.ERROR if self.is_error else StatusText.ENABLED

    @property
    def color_role(self) -> ColorRole:
        return ColorRole.ERROR if self.is_error else ColorRole.NORMAL

    @property
    def hints(self) -> Tuple[str, ...]:
        # Clean/valid states never show hints, whatever the validation says
        if not self.is_error:
            return ()
        return tuple(RuleHints.BY_RULE[rule] for rule in self.validation.failed_rules())


def derive_form_state(password: str) -> FormState:
    """Build a fresh FormState for ``password``; total and side-effect free."""
    return FormState(password=password, validation=validate_password(password))


INITIAL_STATE = derive_form_state("")
