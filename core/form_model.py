"""
Password Form Model - PassField
===============================

Owns the single mutable password string and republishes the derived
FormState through a Qt signal.

Signals:
    state_changed(object): Emitted with the new FormState after every
                           change of the password text
"""
import logging

from PySide6.QtCore import QObject, Signal

from core.form_state import FormState, INITIAL_STATE, derive_form_state

logger = logging.getLogger(__name__)


class PasswordFormModel(QObject):
    """Holder of the password text; every edit recomputes the state synchronously."""

    state_changed = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._state: FormState = INITIAL_STATE

    def password(self) -> str:
        return self._state.password

    def state(self) -> FormState:
        return self._state

    def set_password(self, text: str) -> None:
        """
        Store the full current text and re-derive the state.

        Receives the whole string on every edit (never a diff). Setting the
        same text twice is a no-op and emits nothing.
        """
        text = text or ""
        if text == self._state.password:
            return

        previous = self._state.status
        self._state = derive_form_state(text)

        if self._state.status != previous:
            # never log the password itself
            logger.debug(
                f"Password field: {previous.name} -> {self._state.status.name} "
                f"({len(self._state.hints)} hints)"
            )

        self.state_changed.emit(self._state)

    def clear(self) -> None:
        self.set_password("")
