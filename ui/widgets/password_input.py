# -*- coding: utf-8 -*-
"""
ui/widgets/password_input.py
============================
Password field with live rule feedback:
  - Status line ("Enabled state" / "Error state")
  - "Input" label coloured like the outline, plus "Optional"
  - Masked line edit whose outline turns danger in the error state;
    placeholder coloured from the current theme
  - One "• hint" line per failing rule, only while in the error state

All decisions come from core.form_state; this widget only renders them.
"""
from typing import List

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit

from config.themes import SemanticColors, Spacing
from constants import FieldLabels, ObjectNames, RuleHints
from core.form_model import PasswordFormModel
from core.form_state import ColorRole, FormState
from core.theme_manager import ThemeManager


def _set_error_property(widget: QWidget, is_error: bool) -> None:
    # dynamic properties need a re-polish before the stylesheet notices
    widget.setProperty("error", "true" if is_error else "false")
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class PasswordInput(QWidget):

    def __init__(self, model: PasswordFormModel = None, parent=None):
        super().__init__(parent)
        self.model = model if model is not None else PasswordFormModel(self)
        self._hint_labels: List[QLabel] = []
        self.init_ui()

        self.edit_password.textChanged.connect(self.model.set_password)
        self.model.state_changed.connect(self.render_state)
        self.render_state(self.model.state())

        theme_manager = ThemeManager.get_instance()
        theme_manager.theme_changed.connect(self.apply_theme_colors)
        self.apply_theme_colors(theme_manager.get_current_theme())

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.XS)

        self.lbl_status = QLabel()
        self.lbl_status.setObjectName(ObjectNames.STATUS)
        layout.addWidget(self.lbl_status)

        row = QHBoxLayout()
        row.setSpacing(Spacing.L)
        self.lbl_input = QLabel(FieldLabels.INPUT)
        self.lbl_input.setObjectName(ObjectNames.LABEL)
        self.lbl_optional = QLabel(FieldLabels.OPTIONAL)
        self.lbl_optional.setObjectName(ObjectNames.LABEL_OPTIONAL)
        row.addWidget(self.lbl_input)
        row.addWidget(self.lbl_optional)
        row.addStretch()
        layout.addLayout(row)

        self.edit_password = QLineEdit()
        self.edit_password.setObjectName(ObjectNames.INPUT)
        self.edit_password.setEchoMode(QLineEdit.EchoMode.Password)
        self.edit_password.setPlaceholderText(FieldLabels.PLACEHOLDER)
        layout.addWidget(self.edit_password)

        self.hints_box = QWidget()
        self.hints_layout = QVBoxLayout(self.hints_box)
        self.hints_layout.setContentsMargins(0, Spacing.S - Spacing.XS, 0, 0)
        self.hints_layout.setSpacing(Spacing.M)
        layout.addWidget(self.hints_box)

        layout.addStretch()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render_state(self, state: FormState):
        is_error = state.color_role is ColorRole.ERROR

        self.lbl_status.setText(state.status_text)
        _set_error_property(self.lbl_input, is_error)
        _set_error_property(self.edit_password, is_error)
        self._render_hints(state.hints)

    def _render_hints(self, hints):
        for lbl in self._hint_labels:
            self.hints_layout.removeWidget(lbl)
            lbl.deleteLater()
        self._hint_labels = []

        for hint in hints:
            lbl = QLabel(f"{RuleHints.BULLET} {hint}")
            lbl.setObjectName(ObjectNames.RULE_HINT)
            self.hints_layout.addWidget(lbl)
            self._hint_labels.append(lbl)

        self.hints_box.setVisible(bool(hints))

    def apply_theme_colors(self, theme_name: str):
        # placeholder colour is a palette role; stylesheets cannot reach it
        colors = SemanticColors.get(theme_name)
        palette = self.edit_password.palette()
        palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(colors["content_medium"]))
        self.edit_password.setPalette(palette)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def hint_texts(self) -> List[str]:
        return [lbl.text() for lbl in self._hint_labels]

    def text(self) -> str:
        return self.edit_password.text()

    def set_text(self, text: str):
        self.edit_password.setText(text)

    def is_error(self) -> bool:
        return self.edit_password.property("error") == "true"
