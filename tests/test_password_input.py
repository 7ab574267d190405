"""
tests/test_password_input.py
==============================
Widget tests for ui.widgets.password_input.PasswordInput (offscreen Qt).
"""
import pytest

from ui.widgets.password_input import PasswordInput
from ui.main_window import MainWindow


@pytest.fixture
def widget(qapp):
    w = PasswordInput()
    yield w
    w.deleteLater()


class TestPasswordInput:

    def test_initial_render_is_clean(self, widget):
        assert widget.lbl_status.text() == "Enabled state"
        assert widget.hint_texts() == []
        assert widget.hints_box.isHidden()
        assert widget.is_error() is False

    def test_static_labels(self, widget):
        assert widget.lbl_input.text() == "Input"
        assert widget.lbl_optional.text() == "Optional"
        assert widget.edit_password.placeholderText() == "Placeholder"

    def test_input_is_masked(self, widget):
        from PySide6.QtWidgets import QLineEdit
        assert widget.edit_password.echoMode() == QLineEdit.EchoMode.Password

    def test_invalid_password_shows_failed_rules(self, widget):
        widget.set_text("password")
        assert widget.lbl_status.text() == "Error state"
        assert widget.is_error() is True
        assert widget.lbl_input.property("error") == "true"
        assert widget.hint_texts() == [
            "• One uppercase letter",
            "• One number",
            "• One special character",
        ]
        assert not widget.hints_box.isHidden()

    def test_only_length_hint(self, widget):
        widget.set_text("P1!")
        assert widget.hint_texts() == ["• At least 8 characters"]

    def test_valid_password(self, widget):
        widget.set_text("Password1!")
        assert widget.lbl_status.text() == "Enabled state"
        assert widget.is_error() is False
        assert widget.hint_texts() == []
        assert widget.hints_box.isHidden()

    def test_hints_are_replaced_not_appended(self, widget):
        widget.set_text("a")
        widget.set_text("aA")
        assert widget.hint_texts() == [
            "• At least 8 characters",
            "• One number",
            "• One special character",
        ]

    def test_clearing_removes_error_styling(self, widget):
        widget.set_text("a")
        widget.set_text("")
        assert widget.is_error() is False
        assert widget.lbl_status.text() == "Enabled state"
        assert widget.hint_texts() == []

    def test_placeholder_color_follows_theme(self, widget):
        from PySide6.QtGui import QPalette
        from config.themes import SemanticColors
        from core.theme_manager import ThemeManager

        def placeholder_color():
            return widget.edit_password.palette().color(QPalette.ColorRole.PlaceholderText).name()

        light = SemanticColors.get_light()["content_medium"]
        dark = SemanticColors.get_dark()["content_medium"]
        assert light != dark

        widget.apply_theme_colors("light")
        assert placeholder_color() == light.lower()

        ThemeManager.get_instance().theme_changed.emit("dark")
        assert placeholder_color() == dark.lower()

    def test_model_follows_text(self, widget):
        widget.set_text("Password1")
        assert widget.model.password() == "Password1"
        assert widget.text() == "Password1"


class TestMainWindow:

    def test_title_and_field(self, qapp):
        window = MainWindow()
        assert window.lbl_title.text() == "Text input"
        assert isinstance(window.password_input, PasswordInput)
        window.deleteLater()
