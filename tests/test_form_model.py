"""
tests/test_form_model.py
==========================
Tests for core.form_model.PasswordFormModel (needs a QApplication).
"""
import logging

import pytest

from core.form_model import PasswordFormModel
from core.form_state import FieldStatus


@pytest.fixture
def model(qapp):
    return PasswordFormModel()


@pytest.fixture
def emitted(model):
    states = []
    model.state_changed.connect(states.append)
    return states


class TestPasswordFormModel:

    def test_starts_clean(self, model):
        assert model.password() == ""
        assert model.state().status is FieldStatus.CLEAN

    def test_set_password_emits_new_state(self, model, emitted):
        model.set_password("Password1")
        assert len(emitted) == 1
        assert emitted[0].password == "Password1"
        assert emitted[0].hints == ("One special character",)
        assert model.state() is emitted[0]

    def test_same_text_is_noop(self, model, emitted):
        model.set_password("abc")
        model.set_password("abc")
        assert len(emitted) == 1

    def test_type_then_clear(self, model, emitted):
        model.set_password("a")
        model.clear()
        assert [s.status for s in emitted] == [FieldStatus.INVALID, FieldStatus.CLEAN]
        assert model.state().is_error is False

    def test_none_treated_as_empty(self, model, emitted):
        model.set_password("a")
        model.set_password(None)
        assert model.password() == ""

    def test_each_edit_is_a_full_string(self, model):
        for text in ["P", "Pa", "Password1!"]:
            model.set_password(text)
        assert model.state().status is FieldStatus.VALID

    def test_password_never_logged(self, model, caplog):
        with caplog.at_level(logging.DEBUG, logger="core.form_model"):
            model.set_password("Secret#99x")
            model.set_password("s")
        assert "CLEAN -> VALID" in caplog.text
        assert "Secret#99x" not in caplog.text
