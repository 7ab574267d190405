"""
tests/conftest.py
=================
Shared pytest fixtures — offscreen Qt, isolated configuration.
"""
import os
import sys

# Must be set before any QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest


# ─── Qt application (session-scoped) ─────────────────────────────────────────

@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


# ─── Configuration isolation ─────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """
    Every test gets a Config that reads no real .env / settings.json
    and no PASSFIELD_* variables from the developer's shell.
    """
    from core.config import Config

    for key in list(os.environ):
        if key.startswith("PASSFIELD_"):
            monkeypatch.delenv(key)

    Config.clear_instance()
    Config._instance = Config(
        env_file=tmp_path / "missing.env",
        config_file=tmp_path / "missing.json",
    )
    yield
    Config.clear_instance()
