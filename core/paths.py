"""
core/paths.py — PassField
==========================
Single source of truth for every path the application touches.

  - BASE_DIR / config_path() → read-only application files (config)
    - development: project root
    - frozen (PyInstaller): sys._MEIPASS

  - get_user_data_dir() → writable user data (logs)
    - Windows: %APPDATA%/PassField/
    - Linux/Mac: ~/.local/share/PassField/

Usage:
    from core.paths import config_path, logs_path

    settings = config_path("settings.json")
    log_dir = logs_path()
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys._MEIPASS)
else:
    # core/paths.py → project root
    BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Writable per-user data directory, created on first use.

    Windows : %APPDATA%/PassField/
    Linux   : ~/.local/share/PassField/
    Mac     : ~/.local/share/PassField/
    """
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            appdata = str(Path.home() / "AppData" / "Roaming")
        base = Path(appdata)
    else:
        base = Path.home() / ".local" / "share"

    user_dir = base / APP_NAME
    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p
