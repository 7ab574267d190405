"""
PassField Main Entry Point
==========================
Logging → configuration → QApplication → theme → main window.
"""
import sys
import os
import logging

# Hide noisy Qt platform warnings
os.environ.setdefault("QT_LOGGING_RULES", "qt.qpa.*=false;*.debug=false;qt.text.font.*=false")

from PySide6.QtWidgets import QApplication, QMessageBox

from core.config import get_log_level, validate_config
from core.logging_config import LoggingConfig
from exceptions import ConfigurationError
from version import APP_NAME

logger = logging.getLogger(__name__)


def main():
    # 1) Logging (LOG_LEVEL from the process environment until Config is read)
    LoggingConfig.setup_logging()
    LoggingConfig.cleanup_old_logs(days_to_keep=30)

    # 2) Application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    # 3) Configuration
    try:
        validate_config()
    except ConfigurationError as exc:
        logger.error(f"Startup aborted: {exc}")
        QMessageBox.critical(None, APP_NAME, f"Invalid configuration:\n\n{exc}")
        return 1
    LoggingConfig.set_level(get_log_level())

    # 4) Theme (falls back to Qt defaults if it cannot be applied)
    from core.theme_manager import ThemeManager
    if not ThemeManager.get_instance().apply_theme():
        logger.warning("Continuing with the default Qt style")

    # 5) Main window
    from ui.main_window import MainWindow
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
