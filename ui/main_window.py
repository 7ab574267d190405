"""
ui/main_window.py — PassField
==============================
Single screen: a bold "Text input" title above the password field.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from config.themes import Spacing
from constants import FieldLabels, ObjectNames
from ui.widgets.password_input import PasswordInput
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("MainWindow")
        self.setWindowTitle(f"{APP_NAME} {VERSION}")
        self.setMinimumSize(360, 480)
        self.init_ui()
        logger.debug("Main window created")

    def init_ui(self):
        central = QWidget()
        central.setObjectName("main_widget")
        layout = QVBoxLayout(central)
        layout.setContentsMargins(Spacing.L, Spacing.L, Spacing.L, Spacing.L)
        layout.setSpacing(Spacing.L)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        self.lbl_title = QLabel(FieldLabels.TITLE)
        self.lbl_title.setObjectName(ObjectNames.TITLE)
        layout.addWidget(self.lbl_title)

        self.password_input = PasswordInput(parent=central)
        layout.addWidget(self.password_input)

        self.setCentralWidget(central)
