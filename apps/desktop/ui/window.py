"""
Settings window. Every read and write goes through the config commands.
"""

from __future__ import annotations

import logging
from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QFormLayout,
    QLabel,
    QComboBox,
    QCheckBox,
    QSpinBox,
)

from packages.shared.config import AppConfig, THEME_MODES
from apps.desktop.config_client import ConfigClient

from .theme import Theme, COLOR_ACCENTS
from .components import Card, PrimaryButton, SecondaryButton, PreviewPane

log = logging.getLogger(__name__)

APP_RAIL_WIDTH = 48
SIDEBAR_MIN_WIDTH = 200
SIDEBAR_MAX_WIDTH = 400


def _system_prefers_dark() -> bool:
    hints = QGuiApplication.styleHints()
    return hints.colorScheme() == Qt.ColorScheme.Dark


class MainWindow(QMainWindow):
    def __init__(self, client: ConfigClient) -> None:
        super().__init__()
        self.setWindowTitle("Next AI")
        self.resize(1000, 680)
        self.setMinimumSize(760, 520)

        self.client = client
        self.cfg: AppConfig = self.client.load()

        self._build_ui()
        self._load_to_ui()
        self._apply_config()

    def _build_ui(self) -> None:
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self.app_rail = PreviewPane("AppRail", "Apps", APP_RAIL_WIDTH)
        self.sidebar = PreviewPane("Sidebar", "Conversations", self.cfg.sidebar_width)
        root_layout.addWidget(self.app_rail)
        root_layout.addWidget(self.sidebar)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(24, 24, 24, 24)
        content_layout.setSpacing(16)

        title = QLabel("Settings")
        title.setObjectName("TitleLabel")
        content_layout.addWidget(title)

        card = Card()
        section = QLabel("Appearance")
        section.setObjectName("SectionLabel")
        card.layout.addWidget(section)

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignLeft)

        self.cmb_theme = QComboBox()
        self.cmb_theme.addItems(list(THEME_MODES))
        form.addRow("Theme", self.cmb_theme)

        # Editable: the color is a free-form identifier.
        self.cmb_color = QComboBox()
        self.cmb_color.setEditable(True)
        self.cmb_color.addItems(list(COLOR_ACCENTS))
        form.addRow("Color", self.cmb_color)

        self.spin_zoom = QSpinBox()
        self.spin_zoom.setRange(50, 200)
        self.spin_zoom.setSingleStep(10)
        self.spin_zoom.setSuffix(" %")
        form.addRow("Zoom", self.spin_zoom)

        self.chk_app_rail = QCheckBox("Show app rail")
        form.addRow("", self.chk_app_rail)

        self.chk_sidebar = QCheckBox("Sidebar open")
        form.addRow("", self.chk_sidebar)

        self.spin_sidebar_width = QSpinBox()
        self.spin_sidebar_width.setRange(SIDEBAR_MIN_WIDTH, SIDEBAR_MAX_WIDTH)
        self.spin_sidebar_width.setSuffix(" px")
        form.addRow("Sidebar width", self.spin_sidebar_width)

        card.layout.addLayout(form)

        buttons = QHBoxLayout()
        self.btn_save = PrimaryButton("Save")
        self.btn_save.clicked.connect(self._save_config)
        self.btn_reset = SecondaryButton("Reset")
        self.btn_reset.clicked.connect(self._reset_config)
        buttons.addWidget(self.btn_save)
        buttons.addWidget(self.btn_reset)
        buttons.addStretch()
        card.layout.addLayout(buttons)

        content_layout.addWidget(card)

        self.lbl_path = QLabel()
        self.lbl_path.setObjectName("HintLabel")
        self.lbl_path.setTextInteractionFlags(Qt.TextSelectableByMouse)
        content_layout.addWidget(self.lbl_path)

        self.lbl_status = QLabel()
        self.lbl_status.setObjectName("HintLabel")
        content_layout.addWidget(self.lbl_status)
        content_layout.addStretch()

        root_layout.addWidget(content, 1)
        self.setCentralWidget(root)

    def _load_to_ui(self) -> None:
        """Load configuration into UI elements."""
        theme = self.cfg.theme if self.cfg.theme in THEME_MODES else "system"
        self.cmb_theme.setCurrentText(theme)
        self.cmb_color.setCurrentText(self.cfg.color or "default")
        self.spin_zoom.setValue(self.cfg.zoom or 100)
        self.chk_app_rail.setChecked(self.cfg.show_app_rail)
        self.chk_sidebar.setChecked(self.cfg.sidebar_open)
        self.spin_sidebar_width.setValue(self.cfg.sidebar_width)

        path = self.client.get_path()
        self.lbl_path.setText(f"Config file: {path}" if path else "Config file: unavailable")

    def _apply_config(self) -> None:
        theme = Theme(
            mode=self.cfg.theme,
            color=self.cfg.color,
            zoom=self.cfg.zoom,
            system_dark=_system_prefers_dark(),
        )
        self.setStyleSheet(theme.get_stylesheet())
        self.app_rail.setVisible(self.cfg.show_app_rail)
        self.sidebar.setVisible(self.cfg.sidebar_open)
        self.sidebar.set_width(self.cfg.sidebar_width)

    def _save_config(self) -> None:
        """Save configuration."""
        ok = self.client.save(
            theme=self.cmb_theme.currentText(),
            color=self.cmb_color.currentText().strip(),
            zoom=int(self.spin_zoom.value()),
            show_app_rail=self.chk_app_rail.isChecked(),
            sidebar_open=self.chk_sidebar.isChecked(),
            sidebar_width=int(self.spin_sidebar_width.value()),
        )
        if not ok:
            self.lbl_status.setText("Could not save settings. See the log for details.")
            return

        self.cfg = self.client.load()
        self._apply_config()
        self.lbl_status.setText("Settings saved.")
        log.info("Settings saved")

    def _reset_config(self) -> None:
        if not self.client.delete():
            self.lbl_status.setText("Could not reset settings. See the log for details.")
            return

        self.cfg = self.client.load()
        self._load_to_ui()
        self._apply_config()
        self.lbl_status.setText("Settings reset.")
        log.info("Settings reset")
