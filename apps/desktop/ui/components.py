"""
Reusable UI components for the settings window.
"""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout


class Card(QFrame):
    """Card container with rounded corners and subtle styling."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("Card")
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(12)


class PrimaryButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("PrimaryButton")


class SecondaryButton(QPushButton):
    def __init__(self, text: str = "", parent=None):
        super().__init__(text, parent)
        self.setObjectName("SecondaryButton")


class PreviewPane(QFrame):
    """Fixed-width placeholder standing in for the app rail or the sidebar."""

    def __init__(self, object_name: str, caption: str, width: int, parent=None):
        super().__init__(parent)
        self.setObjectName(object_name)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 16, 8, 16)
        label = QLabel(caption)
        label.setObjectName("HintLabel")
        label.setWordWrap(True)
        layout.addWidget(label)
        layout.addStretch()
        self.set_width(width)

    def set_width(self, width: int) -> None:
        self.setFixedWidth(max(0, width))
