"""ControlPanel — game action buttons and turn indicator."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from chesspad.core.enums import Color


class ControlPanel(QWidget):
    """Turn label plus buttons for reset and flip."""

    reset_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        btn_font = QFont("Adwaita Sans", 10)

        row = QHBoxLayout()
        self._btn_reset = QPushButton("Reset")
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        row.addWidget(self._btn_reset)

        self._btn_flip = QPushButton("Flip board")
        self._btn_flip.setFont(btn_font)
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        row.addWidget(self._btn_flip)
        layout.addLayout(row)

        self.set_turn(Color.WHITE)

    def set_turn(self, color: Color, promoting: bool = False) -> None:
        """Show whose move it is; a pending promotion still belongs to *color*."""
        text = f"Turn: {color.name.capitalize()}"
        if promoting:
            text += " (promoting)"
        self._turn_label.setText(text)

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()
