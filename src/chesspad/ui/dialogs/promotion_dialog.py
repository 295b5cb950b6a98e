"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesspad.core.enums import PROMOTION_TYPES, Color, PieceType
from chesspad.core.piece import Piece
from chesspad.ui.styles.theme import piece_glyph


class PromotionDialog(QDialog):
    """Modal dialog to select promotion piece type.

    There is no default choice: closing the dialog yields ``None`` and the
    caller keeps the promotion open.
    """

    def __init__(
        self, color: Color, parent: QWidget | None = None, style: str = "Solid"
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setFixedSize(340, 130)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self.setWindowTitle("Promotion")

        self._selected: PieceType | None = None
        self._buttons: dict[PieceType, QPushButton] = {}

        layout = QVBoxLayout(self)
        self._label = QLabel(f"Promote {color} pawn to:")
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setFont(QFont("Adwaita Sans", 11))
        layout.addWidget(self._label)

        btn_row = QHBoxLayout()
        glyph_font = QFont("DejaVu Sans")
        glyph_font.setPixelSize(40)
        for pt in PROMOTION_TYPES:
            btn = QPushButton(piece_glyph(Piece(color, pt), style))
            btn.setFont(glyph_font)
            btn.setFixedSize(68, 68)
            btn.setToolTip(pt.name.capitalize())
            btn.clicked.connect(lambda checked, p=pt: self._choose(p))
            btn_row.addWidget(btn)
            self._buttons[pt] = btn

        layout.addLayout(btn_row)

    def _choose(self, piece_type: PieceType) -> None:
        self._selected = piece_type
        self.accept()

    @property
    def selected(self) -> PieceType | None:
        return self._selected

    def button(self, piece_type: PieceType) -> QPushButton:
        return self._buttons[piece_type]

    @staticmethod
    def ask(
        color: Color, parent: QWidget | None = None, style: str = "Solid"
    ) -> PieceType | None:
        """Show the dialog and return the chosen piece type, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent, style)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
