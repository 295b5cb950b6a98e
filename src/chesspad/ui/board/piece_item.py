"""PieceItem — a chess piece drawn as a Unicode glyph."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chesspad.core.enums import Color
from chesspad.core.piece import Piece
from chesspad.core.types import Square
from chesspad.ui.styles.theme import piece_glyph

_FILL: dict[Color, QColor] = {
    Color.WHITE: QColor(250, 250, 250),
    Color.BLACK: QColor(25, 25, 25),
}
_OUTLINE: dict[Color, QColor] = {
    Color.WHITE: QColor(30, 30, 30),
    Color.BLACK: QColor(230, 230, 230, 140),
}
_INK = QColor(25, 25, 25)


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square*; the scene handles all interaction.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self, piece: Piece, square: Square, tile_size: int, style: str = "Solid"
    ) -> None:
        super().__init__(piece_glyph(piece, style))
        self.piece = piece
        self.square = square
        self.style = style
        self._tile_size = tile_size

        if style == "Outline":
            # The glyph shape already tells the sides apart.
            self.setBrush(QBrush(_INK))
            self.setPen(QPen(Qt.PenStyle.NoPen))
        else:
            self.setBrush(QBrush(_FILL[piece.color]))
            self.setPen(QPen(_OUTLINE[piece.color], 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(tile_size * self._FONT_RATIO), 1))
        self.setFont(font)

    def place(self, visual_col: int, visual_row: int) -> None:
        """Centre the glyph inside the given visual tile."""
        t = self._tile_size
        bounds = self.boundingRect()
        self.setPos(
            visual_col * t + (t - bounds.width()) / 2,
            visual_row * t + (t - bounds.height()) / 2,
        )
