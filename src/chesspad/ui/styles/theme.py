"""Visual theme constants and QSS styles for chesspad."""

from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

from chesspad.core.enums import Color
from chesspad.core.piece import Piece


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    last_move: QColor  # last move origin and destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    control_friendly: QColor = field(default_factory=lambda: QColor(40, 110, 220))
    control_enemy: QColor = field(default_factory=lambda: QColor(210, 50, 50))

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),  # yellow transparent
            last_move=QColor(155, 199, 0, 105),  # green
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 0, 100),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_selected=QColor(255, 255, 0, 100),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            highlight_selected=QColor(255, 255, 0, 100),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(118, 74, 47),
            coord_dark=QColor(228, 210, 184),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            highlight_selected=QColor(255, 255, 0, 100),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
        )


BOARD_THEMES = ("Classic", "Blue", "Green", "Walnut", "Slate")


def board_theme(name: str) -> BoardTheme:
    """Theme preset by display name; unknown names get the classic board."""
    factories = {
        "Classic": BoardTheme.default,
        "Blue": BoardTheme.blue,
        "Green": BoardTheme.green,
        "Walnut": BoardTheme.walnut,
        "Slate": BoardTheme.slate,
    }
    return factories.get(name, BoardTheme.default)()


def glow(color_hex: str, alpha: int = 120) -> QColor:
    """Translucent overlay colour from a ``#rrggbb`` string."""
    color = QColor(color_hex)
    if not color.isValid():
        color = QColor(0, 0, 0)
    color.setAlpha(alpha)
    return color


# ── Piece glyph styles ──────────────────────────────────────────────────────

PIECE_STYLES = ("Solid", "Outline")


def piece_glyph(piece: Piece, style: str) -> str:
    """Glyph for *piece*: "Outline" keeps the hollow white symbols, any other
    style draws the filled shape for both sides."""
    if style == "Outline":
        return piece.symbol
    return Piece(Color.BLACK, piece.piece_type).symbol


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE_DARK = """
QMainWindow, QWidget#sidebar {
    background: #2b2b2b;
}

QLabel, QCheckBox {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    padding: 4px 8px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed, QPushButton:checked {
    background: #264f78;
}
"""

APP_STYLE_LIGHT = """
QMainWindow, QWidget#sidebar {
    background: #f3f3f3;
}

QLabel, QCheckBox {
    color: #202020;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QComboBox {
    background: #ffffff;
    color: #202020;
    border: 1px solid #bbb;
    padding: 4px 8px;
}

QPushButton {
    background: #ffffff;
    color: #202020;
    border: 1px solid #bbb;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #e8e8e8;
}
QPushButton:pressed, QPushButton:checked {
    background: #cfe0f5;
}
"""


def app_style(dark: bool) -> str:
    return APP_STYLE_DARK if dark else APP_STYLE_LIGHT
