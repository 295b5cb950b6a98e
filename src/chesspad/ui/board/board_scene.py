"""BoardScene — QGraphicsScene that draws the chessboard from snapshots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesspad.core.control import ControlMap
from chesspad.core.enums import HighlightMode
from chesspad.core.types import ALL_SQUARES, Square
from chesspad.game.state import BoardSnapshot
from chesspad.ui.board.piece_item import PieceItem
from chesspad.ui.styles.theme import BoardTheme, glow


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    The scene holds no rules: it draws whatever :class:`BoardSnapshot` it is
    given and reports clicked squares.

    Signals:
        square_clicked(Square): Emitted when the user presses on a square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._snapshot: BoardSnapshot | None = None
        self._control: ControlMap | None = None
        self._flipped = False

        self._interactive = True
        self._show_coordinates = True
        self._highlight_mode = HighlightMode.BOTH
        self._piece_style = "Solid"
        self._move_glow = glow("#3fbf5f")
        self._attack_glow = glow("#e04848")

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._move_items: list[QGraphicsRectItem] = []
        self._attack_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._control_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Redraw pieces and highlights from *snapshot*."""
        self._snapshot = snapshot
        self._sync_pieces()
        self._sync_highlights()

    def set_control_map(self, control: ControlMap | None) -> None:
        """Show per-square control counts, or hide them with ``None``."""
        self._control = control
        self._sync_control()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click forwarding."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_piece_style(self, style: str) -> None:
        """Switch the glyph style used for pieces."""
        self._piece_style = style
        self._sync_pieces()

    def set_highlight_mode(self, mode: HighlightMode) -> None:
        """Choose which target sets of the selection are drawn."""
        self._highlight_mode = mode
        self._sync_highlights()

    def set_glow_colors(self, move_hex: str, attack_hex: str) -> None:
        self._move_glow = glow(move_hex)
        self._attack_glow = glow(attack_hex)
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        if self._snapshot is not None:
            self._sync_pieces()
            self._sync_highlights()
        self._sync_control()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in ALL_SQUARES:
            vc, vr = self._visual_coords(sq)
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if vc == 0:
                txt = QGraphicsSimpleTextItem(str(8 - sq.row))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vc * t + 2, vr * t + 1)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

            # File letters (bottom edge)
            if vr == 7:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + sq.col))
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(vc * t + t - 12, vr * t + t - 16)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._snapshot is None:
            return

        for sq in ALL_SQUARES:
            piece = self._snapshot.piece_at(sq)
            if piece is None:
                continue
            item = PieceItem(piece, sq, self.TILE, self._piece_style)
            item.place(*self._visual_coords(sq))
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._move_items)
        self._clear_items(self._attack_items)
        self._clear_items(self._last_move_highlights)

        snap = self._snapshot
        if snap is None:
            return

        if snap.last_move is not None:
            for sq in (snap.last_move.from_sq, snap.last_move.to_sq):
                rect = self._make_highlight(sq, self._theme.last_move)
                rect.setZValue(0.5)
                self._last_move_highlights.append(rect)

        if snap.selection is None:
            return

        self._highlight_items.append(
            self._make_highlight(snap.selection, self._theme.highlight_selected)
        )
        if self._highlight_mode.shows_moves:
            for sq in sorted(snap.legal_moves):
                self._move_items.append(self._make_highlight(sq, self._move_glow))
        if self._highlight_mode.shows_attacks:
            for sq in sorted(snap.legal_attacks):
                self._attack_items.append(self._make_highlight(sq, self._attack_glow))

    def _sync_control(self) -> None:
        for item in self._control_items:
            self.removeItem(item)
        self._control_items.clear()

        if self._control is None:
            return

        t = self.TILE
        font = QFont("Adwaita Sans", max(8, t // 9))
        for sq in ALL_SQUARES:
            friendly, enemy = self._control.at(sq)
            vc, vr = self._visual_coords(sq)
            for count, color, x_off in (
                (friendly, self._theme.control_friendly, 4),
                (enemy, self._theme.control_enemy, t - 16),
            ):
                if not count:
                    continue
                txt = QGraphicsSimpleTextItem(str(count))
                txt.setFont(font)
                txt.setBrush(QBrush(color))
                txt.setPos(vc * t + x_off, vr * t + t / 2 - 8)
                txt.setZValue(0.9)
                self.addItem(txt)
                self._control_items.append(txt)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row)."""
        if self._flipped:
            return 7 - sq.col, 7 - sq.row
        return sq.col, sq.row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Square(7 - row, 7 - col)
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
