"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from chesspad.core.enums import PieceType
from chesspad.game.controller import GameController
from chesspad.game.state import BoardSnapshot, PromotionTransaction
from chesspad.ui.board.board_view import BoardView
from chesspad.ui.dialogs.promotion_dialog import PromotionDialog
from chesspad.ui.panels.control_panel import ControlPanel
from chesspad.ui.panels.options_panel import OptionsPanel
from chesspad.ui.settings import AppSettings, SettingsStore
from chesspad.ui.styles.theme import app_style, board_theme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for chesspad."""

    def __init__(
        self,
        controller: GameController | None = None,
        store: SettingsStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("chesspad")
        self.setMinimumSize(820, 600)
        self.resize(1000, 700)

        self._controller = controller if controller is not None else GameController()
        self._store = store if store is not None else SettingsStore()
        self._settings: AppSettings = self._store.load()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()
        self._render(self._controller.snapshot())

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Sidebar (right)
        right = QVBoxLayout()
        right.setSpacing(6)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._options_panel = OptionsPanel(self._settings)
        right.addWidget(self._options_panel)
        right.addStretch()

        sidebar = QWidget()
        sidebar.setObjectName("sidebar")
        sidebar.setLayout(right)
        sidebar.setFixedWidth(280)
        root.addWidget(sidebar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_reset = QAction("&Reset", self)
        self._act_reset.setShortcut("Ctrl+N")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._act_flip = QAction("&Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._controller.on_square_clicked)
        self._control_panel.reset_clicked.connect(self._on_reset)
        self._control_panel.flip_clicked.connect(self._on_flip)
        self._options_panel.settings_changed.connect(self._on_settings_changed)

        events = self._controller.events
        events.on_changed.append(self._render)
        events.on_promotion_requested.append(self._on_promotion_requested)

    # ── Rendering ────────────────────────────────────────────────────────

    def _render(self, snapshot: BoardSnapshot) -> None:
        scene = self._board_view.board_scene
        scene.set_snapshot(snapshot)
        scene.set_interactive(snapshot.pending_promotion is None)
        self._control_panel.set_turn(
            snapshot.turn, promoting=snapshot.pending_promotion is not None
        )
        self._refresh_control_map()

    def _refresh_control_map(self) -> None:
        scene = self._board_view.board_scene
        if self._settings.show_control_map:
            scene.set_control_map(self._controller.control_map())
        else:
            scene.set_control_map(None)

    # ── Promotion ────────────────────────────────────────────────────────

    def _on_promotion_requested(self, txn: PromotionTransaction) -> None:
        # Let the board repaint with the pawn on the last rank first.
        QTimer.singleShot(0, lambda: self._ask_promotion(txn))

    def _ask_promotion(self, txn: PromotionTransaction) -> None:
        while self._controller.state.promotion == txn:
            if QApplication.closingDown() or not self.isVisible():
                _LOGGER.debug("Promotion prompt on %s abandoned", txn.square)
                return
            kind = self._ask_promotion_kind(txn)
            if kind is not None:
                self._controller.choose_promotion_kind(kind)

    def _ask_promotion_kind(self, txn: PromotionTransaction) -> PieceType | None:
        return PromotionDialog.ask(txn.color, self, self._settings.piece_style)

    # ── Actions ──────────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._controller.reset()

    def _on_flip(self) -> None:
        self._settings.flipped = not self._settings.flipped
        self._board_view.board_scene.set_flipped(self._settings.flipped)
        self._store.save(self._settings)

    def _on_settings_changed(self, settings: AppSettings) -> None:
        settings.flipped = self._settings.flipped
        self._settings = settings
        self._store.save(settings)
        self._apply_settings()

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(board_theme(s.board_theme))
        scene.set_piece_style(s.piece_style)
        scene.set_flipped(s.flipped)
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_highlight_mode(s.highlight_mode)
        scene.set_glow_colors(s.move_glow, s.attack_glow)
        self._controller.set_perspective(s.perspective)
        self._refresh_control_map()

        app = QApplication.instance()
        if isinstance(app, QApplication):
            app.setStyleSheet(app_style(s.dark_mode))
        _LOGGER.debug("Applied settings: %s", s)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._store.save(self._settings)
        events = self._controller.events
        if self._render in events.on_changed:
            events.on_changed.remove(self._render)
        if self._on_promotion_requested in events.on_promotion_requested:
            events.on_promotion_requested.remove(self._on_promotion_requested)
        super().closeEvent(event)
