"""OptionsPanel — sidebar with display preferences."""

from __future__ import annotations

from dataclasses import replace

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QCheckBox,
    QColorDialog,
    QComboBox,
    QFormLayout,
    QPushButton,
    QWidget,
)

from chesspad.core.enums import Color, HighlightMode
from chesspad.ui.settings import AppSettings
from chesspad.ui.styles.theme import BOARD_THEMES, PIECE_STYLES

_MODE_LABELS: dict[HighlightMode, str] = {
    HighlightMode.BOTH: "Moves and attacks",
    HighlightMode.MOVES: "Moves only",
    HighlightMode.ATTACKS: "Attacks only",
}


class OptionsPanel(QWidget):
    """Edits a copy of :class:`AppSettings` and broadcasts every change.

    Signals:
        settings_changed(AppSettings): Emitted with a fresh copy after any edit.
    """

    settings_changed = pyqtSignal(object)

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._settings = replace(settings)
        self._form = QFormLayout(self)
        self._form.setSpacing(10)
        self._form.setContentsMargins(8, 8, 8, 8)

        self._mode_combo = QComboBox()
        for mode, label in _MODE_LABELS.items():
            self._mode_combo.addItem(label, mode)
        self._mode_combo.setCurrentIndex(
            list(_MODE_LABELS).index(self._settings.highlight_mode)
        )
        self._mode_combo.currentIndexChanged.connect(self._on_mode_changed)
        self._form.addRow("Highlight", self._mode_combo)

        self._theme_combo = QComboBox()
        self._theme_combo.addItems(BOARD_THEMES)
        self._theme_combo.setCurrentText(self._settings.board_theme)
        self._theme_combo.currentTextChanged.connect(self._on_theme_changed)
        self._form.addRow("Board", self._theme_combo)

        self._piece_combo = QComboBox()
        self._piece_combo.addItems(PIECE_STYLES)
        self._piece_combo.setCurrentText(self._settings.piece_style)
        self._piece_combo.currentTextChanged.connect(
            lambda name: self._update(piece_style=name)
        )
        self._form.addRow("Pieces", self._piece_combo)

        self._move_color_btn = QPushButton()
        self._move_color_btn.clicked.connect(lambda: self._pick_color("move_glow"))
        self._form.addRow("Move glow", self._move_color_btn)

        self._attack_color_btn = QPushButton()
        self._attack_color_btn.clicked.connect(lambda: self._pick_color("attack_glow"))
        self._form.addRow("Attack glow", self._attack_color_btn)

        self._coords_check = QCheckBox("Show coordinates")
        self._coords_check.setChecked(self._settings.show_coordinates)
        self._coords_check.toggled.connect(
            lambda on: self._update(show_coordinates=on)
        )
        self._form.addRow(self._coords_check)

        self._control_check = QCheckBox("Show square control")
        self._control_check.setChecked(self._settings.show_control_map)
        self._control_check.toggled.connect(
            lambda on: self._update(show_control_map=on)
        )
        self._form.addRow(self._control_check)

        self._perspective_combo = QComboBox()
        for color in Color:
            self._perspective_combo.addItem(color.name.capitalize(), color)
        self._perspective_combo.setCurrentIndex(int(self._settings.perspective))
        self._perspective_combo.currentIndexChanged.connect(
            self._on_perspective_changed
        )
        self._form.addRow("Control side", self._perspective_combo)

        self._dark_check = QCheckBox("Dark mode")
        self._dark_check.setChecked(self._settings.dark_mode)
        self._dark_check.toggled.connect(lambda on: self._update(dark_mode=on))
        self._form.addRow(self._dark_check)

        self._refresh_color_buttons()

    @property
    def settings(self) -> AppSettings:
        return replace(self._settings)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_mode_changed(self, index: int) -> None:
        self._update(highlight_mode=HighlightMode(self._mode_combo.itemData(index)))

    def _on_theme_changed(self, name: str) -> None:
        self._update(board_theme=name)

    def _on_perspective_changed(self, index: int) -> None:
        self._update(perspective=Color(self._perspective_combo.itemData(index)))

    def _pick_color(self, field_name: str) -> None:
        current = QColor(getattr(self._settings, field_name))
        chosen = QColorDialog.getColor(current, self)
        if chosen.isValid():
            self._update(**{field_name: chosen.name()})

    # ── Internal ─────────────────────────────────────────────────────────

    def _update(self, **changes: object) -> None:
        self._settings = replace(self._settings, **changes)
        self._refresh_color_buttons()
        self.settings_changed.emit(self.settings)

    def _refresh_color_buttons(self) -> None:
        for btn, value in (
            (self._move_color_btn, self._settings.move_glow),
            (self._attack_color_btn, self._settings.attack_glow),
        ):
            btn.setText(value)
            btn.setStyleSheet(f"QPushButton {{ border-left: 14px solid {value}; }}")
