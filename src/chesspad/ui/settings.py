"""User preferences and their QSettings-backed persistence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, fields
from typing import Any

from PyQt6.QtCore import QSettings
from PyQt6.QtGui import QColor

from chesspad.core.enums import Color, HighlightMode
from chesspad.ui.styles.theme import BOARD_THEMES, PIECE_STYLES

_LOGGER = logging.getLogger(__name__)

ORGANIZATION = "chesspad"
APPLICATION = "chesspad"


# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    piece_style: str = "Solid"
    show_coordinates: bool = True
    flipped: bool = False

    # Highlights
    highlight_mode: HighlightMode = HighlightMode.BOTH
    move_glow: str = "#3fbf5f"
    attack_glow: str = "#e04848"

    # Control overlay
    show_control_map: bool = False
    perspective: Color = Color.WHITE

    # Appearance
    dark_mode: bool = False


# ── Value parsing ────────────────────────────────────────────────────────────


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in ("true", "1", "yes"):
        return True
    if text in ("false", "0", "no"):
        return False
    raise ValueError(f"Invalid boolean: {raw!r}")


def _parse_theme(raw: Any) -> str:
    name = str(raw)
    if name not in BOARD_THEMES:
        raise ValueError(f"Unknown board theme: {raw!r}")
    return name


def _parse_piece_style(raw: Any) -> str:
    name = str(raw)
    if name not in PIECE_STYLES:
        raise ValueError(f"Unknown piece style: {raw!r}")
    return name


def _parse_color_hex(raw: Any) -> str:
    color = QColor(str(raw))
    if not color.isValid():
        raise ValueError(f"Invalid colour: {raw!r}")
    return color.name()


def _parse_perspective(raw: Any) -> Color:
    try:
        return Color[str(raw).upper()]
    except KeyError:
        raise ValueError(f"Invalid perspective: {raw!r}") from None


_PARSERS: dict[str, Callable[[Any], Any]] = {
    "board_theme": _parse_theme,
    "piece_style": _parse_piece_style,
    "show_coordinates": _parse_bool,
    "flipped": _parse_bool,
    "highlight_mode": lambda raw: HighlightMode(str(raw)),
    "move_glow": _parse_color_hex,
    "attack_glow": _parse_color_hex,
    "show_control_map": _parse_bool,
    "perspective": _parse_perspective,
    "dark_mode": _parse_bool,
}


def _serialise(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, HighlightMode):
        return value.value
    if isinstance(value, Color):
        return value.name.lower()
    return str(value)


# ── Store ────────────────────────────────────────────────────────────────────


class SettingsStore:
    """Loads and saves :class:`AppSettings` through ``QSettings``.

    Values that cannot be parsed fall back to the dataclass default, so a
    hand-edited or stale settings file never prevents start-up.
    """

    def __init__(self, backend: QSettings | None = None) -> None:
        self._backend = backend if backend is not None else QSettings(
            ORGANIZATION, APPLICATION
        )

    def load(self) -> AppSettings:
        settings = AppSettings()
        for f in fields(AppSettings):
            raw = self._backend.value(f.name)
            if raw is None:
                continue
            try:
                setattr(settings, f.name, _PARSERS[f.name](raw))
            except ValueError:
                _LOGGER.warning(
                    "Ignoring stored %s=%r, using default %r",
                    f.name,
                    raw,
                    getattr(settings, f.name),
                )
        return settings

    def save(self, settings: AppSettings) -> None:
        for name, value in asdict(settings).items():
            self._backend.setValue(name, _serialise(value))
        self._backend.sync()

    def clear(self) -> None:
        self._backend.clear()
        self._backend.sync()
