"""Abstract interfaces for the game layer.

Renderers depend on :class:`IGameController`, not on the concrete
controller, so a headless driver or a test double can stand in for it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesspad.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chesspad.core.control import ControlMap
    from chesspad.core.types import Square
    from chesspad.game.state import BoardSnapshot


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the click-to-move board."""

    IDLE = auto()
    SELECTED = auto()
    AWAITING_PROMOTION = auto()  # board input is gated until a kind is chosen


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def snapshot(self) -> BoardSnapshot:
        """Read-only view of the board and transient state."""

    @abstractmethod
    def on_square_clicked(self, square: Square) -> None:
        """Route a click on *square* through the selection state machine."""

    @abstractmethod
    def choose_promotion_kind(self, kind: PieceType) -> bool:
        """Finish an open promotion. Returns True if the board changed."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial position with White to move."""

    @abstractmethod
    def set_perspective(self, color: Color) -> None:
        """Side counted as "friendly" by :meth:`control_map`."""

    @abstractmethod
    def control_map(self) -> ControlMap:
        """Control counts of the current board from the perspective side."""
