"""GameController — the click-driven orchestrator of a chess board.

Routes square clicks through the selection state machine, runs the
promotion transaction, and notifies listeners via simple callbacks so the
UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesspad.core.control import ControlMap, compute_control
from chesspad.core.enums import PROMOTION_TYPES, Color, HighlightMode, PieceType
from chesspad.core.move_generator import TargetSet
from chesspad.core.types import Square
from chesspad.game.interfaces import GamePhase, IGameController
from chesspad.game.state import (
    BoardSnapshot,
    GameState,
    MoveRecord,
    PromotionTransaction,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, BoardSnapshot], None]
PromotionCallback = Callable[[PromotionTransaction], None]
PhaseCallback = Callable[[GamePhase], None]
ChangedCallback = Callable[[BoardSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_requested: list[PromotionCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_changed: list[ChangedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Owns one :class:`GameState` and sequences every mutation of it.

    Thread-safety: single-threaded. Each call runs to completion
    and listeners are notified only after the state is consistent again.
    """

    __slots__ = ("_state", "_perspective", "events")

    def __init__(self, perspective: Color = Color.WHITE) -> None:
        self._state = GameState()
        self._perspective = perspective
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def perspective(self) -> Color:
        return self._perspective

    # ── IGameController impl ─────────────────────────────────────────────

    def snapshot(self) -> BoardSnapshot:
        return self._state.snapshot()

    def new_game(self, placement: str | None = None, turn: Color = Color.WHITE) -> None:
        """Start over, from the standard position or from *placement*."""
        self._state.setup(placement, turn)
        _LOGGER.info("New game (%s to move)", turn)
        self._emit_phase()
        self._emit_changed()

    def reset(self) -> None:
        self.new_game()

    def on_square_clicked(self, square: Square) -> None:
        state = self._state
        square = Square(*square)

        if state.promotion is not None:
            _LOGGER.debug("Ignoring click on %s while promotion is pending", square)
            return

        if state.selected is not None and state.is_legal_target(square):
            self._execute(state.selected, square)
            return

        if state.is_own_piece(square):
            state.select(square)
            _LOGGER.debug(
                "Selected %s: %d moves, %d attacks",
                square,
                len(state.legal_moves),
                len(state.legal_attacks),
            )
            self._emit_phase()
            self._emit_changed()
            return

        if state.selected is not None:
            state.clear_selection()
            _LOGGER.debug("Selection cleared by click on %s", square)
            self._emit_phase()
            self._emit_changed()

    def choose_promotion_kind(self, kind: PieceType) -> bool:
        state = self._state
        txn = state.promotion
        if txn is None:
            _LOGGER.warning("Promotion choice %s with no pending promotion", kind.name)
            return False
        if kind not in PROMOTION_TYPES:
            _LOGGER.warning("Rejected promotion to %s", kind.name)
            return False

        if not state.choose_promotion(kind):
            _LOGGER.warning(
                "Discarded promotion on %s: square no longer holds a %s pawn",
                txn.square,
                txn.color,
            )
            self._emit_phase()
            self._emit_changed()
            return False

        _LOGGER.info("Promoted %s pawn on %s to %s", txn.color, txn.square, kind.name)
        self._emit_phase()
        self._emit_changed()
        return True

    def set_perspective(self, color: Color) -> None:
        self._perspective = color

    def control_map(self) -> ControlMap:
        return compute_control(self._state.board, self._perspective)

    # ── Presentation helpers ─────────────────────────────────────────────

    def highlight_targets(self, mode: HighlightMode = HighlightMode.BOTH) -> TargetSet:
        """Cached legal sets of the selection, filtered for drawing."""
        state = self._state
        targets = TargetSet(
            tuple(sorted(state.legal_moves)),
            tuple(sorted(state.legal_attacks)),
        )
        return targets.filtered(mode)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _execute(self, from_sq: Square, to_sq: Square) -> None:
        state = self._state
        record = state.execute_move(from_sq, to_sq)
        _LOGGER.info(
            "%s %s %s%s",
            record.move.from_sq,
            "x" if record.was_capture else "-",
            record.move.to_sq,
            f" ({record.move.flag.name.lower()})" if record.move.flag else "",
        )

        snap = state.snapshot()
        for cb in self.events.on_move:
            cb(record, snap)

        if state.promotion is not None:
            for promo_cb in self.events.on_promotion_requested:
                promo_cb(state.promotion)

        self._emit_phase()
        self._emit_changed()

    def _emit_phase(self) -> None:
        phase = self._state.phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_changed(self) -> None:
        if not self.events.on_changed:
            return
        snap = self._state.snapshot()
        for cb in self.events.on_changed:
            cb(snap)
