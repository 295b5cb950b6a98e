"""Tests for GameController — the click-driven orchestrator."""

import logging

import pytest

from chesspad.core.enums import Color, HighlightMode, MoveFlag, PieceType
from chesspad.core.piece import Piece
from chesspad.core.types import Square, parse_square
from chesspad.game.controller import GameController
from chesspad.game.interfaces import GamePhase
from chesspad.game.state import BoardSnapshot, MoveRecord, PromotionTransaction


def _click(ctrl: GameController, *names: str) -> None:
    for name in names:
        ctrl.on_square_clicked(parse_square(name))


def _promoting_controller() -> GameController:
    ctrl = GameController()
    ctrl.new_game("7k/P7/8/8/8/8/8/K7")
    _click(ctrl, "a7", "a8")
    return ctrl


class TestClicks:
    def test_select_then_move(self) -> None:
        ctrl = GameController()
        _click(ctrl, "e2")
        assert ctrl.phase == GamePhase.SELECTED
        _click(ctrl, "e4")
        snap = ctrl.snapshot()
        assert snap.piece_at(parse_square("e4")) == Piece(Color.WHITE, PieceType.PAWN)
        assert snap.turn == Color.BLACK
        assert snap.phase == GamePhase.IDLE
        assert snap.en_passant is not None
        assert snap.en_passant.target == parse_square("e3")

    def test_clicking_opponent_piece_does_nothing_when_idle(self) -> None:
        ctrl = GameController()
        before = ctrl.snapshot()
        _click(ctrl, "e7")
        assert ctrl.snapshot() == before

    def test_clicking_illegal_square_clears_selection(self) -> None:
        ctrl = GameController()
        _click(ctrl, "e2", "e5")
        assert ctrl.phase == GamePhase.IDLE
        assert ctrl.snapshot().piece_at(parse_square("e2")) is not None

    def test_reselect_another_own_piece(self) -> None:
        ctrl = GameController()
        _click(ctrl, "e2", "g1")
        snap = ctrl.snapshot()
        assert snap.selection == parse_square("g1")
        assert snap.legal_moves == frozenset({parse_square("f3"), parse_square("h3")})

    def test_clicking_friendly_blocked_square_selects_it(self) -> None:
        ctrl = GameController()
        _click(ctrl, "a1", "a2")
        assert ctrl.snapshot().selection == parse_square("a2")

    def test_accepts_plain_tuples(self) -> None:
        ctrl = GameController()
        ctrl.on_square_clicked((6, 4))
        assert ctrl.snapshot().selection == Square(6, 4)

    def test_en_passant_by_clicks(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/8/3p4/8/4P3/4K3")
        _click(ctrl, "e2", "e4")
        ctrl.on_square_clicked(Square(4, 3))
        assert Square(5, 4) in ctrl.snapshot().legal_attacks
        ctrl.on_square_clicked(Square(5, 4))
        snap = ctrl.snapshot()
        assert snap.piece_at(parse_square("e4")) is None
        assert snap.last_move is not None
        assert snap.last_move.flag == MoveFlag.EN_PASSANT

    def test_en_passant_expires_after_one_ply(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/8/3p4/8/4P3/4K3")
        _click(ctrl, "e2", "e4", "e8", "d8", "e1", "d1")
        _click(ctrl, "d4")
        assert Square(5, 4) not in ctrl.snapshot().legal_attacks


class TestPromotionFlow:
    def test_opens_transaction_without_flipping_turn(self) -> None:
        ctrl = _promoting_controller()
        snap = ctrl.snapshot()
        assert snap.phase == GamePhase.AWAITING_PROMOTION
        assert snap.turn == Color.WHITE
        assert snap.pending_promotion == PromotionTransaction(
            parse_square("a8"), Color.WHITE
        )

    def test_clicks_ignored_while_pending(self) -> None:
        ctrl = _promoting_controller()
        before = ctrl.snapshot()
        _click(ctrl, "a1", "a2", "h8")
        assert ctrl.snapshot() == before

    def test_choose_completes(self) -> None:
        ctrl = _promoting_controller()
        assert ctrl.choose_promotion_kind(PieceType.QUEEN)
        snap = ctrl.snapshot()
        assert snap.piece_at(parse_square("a8")) == Piece(Color.WHITE, PieceType.QUEEN)
        assert snap.turn == Color.BLACK
        assert snap.phase == GamePhase.IDLE

    def test_invalid_kind_is_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _promoting_controller()
        with caplog.at_level(logging.WARNING, logger="chesspad.game.controller"):
            assert not ctrl.choose_promotion_kind(PieceType.KING)
        assert ctrl.phase == GamePhase.AWAITING_PROMOTION
        assert "Rejected promotion" in caplog.text

    def test_anomaly_is_discarded(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _promoting_controller()
        ctrl.state.board[parse_square("a8")] = None
        with caplog.at_level(logging.WARNING, logger="chesspad.game.controller"):
            assert not ctrl.choose_promotion_kind(PieceType.QUEEN)
        assert ctrl.phase == GamePhase.IDLE
        assert ctrl.snapshot().turn == Color.WHITE
        assert "Discarded promotion" in caplog.text

    def test_without_transaction(self) -> None:
        ctrl = GameController()
        before = ctrl.snapshot()
        assert not ctrl.choose_promotion_kind(PieceType.QUEEN)
        assert ctrl.snapshot() == before


class TestEvents:
    def test_move_and_changed_fire(self) -> None:
        ctrl = GameController()
        moves: list[MoveRecord] = []
        changes: list[BoardSnapshot] = []
        ctrl.events.on_move.append(lambda rec, snap: moves.append(rec))
        ctrl.events.on_changed.append(changes.append)
        _click(ctrl, "e2", "e4")
        assert len(moves) == 1
        assert moves[0].move.flag == MoveFlag.DOUBLE_PAWN
        assert changes[-1].turn == Color.BLACK

    def test_promotion_requested_fires(self) -> None:
        requested: list[PromotionTransaction] = []
        ctrl = GameController()
        ctrl.events.on_promotion_requested.append(requested.append)
        ctrl.new_game("7k/P7/8/8/8/8/8/K7")
        _click(ctrl, "a7", "a8")
        assert requested == [PromotionTransaction(parse_square("a8"), Color.WHITE)]

    def test_phase_changes(self) -> None:
        ctrl = GameController()
        phases: list[GamePhase] = []
        ctrl.events.on_phase_changed.append(phases.append)
        _click(ctrl, "e2", "e4")
        assert phases == [GamePhase.SELECTED, GamePhase.IDLE]


class TestResetAndPerspective:
    def test_reset_is_idempotent(self) -> None:
        ctrl = GameController()
        _click(ctrl, "e2", "e4", "e7")
        ctrl.reset()
        once = ctrl.snapshot()
        ctrl.reset()
        assert ctrl.snapshot() == once
        assert once.turn == Color.WHITE
        assert once.last_move is None

    def test_reset_clears_pending_promotion(self) -> None:
        ctrl = _promoting_controller()
        ctrl.reset()
        assert ctrl.phase == GamePhase.IDLE

    def test_perspective_only_affects_control(self) -> None:
        ctrl = GameController()
        before = ctrl.snapshot()
        white = ctrl.control_map()
        ctrl.set_perspective(Color.BLACK)
        assert ctrl.perspective == Color.BLACK
        assert ctrl.control_map().friendly == white.enemy
        assert ctrl.snapshot() == before

    def test_highlight_targets_filters(self) -> None:
        ctrl = GameController()
        ctrl.new_game("4k3/8/8/3p4/4P3/8/8/4K3")
        _click(ctrl, "e4")
        both = ctrl.highlight_targets()
        assert both.moves == (parse_square("e5"),)
        assert both.attacks == (parse_square("d5"),)
        assert ctrl.highlight_targets(HighlightMode.ATTACKS).moves == ()
