"""Game state — board, turn, selection, en passant and promotion."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesspad.core.board import Board
from chesspad.core.enums import PROMOTION_TYPES, Color, MoveFlag, PieceType
from chesspad.core.move import EnPassantRecord, Move
from chesspad.core.move_generator import MoveGenerator, TargetSet
from chesspad.core.notation import board_from_placement
from chesspad.core.piece import Piece
from chesspad.core.types import Square, in_bounds
from chesspad.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class PromotionTransaction:
    """A pawn standing on the last rank, waiting for its new kind."""

    square: Square
    color: Color


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Outcome of :meth:`GameState.execute_move`."""

    move: Move
    piece: PieceType
    captured: Piece | None = None
    captured_at: Square | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything a renderer needs, detached from the live state."""

    grid: tuple[tuple[Piece | None, ...], ...]
    turn: Color
    phase: GamePhase
    selection: Square | None
    legal_moves: frozenset[Square]
    legal_attacks: frozenset[Square]
    last_move: Move | None
    pending_promotion: PromotionTransaction | None
    en_passant: EnPassantRecord | None

    def piece_at(self, sq: Square) -> Piece | None:
        sq = Square(*sq)
        if not in_bounds(sq):
            return None
        return self.grid[sq.row][sq.col]


@dataclass
class GameState:
    """Owns the board and every piece of per-move bookkeeping.

    This is a pure data/logic class: no UI, no event dispatch. Callers are
    responsible for routing input (see ``GameController``); ``execute_move``
    trusts that its destination came from the cached legal sets.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    selected: Square | None = None
    legal_moves: frozenset[Square] = field(default_factory=frozenset)
    legal_attacks: frozenset[Square] = field(default_factory=frozenset)
    last_move: Move | None = None
    en_passant: EnPassantRecord | None = None
    promotion: PromotionTransaction | None = None

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, placement: str | None = None, turn: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, optionally from a placement string."""
        if placement is None:
            self.board = Board.initial()
        else:
            self.board = board_from_placement(placement)
        self.turn = turn
        self.last_move = None
        self.en_passant = None
        self.promotion = None
        self.clear_selection()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def phase(self) -> GamePhase:
        if self.promotion is not None:
            return GamePhase.AWAITING_PROMOTION
        if self.selected is not None:
            return GamePhase.SELECTED
        return GamePhase.IDLE

    def generator(self) -> MoveGenerator:
        return MoveGenerator(self.board, self.en_passant)

    def targets(self, sq: Square) -> TargetSet:
        """Full (moves and attacks) target set of the piece on *sq*."""
        return self.generator().generate(sq)

    def is_own_piece(self, sq: Square) -> bool:
        piece = self.board[sq]
        return piece is not None and piece.color == self.turn

    def is_legal_target(self, sq: Square) -> bool:
        return sq in self.legal_moves or sq in self.legal_attacks

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: Square) -> bool:
        """Select the side-to-move's piece on *sq* and cache its targets.

        Anything else clears the selection and returns False.
        """
        if not self.is_own_piece(sq):
            self.clear_selection()
            return False
        targets = self.targets(sq)
        self.selected = sq
        self.legal_moves = frozenset(targets.moves)
        self.legal_attacks = frozenset(targets.attacks)
        return True

    def clear_selection(self) -> None:
        self.selected = None
        self.legal_moves = frozenset()
        self.legal_attacks = frozenset()

    # ── Move application ─────────────────────────────────────────────────

    def execute_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Relocate the piece on *from_sq* to *to_sq* and update bookkeeping.

        Opens a :class:`PromotionTransaction` (turn unchanged) when a pawn
        reaches the last rank; otherwise flips the turn.
        """
        board = self.board
        moving = board[from_sq]
        if moving is None:
            raise ValueError(f"No piece on {from_sq}")

        is_pawn = moving.piece_type == PieceType.PAWN
        flag = MoveFlag.NORMAL
        captured: Piece | None = None
        captured_at: Square | None = None

        ep = self.en_passant
        if (
            is_pawn
            and board.is_empty(to_sq)
            and ep is not None
            and ep.allows(moving.color, to_sq)
        ):
            captured = board[ep.captured_at]
            if captured is not None:
                captured_at = ep.captured_at
                board[ep.captured_at] = None
                flag = MoveFlag.EN_PASSANT

        replaced = board.move_piece(from_sq, to_sq)
        if replaced is not None:
            captured, captured_at = replaced, to_sq

        double_push = is_pawn and abs(to_sq.row - from_sq.row) == 2
        if double_push and flag != MoveFlag.EN_PASSANT:
            flag = MoveFlag.DOUBLE_PAWN
            self.en_passant = EnPassantRecord(
                target=Square((from_sq.row + to_sq.row) // 2, from_sq.col),
                eligible=moving.color.opposite,
                captured_at=to_sq,
            )
        else:
            self.en_passant = None

        if is_pawn and to_sq.row == moving.color.promotion_row:
            flag = MoveFlag.PROMOTION
            self.promotion = PromotionTransaction(to_sq, moving.color)

        move = Move(from_sq, to_sq, flag)
        self.last_move = move
        self.clear_selection()
        if self.promotion is None:
            self.turn = self.turn.opposite

        return MoveRecord(move, moving.piece_type, captured, captured_at)

    def choose_promotion(self, kind: PieceType) -> bool:
        """Complete the open promotion with *kind*.

        Returns False without changing anything if *kind* is not a promotion
        kind or no transaction is open. If the transaction's square no longer
        holds its pawn the transaction is dropped and False is returned.
        """
        txn = self.promotion
        if txn is None or kind not in PROMOTION_TYPES:
            return False

        piece = self.board[txn.square]
        self.promotion = None
        if (
            piece is None
            or piece.piece_type != PieceType.PAWN
            or piece.color != txn.color
        ):
            return False

        piece.piece_type = kind
        self.en_passant = None
        self.turn = self.turn.opposite
        self.clear_selection()
        return True

    # ── Snapshot ─────────────────────────────────────────────────────────

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            grid=self.board.rows(),
            turn=self.turn,
            phase=self.phase,
            selection=self.selected,
            legal_moves=self.legal_moves,
            legal_attacks=self.legal_attacks,
            last_move=self.last_move,
            pending_promotion=self.promotion,
            en_passant=self.en_passant,
        )
