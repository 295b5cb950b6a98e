"""Per-piece move and capture generation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chesspad.core.board import Board
from chesspad.core.enums import Color, HighlightMode, PieceType
from chesspad.core.move import EnPassantRecord
from chesspad.core.types import ALL_SQUARES, Square, in_bounds

# Offsets are (d_row, d_col).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PAWN_CAPTURE_COLS: tuple[int, int] = (-1, 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = [sq.offset(dr, dc) for dr, dc in offsets]
        targets[sq] = tuple(m for m in moves if in_bounds(m))
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            nxt = sq.offset(dr, dc)
            while in_bounds(nxt):
                ray.append(nxt)
                nxt = nxt.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

SLIDING_RAYS: dict[PieceType, dict[Square, tuple[tuple[Square, ...], ...]]] = {
    PieceType.BISHOP: BISHOP_RAYS,
    PieceType.ROOK: ROOK_RAYS,
    PieceType.QUEEN: QUEEN_RAYS,
}

STEP_TARGETS: dict[PieceType, dict[Square, tuple[Square, ...]]] = {
    PieceType.KNIGHT: KNIGHT_TARGETS,
    PieceType.KING: KING_TARGETS,
}


@dataclass(frozen=True, slots=True)
class TargetSet:
    """Destinations of one piece, split into quiet moves and captures."""

    moves: tuple[Square, ...] = ()
    attacks: tuple[Square, ...] = ()

    def filtered(self, mode: HighlightMode) -> TargetSet:
        return TargetSet(
            self.moves if mode.shows_moves else (),
            self.attacks if mode.shows_attacks else (),
        )

    def __contains__(self, sq: object) -> bool:
        return sq in self.moves or sq in self.attacks

    def __bool__(self) -> bool:
        return bool(self.moves or self.attacks)


EMPTY_TARGETS = TargetSet()


class MoveGenerator:
    """Computes move and capture squares against a board snapshot.

    Never mutates *board* or *en_passant*; construct a fresh generator
    whenever either changes.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: EnPassantRecord | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def generate(
        self, sq: Square, mode: HighlightMode = HighlightMode.BOTH
    ) -> TargetSet:
        """Targets of the piece on *sq*; empty when there is none."""
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return EMPTY_TARGETS
        rule = _RULES[piece.piece_type]
        return rule(self, sq, piece.color).filtered(mode)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> TargetSet:
        board = self._board
        forward = color.forward
        moves: list[Square] = []
        attacks: list[Square] = []

        one_step = sq.offset(forward, 0)
        if in_bounds(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            two_step = sq.offset(2 * forward, 0)
            if sq.row == color.home_row and board.is_empty(two_step):
                moves.append(two_step)

        ep = self._en_passant
        for dc in PAWN_CAPTURE_COLS:
            cap_sq = sq.offset(forward, dc)
            if not in_bounds(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    attacks.append(cap_sq)
            elif ep is not None and ep.allows(color, cap_sq):
                attacks.append(cap_sq)

        return TargetSet(tuple(moves), tuple(attacks))

    def _gen_step(self, sq: Square, color: Color) -> TargetSet:
        piece = self._board[sq]
        assert piece is not None
        return self._collect(color, STEP_TARGETS[piece.piece_type][sq])

    def _gen_sliding(self, sq: Square, color: Color) -> TargetSet:
        piece = self._board[sq]
        assert piece is not None
        board = self._board
        moves: list[Square] = []
        attacks: list[Square] = []
        for ray in SLIDING_RAYS[piece.piece_type][sq]:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != color:
                    attacks.append(to_sq)
                break
        return TargetSet(tuple(moves), tuple(attacks))

    def _collect(self, color: Color, squares: tuple[Square, ...]) -> TargetSet:
        board = self._board
        moves: list[Square] = []
        attacks: list[Square] = []
        for to_sq in squares:
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
            elif target.color != color:
                attacks.append(to_sq)
        return TargetSet(tuple(moves), tuple(attacks))


_RULES: dict[PieceType, Callable[[MoveGenerator, Square, Color], TargetSet]] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_step,
    PieceType.BISHOP: MoveGenerator._gen_sliding,
    PieceType.ROOK: MoveGenerator._gen_sliding,
    PieceType.QUEEN: MoveGenerator._gen_sliding,
    PieceType.KING: MoveGenerator._gen_step,
}
