"""Square control counts for the threat overlay.

Control differs from move generation in two ways: a pawn controls both
forward diagonals whether or not a capture is possible there, and a sliding
ray also covers its first blocker of either colour, so a friendly piece
standing in the way counts as defended.
"""

from __future__ import annotations

from dataclasses import dataclass

from chesspad.core.board import Board
from chesspad.core.enums import Color, PieceType
from chesspad.core.move_generator import (
    PAWN_CAPTURE_COLS,
    SLIDING_RAYS,
    STEP_TARGETS,
)
from chesspad.core.types import Square, in_bounds

ControlGrid = tuple[tuple[int, ...], ...]


@dataclass(frozen=True, slots=True)
class ControlMap:
    """Per-square counts of controlling pieces, split by side."""

    friendly: ControlGrid
    enemy: ControlGrid

    def at(self, sq: Square) -> tuple[int, int]:
        """``(friendly, enemy)`` counts for *sq*."""
        return self.friendly[sq.row][sq.col], self.enemy[sq.row][sq.col]

    @property
    def friendly_total(self) -> int:
        return sum(sum(rank) for rank in self.friendly)

    @property
    def enemy_total(self) -> int:
        return sum(sum(rank) for rank in self.enemy)


def controlled_squares(board: Board, sq: Square) -> list[Square]:
    """Squares controlled by the piece on *sq* (empty list if none)."""
    sq = Square(*sq)
    piece = board[sq]
    if piece is None:
        return []

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        forward = piece.color.forward
        diagonals = (sq.offset(forward, dc) for dc in PAWN_CAPTURE_COLS)
        return [d for d in diagonals if in_bounds(d)]

    if ptype in STEP_TARGETS:
        return list(STEP_TARGETS[ptype][sq])

    covered: list[Square] = []
    for ray in SLIDING_RAYS[ptype][sq]:
        for to_sq in ray:
            covered.append(to_sq)
            if board[to_sq] is not None:
                break
    return covered


def compute_control(board: Board, perspective: Color = Color.WHITE) -> ControlMap:
    """Count controllers of every square relative to *perspective*."""
    friendly = [[0] * 8 for _ in range(8)]
    enemy = [[0] * 8 for _ in range(8)]

    for sq, piece in board.occupied():
        counts = friendly if piece.color == perspective else enemy
        for target in controlled_squares(board, sq):
            counts[target.row][target.col] += 1

    return ControlMap(
        friendly=tuple(tuple(rank) for rank in friendly),
        enemy=tuple(tuple(rank) for rank in enemy),
    )
