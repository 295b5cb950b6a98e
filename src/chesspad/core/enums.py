"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn push: White walks toward row 0."""
        return -1 if self is Color.WHITE else 1

    @property
    def home_row(self) -> int:
        """Row a pawn of this color starts on."""
        return 6 if self is Color.WHITE else 1

    @property
    def promotion_row(self) -> int:
        """Opponent's back rank."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    PROMOTION = 3


class HighlightMode(str, Enum):
    """Which target sets to show for a selection (drawing only)."""

    BOTH = "both"
    MOVES = "moves"
    ATTACKS = "attacks"

    @property
    def shows_moves(self) -> bool:
        return self is not HighlightMode.ATTACKS

    @property
    def shows_attacks(self) -> bool:
        return self is not HighlightMode.MOVES
