"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chesspad.core.enums import Color, PieceType
from chesspad.core.piece import Piece
from chesspad.core.types import Square, in_bounds

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot board indexed by ``(row, col)``.

    Reads outside the board yield ``None`` and writes outside it are
    dropped, so rule code can try offsets without bounds checks.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        if not in_bounds(sq):
            return None
        row, col = sq
        return self._grid[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        if not in_bounds(sq):
            return
        row, col = sq
        self._grid[row][col] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate the piece on *from_sq*; return whatever stood on *to_sq*."""
        piece = self[from_sq]
        captured = self[to_sq]
        self[to_sq] = piece
        self[from_sq] = None
        return captured

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for row, rank in enumerate(self._grid):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only its *piece_type*)."""
        return [
            sq
            for sq, piece in self.occupied()
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Detached copy of the grid for read-only consumers."""
        return tuple(
            tuple(piece.copy() if piece is not None else None for piece in rank)
            for rank in self._grid
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [
            [piece.copy() if piece is not None else None for piece in rank]
            for rank in self._grid
        ]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White on rows 6–7."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, rank in enumerate(self._grid):
            cells = [str(p) if p else "." for p in rank]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
