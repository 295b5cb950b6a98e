"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesspad.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    targets = MoveGenerator(board).generate(parse_square("e2"))
    print(targets.moves)
"""

from chesspad.core.board import Board
from chesspad.core.control import ControlMap, compute_control, controlled_squares
from chesspad.core.enums import (
    PROMOTION_TYPES,
    Color,
    HighlightMode,
    MoveFlag,
    PieceType,
)
from chesspad.core.move import EnPassantRecord, Move
from chesspad.core.move_generator import MoveGenerator, TargetSet
from chesspad.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chesspad.core.piece import Piece
from chesspad.core.types import (
    Square,
    in_bounds,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "Color",
    "HighlightMode",
    "MoveFlag",
    "PROMOTION_TYPES",
    "PieceType",
    # Types / helpers
    "Square",
    "in_bounds",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "ControlMap",
    "EnPassantRecord",
    "Move",
    "MoveGenerator",
    "Piece",
    "TargetSet",
    "compute_control",
    "controlled_squares",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
