"""Move and en-passant value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesspad.core.enums import Color, MoveFlag
from chesspad.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of an executed relocation (``from_sq`` → ``to_sq``)."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class EnPassantRecord:
    """The single en-passant opportunity left by a two-square pawn advance.

    Attributes:
        target: Square the advancing pawn skipped over.
        eligible: Side allowed to capture onto *target* on the next ply.
        captured_at: Square of the pawn removed by such a capture.
    """

    target: Square
    eligible: Color
    captured_at: Square

    def allows(self, color: Color, to_sq: Square) -> bool:
        """Whether a *color* pawn landing on *to_sq* captures en passant."""
        return self.eligible == color and self.target == to_sq
