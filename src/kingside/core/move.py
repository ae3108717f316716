"""Move request and move outcome value objects."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import CastleSide, RejectReason
from kingside.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A ``(from, to)`` request, exactly as the board shell forwards it."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"

    @property
    def delta(self) -> tuple[int, int]:
        """Rank and file delta ``(dr, dc)``."""
        return (
            self.to_sq.rank - self.from_sq.rank,
            self.to_sq.file - self.from_sq.file,
        )


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :func:`kingside.core.executor.apply_move`.

    Truthy when the move was played. ``rejection`` is set otherwise.
    """

    move: Move
    rejection: RejectReason | None = None
    castled: CastleSide | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    def __bool__(self) -> bool:
        return self.accepted
