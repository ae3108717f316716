"""Core enumerations for the chess rule engine."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a forward pawn step (White moves toward rank 0)."""
        return -1 if self == Color.WHITE else 1

    @property
    def home_rank(self) -> int:
        """Back rank index for this color."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_rank(self) -> int:
        """Starting rank of this color's pawns."""
        return 6 if self == Color.WHITE else 1

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


class CastleSide(IntEnum):
    """Which wing a castling move goes to."""

    KINGSIDE = auto()
    QUEENSIDE = auto()


class RejectReason(IntEnum):
    """Why a move request was refused."""

    EMPTY_SOURCE = auto()
    OUT_OF_BOUNDS = auto()
    OWN_PIECE_CAPTURE = auto()
    MOVES_INTO_CHECK = auto()
    ILLEGAL_GEOMETRY = auto()
    CASTLING_UNAVAILABLE = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
