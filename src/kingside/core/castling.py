"""Castling bookkeeping: which kings and corner rooks have ever moved."""

from __future__ import annotations

from dataclasses import dataclass, replace

from kingside.core.enums import CastleSide, Color
from kingside.core.types import Square

# Home corner file of the rook for each wing.
ROOK_HOME_FILE: dict[CastleSide, int] = {
    CastleSide.KINGSIDE: 7,
    CastleSide.QUEENSIDE: 0,
}
# File the rook lands on after castling.
ROOK_CASTLED_FILE: dict[CastleSide, int] = {
    CastleSide.KINGSIDE: 5,
    CastleSide.QUEENSIDE: 3,
}
KING_HOME_FILE = 4


def king_home(color: Color) -> Square:
    return Square(color.home_rank, KING_HOME_FILE)


def rook_home(color: Color, side: CastleSide) -> Square:
    return Square(color.home_rank, ROOK_HOME_FILE[side])


@dataclass(slots=True)
class CastlingRights:
    """Six monotonic "has moved" flags; all ``False`` at the start.

    Flags are only ever set (by the executor) and never cleared, not even
    when a tracked rook is captured on its home square.
    """

    white_king_moved: bool = False
    white_kingside_rook_moved: bool = False
    white_queenside_rook_moved: bool = False
    black_king_moved: bool = False
    black_kingside_rook_moved: bool = False
    black_queenside_rook_moved: bool = False

    def king_moved(self, color: Color) -> bool:
        if color == Color.WHITE:
            return self.white_king_moved
        return self.black_king_moved

    def rook_moved(self, color: Color, side: CastleSide) -> bool:
        if color == Color.WHITE:
            if side == CastleSide.KINGSIDE:
                return self.white_kingside_rook_moved
            return self.white_queenside_rook_moved
        if side == CastleSide.KINGSIDE:
            return self.black_kingside_rook_moved
        return self.black_queenside_rook_moved

    def can_castle(self, color: Color, side: CastleSide) -> bool:
        """Neither the king nor the rook of that wing has moved yet."""
        return not self.king_moved(color) and not self.rook_moved(color, side)

    def mark_king_moved(self, color: Color) -> None:
        if color == Color.WHITE:
            self.white_king_moved = True
        else:
            self.black_king_moved = True

    def mark_rook_moved(self, color: Color, side: CastleSide) -> None:
        if color == Color.WHITE:
            if side == CastleSide.KINGSIDE:
                self.white_kingside_rook_moved = True
            else:
                self.white_queenside_rook_moved = True
        elif side == CastleSide.KINGSIDE:
            self.black_kingside_rook_moved = True
        else:
            self.black_queenside_rook_moved = True

    def copy(self) -> CastlingRights:
        return replace(self)
