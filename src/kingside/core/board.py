"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from kingside.core.enums import Color, PieceType
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square, all_squares

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
    """Mutable 8x8 grid of optional pieces, addressed by :class:`Square`."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.on_board:
            raise IndexError(f"Square off board: {sq!r}")
        return self._grid[sq.rank][sq.file]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.on_board:
            raise IndexError(f"Square off board: {sq!r}")
        self._grid[sq.rank][sq.file] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq in all_squares()
            if (p := self._grid[sq.rank][sq.file]) is not None and p.color == color
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when it is not on the board."""
        king = Piece(color, PieceType.KING)
        for sq in all_squares():
            if self._grid[sq.rank][sq.file] == king:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[Square(Color.BLACK.home_rank, f)] = Piece(Color.BLACK, pt)
            b[Square(Color.BLACK.pawn_rank, f)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(Color.WHITE.pawn_rank, f)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(Color.WHITE.home_rank, f)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{BOARD_SIZE - rank} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
