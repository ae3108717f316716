"""Square value type and coordinate helpers.

Board layout is row-major from Black's side of the board:
    (0, 0) = a8, (0, 7) = h8
    ...
    (7, 0) = a1, (7, 7) = h1

``rank`` is the row index (0 at the top, Black's back rank), ``file`` the
column index (0 = a-file).
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Square:
    """A (rank, file) pair. May lie off the board; see :attr:`on_board`."""

    rank: int
    file: int

    @property
    def on_board(self) -> bool:
        return 0 <= self.rank < BOARD_SIZE and 0 <= self.file < BOARD_SIZE

    def offset(self, dr: int, dc: int) -> Square:
        return Square(self.rank + dr, self.file + dc)

    def __str__(self) -> str:
        if not self.on_board:
            return f"({self.rank}, {self.file})"
        return square_name(self)


_ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(r, f) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)
)


def all_squares() -> tuple[Square, ...]:
    """Every on-board square, row by row from a8 to h1."""
    return _ALL_SQUARES


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(6, 4) → 'e2'."""
    if not sq.on_board:
        raise ValueError(f"Square off board: {sq!r}")
    return chr(ord("a") + sq.file) + str(BOARD_SIZE - sq.rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, f) for f in range(8))
