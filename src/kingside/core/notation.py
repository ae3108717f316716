"""Piece-placement text (the board field of FEN)."""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.piece import Piece
from kingside.core.types import BOARD_SIZE, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse a placement field such as ``"4k3/8/8/8/8/8/8/4K3"``.

    Ranks are listed from Black's back rank (rank index 0) downward.
    """
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {text!r}")

    board = Board()
    for rank, row_text in enumerate(rows):
        file = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {text!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {text!r}")
                board[Square(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {text!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {text!r}")
    return board


def placement_of(board: Board) -> str:
    """Serialise *board* to a placement field."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[Square(rank, file)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
