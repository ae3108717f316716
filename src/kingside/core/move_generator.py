"""Legal move listing.

Candidate targets come from offset and ray tables; each candidate is then
confirmed with :func:`kingside.core.rules.is_legal`, so the listing can never
disagree with what the executor accepts.
"""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.castling import CastlingRights
from kingside.core.enums import Color, PieceType
from kingside.core.move import Move
from kingside.core.rules import is_legal
from kingside.core.types import Square, all_squares

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


def _ray(sq: Square, dr: int, dc: int) -> list[Square]:
    out: list[Square] = []
    nxt = sq.offset(dr, dc)
    while nxt.on_board:
        out.append(nxt)
        nxt = nxt.offset(dr, dc)
    return out


class MoveGenerator:
    """Enumerates legal ``(from, to)`` moves on a board."""

    __slots__ = ("_board", "_rights")

    def __init__(self, board: Board, rights: CastlingRights) -> None:
        self._board = board
        self._rights = rights

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """All legal moves for *color*, or for both sides when ``None``.

        Turn order is not tracked, so both colors are always movable.
        """
        colors = list(Color) if color is None else [color]
        moves: list[Move] = []
        for c in colors:
            for sq in self._board.pieces(c):
                moves.extend(self.moves_from(sq))
        return moves

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* (empty list if none)."""
        if not sq.on_board or self._board[sq] is None:
            return []
        return [
            Move(sq, to_sq)
            for to_sq in self._candidates(sq)
            if is_legal(self._board, self._rights, sq, to_sq)
        ]

    def _candidates(self, sq: Square) -> list[Square]:
        piece = self._board[sq]
        assert piece is not None
        pt = piece.piece_type

        if pt == PieceType.PAWN:
            fwd = piece.color.pawn_direction
            offsets = [(fwd, 0), (2 * fwd, 0), (fwd, -1), (fwd, 1)]
        elif pt == PieceType.KNIGHT:
            offsets = list(KNIGHT_OFFSETS)
        elif pt == PieceType.KING:
            offsets = list(KING_OFFSETS) + [(0, 2), (0, -2)]
        else:
            targets: list[Square] = []
            for dr, dc in _SLIDER_DIRS[pt]:
                targets.extend(_ray(sq, dr, dc))
            return targets

        return [t for dr, dc in offsets if (t := sq.offset(dr, dc)).on_board]


def brute_force_legal_moves(board: Board, rights: CastlingRights) -> list[Move]:
    """Every legal move found by trying all 64x64 square pairs."""
    return [
        Move(a, b)
        for a in all_squares()
        for b in all_squares()
        if is_legal(board, rights, a, b)
    ]
