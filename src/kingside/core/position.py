"""Position — one game's board and castling rights behind a single lock."""

from __future__ import annotations

import threading

from kingside.core.board import Board
from kingside.core.castling import CastlingRights
from kingside.core.enums import Color
from kingside.core.executor import apply_move
from kingside.core.move import Move, MoveResult
from kingside.core.move_generator import MoveGenerator
from kingside.core.piece import Piece
from kingside.core.rules import is_in_check
from kingside.core.types import Square


class Position:
    """Board + castling rights for one game session.

    Every call that reads or changes the board holds an internal lock, so a
    multi-threaded host observes :meth:`apply_move` (with all of its nested
    legality probes) as one critical section.
    """

    __slots__ = ("board", "rights", "_lock")

    def __init__(
        self,
        board: Board | None = None,
        rights: CastlingRights | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.rights = rights if rights is not None else CastlingRights()
        self._lock = threading.RLock()

    # ── Core operations ──────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        with self._lock:
            return apply_move(self.board, self.rights, from_sq, to_sq)

    def is_in_check(self, color: Color) -> bool:
        with self._lock:
            return is_in_check(self.board, color)

    def moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* (empty if none)."""
        with self._lock:
            return MoveGenerator(self.board, self.rights).moves_from(sq)

    def king_square(self, color: Color) -> Square | None:
        with self._lock:
            return self.board.king_square(color)

    def piece_at(self, sq: Square) -> Piece | None:
        """Read accessor for drawing; off-board squares read as empty."""
        if not sq.on_board:
            return None
        with self._lock:
            return self.board[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Back to the standard starting setup with fresh castling rights."""
        with self._lock:
            self.board = Board.initial()
            self.rights = CastlingRights()

    def copy(self) -> Position:
        with self._lock:
            return Position(self.board.copy(), self.rights.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.rights == other.rights

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.rights!r}"
