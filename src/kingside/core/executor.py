"""Move executor — the only code that mutates a board or its castling rights."""

from __future__ import annotations

import logging

from kingside.core.board import Board
from kingside.core.castling import (
    ROOK_CASTLED_FILE,
    ROOK_HOME_FILE,
    CastlingRights,
    rook_home,
)
from kingside.core.enums import CastleSide, PieceType
from kingside.core.move import Move, MoveResult
from kingside.core.rules import castle_side_of, validate_move
from kingside.core.types import Square

_LOGGER = logging.getLogger(__name__)


def apply_move(
    board: Board,
    rights: CastlingRights,
    from_sq: Square,
    to_sq: Square,
) -> MoveResult:
    """Play *from_sq* → *to_sq* if legal.

    A rejected move leaves *board* and *rights* untouched; the returned
    :class:`MoveResult` carries the reason.
    """
    move = Move(from_sq, to_sq)
    reason = validate_move(board, rights, from_sq, to_sq, check_safety=True)
    if reason is not None:
        _LOGGER.info("Invalid move %s: %s", move, reason)
        return MoveResult(move, rejection=reason)

    piece = board[from_sq]
    assert piece is not None

    # Castling flags
    if piece.piece_type == PieceType.KING:
        rights.mark_king_moved(piece.color)
    elif piece.piece_type == PieceType.ROOK:
        for side in CastleSide:
            if from_sq == rook_home(piece.color, side):
                rights.mark_rook_moved(piece.color, side)

    # Slide the rook for castling
    side = castle_side_of(piece, from_sq, to_sq)
    if side is not None:
        rank = from_sq.rank
        rook_from = Square(rank, ROOK_HOME_FILE[side])
        rook_to = Square(rank, ROOK_CASTLED_FILE[side])
        board[rook_to] = board[rook_from]
        board[rook_from] = None
        _LOGGER.debug("%s castles %s", piece.color, side.name.lower())

    board[to_sq] = piece
    board[from_sq] = None
    _LOGGER.debug("Played %s", move)
    return MoveResult(move, castled=side)
