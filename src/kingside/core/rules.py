"""Move legality and check detection.

``validate_move`` and ``is_in_check`` cooperate: a real move is simulated and
the mover's king is tested for attack, and that test asks ``validate_move``
again in *probe* mode (``check_safety=False``), which never calls back into
``is_in_check``. Attacks and legal moves therefore share one definition.
"""

from __future__ import annotations

from kingside.core.board import Board
from kingside.core.castling import (
    KING_HOME_FILE,
    CastlingRights,
    king_home,
    rook_home,
)
from kingside.core.enums import CastleSide, Color, PieceType, RejectReason
from kingside.core.piece import Piece
from kingside.core.types import Square, all_squares


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def castle_side_of(piece: Piece, from_sq: Square, to_sq: Square) -> CastleSide | None:
    """Wing of a castling-shaped king move, or ``None`` for any other move."""
    if piece.piece_type != PieceType.KING or from_sq != king_home(piece.color):
        return None
    if to_sq.rank != from_sq.rank:
        return None
    if to_sq.file == KING_HOME_FILE + 2:
        return CastleSide.KINGSIDE
    if to_sq.file == KING_HOME_FILE - 2:
        return CastleSide.QUEENSIDE
    return None


# -- Geometry -----------------------------------------------------------------


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Every square strictly between the two ends is empty."""
    step_r = _sign(to_sq.rank - from_sq.rank)
    step_c = _sign(to_sq.file - from_sq.file)
    sq = from_sq.offset(step_r, step_c)
    while sq != to_sq:
        if not board.is_empty(sq):
            return False
        sq = sq.offset(step_r, step_c)
    return True


def _pawn_ok(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    dr = to_sq.rank - from_sq.rank
    dc = to_sq.file - from_sq.file
    forward = piece.color.pawn_direction
    target = board[to_sq]

    if dc == 0 and dr == forward:
        return target is None
    if dc == 0 and dr == 2 * forward and from_sq.rank == piece.color.pawn_rank:
        return target is None and board.is_empty(from_sq.offset(forward, 0))
    if abs(dc) == 1 and dr == forward:
        return piece.is_enemy_of(target)
    return False


def _rook_ok(board: Board, from_sq: Square, to_sq: Square) -> bool:
    if from_sq.rank != to_sq.rank and from_sq.file != to_sq.file:
        return False
    return _path_clear(board, from_sq, to_sq)


def _bishop_ok(board: Board, from_sq: Square, to_sq: Square) -> bool:
    dr = abs(to_sq.rank - from_sq.rank)
    dc = abs(to_sq.file - from_sq.file)
    if dr != dc or dr == 0:
        return False
    return _path_clear(board, from_sq, to_sq)


def _knight_ok(from_sq: Square, to_sq: Square) -> bool:
    dr = abs(to_sq.rank - from_sq.rank)
    dc = abs(to_sq.file - from_sq.file)
    return (dr, dc) in ((2, 1), (1, 2))


def _king_step_ok(from_sq: Square, to_sq: Square) -> bool:
    return abs(to_sq.rank - from_sq.rank) <= 1 and abs(to_sq.file - from_sq.file) <= 1


def _castling_rejection(
    board: Board,
    rights: CastlingRights,
    color: Color,
    side: CastleSide,
    check_safety: bool,
) -> RejectReason | None:
    if not rights.can_castle(color, side):
        return RejectReason.CASTLING_UNAVAILABLE

    corner = rook_home(color, side)
    if board[corner] != Piece(color, PieceType.ROOK):
        return RejectReason.CASTLING_UNAVAILABLE
    if not _path_clear(board, king_home(color), corner):
        return RejectReason.CASTLING_UNAVAILABLE

    # Same policy for both colors: no castling out of check. Probes skip it.
    if check_safety and is_in_check(board, color):
        return RejectReason.CASTLING_UNAVAILABLE
    return None


# -- Validator ----------------------------------------------------------------


def validate_move(
    board: Board,
    rights: CastlingRights,
    from_sq: Square,
    to_sq: Square,
    *,
    check_safety: bool = True,
) -> RejectReason | None:
    """Return why moving *from_sq* → *to_sq* is illegal, or ``None`` if legal.

    With ``check_safety`` the move is first played on a scratch copy of the
    board and refused if it leaves the mover's king attacked. The live board
    is never modified.
    """
    if not from_sq.on_board:
        return RejectReason.OUT_OF_BOUNDS
    piece = board[from_sq]
    if piece is None:
        return RejectReason.EMPTY_SOURCE
    if not to_sq.on_board:
        return RejectReason.OUT_OF_BOUNDS
    target = board[to_sq]
    if piece.is_friend_of(target):
        return RejectReason.OWN_PIECE_CAPTURE

    if check_safety:
        scratch = board.copy()
        scratch[to_sq] = piece
        scratch[from_sq] = None
        if is_in_check(scratch, piece.color):
            return RejectReason.MOVES_INTO_CHECK

    pt = piece.piece_type
    if pt == PieceType.PAWN:
        ok = _pawn_ok(board, piece, from_sq, to_sq)
    elif pt == PieceType.ROOK:
        ok = _rook_ok(board, from_sq, to_sq)
    elif pt == PieceType.KNIGHT:
        ok = _knight_ok(from_sq, to_sq)
    elif pt == PieceType.BISHOP:
        ok = _bishop_ok(board, from_sq, to_sq)
    elif pt == PieceType.QUEEN:
        ok = _rook_ok(board, from_sq, to_sq) or _bishop_ok(board, from_sq, to_sq)
    else:
        if _king_step_ok(from_sq, to_sq):
            return None
        side = castle_side_of(piece, from_sq, to_sq)
        if side is None:
            return RejectReason.ILLEGAL_GEOMETRY
        return _castling_rejection(board, rights, piece.color, side, check_safety)

    return None if ok else RejectReason.ILLEGAL_GEOMETRY


def is_legal(
    board: Board,
    rights: CastlingRights,
    from_sq: Square,
    to_sq: Square,
    *,
    check_safety: bool = True,
) -> bool:
    return (
        validate_move(board, rights, from_sq, to_sq, check_safety=check_safety)
        is None
    )


# -- Check detector -----------------------------------------------------------

# Probes never look at castling, so any rights object will do.
_PROBE_RIGHTS = CastlingRights()


def is_in_check(board: Board, color: Color) -> bool:
    """Whether *color*'s king is attacked. A missing king is never in check."""
    king_sq = board.king_square(color)
    if king_sq is None:
        return False

    enemy = color.opposite
    for sq in all_squares():
        piece = board[sq]
        if piece is None or piece.color != enemy:
            continue
        if (
            validate_move(board, _PROBE_RIGHTS, sq, king_sq, check_safety=False)
            is None
        ):
            return True
    return False
