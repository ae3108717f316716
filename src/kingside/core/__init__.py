"""Core domain layer — the chess rule engine, free of any GUI code.

Quick start::

    from kingside.core import Position, parse_square

    pos = Position()
    result = pos.apply_move(parse_square("e2"), parse_square("e4"))
    if not result:
        print(result.rejection)
"""

from kingside.core.board import Board
from kingside.core.castling import CastlingRights
from kingside.core.enums import CastleSide, Color, PieceType, RejectReason
from kingside.core.executor import apply_move
from kingside.core.move import Move, MoveResult
from kingside.core.move_generator import MoveGenerator
from kingside.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    placement_of,
)
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.rules import is_in_check, is_legal, validate_move
from kingside.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    "RejectReason",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    # Rules
    "apply_move",
    "is_in_check",
    "is_legal",
    "validate_move",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "placement_of",
]
