"""Tests for Position — board ownership, read accessor and locking."""

import threading

from kingside.core.board import Board
from kingside.core.castling import CastlingRights
from kingside.core.enums import Color, PieceType, RejectReason
from kingside.core.notation import board_from_placement
from kingside.core.piece import Piece
from kingside.core.position import Position
from kingside.core.types import E1, E2, E4, Square


class TestPositionSetup:
    def test_defaults_to_initial_setup(self) -> None:
        pos = Position()
        assert pos.board == Board.initial()
        assert pos.rights == CastlingRights()

    def test_piece_at(self) -> None:
        pos = Position()
        assert pos.piece_at(E1) == Piece(Color.WHITE, PieceType.KING)
        assert pos.piece_at(E4) is None

    def test_piece_at_off_board_reads_empty(self) -> None:
        pos = Position()
        assert pos.piece_at(Square(-1, 3)) is None
        assert pos.piece_at(Square(3, 8)) is None

    def test_reset(self) -> None:
        pos = Position()
        pos.apply_move(E2, E4)
        pos.apply_move(E1, E2)
        assert pos.rights.white_king_moved
        pos.reset()
        assert pos == Position()

    def test_copy_is_independent(self) -> None:
        pos = Position()
        clone = pos.copy()
        clone.apply_move(E2, E4)
        assert pos.piece_at(E2) == Piece(Color.WHITE, PieceType.PAWN)
        assert pos != clone


class TestPositionMoves:
    def test_apply_move(self) -> None:
        pos = Position()
        result = pos.apply_move(E2, E4)
        assert result
        assert pos.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)

    def test_rejected_move_reports_reason(self) -> None:
        pos = Position()
        result = pos.apply_move(E1, E2)
        assert result.rejection == RejectReason.OWN_PIECE_CAPTURE
        assert pos == Position()

    def test_is_in_check(self) -> None:
        pos = Position(board_from_placement("4r3/8/8/8/8/8/8/4K3"))
        assert pos.is_in_check(Color.WHITE)
        assert not pos.is_in_check(Color.BLACK)

    def test_concurrent_requests_play_the_move_once(self) -> None:
        pos = Position()
        results: list[bool] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(bool(pos.apply_move(E2, E4)))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 1
        assert pos.piece_at(E4) == Piece(Color.WHITE, PieceType.PAWN)
        assert pos.piece_at(E2) is None


class TestPositionQueries:
    def test_moves_from(self) -> None:
        pos = Position()
        targets = {m.to_sq for m in pos.moves_from(E2)}
        assert targets == {Square(5, 4), E4}
        assert pos.moves_from(E4) == []
        assert pos.moves_from(Square(9, 0)) == []

    def test_moves_from_respects_castling_rights(self) -> None:
        pos = Position(board_from_placement("r3k2r/8/8/8/8/8/8/R3K2R"))
        assert Square(7, 6) in {m.to_sq for m in pos.moves_from(E1)}
        pos.apply_move(E1, Square(7, 5))
        pos.apply_move(Square(7, 5), E1)
        assert Square(7, 6) not in {m.to_sq for m in pos.moves_from(E1)}

    def test_king_square(self) -> None:
        pos = Position(board_from_placement("8/8/8/8/8/8/8/4K3"))
        assert pos.king_square(Color.WHITE) == E1
        assert pos.king_square(Color.BLACK) is None
