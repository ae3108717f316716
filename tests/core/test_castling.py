"""Tests for CastlingRights flag bookkeeping."""

import pytest

from kingside.core.castling import CastlingRights, king_home, rook_home
from kingside.core.enums import CastleSide, Color
from kingside.core.types import A1, A8, E1, E8, H1, H8


class TestCastlingRights:
    def test_fresh_rights_allow_every_wing(self) -> None:
        rights = CastlingRights()
        for color in Color:
            for side in CastleSide:
                assert rights.can_castle(color, side)

    @pytest.mark.parametrize(
        ("color", "side", "field"),
        [
            (Color.WHITE, CastleSide.KINGSIDE, "white_kingside_rook_moved"),
            (Color.WHITE, CastleSide.QUEENSIDE, "white_queenside_rook_moved"),
            (Color.BLACK, CastleSide.KINGSIDE, "black_kingside_rook_moved"),
            (Color.BLACK, CastleSide.QUEENSIDE, "black_queenside_rook_moved"),
        ],
    )
    def test_mark_rook_moved_sets_one_flag(
        self, color: Color, side: CastleSide, field: str
    ) -> None:
        rights = CastlingRights()
        rights.mark_rook_moved(color, side)

        assert rights == CastlingRights(**{field: True})
        assert rights.rook_moved(color, side)
        assert not rights.can_castle(color, side)
        other = next(s for s in CastleSide if s != side)
        assert rights.can_castle(color, other)
        assert rights.can_castle(color.opposite, side)

    @pytest.mark.parametrize(
        ("color", "field"),
        [(Color.WHITE, "white_king_moved"), (Color.BLACK, "black_king_moved")],
    )
    def test_mark_king_moved_blocks_both_wings(self, color: Color, field: str) -> None:
        rights = CastlingRights()
        rights.mark_king_moved(color)

        assert rights == CastlingRights(**{field: True})
        assert rights.king_moved(color)
        assert not rights.king_moved(color.opposite)
        for side in CastleSide:
            assert not rights.can_castle(color, side)
            assert rights.can_castle(color.opposite, side)

    def test_copy_is_independent(self) -> None:
        rights = CastlingRights()
        clone = rights.copy()
        clone.mark_king_moved(Color.WHITE)
        assert not rights.white_king_moved

    def test_home_squares(self) -> None:
        assert king_home(Color.WHITE) == E1
        assert king_home(Color.BLACK) == E8
        assert rook_home(Color.WHITE, CastleSide.KINGSIDE) == H1
        assert rook_home(Color.WHITE, CastleSide.QUEENSIDE) == A1
        assert rook_home(Color.BLACK, CastleSide.KINGSIDE) == H8
        assert rook_home(Color.BLACK, CastleSide.QUEENSIDE) == A8
