"""Piece value object and its text forms."""

from __future__ import annotations

from dataclasses import dataclass

from kingside.core.enums import Color, PieceType

# Lowercase placement letter per type; white pieces use the uppercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_TYPE_OF_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}

# (white glyph, black glyph)
_GLYPHS: dict[PieceType, tuple[str, str]] = {
    PieceType.PAWN: ("♙", "♟"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.KING: ("♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece; squares hold ``Piece | None``."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` → white knight, ``'n'`` → black knight."""
        ptype = _TYPE_OF_LETTER.get(char.lower()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        """Unicode glyph drawn on the board."""
        white, black = _GLYPHS[self.piece_type]
        return white if self.color == Color.WHITE else black

    def is_enemy_of(self, other: Piece | None) -> bool:
        return other is not None and other.color != self.color

    def is_friend_of(self, other: Piece | None) -> bool:
        return other is not None and other.color == self.color
