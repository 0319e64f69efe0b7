"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

_KIND_LETTERS = "PNBRQK"  # PieceType order

# Letter ↔ (Color, PieceType): uppercase = white, lowercase = black
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    **{ch: (Color.WHITE, PieceType(i + 1)) for i, ch in enumerate(_KIND_LETTERS)},
    **{
        ch.lower(): (Color.BLACK, PieceType(i + 1))
        for i, ch in enumerate(_KIND_LETTERS)
    },
}
_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}
_SYMBOLS: dict[str, str] = dict(zip("PNBRQKpnbrqk", "♙♘♗♖♕♔♟♞♝♜♛♚"))


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    An empty square is ``None`` wherever a ``Piece | None`` is expected.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _SYMBOLS[str(self)]

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self.color == color and self.piece_type == piece_type


def color_of(piece: Piece | None) -> Color | None:
    """Color of *piece*, or None for an empty square."""
    return None if piece is None else piece.color
