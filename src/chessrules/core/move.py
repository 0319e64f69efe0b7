"""Move value object and its compact notation."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, file_of, square_name

_NOTATION_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of one ply.

    ``piece`` must match the occupant of ``origin`` when the move is
    applied; ``captured`` is the piece removed from the board (for en
    passant, the pawn beside the target square).
    """

    piece: Piece
    origin: Square
    target: Square
    captured: Piece | None = None
    promotion: Piece | None = None
    en_passant: bool = False
    castling: bool = False

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def quiet(cls, piece: Piece, origin: Square, target: Square) -> Move:
        return cls(piece, origin, target)

    @classmethod
    def capture(
        cls, piece: Piece, origin: Square, target: Square, captured: Piece
    ) -> Move:
        return cls(piece, origin, target, captured=captured)

    @classmethod
    def castle(cls, king: Piece, origin: Square, target: Square) -> Move:
        return cls(king, origin, target, castling=True)

    def with_promotion(self, piece_type: PieceType) -> Move:
        """Copy of this move promoting to *piece_type* of the mover's color."""
        return replace(self, promotion=Piece(self.piece.color, piece_type))

    def as_en_passant(self) -> Move:
        return replace(self, en_passant=True)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_kingside_castle(self) -> bool:
        return self.castling and file_of(self.target) - file_of(self.origin) == 2

    @property
    def is_queenside_castle(self) -> bool:
        return self.castling and file_of(self.target) - file_of(self.origin) == -2

    # ── Display ──────────────────────────────────────────────────────────

    def notation(self) -> str:
        """Compact long-algebraic text, e.g. ``Nb1c3``, ``e5xd6 e.p.``, ``O-O``."""
        if self.castling:
            return "O-O-O" if self.is_queenside_castle else "O-O"

        text = _NOTATION_LETTERS[self.piece.piece_type] + square_name(self.origin)
        if self.is_capture:
            text += "x"
        text += square_name(self.target)
        if self.promotion is not None:
            text += f"({_NOTATION_LETTERS[self.promotion.piece_type]})"
        if self.en_passant:
            text += " e.p."
        return text

    def __str__(self) -> str:
        return self.notation()
