"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.special_moves import castling_rook_squares, en_passant_victim
from chessrules.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board, index 0 = a1, 63 = h8."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> list[Piece | None]:
        """Copy of the 64 squares in index order."""
        return self._squares.copy()

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """(square, piece) pairs for every piece of *color*, in scan order."""
        return [
            (sq, p)
            for sq, p in enumerate(self._squares)
            if p is not None and p.color == color
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is missing."""
        for sq, p in enumerate(self._squares):
            if p is not None and p.is_a(color, PieceType.KING):
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, move: Move) -> None:
        """Apply the raw board effect of *move* (no bookkeeping, no checks)."""
        rook_squares = castling_rook_squares(move) if move.castling else None

        placed = move.promotion if move.promotion is not None else move.piece
        self._squares[move.target] = placed
        self._squares[move.origin] = None

        if move.en_passant:
            self._squares[en_passant_victim(move)] = None
        elif rook_squares is not None:
            rook_from, rook_to = rook_squares
            self._squares[rook_to] = self._squares[rook_from]
            self._squares[rook_from] = None

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def restore(self, other: Board) -> None:
        """Overwrite every square with the contents of *other*."""
        self._squares[:] = other._squares

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def from_squares(cls, squares: Iterable[Piece | None]) -> Board:
        """Board from 64 pieces in index order (a1, b1, ..., h8)."""
        placed = list(squares)
        if len(placed) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(placed)}")
        b = cls()
        b._squares = placed
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Board from an 8-line picture, rank 8 first, ``.`` for empty.

        Whitespace inside a line is ignored, so both ``"rnbqkbnr"`` and
        ``"r n b q k b n r"`` are accepted.
        """
        rows = [
            "".join(line.split()) for line in diagram.strip().splitlines()
        ]
        if len(rows) != 8:
            raise ValueError(f"Diagram needs 8 ranks, got {len(rows)}")
        b = cls()
        for row_idx, row in enumerate(rows):
            if len(row) != 8:
                raise ValueError(f"Diagram rank {8 - row_idx} has {len(row)} files")
            rank = 7 - row_idx
            for f, ch in enumerate(row):
                if ch != ".":
                    b[make_square(f, rank)] = Piece.from_char(ch)
        return b

    def diagram(self) -> str:
        """Inverse of :meth:`from_diagram`."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            rows.append(
                "".join(
                    str(p) if p else "." for p in self._squares[rank * 8 : rank * 8 + 8]
                )
            )
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
