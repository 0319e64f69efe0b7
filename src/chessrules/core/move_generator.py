"""Pseudo-legal move generation and attack coverage."""

from __future__ import annotations

from collections.abc import Mapping

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.special_moves import (
    EnPassantTargets,
    castling_moves,
    expand_promotions,
)
from chessrules.core.types import (
    Square,
    Step,
    file_of,
    make_square,
    offset_square,
    rank_of,
    ray,
)

KNIGHT_OFFSETS: tuple[Step, ...] = (
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
    (2, 1),
    (-2, 1),
    (2, -1),
    (-2, -1),
)

KING_OFFSETS: tuple[Step, ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

BISHOP_DIRS: tuple[Step, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
ROOK_DIRS: tuple[Step, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
QUEEN_DIRS: tuple[Step, ...] = ROOK_DIRS + BISHOP_DIRS

_PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


class MoveGenerator:
    """Generates pseudo-legal moves (king safety ignored) for a :class:`Board`.

    ``en_passant`` maps each color to the en-passant window it may use this
    ply; ``castling`` holds the castling options currently available.
    """

    __slots__ = ("_board", "_en_passant", "_castling")

    def __init__(
        self,
        board: Board,
        en_passant: Mapping[Color, EnPassantTargets] | None = None,
        castling: CastlingRights = CastlingRights.NONE,
    ) -> None:
        self._board = board
        self._en_passant = en_passant or {}
        self._castling = castling

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(
        self, color: Color, include_castling: bool = True
    ) -> list[Move]:
        """All pseudo-legal moves for *color*, in board-scan order."""
        moves: list[Move] = []
        for sq, piece in self._board.pieces(color):
            pt = piece.piece_type
            if pt == PieceType.PAWN:
                self._gen_pawn(sq, piece, moves)
            elif pt == PieceType.KNIGHT:
                self._gen_steps(sq, piece, KNIGHT_OFFSETS, moves)
            elif pt == PieceType.BISHOP:
                self._gen_sliding(sq, piece, BISHOP_DIRS, moves)
            elif pt == PieceType.ROOK:
                self._gen_sliding(sq, piece, ROOK_DIRS, moves)
            elif pt == PieceType.QUEEN:
                self._gen_sliding(sq, piece, QUEEN_DIRS, moves)
            elif pt == PieceType.KING:
                self._gen_steps(sq, piece, KING_OFFSETS, moves)
            else:
                raise ValueError(f"Unhandled piece type: {pt!r}")

        if include_castling and self._castling:
            moves.extend(castling_moves(self._board, color, self._castling))
        return moves

    def attacked_squares(self, color: Color) -> set[Square]:
        """Squares *color* attacks: its move targets, minus pawn pushes,
        plus every square diagonally in front of its pawns."""
        attacked: set[Square] = set()
        for move in self.generate_pseudo_legal_moves(color, include_castling=False):
            if move.piece.piece_type == PieceType.PAWN:
                continue
            attacked.add(move.target)

        for sq, piece in self._board.pieces(color):
            if piece.piece_type != PieceType.PAWN:
                continue
            for dfile in (-1, 1):
                to_sq = offset_square(sq, dfile, color.direction)
                if to_sq is not None:
                    attacked.add(to_sq)
        return attacked

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, pawn: Piece, moves: list[Move]) -> None:
        board = self._board
        color = pawn.color
        forward = color.direction
        candidates: list[Move] = []

        one_step = offset_square(sq, 0, forward)
        if one_step is not None and board.is_empty(one_step):
            candidates.append(Move.quiet(pawn, sq, one_step))
            if rank_of(sq) == _PAWN_HOME_RANK[color]:
                two_step = offset_square(sq, 0, 2 * forward)
                if two_step is not None and board.is_empty(two_step):
                    candidates.append(Move.quiet(pawn, sq, two_step))

        for dfile in (1, -1):
            cap_sq = offset_square(sq, dfile, forward)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                candidates.append(Move.capture(pawn, sq, cap_sq, target))

        landing = self._en_passant.get(color, {}).get(sq)
        if landing is not None:
            victim = board[make_square(file_of(landing), rank_of(sq))]
            if victim is not None and victim.is_a(color.opposite, PieceType.PAWN):
                candidates.append(
                    Move.capture(pawn, sq, landing, victim).as_en_passant()
                )

        for move in candidates:
            moves.extend(expand_promotions(move))

    def _gen_steps(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[Step, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_sq = offset_square(sq, df, dr)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None:
                moves.append(Move.quiet(piece, sq, to_sq))
            elif target.color != piece.color:
                moves.append(Move.capture(piece, sq, to_sq, target))

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[Step, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for step in directions:
            for to_sq in ray(sq, step):
                target = board[to_sq]
                if target is None:
                    moves.append(Move.quiet(piece, sq, to_sq))
                    continue
                if target.color != piece.color:
                    moves.append(Move.capture(piece, sq, to_sq, target))
                break
