"""Promotion, en passant and castling resolution.

These rules need state that plain piece movement does not: the previous
ply (en passant), the history of king and rook moves (castling rights),
and the opponent's attack coverage (castling path safety).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    rank_of,
)

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
)

# attacker square -> landing square, for the color allowed to capture
EnPassantTargets = dict[Square, Square]


# ── Promotion ────────────────────────────────────────────────────────────────


def is_last_rank(sq: Square, color: Color) -> bool:
    """Whether *sq* lies on the rank where *color*'s pawns promote."""
    return rank_of(sq) == (7 if color == Color.WHITE else 0)


def expand_promotions(move: Move) -> list[Move]:
    """One move per promotion choice for a last-rank pawn move, else ``[move]``."""
    if move.piece.piece_type != PieceType.PAWN or not is_last_rank(
        move.target, move.piece.color
    ):
        return [move]
    return [move.with_promotion(pt) for pt in PROMOTION_TYPES]


# ── En passant ───────────────────────────────────────────────────────────────


def is_double_step(move: Move) -> bool:
    return (
        move.piece.piece_type == PieceType.PAWN
        and abs(rank_of(move.target) - rank_of(move.origin)) == 2
    )


def en_passant_targets(move: Move | None) -> dict[Color, EnPassantTargets]:
    """En-passant opportunities opened by *move* for the following ply.

    Every call starts from an empty window, so at most one double step's
    worth of opportunity exists at a time.
    """
    targets: dict[Color, EnPassantTargets] = {Color.WHITE: {}, Color.BLACK: {}}
    if move is None or not is_double_step(move):
        return targets

    landing = make_square(
        file_of(move.origin), (rank_of(move.origin) + rank_of(move.target)) // 2
    )
    capturer = move.piece.color.opposite
    for dfile in (-1, 1):
        attacker_sq = offset_square(move.target, dfile, 0)
        if attacker_sq is not None:
            targets[capturer][attacker_sq] = landing
    return targets


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en-passant capture."""
    return make_square(file_of(move.target), rank_of(move.origin))


# ── Castling ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CastlingSide:
    """Fixed geometry of one castling option."""

    right: CastlingRights
    color: Color
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]
    king_path: tuple[Square, ...]


def _side(color: Color, kingside: bool) -> CastlingSide:
    rank = 0 if color == Color.WHITE else 7

    def sq(f: int) -> Square:
        return make_square(f, rank)

    if kingside:
        return CastlingSide(
            right=CastlingRights.for_side(color, True),
            color=color,
            king_from=sq(4),
            king_to=sq(6),
            rook_from=sq(7),
            rook_to=sq(5),
            between=(sq(5), sq(6)),
            king_path=(sq(4), sq(5), sq(6)),
        )
    return CastlingSide(
        right=CastlingRights.for_side(color, False),
        color=color,
        king_from=sq(4),
        king_to=sq(2),
        rook_from=sq(0),
        rook_to=sq(3),
        between=(sq(1), sq(2), sq(3)),
        king_path=(sq(4), sq(3), sq(2)),
    )


CASTLING_SIDES: tuple[CastlingSide, ...] = tuple(
    _side(color, kingside)
    for color in (Color.WHITE, Color.BLACK)
    for kingside in (True, False)
)

_SIDES_BY_KING_MOVE: dict[tuple[Square, Square], CastlingSide] = {
    (s.king_from, s.king_to): s for s in CASTLING_SIDES
}
_SIDES_BY_ROOK_SQUARE: dict[Square, CastlingSide] = {
    s.rook_from: s for s in CASTLING_SIDES
}


def castling_side(move: Move) -> CastlingSide | None:
    """The castling option whose king move *move* is, if any."""
    side = _SIDES_BY_KING_MOVE.get((move.origin, move.target))
    if side is None or move.piece != Piece(side.color, PieceType.KING):
        return None
    return side


def castling_rook_squares(move: Move) -> tuple[Square, Square]:
    """(from, to) squares of the rook that accompanies a castling move.

    Raises ValueError when *move* is not a king move of a castling option.
    """
    side = castling_side(move)
    if side is None:
        raise ValueError(f"{move.notation()} is not a castling move")
    return side.rook_from, side.rook_to


def revoke_castling_rights(rights: CastlingRights, move: Move) -> CastlingRights:
    """Rights left after *move*: a king move drops both sides, a move from
    or onto a rook's original square drops that side."""
    remaining = rights
    if move.piece.piece_type == PieceType.KING:
        remaining &= ~CastlingRights.both(move.piece.color)

    for sq in (move.origin, move.target):
        side = _SIDES_BY_ROOK_SQUARE.get(sq)
        if side is not None:
            remaining &= ~side.right

    if remaining != rights:
        _LOGGER.debug("Castling rights %r -> %r after %s", rights, remaining, move)
    return remaining


def available_castling(
    board: Board,
    rights: CastlingRights,
    attacked: Mapping[Color, set[Square]],
) -> CastlingRights:
    """Castling options playable right now.

    A side is available when its right is intact, king and rook stand on
    their original squares, the squares between them are empty, and no
    square the king crosses (origin included) is in the opponent's
    attack coverage.
    """
    available = CastlingRights.NONE
    for side in CASTLING_SIDES:
        if not rights & side.right:
            continue
        if board[side.king_from] != Piece(side.color, PieceType.KING):
            continue
        if board[side.rook_from] != Piece(side.color, PieceType.ROOK):
            continue
        if any(not board.is_empty(sq) for sq in side.between):
            continue
        enemy_coverage = attacked[side.color.opposite]
        if any(sq in enemy_coverage for sq in side.king_path):
            continue
        available |= side.right
    return available


def castling_moves(board: Board, color: Color, available: CastlingRights) -> list[Move]:
    """Castling moves for *color* permitted by *available*."""
    moves: list[Move] = []
    for side in CASTLING_SIDES:
        if side.color != color or not available & side.right:
            continue
        king = board[side.king_from]
        if king is not None:
            moves.append(Move.castle(king, side.king_from, side.king_to))
    return moves
