"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, LegalityFilter, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    legal = LegalityFilter(board).legal_moves(
        Color.WHITE, gen.generate_pseudo_legal_moves(Color.WHITE)
    )
    for move in legal:
        print(move.notation())
"""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, CheckState, Color, GameResult, PieceType
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece, color_of
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CheckState",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "LegalityFilter",
    "Move",
    "MoveGenerator",
    "Piece",
    "color_of",
]
