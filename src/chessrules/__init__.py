"""chessrules: a rules engine for standard chess.

Quick start::

    from chessrules import Color, new_game

    game = new_game()
    for move in game.legal_moves(Color.WHITE):
        print(move.notation())
"""

from chessrules.core import (
    Board,
    CastlingRights,
    CheckState,
    Color,
    GameResult,
    Move,
    Piece,
    PieceType,
    Square,
    color_of,
    parse_square,
    square_name,
)
from chessrules.game import Game, GameSettings, load_board, new_game

__version__ = "0.1.0"

__all__ = [
    "Board",
    "CastlingRights",
    "CheckState",
    "Color",
    "Game",
    "GameResult",
    "GameSettings",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "color_of",
    "load_board",
    "new_game",
    "parse_square",
    "square_name",
]
