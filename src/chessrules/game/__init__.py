"""Game management layer - the rules state machine.

Quick start::

    from chessrules.game import new_game

    game = new_game()
    move = game.legal_moves()[0]
    game.apply_move(move)
    game.switch_turn()
"""

from chessrules.game.settings import GameSettings
from chessrules.game.state import Game, load_board, new_game

__all__ = [
    "Game",
    "GameSettings",
    "load_board",
    "new_game",
]
