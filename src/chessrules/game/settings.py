"""Game settings data class."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """Behaviour switches for :class:`~chessrules.game.state.Game`.

    The defaults give the plain two-step protocol: ``apply_move`` never
    advances the turn and accepts a move of either color, the caller
    calls ``switch_turn`` itself.
    """

    # Advance the turn after every successful apply_move
    auto_switch_turn: bool = False

    # Reject moves whose piece does not belong to the side to move
    strict_turn: bool = False
