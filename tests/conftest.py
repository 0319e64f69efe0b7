"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.state import Game


@pytest.fixture
def game() -> Game:
    """Fresh game at the starting position."""
    return Game()


@pytest.fixture
def game_from() -> Callable[..., Game]:
    """Factory building a game from a board diagram (rank 8 first)."""

    def _build(diagram: str, turn: Color = Color.WHITE) -> Game:
        return Game(Board.from_diagram(diagram), turn=turn)

    return _build


@pytest.fixture
def board_with() -> Callable[[dict[Square, str]], Board]:
    """Factory building a board from ``{square: piece letter}``."""

    def _build(placement: dict[Square, str]) -> Board:
        board = Board()
        for sq, ch in placement.items():
            board[sq] = Piece.from_char(ch)
        return board

    return _build
