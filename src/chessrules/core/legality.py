"""Legality filter: simulate a move, look for a king capture, restore."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator


class LegalityFilter:
    """Decides whether moves leave the mover's own king capturable.

    The filter mutates the board it is given while simulating, but always
    restores it from a scratch copy before returning, whatever happens
    inside the simulation.
    """

    __slots__ = ("_board", "_scratch")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._scratch = Board()

    @contextmanager
    def simulate(self, move: Move) -> Iterator[Board]:
        """Temporarily play *move* on the board; restored on exit."""
        self._scratch.restore(self._board)
        try:
            self._board.make_move(move)
            yield self._board
        finally:
            self._board.restore(self._scratch)

    def is_legal(self, color: Color, move: Move) -> bool:
        """True if no opponent reply can capture *color*'s king after *move*."""
        with self.simulate(move) as board:
            replies = MoveGenerator(board).generate_pseudo_legal_moves(
                color.opposite, include_castling=False
            )
            for reply in replies:
                captured = reply.captured
                if captured is not None and captured.is_a(color, PieceType.KING):
                    return False
        return True

    def legal_moves(self, color: Color, candidates: Iterable[Move]) -> list[Move]:
        """*candidates* filtered down to moves legal for *color*."""
        return [m for m in candidates if self.is_legal(color, m)]
