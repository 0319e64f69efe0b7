"""Tests for the simulate-then-restore legality filter."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.types import B5, C6, E1, E2, E3, E4, F1, F2

K = Piece.from_char("K")
P = Piece.from_char("P")
B = Piece.from_char("B")
p = Piece.from_char("p")


def pinned_bishop_board() -> Board:
    # white bishop on e2 pinned by the rook on e8
    return Board.from_diagram(
        """
        ....r..k
        ........
        ........
        ........
        ........
        ........
        ....B...
        ....K...
        """
    )


class TestIsLegal:
    def test_pinned_piece_cannot_leave_line(self) -> None:
        board = pinned_bishop_board()
        legality = LegalityFilter(board)
        assert not legality.is_legal(Color.WHITE, Move.quiet(B, E2, F1))

    def test_king_may_not_step_into_attack(self) -> None:
        board = pinned_bishop_board()
        legality = LegalityFilter(board)
        assert legality.is_legal(Color.WHITE, Move.quiet(K, E1, F2))
        board[E2] = None
        assert not legality.is_legal(Color.WHITE, Move.quiet(K, E1, E2))

    def test_only_king_moves_off_the_file_survive(self) -> None:
        board = pinned_bishop_board()
        candidates = MoveGenerator(board).generate_pseudo_legal_moves(Color.WHITE)
        legal = LegalityFilter(board).legal_moves(Color.WHITE, candidates)
        assert {m.origin for m in legal} == {E1}
        assert {m.target for m in legal} == {3, 5, 11, 13}

    def test_en_passant_discovered_check(self) -> None:
        board = Board.from_diagram(
            """
            ....k...
            ........
            ........
            KPp....r
            ........
            ........
            ........
            ........
            """
        )
        ep = Move.capture(P, B5, C6, p).as_en_passant()
        assert not LegalityFilter(board).is_legal(Color.WHITE, ep)
        # a plain push keeps the c5 pawn as a shield
        assert LegalityFilter(board).is_legal(Color.WHITE, Move.quiet(P, B5, 41))

    def test_lone_king_moves_without_enemy_king(self) -> None:
        board = Board()
        board[E1] = K
        assert LegalityFilter(board).is_legal(Color.WHITE, Move.quiet(K, E1, F1))


class TestSimulation:
    def test_board_restored_after_check(self) -> None:
        board = pinned_bishop_board()
        before = board.copy()
        LegalityFilter(board).is_legal(Color.WHITE, Move.quiet(B, E2, F1))
        assert board == before

    def test_board_restored_after_error(self) -> None:
        board = Board.initial()
        legality = LegalityFilter(board)
        with pytest.raises(RuntimeError):
            with legality.simulate(Move.quiet(P, E2, E4)) as simulated:
                assert simulated[E4] == P
                raise RuntimeError("boom")
        assert board == Board.initial()

    def test_simulation_sees_move(self) -> None:
        board = Board.initial()
        with LegalityFilter(board).simulate(Move.quiet(P, E2, E3)) as simulated:
            assert simulated[E3] == P
            assert simulated[E2] is None
        assert board[E3] is None
