"""Tests for promotion, en-passant and castling resolution."""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.special_moves import (
    available_castling,
    castling_moves,
    castling_rook_squares,
    castling_side,
    en_passant_targets,
    en_passant_victim,
    expand_promotions,
    revoke_castling_rights,
)
from chessrules.core.types import (
    A1, A8, B1, C1, C8, D1, D4, D5, D6, E1, E2, E3, E4, E5, E8, F1, F4, F8,
    G1, G5, G8, H1, H2, H4, H5, H6, H7, H8,
)

P = Piece.from_char("P")
p = Piece.from_char("p")
K = Piece.from_char("K")
R = Piece.from_char("R")
k = Piece.from_char("k")
r = Piece.from_char("r")

NO_ATTACKS: dict[Color, set[int]] = {Color.WHITE: set(), Color.BLACK: set()}


def castling_board() -> Board:
    return Board.from_diagram(
        """
        r...k..r
        ........
        ........
        ........
        ........
        ........
        ........
        R...K..R
        """
    )


class TestPromotion:
    def test_last_rank_expands_to_four(self) -> None:
        moves = expand_promotions(Move.quiet(P, H7, H8))
        assert len(moves) == 4
        assert {m.promotion.piece_type for m in moves if m.promotion} == {
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
        }
        assert all(m.promotion.color == Color.WHITE for m in moves if m.promotion)

    def test_black_promotes_on_first_rank(self) -> None:
        moves = expand_promotions(Move.quiet(p, H2, H1))
        assert len(moves) == 4
        assert Move.quiet(p, H2, H1) not in moves

    def test_capture_keeps_captured_piece(self) -> None:
        moves = expand_promotions(Move.capture(P, H7, G8, r))
        assert all(m.captured == r for m in moves)

    def test_other_moves_untouched(self) -> None:
        move = Move.quiet(P, E2, E4)
        assert expand_promotions(move) == [move]
        rook_move = Move.quiet(R, H7, H8)
        assert expand_promotions(rook_move) == [rook_move]


class TestEnPassantWindow:
    def test_double_step_opens_both_flanks(self) -> None:
        targets = en_passant_targets(Move.quiet(P, E2, E4))
        assert targets[Color.BLACK] == {D4: E3, F4: E3}
        assert targets[Color.WHITE] == {}

    def test_edge_file_has_one_flank(self) -> None:
        targets = en_passant_targets(Move.quiet(p, H7, H5))
        assert targets[Color.WHITE] == {G5: H6}

    def test_single_step_opens_nothing(self) -> None:
        targets = en_passant_targets(Move.quiet(P, E2, E3))
        assert targets == {Color.WHITE: {}, Color.BLACK: {}}

    def test_no_move_opens_nothing(self) -> None:
        assert en_passant_targets(None) == {Color.WHITE: {}, Color.BLACK: {}}

    def test_rook_two_ranks_is_not_double_step(self) -> None:
        targets = en_passant_targets(Move.quiet(R, H2, H4))
        assert targets[Color.BLACK] == {}

    def test_victim_square(self) -> None:
        assert en_passant_victim(Move.capture(P, E5, D6, p).as_en_passant()) == D5
        assert en_passant_victim(Move.capture(p, D4, E3, P).as_en_passant()) == E4


class TestCastlingRights:
    def test_king_move_drops_both(self) -> None:
        rights = revoke_castling_rights(CastlingRights.ALL, Move.quiet(K, E1, E2))
        assert rights == CastlingRights.BLACK_BOTH

    def test_rook_move_drops_one_side(self) -> None:
        rights = revoke_castling_rights(CastlingRights.ALL, Move.quiet(R, H1, H2))
        assert not rights & CastlingRights.WHITE_KINGSIDE
        assert rights & CastlingRights.WHITE_QUEENSIDE

    def test_capture_on_rook_square_drops_side(self) -> None:
        rights = revoke_castling_rights(CastlingRights.ALL, Move.capture(r, A8, A1, R))
        assert rights == CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_KINGSIDE

    def test_other_moves_keep_rights(self) -> None:
        rights = revoke_castling_rights(CastlingRights.ALL, Move.quiet(P, E2, E4))
        assert rights == CastlingRights.ALL

    def test_rook_squares(self) -> None:
        assert castling_rook_squares(Move.castle(K, E1, G1)) == (H1, F1)
        assert castling_rook_squares(Move.castle(K, E1, C1)) == (A1, D1)
        assert castling_rook_squares(Move.castle(k, E8, G8)) == (H8, F8)

    def test_castling_side_lookup(self) -> None:
        side = castling_side(Move.castle(K, E1, C1))
        assert side is not None
        assert side.right == CastlingRights.WHITE_QUEENSIDE
        assert castling_side(Move.castle(K, E1, E2)) is None
        assert castling_side(Move.castle(k, E1, G1)) is None


class TestCastlingAvailability:
    def test_all_available_on_clear_board(self) -> None:
        board = castling_board()
        assert available_castling(board, CastlingRights.ALL, NO_ATTACKS) == CastlingRights.ALL

    def test_revoked_right_stays_unavailable(self) -> None:
        board = castling_board()
        avail = available_castling(board, CastlingRights.WHITE_BOTH, NO_ATTACKS)
        assert avail == CastlingRights.WHITE_BOTH

    def test_blocked_between(self) -> None:
        board = castling_board()
        board[B1] = Piece.from_char("N")
        avail = available_castling(board, CastlingRights.ALL, NO_ATTACKS)
        assert not avail & CastlingRights.WHITE_QUEENSIDE
        assert avail & CastlingRights.WHITE_KINGSIDE

    def test_attacked_path(self) -> None:
        board = castling_board()
        attacked = {Color.WHITE: set(), Color.BLACK: {F1}}
        avail = available_castling(board, CastlingRights.ALL, attacked)
        assert not avail & CastlingRights.WHITE_KINGSIDE
        assert avail & CastlingRights.WHITE_QUEENSIDE

    def test_attacked_rook_side_square_is_fine(self) -> None:
        board = castling_board()
        attacked = {Color.WHITE: set(), Color.BLACK: {B1, H1}}
        avail = available_castling(board, CastlingRights.ALL, attacked)
        assert avail & CastlingRights.WHITE_BOTH == CastlingRights.WHITE_BOTH

    def test_king_in_check(self) -> None:
        board = castling_board()
        attacked = {Color.WHITE: set(), Color.BLACK: {E1}}
        avail = available_castling(board, CastlingRights.ALL, attacked)
        assert not avail & CastlingRights.WHITE_BOTH

    def test_missing_rook(self) -> None:
        board = castling_board()
        board[H8] = None
        avail = available_castling(board, CastlingRights.ALL, NO_ATTACKS)
        assert not avail & CastlingRights.BLACK_KINGSIDE

    def test_castling_moves(self) -> None:
        board = castling_board()
        moves = castling_moves(board, Color.BLACK, CastlingRights.ALL)
        assert set(moves) == {Move.castle(k, E8, G8), Move.castle(k, E8, C8)}
        assert all(m.castling for m in moves)
