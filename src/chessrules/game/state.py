"""Game state machine - board, turn, special-rule state and cached legal moves."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, CheckState, Color, GameResult, PieceType
from chessrules.core.legality import LegalityFilter
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.special_moves import (
    EnPassantTargets,
    available_castling,
    castling_side,
    en_passant_targets,
    revoke_castling_rights,
)
from chessrules.core.types import Square, is_valid_square
from chessrules.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class Game:
    """A game in progress.

    Every successful :meth:`apply_move` mutates the board and then
    synchronously rebuilds all derived state, for both colors: the
    en-passant window, castling rights and availability, attack
    coverage, check state and the legal-move caches.  The turn is only
    advanced by :meth:`switch_turn` (unless ``auto_switch_turn`` is set),
    and because derived state is kept per color, forgetting to switch
    never leaves a stale cache behind.
    """

    __slots__ = (
        "_board",
        "_filter",
        "_turn",
        "_settings",
        "_castling_rights",
        "_available_castling",
        "_en_passant",
        "_attacked",
        "_legal",
        "_check",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling_rights: CastlingRights | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        if castling_rights is None:
            castling_rights = CastlingRights.ALL if board is None else CastlingRights.NONE
        self._board = Board.initial() if board is None else board.copy()
        self._filter = LegalityFilter(self._board)
        self._turn = turn
        self._settings = settings if settings is not None else GameSettings()
        self._castling_rights = castling_rights
        self._available_castling = CastlingRights.NONE
        self._en_passant: dict[Color, EnPassantTargets] = en_passant_targets(None)
        self._attacked: dict[Color, set[Square]] = {}
        self._legal: dict[Color, list[Move]] = {}
        self._check: dict[Color, CheckState] = {}
        self._refresh()

    # ── Setup ────────────────────────────────────────────────────────────

    def load_board(self, squares: Board | Iterable[Piece | None]) -> None:
        """Replace the position; all castling rights are revoked.

        Call :meth:`set_castling_rights` afterwards to re-enable them.
        """
        board = squares if isinstance(squares, Board) else Board.from_squares(squares)
        self._board.restore(board)
        self._castling_rights = CastlingRights.NONE
        self._en_passant = en_passant_targets(None)
        self._refresh()

    def set_castling_rights(
        self,
        white_kingside: bool,
        white_queenside: bool,
        black_kingside: bool,
        black_queenside: bool,
    ) -> None:
        rights = CastlingRights.NONE
        if white_kingside:
            rights |= CastlingRights.WHITE_KINGSIDE
        if white_queenside:
            rights |= CastlingRights.WHITE_QUEENSIDE
        if black_kingside:
            rights |= CastlingRights.BLACK_KINGSIDE
        if black_queenside:
            rights |= CastlingRights.BLACK_QUEENSIDE
        self._castling_rights = rights
        self._refresh()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> bool:
        """Play *move*; returns False and changes nothing if it is rejected.

        A move is rejected when its squares are off the board, its
        ``piece`` is not what stands on ``origin``, or it is flagged as
        castling without being a castling king move.
        """
        if not (is_valid_square(move.origin) and is_valid_square(move.target)):
            _LOGGER.warning(
                "Rejected move %r: square out of range", (move.origin, move.target)
            )
            return False

        occupant = self._board[move.origin]
        if occupant != move.piece:
            _LOGGER.warning(
                "Rejected move %s: origin holds %s", move, occupant or "nothing"
            )
            return False

        if self._settings.strict_turn and move.piece.color != self._turn:
            _LOGGER.warning("Rejected move %s: %s to move", move, self._turn)
            return False

        if move.castling and castling_side(move) is None:
            _LOGGER.warning("Rejected move %r: not a castling king move", move)
            return False

        self._board.make_move(move)
        self._en_passant = en_passant_targets(move)
        self._castling_rights = revoke_castling_rights(self._castling_rights, move)
        self._refresh()
        _LOGGER.debug(
            "Applied %s (white %s, black %s)",
            move,
            self._check[Color.WHITE].name,
            self._check[Color.BLACK].name,
        )

        if self._settings.auto_switch_turn:
            self.switch_turn()
        return True

    def switch_turn(self) -> None:
        self._turn = self._turn.opposite
        _LOGGER.debug("Turn passes to %s", self._turn)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def board(self) -> Board:
        """Copy of the current board."""
        return self._board.copy()

    def squares(self) -> list[Piece | None]:
        return self._board.squares()

    @property
    def castling_rights(self) -> CastlingRights:
        """Persistent rights: lost for good once king or rook has moved."""
        return self._castling_rights

    @property
    def available_castling(self) -> CastlingRights:
        """Castling options playable this ply."""
        return self._available_castling

    def en_passant_targets(self, color: Color) -> EnPassantTargets:
        """Attacker square → landing square pairs open to *color*."""
        return dict(self._en_passant[color])

    def attacked_squares(self, color: Color) -> set[Square]:
        """Squares *color* currently attacks."""
        return set(self._attacked[color])

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Legal moves for *color* (default: side to move), in generation order."""
        if color is None:
            color = self._turn
        return list(self._legal[color])

    def pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        if color is None:
            color = self._turn
        return self._generator().generate_pseudo_legal_moves(color)

    def is_legal(self, color: Color, move: Move) -> bool:
        return self._filter.is_legal(color, move)

    def find_move(
        self,
        origin: Square,
        target: Square,
        promotion: PieceType | None = None,
    ) -> Move | None:
        """The side to move's legal move between two squares, if any."""
        for move in self._legal[self._turn]:
            if move.origin != origin or move.target != target:
                continue
            promoted = move.promotion.piece_type if move.promotion else None
            if promoted == promotion:
                return move
        return None

    def check_state(self, color: Color | None = None) -> CheckState:
        if color is None:
            color = self._turn
        return self._check[color]

    def is_check(self) -> bool:
        return self._check[self._turn] == CheckState.CHECK

    def is_ended(self) -> bool:
        return not self._legal[self._turn]

    def is_checkmate(self) -> bool:
        return self.is_ended() and self.is_check()

    def is_stalemate(self) -> bool:
        return self.is_ended() and not self.is_check()

    def result(self) -> GameResult:
        if not self.is_ended():
            return GameResult.IN_PROGRESS
        if not self.is_check():
            return GameResult.DRAW
        return GameResult.win_for(self._turn.opposite)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent copy sharing no mutable state."""
        game = Game.__new__(Game)
        game._board = self._board.copy()
        game._filter = LegalityFilter(game._board)
        game._turn = self._turn
        game._settings = replace(self._settings)
        game._castling_rights = self._castling_rights
        game._available_castling = self._available_castling
        game._en_passant = {c: dict(t) for c, t in self._en_passant.items()}
        game._attacked = {c: set(s) for c, s in self._attacked.items()}
        game._legal = {c: list(m) for c, m in self._legal.items()}
        game._check = dict(self._check)
        return game

    def __repr__(self) -> str:
        return f"{self._board!r}\n{self._turn} to move"

    # ── Internal ─────────────────────────────────────────────────────────

    def _generator(self) -> MoveGenerator:
        return MoveGenerator(self._board, self._en_passant, self._available_castling)

    def _refresh(self) -> None:
        """Rebuild coverage, castling availability, legal moves and check."""
        raw = MoveGenerator(self._board, self._en_passant)
        self._attacked = {c: raw.attacked_squares(c) for c in Color}
        self._available_castling = available_castling(
            self._board, self._castling_rights, self._attacked
        )

        gen = self._generator()
        self._legal = {
            c: self._filter.legal_moves(c, gen.generate_pseudo_legal_moves(c))
            for c in Color
        }

        for color in Color:
            king_sq = self._board.king_square(color)
            attacked = king_sq is not None and king_sq in self._attacked[color.opposite]
            self._check[color] = CheckState.CHECK if attacked else CheckState.NORMAL


def new_game(settings: GameSettings | None = None) -> Game:
    """Game at the standard starting position, all castling rights enabled."""
    return Game(settings=settings)


def load_board(game: Game, squares: Board | Iterable[Piece | None]) -> None:
    """Overwrite *game*'s board; castling rights are revoked."""
    game.load_board(squares)
