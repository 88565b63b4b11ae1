"""Tests for the high-level rules: legal moves, check, mate, stalemate."""

from chesslite.core.board import Board
from chesslite.core.enums import Color, GameResult, GameStatus
from chesslite.core.notation import board_from_placement
from chesslite.core.rules import Rules
from chesslite.core.types import parse_square


class TestLegalMoves:
    def test_starting_position_has_twenty_moves(self) -> None:
        board = Board.initial()
        assert len(Rules.legal_moves(board, Color.WHITE)) == 20
        assert len(Rules.legal_moves(board, Color.BLACK)) == 20

    def test_knight_destinations_from_start(self) -> None:
        board = Board.initial()
        targets = Rules.legal_destinations(board, parse_square("g1"), Color.WHITE)
        assert targets == [parse_square("f3"), parse_square("h3")]

    def test_king_escape_squares(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        targets = Rules.legal_destinations(board, parse_square("e1"), Color.WHITE)
        assert targets == [parse_square("d2"), parse_square("e2"), parse_square("f2")]

    def test_only_blocking_move_for_bishop(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/4B3/r3K3")
        targets = Rules.legal_destinations(board, parse_square("e2"), Color.WHITE)
        assert targets == [parse_square("d1")]

    def test_enemy_piece_has_no_destinations(self) -> None:
        board = Board.initial()
        assert Rules.legal_destinations(board, parse_square("e7"), Color.WHITE) == []


class TestCheck:
    def test_not_in_check_at_start(self) -> None:
        board = Board.initial()
        assert not Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_rook_gives_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(board, Color.WHITE)
        assert Rules.classify(board, Color.WHITE) == GameStatus.CHECK


class TestCheckmate:
    def test_back_rank_mate(self) -> None:
        board = board_from_placement("Q3k3/3ppp2/8/8/8/8/8/4K3")
        assert Rules.is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.WHITE_WINS

    def test_king_and_rook_mate(self) -> None:
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.classify(board, Color.BLACK) == GameStatus.CHECKMATE

    def test_fools_mate(self) -> None:
        board = board_from_placement("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert Rules.is_checkmate(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.BLACK_WINS

    def test_check_with_escape_is_not_mate(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert not Rules.is_checkmate(board, Color.WHITE)
        assert Rules.game_result(board, Color.WHITE) == GameResult.IN_PROGRESS


class TestStalemate:
    def test_queen_stalemate(self) -> None:
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(board, Color.BLACK)
        assert Rules.game_result(board, Color.BLACK) == GameResult.DRAW

    def test_bare_kings_with_moves_not_stalemate(self) -> None:
        board = board_from_placement("7k/8/5K2/8/8/8/8/8")
        assert Rules.classify(board, Color.BLACK) == GameStatus.PLAYING

    def test_boxed_king_and_blocked_pawn_is_stalemate(self) -> None:
        # King a1 boxed in, the a-pawn blocked head-on.
        board = board_from_placement("k7/8/8/8/8/p7/P1q5/K7")
        assert not Rules.has_any_legal_move(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.WHITE)
        assert Rules.classify(board, Color.WHITE) == GameStatus.STALEMATE


class TestClassifyIsPure:
    def test_classify_does_not_mutate(self) -> None:
        board = board_from_placement("Q3k3/3ppp2/8/8/8/8/8/4K3")
        before = board.copy()
        Rules.classify(board, Color.BLACK)
        Rules.classify(board, Color.WHITE)
        assert board == before
