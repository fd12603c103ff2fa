"""Unit tests for /src/checkers/moves.py"""

import pytest

from src.checkers.board import Board
from src.checkers.moves import Move, is_legal, parse_move
from src.checkers.pieces import Token
from src.checkers.square import Square
from src.core.shared_types import Color


@pytest.fixture
def board() -> Board:
    return Board.starting_position()


def board_with_single_piece(token: Token, square_name: str) -> Board:
    board = Board.empty()
    board.place_piece(token, Square.from_algebraic(square_name))
    return board


# --- PARSING ---
@pytest.mark.parametrize(
    "text, from_sq, to_sq",
    [
        ("e3 d4", "e3", "d4"),
        ("E3 D4", "e3", "d4"),
        ("a1 h8", "a1", "h8"),
        ("b6\tc5", "b6", "c5"),
    ],
)
def test_parse_move(text: str, from_sq: str, to_sq: str) -> None:
    assert parse_move(text) == Move.from_algebraic(from_sq, to_sq)


@pytest.mark.parametrize(
    "text",
    [
        "e3-d4",
        "i3 d4",  # file out of a-h
        "e9 d4",  # rank out of 1-8
        "e3  d4",  # double space
        "e0 d4",
        " e3 d4",
        "e3 d4 ",
        "e3d4",
        "e10 d4",
        "e3 d4 c5",
        "",
    ],
)
def test_parse_move_rejects_malformed(text: str) -> None:
    assert parse_move(text) is None


def test_move_to_text() -> None:
    assert Move.from_algebraic("e3", "d4").to_text() == "e3 d4"


# --- LEGALITY ---
def test_white_opening_step_is_legal(board: Board) -> None:
    move = parse_move("e3 d4")
    assert move is not None
    assert is_legal(board, move, Color.BLANC)


def test_two_row_move_is_illegal(board: Board) -> None:
    move = parse_move("e3 e5")
    assert move is not None
    assert not is_legal(board, move, Color.BLANC)


@pytest.mark.parametrize("text", ["c3 b4", "c3 d4", "a3 b4", "g3 h4", "g3 f4"])
def test_white_steps_forward_diagonally(board: Board, text: str) -> None:
    move = parse_move(text)
    assert move is not None
    assert is_legal(board, move, Color.BLANC)


@pytest.mark.parametrize("text", ["b6 a5", "b6 c5", "d6 e5", "h6 g5"])
def test_black_steps_forward_diagonally(board: Board, text: str) -> None:
    move = parse_move(text)
    assert move is not None
    assert is_legal(board, move, Color.NOIR)


@pytest.mark.parametrize("text", ["b6 a5", "e3 d4"])
def test_piece_of_other_color_cannot_move(board: Board, text: str) -> None:
    """The black man on b6 on white's turn and the white man on e3 on black's turn."""
    move = parse_move(text)
    assert move is not None
    color = Color.BLANC if text.startswith("b6") else Color.NOIR
    assert not is_legal(board, move, color)


def test_empty_origin_is_illegal(board: Board) -> None:
    move = Move.from_algebraic("d4", "c5")
    assert not is_legal(board, move, Color.BLANC)
    assert not is_legal(board, move, Color.NOIR)


@pytest.mark.parametrize(
    "token, color, origin, destination",
    [
        (Token.WHITE_MAN, Color.BLANC, "d4", "c3"),  # backwards
        (Token.WHITE_MAN, Color.BLANC, "d4", "d5"),  # straight
        (Token.WHITE_MAN, Color.BLANC, "d4", "e4"),  # sideways
        (Token.WHITE_MAN, Color.BLANC, "d4", "f6"),  # two diagonal squares
        (Token.BLACK_MAN, Color.NOIR, "d4", "c5"),  # backwards
        (Token.BLACK_MAN, Color.NOIR, "d4", "d3"),  # straight
        (Token.BLACK_MAN, Color.NOIR, "d4", "b2"),  # two diagonal squares
    ],
)
def test_only_single_forward_diagonal_steps(
    token: Token, color: Color, origin: str, destination: str
) -> None:
    board = board_with_single_piece(token, origin)
    assert not is_legal(board, Move.from_algebraic(origin, destination), color)


@pytest.mark.parametrize(
    "token, color, destination",
    [
        (Token.WHITE_KING, Color.BLANC, "c5"),
        (Token.WHITE_KING, Color.BLANC, "c3"),
        (Token.BLACK_KING, Color.NOIR, "c3"),
        (Token.BLACK_KING, Color.NOIR, "c5"),
    ],
)
def test_kings_never_move(token: Token, color: Color, destination: str) -> None:
    board = board_with_single_piece(token, "d4")
    assert not is_legal(board, Move.from_algebraic("d4", destination), color)


@pytest.mark.parametrize("blocker", [Token.WHITE_MAN, Token.BLACK_MAN, Token.BLACK_KING])
def test_occupied_destination_is_illegal(blocker: Token) -> None:
    """No captures and no stacking: whatever stands on the destination blocks the move."""
    board = board_with_single_piece(Token.WHITE_MAN, "e3")
    board.place_piece(blocker, Square.from_algebraic("d4"))
    assert not is_legal(board, Move.from_algebraic("e3", "d4"), Color.BLANC)


def test_occupied_destination_at_any_distance(board: Board) -> None:
    """e3 to c1 and e3 to b6 land on own / opponent's men."""
    assert not is_legal(board, Move.from_algebraic("e3", "c1"), Color.BLANC)
    assert not is_legal(board, Move.from_algebraic("e3", "b6"), Color.BLANC)


def test_out_of_bounds_is_illegal(board: Board) -> None:
    move = Move(Square(5, 0), Square(4, -1))
    assert not is_legal(board, move, Color.BLANC)
    move = Move(Square(8, 1), Square(7, 0))
    assert not is_legal(board, move, Color.BLANC)


def test_legality_check_leaves_board_untouched(board: Board) -> None:
    before = board.to_rows()
    for text in ["e3 d4", "e3 e5", "b6 a5"]:
        move = parse_move(text)
        assert move is not None
        is_legal(board, move, Color.BLANC)
    assert board.to_rows() == before
