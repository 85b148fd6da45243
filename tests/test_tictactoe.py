import pytest

from arcadebox.tictactoe import (
    DRAW_MESSAGE,
    INVALID_MESSAGE,
    TAKEN_MESSAGE,
    CellTakenError,
    TicTacToe,
    play,
)

DRAW_MOVES = ["1 1", "2 2", "3 3", "2 3", "3 2", "1 2", "1 3", "3 1", "2 1"]


def _scripted(lines):
    feed = iter(lines)
    return lambda: next(feed)


def _run(lines):
    out = []
    result = play(TicTacToe(), _scripted(lines), out.append)
    return result, out


def _game_with(moves):
    game = TicTacToe()
    for row, col in moves:
        game.place(row, col)
    return game


def test_place_alternates_marks():
    game = TicTacToe()
    assert game.place(1, 1) == "X"
    assert game.place(2, 2) == "O"
    assert game.turn == "X"
    assert game.moves == 2
    assert game.cells[0][0] == "X"
    assert game.cells[1][1] == "O"


@pytest.mark.parametrize("row,col", [(0, 1), (4, 1), (1, 0), (1, 4), (-1, 2)])
def test_place_out_of_range(row, col):
    game = TicTacToe()
    with pytest.raises(ValueError):
        game.place(row, col)
    assert game.moves == 0


def test_place_on_taken_cell():
    game = TicTacToe()
    game.place(2, 3)
    before = game.cells
    with pytest.raises(CellTakenError):
        game.place(2, 3)
    assert game.cells == before
    assert game.turn == "O"


def test_fresh_render():
    assert TicTacToe().render() == "_ _ _  \n_ _ _  \n_ _ _  "


def test_render_shows_marks():
    game = _game_with([(1, 1), (3, 3)])
    lines = game.render().split("\n")
    assert lines[0].startswith("X _ _")
    assert lines[2].startswith("_ _ O")


def test_no_gameover_before_fifth_move():
    game = _game_with([(1, 1), (1, 2), (2, 1), (2, 2)])
    assert game.gameover() is False
    assert game.winner is None


def test_row_win():
    game = _game_with([(1, 1), (2, 1), (1, 2), (2, 2), (1, 3)])
    assert game.gameover() is True
    assert game.winner == "X"
    assert game.draw is False


def test_column_win_for_o():
    game = _game_with([(1, 1), (1, 2), (2, 1), (2, 2), (3, 3), (3, 2)])
    assert game.gameover() is True
    assert game.winner == "O"


def test_diagonal_win():
    game = _game_with([(1, 3), (1, 1), (2, 2), (1, 2), (3, 1)])
    assert game.gameover() is True
    assert game.winner == "X"


def test_empty_row_ends_game_without_winner():
    game = _game_with([(1, 1), (1, 2), (1, 3), (2, 1), (2, 2)])
    assert game.gameover() is True
    assert game.winner is None
    assert game.draw is False


def test_full_board_without_line_is_draw():
    game = TicTacToe()
    for move in DRAW_MOVES[:-1]:
        game.place(*map(int, move.split()))
        assert game.gameover() is False
    game.place(2, 1)
    assert game.gameover() is True
    assert game.draw is True
    assert game.winner is None


def test_play_x_wins():
    result, out = _run(["1 1", "2 1", "1 2", "2 2", "1 3"])
    assert result == "X"
    assert out[-1] == "  Congratulations! Player with 'X' has won the game"


def test_play_draw():
    result, out = _run(DRAW_MOVES)
    assert result is None
    assert out[-1] == DRAW_MESSAGE


def test_play_rejects_bad_input_then_continues():
    lines = ["0 5", "abc", "1", "1 1", "1 1", "2 1", "1 2", "2 2", "1 3"]
    result, out = _run(lines)
    assert result == "X"
    assert out.count(INVALID_MESSAGE) == 3
    assert out.count(TAKEN_MESSAGE) == 1


def test_play_prompts_name_the_current_player():
    _, out = _run(["1 1", "2 1", "1 2", "2 2", "1 3"])
    prompts = [line for line in out if line.startswith("Player - ")]
    assert len(prompts) == 5
    assert prompts[0].startswith("Player - 1 [X]")
    assert prompts[1].startswith("Player - 2 [O]")
    assert out[0] == "Welcome to TicTacToe..."