import random

import pytest

from arcadebox.minesweeper import Action, Minesweeper, parse_command, play


def _scripted(lines):
    it = iter(lines)
    return lambda: next(it)


def test_random_placement_has_ten_distinct_mines():
    game = Minesweeper(rng=random.Random(7))
    assert len(game.mines) == 10
    assert all(0 <= r < 10 and 0 <= c < 10 for r, c in game.mines)


def test_same_seed_gives_same_mines():
    first = Minesweeper(rng=random.Random(3))
    second = Minesweeper(rng=random.Random(3))
    assert len(first.mines) == 10
    assert sorted(first.mines) == sorted(second.mines)
    row, col = sorted(first.mines)[0]
    second.open_cell(row, col)
    assert second.lost is True
    assert second.visible[row][col] == "X"


def test_new_board_is_all_hidden():
    game = Minesweeper(mines=[(0, 0)])
    assert all(cell == "*" for line in game.visible for cell in line)


def test_open_mine_loses_and_shows_all_mines():
    game = Minesweeper(mines=[(0, 0), (5, 5), (9, 9)])
    game.open_cell(5, 5)
    assert game.lost
    for r, c in [(0, 0), (5, 5), (9, 9)]:
        assert game.visible[r][c] == "X"


def test_open_numbered_cell_reveals_only_that_cell():
    game = Minesweeper(mines=[(0, 0)])
    game.open_cell(1, 1)
    assert game.visible[1][1] == "1"
    hidden = sum(cell == "*" for line in game.visible for cell in line)
    assert hidden == 99


def test_flood_fill_opens_everything_but_the_mine():
    game = Minesweeper(mines=[(0, 0)])
    game.open_cell(9, 9)
    assert not game.lost
    flat = [cell for line in game.visible for cell in line]
    assert flat.count("*") == 1
    assert game.visible[0][0] == "*"
    for r, c in [(0, 1), (1, 0), (1, 1)]:
        assert game.visible[r][c] == "1"
    assert game.visible[5][5] == "0"


def test_flagged_cell_is_not_opened_by_flood():
    game = Minesweeper(mines=[(0, 0)])
    game.toggle_flag(5, 5)
    game.open_cell(9, 9)
    assert game.visible[5][5] == "F"


def test_toggle_flag_round_trip():
    game = Minesweeper(mines=[(0, 0)])
    game.toggle_flag(3, 4)
    assert game.flag_count == 1
    assert game.visible[3][4] == "F"
    game.toggle_flag(3, 4)
    assert game.flag_count == 0
    assert game.visible[3][4] == "*"


def test_flag_on_opened_cell_has_no_effect():
    game = Minesweeper(mines=[(0, 0)])
    game.open_cell(1, 1)
    game.toggle_flag(1, 1)
    assert game.flag_count == 0
    assert game.visible[1][1] == "1"


def test_win_requires_flags_exactly_on_mines():
    game = Minesweeper(mines=[(0, 0), (2, 2)])
    game.toggle_flag(0, 0)
    assert not game.is_won()
    game.toggle_flag(2, 2)
    assert game.is_won()
    game.toggle_flag(4, 4)
    assert not game.is_won()


def test_out_of_range_cells_raise():
    game = Minesweeper(mines=[(0, 0)])
    with pytest.raises(ValueError):
        game.open_cell(10, 0)
    with pytest.raises(ValueError):
        game.toggle_flag(0, -1)
    with pytest.raises(ValueError):
        Minesweeper(mines=[(10, 10)])


def test_render_layout():
    game = Minesweeper(mines=[(0, 0)])
    game.toggle_flag(0, 0)
    lines = game.render().split("\n")
    assert len(lines) == 13
    assert lines[1] == "  " + "_" * 32 + " (j)"
    assert lines[2].startswith("  0|  F  *")
    assert lines[-1] == " (i)"


def test_parse_command_valid():
    assert parse_command("o 3 4") == (Action.OPEN, 3, 4)
    assert parse_command(" f 9 0 ") == (Action.FLAG, 9, 0)


@pytest.mark.parametrize("text", ["x 1 1", "o 1", "o a b", "f 10 2", "o -1 3", ""])
def test_parse_command_invalid(text):
    with pytest.raises(ValueError):
        parse_command(text)


def test_play_win_by_flagging():
    out = []
    game = Minesweeper(mines=[(0, 0)])
    won = play(game, _scripted(["bogus", "f 0 0"]), out.append)
    assert won is True
    assert out[-1] == "YOU WIN!"
    assert "Flags:0" in out


def test_play_loss_by_opening_mine():
    out = []
    game = Minesweeper(mines=[(4, 4)])
    won = play(game, _scripted(["o 4 4"]), out.append)
    assert won is False
    assert out[-1] == "GAME OVER"
    assert game.lost