"""Two-player tic-tac-toe on a 3x3 grid."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence

SIZE = 3
EMPTY = "_"
FIRST, SECOND = "X", "O"

INVALID_MESSAGE = "Sorry this is an invalid input"
TAKEN_MESSAGE = "Box already filled! Please choose another!!"
DRAW_MESSAGE = "GAME DRAW!!!"


class CellTakenError(ValueError):
    """Raised when a mark is placed on a cell that already holds one."""


def _uniform(line: Sequence[str]) -> bool:
    return line[0] == line[1] == line[2]


def _owner(lines: Sequence[Sequence[str]]) -> str | None:
    for mark in (FIRST, SECOND):
        if any(all(cell == mark for cell in line) for line in lines):
            return mark
    return None


class TicTacToe:
    """The grid, whose turn it is and how the game has ended."""

    def __init__(self) -> None:
        self._grid = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.turn = FIRST
        self.draw = False
        self.winner: str | None = None
        self.moves = 0

    @property
    def cells(self) -> tuple[tuple[str, ...], ...]:
        """The grid from the top row down."""
        return tuple(tuple(row) for row in self._grid)

    def place(self, row: int, column: int) -> str:
        """Put the current player's mark at a 1-based cell; return the mark."""
        if not (1 <= row <= SIZE and 1 <= column <= SIZE):
            raise ValueError(f"cell ({row}, {column}) is outside the board")
        if self._grid[row - 1][column - 1] != EMPTY:
            raise CellTakenError(f"cell ({row}, {column}) is already filled")
        mark = self.turn
        self._grid[row - 1][column - 1] = mark
        self.moves += 1
        self.turn = SECOND if mark == FIRST else FIRST
        return mark

    def gameover(self) -> bool:
        """Check for an end of game, recording the winner or a draw.

        From the fifth move on, any row, column or diagonal whose three
        cells match ends the game; the winner is whoever owns one of the
        lines that were checked together.
        """
        grid = self._grid
        if self.moves > 4:
            for i in range(SIZE):
                row = grid[i]
                col = [grid[r][i] for r in range(SIZE)]
                if _uniform(row) or _uniform(col):
                    owner = _owner((row, col))
                    if owner is not None:
                        self.winner = owner
                    return True
            main = [grid[k][k] for k in range(SIZE)]
            anti = [grid[k][SIZE - 1 - k] for k in range(SIZE)]
            if _uniform(main) or _uniform(anti):
                owner = _owner((main, anti))
                if owner is not None:
                    self.winner = owner
                return True
        if self.moves > 8:
            self.draw = True
            return True
        return False

    def render(self) -> str:
        """The grid as text, one line per row."""
        return "\n".join(" ".join(row) + "  " for row in self._grid)


def _parse_cell(text: str) -> tuple[int, int]:
    parts = text.split()
    if len(parts) < 2:
        raise ValueError(f"expected a row and a column, got {text!r}")
    return int(parts[0]), int(parts[1])


def _take_turn(
    game: TicTacToe,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> None:
    number = 1 if game.turn == FIRST else 2
    prompt = (
        f"Player - {number} [{game.turn}] turn : \n"
        "Please enter desired row followed by desired column from 1 to 3"
    )
    while True:
        write(prompt)
        try:
            game.place(*_parse_cell(read()))
        except CellTakenError:
            write(TAKEN_MESSAGE)
        except ValueError:
            write(INVALID_MESSAGE)
        else:
            break
    write(game.render())


def play(
    game: TicTacToe,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> str | None:
    """Play the game to its end; return the winning mark, or None."""
    write("Welcome to TicTacToe...")
    write("    FOR 2 PLAYERS    ")
    write("PLAYER 1 is X     PLAYER 2 is O")
    write(game.render())
    while not game.gameover() and not game.draw:
        _take_turn(game, read, write)
    if game.draw:
        write(DRAW_MESSAGE)
        return None
    if game.winner is not None:
        write(f"  Congratulations! Player with '{game.winner}' has won the game")
    return game.winner


def main(argv: list[str] | None = None) -> int:
    """Play one game on the terminal."""
    del argv
    try:
        play(TicTacToe(), input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())