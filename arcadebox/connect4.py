"""Two-player Connect Four on a board of six rows and seven columns."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

ROWS = 6
COLUMNS = 7
EMPTY = "*"

PROMPT = "Please enter a number between 1 and 7 to indicate which column to drop in: "
FULL_MESSAGE = "That column is full. "
DRAW_MESSAGE = "The board is full, it is a draw!"

_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


@dataclass(frozen=True)
class Player:
    """A named player and the token they drop."""

    name: str
    token: str


class ColumnFullError(ValueError):
    """Raised when a token is dropped into a column with no room left."""


class Connect4Board:
    """The grid of dropped tokens; columns are numbered 1 to 7, rows 1 (top) to 6."""

    def __init__(self) -> None:
        self._grid = [[EMPTY] * COLUMNS for _ in range(ROWS)]

    @staticmethod
    def _check_column(column: int) -> None:
        if not 1 <= column <= COLUMNS:
            raise ValueError(f"column must be between 1 and {COLUMNS}, got {column}")

    @property
    def cells(self) -> tuple[tuple[str, ...], ...]:
        """The grid from the top row down."""
        return tuple(tuple(row) for row in self._grid)

    def is_column_full(self, column: int) -> bool:
        """True when the column has no empty cell left."""
        self._check_column(column)
        return self._grid[0][column - 1] != EMPTY

    def drop(self, column: int, token: str) -> int:
        """Drop a token into a column; return the row it lands on."""
        self._check_column(column)
        if len(token) != 1 or token == EMPTY:
            raise ValueError(f"invalid token {token!r}")
        for row in range(ROWS - 1, -1, -1):
            if self._grid[row][column - 1] == EMPTY:
                self._grid[row][column - 1] = token
                return row + 1
        raise ColumnFullError(f"column {column} is full")

    def has_four(self, token: str) -> bool:
        """True when four of the token line up in a row, column or diagonal."""
        for row in range(ROWS):
            for col in range(COLUMNS):
                for dr, dc in _DIRECTIONS:
                    end_row, end_col = row + 3 * dr, col + 3 * dc
                    if not (0 <= end_row < ROWS and 0 <= end_col < COLUMNS):
                        continue
                    if all(
                        self._grid[row + k * dr][col + k * dc] == token
                        for k in range(4)
                    ):
                        return True
        return False

    def full_columns(self) -> int:
        """How many columns are filled to the top."""
        return sum(cell != EMPTY for cell in self._grid[0])

    def render(self) -> str:
        """The board as text, one line per row."""
        return "\n".join(f"|{''.join(row)}|" for row in self._grid)


def _choose_column(
    board: Connect4Board,
    player: Player,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> int:
    write(f"{player.name}'s Turn ")
    while True:
        write(PROMPT)
        try:
            column = int(read().strip())
        except ValueError:
            continue
        if not 1 <= column <= COLUMNS:
            continue
        if board.is_column_full(column):
            write(FULL_MESSAGE)
            continue
        return column


def play(
    players: Sequence[Player],
    read: Callable[[], str],
    write: Callable[[str], object],
) -> Player | None:
    """Play until someone connects four or the board fills; return the winner or None."""
    if len(players) != 2:
        raise ValueError("Connect Four needs exactly two players")
    board = Connect4Board()
    write(board.render())
    while True:
        for player in players:
            column = _choose_column(board, player, read, write)
            board.drop(column, player.token)
            write(board.render())
            if board.has_four(player.token):
                write("")
                write(f"{player.name} Connected Four, You Win!")
                return player
        if board.full_columns() == COLUMNS:
            write(DRAW_MESSAGE)
            return None


def _read_name(read: Callable[[], str]) -> str:
    while True:
        words = read().split()
        if words:
            return words[0]


def main(argv: list[str] | None = None) -> int:
    """Ask for two names and play one game on the terminal."""
    del argv
    print("Let's Play Connect 4")
    print()
    try:
        print("Player One please enter your name: ", end="")
        one = Player(_read_name(input), "X")
        print("Player Two please enter your name: ", end="")
        two = Player(_read_name(input), "O")
        play((one, two), input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())