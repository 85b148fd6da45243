"""Minesweeper on a 10x10 board with ten hidden mines."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Iterable
from enum import Enum

SIZE = 10
MINE_COUNT = 10

HIDDEN = "*"
FLAG = "F"
MINE = "X"

BANNER = (
    "\n------------------------------------------------------\n"
    "Welcome to Minesweeper!\n\n"
    "Goal: flag all of the bombs and open all the open cells\n"
    "Hint: upon opening a cell, the number will indicate how \n"
    "many bombs are within the 8 cells around its perimeter \n"
    "------------------------------------------------------\n"
    "Rules:\n\n"
    "Enter 'o' to open a cell, then enter i and j value \n"
    "of the location of cell (ex. o 3 4 - opens (3,4))\n \n"
    "Enter 'f' to flag or remove a flag from a cell, then \n"
    "enter value of i and j to the location (ex. f 3 4) \n"
    "------------------------------------------------------"
)


class Action(Enum):
    """What a player's command does to a cell."""

    OPEN = "o"
    FLAG = "f"


def _in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def _check_bounds(row: int, col: int) -> None:
    if not _in_bounds(row, col):
        raise ValueError(f"cell ({row}, {col}) is outside the {SIZE}x{SIZE} board")


def _neighbours(row: int, col: int):
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if (dr or dc) and _in_bounds(row + dr, col + dc):
                yield row + dr, col + dc


class Minesweeper:
    """State of one game: the hidden mine field and the player's view of it."""

    def __init__(
        self,
        mines: Iterable[tuple[int, int]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if mines is None:
            rng = rng or random.Random()
            placed: set[tuple[int, int]] = set()
            while len(placed) < MINE_COUNT:
                placed.add((rng.randrange(SIZE), rng.randrange(SIZE)))
            mines = placed
        self.mines = frozenset(mines)
        for row, col in self.mines:
            _check_bounds(row, col)

        self._field = [
            [
                MINE
                if (row, col) in self.mines
                else str(sum((n in self.mines) for n in _neighbours(row, col)))
                for col in range(SIZE)
            ]
            for row in range(SIZE)
        ]
        self._view = [[HIDDEN] * SIZE for _ in range(SIZE)]
        self.flag_count = 0
        self._mines_flagged = 0
        self.lost = False

    @property
    def visible(self) -> tuple[tuple[str, ...], ...]:
        """The board as the player sees it."""
        return tuple(tuple(line) for line in self._view)

    def open_cell(self, row: int, col: int) -> None:
        """Open a cell; opening a mine loses the game and shows every mine."""
        _check_bounds(row, col)
        if (row, col) in self.mines:
            self.lost = True
            for mr, mc in self.mines:
                self._view[mr][mc] = MINE
            return
        self._reveal(row, col)

    def _reveal(self, row: int, col: int) -> None:
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            if self._view[r][c] != HIDDEN or self._field[r][c] == MINE:
                continue
            self._view[r][c] = self._field[r][c]
            if self._field[r][c] == "0":
                stack.extend(_neighbours(r, c))

    def toggle_flag(self, row: int, col: int) -> None:
        """Place a flag on a hidden cell or remove one already there."""
        _check_bounds(row, col)
        on_mine = (row, col) in self.mines
        if self._view[row][col] == HIDDEN:
            self._view[row][col] = FLAG
            self.flag_count += 1
            self._mines_flagged += on_mine
        elif self._view[row][col] == FLAG:
            self._view[row][col] = HIDDEN
            self.flag_count -= 1
            self._mines_flagged -= on_mine

    def is_won(self) -> bool:
        """True when exactly the mines, and nothing else, carry flags."""
        total = len(self.mines)
        return self.flag_count == total and self._mines_flagged == total

    def render(self) -> str:
        """The player's board as text with row and column numbers."""
        lines = ["    " + "".join(f"{i:>3}" for i in range(SIZE))]
        lines.append("  " + "_" * 32 + " (j)")
        for i, line in enumerate(self._view):
            lines.append(f"{i:>3}|" + "".join(f"{cell:>3}" for cell in line))
        lines.append(" (i)")
        return "\n".join(lines)


def parse_command(text: str) -> tuple[Action, int, int]:
    """Parse a command such as ``"o 3 4"`` into an action and a cell."""
    parts = text.split()
    if len(parts) != 3:
        raise ValueError(f"expected '<o|f> <i> <j>', got {text!r}")
    symbol, row_text, col_text = parts
    try:
        action = Action(symbol)
    except ValueError:
        raise ValueError(f"unknown action {symbol!r}") from None
    try:
        row, col = int(row_text), int(col_text)
    except ValueError:
        raise ValueError(f"cell coordinates must be integers, got {text!r}") from None
    _check_bounds(row, col)
    return action, row, col


def play(
    game: Minesweeper,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> bool:
    """Run the game loop until it is won or lost; return True on a win."""
    start = time.monotonic()
    elapsed = 0
    while not game.lost and not game.is_won():
        elapsed = int(time.monotonic() - start)
        write(game.render())
        write("")
        write(f"Flags:{game.flag_count}")
        write(f"Time:{elapsed}")
        while True:
            try:
                action, row, col = parse_command(read())
            except ValueError:
                continue
            break
        if action is Action.OPEN:
            game.open_cell(row, col)
        else:
            game.toggle_flag(row, col)

    if game.lost:
        write(game.render())
        write("")
        write("GAME OVER")
        return False
    write(f"Time to complete:{elapsed}")
    write("")
    write("YOU WIN!")
    return True


def main(argv: list[str] | None = None) -> int:
    """Play one game on the terminal."""
    del argv
    print(BANNER)
    try:
        won = play(Minesweeper(), input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0 if won else 1


if __name__ == "__main__":
    sys.exit(main())