# arcadebox

A small arcade machine for the terminal. Insert coins, pick a game and play:

| Game        | Price |
|-------------|-------|
| Hangman     | 5 CC  |
| Tic-Tac-Toe | 7 CC  |
| Minesweeper | 5 CC  |
| Connect 4   | 8 CC  |

The machine starts with 5 coins (CC). The refill dungeon's wizard converts
money into coins at 0.75 CC per unit of money (the balance is rounded down
to a whole number of coins). A purchase is refused, and the inserted coins
refunded, when either the inserted coins or the machine's balance fall short
of the price; otherwise the price is taken from the balance and the change
on the inserted coins is shown.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the arcade machine with its menu:

```
arcadebox
```

From the menu you can play a game, refill coins, check your coin balance,
or leave the machine. Hangman bought from the arcade reads its words from
`wordbank.txt` in the current directory.

Each game can also be started on its own:

```
arcadebox-hangman [WORDBANK]
arcadebox-tictactoe
arcadebox-minesweeper
arcadebox-connect4
```

### Hangman

Choose a difficulty (1 Easy, 8 lives; 2 Medium, 6 lives; 3 Hard, 4 lives;
4 Impossible, 2 lives; any other answer gives 8 lives) and guess the word one
letter at a time. A wrong letter costs a life; a letter already tried costs
nothing. The word is picked at random from a word bank file of whitespace
separated words: `wordbank.txt` by default, or the path given to
`arcadebox-hangman`.

### Tic-Tac-Toe

Two players, X and O, take turns entering a row and a column, each from 1 to 3.
Out-of-range input and already filled cells are refused and asked for again.

### Minesweeper

A 10 x 10 field hides 10 mines. Enter `o i j` to open the cell in row `i`,
column `j`, or `f i j` to place or remove a flag. Opening a cell with no
neighbouring mines opens its neighbours as well. Flag all ten mines, and no
other cell, to win; opening a mine ends the game and shows every mine.
Commands that cannot be understood are ignored.

### Connect 4

Two players enter their names and take turns dropping tokens (X and O) into
columns 1 to 7. Four in a row, column or diagonal wins; a full board is a draw.

## Using the games from Python

Every game is a plain object that can be driven without a terminal:

```python
from arcadebox.tictactoe import TicTacToe

game = TicTacToe()
game.place(1, 1)
print(game.render())
```

```python
from arcadebox.connect4 import Connect4Board

board = Connect4Board()
board.drop(4, "X")
print(board.has_four("X"))
print(board.render())
```

```python
from arcadebox.hangman import HangmanGame

game = HangmanGame("python", 6)
game.guess("p")
print(game.masked())
```

```python
import random
from arcadebox.minesweeper import Minesweeper

game = Minesweeper(rng=random.Random(7))
game.open_cell(0, 0)
print(game.render())
```

A `Minesweeper` can also be given the mine positions directly, as an
iterable of `(row, column)` pairs.

```python
from arcadebox.arcade import ArcadeMachine, GameKind

machine = ArcadeMachine(5)
machine.refill(20)
print(machine.purchase(GameKind.HANGMAN, 6))  # change due: 1
print(machine.status_message())
```

`purchase` raises `InsufficientCoinsError`, which carries the refund, when a
round cannot be bought. Each game module also has a `play(..., read, write)`
function that runs the interactive game with any input and output callables.

## What it does not do

The coin balance lives only as long as the machine runs: nothing is saved
between sessions, and there are no high scores. Every game is for players
at the same terminal; there is no computer opponent and no network play.