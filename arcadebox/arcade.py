"""A coin-operated arcade that sells rounds of the bundled games."""

from __future__ import annotations

import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from arcadebox import connect4, hangman, minesweeper, tictactoe

START_COINS = 5
REFILL_RATE = 0.75

DIVIDER = "-------------------------------------"
REFILL_HINT = "If you want more coins visit the refill coins dungeon!"
INVALID_OPTION = (
    f"{DIVIDER}\n| Invalid option, please choose 1-4 |\n{DIVIDER}"
)
MAIN_MENU = (
    "|       ---------------------       |\n"
    "|        1) Play a game             |\n"
    "|        2) Refill coins            |\n"
    "|        3) Check coin status       |\n"
    "|        4) Exit the machine        |\n"
    f"{DIVIDER}"
)
GAME_MENU = (
    f"{DIVIDER}\n"
    "| What game would you like to play? |\n"
    "|       ---------------------       |\n"
    "|         1) Hangman                |\n"
    "|         2) Tic Tac Toe            |\n"
    "|         3) Minesweeper            |\n"
    "|         4) Connect 4              |\n"
    f"{DIVIDER}"
)
WELCOME = (
    f"{DIVIDER}\n"
    "|    WELCOME TO THE AVOE ARCADE!    |\n"
    "|      Select something below:      |"
)
FAREWELL = (
    f"{DIVIDER}\n"
    "| Thank you for using this Machine! |\n"
    "|         Have a nice day!          |\n"
    f"{DIVIDER}"
)

Read = Callable[[], str]
Write = Callable[[str], object]


class GameKind(Enum):
    """The games on sale, with their display names and prices in coins."""

    HANGMAN = ("hangman", 5)
    TICTACTOE = ("Tic-tac-toe", 7)
    MINESWEEPER = ("Minesweeper", 5)
    CONNECT4 = ("Connect 4", 8)

    def __init__(self, label: str, price: int) -> None:
        self.label = label
        self.price = price


_MENU_ORDER = tuple(GameKind)


class InsufficientCoinsError(ValueError):
    """Raised when a purchase is refused; the inserted coins are refunded."""

    def __init__(self, game: GameKind, refund: int) -> None:
        super().__init__(f"not enough coins for {game.label}; refund {refund}CC")
        self.game = game
        self.refund = refund


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_int(read: Read) -> int:
    while True:
        value = _parse_int(read())
        if value is not None:
            return value


def _read_name(read: Read) -> str:
    while True:
        words = read().split()
        if words:
            return words[0]


class ArcadeMachine:
    """The machine's coin balance and the menus that spend it."""

    def __init__(self, coins: int = START_COINS) -> None:
        self.coins = coins
        self.word_bank = Path(hangman.WORDBANK)

    def purchase(self, game: GameKind, inserted: int) -> int:
        """Buy a round of a game; return the change due on the inserted coins."""
        if inserted < game.price or self.coins < game.price:
            raise InsufficientCoinsError(game, inserted)
        self.coins -= game.price
        return inserted - game.price

    def refill(self, money: int) -> int:
        """Convert money into coins at the machine's rate; return the new balance."""
        self.coins = int(self.coins + money * REFILL_RATE)
        return self.coins

    def status_message(self) -> str:
        """The balance and which games it can pay for."""
        lines = [f"You currently have: {self.coins}CC coins"]
        if self.coins < 5:
            lines += [
                "Sorry, you dont have enough coins for any game.",
                "Visit the refill coins dungeon and talk to the wizard to get more coins!",
            ]
        elif self.coins == 7:
            lines += [
                "\nYou have enough coins to play hangman, minesweeper, and tic tac toe.",
                REFILL_HINT,
            ]
        elif self.coins <= 6:
            lines += [
                "\nYou have enough coins to play hangman and minesweeper.",
                REFILL_HINT,
            ]
        else:
            lines.append("\nYou have enough coins to play any game. Have Fun!")
        return "\n".join(lines)

    def run(self, read: Read, write: Write) -> None:
        """Show the main menu until the player leaves the machine."""
        while True:
            write(MAIN_MENU)
            choice = _parse_int(read())
            if choice == 1:
                self._game_menu(read, write)
            elif choice == 2:
                self._refill_dialog(read, write)
            elif choice == 3:
                write(DIVIDER)
                write(self.status_message())
                write(DIVIDER)
            elif choice == 4:
                write(FAREWELL)
                return
            else:
                write(INVALID_OPTION)

    def _game_menu(self, read: Read, write: Write) -> None:
        while True:
            write(GAME_MENU)
            choice = _parse_int(read())
            if choice is not None and 1 <= choice <= len(_MENU_ORDER):
                self._purchase_dialog(_MENU_ORDER[choice - 1], read, write)
                return
            write(INVALID_OPTION)

    def _purchase_dialog(self, game: GameKind, read: Read, write: Write) -> None:
        write(DIVIDER)
        write(f"The price of {game.label} is: {game.price}CC")
        write("Please insert coins: ")
        inserted = _read_int(read)
        try:
            change = self.purchase(game, inserted)
        except InsufficientCoinsError as exc:
            write(f"\nSorry, not enough coins\nRefund: {exc.refund}CC")
            write(REFILL_HINT)
            write(DIVIDER)
            return
        write("Success!")
        write(f"\nChange Due: {change}CC")
        write(DIVIDER)
        self._launch(game, read, write)

    def _refill_dialog(self, read: Read, write: Write) -> None:
        write(DIVIDER)
        write("   Welcome to coin refill Dungeon!  ")
        write("You have been visited by the conversion Wizard\n")
        write(" When inserting money, we will convert it \ninto coins (CC's)")
        write("\nHow much money do you want to convert?: ")
        self.refill(_read_int(read))
        write(" \n**POOF MAGIC**\n ")
        write(f"You now have {self.coins}CC coins in the bank")
        write("Have fun playing, come back soon \n(I'm lonely in the dungeon by myself)")
        write(DIVIDER)

    def _launch(self, game: GameKind, read: Read, write: Write) -> None:
        if game is GameKind.HANGMAN:
            try:
                word = hangman.random_word(hangman.load_words(self.word_bank))
            except (OSError, ValueError) as exc:
                write(f"Cannot load the word bank: {exc}")
                return
            hangman.play(word, read, write)
        elif game is GameKind.TICTACTOE:
            tictactoe.play(tictactoe.TicTacToe(), read, write)
        elif game is GameKind.MINESWEEPER:
            write(minesweeper.BANNER)
            minesweeper.play(minesweeper.Minesweeper(), read, write)
        else:
            write("Let's Play Connect 4")
            write("")
            write("Player One please enter your name: ")
            one = connect4.Player(_read_name(read), "X")
            write("Player Two please enter your name: ")
            two = connect4.Player(_read_name(read), "O")
            connect4.play((one, two), read, write)


def main(argv: list[str] | None = None) -> int:
    """Run the arcade on the terminal."""
    del argv
    print(WELCOME)
    try:
        ArcadeMachine().run(input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())