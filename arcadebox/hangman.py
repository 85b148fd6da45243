"""Hangman: guess the hidden word one letter at a time."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from pathlib import Path

WORDBANK = "wordbank.txt"

DEFAULT_LIVES = 8
_LIVES_BY_DIFFICULTY = {1: 8, 2: 6, 3: 4, 4: 2}

DIFFICULTY_MENU = (
    "What difficulty do you want?\n"
    "1. Easy (8 Lives)\n"
    "2. Medium (6 Lives)\n"
    "3. Hard (4 Lives)\n"
    "4. Impossible (2 Lives)"
)

_BLANK = " |     "
_ROPE = " |     |"
_HEAD = " |     O"
_ARMS = " |    /|\\"
_FRAMES: dict[int, list[str]] = {
    8: [_BLANK] * 6,
    7: [_ROPE] + [_BLANK] * 5,
    6: [_ROPE, _ROPE] + [_BLANK] * 4,
    5: [_ROPE, _ROPE, _HEAD] + [_BLANK] * 3,
    4: [_ROPE, _ROPE, _HEAD, " |     |"] + [_BLANK] * 2,
    3: [_ROPE, _ROPE, _HEAD, " |    /|"] + [_BLANK] * 2,
    2: [_ROPE, _ROPE, _HEAD, _ARMS] + [_BLANK] * 2,
    1: [_ROPE, _ROPE, _HEAD, _ARMS, " |    /", _BLANK],
    0: [_ROPE, _ROPE, _HEAD, _ARMS, " |    / \\", _BLANK],
}


class GuessResult(Enum):
    """What a single guess did."""

    HIT = "hit"
    MISS = "miss"
    REPEAT = "repeat"


def lives_for_difficulty(choice: int) -> int:
    """Lives granted by a difficulty menu choice; unknown choices get the easy count."""
    return _LIVES_BY_DIFFICULTY.get(choice, DEFAULT_LIVES)


def gallows(lives: int) -> str:
    """The drawing of the gallows for the given number of lives left."""
    try:
        rows = _FRAMES[lives]
    except KeyError:
        raise ValueError(f"no drawing for {lives} lives") from None
    return "\n".join([" _______", *rows, "_|_"])


class HangmanGame:
    """One word to guess, the letters tried so far and the lives left."""

    def __init__(self, word: str, lives: int = DEFAULT_LIVES) -> None:
        if not word:
            raise ValueError("the word to guess must not be empty")
        if lives < 0:
            raise ValueError("lives must not be negative")
        self.word = word
        self.lives = lives
        self.guessed: set[str] = set()
        self._shown = [" " if ch == " " else "_" for ch in word]

    def guess(self, letter: str) -> GuessResult:
        """Try one letter; a miss costs a life, a repeated letter costs nothing."""
        if len(letter) != 1:
            raise ValueError(f"a guess is a single character, got {letter!r}")
        if self.lost() or self.won():
            raise RuntimeError("the game is over")
        if letter in self.guessed:
            return GuessResult.REPEAT
        self.guessed.add(letter)
        hit = False
        for position, ch in enumerate(self.word):
            if ch == letter:
                self._shown[position] = letter
                hit = True
        if not hit:
            self.lives -= 1
            return GuessResult.MISS
        return GuessResult.HIT

    def masked(self) -> str:
        """The word with letters not yet found shown as underscores."""
        return "".join(self._shown)

    def won(self) -> bool:
        """True once every letter of the word has been found."""
        return self.masked() == self.word

    def lost(self) -> bool:
        """True once no lives are left."""
        return self.lives <= 0


def load_words(path: str | Path) -> list[str]:
    """Read the whitespace-separated words of a word bank file."""
    return Path(path).read_text(encoding="utf-8").split()


def random_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one word at random."""
    if not words:
        raise ValueError("the word bank is empty")
    return (rng or random.Random()).choice(list(words))


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def play(
    word: str,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> bool:
    """Ask for a difficulty and play one game; return True on a win."""
    write(DIFFICULTY_MENU)
    write("Enter a number: ")
    choice = _parse_int(read())
    game = HangmanGame(word, lives_for_difficulty(choice if choice is not None else 0))

    write("Welcome to Hangman!")
    while not game.lost():
        write(gallows(game.lives))
        write(game.masked())
        write("Guess a letter: ")
        text = read().strip()
        if not text:
            continue
        if game.guess(text[0]) is GuessResult.REPEAT:
            write("You already guessed that letter!")
            continue
        if game.won():
            write("You win!")
            return True

    write(gallows(game.lives))
    write("You lose!")
    write(f"The word was {word}")
    return False


def main(argv: list[str] | None = None) -> int:
    """Play one game with a word from a word bank file."""
    parser = argparse.ArgumentParser(description="Play hangman.")
    parser.add_argument("wordbank", nargs="?", default=WORDBANK)
    args = parser.parse_args(argv)
    try:
        word = random_word(load_words(args.wordbank))
    except (OSError, ValueError) as exc:
        print(f"Cannot load the word bank: {exc}", file=sys.stderr)
        return 1
    try:
        play(word, input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())