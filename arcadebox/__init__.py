"""A coin-operated terminal arcade with Hangman, Tic-Tac-Toe, Minesweeper and Connect 4."""

__version__ = "1.0.0"
__all__ = ["arcade", "connect4", "hangman", "minesweeper", "tictactoe"]