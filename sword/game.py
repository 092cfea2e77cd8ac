"""A single game of Wordle."""

from __future__ import annotations

from sword.dictionary import Dictionary
from sword.guess import Guess
from sword.word import Word

MAX_GUESSES = 6


class GameError(Exception):
    """Base class for errors raised by a game."""


class InvalidGuessError(GameError):
    """The guessed word is not in the game's dictionary."""


class GameOverError(GameError):
    """The game is over and no further guesses may be made."""


class Game:
    """A Wordle game, in progress or finished."""

    def __init__(self, dictionary: Dictionary) -> None:
        self._dictionary = dictionary
        self._solution = dictionary.random_solution()
        self._guesses: list[Guess] = []

    def guess(self, word: Word | str) -> Guess:
        """Submit a word and return the scored guess.

        Raises GameOverError if the game has ended and InvalidGuessError if
        the word is not in the dictionary.
        """
        if self.over:
            raise GameOverError("The game is over")
        if isinstance(word, str):
            word = Word(word)
        if word not in self._dictionary:
            raise InvalidGuessError(f"{word} is not in the dictionary")
        guess = Guess(self._solution, word)
        self._guesses.append(guess)
        return guess

    @property
    def guesses(self) -> tuple[Guess, ...]:
        """The guesses made so far."""
        return tuple(self._guesses)

    @property
    def over(self) -> bool:
        """Whether the solution was found or the guesses ran out."""
        return self.won or len(self._guesses) >= MAX_GUESSES

    @property
    def won(self) -> bool:
        """Whether the last guess was the solution."""
        return bool(self._guesses) and self._guesses[-1].is_correct()

    @property
    def solution(self) -> Word:
        """The solution; only revealed once the game is over."""
        if not self.over:
            raise GameError("The solution is hidden until the game is over")
        return self._solution