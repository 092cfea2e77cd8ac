"""Dictionaries of allowed guesses and possible solutions."""

from __future__ import annotations

import abc
import bisect
import random
from typing import Iterable

from sword.word import Word, WordError


class DictionaryError(ValueError):
    """Raised when a dictionary cannot be built."""


class Dictionary(abc.ABC):
    """Checks whether a word may be guessed and picks random solutions."""

    @abc.abstractmethod
    def __contains__(self, word: object) -> bool:
        """Return True if the word is a valid guess."""

    @abc.abstractmethod
    def random_solution(self) -> Word:
        """Return a random word from the solutions."""


class SliceDict(Dictionary):
    """A dictionary backed by sorted lists, searched by bisection."""

    def __init__(self, solutions: Iterable[Word], additional_guesses: Iterable[Word]) -> None:
        self._solutions = sorted(solutions)
        if not self._solutions:
            raise DictionaryError("No solutions in the dictionary")
        self._additional_guesses = sorted(additional_guesses)

    def __contains__(self, word: object) -> bool:
        return any(_sorted_contains(words, word) for words in (self._solutions, self._additional_guesses))

    def random_solution(self) -> Word:
        return random.choice(self._solutions)


class HashDict(Dictionary):
    """A dictionary backed by sets, with constant-time lookups."""

    def __init__(self, solutions: Iterable[Word], additional_guesses: Iterable[Word]) -> None:
        self._solutions = frozenset(solutions)
        if not self._solutions:
            raise DictionaryError("No solutions in the dictionary")
        self._additional_guesses = frozenset(additional_guesses)

    def __contains__(self, word: object) -> bool:
        return word in self._solutions or word in self._additional_guesses

    def random_solution(self) -> Word:
        return random.choice(tuple(self._solutions))


def _sorted_contains(words: list[Word], word: object) -> bool:
    if not isinstance(word, Word):
        return False
    index = bisect.bisect_left(words, word)
    return index < len(words) and words[index] == word


def parse_words(lines: Iterable[str]) -> list[Word]:
    """Build Words from lines of text, skipping lines that are not valid words."""
    words = []
    for line in lines:
        try:
            words.append(Word(line))
        except WordError:
            continue
    return words