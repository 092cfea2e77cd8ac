"""Validated five-letter words."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterator

WORD_LENGTH = 5


class WordError(ValueError):
    """Raised when a string cannot be made into a Word."""


class InvalidLengthError(WordError):
    """The string does not have exactly WORD_LENGTH letters."""

    def __init__(self) -> None:
        super().__init__(f"Word must be exactly {WORD_LENGTH} letters")


class InvalidLettersError(WordError):
    """The string holds something other than ASCII letters."""

    def __init__(self) -> None:
        super().__init__("Word must only contain ascii letters")


@total_ordering
class Word:
    """A sequence of letters that may be submitted as a guess.

    The letters are checked for length and content, but not for presence
    in any dictionary.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        stripped = text.strip()
        if len(stripped.encode("utf-8")) != WORD_LENGTH:
            raise InvalidLengthError()
        if not (stripped.isascii() and stripped.isalpha()):
            raise InvalidLettersError()
        self._text = stripped.lower()

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Word({self._text!r})"

    def __len__(self) -> int:
        return WORD_LENGTH

    def __getitem__(self, index):
        return self._text[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text < other._text

    def __hash__(self) -> int:
        return hash(self._text)