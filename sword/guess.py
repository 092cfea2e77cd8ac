"""Scoring of a guessed word against a solution."""

from __future__ import annotations

import enum
from collections import Counter

from sword.word import Word


class Placement(enum.Enum):
    """Whether a letter of a guess is in the solution."""

    INCORRECT = "incorrect"
    MISPLACED = "misplaced"
    CORRECT = "correct"

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Placement.CORRECT: "🟩",
    Placement.MISPLACED: "🟨",
    Placement.INCORRECT: "⬜",
}


class Guess:
    """A word submitted to a game, together with how its letters are placed."""

    __slots__ = ("word", "result")

    def __init__(self, solution: Word, word: Word) -> None:
        self.word = word
        self.result = _score(solution, word)

    def is_correct(self) -> bool:
        """Return True when every letter is in the right place."""
        return all(p is Placement.CORRECT for p in self.result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Guess):
            return NotImplemented
        return self.word == other.word and self.result == other.result

    def __hash__(self) -> int:
        return hash((self.word, self.result))

    def __repr__(self) -> str:
        return f"Guess(word={self.word!r}, result={self.result!r})"

    def __str__(self) -> str:
        return f"{self.word} " + "".join(f" {p}" for p in self.result)


def _score(solution: Word, guess: Word) -> tuple[Placement, ...]:
    if solution == guess:
        return tuple(Placement.CORRECT for _ in guess)

    placements = [
        Placement.CORRECT if s == g else Placement.INCORRECT
        for s, g in zip(solution, guess)
    ]
    remaining = Counter(
        s for s, p in zip(solution, placements) if p is not Placement.CORRECT
    )
    for i, letter in enumerate(guess):
        if placements[i] is not Placement.CORRECT and remaining[letter] > 0:
            placements[i] = Placement.MISPLACED
            remaining[letter] -= 1
    return tuple(placements)