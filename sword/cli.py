"""Command line for playing word puzzle games."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from sword.dictionary import Dictionary, DictionaryError, SliceDict, parse_words
from sword.game import Game, InvalidGuessError
from sword.word import Word, WordError

_SEPARATOR = "----------------------"
_NOT_A_WORD = "Bruh, that's not a real word"


def play(dictionary: Dictionary, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> bool:
    """Play one interactive game and return whether it was won.

    Raises EOFError if the input ends before the game does.
    """
    game = Game(dictionary)

    while not game.over:
        print(_SEPARATOR, file=stdout)
        for guess in game.guesses:
            print(guess, file=stdout)
        print("Enter guess: ", end="", file=stdout)
        stdout.flush()

        line = stdin.readline()
        if not line:
            raise EOFError("input ended before the game was over")
        print(file=stdout)

        try:
            game.guess(Word(line))
        except (WordError, InvalidGuessError):
            print(_NOT_A_WORD, file=stderr)

    print(_SEPARATOR, file=stdout)
    for guess in game.guesses:
        print(guess, file=stdout)

    if game.won:
        print("You won!", file=stdout)
    else:
        print(f"You lost! The solution was {game.solution}", file=stdout)
    return game.won


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sword",
        description="Program for creating, playing, and solving word puzzle games",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    games = parser.add_subparsers(dest="game", required=True)

    wordle = games.add_parser("wordle", help="Play, solve, and analyze Wordle games")
    commands = wordle.add_subparsers(dest="command", required=True)
    play_parser = commands.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--solutions", required=True, help="file with one possible solution per line"
    )
    play_parser.add_argument(
        "--guesses", help="file with further allowed guesses, one per line"
    )
    return parser


def _read_words(path: str | None) -> list[Word]:
    if path is None:
        return []
    with open(path, encoding="utf-8") as handle:
        return parse_words(handle)


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return an exit status."""
    args = _build_parser().parse_args(argv)

    try:
        dictionary = SliceDict(_read_words(args.solutions), _read_words(args.guesses))
    except (OSError, DictionaryError) as error:
        print(f"sword: {error}", file=sys.stderr)
        return 1

    try:
        play(dictionary, sys.stdin, sys.stdout, sys.stderr)
    except EOFError:
        print(file=sys.stdout)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())