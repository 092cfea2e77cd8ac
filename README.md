# sword

A small toolkit for word puzzle games, starting with Wordle. It has a
terminal game and a library you can use to build your own front end.

## Installation

```
pip install .
```

## Playing in the terminal

The game needs a word list. Give it a file of possible solutions, one word
per line, and optionally a file of further words that may be guessed but
are never the solution:

```
sword wordle play --solutions solutions.txt --guesses guesses.txt
```

Lines that are not five ASCII letters are skipped; surrounding whitespace is
ignored and letters are lower-cased. A random solution is drawn from the
solutions file. Type a guess and press Enter. After each guess every letter
is marked:

- 🟩 the letter is in the solution at this spot
- 🟨 the letter is in the solution, but elsewhere
- ⬜ the letter is not in the solution

Guesses that are not five ASCII letters, or that are in neither file, are
rejected with a message on standard error and do not cost you a turn. You
have six guesses. When the game ends the board is shown again, followed by
`You won!` or the solution.

The command exits with status 0 when a game is finished, and with status 1
when a word file cannot be read, when the solutions file holds no valid
words, or when input ends before the game does. `sword --version` prints the
version.

## Using the library

```python
from sword.dictionary import SliceDict, parse_words
from sword.game import Game, InvalidGuessError
from sword.word import Word

with open("solutions.txt", encoding="utf-8") as handle:
    solutions = parse_words(handle)

game = Game(SliceDict(solutions, []))
try:
    game.guess(Word("crane"))
except InvalidGuessError:
    print("not in the dictionary")

for guess in game.guesses:
    print(guess)

if game.over:
    print("won" if game.won else f"lost, the word was {game.solution}")
```

- `sword.word.Word` strips and lower-cases a five-letter word, raising
  `InvalidLengthError` or `InvalidLettersError` (both subclasses of
  `WordError`, itself a `ValueError`). Words compare, sort and hash by their
  text, and can be indexed and iterated letter by letter.
- `sword.guess.Guess(solution, word)` scores a word against a solution. Its
  `result` is a tuple of `Placement` values (`CORRECT`, `MISPLACED`,
  `INCORRECT`), one per letter; `is_correct()` tells whether every letter is
  in place. Repeated letters are marked as misplaced only as many times as
  they remain unmatched in the solution.
- `sword.dictionary.SliceDict` (sorted lists) and `HashDict` (sets) take an
  iterable of solutions and an iterable of additional guesses. Both support
  `word in dictionary` and `random_solution()`, and raise `DictionaryError`
  when given no solutions. `parse_words(lines)` turns lines of text into
  words, skipping invalid lines. Subclass `Dictionary` to supply your own.
- `sword.game.Game(dictionary)` picks a solution from the dictionary.
  `guess(word)` accepts a `Word` or a string and returns the scored `Guess`;
  it raises `WordError` for a malformed string, `InvalidGuessError` for a
  word outside the dictionary and `GameOverError` once the game has ended.
  `guesses`, `over` and `won` describe the game; `solution` raises
  `GameError` until the game is over.
- `sword.cli.play(dictionary, stdin, stdout, stderr)` runs one interactive
  game on the given streams and returns whether it was won.

## What it does not do

There is no built-in word list: both the command and the dictionaries need
the words to be supplied. Wordle can only be played; there is no solver or
game analysis.

## Running the tests

```
pip install ".[test]"
pytest
```