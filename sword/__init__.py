"""Word puzzle games: a Wordle library and a terminal front end."""

__version__ = "0.1.0"