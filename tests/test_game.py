import pytest

from sword.dictionary import Dictionary
from sword.game import (
    MAX_GUESSES,
    Game,
    GameError,
    GameOverError,
    InvalidGuessError,
)
from sword.word import Word

WORDS = ["audio", "crane", "crabs", "crash", "candy", "skill", "scale"]
SOLUTION = WORDS[6]


class FakeDict(Dictionary):
    def __contains__(self, word):
        return str(word) in WORDS

    def random_solution(self):
        return Word(SOLUTION)


def test_it_results_in_win_when_correct_guess_made():
    game = Game(FakeDict())
    guess = game.guess(Word(SOLUTION))
    assert guess.is_correct()
    assert game.over
    assert game.won
    assert game.solution == Word(SOLUTION)


def test_it_results_in_loss_when_run_out_of_guesses():
    game = Game(FakeDict())
    for text in WORDS[:5]:
        game.guess(Word(text))
        assert not game.over
    game.guess(Word(WORDS[5]))
    assert game.over
    assert not game.won
    assert len(game.guesses) == MAX_GUESSES
    assert game.solution == Word(SOLUTION)


def test_invalid_guess_is_not_recorded():
    game = Game(FakeDict())
    with pytest.raises(InvalidGuessError):
        game.guess(Word("zebra"))
    assert game.guesses == ()
    assert not game.over


def test_guess_after_game_over_rejected():
    game = Game(FakeDict())
    game.guess(Word(SOLUTION))
    with pytest.raises(GameOverError):
        game.guess(Word("audio"))
    assert len(game.guesses) == 1


def test_solution_hidden_while_playing():
    game = Game(FakeDict())
    game.guess(Word("audio"))
    with pytest.raises(GameError):
        getattr(game, "solution")
    assert not game.over
    game.guess(Word(SOLUTION))
    assert game.solution == Word(SOLUTION)


def test_guesses_recorded_in_order():
    game = Game(FakeDict())
    game.guess("audio")
    game.guess(Word("crane"))
    assert [str(g.word) for g in game.guesses] == ["audio", "crane"]