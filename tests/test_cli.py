import io

import pytest

from sword.cli import main, play
from sword.dictionary import SliceDict
from sword.word import Word


def _dictionary():
    return SliceDict([Word("crane")], [Word("audio"), Word("radio")])


def _run(text):
    stdout, stderr = io.StringIO(), io.StringIO()
    won = play(_dictionary(), io.StringIO(text), stdout, stderr)
    return won, stdout.getvalue(), stderr.getvalue()


def test_correct_guess_wins():
    won, out, err = _run("crane\n")
    assert won is True
    assert out.rstrip().endswith("You won!")
    assert err == ""


def test_running_out_of_guesses_loses():
    won, out, _ = _run("audio\n" * 6)
    assert won is False
    assert "You lost! The solution was crane" in out
    assert out.count("Enter guess: ") == 6


def test_invalid_input_reported_and_retried():
    won, out, err = _run("zebra\nnot a word\nCRANE\n")
    assert won is True
    assert err.count("Bruh, that's not a real word") == 2
    assert out.count("Enter guess: ") == 3


def test_board_shows_previous_guesses():
    _, out, _ = _run("audio\ncrane\n")
    lines = out.splitlines()
    assert any(line.startswith("audio ") for line in lines)
    assert lines[-2].startswith("crane ")


def test_input_ending_early_raises():
    with pytest.raises(EOFError):
        _run("audio\n")


def test_main_plays_from_files(tmp_path, monkeypatch, capsys):
    solutions = tmp_path / "solutions.txt"
    solutions.write_text("crane\n", encoding="utf-8")
    guesses = tmp_path / "guesses.txt"
    guesses.write_text("audio\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("audio\ncrane\n"))

    status = main(["wordle", "play", "--solutions", str(solutions), "--guesses", str(guesses)])

    assert status == 0
    assert "You won!" in capsys.readouterr().out


def test_main_rejects_empty_solutions(tmp_path):
    solutions = tmp_path / "solutions.txt"
    solutions.write_text("toolong\n", encoding="utf-8")
    assert main(["wordle", "play", "--solutions", str(solutions)]) == 1


def test_main_requires_a_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2