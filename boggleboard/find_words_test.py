import sys
from pathlib import Path

from inline_snapshot import snapshot

from boggleboard import find_words, score
from boggleboard.search import search

TESTDATA = Path(__file__).parent.parent / "testdata"


def run(monkeypatch, *argv: str):
    monkeypatch.setattr(sys, "argv", ["find_words.py", *argv])
    find_words.main()


def test_find_words(monkeypatch, capsys):
    run(
        monkeypatch,
        "--words",
        str(TESTDATA / "words.txt"),
        "--print_words",
        str(TESTDATA / "pers.txt"),
    )
    assert capsys.readouterr().out.split("\n") == snapshot(
        [
            "P E R S ",
            "L A T G ",
            "S I N E ",
            "T E R S ",
            "1\tLATE",
            "1\tPEAT",
            "3\tPLATES",
            "1\tRATE",
            "2\tRESIN",
            "1\tSIN",
            "1\tTEA",
            "score: 10",
            "",
        ]
    )


def test_find_words_fallback(monkeypatch, capsys, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("file\nname\nbad\n")
    run(monkeypatch, "--words", str(words), "--progress", str(tmp_path / "missing"))
    out = capsys.readouterr().out
    assert out == "B A D \nF I L E \nN A M E \nscore: 2\n"


def test_each_word_searched_once(monkeypatch, capsys, tmp_path):
    searched = []

    def counting_search(grid, word):
        searched.append(word)
        return search(grid, word)

    monkeypatch.setattr(score, "search", counting_search)
    words = tmp_path / "words.txt"
    words.write_text("peat\npeat\nxyz\nplates\nxyz\n")
    run(monkeypatch, "--words", str(words), "--progress", str(TESTDATA / "pers.txt"))
    assert capsys.readouterr().out.endswith("score: 5\n")
    assert searched == ["PEAT", "XYZ", "PLATES"]
