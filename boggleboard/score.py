"""Point values for words found on a board."""

from typing import Iterable

from boggleboard.grid import Grid
from boggleboard.search import search

#         0, 1, 2, 3, 4, 5, 6, 7, 8+
SCORES = (0, 0, 0, 1, 1, 2, 3, 5, 11)
MAX_SCORE = SCORES[-1]
# 3-letter words only count on boards with this many rows.
THREE_LETTER_ROWS = 4


def score_length(length: int, num_rows: int) -> int:
    if length >= len(SCORES):
        return MAX_SCORE
    if length == 3:
        return 1 if num_rows == THREE_LETTER_ROWS else 0
    return SCORES[length]


def score_word(word: str, num_rows: int) -> int:
    return score_length(len(word), num_rows)


def score_words(grid: Grid, words: Iterable[str]) -> dict[str, int]:
    """Points for each word that can be found on the board.

    Each distinct word is searched for once.
    """
    out = {}
    seen = set()
    for word in words:
        if word in seen:
            continue
        seen.add(word)
        if search(grid, word):
            out[word] = score_word(word, grid.num_rows)
    return out


def total_points(found: dict[str, int], words: Iterable[str]) -> int:
    """Same total as get_max_score, from the output of score_words."""
    return sum(found.get(word, 0) for word in words)


def get_max_score(grid: Grid, words: Iterable[str]) -> int:
    """Total points for every word in the list that is on the board.

    A word that appears in the list twice is counted twice.
    """
    score = 0
    for word in words:
        if search(grid, word):
            score += score_word(word, grid.num_rows)
    return score
