import threading
from typing import Iterable

from boggleboard.grid import Grid
from boggleboard.score import get_max_score, score_words
from boggleboard.search import find_path, search


class BoardSearcher:
    """Answers word queries against a single board.

    Searches mark cells on the shared Grid, so calls are serialized.
    """

    _grid: Grid

    def __init__(self, grid: Grid):
        self._grid = grid
        self._lock = threading.Lock()

    @property
    def grid(self) -> Grid:
        return self._grid

    def search(self, word: str) -> bool:
        with self._lock:
            return search(self._grid, word)

    def find_path(self, word: str) -> list[tuple[int, int]] | None:
        with self._lock:
            return find_path(self._grid, word)

    def get_max_score(self, words: Iterable[str]) -> int:
        with self._lock:
            return get_max_score(self._grid, words)

    def find_words(self, words: Iterable[str]) -> dict[str, int]:
        """Words from the list that are on the board, with their points."""
        with self._lock:
            return score_words(self._grid, words)

    def render(self) -> str:
        with self._lock:
            return self._grid.render()

    def __str__(self):
        return self.render()
