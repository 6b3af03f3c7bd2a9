"""A Boggle board: a matrix of letters plus a same-shape matrix of marks.

Rows may have different lengths. Each row's own length bounds its columns,
which is what the "BAD FILE NAME" fallback board (3/4/4) needs.
"""

from typing import Iterable, Self

FALLBACK_ROWS = ("BAD", "FILE", "NAME")


class OutOfBoundsError(IndexError):
    def __init__(self, row: int, col: int):
        super().__init__(f"({row}, {col}) is outside the grid")
        self.row = row
        self.col = col


class Grid:
    _cells: list[list[str]]
    _marked: list[list[bool]]

    def __init__(self, rows: Iterable[str]):
        self._cells = [[*row] for row in rows]
        if not self._cells:
            raise ValueError("Grid must have at least one row")
        self._marked = [[False] * len(row) for row in self._cells]

    @staticmethod
    def fallback() -> "Grid":
        return Grid(FALLBACK_ROWS)

    @property
    def num_rows(self) -> int:
        return len(self._cells)

    @property
    def num_cells(self) -> int:
        return sum(len(row) for row in self._cells)

    @property
    def is_rectangular(self) -> bool:
        width = len(self._cells[0])
        return all(len(row) == width for row in self._cells)

    def row_length(self, row: int) -> int:
        if not 0 <= row < len(self._cells):
            raise OutOfBoundsError(row, 0)
        return len(self._cells[row])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self._cells) and 0 <= col < len(self._cells[row])

    def cells(self) -> Iterable[tuple[int, int]]:
        """Yield every (row, col) in row-major order."""
        for r, row in enumerate(self._cells):
            for c in range(len(row)):
                yield r, c

    def get(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return self._cells[row][col]

    def set_marked(self, row: int, col: int, marked: bool):
        """Flag a cell as part of the path currently being explored.

        Every mark must be undone by the same caller before it returns.
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        self._marked[row][col] = marked

    def is_marked(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return self._marked[row][col]

    def any_marked(self) -> bool:
        return any(any(row) for row in self._marked)

    def copy(self) -> Self:
        return type(self)("".join(row) for row in self._cells)

    def render(self) -> str:
        # Marked cells show up in lowercase; only visible mid-search.
        out = []
        for row, marks in zip(self._cells, self._marked):
            for let, marked in zip(row, marks):
                out.append(let.lower() if marked else let)
                out.append(" ")
            out.append("\n")
        return "".join(out)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Grid({[''.join(row) for row in self._cells]!r})"
