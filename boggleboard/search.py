"""Depth-first search for a single word on a Grid.

A word is on the board if its letters can be traced along a path of cells,
each adjacent (diagonals included) to the previous one, with no cell used
twice. Cells on the current path are flagged with Grid.set_marked and the
flag is cleared as the recursion unwinds, so sibling paths may reuse them.
"""

from boggleboard.grid import Grid

# (d_row, d_col). The order decides which path find_path reports first.
DIRECTIONS = (
    (1, 1),
    (1, 0),
    (1, -1),
    (0, 1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


def letters_match(a: str, b: str) -> bool:
    return a.upper() == b.upper()


def search_around(
    grid: Grid,
    row: int,
    col: int,
    word_left: str,
    path: list[tuple[int, int]] | None = None,
) -> bool:
    """Can word_left be traced starting at (row, col)?

    If path is given, the coordinates of the successful path are appended
    to it; it is left unchanged on failure.
    """
    if not word_left or not grid.in_bounds(row, col):
        return False
    if grid.is_marked(row, col):
        return False
    if not letters_match(grid.get(row, col), word_left[0]):
        return False

    if path is not None:
        path.append((row, col))
    if len(word_left) == 1:
        return True

    grid.set_marked(row, col, True)
    rest = word_left[1:]
    found = False
    for dr, dc in DIRECTIONS:
        if search_around(grid, row + dr, col + dc, rest, path):
            found = True
            break
    grid.set_marked(row, col, False)

    if not found and path is not None:
        path.pop()
    return found


def find_path(grid: Grid, word: str) -> list[tuple[int, int]] | None:
    """Return the first path spelling word, or None if it's not on the board."""
    if not word or len(word) > grid.num_cells:
        return None
    first = word[0]
    for row, col in grid.cells():
        if letters_match(grid.get(row, col), first):
            path: list[tuple[int, int]] = []
            if search_around(grid, row, col, word, path):
                return path
    return None


def search(grid: Grid, word: str) -> bool:
    """Is word on the board? The empty word never is."""
    if not word or len(word) > grid.num_cells:
        return False
    first = word[0]
    for row, col in grid.cells():
        if letters_match(grid.get(row, col), first):
            if search_around(grid, row, col, word):
                return True
    return False
