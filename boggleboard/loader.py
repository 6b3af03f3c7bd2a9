"""Read boards and word lists from disk."""

import sys

from boggleboard.grid import Grid


def read_grid_lines(path: str) -> list[str] | None:
    """One row per line. Returns None if the file can't be read or decoded."""
    try:
        with open(path, encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError):
        return None
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def load_grid(path: str) -> Grid:
    """Load a board, substituting the "BAD FILE NAME" board if it's unreadable."""
    lines = read_grid_lines(path)
    if not lines:
        sys.stderr.write(f"Unable to read board from {path}; using fallback board.\n")
        return Grid.fallback()
    return Grid(lines)


def read_word_list(path: str) -> list[str]:
    """One word per line; blank lines are skipped and words are upper-cased."""
    words = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word.upper())
    return words
