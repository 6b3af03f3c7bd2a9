#!/usr/bin/env python
"""Find all the words from a word list on a Boggle board and print them."""

import argparse

from tqdm import tqdm

from boggleboard.args import add_standard_args, get_words_from_args
from boggleboard.loader import load_grid
from boggleboard.score import total_points
from boggleboard.searcher import BoardSearcher


def main():
    parser = argparse.ArgumentParser(
        description="Find the words on a Boggle board and its maximum score."
    )
    add_standard_args(parser, progress=True)
    parser.add_argument("board", type=str, help="File with one row of letters per line.")
    args = parser.parse_args()

    words = get_words_from_args(parser, args)
    searcher = BoardSearcher(load_grid(args.board))
    print(searcher.render(), end="")

    it = tqdm(words, smoothing=0) if args.progress else words
    found = searcher.find_words(it)
    if args.print_words:
        for word in sorted(found):
            print(f"{found[word]}\t{word}")

    # Repeats in the list count each time.
    print("score:", total_points(found, words))


if __name__ == "__main__":
    main()
