#!/usr/bin/env python
"""Score Boggle boards against a word list."""

import argparse
import sys
import time

from tqdm import tqdm

from boggleboard.args import add_standard_args, get_words_from_args
from boggleboard.loader import load_grid
from boggleboard.score import total_points
from boggleboard.searcher import BoardSearcher


def main():
    parser = argparse.ArgumentParser(description="Score boggle boards")
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="+", help="Files containing one board each"
    )
    args = parser.parse_args()

    words = get_words_from_args(parser, args)

    start_s = time.time()
    n = 0
    for path in tqdm(args.files, smoothing=0, disable=len(args.files) < 2):
        searcher = BoardSearcher(load_grid(path))
        found = searcher.find_words(words)
        print(f"{path}: {total_points(found, words)}")
        if args.print_words:
            for word in sorted(found):
                print(f"{found[word]}\t{word}")
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
