"""Standard command-line arguments shared across the tools."""

import argparse

from boggleboard.loader import read_word_list


def add_standard_args(parser: argparse.ArgumentParser, *, progress=False):
    parser.add_argument(
        "--words",
        type=str,
        default="testdata/words.txt",
        help="Path to the candidate word list, one word per line.",
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print every word that can be found on the board, with its points.",
    )

    if progress:
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a progress bar while searching the word list.",
        )


def get_words_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> list[str]:
    try:
        return read_word_list(args.words)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"Unable to read word list {args.words}: {e}")
