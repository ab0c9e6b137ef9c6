"""Command line entry point: count the most frequent words in a file."""

from __future__ import annotations

import argparse
import sys

from .controller import Controller
from .model import WordFrequencyModel


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordcounters",
        description="Show the most frequent words in a text file.",
    )
    parser.add_argument("file", help="text file to count")
    return parser


def main(argv=None):
    """Count words in the given file and print the top entries."""
    args = _parser().parse_args(argv)

    model = WordFrequencyModel()
    controller = Controller(model)
    controller.file_path = args.file
    try:
        controller.start()
    except FileNotFoundError:
        print(f"wordcounters: not a file: {args.file}", file=sys.stderr)
        return 1

    try:
        while not controller.wait(0.1):
            pass
    except KeyboardInterrupt:
        controller.cancel()
        return 130

    for entry in model:
        print(f"{entry.count:>10}  {entry.word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())