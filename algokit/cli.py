"""Command-line entry point solving the room-counting and distinct-numbers tasks.

Both commands read their input from standard input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.grid import count_rooms
from algokit.sorting import count_distinct

__all__ = ["main"]


def _read_rooms(text: str) -> list[str]:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected the grid height and width")
    height, width = int(tokens[0]), int(tokens[1])
    if height < 0 or width < 0:
        raise ValueError("grid dimensions must not be negative")
    cells = "".join(tokens[2:])
    if len(cells) < height * width:
        raise ValueError("the grid is shorter than its dimensions")
    return [cells[row * width:(row + 1) * width] for row in range(height)]


def _read_numbers(text: str) -> list[int]:
    tokens = text.split()
    if not tokens:
        raise ValueError("expected the count of numbers")
    count = int(tokens[0])
    numbers = tokens[1:count + 1]
    if count < 0 or len(numbers) < count:
        raise ValueError(f"expected {count} numbers")
    return [int(token) for token in numbers]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "rooms", help="count the rooms of a map given as 'n m' and n rows"
    )
    commands.add_parser(
        "distinct", help="count distinct values given as 'n' and n integers"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command on standard input and print its answer."""
    args = _build_parser().parse_args(argv)
    text = sys.stdin.read()
    try:
        if args.command == "rooms":
            answer = count_rooms(_read_rooms(text))
        else:
            answer = count_distinct(_read_numbers(text))
    except ValueError as error:
        print(f"algokit: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())