"""Command line entry point and the output records of its commands."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from ordkit.object import Object
from ordkit.sat import Rarity, Sat
from ordkit.sat_point import OutPoint


@dataclass(frozen=True)
class ListOutput:
    """One sat range of an output, with its position and first sat's traits."""

    output: OutPoint
    start: int
    end: int
    size: int
    offset: int
    rarity: Rarity
    name: str


def list_ranges(outpoint: OutPoint, ranges: Iterable[tuple[int, int]]) -> list[ListOutput]:
    """Describe an output's sat ranges, tracking each range's offset."""
    outputs = []
    offset = 0
    for start, end in ranges:
        size = end - start
        first = Sat(start)
        outputs.append(
            ListOutput(
                output=outpoint,
                start=start,
                end=end,
                size=size,
                offset=offset,
                rarity=first.rarity(),
                name=first.name(),
            )
        )
        offset += size
    return outputs


def parse_output(text: str) -> dict[str, str]:
    """The JSON record printed for a parsed object."""
    return {"object": str(Object.parse(text))}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordkit")
    commands = parser.add_subparsers(dest="command", required=True)
    parse = commands.add_parser("parse", help="Parse a satoshi from ordinal notation")
    parse.add_argument("object", help="Parse <OBJECT>.")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "parse":
            output = parse_output(args.object)
        else:
            raise ValueError(f"unknown command: {args.command}")
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())