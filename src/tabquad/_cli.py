"""Command-line front end: read a sample table, print every rule's result."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from tabquad.quadrature import (
    QuadratureError,
    SampleTable,
    SizeMismatchError,
    format_result,
    sample_table,
)

RULES: List[Tuple[str, str]] = [
    ("lev priam", "left_rectangle"),
    ("prav priam", "right_rectangle"),
    ("sred priam", "midpoint_rectangle"),
    ("trapeciy", "trapezoid"),
    ("Simpson", "simpson"),
    ("Newton", "newton_3_8"),
]


def read_sample_table(stream: TextIO) -> SampleTable:
    """Read a count, then that many arguments, then that many values.

    All numbers are whitespace separated and may span any number of lines.

    Raises
    ------
    ValueError
        If the count is not a non-negative integer or a sample is not a
        real number.
    SizeMismatchError
        If the stream ends before ``2 * n`` samples have been read.
    """
    tokens = stream.read().split()

    if not tokens:
        raise ValueError("missing sample count")

    n = int(tokens[0])

    if n < 0:
        raise ValueError(f"sample count must be non-negative, got {n}")

    samples = [float(token) for token in tokens[1 : 2 * n + 1]]

    if len(samples) != 2 * n:
        raise SizeMismatchError(
            f"expected {2 * n} samples for a table of {n}, got {len(samples)}"
        )

    return sample_table(n, samples[:n], samples[n:])


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabquad",
        description=(
            "Integrate a tabulated function with classical quadrature rules"
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="input file (count, arguments, values), default standard input",
    )
    parser.add_argument(
        "--no-midpoint",
        action="store_true",
        help="omit the midpoint rectangle result",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)

    rules = [
        (label, rule)
        for label, rule in RULES
        if not (args.no_midpoint and rule == "midpoint_rectangle")
    ]

    try:
        if args.file is None:
            table = read_sample_table(sys.stdin)
        else:
            with open(args.file) as stream:
                table = read_sample_table(stream)

        sys.stdout.write(table.render())

        for label, rule in rules:
            print(format_result(label, getattr(table, rule)()), flush=True)
    except MemoryError as e:
        print(f"Memory allocation error: {e}", file=sys.stderr)
        return 1
    except (QuadratureError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
