#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Dump R1CS and assignments files as text.

Usage:
    python r1cs_decode.py --r1cs circuit.r1cs
    python r1cs_decode.py --assignments circuit.assignments
    python r1cs_decode.py --r1cs circuit.r1cs --assignments circuit.assignments
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from r1cs_format import (
    R1CSFormatError,
    decode_assignments,
    decode_r1cs,
    format_assignments,
    format_r1cs,
)


def dump_file(path: Path, decode: Callable, render: Callable) -> bool:
    """Decode one file and print it. Returns False if it could not be loaded."""
    try:
        value = decode(path.read_bytes())
    except (OSError, R1CSFormatError) as e:
        print(f"Could not load {path}: {e}")
        return False

    print(f"> {path}")
    print(render(value))
    print()
    return True


def cmd_r1cs(path: Path) -> bool:
    """Print a constraint system."""
    return dump_file(path, decode_r1cs, format_r1cs)


def cmd_assignments(path: Path) -> bool:
    """Print a set of assignments."""
    return dump_file(path, decode_assignments, format_assignments)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the contents of R1CS and assignments files"
    )
    parser.add_argument(
        "--r1cs", "-r",
        type=Path,
        metavar="FILE.r1cs",
        help="Path to constraint system"
    )
    parser.add_argument(
        "--assignments", "-a",
        type=Path,
        metavar="FILE.assignments",
        help="Path to assignments"
    )

    args = parser.parse_args(argv)

    ok = True
    if args.r1cs is not None:
        ok = cmd_r1cs(args.r1cs) and ok
    if args.assignments is not None:
        ok = cmd_assignments(args.assignments) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
