"""Command line: print the moves that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parser import InputError, parse_arguments
from .sorting import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; report bad input as ``Error`` on stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())