"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import List, Optional

from pushswap.fdio import put_str
from pushswap.parse import InputError, parse_args
from pushswap.sort import sort_operations


def main(argv: Optional[List[str]] = None) -> int:
    """Print one sorting operation per line; print Error and fail on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = parse_args(args)
    except InputError:
        put_str("Error\n", sys.stderr)
        return 1
    for op in sort_operations(values):
        put_str(op + "\n", sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())