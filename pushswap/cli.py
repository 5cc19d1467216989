"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import List, Optional

from pushswap.libft.transform import split
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import sort
from pushswap.stacks import Stacks


def main(argv: Optional[List[str]] = None) -> int:
    """Read numbers from *argv* and write one move per line to standard output.

    A single argument is split on spaces. Invalid input prints
    ``Error`` and gives exit status 1; no input at all gives 1 silently.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    if len(args) == 1:
        args = split(args[0], " ")
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sort(Stacks(values, output=sys.stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())