"""Command line entry point: print shortest routes between islands."""

from __future__ import annotations

import sys
from typing import Sequence

from .graph import GraphError
from .parser import ParseError, parse_file
from .paths import write_report

USAGE = "usage: ./pathfinder [filename]"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on the map file named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(USAGE + "\n")
        return 1
    try:
        graph = parse_file(args[0])
        write_report(graph, sys.stdout)
    except (ParseError, GraphError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())