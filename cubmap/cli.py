"""Command line entry point: validate a .cub scene file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .mapfile import MapError, load


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the scene file named by the single argument; return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: Invalid number of arguments.", file=sys.stderr)
        return 1
    try:
        info = load(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write("".join(info.filled))
    print("Map is closed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())