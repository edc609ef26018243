"""Command entry point."""

import sys
from collections.abc import Sequence

__all__ = ["EXIT_ERROR", "EXIT_SUCCESS", "template", "main"]

EXIT_SUCCESS = 0
EXIT_ERROR = 84


def template(argv: Sequence[str] | None) -> int:
    """Return the exit status for the given arguments."""
    if argv is None:
        return EXIT_ERROR
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command with ``argv`` (the process arguments by default)."""
    if argv is None:
        argv = sys.argv
    return template(argv)


if __name__ == "__main__":
    sys.exit(main())