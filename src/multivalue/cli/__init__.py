"""multivalue CLI — sample output and key grouping from the shell.

Entry point registered as ``multivalue`` in ``pyproject.toml``::

    [project.scripts]
    multivalue = "multivalue.cli:main"
"""

import argparse
import sys

from multivalue.config import LAYOUTS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``multivalue`` command."""
    parser = argparse.ArgumentParser(
        prog="multivalue",
        description="multivalue — a dictionary mapping each key to a set of values.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- multivalue demo --------------------------------------------------
    subparsers.add_parser("demo", help="Print a sample dictionary and its pairs")

    # -- multivalue group -------------------------------------------------
    group_parser = subparsers.add_parser("group", help="Group key/value pairs by key")
    group_parser.add_argument(
        "files",
        nargs="*",
        help="Files with one pair per line (default: stdin)",
    )
    group_parser.add_argument(
        "--pair",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Add a pair directly (repeatable)",
    )
    group_parser.add_argument(
        "--separator",
        default="=",
        help="Separator between key and value (default: '=')",
    )
    group_parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        default="pairs",
        help="Print one line per pair or one line per key",
    )
    group_parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort output by key",
    )
    group_parser.add_argument(
        "--remove",
        action="append",
        default=[],
        metavar="KEY",
        help="Drop a key and all of its values before printing (repeatable)",
    )
    group_parser.add_argument(
        "--log-level",
        default="warning",
        help="Logging level (debug, info, warning, error)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "demo":
        from multivalue.cli._demo import run_demo

        run_demo(args)
    elif args.command == "group":
        from multivalue.cli._group import run_group

        run_group(args)
