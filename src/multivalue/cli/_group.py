"""``multivalue group`` — collect ``key=value`` pairs and print them by key.

Reads pairs from files, ``--pair`` options, or stdin, feeds them into a
``MultiValueDictionary`` (duplicates collapse), optionally drops whole
keys, and prints the result.
"""

import argparse
import logging
import sys
from pathlib import Path

from multivalue.cli._format import parse_pair, read_pairs, render
from multivalue.config import DisplayConfig
from multivalue.dictionary import MultiValueDictionary
from multivalue.errors import MultiValueError

logger = logging.getLogger("multivalue.cli")


def _build_config(args: argparse.Namespace) -> DisplayConfig:
    return DisplayConfig(
        separator=args.separator,
        layout=args.layout,
        sort_keys=args.sort,
        log_level=args.log_level,
    )


def collect(
    args: argparse.Namespace, config: DisplayConfig
) -> tuple[MultiValueDictionary[str, str], int]:
    """Load every input into a dictionary.

    Returns the dictionary and the number of duplicate pairs ignored.
    """
    groups: MultiValueDictionary[str, str] = MultiValueDictionary()
    duplicates = 0

    def add(key: str, value: str) -> None:
        nonlocal duplicates
        if not groups.add_element(key, value):
            duplicates += 1
            logger.debug("Duplicate pair ignored: %r -> %r", key, value)

    for path in args.files:
        logger.debug("Reading %s", path)
        with Path(path).open(encoding="utf-8") as fh:
            for key, value in read_pairs(fh, config):
                add(key, value)

    for text in args.pair:
        add(*parse_pair(text, config))

    if not args.files and not args.pair:
        for key, value in read_pairs(sys.stdin, config):
            add(key, value)

    return groups, duplicates


def run_group(args: argparse.Namespace) -> None:
    """Group pairs by key and print them.

    Exits with status 1 on malformed input, invalid options, or an
    unreadable file.
    """
    try:
        config = _build_config(args)
    except MultiValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(level=config.level, format="%(levelname)s %(name)s: %(message)s")

    try:
        groups, duplicates = collect(args, config)
    except (MultiValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for key in args.remove:
        removed = groups.remove_values(key)
        if removed is None:
            logger.warning("Key %r not present; nothing removed", key)
        else:
            logger.info("Removed key %r (%d value(s))", key, len(removed))

    logger.info(
        "%d pairs under %d keys, %d duplicates ignored",
        len(groups),
        groups.key_count,
        duplicates,
    )

    for line in render(groups, config):
        print(line)
