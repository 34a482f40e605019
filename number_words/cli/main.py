# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for number_words.

One root command, `number-words`, with every operation as a subcommand.
The global options (--config, --log-level, --dry-run, --seed) are inherited
by every subcommand through argparse's parent parser mechanism.

Usage:
    number-words parse 1234
    number-words parse 1234 --strategy dfs --output words.txt
    number-words count 111111111111111111111111111111
    number-words bench --config configs/default.yaml --output bench.json
    number-words info
"""

import argparse
import sys
from typing import Optional

from number_words.cli.commands import handle_bench, handle_count, handle_info, handle_parse
from number_words.cli.exit_codes import USER_ERROR

STRATEGY_CHOICES = ["naive", "dfs", "memoized"]


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    add_help=False keeps its -h from colliding with the subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides the config file).",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Validate config and arguments without doing the work.",
    )
    parent.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the seed for random benchmark inputs.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """Register every subcommand and point args.func at its handler."""
    parse_parser = subparsers.add_parser(
        "parse", parents=[parent], help="Decode a digit string into every possible word."
    )
    parse_parser.add_argument("digits", help="The digit string to decode.")
    parse_parser.add_argument(
        "--strategy",
        choices=STRATEGY_CHOICES,
        default=None,
        help="Decoding strategy (default: parser.strategy from config, else memoized).",
    )
    parse_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write every decoded word to this file, one per line.",
    )
    parse_parser.add_argument(
        "--max-logged",
        type=int,
        default=None,
        dest="max_logged",
        help="Log at most this many words (the output file always gets all).",
    )
    parse_parser.set_defaults(func=handle_parse)

    count_parser = subparsers.add_parser(
        "count", parents=[parent], help="Count decodings without generating them."
    )
    count_parser.add_argument("digits", help="The digit string to count decodings of.")
    count_parser.set_defaults(func=handle_count)

    bench_parser = subparsers.add_parser(
        "bench", parents=[parent], help="Time the decoding strategies."
    )
    bench_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write a JSON benchmark report to this path.",
    )
    bench_parser.set_defaults(func=handle_bench)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display environment and table info."
    )
    info_parser.set_defaults(func=handle_info)


def main(argv: Optional[list[str]] = None) -> None:
    """
    Main CLI entrypoint, referenced by pyproject.toml's [project.scripts].

    With no subcommand, prints help and exits with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="number-words",
        description="number-words: decode digit strings into every possible word.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
