# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the number-words CLI.

Each function takes the parsed argparse namespace and returns an exit code.
Handlers never raise: configuration problems map to CONFIG_ERROR, invalid
input characters to VALIDATION_ERROR, anything unexpected to RUNTIME_ERROR.

No print() calls. Results go through the structured logger and, when
--output is given, to a file.
"""

import argparse
import logging
from pathlib import Path

from number_words.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    USER_ERROR,
    VALIDATION_ERROR,
)
from number_words.config.exceptions import ConfigError
from number_words.config.loader import load_config_or_default
from number_words.config.schema import BenchConfig, NumberWordsConfig, ParserConfig, TableConfig
from number_words.logging.logger import get_logger
from number_words.parser.errors import InvalidCharacterError
from number_words.parser.validator import validate
from number_words.runtime.bootstrap import bootstrap
from number_words.table.builder import build_table
from number_words.table.core import Table

DEFAULT_MAX_LOGGED = 100


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, NumberWordsConfig | None, logging.Logger]:
    """
    The shared setup every command needs: load config, run bootstrap.

    Returns (exit_code, config, logger). If exit_code is not SUCCESS the
    caller should return it immediately.
    """
    logger = get_logger(
        f"number_words.cli.{command_name}", log_level=getattr(args, "log_level", None)
    )

    config_path = Path(args.config) if getattr(args, "config", None) else None
    try:
        config = load_config_or_default(config_path)
    except ConfigError as err:
        logger.error(
            "Configuration error",
            extra={"command": command_name, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    # An explicit --log-level beats the config file.
    if getattr(args, "log_level", None):
        config = config.model_copy(
            update={
                "global_config": config.global_config.model_copy(
                    update={"log_level": args.log_level}
                )
            }
        )

    try:
        bootstrap(config.global_config)
    except ValueError as err:
        logger.error(
            "Configuration error",
            extra={"command": command_name, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    if config_path is None:
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _build_table(
    config: NumberWordsConfig,
    logger: logging.Logger,
) -> tuple[int, Table | None]:
    """Build the configured table, mapping build failures to CONFIG_ERROR."""
    try:
        return SUCCESS, build_table(config.table or TableConfig())
    except ConfigError as err:
        logger.error("Table build failed", extra={"error": str(err)})
        return CONFIG_ERROR, None


def _resolve_seed(args: argparse.Namespace, config: NumberWordsConfig) -> int:
    seed = getattr(args, "seed", None)
    return seed if seed is not None else config.global_config.seed


def handle_parse(args: argparse.Namespace) -> int:
    """Decode one digit string with the chosen strategy."""
    exit_code, config, logger = _load_and_bootstrap(args, "parse")
    if exit_code != SUCCESS or config is None:
        return exit_code

    digits = getattr(args, "digits", None)
    if digits is None:
        logger.error("No input provided: pass the digits to decode")
        return USER_ERROR

    exit_code, table = _build_table(config, logger)
    if exit_code != SUCCESS or table is None:
        return exit_code

    strategy = getattr(args, "strategy", None) or (config.parser or ParserConfig()).strategy

    try:
        from number_words.parser.registry import create_parser

        try:
            parser = create_parser(strategy, table)
        except KeyError as err:
            logger.error("Unknown strategy", extra={"strategy": strategy, "error": str(err)})
            return USER_ERROR

        try:
            if getattr(args, "dry_run", False):
                validate(table.alphabet, digits)
                logger.info(
                    "Dry run: input is valid, would decode it",
                    extra={"strategy": strategy, "input_length": len(digits)},
                )
                return SUCCESS
            results = parser.parse(digits)
        except InvalidCharacterError as err:
            logger.error(
                "Invalid input character",
                extra={"char": err.char, "position": err.position},
            )
            return VALIDATION_ERROR

        max_logged = getattr(args, "max_logged", None) or DEFAULT_MAX_LOGGED
        logger.info(
            "Decoding complete",
            extra={
                "strategy": strategy,
                "input": digits,
                "result_count": len(results),
                "results": results[:max_logged],
                "truncated": len(results) > max_logged,
            },
        )

        output = getattr(args, "output", None)
        if output:
            from number_words.utils.filesystem import atomic_write

            atomic_write(Path(output), "".join(f"{word}\n" for word in results))
            logger.info("Results written", extra={"output_path": output})

        return SUCCESS

    except Exception as err:
        logger.error("Decoding failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_count(args: argparse.Namespace) -> int:
    """Count decodings with the memoized DP without generating them."""
    exit_code, config, logger = _load_and_bootstrap(args, "count")
    if exit_code != SUCCESS or config is None:
        return exit_code

    digits = getattr(args, "digits", None)
    if digits is None:
        logger.error("No input provided: pass the digits to count")
        return USER_ERROR

    exit_code, table = _build_table(config, logger)
    if exit_code != SUCCESS or table is None:
        return exit_code

    try:
        from number_words.parser.memoized import MemoizedParser

        try:
            count = MemoizedParser(table).count(digits)
        except InvalidCharacterError as err:
            logger.error(
                "Invalid input character",
                extra={"char": err.char, "position": err.position},
            )
            return VALIDATION_ERROR

        # Counts can exceed what JSON consumers parse as numbers; send a string.
        logger.info(
            "Count complete",
            extra={"input": digits, "count": str(count)},
        )
        return SUCCESS

    except Exception as err:
        logger.error("Count failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_bench(args: argparse.Namespace) -> int:
    """Time the strategies on generated inputs."""
    exit_code, config, logger = _load_and_bootstrap(args, "bench")
    if exit_code != SUCCESS or config is None:
        return exit_code

    exit_code, table = _build_table(config, logger)
    if exit_code != SUCCESS or table is None:
        return exit_code

    bench_config = config.bench or BenchConfig()
    seed = _resolve_seed(args, config)

    try:
        logger.info(
            "Starting benchmark",
            extra={
                "strategies": bench_config.strategies,
                "lengths": bench_config.lengths,
                "repeats": bench_config.repeats,
                "dry_run": getattr(args, "dry_run", False),
            },
        )

        if getattr(args, "dry_run", False):
            logger.info("Dry run: would run benchmark")
            return SUCCESS

        from number_words.bench.core import run_benchmark

        try:
            results = run_benchmark(table, bench_config, seed=seed)
        except InvalidCharacterError as err:
            logger.error(
                "Benchmark input uses a character outside the table alphabet",
                extra={"char": err.char},
            )
            return VALIDATION_ERROR

        output = getattr(args, "output", None)
        if output:
            from number_words.bench.report import write_bench_report

            write_bench_report(
                results,
                Path(output),
                seed=seed,
                config_snapshot=bench_config.model_dump(),
            )

        logger.info("Benchmark finished", extra={"rows": len(results)})
        return SUCCESS

    except Exception as err:
        logger.error("Benchmark failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_info(args: argparse.Namespace) -> int:
    """Display version, environment and table information."""
    exit_code, config, logger = _load_and_bootstrap(args, "info")
    if exit_code != SUCCESS or config is None:
        return exit_code

    exit_code, table = _build_table(config, logger)
    if exit_code != SUCCESS or table is None:
        return exit_code

    from number_words import __version__
    from number_words.parser.registry import list_parser_types
    from number_words.runtime.environment import get_system_info

    system_info = get_system_info()

    logger.info(
        "System information",
        extra={
            "number_words_version": __version__,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "implementation": system_info.implementation,
            "recursion_limit": system_info.recursion_limit,
            "config": getattr(args, "config", None),
            "strategies": list_parser_types(),
            "default_strategy": (config.parser or ParserConfig()).strategy,
            "token_count": len(table),
            "max_lookahead": table.max_lookahead,
            "alphabet": "".join(sorted(table.alphabet)),
        },
    )
    return SUCCESS
