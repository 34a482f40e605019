# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark harness for the decoding strategies.

Times each configured strategy on inputs of each configured length. The
default input is "1" * length, which for the A..Z table has Fibonacci-many
decodings and so separates the strategies quickly: naive falls behind first,
memoized pulls ahead as the result count grows.

Timings use time.perf_counter. Each (strategy, length) pair is run `repeats`
times; the best and mean wall time are reported in milliseconds. The result
count of the last run is kept as a sanity check that every strategy did the
same amount of work.
"""

import random
import statistics
import time
from typing import NamedTuple

from number_words.config.schema import BenchConfig
from number_words.logging.logger import get_logger
from number_words.parser.registry import create_parser
from number_words.table.core import Table

logger = get_logger(__name__)


class BenchResult(NamedTuple):
    """Timing of one strategy on one input length."""

    strategy: str
    input_length: int
    repeats: int
    result_count: int
    best_ms: float
    mean_ms: float


def make_input(
    length: int,
    mode: str,
    digit: str,
    alphabet: frozenset[str],
    rng: random.Random,
) -> str:
    """
    Build one benchmark input.

    ``repeat`` mode returns digit * length. ``random`` mode samples `length`
    characters from the alphabet, sorted first so the same seed always gives
    the same string.

    Raises:
        ValueError: Unknown mode, or random mode over an empty alphabet.
    """
    if mode == "repeat":
        return digit * length
    if mode == "random":
        if not alphabet:
            raise ValueError("Cannot build random input from an empty alphabet")
        pool = sorted(alphabet)
        return "".join(rng.choice(pool) for _ in range(length))
    raise ValueError(f"Unknown input mode '{mode}'. Must be 'repeat' or 'random'")


def run_benchmark(table: Table, config: BenchConfig, seed: int = 42) -> list[BenchResult]:
    """
    Time every strategy in `config.strategies` on every length in `config.lengths`.

    All strategies see the same input for a given length.

    Raises:
        InvalidCharacterError: `config.digit` is not in the table alphabet.
    """
    rng = random.Random(seed)
    inputs = {
        length: make_input(length, config.input_mode, config.digit, table.alphabet, rng)
        for length in config.lengths
    }

    results: list[BenchResult] = []
    for strategy in config.strategies:
        parser = create_parser(strategy, table)
        for length, digits in inputs.items():
            timings_ms: list[float] = []
            result_count = 0
            for _ in range(config.repeats):
                started = time.perf_counter()
                decoded = parser.parse(digits)
                timings_ms.append((time.perf_counter() - started) * 1000.0)
                result_count = len(decoded)

            row = BenchResult(
                strategy=strategy,
                input_length=length,
                repeats=config.repeats,
                result_count=result_count,
                best_ms=round(min(timings_ms), 4),
                mean_ms=round(statistics.fmean(timings_ms), 4),
            )
            results.append(row)
            logger.info("Benchmark row", extra=row._asdict())

    return results
