# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Benchmark report writer.

Writes one JSON document:

    {
      "created_at": "2026-...",
      "seed": 42,
      "config": {... bench config snapshot ...},
      "results": [{"strategy": "dfs", "input_length": 10, ...}, ...]
    }

The file is written atomically so an interrupted run never leaves half a
report behind.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from number_words.bench.core import BenchResult
from number_words.logging.logger import get_logger
from number_words.utils.filesystem import atomic_write

logger = get_logger(__name__)


def format_report_text(results: list[BenchResult]) -> str:
    """Plain-text table of the results, one row per (strategy, length)."""
    lines = [f"{'strategy':<10} {'length':>6} {'results':>10} {'best_ms':>10} {'mean_ms':>10}"]
    for row in results:
        lines.append(
            f"{row.strategy:<10} {row.input_length:>6} {row.result_count:>10} "
            f"{row.best_ms:>10.4f} {row.mean_ms:>10.4f}"
        )
    return "\n".join(lines) + "\n"


def write_bench_report(
    results: list[BenchResult],
    output_path: Path,
    seed: int,
    config_snapshot: Optional[dict[str, object]] = None,
) -> Path:
    """
    Write `results` as JSON to `output_path` and return the path.

    A human-readable table goes next to it with a .txt suffix.
    """
    document = {
        "created_at": datetime.now(tz=timezone.utc).isoformat(),
        "seed": seed,
        "config": config_snapshot or {},
        "results": [row._asdict() for row in results],
    }
    atomic_write(output_path, json.dumps(document, indent=2, sort_keys=True) + "\n")

    text_path = output_path.with_suffix(".txt")
    if text_path != output_path:
        atomic_write(text_path, format_report_text(results))

    logger.info(
        "Benchmark report written",
        extra={"output_path": str(output_path), "rows": len(results)},
    )
    return output_path
