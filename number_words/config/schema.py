# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for number_words.

Every config section gets its own frozen pydantic model. Frozen means once you
create it, you cannot mutate it. A token table that changes under a running
parser would break every invariant the strategies rely on.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

Only the `global:` section is required. `table:`, `parser:` and `bench:` fall
back to their defaults when missing, so the smallest useful config is a
three-line YAML file.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from number_words.table.core import default_pairs

DuplicatePolicy = Literal["reject", "last_wins"]
StrategyName = Literal["naive", "dfs", "memoized"]


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings that apply to the entire system.

    This is the first config loaded and it controls observability
    (log_level, log_file), project identity, and the seed used when the
    benchmark generates random inputs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    project_name: str = Field(
        default="number_words", description="Human-readable project identifier"
    )
    seed: int = Field(
        default=42,
        ge=0,
        description="Seed for random benchmark inputs",
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )


class TokenEntry(BaseModel):
    """One (token, symbol) pair of the lookup table."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    token: str = Field(min_length=1, description="Character sequence matched in the input")
    symbol: str = Field(
        min_length=1,
        max_length=1,
        description="The single output character the token decodes to",
    )


def _default_entries() -> list[TokenEntry]:
    return [TokenEntry(token=token, symbol=symbol) for token, symbol in default_pairs()]


class TableConfig(BaseModel):
    """
    The token table. Defaults to the classic "1".."26" -> A..Z mapping.

    Entries are an ordered list rather than a mapping on purpose: YAML mappings
    silently drop duplicate keys, and duplicate tokens are exactly what
    duplicate_policy has to see.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(default="1.0.0", description="Schema version")
    duplicate_policy: DuplicatePolicy = Field(
        default="reject",
        description="'reject' fails on a repeated token, 'last_wins' keeps the last one",
    )
    entries: list[TokenEntry] = Field(
        default_factory=_default_entries,
        description="Ordered (token, symbol) pairs",
    )

    def pairs(self) -> list[tuple[str, str]]:
        return [(entry.token, entry.symbol) for entry in self.entries]


class ParserConfig(BaseModel):
    """Which decoding strategy the CLI builds when none is named explicitly."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(default="1.0.0", description="Schema version")
    strategy: StrategyName = Field(
        default="memoized",
        description="Decoding strategy: 'naive', 'dfs' or 'memoized'",
    )


class BenchConfig(BaseModel):
    """
    Knobs for the benchmark harness.

    The default input is a run of "1"s, the most ambiguous input for the
    default table: the number of decodings grows like the Fibonacci numbers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(default="1.0.0", description="Schema version")
    lengths: list[int] = Field(
        default_factory=lambda: [10, 15, 20, 25],
        min_length=1,
        description="Input lengths to time",
    )
    strategies: list[StrategyName] = Field(
        default_factory=lambda: ["naive", "dfs", "memoized"],
        min_length=1,
        description="Strategies to time, in order",
    )
    repeats: int = Field(
        default=5,
        ge=1,
        le=1000,
        description="Timed runs per (strategy, length) pair",
    )
    input_mode: Literal["repeat", "random"] = Field(
        default="repeat",
        description="'repeat' uses digit * length, 'random' samples the table alphabet",
    )
    digit: str = Field(
        default="1",
        min_length=1,
        max_length=1,
        description="Character repeated when input_mode is 'repeat'",
    )


class NumberWordsConfig(BaseModel):
    """
    Top-level config container. Each CLI command reads the sections it needs.

    Sections not present in the YAML stay None; commands substitute the
    section defaults in that case.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        populate_by_name=True,
    )

    global_config: GlobalConfig = Field(alias="global")
    table: Optional[TableConfig] = Field(default=None)
    parser: Optional[ParserConfig] = Field(default=None)
    bench: Optional[BenchConfig] = Field(default=None)
