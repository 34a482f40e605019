# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Schema-level validation tests.

These focus on the pydantic models themselves: boundary values, constraint
enforcement, and defaults.
"""

import pytest
from pydantic import ValidationError

from number_words.config.schema import (
    BenchConfig,
    GlobalConfig,
    NumberWordsConfig,
    ParserConfig,
    TableConfig,
    TokenEntry,
)


class TestGlobalConfigSchema:
    def test_seed_must_be_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig(config_version="1.0.0", seed=-1)

    def test_defaults(self) -> None:
        config = GlobalConfig(config_version="1.0.0")
        assert config.log_level == "INFO"
        assert config.project_name == "number_words"
        assert config.log_file is None

    def test_config_version_is_required(self) -> None:
        with pytest.raises(ValidationError):
            GlobalConfig()  # type: ignore[call-arg]


class TestTokenEntrySchema:
    def test_empty_token_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TokenEntry(token="", symbol="A")

    def test_symbol_must_be_one_character(self) -> None:
        with pytest.raises(ValidationError):
            TokenEntry(token="1", symbol="")
        with pytest.raises(ValidationError):
            TokenEntry(token="1", symbol="AB")

    def test_multi_character_token_is_fine(self) -> None:
        entry = TokenEntry(token="123", symbol="q")
        assert entry.token == "123"


class TestTableConfigSchema:
    def test_default_entries_are_the_alphabet_table(self) -> None:
        pairs = TableConfig().pairs()
        assert len(pairs) == 26
        assert pairs[0] == ("1", "A")
        assert pairs[9] == ("10", "J")
        assert pairs[-1] == ("26", "Z")

    def test_default_policy_is_reject(self) -> None:
        assert TableConfig().duplicate_policy == "reject"

    def test_unknown_policy_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TableConfig(duplicate_policy="first_wins")  # type: ignore[arg-type]

    def test_duplicate_entries_survive_validation(self) -> None:
        config = TableConfig(
            entries=[TokenEntry(token="1", symbol="A"), TokenEntry(token="1", symbol="B")]
        )
        assert config.pairs() == [("1", "A"), ("1", "B")]


class TestParserConfigSchema:
    def test_default_strategy_is_memoized(self) -> None:
        assert ParserConfig().strategy == "memoized"

    def test_unknown_strategy_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ParserConfig(strategy="greedy")  # type: ignore[arg-type]


class TestBenchConfigSchema:
    def test_defaults_match_original_benchmark(self) -> None:
        config = BenchConfig()
        assert config.lengths == [10, 15, 20, 25]
        assert config.strategies == ["naive", "dfs", "memoized"]
        assert config.input_mode == "repeat"
        assert config.digit == "1"

    def test_repeats_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(repeats=0)

    def test_lengths_cannot_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            BenchConfig(lengths=[])


class TestNumberWordsConfigSchema:
    def test_requires_global_section(self) -> None:
        with pytest.raises(ValidationError):
            NumberWordsConfig.model_validate({})

    def test_accepts_global_alias(self) -> None:
        config = NumberWordsConfig.model_validate({"global": {"config_version": "1.0.0"}})
        assert config.global_config.config_version == "1.0.0"

    def test_rejects_top_level_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            NumberWordsConfig.model_validate({
                "global": {"config_version": "1.0.0"},
                "unknown_section": {"something": True},
            })
