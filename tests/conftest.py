# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for number_words tests.

Fixtures here are available to every test file automatically.
"""

import textwrap
from pathlib import Path

import pytest

from number_words.parser.dfs import DfsParser
from number_words.parser.memoized import MemoizedParser
from number_words.parser.naive import NaiveParser
from number_words.table.core import Table, default_pairs

PARSER_CLASSES = [NaiveParser, DfsParser, MemoizedParser]


@pytest.fixture()
def default_table() -> Table:
    """The "1".."26" -> A..Z table."""
    return Table(default_pairs())


@pytest.fixture(params=PARSER_CLASSES, ids=lambda cls: cls.name)
def parser_class(request: pytest.FixtureRequest) -> type:
    """Each decoding strategy in turn."""
    return request.param


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """
    The smallest config that passes schema validation.

    Tests that need specific table or bench values write their own files.
    """
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "number-words-test"
          seed: 7
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def small_table_config_file(tmp_path: Path) -> Path:
    """A config with a three-token table and a tiny benchmark."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "WARNING"
        table:
          entries:
            - {token: "a", symbol: "x"}
            - {token: "ab", symbol: "y"}
            - {token: "b", symbol: "z"}
        parser:
          strategy: "dfs"
        bench:
          lengths: [2, 4]
          strategies: ["dfs", "memoized"]
          repeats: 1
          digit: "a"
    """)
    config_file = tmp_path / "small_table.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def duplicate_table_config_file(tmp_path: Path) -> Path:
    """A config whose table repeats a token under the default reject policy."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
        table:
          entries:
            - {token: "1", symbol: "A"}
            - {token: "1", symbol: "B"}
    """)
    config_file = tmp_path / "duplicate_table.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """Valid YAML that fails schema validation (missing config_version)."""
    config_content = textwrap.dedent("""\
        global:
          project_name: "number-words-test"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file
