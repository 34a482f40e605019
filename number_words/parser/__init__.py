# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Decoding strategies.

  - NaiveParser: rebuilds partial words per branch (simplest, most allocation)
  - DfsParser: backtracking over one reused buffer (low memory)
  - MemoizedParser: decode graph + completion counts + exact-size generation

All three expose parse(digits) -> list[str] and agree on the set of results.
"""

from number_words.parser.base import Parser
from number_words.parser.dfs import DfsParser
from number_words.parser.errors import DecodeError, InvalidCharacterError
from number_words.parser.memoized import MemoizedParser
from number_words.parser.naive import NaiveParser
from number_words.parser.registry import create_parser, get_parser_class, list_parser_types

__all__ = [
    "DecodeError",
    "DfsParser",
    "InvalidCharacterError",
    "MemoizedParser",
    "NaiveParser",
    "Parser",
    "create_parser",
    "get_parser_class",
    "list_parser_types",
]
