# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
number_words: decode digit strings into every word a token table allows.

Subsystems:
  - table: trie-backed token -> symbol table built from (token, symbol) pairs
  - parser: validator plus the naive, dfs and memoized decoding strategies
  - bench: timing harness comparing the strategies
  - config / logging / runtime / cli: the ambient plumbing
"""

__version__ = "0.2.0"
