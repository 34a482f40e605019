# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Abstract base class for decoding strategies.

All strategies share one contract:

    parse(digits) -> list[str]

  - the input is validated against the table alphabet first; the first
    unknown character raises InvalidCharacterError before any search runs
  - every full partition of the input into tokens yields one string, in
    left-to-right reading order
  - no partition at all is a successful, empty result
  - duplicates from distinct partitions are kept, order is unspecified

Subclasses only implement `_decode`, which may assume validated input.
Parsers hold nothing but the immutable Table, so a single instance can be
shared freely; every call owns its working state.
"""

from abc import ABC, abstractmethod

from number_words.logging.logger import get_logger
from number_words.parser.validator import validate
from number_words.table.core import Table, default_pairs

logger = get_logger(__name__)


class Parser(ABC):
    """Base class for every decoding strategy."""

    name: str = ""

    def __init__(self, table: Table) -> None:
        self._table = table

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str]]) -> "Parser":
        """Build a parser straight from a (token, symbol) configuration list."""
        return cls(Table(pairs))

    @classmethod
    def default(cls) -> "Parser":
        """A parser over the "1".."26" -> A..Z table."""
        return cls(Table(default_pairs()))

    @property
    def table(self) -> Table:
        return self._table

    def parse(self, digits: str) -> list[str]:
        """
        Decode `digits` into every string the table allows.

        Raises:
            InvalidCharacterError: `digits` holds a character no token uses.
        """
        validate(self._table.alphabet, digits)
        results = self._decode(digits)
        logger.debug(
            "parse finished",
            extra={
                "strategy": self.name,
                "input_length": len(digits),
                "result_count": len(results),
            },
        )
        return results

    @abstractmethod
    def _decode(self, digits: str) -> list[str]:
        """
        Run the search on already-validated input.

        Args:
            digits: Input made only of alphabet characters.

        Returns:
            One string per full partition of `digits`.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._table!r})"
