# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The token table: an immutable token -> symbol mapping stored as a trie.

Every decoding strategy asks the same question at every input position:
"which tokens start here, and what do they decode to?" A dict keyed by
token would answer that by slicing the input once per candidate length.
The trie answers it by walking one character at a time from the current
position, stopping as soon as no token continues with the next character.
Lookahead is bounded by trie depth for free, and no slice keys are built.

States live in two flat lists indexed by state id (state 0 is the root):
  _next[state]    -> dict mapping a character to the child state id
  _symbols[state] -> the symbol of the token ending here, or None

A Table is built once and never changes afterwards, so one instance can be
shared by any number of parsers and threads.
"""

from collections.abc import Iterable, Iterator
from typing import Literal, Optional

from number_words.config.exceptions import DuplicateTokenError, EmptyTokenError, TableBuildError
from number_words.logging.logger import get_logger

logger = get_logger(__name__)

DuplicatePolicy = Literal["reject", "last_wins"]


def default_pairs() -> list[tuple[str, str]]:
    """The classic mapping: "1" -> "A", "2" -> "B", ..., "26" -> "Z"."""
    return [(str(offset + 1), chr(ord("A") + offset)) for offset in range(26)]


class Table:
    """
    Immutable token -> symbol table with trie-based prefix matching.

    Args:
        pairs: Ordered (token, symbol) pairs. Tokens must be non-empty and
            symbols exactly one character.
        duplicate_policy: What to do when a token appears twice.
            ``"reject"`` raises DuplicateTokenError.
            ``"last_wins"`` keeps the symbol of the last occurrence; the
            token keeps the iteration position of its first occurrence.

    Raises:
        EmptyTokenError: A token is the empty string.
        DuplicateTokenError: A token repeats under the ``reject`` policy.
        TableBuildError: A symbol is not exactly one character, or the
            policy name is unknown.
    """

    __slots__ = ("_next", "_symbols", "_pairs", "_alphabet", "_max_lookahead")

    def __init__(
        self,
        pairs: Iterable[tuple[str, str]],
        duplicate_policy: DuplicatePolicy = "reject",
    ) -> None:
        if duplicate_policy not in ("reject", "last_wins"):
            raise TableBuildError(
                f"Unknown duplicate policy '{duplicate_policy}'. "
                "Must be 'reject' or 'last_wins'"
            )

        self._next: list[dict[str, int]] = [{}]
        self._symbols: list[Optional[str]] = [None]
        self._pairs: dict[str, str] = {}

        replaced = 0
        for token, symbol in pairs:
            if not token:
                raise EmptyTokenError("Tokens must be at least one character long")
            if len(symbol) != 1:
                raise TableBuildError(
                    f"Symbol for token '{token}' must be exactly one character, got {symbol!r}"
                )
            if token in self._pairs:
                if duplicate_policy == "reject":
                    raise DuplicateTokenError(token)
                replaced += 1
            self._pairs[token] = symbol
            self._insert(token, symbol)

        self._alphabet = frozenset(char for token in self._pairs for char in token)
        self._max_lookahead = max((len(token) for token in self._pairs), default=0)

        logger.debug(
            "Table built",
            extra={
                "token_count": len(self._pairs),
                "max_lookahead": self._max_lookahead,
                "alphabet_size": len(self._alphabet),
                "duplicate_policy": duplicate_policy,
                "duplicates_replaced": replaced,
            },
        )

    @classmethod
    def default(cls) -> "Table":
        return cls(default_pairs())

    def _insert(self, token: str, symbol: str) -> None:
        state = 0
        for char in token:
            child = self._next[state].get(char)
            if child is None:
                child = len(self._symbols)
                self._next[state][char] = child
                self._next.append({})
                self._symbols.append(None)
            state = child
        self._symbols[state] = symbol

    @property
    def max_lookahead(self) -> int:
        """Length of the longest token; 0 for an empty table."""
        return self._max_lookahead

    @property
    def alphabet(self) -> frozenset[str]:
        """Every character that occurs anywhere inside any token."""
        return self._alphabet

    def matches(self, text: str, start: int) -> Iterator[tuple[int, str]]:
        """
        Yield (length, symbol) for every token that starts at text[start].

        Lengths come out in ascending order. The walk never reads past
        start + max_lookahead or the end of the text.
        """
        state = 0
        end = min(len(text), start + self._max_lookahead)
        for pos in range(start, end):
            child = self._next[state].get(text[pos])
            if child is None:
                return
            state = child
            symbol = self._symbols[state]
            if symbol is not None:
                yield pos - start + 1, symbol

    def lookup(self, token: str) -> Optional[str]:
        """Return the symbol for an exact token, or None."""
        return self._pairs.get(token)

    def __contains__(self, token: object) -> bool:
        return token in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs.items())

    def __repr__(self) -> str:
        return (
            f"Table(tokens={len(self._pairs)}, max_lookahead={self._max_lookahead}, "
            f"alphabet={''.join(sorted(self._alphabet))!r})"
        )
