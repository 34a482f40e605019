# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Naive strategy: every branch builds its own partial words.

To decode a suffix, try each token that starts it, decode what is left,
and put the token's symbol at the front of every word that comes back.
The words are deques so that front insertion is O(1). Nothing is shared or
reused between branches, so allocation grows with the number of results
times the input length. It is the simplest strategy to check by eye and
the slowest on ambiguous input.

The recursion is driven by an explicit frame stack rather than Python
calls, so long inputs with few decodings (e.g. "10" * 2000) don't hit the
interpreter recursion limit.
"""

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field

from number_words.parser.base import Parser


@dataclass
class _Frame:
    """One pending `parse_list(digits[start:])` call."""

    start: int
    edges: Iterator[tuple[int, str]]
    symbol: str = ""
    words: list[deque[str]] = field(default_factory=list)


class NaiveParser(Parser):
    """Decodes by rebuilding partial words in every branch."""

    name = "naive"

    def _decode(self, digits: str) -> list[str]:
        return ["".join(word) for word in self._parse_list(digits)]

    def _parse_list(self, digits: str) -> list[deque[str]]:
        n = len(digits)
        if n == 0:
            return [deque()]

        matches = self._table.matches
        frames = [_Frame(0, matches(digits, 0))]

        while True:
            frame = frames[-1]
            edge = next(frame.edges, None)

            if edge is None:
                # This suffix is fully decoded; hand its words to the caller
                # with the caller's current symbol in front.
                frames.pop()
                if not frames:
                    return frame.words
                parent = frames[-1]
                for word in frame.words:
                    word.appendleft(parent.symbol)
                parent.words.extend(frame.words)
                continue

            length, symbol = edge
            frame.symbol = symbol
            end = frame.start + length
            if end == n:
                frame.words.append(deque(symbol))
            else:
                frames.append(_Frame(end, matches(digits, end)))
