# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Depth-first backtracking over a single reused buffer.

The search keeps one list of symbols for the word being built. Taking an
edge appends its symbol, finishing the subtree below it pops the symbol
again. A copy is made only when the buffer spans the whole input, so peak
extra memory is proportional to the input length no matter how many
decodings exist.

Frames on the explicit stack are (position, backtrack cursor); the cursor
is the iterator over tokens starting at that position.
"""

from number_words.parser.base import Parser


class DfsParser(Parser):
    """Backtracking decoder with no precomputation."""

    name = "dfs"

    def _decode(self, digits: str) -> list[str]:
        n = len(digits)
        if n == 0:
            return [""]

        matches = self._table.matches
        results: list[str] = []
        buffer: list[str] = []
        stack = [(0, matches(digits, 0))]

        while stack:
            position, cursor = stack[-1]
            edge = next(cursor, None)

            if edge is None:
                stack.pop()
                # Every frame but the root was entered by appending a symbol.
                if stack:
                    buffer.pop()
                continue

            length, symbol = edge
            end = position + length
            buffer.append(symbol)
            if end == n:
                results.append("".join(buffer))
                buffer.pop()
            else:
                stack.append((end, matches(digits, end)))

        return results
