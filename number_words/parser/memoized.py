# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Memoized strategy: compile a graph, count, then generate.

The three phases run strictly in order on every call:

  1. build_graph: one trie walk per position finds every token match.
  2. count_completions: dp[i] = number of decodings of digits[i:].
  3. generate: allocate exactly dp[0] result slots, then walk the graph
     depth-first with one reused buffer, filling one slot per path.

Generation never touches the table. It also never enters an edge whose
target has dp == 0, so every branch it starts ends in a result. On inputs
with many decodings this beats the other strategies because the table
work is done once per position instead of once per branch.

`count` stops after phase 2. It is the cheap way to find out how big a
parse would be before paying for it.
"""

from number_words.parser.base import Parser
from number_words.parser.graph import DecodeGraph, build_graph, count_completions
from number_words.parser.validator import validate


def generate(graph: DecodeGraph, dp: list[int]) -> list[str]:
    """
    Spell out every path from node 0 to node n.

    The result list is sized to dp[0] up front and filled by index, so it is
    never grown during generation.
    """
    total = dp[0]
    results = [""] * total
    if total == 0 or graph.length == 0:
        return results

    n = graph.length
    filled = 0
    buffer: list[str] = []
    stack = [(0, iter(graph.edges[0]))]

    while stack:
        _, cursor = stack[-1]
        edge = next(cursor, None)

        if edge is None:
            stack.pop()
            if stack:
                buffer.pop()
            continue

        if dp[edge.target] == 0:
            continue

        buffer.append(edge.symbol)
        if edge.target == n:
            results[filled] = "".join(buffer)
            filled += 1
            buffer.pop()
        else:
            stack.append((edge.target, iter(graph.edges[edge.target])))

    return results


class MemoizedParser(Parser):
    """Graph + dynamic programming decoder with exact result pre-sizing."""

    name = "memoized"

    def _decode(self, digits: str) -> list[str]:
        graph = build_graph(self._table, digits)
        dp = count_completions(graph)
        return generate(graph, dp)

    def count(self, digits: str) -> int:
        """
        Number of decodings `parse(digits)` would return, without building them.

        Raises:
            InvalidCharacterError: `digits` holds a character no token uses.
        """
        validate(self._table.alphabet, digits)
        return count_completions(build_graph(self._table, digits))[0]
