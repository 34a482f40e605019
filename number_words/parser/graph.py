# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Decode graph and completion counting for the memoized strategy.

For an input of length n the graph has nodes 0..n. An edge i -> i+L labelled
with symbol c exists whenever digits[i:i+L] is a token that decodes to c.
Every path from 0 to n is one full partition of the input, and the symbols
along the path spell its decoding.

count_completions runs the usual "decode ways" recurrence over that graph:

    dp[n] = 1
    dp[i] = sum(dp[j] for each edge i -> j)

so dp[i] is the number of decodings of digits[i:], and dp[0] the total.
Counts are Python ints and never overflow.
"""

from dataclasses import dataclass
from typing import NamedTuple

from number_words.table.core import Table


class Edge(NamedTuple):
    symbol: str
    target: int


@dataclass(frozen=True)
class DecodeGraph:
    """Position graph of one input. edges[i] lists edges out of node i, shortest token first."""

    length: int
    edges: list[list[Edge]]

    @property
    def edge_count(self) -> int:
        return sum(len(out) for out in self.edges)


def build_graph(table: Table, digits: str) -> DecodeGraph:
    """
    Record every token match at every position. Cost O(n * max_lookahead).

    The input is assumed to be validated already.
    """
    n = len(digits)
    edges: list[list[Edge]] = []
    for start in range(n):
        edges.append(
            [Edge(symbol, start + length) for length, symbol in table.matches(digits, start)]
        )
    edges.append([])
    return DecodeGraph(length=n, edges=edges)


def count_completions(graph: DecodeGraph) -> list[int]:
    """Backward DP over the graph; returns dp[0..n]. Cost O(edges)."""
    n = graph.length
    dp = [0] * (n + 1)
    dp[n] = 1
    for position in range(n - 1, -1, -1):
        dp[position] = sum(dp[edge.target] for edge in graph.edges[position])
    return dp
