# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Cross-strategy equivalence.

For seeded random tables and inputs, naive, dfs and memoized must return the
same decodings. They enumerate each partition exactly once, so we compare
multisets (Counter), which is stricter than comparing sets.
"""

import random
from collections import Counter

import pytest

from number_words.parser.dfs import DfsParser
from number_words.parser.memoized import MemoizedParser
from number_words.parser.naive import NaiveParser
from number_words.table.core import Table


def _random_table(rng: random.Random, alphabet: str, max_token_length: int) -> Table:
    pairs = []
    for _ in range(rng.randint(1, 12)):
        length = rng.randint(1, max_token_length)
        token = "".join(rng.choice(alphabet) for _ in range(length))
        pairs.append((token, rng.choice("xyzw")))
    return Table(pairs, duplicate_policy="last_wins")


@pytest.mark.parametrize("seed", range(40))
def test_random_tables_and_inputs_agree(seed: int) -> None:
    rng = random.Random(seed)
    table = _random_table(rng, "012", max_token_length=3)
    alphabet = sorted(table.alphabet)

    parsers = [NaiveParser(table), DfsParser(table), MemoizedParser(table)]
    for _ in range(5):
        digits = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
        outputs = [Counter(parser.parse(digits)) for parser in parsers]
        assert outputs[0] == outputs[1] == outputs[2], digits


@pytest.mark.parametrize(
    "digits",
    ["", "0", "10", "101", "1111", "2626", "123456789", "1111111111", "2101", "99"],
)
def test_default_table_agrees(default_table: Table, digits: str) -> None:
    naive = sorted(NaiveParser(default_table).parse(digits))
    dfs = sorted(DfsParser(default_table).parse(digits))
    memoized = sorted(MemoizedParser(default_table).parse(digits))
    assert naive == dfs == memoized


def test_parsers_share_one_table(default_table: Table) -> None:
    parsers = [NaiveParser(default_table), DfsParser(default_table), MemoizedParser(default_table)]
    assert all(parser.table is default_table for parser in parsers)
    assert {frozenset(p.parse("1226")) for p in parsers} == {
        frozenset({"ABBF", "ABZ", "AVF", "LBF", "LZ"})
    }
