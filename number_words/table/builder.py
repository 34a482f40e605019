# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Turns the validated `table:` config section into a Table."""

from number_words.config.schema import TableConfig
from number_words.table.core import Table


def build_table(config: TableConfig) -> Table:
    """
    Build the Table described by `config`.

    Raises:
        DuplicateTokenError: A token repeats and the policy is ``reject``.
    """
    return Table(config.pairs(), duplicate_policy=config.duplicate_policy)
