# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Strategy registry.

Maps a config-level strategy name ("naive", "dfs", "memoized") to its parser
class. The built-in strategies are registered once at import time and the
registry stays fixed after that. Choosing a strategy is a construction-time
decision: look the class up here, build a parser, then call parse on it.
"""

from number_words.logging.logger import get_logger
from number_words.parser.base import Parser
from number_words.parser.dfs import DfsParser
from number_words.parser.memoized import MemoizedParser
from number_words.parser.naive import NaiveParser
from number_words.table.core import Table

logger = get_logger(__name__)

_PARSER_REGISTRY: dict[str, type[Parser]] = {}


def register_parser(name: str, cls: type[Parser]) -> None:
    """
    Register a parser class under a unique name.

    Raises:
        ValueError: If ``name`` is already registered.
    """
    if name in _PARSER_REGISTRY:
        raise ValueError(
            f"Parser type '{name}' is already registered to {_PARSER_REGISTRY[name].__name__}"
        )
    _PARSER_REGISTRY[name] = cls
    logger.debug("registered_parser", extra={"parser_name": name, "parser_class": cls.__name__})


def get_parser_class(name: str) -> type[Parser]:
    """
    Retrieve a registered parser class by name.

    Raises:
        KeyError: If ``name`` is not registered.
    """
    if name not in _PARSER_REGISTRY:
        available = sorted(_PARSER_REGISTRY.keys())
        raise KeyError(f"Unknown parser type '{name}'. Available: {available}")
    return _PARSER_REGISTRY[name]


def list_parser_types() -> list[str]:
    """Return sorted list of all registered parser names."""
    return sorted(_PARSER_REGISTRY.keys())


def create_parser(name: str, table: Table) -> Parser:
    """Build the parser registered as ``name`` over ``table``."""
    return get_parser_class(name)(table)


def _register_builtins() -> None:
    for cls in (NaiveParser, DfsParser, MemoizedParser):
        register_parser(cls.name, cls)


_register_builtins()
