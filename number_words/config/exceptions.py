# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration system.

We keep these separate so that CLI and other layers can catch config-specific
failures without importing the entire config machinery. Table construction
errors live here too: a token table is configuration, and a table that
cannot be built is a broken config.
"""


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a config file cannot be read from disk or parsed as YAML."""


class ConfigValidationError(ConfigError):
    """
    Raised when a config file parses fine but fails schema validation.
    This covers missing required fields, type mismatches, out-of-range values,
    and any other structural problem.
    """


class TableBuildError(ConfigError):
    """Raised when a list of (token, symbol) pairs cannot become a Table."""


class EmptyTokenError(TableBuildError):
    """A token must be at least one character long."""


class DuplicateTokenError(TableBuildError):
    """
    The same token appeared more than once under the ``reject`` policy.

    The offending token is kept on ``.token`` so callers can report it.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"Duplicate token '{token}' in table configuration")
        self.token = token
