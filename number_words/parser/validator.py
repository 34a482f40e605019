# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Character-level input validation.

Runs before any strategy does work. It only checks that every character is
used by some token; whether the characters line up into tokens is the
strategies' business.
"""

from collections.abc import Set

from number_words.parser.errors import InvalidCharacterError


def validate(alphabet: Set[str], digits: str) -> None:
    """
    Raise InvalidCharacterError for the first character not in `alphabet`.

    Pure function: no side effects, returns None for valid input.
    """
    for position, char in enumerate(digits):
        if char not in alphabet:
            raise InvalidCharacterError(char, position)
