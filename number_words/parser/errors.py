# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Decoding errors.

There is exactly one way a decode can fail: the input contains a character
that no token uses. An input that is made of known characters but has no
valid partition is not an error; parsers return an empty list for it.
"""


class DecodeError(Exception):
    """Base for all decoding errors."""


class InvalidCharacterError(DecodeError):
    """
    The input holds a character outside the table's alphabet.

    ``char`` is the first such character in left-to-right order and
    ``position`` is its index in the input.
    """

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid character {char!r} at position {position}")
        self.char = char
        self.position = position
