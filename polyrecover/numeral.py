#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Conversion of numerals in bases 2 to 36 into Python integers"""

from .errors import InvalidBase, InvalidDigit
from .names import DIGITS, MAX_BASE, MIN_BASE

_DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}
_DIGIT_VALUES.update({c.upper(): i for i, c in enumerate(DIGITS) if c.isalpha()})


def check_base(base) -> int:
    """Validate a radix and return it as int

    Accepts an int or a decimal string such as "16".

    Raises:
        InvalidBase: if the base is not an integer in [2, 36]
    """
    if isinstance(base, str):
        if not base.strip().isdecimal():
            raise InvalidBase(base)
        value = int(base)
    elif isinstance(base, int) and not isinstance(base, bool):
        value = base
    else:
        raise InvalidBase(base)
    if not MIN_BASE <= value <= MAX_BASE:
        raise InvalidBase(base)
    return value


def digit_value(char: str) -> int:
    """Value of a single digit symbol (0-9, a-z, A-Z), -1 if it is none."""
    return _DIGIT_VALUES.get(char, -1)


def parse_numeral(digits: str, base) -> int:
    """Parse a numeral in the given base into an arbitrary-precision int

    Digits are evaluated left to right (Horner scheme). Letters above 9 are
    case-insensitive.

    Example:
        parse_numeral("ff", 16) == 255

    Args:
        digits (str):
            The numeral, most significant digit first.

        base (int or str):
            Radix in [2, 36], given as int or decimal string.

    Returns:
        (int):
        The value of the numeral.

    Raises:
        InvalidBase: if the base is out of range
        InvalidDigit: if a character is not a digit smaller than the base, or the numeral is empty
    """
    base = check_base(base)
    if not digits:
        raise InvalidDigit(digits, base)
    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value < 0 or value >= base:
            raise InvalidDigit(digits, base, position)
        result = result * base + value
    return result


def format_numeral(value: int, base) -> str:
    """Render a non-negative int in the given base with lowercase digits"""
    base = check_base(base)
    if value < 0:
        raise ValueError(f"Cannot render negative value {value}.")
    if value == 0:
        return DIGITS[0]
    chars = []
    while value:
        value, rem = divmod(value, base)
        chars.append(DIGITS[rem])
    return ''.join(reversed(chars))
