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
"""Exceptions raised while recovering a polynomial

All errors are fatal for the current solve. They derive from the builtin
exception types that describe them best, so callers may also catch
ValueError or ArithmeticError.
"""


class PolyRecoverError(Exception):
    """Base class of all polyrecover errors"""


class MalformedInput(PolyRecoverError, ValueError):
    """A required field of the input record is missing or unusable"""


class InvalidBase(MalformedInput):
    """A declared radix lies outside [2, 36]"""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Base must be an integer in [2, 36], got {base!r}.")


class InvalidDigit(PolyRecoverError, ValueError):
    """A numeral character is not a digit of the declared base"""

    def __init__(self, digits, base, position=None):
        self.digits = digits
        self.base = base
        self.position = position
        if position is None:
            msg = f"Empty numeral for base {base}."
        else:
            msg = f"Invalid digit {digits[position]!r} at position {position} of {digits!r} for base {base}."
        super().__init__(msg)


class DivisionByZero(PolyRecoverError, ZeroDivisionError):
    """Zero denominator on construction or zero divisor in a division"""


class SingularMatrix(PolyRecoverError, ArithmeticError):
    """The points do not determine a unique polynomial of degree k-1"""

    def __init__(self, column, msg=None):
        self.column = column
        if msg is None:
            msg = f"Matrix is singular (no non-zero pivot in column {column})."
        super().__init__(msg)


class VerificationError(PolyRecoverError, ArithmeticError):
    """Recovered coefficients do not reproduce the input points"""
