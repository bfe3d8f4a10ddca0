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
"""Recovery of polynomial coefficients from a record of numeral-encoded points

A record has the form

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        ...
    }

The first k labelled points are decoded, placed at the abscissas 1..k and
the coefficients of the unique polynomial of degree k-1 through them are
computed exactly. "n" is informational; labels beyond k are never read.
"""

import json
import logging
import os
from collections.abc import Mapping
from typing import List, Sequence, Tuple

from .errors import MalformedInput, VerificationError
from .linear_system import Point, build_system
from .math import BigFraction, GaussJordan, solve_flint, solve_sympy
from .names import *
from .numeral import parse_numeral

LOG = logging.getLogger(__name__)

_SOLVERS = {
    GAUSS: lambda matrix, k: GaussJordan.get_rational_instance().solve(matrix, k),
    SYMPY: solve_sympy,
    FLINT: solve_flint,
}


def load_record(source):
    """Return a record given as dict, or load it from a JSON file

    Args:
        source (dict or str or os.PathLike):
            The record itself or the path to a JSON file containing it.

    Returns:
        (dict):
        The record.
    """
    if isinstance(source, Mapping):
        return source
    if isinstance(source, (str, os.PathLike)):
        with open(source, 'r', encoding='utf-8') as fs:
            try:
                return json.load(fs)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise MalformedInput(f"Record file {source} is not valid UTF-8 JSON: {e}") from e
    raise MalformedInput(f"Cannot read a record from {type(source).__name__}.")


def _read_k(keys) -> int:
    if K not in keys:
        raise MalformedInput(f"Record is missing '{KEYS}.{K}'.")
    k = keys[K]
    if isinstance(k, str) and k.strip().isdecimal():
        k = int(k)
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise MalformedInput(f"'{KEYS}.{K}' must be a positive integer, got {k!r}.")
    return k


def points_from_record(record) -> Tuple[List[Point], int]:
    """Decode the first k points of a record

    Args:
        record (dict):
            Input record with a 'keys' entry and labelled points '1'..'k'.

    Returns:
        (tuple of list of Point and int):
        The points with x = 1..k and their decoded y-values, and k.

    Raises:
        MalformedInput: if 'keys', 'keys.k' or any base/value of the first k points is absent
        InvalidDigit: if a value is not a numeral of its base
    """
    if not isinstance(record, Mapping):
        raise MalformedInput(f"Record must be a mapping, got {type(record).__name__}.")
    keys = record.get(KEYS)
    if not isinstance(keys, Mapping):
        raise MalformedInput(f"Record is missing '{KEYS}'.")
    k = _read_k(keys)
    if N in keys:
        LOG.debug(f"Record declares {keys[N]} points, using the first {k}.")

    points = []
    for i in range(1, k + 1):
        label = str(i)
        entry = record.get(label, record.get(i))
        if not isinstance(entry, Mapping):
            raise MalformedInput(f"Record is missing point '{label}'.")
        for field in (BASE, VALUE):
            if field not in entry:
                raise MalformedInput(f"Point '{label}' is missing '{field}'.")
        value = entry[VALUE]
        if not isinstance(value, str):
            raise MalformedInput(f"Value of point '{label}' must be a string, got {type(value).__name__}.")
        points.append(Point(i, parse_numeral(value, entry[BASE])))
    return points, k


def evaluate_polynomial(coefficients: Sequence[BigFraction], x) -> BigFraction:
    """Evaluate the polynomial with coefficients from x^(k-1) down to x^0 at x, exactly."""
    x = BigFraction.value_of(x)
    result = BigFraction.ZERO
    for coeff in coefficients:
        result = result * x + coeff
    return result


def verify_coefficients(coefficients: Sequence[BigFraction], points: Sequence[Point]) -> bool:
    """Check that the polynomial reproduces the y-value of each of the first k points

    The i-th point (1-based) is evaluated at abscissa i.
    """
    k = len(coefficients)
    if len(points) < k:
        return False
    return all(evaluate_polynomial(coefficients, i) == points[i - 1].y for i in range(1, k + 1))


def solve_record(record, **kwargs) -> List[BigFraction]:
    """Compute the exact coefficients of the polynomial through the points of a record

    Example:
        coeffs = solve_record({'keys': {'n': 2, 'k': 2},
                               '1': {'base': '10', 'value': '1'},
                               '2': {'base': '10', 'value': '3'}})
        # [BigFraction(2, 1), BigFraction(-1, 1)], i.e. y = 2x - 1

    Args:
        record (dict or str):
            The record, or the path to a JSON file containing it.

        backend (optional (str)): (Default: 'gauss')
            The solver: 'gauss' (exact Gauss-Jordan elimination), 'sympy' or 'flint'.

        verify (optional (bool)): (Default: False)
            Evaluate the result at all abscissas and compare with the input y-values.

    Returns:
        (list of BigFraction):
        The k coefficients, from x^(k-1) down to the constant term.
    """
    allowed_keys = {BACKEND, VERIFY}
    if not set(kwargs).issubset(allowed_keys):
        raise ValueError(f"Unknown options: {', '.join(sorted(set(kwargs) - allowed_keys))}")
    backend = kwargs.get(BACKEND, GAUSS)
    if backend not in _SOLVERS:
        raise ValueError(f"Unknown backend '{backend}'. Choose from {', '.join(BACKENDS)}.")

    record = load_record(record)
    points, k = points_from_record(record)
    LOG.info(f"Recovering polynomial of degree {k - 1} using {backend}.")
    matrix = build_system(points, k)
    coefficients = _SOLVERS[backend](matrix, k)

    if kwargs.get(VERIFY, False):
        if not verify_coefficients(coefficients, points):
            raise VerificationError("Recovered coefficients do not reproduce the input points.")
        LOG.info("  Coefficients reproduce all input points.")
    return coefficients


def format_coefficients(coefficients: Sequence[BigFraction]) -> str:
    """Render coefficients as "num" or "num/den", joined by ", " """
    return COEFF_SEPARATOR.join(str(c) for c in coefficients)


def recover_polynomial(record, **kwargs) -> str:
    """Solve a record and return the formatted coefficient line (see solve_record)"""
    return format_coefficients(solve_record(record, **kwargs))
