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
"""Construction of the Vandermonde-like system for polynomial recovery"""

import logging
from typing import NamedTuple, Sequence

from .errors import MalformedInput
from .math import BigFraction, RationalMatrix

LOG = logging.getLogger(__name__)


class Point(NamedTuple):
    """A point of the polynomial

    x is the 1-based ordinal position of the point among the points used,
    y the exact integer decoded from its numeral.
    """
    x: int
    y: int


def build_system(points: Sequence[Point], k: int) -> RationalMatrix:
    """Build the augmented k x (k+1) system whose solution are the polynomial coefficients

    Row i-1 holds the powers i^(k-1), ..., i^1, i^0 of the abscissa i = 1..k,
    followed by the y-value of the i-th point. The abscissas are always
    1..k in the order the points are given; the x stored in a Point is not read.
    Points beyond the k-th are ignored.

    Example:
        build_system([Point(1, 1), Point(2, 3)], 2)  ->  {[1, 1, 1], [2, 1, 3]}

    Args:
        points (list of Point):
            At least k points, in ordinal order.

        k (int):
            Number of points used, i.e. the number of coefficients.

    Returns:
        (RationalMatrix):
        The augmented matrix [A | y].
    """
    if k < 1:
        raise MalformedInput(f"k must be at least 1, got {k}.")
    if len(points) < k:
        raise MalformedInput(f"{k} points required, only {len(points)} given.")
    matrix = RationalMatrix(k, k + 1)
    for i in range(1, k + 1):
        for j in range(k):
            matrix.set_value_at(i - 1, j, BigFraction(i**(k - 1 - j)))
        matrix.set_value_at(i - 1, k, BigFraction(points[i - 1].y))
    LOG.debug(f"Built {k}x{k + 1} system for abscissas 1..{k}.")
    return matrix
