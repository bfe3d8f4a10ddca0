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
"""polyrecover: exact recovery of polynomial coefficients from numeral-encoded points"""

import logging

from .names import *


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import *
from .math import BigFraction, RationalMatrix, GaussJordan, FLINT_AVAILABLE
from .numeral import check_base, digit_value, parse_numeral, format_numeral
from .linear_system import Point, build_system
from .interpolation import (
    load_record,
    points_from_record,
    solve_record,
    format_coefficients,
    recover_polynomial,
    evaluate_polynomial,
    verify_coefficients,
)
