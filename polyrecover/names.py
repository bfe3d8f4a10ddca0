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
"""Static strings used in the polyrecover package

    Input record

        KEYS = 'keys'

        K = 'k'

        N = 'n' # declared number of points, informational only

        BASE = 'base'

        VALUE = 'value'

    Numerals

        MIN_BASE = 2

        MAX_BASE = 36

    Solving options

        BACKEND = 'backend'

        VERIFY = 'verify'

        GAUSS = 'gauss'

        SYMPY = 'sympy'

        FLINT = 'flint'
"""

# Input record
KEYS = 'keys'
K = 'k'
N = 'n'
BASE = 'base'
VALUE = 'value'

# Numerals
MIN_BASE = 2
MAX_BASE = 36
DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'

# Solving options
BACKEND = 'backend'
VERIFY = 'verify'
GAUSS = 'gauss'
SYMPY = 'sympy'
FLINT = 'flint'
BACKENDS = (GAUSS, SYMPY, FLINT)

# Output
COEFF_SEPARATOR = ', '
