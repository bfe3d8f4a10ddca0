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
"""Command line interface: print the coefficients recovered from a JSON record"""

import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from .errors import PolyRecoverError
from .interpolation import recover_polynomial
from .names import BACKEND, BACKENDS, GAUSS, VERIFY

LOG = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Entry point of the polyrecover command. Returns the process exit status."""
    parser = ArgumentParser(description="Recover the exact coefficients of the polynomial of degree k-1 "
                            "through the first k points of a JSON record.",
                            formatter_class=RawDescriptionHelpFormatter,
                            epilog="Coefficients are printed from x^(k-1) down to x^0, e.g. '1/2, 1/2'.")
    parser.add_argument('record', help="path to the JSON record")
    parser.add_argument('-b', '--backend', choices=BACKENDS, default=GAUSS, help="exact solver to use (default: gauss)")
    parser.add_argument('--verify', action='store_true', help="check that the coefficients reproduce the input points")
    parser.add_argument('-v', '--verbose', action='store_true', help="print debug messages")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s",
                        stream=sys.stderr)
    try:
        line = recover_polynomial(args.record, **{BACKEND: args.backend, VERIFY: args.verify})
    except (PolyRecoverError, OSError) as e:
        LOG.error(str(e))
        return 1
    print(line)
    return 0
