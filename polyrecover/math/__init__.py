"""
Mathematical infrastructure for polynomial recovery:
- Exact rational arithmetic with BigFraction
- Dense rational matrices
- Gauss-Jordan elimination, plus sympy and FLINT cross-check backends

All operations maintain exact precision using rational arithmetic.
"""

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix
from .gauss import GaussJordan
from .backends import FLINT_AVAILABLE, solve_sympy, solve_flint

__all__ = [
    'BigFraction',
    'RationalMatrix',
    'GaussJordan',
    'FLINT_AVAILABLE',
    'solve_sympy',
    'solve_flint',
]
