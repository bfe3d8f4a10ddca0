"""
Alternative exact backends for solving the augmented system.

Backend: sympy (always installed) or FLINT (optional, python-flint).
Both compute the reduced row echelon form of [A | b] with their own exact
rational types and return the solution as BigFraction values, so results
can be compared with the native GaussJordan solver.
"""

from importlib.util import find_spec as module_exists
from typing import List

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix
from ..errors import SingularMatrix

FLINT_AVAILABLE = module_exists("flint") is not None

# sympy is only imported when the sympy backend is used
_sympy_loaded = False
Rational = None
SympyMatrix = None


def _load_sympy():
    """Lazy load sympy only when needed."""
    global _sympy_loaded, Rational, SympyMatrix
    if not _sympy_loaded:
        from sympy import Rational as _Rational, Matrix as _Matrix
        Rational = _Rational
        SympyMatrix = _Matrix
        _sympy_loaded = True


def _check_shape(matrix: RationalMatrix, k: int) -> None:
    if matrix.get_row_count() != k or matrix.get_column_count() != k + 1:
        raise ValueError(f"Expected a {k}x{k + 1} augmented matrix, got "
                         f"{matrix.get_row_count()}x{matrix.get_column_count()}")


def _first_missing_pivot(pivot_cols, k: int) -> int:
    pivot_set = set(pivot_cols)
    return next(col for col in range(k) if col not in pivot_set)


def solve_sympy(matrix: RationalMatrix, k: int) -> List[BigFraction]:
    """
    Solve the augmented system with sympy's exact rref.

    The input matrix is not modified.

    Raises:
        SingularMatrix: If the coefficient block has rank < k
    """
    _check_shape(matrix, k)
    _load_sympy()
    sympy_data = [[Rational(v.numerator, v.denominator) for v in matrix.get_row(r)] for r in range(k)]
    rref, pivot_cols = SympyMatrix(sympy_data).rref()
    if list(pivot_cols) != list(range(k)):
        raise SingularMatrix(_first_missing_pivot(pivot_cols, k))
    return [BigFraction(int(rref[r, k].p), int(rref[r, k].q)) for r in range(k)]


def solve_flint(matrix: RationalMatrix, k: int) -> List[BigFraction]:
    """
    Solve the augmented system with FLINT's fmpq_mat.rref().

    Requires python-flint. The input matrix is not modified.

    Raises:
        SingularMatrix: If the coefficient block has rank < k
    """
    _check_shape(matrix, k)
    from flint import fmpq, fmpq_mat

    mat = fmpq_mat(k, k + 1)
    for r in range(k):
        for c, value in enumerate(matrix.get_row(r)):
            if not value.is_zero():
                mat[r, c] = fmpq(value.numerator, value.denominator)

    rref, rank = mat.rref()

    # first non-zero column of each non-zero row
    pivot_cols = []
    for r in range(rank):
        for c in range(k + 1):
            if rref[r, c] != 0:
                pivot_cols.append(c)
                break
    if pivot_cols != list(range(k)):
        raise SingularMatrix(_first_missing_pivot(pivot_cols, k))
    return [BigFraction(int(rref[r, k].p), int(rref[r, k].q)) for r in range(k)]
