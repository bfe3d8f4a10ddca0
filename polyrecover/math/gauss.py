"""
Gauss-Jordan elimination over exact rational numbers.

GaussJordan reduces an augmented k x (k+1) system [A | b] to reduced row
echelon form in place and reads the solution off the last column. All
arithmetic is done with BigFraction, so the result is exact.
"""

import logging
from typing import List

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix
from ..errors import SingularMatrix

LOG = logging.getLogger(__name__)


class GaussJordan:
    """
    Exact Gauss-Jordan solver for square augmented systems.

    Pivot rows are chosen by the largest absolute numerator in the pivot
    column (see BigFraction.abs_numerator_greater). Denominators play no part
    in the choice.
    """

    _rational_instance = None

    @classmethod
    def get_rational_instance(cls) -> 'GaussJordan':
        """Get singleton instance for exact rational operations"""
        if cls._rational_instance is None:
            cls._rational_instance = cls()
        return cls._rational_instance

    def solve(self, matrix: RationalMatrix, k: int) -> List[BigFraction]:
        """
        Solve the augmented system in place.

        Args:
            matrix: k x (k+1) augmented matrix, modified in-place
            k: Number of unknowns

        Returns:
            The k solution values, row r holding the unknown of row r

        Raises:
            SingularMatrix: If a pivot column has no non-zero candidate
        """
        if matrix.get_row_count() != k or matrix.get_column_count() != k + 1:
            raise ValueError(f"Expected a {k}x{k + 1} augmented matrix, got "
                             f"{matrix.get_row_count()}x{matrix.get_column_count()}")

        for col in range(k):
            pivot_row = self._find_pivot_row(matrix, col, k)
            if pivot_row != col:
                LOG.debug(f"Column {col}: swapping rows {col} and {pivot_row}")
                matrix.swap_rows(pivot_row, col)

            pivot_value = matrix.get_value_at(col, col)
            if pivot_value.is_zero():
                raise SingularMatrix(col)
            LOG.debug(f"Column {col}: pivot {pivot_value}")

            self._normalize_row(matrix, col, pivot_value, k)
            self._eliminate_column(matrix, col, k)

        LOG.info(f"Solved {k}x{k + 1} system.")
        return [matrix.get_value_at(row, k) for row in range(k)]

    def _find_pivot_row(self, matrix: RationalMatrix, col: int, k: int) -> int:
        """Row in col..k-1 with the largest |numerator| in column col, first one on ties."""
        pivot_row = col
        for row in range(col + 1, k):
            if matrix.get_value_at(row, col).abs_numerator_greater(matrix.get_value_at(pivot_row, col)):
                pivot_row = row
        return pivot_row

    def _normalize_row(self, matrix: RationalMatrix, row: int, pivot_value: BigFraction, k: int) -> None:
        """Divide columns row..k of the pivot row by the pivot value (makes the pivot 1)."""
        for col in range(row, k + 1):
            matrix.set_value_at(row, col, matrix.get_value_at(row, col).divide(pivot_value))

    def _eliminate_column(self, matrix: RationalMatrix, pivot_row: int, k: int) -> None:
        """
        Zero column pivot_row in every other row, above and below the pivot.

        Columns left of pivot_row are already zero in the pivot row and are skipped.
        """
        for row in range(k):
            if row == pivot_row:
                continue
            factor = matrix.get_value_at(row, pivot_row)
            for col in range(pivot_row, k + 1):
                current_val = matrix.get_value_at(row, col)
                pivot_val = matrix.get_value_at(pivot_row, col)
                matrix.set_value_at(row, col, current_val.subtract(pivot_val.multiply(factor)))
