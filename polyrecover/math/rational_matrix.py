"""
RationalMatrix - dense matrix of exact BigFraction values.

The matrix is stored as a list of rows, each row its own list of BigFraction
values. Row swaps exchange list positions, so rows are never shared between
two positions of the same matrix.
"""

from typing import List, Sequence, Union

import numpy as np

from .big_fraction import BigFraction


class RationalMatrix:
    """
    Dense rational matrix used as the augmented system [A | b] during
    Gauss-Jordan elimination.
    """

    def __init__(self, row_count: int, col_count: int):
        """
        Create a zero matrix.

        Args:
            row_count: Number of rows
            col_count: Number of columns
        """
        if row_count < 0:
            raise ValueError(f"negative row count: {row_count}")
        if col_count < 0:
            raise ValueError(f"negative column count: {col_count}")
        self._row_count = row_count
        self._column_count = col_count
        self._rows = [[BigFraction.ZERO] * col_count for _ in range(row_count)]

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Union[BigFraction, int]]]) -> 'RationalMatrix':
        """
        Create matrix from 2D row data.

        Args:
            data: Rows of BigFraction, Fraction or int values, all of equal length

        Returns:
            RationalMatrix holding copies of the rows
        """
        rows = len(data)
        cols = len(data[0]) if rows > 0 else 0
        matrix = cls(rows, cols)
        for row, values in enumerate(data):
            if len(values) != cols:
                raise ValueError(f"row {row} has {len(values)} columns, expected {cols}")
            matrix._rows[row] = [BigFraction.value_of(value) for value in values]
        return matrix

    def get_row_count(self) -> int:
        return self._row_count

    def get_column_count(self) -> int:
        return self._column_count

    def get_value_at(self, row: int, col: int) -> BigFraction:
        return self._rows[row][col]

    def set_value_at(self, row: int, col: int, value: BigFraction) -> None:
        self._rows[row][col] = BigFraction.value_of(value)

    def get_row(self, row: int) -> List[BigFraction]:
        """Get a copy of the specified row"""
        return list(self._rows[row])

    def get_column(self, col: int) -> List[BigFraction]:
        return [values[col] for values in self._rows]

    def swap_rows(self, row_a: int, row_b: int) -> None:
        """Swap two rows"""
        if row_a == row_b:
            return
        self._rows[row_a], self._rows[row_b] = self._rows[row_b], self._rows[row_a]

    def clone(self) -> 'RationalMatrix':
        """Create deep copy of this matrix"""
        return RationalMatrix.from_rows(self._rows) if self._row_count else RationalMatrix(0, self._column_count)

    def to_numpy(self) -> np.ndarray:
        """Convert to numpy array of dtype object holding fractions.Fraction values."""
        result = np.empty((self._row_count, self._column_count), dtype=object)
        for r, values in enumerate(self._rows):
            for c, value in enumerate(values):
                result[r, c] = value.to_fraction()
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._column_count == other._column_count and self._rows == other._rows

    __hash__ = None

    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", ", ")

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [ ", " ]\n", ", ")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str, row_postfix: str,
                          col_separator: str) -> str:
        result = [prefix]
        for values in self._rows:
            result.append(row_prefix)
            result.append(col_separator.join(str(value) for value in values))
            result.append(row_postfix)
        result.append(postfix)
        return ''.join(result)

    def __repr__(self) -> str:
        return f"RationalMatrix({self._row_count}x{self._column_count})"
