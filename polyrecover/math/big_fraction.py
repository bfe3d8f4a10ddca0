"""
Exact rational numbers for polynomial recovery.

BigFraction wraps Python's fractions.Fraction, which keeps every value in
canonical form: the gcd of numerator and denominator is divided out and the
sign is carried by the numerator. Python's int has arbitrary precision, so
numerators and denominators never overflow during elimination.

Division failures raise DivisionByZero instead of the builtin error so that
callers can tell them apart from other arithmetic problems.
"""

from fractions import Fraction
from numbers import Integral
from operator import index
from typing import Union

from ..errors import DivisionByZero


class BigFraction:
    """
    Immutable exact rational number.

    Every instance is reduced, has a positive denominator and is never
    modified after construction. All arithmetic returns new instances.
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction] = 0, denominator: int = None):
        """
        Args:
            numerator: Integer numerator, or a BigFraction/Fraction to copy
            denominator: Integer denominator (default 1)

        Raises:
            DivisionByZero: If denominator is 0
        """
        if denominator is None:
            if isinstance(numerator, BigFraction):
                self._fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                self._fraction = numerator
            else:
                self._fraction = Fraction(index(numerator))
        else:
            if denominator == 0:
                raise DivisionByZero(f"Denominator cannot be zero ({numerator}/0).")
            self._fraction = Fraction(index(numerator), index(denominator))

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def add(self, other: 'BigFraction') -> 'BigFraction':
        """Add two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction + other._fraction)

    def subtract(self, other: 'BigFraction') -> 'BigFraction':
        """Subtract two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction - other._fraction)

    def multiply(self, other: 'BigFraction') -> 'BigFraction':
        """Multiply two BigFractions"""
        other = BigFraction.value_of(other)
        return BigFraction(self._fraction * other._fraction)

    def divide(self, other: 'BigFraction') -> 'BigFraction':
        """
        Divide by another BigFraction.

        Raises:
            DivisionByZero: If other is zero
        """
        other = BigFraction.value_of(other)
        if other.is_zero():
            raise DivisionByZero(f"Cannot divide {self} by zero fraction.")
        return BigFraction(self._fraction / other._fraction)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._fraction)

    def abs_numerator_greater(self, other: 'BigFraction') -> bool:
        """
        True if |numerator| of self exceeds |numerator| of other.

        Only the numerators are compared, denominators are ignored. This is
        the ordering used for pivot selection and is not the ordering of the
        values themselves when denominators differ.
        """
        return abs(self.numerator) > abs(other.numerator)

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._fraction < 0:
            return -1
        elif self._fraction > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._fraction.numerator == 0

    def is_one(self) -> bool:
        return self._fraction == 1

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    def to_fraction(self) -> Fraction:
        """Return the value as a fractions.Fraction"""
        return self._fraction

    @staticmethod
    def value_of(value: Union[int, Fraction, 'BigFraction']) -> 'BigFraction':
        """
        Factory accepting BigFraction, Fraction, int or a "num/den" string.
        """
        if isinstance(value, BigFraction):
            return value
        if isinstance(value, str):
            if '/' in value:
                parts = value.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid fraction format: {value}")
                return BigFraction(int(parts[0]), int(parts[1]))
            return BigFraction(int(value))
        if isinstance(value, (Integral, Fraction)):
            return BigFraction(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to BigFraction")

    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction == other._fraction
        if isinstance(other, (Integral, Fraction)):
            return self._fraction == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._fraction.numerator}, {self._fraction.denominator})"

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return BigFraction.value_of(other).add(self)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return BigFraction.value_of(other).subtract(self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return BigFraction.value_of(other).multiply(self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return BigFraction.value_of(other).divide(self)

    def __neg__(self):
        return self.negate()

    def __bool__(self) -> bool:
        return not self.is_zero()


BigFraction.ZERO = BigFraction(0)
BigFraction.ONE = BigFraction(1)
