"""
Exact rational numbers.

Class RationalNumber is an immutable numerator/denominator pair over Python's
arbitrary-precision integers, always held in lowest terms with a positive
denominator. Arithmetic never rounds:

  • a.add(b), a.subtract(b), a.multiply(b), a.divide(b)
  • a.reciprocal(), a.negate()
  • the usual operator forms (+, -, *, /, unary -) for RationalNumber and int

Equality, ordering and hashing are defined on the reduced form; a rational with
denominator 1 compares and hashes equal to the matching int.
"""

from __future__ import annotations
from decimal import Decimal
from fractions import Fraction
from functools import total_ordering
from typing import Union

from unitcore.errors import DivideByZero


RationalLike = Union["RationalNumber", int, Fraction]


@total_ordering
class RationalNumber:
	"""Immutable exact fraction in canonical lowest-terms form."""

	__slots__ = ("_value",)

	def __init__(self, numerator: int, denominator: int = 1) -> None:
		if isinstance(numerator, bool) or not isinstance(numerator, int):
			raise TypeError("numerator must be an int")
		if isinstance(denominator, bool) or not isinstance(denominator, int):
			raise TypeError("denominator must be an int")
		if denominator == 0:
			raise DivideByZero(f"RationalNumber({numerator}, 0) has a zero denominator.")
		object.__setattr__(self, "_value", Fraction(numerator, denominator))

	def __setattr__(self, name, value):
		raise AttributeError("RationalNumber is immutable")

	@classmethod
	def of(cls, value: RationalLike) -> "RationalNumber":
		"""Coerce an int, Fraction or RationalNumber into a RationalNumber."""
		if isinstance(value, RationalNumber):
			return value
		if isinstance(value, Fraction):
			return cls(value.numerator, value.denominator)
		if isinstance(value, int) and not isinstance(value, bool):
			return cls(value, 1)
		raise TypeError(f"Cannot build a RationalNumber from {type(value).__name__}")

	@property
	def numerator(self) -> int:
		return self._value.numerator

	@property
	def denominator(self) -> int:
		return self._value.denominator

	def as_fraction(self) -> Fraction:
		return self._value

	def is_zero(self) -> bool:
		return self._value.numerator == 0

	def is_integer(self) -> bool:
		return self._value.denominator == 1

	def signum(self) -> int:
		if self._value > 0:
			return 1
		if self._value < 0:
			return -1
		return 0

	def add(self, other: RationalLike) -> "RationalNumber":
		return RationalNumber.of(self._value + RationalNumber.of(other)._value)

	def subtract(self, other: RationalLike) -> "RationalNumber":
		return RationalNumber.of(self._value - RationalNumber.of(other)._value)

	def multiply(self, other: RationalLike) -> "RationalNumber":
		return RationalNumber.of(self._value * RationalNumber.of(other)._value)

	def divide(self, other: RationalLike) -> "RationalNumber":
		o = RationalNumber.of(other)
		if o.is_zero():
			raise DivideByZero(f"Division of {self} by zero.")
		return RationalNumber.of(self._value / o._value)

	def reciprocal(self) -> "RationalNumber":
		if self.is_zero():
			raise DivideByZero("Reciprocal of zero.")
		return RationalNumber(self._value.denominator, self._value.numerator)

	def negate(self) -> "RationalNumber":
		return RationalNumber(-self._value.numerator, self._value.denominator)

	def pow(self, exponent: int) -> "RationalNumber":
		"""Integer power; a negative exponent of zero raises DivideByZero."""
		if not isinstance(exponent, int):
			raise TypeError("pow expects an int exponent")
		if exponent < 0:
			return self.reciprocal().pow(-exponent)
		return RationalNumber.of(self._value ** exponent)

	def to_decimal(self, digits: int = 0) -> Decimal:
		"""
		Decimal value rounded to `digits` significant digits; 0 requests the exact
		expansion and raises UnlimitedPrecisionRequested when it does not terminate.
		"""
		from unitcore.numbers.decimals import PrecisionContext, fraction_to_decimal
		return fraction_to_decimal(self._value, PrecisionContext(digits))

	def to_float(self) -> float:
		return float(self._value)

	def __float__(self) -> float:
		return self.to_float()

	def __add__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return self.add(other)

	def __radd__(self, other):
		return self.__add__(other)

	def __sub__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return self.subtract(other)

	def __rsub__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return RationalNumber.of(other).subtract(self)

	def __mul__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return self.multiply(other)

	def __rmul__(self, other):
		return self.__mul__(other)

	def __truediv__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return self.divide(other)

	def __rtruediv__(self, other):
		if not _is_exact(other):
			return NotImplemented
		return RationalNumber.of(other).divide(self)

	def __neg__(self) -> "RationalNumber":
		return self.negate()

	def __abs__(self) -> "RationalNumber":
		if self.signum() < 0:
			return self.negate()
		return self

	def __eq__(self, other) -> bool:
		if isinstance(other, RationalNumber):
			return self._value == other._value
		if _is_exact(other):
			return self._value == other
		return NotImplemented

	def __lt__(self, other) -> bool:
		if isinstance(other, RationalNumber):
			return self._value < other._value
		if _is_exact(other):
			return self._value < other
		return NotImplemented

	def __hash__(self) -> int:
		return hash(self._value)

	def __repr__(self) -> str:
		return f"RationalNumber({self._value.numerator}, {self._value.denominator})"

	def __str__(self) -> str:
		if self._value.denominator == 1:
			return str(self._value.numerator)
		return f"{self._value.numerator}/{self._value.denominator}"


def _is_exact(value) -> bool:
	if isinstance(value, bool):
		return False
	return isinstance(value, (RationalNumber, int, Fraction))


ZERO = RationalNumber(0)
ONE = RationalNumber(1)
