"""
Arbitrary-precision decimal helpers.

  • PrecisionContext(digits)  — requested significant digits; 0 means unlimited
  • fraction_to_decimal(q, c) — exact when the expansion terminates, else rounded
  • to_decimal(v, c)          — coerce float / int / Fraction / RationalNumber / Decimal
  • pi_digits(n)              — π to n significant digits (SymPy evalf)

With an unlimited context every result must be exact. A value whose decimal
expansion never terminates (1/3, π, e) raises UnlimitedPrecisionRequested.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_EVEN
from fractions import Fraction
from functools import lru_cache
from typing import Tuple

import sympy as sp

from unitcore.errors import UnlimitedPrecisionRequested
from unitcore.numbers.rational import RationalNumber


_GUARD_DIGITS = 5


@dataclass(frozen=True)
class PrecisionContext:
	"""Requested number of significant decimal digits (0 = unlimited)."""
	digits: int = 0

	def __post_init__(self) -> None:
		if isinstance(self.digits, bool) or not isinstance(self.digits, int):
			raise TypeError("digits must be an int")
		if self.digits < 0:
			raise ValueError("digits must be >= 0")

	def is_unlimited(self) -> bool:
		return self.digits == 0

	def decimal_context(self, guard: int = 0) -> Context:
		"""Return a decimal.Context rounding to digits + guard; unlimited has none."""
		if self.is_unlimited():
			raise UnlimitedPrecisionRequested("No decimal context exists for unlimited precision.")
		return Context(prec=self.digits + guard, rounding=ROUND_HALF_EVEN)

	def round(self, value: Decimal) -> Decimal:
		"""Round `value` to this context; unlimited leaves it untouched."""
		if self.is_unlimited():
			return value
		return self.decimal_context().plus(value)

	def widest(self, other: "PrecisionContext") -> "PrecisionContext":
		"""The wider of two contexts; unlimited wins over any finite digit count."""
		if self.is_unlimited() or other.is_unlimited():
			return UNLIMITED
		if other.digits > self.digits:
			return other
		return self


UNLIMITED = PrecisionContext(0)
DECIMAL32 = PrecisionContext(7)
DECIMAL64 = PrecisionContext(16)
DECIMAL128 = PrecisionContext(34)


def _split_two_five(n: int) -> Tuple[int, int, int]:
	"""Return (a, b, rest) with n == 2**a * 5**b * rest."""
	a = 0
	while n % 2 == 0:
		n //= 2
		a += 1
	b = 0
	while n % 5 == 0:
		n //= 5
		b += 1
	return a, b, n


def fraction_to_decimal(value: Fraction, ctx: PrecisionContext) -> Decimal:
	"""
	Convert an exact fraction to Decimal. Finite contexts round once; the
	unlimited context requires a terminating expansion.
	"""
	num = value.numerator
	den = value.denominator
	if not ctx.is_unlimited():
		return ctx.decimal_context().divide(Decimal(num), Decimal(den))
	a, b, rest = _split_two_five(den)
	if rest != 1:
		raise UnlimitedPrecisionRequested(
			f"{num}/{den} has no terminating decimal expansion; give a finite digit count."
		)
	k = max(a, b)
	scaled = num * (2 ** (k - a)) * (5 ** (k - b))
	return Decimal(f"{scaled}E-{k}")


def to_decimal(value, ctx: PrecisionContext) -> Decimal:
	"""Coerce a numeric value to Decimal (floats go through their shortest repr)."""
	if isinstance(value, Decimal):
		return value
	if isinstance(value, RationalNumber):
		return fraction_to_decimal(value.as_fraction(), ctx)
	if isinstance(value, Fraction):
		return fraction_to_decimal(value, ctx)
	if isinstance(value, bool):
		raise TypeError("bool is not a numeric value")
	if isinstance(value, int):
		return Decimal(value)
	if isinstance(value, float):
		return Decimal(repr(float(value)))
	raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


def decimal_to_fraction(value: Decimal) -> Fraction:
	"""Exact Fraction of a finite Decimal."""
	if not value.is_finite():
		raise ValueError(f"Non-finite decimal {value} has no exact fraction.")
	return Fraction(value)


@lru_cache(maxsize=64)
def pi_digits(digits: int) -> Decimal:
	"""π rounded to `digits` significant digits."""
	if digits <= 0:
		raise UnlimitedPrecisionRequested("π has no finite decimal expansion.")
	text = str(sp.pi.evalf(digits + _GUARD_DIGITS))
	return Context(prec=digits, rounding=ROUND_HALF_EVEN).plus(Decimal(text))


def guarded(ctx: PrecisionContext) -> Context:
	"""Working context with guard digits for transcendental intermediate steps."""
	return ctx.decimal_context(_GUARD_DIGITS)
