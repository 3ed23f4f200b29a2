"""
Physical dimensions as integer exponent vectors over the seven SI bases
(mass, length, time, current, temperature, amount, luminous intensity).

  • d1 * d2   → exponent-wise sum
  • d1 / d2   → exponent-wise difference
  • d ** n    → exponents scaled by an int n
  • d.inverse(), d.is_dimensionless(), str(d)

Two units are commensurable exactly when their dimensions are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


_SYMBOLS = ("[M]", "[L]", "[T]", "[I]", "[Θ]", "[N]", "[J]")


@dataclass(frozen=True)
class Dimension:
	"""Immutable Z^7 exponent vector; order follows _SYMBOLS."""
	exponents: Tuple[int, int, int, int, int, int, int] = (0, 0, 0, 0, 0, 0, 0)

	def __post_init__(self) -> None:
		if len(self.exponents) != 7:
			raise ValueError("A dimension has exactly seven base exponents.")
		object.__setattr__(self, "exponents", tuple(int(e) for e in self.exponents))

	@classmethod
	def base(cls, index: int) -> "Dimension":
		exps = [0] * 7
		exps[index] = 1
		return cls(tuple(exps))

	def __mul__(self, other: "Dimension") -> "Dimension":
		return Dimension(tuple(a + b for a, b in zip(self.exponents, other.exponents)))

	def __truediv__(self, other: "Dimension") -> "Dimension":
		return Dimension(tuple(a - b for a, b in zip(self.exponents, other.exponents)))

	def __pow__(self, n: int) -> "Dimension":
		if isinstance(n, bool) or not isinstance(n, int):
			raise TypeError("Dimension powers must be ints")
		return Dimension(tuple(a * n for a in self.exponents))

	def inverse(self) -> "Dimension":
		return self ** -1

	def is_dimensionless(self) -> bool:
		return not any(self.exponents)

	def __str__(self) -> str:
		parts = []
		for sym, e in zip(_SYMBOLS, self.exponents):
			if e == 0:
				continue
			if e == 1:
				parts.append(sym)
			else:
				parts.append(f"{sym}^{e}")
		if not parts:
			return "1"
		return "·".join(parts)


NONE = Dimension()
MASS = Dimension.base(0)
LENGTH = Dimension.base(1)
TIME = Dimension.base(2)
ELECTRIC_CURRENT = Dimension.base(3)
TEMPERATURE = Dimension.base(4)
AMOUNT_OF_SUBSTANCE = Dimension.base(5)
LUMINOUS_INTENSITY = Dimension.base(6)
