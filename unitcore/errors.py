"""
Error taxonomy for converter algebra and quantity arithmetic.

  • DivideByZero                — division or reciprocal with a zero operand
  • UnlimitedPrecisionRequested — unlimited digits asked of an irrational result
  • IncommensurableUnits        — no converter exists between two units

Each kind also derives from the matching builtin so callers that catch
ZeroDivisionError / ArithmeticError / ValueError keep working.
"""

from __future__ import annotations


class UnitCoreError(Exception):
	"""Base class for every error raised by unitcore."""


class DivideByZero(UnitCoreError, ZeroDivisionError):
	"""Division or reciprocal with a zero divisor, in any numeric mode."""


class UnlimitedPrecisionRequested(UnitCoreError, ArithmeticError):
	"""Unlimited-digit evaluation of a value that has no finite decimal expansion."""


class IncommensurableUnits(UnitCoreError, ValueError):
	"""Two units have different dimensions, so no converter links them."""

	def __init__(self, source: object, target: object) -> None:
		super().__init__(f"Cannot convert from '{source}' to '{target}': incommensurable units.")
		self.source = source
		self.target = target
