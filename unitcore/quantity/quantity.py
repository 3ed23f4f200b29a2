"""
Quantity arithmetic.

QuantityArithmetic combines quantities through the converter algebra and the
calculator:

  • add / subtract — both values converted to the left operand's system unit,
                     combined by the calculator, converted back through the
                     inverse of the left unit's converter
  • multiply / divide — values combined directly; unit is the product / quotient
  • inverse / negate  — reciprocal / negated value; unit inverted / unchanged
  • multiply_by / divide_by — scaling by a plain number
  • to(q, unit)       — same quantity expressed in another unit

Conversions keep the numeric form of the value where possible, so exact values
stay exact. Absolute/relative scale is carried on each Quantity but is not
reconciled by add/subtract: the result keeps the left operand's scale.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from unitcore.calc.calculator import Calculator, Number, Operation
from unitcore.units.unit import Unit


logger = logging.getLogger(__name__)


class Scale(str, Enum):
	ABSOLUTE = "absolute"
	RELATIVE = "relative"


@dataclass(frozen=True)
class Quantity:
	"""A numeric value paired with its unit."""
	value: Number
	unit: Unit
	scale: Scale = Scale.ABSOLUTE

	def __add__(self, other: "Quantity") -> "Quantity":
		return DEFAULT_ARITHMETIC.add(self, other)

	def __sub__(self, other: "Quantity") -> "Quantity":
		return DEFAULT_ARITHMETIC.subtract(self, other)

	def __mul__(self, other):
		if isinstance(other, Quantity):
			return DEFAULT_ARITHMETIC.multiply(self, other)
		return DEFAULT_ARITHMETIC.multiply_by(self, other)

	def __rmul__(self, other):
		return DEFAULT_ARITHMETIC.multiply_by(self, other)

	def __truediv__(self, other):
		if isinstance(other, Quantity):
			return DEFAULT_ARITHMETIC.divide(self, other)
		return DEFAULT_ARITHMETIC.divide_by(self, other)

	def __neg__(self) -> "Quantity":
		return DEFAULT_ARITHMETIC.negate(self)

	def inverse(self) -> "Quantity":
		return DEFAULT_ARITHMETIC.inverse(self)

	def to(self, unit: Unit) -> "Quantity":
		return DEFAULT_ARITHMETIC.to(self, unit)

	def __str__(self) -> str:
		return f"{self.value} {self.unit}"


class QuantityArithmetic:
	"""Quantity operations evaluated with a given calculator."""

	def __init__(self, calculator: Optional[Calculator] = None) -> None:
		if calculator is None:
			calculator = Calculator()
		self.calculator = calculator

	def add(self, a: Quantity, b: Quantity) -> Quantity:
		return self._addition(a, b, Operation.ADD)

	def subtract(self, a: Quantity, b: Quantity) -> Quantity:
		return self._addition(a, b, Operation.SUBTRACT)

	def multiply(self, a: Quantity, b: Quantity) -> Quantity:
		value = self.calculator.multiply(a.value, b.value)
		return Quantity(value, a.unit.multiply(b.unit), a.scale)

	def divide(self, a: Quantity, b: Quantity) -> Quantity:
		value = self.calculator.divide(a.value, b.value)
		return Quantity(value, a.unit.divide(b.unit), a.scale)

	def multiply_by(self, a: Quantity, factor: Number) -> Quantity:
		return Quantity(self.calculator.multiply(a.value, factor), a.unit, a.scale)

	def divide_by(self, a: Quantity, divisor: Number) -> Quantity:
		return Quantity(self.calculator.divide(a.value, divisor), a.unit, a.scale)

	def inverse(self, a: Quantity) -> Quantity:
		return Quantity(self.calculator.reciprocal(a.value), a.unit.inverse(), a.scale)

	def negate(self, a: Quantity) -> Quantity:
		return Quantity(self.calculator.negate(a.value), a.unit, a.scale)

	def to(self, a: Quantity, unit: Unit) -> Quantity:
		converter = a.unit.converter_to(unit)
		return Quantity(converter.convert(a.value, self.calculator.context), unit, a.scale)

	def _addition(self, a: Quantity, b: Quantity, op: Operation) -> Quantity:
		system = a.unit.system_unit
		c1 = a.unit.converter_to_system()
		c2 = b.unit.converter_to(system)
		ctx = self.calculator.context
		lhs = c1.convert(a.value, ctx)
		rhs = c2.convert(b.value, ctx)
		result = self.calculator.apply(op, lhs, rhs)
		if a.scale != b.scale:
			logger.debug("%s of %s and %s quantities keeps the left scale", op.value, a.scale.value, b.scale.value)
		return Quantity(c1.inverse().convert(result, ctx), a.unit, a.scale)


DEFAULT_ARITHMETIC = QuantityArithmetic()
