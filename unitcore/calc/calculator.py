"""
Precision-aware calculator.

Calculator.apply(op, lhs, rhs) evaluates one arithmetic operation on numeric
values without touching its inputs. The numeric mode follows the operands:

  • EXACT   — int / Fraction / RationalNumber on every side: exact rational result
              (narrowed to int when integral, see CalculatorConfig)
  • DECIMAL — any Decimal operand: the exact result rounded once to the working
              digits (the wider of the calculator's context and the operands'
              own significant digits); an unlimited context requires a
              terminating expansion
  • FLOAT   — otherwise: machine float (float with exact collapses to float)

Division or reciprocal by zero raises DivideByZero in every mode.
The module also exposes apply/add/subtract/multiply/divide/reciprocal/negate
proxies bound to a default calculator.
"""

from __future__ import annotations
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Optional, Union
import logging

import numpy as np

from unitcore.config import CalculatorConfig, DEFAULT_CALCULATOR_CONFIG
from unitcore.errors import DivideByZero
from unitcore.numbers.decimals import PrecisionContext, decimal_to_fraction, fraction_to_decimal
from unitcore.numbers.rational import RationalNumber


logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal, Fraction, RationalNumber]


class Operation(str, Enum):
	ADD = "add"
	SUBTRACT = "subtract"
	MULTIPLY = "multiply"
	DIVIDE = "divide"
	RECIPROCAL = "reciprocal"
	NEGATE = "negate"

	def is_unary(self) -> bool:
		return self in (Operation.RECIPROCAL, Operation.NEGATE)


class NumberMode(str, Enum):
	EXACT = "exact"
	FLOAT = "float"
	DECIMAL = "decimal"


def _coerce(value) -> Number:
	"""Unwrap numpy scalars; reject anything that is not a supported number."""
	if isinstance(value, bool):
		raise TypeError("bool is not a numeric operand")
	if isinstance(value, np.integer):
		return int(value)
	if isinstance(value, np.floating):
		return float(value)
	if isinstance(value, (int, float, Decimal, Fraction, RationalNumber)):
		return value
	raise TypeError(f"Unsupported operand type: {type(value).__name__}")


def mode_of(value: Number) -> NumberMode:
	if isinstance(value, Decimal):
		return NumberMode.DECIMAL
	if isinstance(value, float):
		return NumberMode.FLOAT
	return NumberMode.EXACT


def _to_fraction(value: Number) -> Fraction:
	if isinstance(value, RationalNumber):
		return value.as_fraction()
	if isinstance(value, Decimal):
		return decimal_to_fraction(value)
	if isinstance(value, float):
		return Fraction(Decimal(repr(float(value))))
	return Fraction(value)


def _significant_digits(value: Decimal) -> int:
	return len(value.as_tuple().digits)


def _is_zero(value: Number) -> bool:
	if isinstance(value, RationalNumber):
		return value.is_zero()
	return value == 0


class Calculator:
	"""Stateless evaluator of arithmetic on mixed numeric operands."""

	def __init__(self, context: Optional[PrecisionContext] = None, config: CalculatorConfig = DEFAULT_CALCULATOR_CONFIG) -> None:
		self.config = config
		if context is None:
			context = PrecisionContext(config.default_digits)
		self.context = context

	def apply(self, op: Operation, lhs: Number, rhs: Optional[Number] = None) -> Number:
		"""Evaluate `op` on the operands; unary operations take no `rhs`."""
		op = Operation(op)
		lhs = _coerce(lhs)
		if op.is_unary():
			if rhs is not None:
				raise ValueError(f"{op.value} takes a single operand")
			operands = (lhs,)
		else:
			if rhs is None:
				raise ValueError(f"{op.value} needs two operands")
			operands = (lhs, _coerce(rhs))

		if op is Operation.DIVIDE and _is_zero(operands[1]):
			raise DivideByZero(f"Division of {lhs} by zero.")
		if op is Operation.RECIPROCAL and _is_zero(lhs):
			raise DivideByZero("Reciprocal of zero.")

		modes = set()
		for v in operands:
			modes.add(mode_of(v))
		if NumberMode.DECIMAL in modes:
			mode = NumberMode.DECIMAL
		elif NumberMode.FLOAT in modes:
			mode = NumberMode.FLOAT
		else:
			mode = NumberMode.EXACT
		logger.debug("%s in %s mode", op.value, mode.value)

		if mode is NumberMode.FLOAT:
			return self._apply_float(op, operands)
		exact = self._apply_fraction(op, operands)
		if mode is NumberMode.EXACT:
			return self._narrow(exact)
		return fraction_to_decimal(exact, self._working_context(operands))

	def add(self, lhs: Number, rhs: Number) -> Number:
		return self.apply(Operation.ADD, lhs, rhs)

	def subtract(self, lhs: Number, rhs: Number) -> Number:
		return self.apply(Operation.SUBTRACT, lhs, rhs)

	def multiply(self, lhs: Number, rhs: Number) -> Number:
		return self.apply(Operation.MULTIPLY, lhs, rhs)

	def divide(self, lhs: Number, rhs: Number) -> Number:
		return self.apply(Operation.DIVIDE, lhs, rhs)

	def reciprocal(self, value: Number) -> Number:
		return self.apply(Operation.RECIPROCAL, value)

	def negate(self, value: Number) -> Number:
		return self.apply(Operation.NEGATE, value)

	def _working_context(self, operands) -> PrecisionContext:
		"""Calculator context widened to the digits carried by Decimal operands."""
		ctx = self.context
		if ctx.is_unlimited():
			return ctx
		for v in operands:
			if isinstance(v, Decimal):
				ctx = ctx.widest(PrecisionContext(_significant_digits(v)))
		return ctx

	def _narrow(self, value: Fraction) -> Union[int, RationalNumber]:
		if self.config.narrow_integers and value.denominator == 1:
			return value.numerator
		return RationalNumber.of(value)

	@staticmethod
	def _apply_float(op: Operation, operands) -> float:
		a = float(operands[0])
		if op is Operation.NEGATE:
			return -a
		if op is Operation.RECIPROCAL:
			return 1.0 / a
		b = float(operands[1])
		if op is Operation.ADD:
			return a + b
		if op is Operation.SUBTRACT:
			return a - b
		if op is Operation.MULTIPLY:
			return a * b
		return a / b

	@staticmethod
	def _apply_fraction(op: Operation, operands) -> Fraction:
		a = _to_fraction(operands[0])
		if op is Operation.NEGATE:
			return -a
		if op is Operation.RECIPROCAL:
			return 1 / a
		b = _to_fraction(operands[1])
		if op is Operation.ADD:
			return a + b
		if op is Operation.SUBTRACT:
			return a - b
		if op is Operation.MULTIPLY:
			return a * b
		return a / b


_DEFAULT = Calculator()


def apply(op: Operation, lhs: Number, rhs: Optional[Number] = None) -> Number:
	return _DEFAULT.apply(op, lhs, rhs)


def add(lhs: Number, rhs: Number) -> Number:
	return _DEFAULT.add(lhs, rhs)


def subtract(lhs: Number, rhs: Number) -> Number:
	return _DEFAULT.subtract(lhs, rhs)


def multiply(lhs: Number, rhs: Number) -> Number:
	return _DEFAULT.multiply(lhs, rhs)


def divide(lhs: Number, rhs: Number) -> Number:
	return _DEFAULT.divide(lhs, rhs)


def reciprocal(value: Number) -> Number:
	return _DEFAULT.reciprocal(value)


def negate(value: Number) -> Number:
	return _DEFAULT.negate(value)
