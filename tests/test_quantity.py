"""Tests for quantity arithmetic and summaries."""

from decimal import Decimal
import math

import pytest

from unitcore.calc import Calculator
from unitcore.errors import DivideByZero, IncommensurableUnits
from unitcore.numbers import PrecisionContext, RationalNumber
from unitcore.quantity import Quantity, QuantityArithmetic, Scale, summarize
from unitcore.units import (
	CELSIUS, CENTIMETRE, DEGREE_ANGLE, FOOT, INCH, KELVIN, KILOMETRE, LENGTH, METRE,
	ONE, RADIAN, SECOND, TIME,
)


@pytest.fixture
def ten_metres():
	return Quantity(10, METRE)


class TestAddSubtract:
	def test_same_unit(self, ten_metres):
		result = ten_metres + Quantity(5, METRE)
		assert result.unit == METRE
		assert result.value == 15

	def test_mixed_units_exact(self):
		result = Quantity(10, KILOMETRE) + Quantity(500, METRE)
		assert result.unit == KILOMETRE
		assert result.value == RationalNumber(21, 2)

	def test_subtract_float_and_exact(self):
		result = Quantity(1.5, METRE) - Quantity(50, CENTIMETRE)
		assert result.value == pytest.approx(1.0)
		assert result.unit == METRE

	def test_incommensurable(self, ten_metres):
		with pytest.raises(IncommensurableUnits):
			ten_metres + Quantity(1, SECOND)

	def test_affine_units_convert_through_system_unit(self):
		result = Quantity(20, CELSIUS) + Quantity(5, KELVIN)
		assert result.unit == CELSIUS
		assert result.value == 25

	def test_scale_of_left_operand_kept(self):
		result = Quantity(1, KELVIN, Scale.RELATIVE) + Quantity(1, KELVIN)
		assert result.scale is Scale.RELATIVE

	def test_operands_unchanged(self, ten_metres):
		other = Quantity(5, METRE)
		ten_metres + other
		assert ten_metres.value == 10
		assert other.value == 5


class TestMultiplyDivide:
	def test_multiply(self):
		result = Quantity(3, METRE) * Quantity(4, SECOND)
		assert result.value == 12
		assert result.unit.dimension == LENGTH * TIME

	def test_divide(self, ten_metres):
		result = ten_metres / Quantity(4, SECOND)
		assert result.value == RationalNumber(5, 2)
		assert result.unit == METRE / SECOND
		assert result.unit.dimension == LENGTH / TIME

	def test_ratio_adds_to_plain_number(self, ten_metres):
		ratio = ten_metres / Quantity(5, METRE)
		assert ratio.unit == ONE
		total = ratio + Quantity(1, ONE)
		assert total.value == 3
		assert total.unit == ONE

	def test_divide_by_zero(self, ten_metres):
		with pytest.raises(DivideByZero):
			ten_metres / Quantity(0, SECOND)

	def test_inverse(self):
		result = Quantity(4, SECOND).inverse()
		assert result.value == RationalNumber(1, 4)
		assert result.unit.dimension == TIME ** -1

	def test_negate(self):
		result = -Quantity(2.5, METRE)
		assert result.value == -2.5
		assert result.unit == METRE

	def test_scalar(self):
		q = Quantity(3, METRE)
		assert (q * 2).value == 6
		assert (2 * q).value == 6
		assert (q / 4).value == RationalNumber(3, 4)


class TestConversion:
	def test_foot_to_inch(self):
		assert Quantity(1, FOOT).to(INCH).value == 12

	def test_celsius_to_kelvin_exact(self):
		assert Quantity(25, CELSIUS).to(KELVIN).value == RationalNumber(5963, 20)

	def test_degree_to_radian_decimal(self):
		q = Quantity(Decimal(180), DEGREE_ANGLE).to(RADIAN)
		assert isinstance(q.value, Decimal)
		assert float(q.value) == pytest.approx(math.pi)

	def test_exact_through_pi_uses_calculator_context(self):
		arithmetic = QuantityArithmetic(Calculator(PrecisionContext(10)))
		q = arithmetic.to(Quantity(90, DEGREE_ANGLE), RADIAN)
		assert q.value == Decimal("1.570796327")

	def test_str(self, ten_metres):
		assert str(ten_metres) == "10 m"


class TestSummary:
	def test_mixed_units(self):
		s = summarize([Quantity(1, KILOMETRE), Quantity(500, METRE), Quantity(2, KILOMETRE)])
		assert s.count == 3
		assert s.min.value == RationalNumber(1, 2)
		assert s.max.value == 2
		assert s.sum.value == RationalNumber(7, 2)
		assert s.sum.unit == KILOMETRE
		assert s.average.value == RationalNumber(7, 6)

	def test_empty(self):
		s = summarize([])
		assert s.count == 0
		assert s.sum is None
		assert s.average is None
