"""Tests for dimensions, units and prefixes."""

import math

import pytest

from unitcore.errors import IncommensurableUnits
from unitcore.function import BinaryPrefix, MetricPrefix, MultiplyConverter, power_converter
from unitcore.numbers import RationalNumber
from unitcore.units import (
	BIT, BYTE, CELSIUS, CENTIMETRE, DEGREE_ANGLE, FOOT, HOUR, INCH, KELVIN, KILOMETRE,
	LENGTH, MASS, METRE, NONE, ONE, RADIAN, SECOND, TIME, Dimension, Unit,
)


class TestDimension:
	def test_quotient(self):
		assert LENGTH / TIME == Dimension((0, 1, -1, 0, 0, 0, 0))

	def test_pretty(self):
		assert str(LENGTH / TIME ** 2) == "[L]·[T]^-2"
		assert str(NONE) == "1"

	def test_dimensionless(self):
		assert (MASS / MASS).is_dimensionless()
		assert not LENGTH.is_dimensionless()

	def test_needs_seven_exponents(self):
		with pytest.raises(ValueError):
			Dimension((1, 2))

	def test_int_powers_only(self):
		with pytest.raises(TypeError):
			LENGTH ** 0.5


class TestPrefixes:
	def test_metric_exact(self):
		assert MetricPrefix.KILO.converter() == MultiplyConverter(1000)
		assert MetricPrefix.MILLI.converter() == MultiplyConverter(RationalNumber(1, 1000))

	def test_binary(self):
		assert BinaryPrefix.KIBI.converter() == MultiplyConverter(1024)
		assert BinaryPrefix.MEBI.converter().factor == 1024 ** 2

	def test_power_converter_negative(self):
		assert power_converter(10, -2).factor == RationalNumber(1, 100)

	def test_symbols(self):
		assert MetricPrefix.MICRO.symbol == "µ"
		assert BinaryPrefix.GIBI.symbol == "Gi"


class TestConverterLookup:
	def test_km_to_m(self):
		assert KILOMETRE.converter_to(METRE).convert(3) == 3000

	def test_m_to_km(self):
		assert METRE.converter_to(KILOMETRE).convert(1500) == RationalNumber(3, 2)

	def test_same_unit_is_identity(self):
		assert KILOMETRE.converter_to(KILOMETRE).is_identity()

	def test_incommensurable(self):
		with pytest.raises(IncommensurableUnits):
			METRE.converter_to(SECOND)

	def test_incommensurable_is_value_error(self):
		with pytest.raises(ValueError):
			KILOMETRE.converter_to(HOUR)

	def test_celsius_to_kelvin(self):
		assert CELSIUS.converter_to(KELVIN).evaluate(0.0) == pytest.approx(273.15)
		assert KELVIN.converter_to(CELSIUS).convert(RationalNumber(27315, 100)) == 0

	def test_foot_is_exact(self):
		assert FOOT.converter_to(METRE).convert(1) == RationalNumber(381, 1250)
		assert FOOT.converter_to(INCH).convert(1) == 12

	def test_degree_to_radian(self):
		assert DEGREE_ANGLE.converter_to(RADIAN).evaluate(180.0) == pytest.approx(math.pi)

	def test_speed(self):
		kmh = KILOMETRE / HOUR
		ms = METRE / SECOND
		assert kmh.dimension == LENGTH / TIME
		assert kmh.converter_to(ms).convert(36) == 10

	def test_prefixed_byte(self):
		kib = BYTE.prefix(BinaryPrefix.KIBI)
		assert kib.symbol == "KiB"
		assert kib.converter_to(BIT).convert(1) == 8192

	def test_millimetre(self):
		mm = METRE.prefix(MetricPrefix.MILLI)
		assert mm.converter_to(CENTIMETRE).convert(5) == RationalNumber(1, 2)


class TestUnitAlgebra:
	def test_product_of_non_linear_fails(self):
		with pytest.raises(ValueError):
			CELSIUS.multiply(METRE)

	def test_inverse(self):
		per_km = KILOMETRE.inverse()
		assert per_km.dimension == LENGTH ** -1
		assert per_km.converter_to(METRE.inverse()).convert(1000) == 1

	def test_derived_system_units_identified_by_dimension(self):
		assert (METRE * SECOND).system_unit == (SECOND * METRE).system_unit

	def test_dimensionless_quotient_is_one(self):
		assert METRE / METRE == ONE
		assert (METRE / METRE).is_system_unit()
		assert METRE * METRE.inverse() == ONE
		assert ONE.inverse() == ONE

	def test_dimensionless_quotient_of_scaled_units(self):
		ratio = KILOMETRE / METRE
		assert ratio.system_unit == ONE
		assert ratio.converter_to(ONE).convert(1) == 1000

	def test_system_unit(self):
		assert KILOMETRE.system_unit == METRE
		assert METRE.is_system_unit()
		assert not KILOMETRE.is_system_unit()

	def test_distinct_base_units_with_same_dimension(self):
		assert RADIAN != Unit("one", NONE)
		with pytest.raises(IncommensurableUnits):
			RADIAN.converter_to(BIT)

	def test_immutable(self):
		with pytest.raises(AttributeError):
			METRE._symbol = "x"
