"""
Reference unit hierarchy used by the quantity layer.

A Unit knows its dimension, its system (reference) unit and the converter from
itself to that system unit. Derived units are built by transforming a unit
with a converter (km = m scaled by 1000, °C = K offset by 273.15) or by
product, quotient and inverse of linear units. A dimensionless product or
quotient of system units is ONE.

Unit.converter_to(other) is the lookup the quantity layer consumes: it composes
self → system with the inverse of other → system, and raises
IncommensurableUnits when the dimensions differ.
"""

from __future__ import annotations
from typing import Optional

from unitcore.errors import IncommensurableUnits
from unitcore.function.composition import compose
from unitcore.function.converters import IDENTITY, AddConverter, MultiplyConverter, PiPowerConverter, UnitConverter
from unitcore.function.prefixes import BinaryPrefix, MetricPrefix
from unitcore.numbers.rational import RationalNumber
from unitcore.units import dimension as dim
from unitcore.units.dimension import Dimension


class Unit:
	"""Immutable unit: symbol, dimension and converter to its system unit."""

	__slots__ = ("_symbol", "_dimension", "_system", "_to_system", "_derived")

	def __init__(self, symbol: str, dimension: Dimension, system: Optional["Unit"] = None, to_system: UnitConverter = IDENTITY, derived: bool = False) -> None:
		if system is not None and system.dimension != dimension:
			raise ValueError(f"System unit '{system}' does not share the dimension of '{symbol}'.")
		object.__setattr__(self, "_symbol", symbol)
		object.__setattr__(self, "_dimension", dimension)
		object.__setattr__(self, "_system", system)
		object.__setattr__(self, "_to_system", to_system)
		object.__setattr__(self, "_derived", derived)

	def __setattr__(self, name, value):
		raise AttributeError("Unit is immutable")

	@property
	def symbol(self) -> str:
		return self._symbol

	@property
	def dimension(self) -> Dimension:
		return self._dimension

	@property
	def system_unit(self) -> "Unit":
		if self._system is None:
			return self
		return self._system

	def is_system_unit(self) -> bool:
		return self._system is None

	def converter_to_system(self) -> UnitConverter:
		return self._to_system

	def converter_to(self, other: "Unit") -> UnitConverter:
		"""Converter from values in `self` to values in `other`."""
		if self._dimension != other.dimension or self.system_unit != other.system_unit:
			raise IncommensurableUnits(self, other)
		return compose(self._to_system, other.converter_to_system().inverse())

	def is_compatible(self, other: "Unit") -> bool:
		return self._dimension == other.dimension and self.system_unit == other.system_unit

	def transform(self, converter: UnitConverter, symbol: str) -> "Unit":
		"""New unit whose values map onto this unit through `converter`."""
		return Unit(symbol, self._dimension, self.system_unit, compose(converter, self._to_system))

	def prefix(self, prefix) -> "Unit":
		"""Metric or binary prefixed form of this unit, e.g. km or KiB."""
		if not isinstance(prefix, (MetricPrefix, BinaryPrefix)):
			raise TypeError("prefix must be a MetricPrefix or BinaryPrefix")
		return self.transform(prefix.converter(), prefix.symbol + self._symbol)

	def _require_linear(self, what: str) -> None:
		if not self._to_system.is_linear():
			raise ValueError(f"Cannot form {what} of non-linear unit '{self._symbol}'.")

	def multiply(self, other: "Unit") -> "Unit":
		self._require_linear("a product")
		other._require_linear("a product")
		d = self._dimension * other.dimension
		if self.is_system_unit() and other.is_system_unit():
			if d.is_dimensionless():
				return ONE
			return Unit(f"{self._symbol}·{other.symbol}", d, derived=True)
		system = self.system_unit.multiply(other.system_unit)
		return Unit(f"{self._symbol}·{other.symbol}", d, system, compose(self._to_system, other.converter_to_system()))

	def inverse(self) -> "Unit":
		self._require_linear("the inverse")
		d = self._dimension.inverse()
		if self.is_system_unit():
			if d.is_dimensionless():
				return ONE
			return Unit(f"1/{self._symbol}", d, derived=True)
		return Unit(f"1/{self._symbol}", d, self.system_unit.inverse(), self._to_system.inverse())

	def divide(self, other: "Unit") -> "Unit":
		quotient = self.multiply(other.inverse())
		if quotient.is_system_unit():
			if quotient.dimension.is_dimensionless():
				return ONE
			return Unit(f"{self._symbol}/{other.symbol}", quotient.dimension, derived=True)
		return Unit(f"{self._symbol}/{other.symbol}", quotient.dimension, quotient.system_unit, quotient.converter_to_system())

	def __mul__(self, other: "Unit") -> "Unit":
		return self.multiply(other)

	def __truediv__(self, other: "Unit") -> "Unit":
		return self.divide(other)

	def __eq__(self, other) -> bool:
		if not isinstance(other, Unit):
			return NotImplemented
		if self._dimension != other.dimension:
			return False
		if self.is_system_unit() or other.is_system_unit():
			if not (self.is_system_unit() and other.is_system_unit()):
				return False
			# derived system units (products, inverses) are identified by dimension alone
			if self._derived and other._derived:
				return True
			return self._derived == other._derived and self._symbol == other.symbol
		return self.system_unit == other.system_unit and self._to_system == other.converter_to_system()

	def __hash__(self) -> int:
		if self.is_system_unit():
			return hash((self._dimension, self._derived))
		return hash((self._dimension, self._to_system))

	def __repr__(self) -> str:
		return f"Unit({self._symbol!r})"

	def __str__(self) -> str:
		return self._symbol


ONE = Unit("one", dim.NONE)
METRE = Unit("m", dim.LENGTH)
KILOGRAM = Unit("kg", dim.MASS)
SECOND = Unit("s", dim.TIME)
AMPERE = Unit("A", dim.ELECTRIC_CURRENT)
KELVIN = Unit("K", dim.TEMPERATURE)
MOLE = Unit("mol", dim.AMOUNT_OF_SUBSTANCE)
CANDELA = Unit("cd", dim.LUMINOUS_INTENSITY)
RADIAN = Unit("rad", dim.NONE)
BIT = Unit("bit", dim.NONE)

KILOMETRE = METRE.prefix(MetricPrefix.KILO)
CENTIMETRE = METRE.prefix(MetricPrefix.CENTI)
GRAM = KILOGRAM.transform(MultiplyConverter.of_ratio(1, 1000), "g")
MINUTE = SECOND.transform(MultiplyConverter(60), "min")
HOUR = SECOND.transform(MultiplyConverter(3600), "h")
CELSIUS = KELVIN.transform(AddConverter(RationalNumber(27315, 100)), "℃")
INCH = METRE.transform(MultiplyConverter.of_ratio(254, 10000), "in")
FOOT = INCH.transform(MultiplyConverter(12), "ft")
DEGREE_ANGLE = RADIAN.transform(compose(MultiplyConverter.of_ratio(1, 180), PiPowerConverter(1)), "°")
BYTE = BIT.transform(MultiplyConverter(8), "B")
