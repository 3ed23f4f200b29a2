"""
Metric (SI) and binary (IEC) prefixes as exact multiply converters.
"""

from __future__ import annotations
from enum import Enum

from unitcore.function.converters import MultiplyConverter
from unitcore.numbers.rational import RationalNumber


def power_converter(base: int, exponent: int) -> MultiplyConverter:
	"""Exact converter for base**exponent (negative exponents give a fraction)."""
	if exponent >= 0:
		return MultiplyConverter(RationalNumber(base ** exponent))
	return MultiplyConverter(RationalNumber(1, base ** (-exponent)))


class MetricPrefix(Enum):
	QUETTA = ("Q", 30)
	RONNA = ("R", 27)
	YOTTA = ("Y", 24)
	ZETTA = ("Z", 21)
	EXA = ("E", 18)
	PETA = ("P", 15)
	TERA = ("T", 12)
	GIGA = ("G", 9)
	MEGA = ("M", 6)
	KILO = ("k", 3)
	HECTO = ("h", 2)
	DEKA = ("da", 1)
	DECI = ("d", -1)
	CENTI = ("c", -2)
	MILLI = ("m", -3)
	MICRO = ("µ", -6)
	NANO = ("n", -9)
	PICO = ("p", -12)
	FEMTO = ("f", -15)
	ATTO = ("a", -18)
	ZEPTO = ("z", -21)
	YOCTO = ("y", -24)
	RONTO = ("r", -27)
	QUECTO = ("q", -30)

	@property
	def symbol(self) -> str:
		return self.value[0]

	@property
	def base(self) -> int:
		return 10

	@property
	def exponent(self) -> int:
		return self.value[1]

	def converter(self) -> MultiplyConverter:
		return power_converter(10, self.exponent)


class BinaryPrefix(Enum):
	KIBI = ("Ki", 1)
	MEBI = ("Mi", 2)
	GIBI = ("Gi", 3)
	TEBI = ("Ti", 4)
	PEBI = ("Pi", 5)
	EXBI = ("Ei", 6)
	ZEBI = ("Zi", 7)
	YOBI = ("Yi", 8)

	@property
	def symbol(self) -> str:
		return self.value[0]

	@property
	def base(self) -> int:
		return 1024

	@property
	def exponent(self) -> int:
		return self.value[1]

	def converter(self) -> MultiplyConverter:
		return power_converter(1024, self.exponent)
