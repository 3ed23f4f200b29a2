"""
unitcore: unit-converter algebra and precision-aware quantity arithmetic.

Top-level re-exports of the public surface; subpackages hold the details:
  • unitcore.numbers   — RationalNumber, PrecisionContext, decimal helpers
  • unitcore.function  — converter catalog, composition, prefixes, equivalence
  • unitcore.calc      — Calculator
  • unitcore.units     — reference dimensions and units
  • unitcore.quantity  — Quantity arithmetic and summaries
"""

from .errors import UnitCoreError, DivideByZero, UnlimitedPrecisionRequested, IncommensurableUnits
from .config import CalculatorConfig, ConverterConfig
from .numbers import RationalNumber, PrecisionContext, UNLIMITED, DECIMAL32, DECIMAL64, DECIMAL128
from .function import (
	UnitConverter, ConverterKind, IDENTITY, AddConverter, MultiplyConverter, PiPowerConverter,
	ExpConverter, LogConverter, ChainConverter, compose, compose_all,
	MetricPrefix, BinaryPrefix, converters_equivalent,
)
from .calc import Calculator, Operation
from .units import Dimension, Unit
from .quantity import Quantity, QuantityArithmetic, Scale, QuantitySummary, summarize

__all__ = [
	"UnitCoreError", "DivideByZero", "UnlimitedPrecisionRequested", "IncommensurableUnits",
	"CalculatorConfig", "ConverterConfig",
	"RationalNumber", "PrecisionContext", "UNLIMITED", "DECIMAL32", "DECIMAL64", "DECIMAL128",
	"UnitConverter", "ConverterKind", "IDENTITY", "AddConverter", "MultiplyConverter",
	"PiPowerConverter", "ExpConverter", "LogConverter", "ChainConverter", "compose", "compose_all",
	"MetricPrefix", "BinaryPrefix", "converters_equivalent",
	"Calculator", "Operation",
	"Dimension", "Unit",
	"Quantity", "QuantityArithmetic", "Scale", "QuantitySummary", "summarize",
]
