"""
Configuration containers for the converter engine and the calculator.
"""

from __future__ import annotations
from dataclasses import dataclass
import sys


@dataclass(frozen=True)
class CalculatorConfig:
	"""
	Calculator defaults.

	default_digits   — significant digits used when a decimal operand shows up
	                   and the caller gave no precision context.
	narrow_integers  — return exact results with denominator 1 as int.
	"""
	default_digits: int = 34
	narrow_integers: bool = True


@dataclass(frozen=True)
class ConverterConfig:
	"""
	Converter fusion settings.

	A fused floating multiplier whose factor is within float_identity_tolerance
	of 1.0 collapses to the identity.
	"""
	float_identity_tolerance: float = 4 * sys.float_info.epsilon


DEFAULT_CALCULATOR_CONFIG = CalculatorConfig()
DEFAULT_CONVERTER_CONFIG = ConverterConfig()
