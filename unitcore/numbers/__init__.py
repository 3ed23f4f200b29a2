from .rational import RationalNumber, ZERO, ONE
from .decimals import (
	PrecisionContext, UNLIMITED, DECIMAL32, DECIMAL64, DECIMAL128,
	fraction_to_decimal, to_decimal, decimal_to_fraction, pi_digits,
)

__all__ = [
	"RationalNumber", "ZERO", "ONE",
	"PrecisionContext", "UNLIMITED", "DECIMAL32", "DECIMAL64", "DECIMAL128",
	"fraction_to_decimal", "to_decimal", "decimal_to_fraction", "pi_digits",
]
