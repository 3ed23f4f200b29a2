from .dimension import (
	Dimension, NONE, MASS, LENGTH, TIME, ELECTRIC_CURRENT, TEMPERATURE,
	AMOUNT_OF_SUBSTANCE, LUMINOUS_INTENSITY,
)
from .unit import (
	Unit, ONE, METRE, KILOGRAM, SECOND, AMPERE, KELVIN, MOLE, CANDELA, RADIAN, BIT,
	KILOMETRE, CENTIMETRE, GRAM, MINUTE, HOUR, CELSIUS, INCH, FOOT, DEGREE_ANGLE, BYTE,
)

__all__ = [
	"Dimension", "NONE", "MASS", "LENGTH", "TIME", "ELECTRIC_CURRENT", "TEMPERATURE",
	"AMOUNT_OF_SUBSTANCE", "LUMINOUS_INTENSITY",
	"Unit", "ONE", "METRE", "KILOGRAM", "SECOND", "AMPERE", "KELVIN", "MOLE", "CANDELA",
	"RADIAN", "BIT", "KILOMETRE", "CENTIMETRE", "GRAM", "MINUTE", "HOUR", "CELSIUS",
	"INCH", "FOOT", "DEGREE_ANGLE", "BYTE",
]
