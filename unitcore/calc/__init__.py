from .calculator import (
	Calculator, Operation, NumberMode, mode_of,
	apply, add, subtract, multiply, divide, reciprocal, negate,
)

__all__ = [
	"Calculator", "Operation", "NumberMode", "mode_of",
	"apply", "add", "subtract", "multiply", "divide", "reciprocal", "negate",
]
