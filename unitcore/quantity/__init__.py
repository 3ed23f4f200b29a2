from .quantity import Quantity, QuantityArithmetic, Scale, DEFAULT_ARITHMETIC
from .summary import QuantitySummary, summarize

__all__ = [
	"Quantity", "QuantityArithmetic", "Scale", "DEFAULT_ARITHMETIC",
	"QuantitySummary", "summarize",
]
