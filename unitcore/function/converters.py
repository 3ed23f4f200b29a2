"""
Converter variant catalog.

A UnitConverter maps a value on one unit's scale to the equivalent value on
another's. The catalog is closed; each variant is tagged with a ConverterKind:

  • IdentityConverter            x
  • AddConverter(offset)         x + offset              (affine, exact or float offset)
  • MultiplyConverter(factor)    x · factor              (linear, exact or float factor)
  • PiPowerConverter(e)          x · π^e                 (linear)
  • ExpConverter(base)           base^x
  • LogConverter(base)           log_base(x)
  • ChainConverter(elements)     elements applied left to right

Evaluation entry points:
  • evaluate(x)             — machine float
  • evaluate(x, context)    — Decimal rounded to context.digits (0 = exact or fail)
  • evaluate_array(xs)      — numpy float64, element-wise
  • convert(x, context)     — dispatch on the numeric type of x, exact when possible

Equality is structural, except that any two identities are equal whatever
their variant. The total order (compare_to / <) sorts by kind name first and
exists only to make chains canonical.
"""

from __future__ import annotations
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Optional, Tuple, Union
import math

import numpy as np

from unitcore.numbers.decimals import (
	DECIMAL128, PrecisionContext, fraction_to_decimal, guarded, pi_digits, to_decimal,
)
from unitcore.numbers.rational import RationalNumber


Parameter = Union[float, RationalNumber]


class ConverterKind(str, Enum):
	"""Variant tags; the value is the name used to break ordering ties."""
	IDENTITY = "IdentityConverter"
	ADD = "AddConverter"
	MULTIPLY = "MultiplyConverter"
	PI_POWER = "PiPowerConverter"
	EXP = "ExpConverter"
	LOG = "LogConverter"
	CHAIN = "ChainConverter"


ATOMIC_KINDS: Tuple[ConverterKind, ...] = (
	ConverterKind.ADD,
	ConverterKind.MULTIPLY,
	ConverterKind.PI_POWER,
	ConverterKind.EXP,
	ConverterKind.LOG,
)


def _parameter(value, name: str) -> Parameter:
	"""Normalize a converter parameter: ints and Fractions become exact rationals."""
	if isinstance(value, bool):
		raise TypeError(f"{name} must be a number, not bool")
	if isinstance(value, RationalNumber):
		return value
	if isinstance(value, (int, np.integer)):
		return RationalNumber(int(value))
	if isinstance(value, Fraction):
		return RationalNumber.of(value)
	if isinstance(value, (float, np.floating)):
		v = float(value)
		if not math.isfinite(v):
			raise ValueError(f"{name} must be finite, got {v}")
		return v
	raise TypeError(f"{name} must be int, float, Fraction or RationalNumber, not {type(value).__name__}")


def _as_fraction(value) -> Fraction:
	"""Exact fraction of a parameter or an evaluated Decimal (floats via shortest repr)."""
	if isinstance(value, RationalNumber):
		return value.as_fraction()
	if isinstance(value, float):
		return Fraction(Decimal(repr(float(value))))
	return Fraction(value)


def _parameter_key(value: Parameter) -> Tuple[Fraction, int]:
	# exact comparison; huge exact factors have no float image
	if isinstance(value, RationalNumber):
		return (value.as_fraction(), 0)
	return (_as_fraction(value), 1)


class UnitConverter:
	"""Common behaviour of every converter variant. Instances are immutable."""

	kind: ConverterKind
	__slots__ = ()

	def __setattr__(self, name, value):
		raise AttributeError(f"{type(self).__name__} is immutable")

	def is_identity(self) -> bool:
		raise NotImplementedError

	def is_linear(self) -> bool:
		raise NotImplementedError

	def inverse(self) -> "UnitConverter":
		raise NotImplementedError

	def elements(self) -> Tuple["UnitConverter", ...]:
		"""The atomic steps of this converter, in application order."""
		if self.is_identity():
			return ()
		return (self,)

	def compose(self, other: "UnitConverter") -> "UnitConverter":
		"""Converter applying `self` first, then `other`."""
		from unitcore.function.composition import compose
		return compose(self, other)

	def evaluate(self, value, context: Optional[PrecisionContext] = None):
		"""
		Float evaluation when no context is given; Decimal evaluation at
		context.digits otherwise. Identity returns the input untouched.
		"""
		if context is None:
			if self.is_identity():
				return value
			return self._evaluate_float(float(value))
		dec = to_decimal(value, context)
		if self.is_identity():
			return dec
		return self._evaluate_decimal(dec, context)

	def evaluate_array(self, values) -> np.ndarray:
		"""Element-wise float64 evaluation over an array-like."""
		arr = np.asarray(values, dtype=np.float64)
		if self.is_identity():
			return arr
		return self._evaluate_array(arr)

	def evaluate_exact(self, value: RationalNumber) -> Optional[RationalNumber]:
		"""Exact result for an exact input, or None when a step is not exact."""
		if self.is_identity():
			return value
		return self._evaluate_exact(value)

	def convert(self, value, context: Optional[PrecisionContext] = None):
		"""
		Convert keeping the value's numeric form: exact inputs stay exact when every
		step allows it (else Decimal at `context`, else float), Decimals stay
		Decimal, floats stay float and arrays stay arrays.
		"""
		if self.is_identity():
			return value
		if isinstance(value, np.ndarray):
			return self.evaluate_array(value)
		if isinstance(value, Decimal):
			return self.evaluate(value, context if context is not None else DECIMAL128)
		if isinstance(value, np.integer):
			value = int(value)
		if isinstance(value, (RationalNumber, Fraction)) or (isinstance(value, int) and not isinstance(value, bool)):
			exact = self.evaluate_exact(RationalNumber.of(value))
			if exact is not None:
				return exact
			if context is not None:
				return self.evaluate(value, context)
			return self.evaluate(float(value))
		if isinstance(value, (float, np.floating)):
			return self.evaluate(float(value))
		raise TypeError(f"Cannot convert value of type {type(value).__name__}")

	def __call__(self, value):
		return self.convert(value)

	def _evaluate_float(self, value: float) -> float:
		raise NotImplementedError

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		raise NotImplementedError

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		raise NotImplementedError

	def _evaluate_exact(self, value: RationalNumber) -> Optional[RationalNumber]:
		return None

	def _params(self) -> tuple:
		raise NotImplementedError

	def _params_key(self) -> tuple:
		return self._params()

	def sort_key(self) -> tuple:
		if self.is_identity():
			return (ConverterKind.IDENTITY.value, ())
		return (self.kind.value, self._params_key())

	def compare_to(self, other: "UnitConverter") -> int:
		"""-1, 0 or 1; identities compare equal, other ties break on kind name."""
		if self.is_identity() and other.is_identity():
			return 0
		a = self.sort_key()
		b = other.sort_key()
		if a < b:
			return -1
		if a > b:
			return 1
		return 0

	def __lt__(self, other) -> bool:
		if not isinstance(other, UnitConverter):
			return NotImplemented
		return self.compare_to(other) < 0

	def __eq__(self, other) -> bool:
		if self is other:
			return True
		if not isinstance(other, UnitConverter):
			return NotImplemented
		if self.is_identity() and other.is_identity():
			return True
		return type(self) is type(other) and self._params() == other._params()

	def __hash__(self) -> int:
		if self.is_identity():
			return hash(ConverterKind.IDENTITY)
		return hash((self.kind, self._params()))


class IdentityConverter(UnitConverter):
	kind = ConverterKind.IDENTITY
	__slots__ = ()

	def is_identity(self) -> bool:
		return True

	def is_linear(self) -> bool:
		return True

	def inverse(self) -> "UnitConverter":
		return self

	def _params(self) -> tuple:
		return ()

	def __repr__(self) -> str:
		return "IdentityConverter()"


IDENTITY = IdentityConverter()


class AddConverter(UnitConverter):
	"""x + offset."""

	kind = ConverterKind.ADD
	__slots__ = ("_offset",)

	def __init__(self, offset) -> None:
		object.__setattr__(self, "_offset", _parameter(offset, "offset"))

	@property
	def offset(self) -> Parameter:
		return self._offset

	def is_exact(self) -> bool:
		return isinstance(self._offset, RationalNumber)

	def is_identity(self) -> bool:
		return self._offset == 0

	def is_linear(self) -> bool:
		return self.is_identity()

	def inverse(self) -> "UnitConverter":
		if self.is_identity():
			return self
		return AddConverter(-self._offset)

	def _evaluate_float(self, value: float) -> float:
		return value + float(self._offset)

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		return fraction_to_decimal(Fraction(value) + _as_fraction(self._offset), context)

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		return values + float(self._offset)

	def _evaluate_exact(self, value: RationalNumber) -> Optional[RationalNumber]:
		if not self.is_exact():
			return None
		return value.add(self._offset)

	def _params(self) -> tuple:
		return (self._offset,)

	def _params_key(self) -> tuple:
		return _parameter_key(self._offset)

	def __repr__(self) -> str:
		return f"AddConverter({self._offset})"


class MultiplyConverter(UnitConverter):
	"""x · factor, with an exact rational or a floating factor."""

	kind = ConverterKind.MULTIPLY
	__slots__ = ("_factor",)

	def __init__(self, factor) -> None:
		f = _parameter(factor, "factor")
		if f == 0:
			raise ValueError("A zero factor has no inverse.")
		object.__setattr__(self, "_factor", f)

	@classmethod
	def of_ratio(cls, numerator: int, denominator: int) -> "MultiplyConverter":
		return cls(RationalNumber(numerator, denominator))

	@property
	def factor(self) -> Parameter:
		return self._factor

	def is_exact(self) -> bool:
		return isinstance(self._factor, RationalNumber)

	def is_identity(self) -> bool:
		return self._factor == 1

	def is_linear(self) -> bool:
		return True

	def inverse(self) -> "UnitConverter":
		if self.is_identity():
			return self
		if isinstance(self._factor, RationalNumber):
			return MultiplyConverter(self._factor.reciprocal())
		return MultiplyConverter(1.0 / self._factor)

	def _evaluate_float(self, value: float) -> float:
		return value * float(self._factor)

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		return fraction_to_decimal(Fraction(value) * _as_fraction(self._factor), context)

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		return values * float(self._factor)

	def _evaluate_exact(self, value: RationalNumber) -> Optional[RationalNumber]:
		if not self.is_exact():
			return None
		return value.multiply(self._factor)

	def _params(self) -> tuple:
		return (self._factor,)

	def _params_key(self) -> tuple:
		return _parameter_key(self._factor)

	def __repr__(self) -> str:
		return f"MultiplyConverter({self._factor})"


class PiPowerConverter(UnitConverter):
	"""x · π^exponent."""

	kind = ConverterKind.PI_POWER
	__slots__ = ("_exponent", "_float_factor")

	def __init__(self, exponent: int) -> None:
		if isinstance(exponent, bool) or not isinstance(exponent, (int, np.integer)):
			raise TypeError("exponent must be an int")
		object.__setattr__(self, "_exponent", int(exponent))
		object.__setattr__(self, "_float_factor", math.pi ** int(exponent))

	@property
	def exponent(self) -> int:
		return self._exponent

	def is_identity(self) -> bool:
		return self._exponent == 0

	def is_linear(self) -> bool:
		return True

	def inverse(self) -> "UnitConverter":
		if self.is_identity():
			return self
		return PiPowerConverter(-self._exponent)

	def _evaluate_float(self, value: float) -> float:
		return value * self._float_factor

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		work = guarded(context)
		pi = pi_digits(work.prec)
		factor = work.power(pi, self._exponent)
		return context.round(work.multiply(factor, value))

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		return values * self._float_factor

	def _params(self) -> tuple:
		return (self._exponent,)

	def __repr__(self) -> str:
		return f"PiPowerConverter(π^{self._exponent})"


class _BaseConverter(UnitConverter):
	"""Shared state for the exponential and logarithmic converters."""

	__slots__ = ("_base",)

	def __init__(self, base: float = math.e) -> None:
		b = float(base)
		if not math.isfinite(b) or b <= 0.0 or b == 1.0:
			raise ValueError(f"base must be positive, finite and not 1, got {base}")
		object.__setattr__(self, "_base", b)

	@property
	def base(self) -> float:
		return self._base

	def is_natural(self) -> bool:
		return self._base == math.e

	def is_identity(self) -> bool:
		return False

	def is_linear(self) -> bool:
		return False

	def _ln_base(self, work) -> Decimal:
		if self.is_natural():
			return Decimal(1)
		return to_decimal(self._base, PrecisionContext(work.prec)).ln(work)

	def _params(self) -> tuple:
		return (self._base,)


class ExpConverter(_BaseConverter):
	"""base^x."""

	kind = ConverterKind.EXP
	__slots__ = ()

	def inverse(self) -> "UnitConverter":
		return LogConverter(self._base)

	def _evaluate_float(self, value: float) -> float:
		return float(self._evaluate_array(np.float64(value)))

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		work = guarded(context)
		return context.round(work.multiply(value, self._ln_base(work)).exp(work))

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		# overflow saturates to inf on every float path
		with np.errstate(over="ignore", under="ignore"):
			if self.is_natural():
				return np.exp(values)
			return np.power(self._base, values)

	def __repr__(self) -> str:
		if self.is_natural():
			return "ExpConverter(e)"
		return f"ExpConverter({self._base})"


class LogConverter(_BaseConverter):
	"""log_base(x)."""

	kind = ConverterKind.LOG
	__slots__ = ()

	def inverse(self) -> "UnitConverter":
		return ExpConverter(self._base)

	def _evaluate_float(self, value: float) -> float:
		if self.is_natural():
			return math.log(value)
		return math.log(value) / math.log(self._base)

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		work = guarded(context)
		return context.round(work.divide(value.ln(work), self._ln_base(work)))

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		if self.is_natural():
			return np.log(values)
		return np.log(values) / math.log(self._base)

	def __repr__(self) -> str:
		if self.is_natural():
			return "LogConverter(e)"
		return f"LogConverter({self._base})"


class ChainConverter(UnitConverter):
	"""
	Ordered sequence of atomic converters, none of which fuse with a neighbour.
	Built by the composition engine; not meant to be constructed directly.
	"""

	kind = ConverterKind.CHAIN
	__slots__ = ("_elements",)

	def __init__(self, elements: Tuple[UnitConverter, ...]) -> None:
		items = tuple(elements)
		for e in items:
			if isinstance(e, ChainConverter):
				raise TypeError("Chains are flat; pass the nested chain's elements instead.")
		object.__setattr__(self, "_elements", items)

	def elements(self) -> Tuple[UnitConverter, ...]:
		return self._elements

	def is_identity(self) -> bool:
		for e in self._elements:
			if not e.is_identity():
				return False
		return True

	def is_linear(self) -> bool:
		for e in self._elements:
			if not e.is_linear():
				return False
		return True

	def inverse(self) -> "UnitConverter":
		from unitcore.function.composition import compose_all
		inverted = []
		for e in reversed(self._elements):
			inverted.append(e.inverse())
		return compose_all(*inverted)

	def _evaluate_float(self, value: float) -> float:
		for e in self._elements:
			value = e.evaluate(value)
		return value

	def _evaluate_decimal(self, value: Decimal, context: PrecisionContext) -> Decimal:
		for e in self._elements:
			value = e.evaluate(value, context)
		return value

	def _evaluate_array(self, values: np.ndarray) -> np.ndarray:
		for e in self._elements:
			values = e.evaluate_array(values)
		return values

	def _evaluate_exact(self, value: RationalNumber) -> Optional[RationalNumber]:
		for e in self._elements:
			value = e.evaluate_exact(value)
			if value is None:
				return None
		return value

	def _params(self) -> tuple:
		return self._elements

	def _params_key(self) -> tuple:
		keys = []
		for e in self._elements:
			keys.append(e.sort_key())
		return (len(keys), tuple(keys))

	def __len__(self) -> int:
		return len(self._elements)

	def __iter__(self):
		return iter(self._elements)

	def __repr__(self) -> str:
		return "ChainConverter(" + " ∘ ".join(repr(e) for e in self._elements) + ")"
