"""
Composition and simplification of converters.

compose(a, b) is the converter "apply a, then apply b":

  1. an identity operand yields the other operand unchanged;
  2. two atomic converters with a fusion rule yield the fused converter
     (Add+Add sums offsets, Multiply+Multiply multiplies factors keeping exact
     form when both are exact, PiPower+PiPower sums exponents, Exp(b)+Log(b)
     and Log(b)+Exp(b) cancel);
  3. anything else becomes a flat ChainConverter.

Chains are normalized to a fixed point: each run of adjacent linear elements is
put in canonical order (linear converters commute), then neighbours are fused
greedily left to right and identities dropped. Equivalent expressions are not
guaranteed to produce structurally equal chains, e.g.
Add(3)∘Mul(2)∘Add(-7) and Mul(2)∘Add(-1) stay distinct although they agree
numerically. Simplification never raises.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Sequence
import logging
import math

from unitcore.config import ConverterConfig, DEFAULT_CONVERTER_CONFIG
from unitcore.function.converters import (
	ATOMIC_KINDS, IDENTITY, AddConverter, ChainConverter, ConverterKind,
	MultiplyConverter, PiPowerConverter, UnitConverter,
)


logger = logging.getLogger(__name__)

FusionRule = Callable[[UnitConverter, UnitConverter, ConverterConfig], Optional[UnitConverter]]


def _float_parameter(value) -> Optional[float]:
	"""Float image of a parameter, or None when it lies outside the float range."""
	try:
		return float(value)
	except OverflowError:
		return None


def _fuse_add(a: AddConverter, b: AddConverter, cfg: ConverterConfig) -> Optional[UnitConverter]:
	if a.is_exact() and b.is_exact():
		return AddConverter(a.offset.add(b.offset))
	x = _float_parameter(a.offset)
	y = _float_parameter(b.offset)
	if x is None or y is None or not math.isfinite(x + y):
		return None
	return AddConverter(x + y)


def _fuse_multiply(a: MultiplyConverter, b: MultiplyConverter, cfg: ConverterConfig) -> Optional[UnitConverter]:
	if a.is_exact() and b.is_exact():
		return MultiplyConverter(a.factor.multiply(b.factor))
	x = _float_parameter(a.factor)
	y = _float_parameter(b.factor)
	if x is None or y is None:
		return None
	product = x * y
	# out of range: keep both factors in the chain
	if product == 0.0 or not math.isfinite(product):
		return None
	if math.isclose(product, 1.0, rel_tol=0.0, abs_tol=cfg.float_identity_tolerance):
		return IDENTITY
	return MultiplyConverter(product)


def _fuse_pi_power(a: PiPowerConverter, b: PiPowerConverter, cfg: ConverterConfig) -> UnitConverter:
	return PiPowerConverter(a.exponent + b.exponent)


def _cancel_same_base(a, b, cfg: ConverterConfig) -> Optional[UnitConverter]:
	if a.base == b.base:
		return IDENTITY
	return None


def _no_fusion(a, b, cfg: ConverterConfig) -> Optional[UnitConverter]:
	return None


# Row: the converter applied first. Column: the converter applied second.
_FUSION_RULES: Dict[ConverterKind, Dict[ConverterKind, FusionRule]] = {
	ConverterKind.ADD: {
		ConverterKind.ADD: _fuse_add,
		ConverterKind.MULTIPLY: _no_fusion,
		ConverterKind.PI_POWER: _no_fusion,
		ConverterKind.EXP: _no_fusion,
		ConverterKind.LOG: _no_fusion,
	},
	ConverterKind.MULTIPLY: {
		ConverterKind.ADD: _no_fusion,
		ConverterKind.MULTIPLY: _fuse_multiply,
		ConverterKind.PI_POWER: _no_fusion,
		ConverterKind.EXP: _no_fusion,
		ConverterKind.LOG: _no_fusion,
	},
	ConverterKind.PI_POWER: {
		ConverterKind.ADD: _no_fusion,
		ConverterKind.MULTIPLY: _no_fusion,
		ConverterKind.PI_POWER: _fuse_pi_power,
		ConverterKind.EXP: _no_fusion,
		ConverterKind.LOG: _no_fusion,
	},
	ConverterKind.EXP: {
		ConverterKind.ADD: _no_fusion,
		ConverterKind.MULTIPLY: _no_fusion,
		ConverterKind.PI_POWER: _no_fusion,
		ConverterKind.EXP: _no_fusion,
		ConverterKind.LOG: _cancel_same_base,
	},
	ConverterKind.LOG: {
		ConverterKind.ADD: _no_fusion,
		ConverterKind.MULTIPLY: _no_fusion,
		ConverterKind.PI_POWER: _no_fusion,
		ConverterKind.EXP: _cancel_same_base,
		ConverterKind.LOG: _no_fusion,
	},
}


def _check_fusion_table() -> None:
	"""Every ordered pair of atomic kinds must have an explicit entry."""
	for first in ATOMIC_KINDS:
		row = _FUSION_RULES.get(first)
		if row is None:
			raise RuntimeError(f"Fusion table has no row for {first.name}")
		for second in ATOMIC_KINDS:
			if second not in row:
				raise RuntimeError(f"Fusion table has no entry for ({first.name}, {second.name})")


_check_fusion_table()


def fuse(a: UnitConverter, b: UnitConverter, config: ConverterConfig = DEFAULT_CONVERTER_CONFIG) -> Optional[UnitConverter]:
	"""Single converter equal to `a` then `b`, or None when they do not fuse."""
	if a.kind not in _FUSION_RULES or b.kind not in _FUSION_RULES[a.kind]:
		return None
	return _FUSION_RULES[a.kind][b.kind](a, b, config)


def _order_linear_runs(items: Sequence[UnitConverter]) -> List[UnitConverter]:
	"""Sort each maximal run of adjacent linear converters into canonical order."""
	out: List[UnitConverter] = []
	run: List[UnitConverter] = []
	for c in items:
		if c.is_linear():
			run.append(c)
			continue
		if run:
			out.extend(sorted(run, key=lambda x: x.sort_key()))
			run = []
		out.append(c)
	if run:
		out.extend(sorted(run, key=lambda x: x.sort_key()))
	return out


def _fuse_adjacent(items: Sequence[UnitConverter], config: ConverterConfig) -> List[UnitConverter]:
	"""Greedy left-to-right fusion; an identity result exposes the previous element again."""
	stack: List[UnitConverter] = []
	for c in items:
		if c.is_identity():
			continue
		if stack:
			fused = fuse(stack[-1], c, config)
			if fused is not None:
				stack.pop()
				if not fused.is_identity():
					stack.append(fused)
				continue
		stack.append(c)
	return stack


def normalize(items: Sequence[UnitConverter], config: ConverterConfig = DEFAULT_CONVERTER_CONFIG) -> UnitConverter:
	"""Simplify a sequence of converters (applied left to right) into one converter."""
	flat: List[UnitConverter] = []
	for c in items:
		flat.extend(c.elements())
	current = flat
	while True:
		reduced = _fuse_adjacent(_order_linear_runs(current), config)
		if reduced == current:
			break
		current = reduced
	if not current:
		return IDENTITY
	if len(current) == 1:
		return current[0]
	chain = ChainConverter(tuple(current))
	logger.debug("composed %d steps into %r", len(flat), chain)
	return chain


def compose(a: UnitConverter, b: UnitConverter, config: ConverterConfig = DEFAULT_CONVERTER_CONFIG) -> UnitConverter:
	"""Converter applying `a` first and then `b`."""
	if not isinstance(a, UnitConverter) or not isinstance(b, UnitConverter):
		raise TypeError("compose expects two UnitConverter instances")
	if a.is_identity():
		return b
	if b.is_identity():
		return a
	if a.kind in _FUSION_RULES and b.kind in _FUSION_RULES:
		fused = fuse(a, b, config)
		if fused is not None:
			return fused
	return normalize((a, b), config)


def compose_all(*converters: UnitConverter, config: ConverterConfig = DEFAULT_CONVERTER_CONFIG) -> UnitConverter:
	"""Left-to-right composition of any number of converters."""
	return normalize(converters, config)
