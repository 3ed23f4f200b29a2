"""
Summary statistics over a collection of quantities.

summarize(qs) expresses every quantity in the unit of the first one and
reports count, min, max, sum and average (sum divided by count). An empty
collection yields count 0 and None for the rest.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Optional

from unitcore.numbers.rational import RationalNumber
from unitcore.quantity.quantity import DEFAULT_ARITHMETIC, Quantity, QuantityArithmetic


@dataclass(frozen=True)
class QuantitySummary:
	count: int
	min: Optional[Quantity] = None
	max: Optional[Quantity] = None
	sum: Optional[Quantity] = None
	average: Optional[Quantity] = None


def _comparable(value):
	if isinstance(value, RationalNumber):
		return value.as_fraction()
	if isinstance(value, (int, float, Decimal, Fraction)):
		return value
	return float(value)


def summarize(quantities: Iterable[Quantity], arithmetic: Optional[QuantityArithmetic] = None) -> QuantitySummary:
	if arithmetic is None:
		arithmetic = DEFAULT_ARITHMETIC
	count = 0
	lo: Optional[Quantity] = None
	hi: Optional[Quantity] = None
	total: Optional[Quantity] = None
	for q in quantities:
		if total is None:
			q_in = q
			total = q
		else:
			q_in = arithmetic.to(q, total.unit)
			total = arithmetic.add(total, q_in)
		if lo is None or _comparable(q_in.value) < _comparable(lo.value):
			lo = q_in
		if hi is None or _comparable(q_in.value) > _comparable(hi.value):
			hi = q_in
		count += 1
	if count == 0:
		return QuantitySummary(0)
	return QuantitySummary(count, lo, hi, total, arithmetic.divide_by(total, count))
