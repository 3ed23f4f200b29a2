"""
Numeric equivalence of converters.

Composition does not normalize every equivalent expression to the same
structure, so equivalence is probed numerically: both converters are evaluated
on a deterministic sample spanning magnitudes 1e-32 … 1e32 and compared with a
relative tolerance. Points where either side is not finite (log of a negative
value, overflow of an exponential) are skipped.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np

from unitcore.function.converters import UnitConverter


class ConverterProbe:
	"""Seeded float probe comparing two converters point by point."""

	def __init__(self, seed: int = 0) -> None:
		self._seed = int(seed)

	def sample(self, n: int) -> np.ndarray:
		"""n values x = u · 10^k with u ~ U[-1, 1] and k uniform in [-32, 32]."""
		rng = np.random.default_rng(self._seed)
		exps = rng.integers(-32, 33, size=int(n))
		factors = rng.uniform(-1.0, 1.0, size=int(n))
		return factors * np.power(10.0, exps)

	def probe(self, a: UnitConverter, b: UnitConverter, n: int, tol: float) -> Tuple[float, int, int]:
		"""
		Return (max_rel_diff, count_exceeding_tol, compared) over n sample points.
		The relative difference is |ya - yb| / max(1, |ya|, |yb|).
		"""
		n = int(n)
		if n <= 0:
			return 0.0, 0, 0
		xs = self.sample(n)
		with np.errstate(all="ignore"):
			ya = a.evaluate_array(xs)
			yb = b.evaluate_array(xs)
			ok = np.isfinite(ya) & np.isfinite(yb)
			ya = ya[ok]
			yb = yb[ok]
			scale = np.maximum(1.0, np.maximum(np.abs(ya), np.abs(yb)))
			d = np.abs(ya - yb) / scale
		if d.size == 0:
			return 0.0, 0, 0
		return float(np.max(d)), int(np.count_nonzero(d > float(tol))), int(d.size)


def converters_equivalent(a: UnitConverter, b: UnitConverter, samples: int = 100, tol: float = 1e-12, seed: int = 0) -> bool:
	"""True iff `a` and `b` agree within `tol` on every finite sample point."""
	if a == b:
		return True
	_, over, _ = ConverterProbe(seed).probe(a, b, samples, tol)
	return over == 0
