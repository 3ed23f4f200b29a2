"""Tests for converter composition and simplification."""

from decimal import Decimal

import pytest

from conftest import CANDIDATES, LINEAR_CANDIDATES
from unitcore.function import (
	IDENTITY, AddConverter, ChainConverter, ExpConverter, LogConverter, MultiplyConverter,
	PiPowerConverter, compose, compose_all, converters_equivalent, fuse,
)
from unitcore.function.converters import ATOMIC_KINDS
from unitcore.function.composition import _FUSION_RULES
from unitcore.numbers import UNLIMITED, RationalNumber


def identity_of(c):
	return c.compose(c.inverse())


def commutes(a, b):
	"""a∘b followed by the inverse of b∘a collapses to identity."""
	return a.compose(b).compose(b.compose(a).inverse()).is_identity()


class TestFusion:
	def test_identity_operand_returns_other_unchanged(self):
		add = AddConverter(3)
		assert compose(IDENTITY, add) is add
		assert compose(add, MultiplyConverter(1)) is add

	def test_add_sums_offsets(self):
		fused = AddConverter(3).compose(AddConverter(4))
		assert fused == AddConverter(7)
		assert fused.is_exact()

	def test_add_mixed_exactness_goes_float(self):
		fused = AddConverter(RationalNumber(1, 2)).compose(AddConverter(0.25))
		assert fused == AddConverter(0.75)

	def test_exact_multiply_stays_exact(self):
		fused = MultiplyConverter(RationalNumber(1, 3)).compose(MultiplyConverter(RationalNumber(3, 2)))
		assert fused == MultiplyConverter(RationalNumber(1, 2))
		assert fused.is_exact()

	def test_mixed_multiply_goes_float(self):
		fused = MultiplyConverter(2.0).compose(MultiplyConverter(RationalNumber(1, 4)))
		assert fused == MultiplyConverter(0.5)

	def test_pi_powers_cancel(self):
		fused = PiPowerConverter(2).compose(PiPowerConverter(-2))
		assert fused.is_identity()

	def test_pi_powers_sum(self):
		assert PiPowerConverter(2).compose(PiPowerConverter(3)) == PiPowerConverter(5)

	def test_exp_log_same_base_cancel(self):
		assert ExpConverter(2.0).compose(LogConverter(2.0)).is_identity()
		assert LogConverter(2.0).compose(ExpConverter(2.0)).is_identity()

	def test_exp_log_different_base_chain(self):
		c = ExpConverter(2.0).compose(LogConverter(10.0))
		assert isinstance(c, ChainConverter)
		assert len(c) == 2

	def test_fusion_table_is_complete(self):
		for first in ATOMIC_KINDS:
			for second in ATOMIC_KINDS:
				assert second in _FUSION_RULES[first]

	def test_no_fusion_between_families(self):
		assert fuse(AddConverter(1), MultiplyConverter(2)) is None


class TestOutOfRangeFusion:
	def test_float_product_overflow_stays_chained(self):
		c = compose(MultiplyConverter(1e200), MultiplyConverter(1e200))
		assert isinstance(c, ChainConverter)
		assert len(c) == 2
		assert c.evaluate(1e-300) == pytest.approx(1e100)

	def test_float_product_underflow_stays_chained(self):
		c = compose(MultiplyConverter(1e-200), MultiplyConverter(1e-200))
		assert isinstance(c, ChainConverter)
		assert c.evaluate(1e300) == pytest.approx(1e-100)

	def test_float_sum_overflow_stays_chained(self):
		c = compose(AddConverter(1e308), AddConverter(1e308))
		assert isinstance(c, ChainConverter)
		assert len(c) == 2

	def test_chained_factors_still_cancel_with_inverse(self):
		c = compose(MultiplyConverter(1e200), MultiplyConverter(1e200))
		assert c.compose(c.inverse()).is_identity()

	def test_huge_exact_factor_composes(self):
		huge = MultiplyConverter(RationalNumber(10 ** 400))
		c = compose(huge, PiPowerConverter(1))
		assert isinstance(c, ChainConverter)
		assert huge in c.elements()
		assert compose(huge, MultiplyConverter(RationalNumber(1, 10 ** 400))).is_identity()

	def test_huge_exact_factor_with_float_factor(self):
		c = compose(MultiplyConverter(RationalNumber(10 ** 400)), MultiplyConverter(2.0))
		assert isinstance(c, ChainConverter)
		assert len(c) == 2


class TestChains:
	def test_add_multiply_chain(self):
		c = compose(AddConverter(3), MultiplyConverter(2))
		assert isinstance(c, ChainConverter)
		assert list(c) == [AddConverter(3), MultiplyConverter(2)]

	def test_nested_chains_flatten(self):
		left = compose(AddConverter(3), MultiplyConverter(2))
		right = compose(AddConverter(1), MultiplyConverter(3))
		c = left.compose(right)
		assert len(c) == 4
		for e in c:
			assert not isinstance(e, ChainConverter)

	def test_fusion_across_chain_boundary(self):
		a = AddConverter(3)
		b = MultiplyConverter(2.0)
		ab = a.compose(b)
		ba = b.inverse().compose(a)
		assert ab.compose(ba) == a.compose(a)

	def test_scenario_add_mul_add(self):
		left = compose_all(AddConverter(3), MultiplyConverter(2), AddConverter(-7))
		right = compose(MultiplyConverter(2), AddConverter(-1))
		assert left.evaluate(5) == 9
		assert right.evaluate(5) == 9

	def test_equivalent_chains_need_not_be_structurally_equal(self):
		left = compose_all(AddConverter(3), MultiplyConverter(2), AddConverter(-7))
		right = compose(MultiplyConverter(2), AddConverter(-1))
		assert left != right
		assert converters_equivalent(left, right)

	def test_exact_scenario_on_rationals(self):
		left = compose_all(AddConverter(3), MultiplyConverter(2), AddConverter(-7))
		assert left.convert(RationalNumber(1, 4)) == RationalNumber(-1, 2)

	def test_affine_and_linear_do_not_commute(self):
		ab = compose(AddConverter(3), MultiplyConverter(2))
		ba = compose(MultiplyConverter(2), AddConverter(3))
		assert ab != ba
		assert not converters_equivalent(ab, ba)

	def test_adds_of_different_offset_commute_numerically(self):
		assert commutes(AddConverter(3), AddConverter(-5))

	def test_mixed_linear_families_commute_structurally(self):
		assert compose(MultiplyConverter(2), PiPowerConverter(1)) == compose(PiPowerConverter(1), MultiplyConverter(2))

	def test_associativity(self):
		a = compose(AddConverter(3), MultiplyConverter(2.0))
		b = PiPowerConverter(1)
		c = LogConverter(10.0)
		assert converters_equivalent(a.compose(b).compose(c), a.compose(b.compose(c)))


@pytest.mark.parametrize("c", CANDIDATES, ids=repr)
class TestCompositionLaws:
	def test_compose_with_inverse_is_identity(self, c):
		i = identity_of(c)
		assert i.is_identity()
		assert i.is_linear()
		assert i.compose(i).is_identity()

	def test_identity_calculus(self, c, values):
		i = identity_of(c)
		for x in values:
			assert i.evaluate(float(x)) == float(x)
			d = Decimal(repr(float(x)))
			assert i.evaluate(d, UNLIMITED) == d

	def test_commutes_with_itself_and_identity(self, c):
		i = identity_of(c)
		assert commutes(c, c)
		assert commutes(c, i)
		assert commutes(i, c)

	def test_associativity_with_inverse(self, c):
		inv = c.inverse()
		left = c.compose(inv).compose(c)
		right = c.compose(inv.compose(c))
		assert converters_equivalent(left, right)
		assert converters_equivalent(left, c)


@pytest.mark.parametrize("a", LINEAR_CANDIDATES, ids=repr)
@pytest.mark.parametrize("b", LINEAR_CANDIDATES, ids=repr)
def test_linear_converters_commute(a, b, values):
	assert commutes(a, b)
	ab = a.compose(b)
	ba = b.compose(a)
	for x in values:
		assert ab.evaluate(float(x)) == pytest.approx(ba.evaluate(float(x)), rel=1e-12, abs=1e-12)
