import numpy as np
import pytest

from unitcore.function import (
	AddConverter, ExpConverter, LogConverter, MultiplyConverter, PiPowerConverter, compose,
)
from unitcore.numbers import RationalNumber


CANDIDATES = [
	AddConverter(3),
	AddConverter(0.5),
	AddConverter(RationalNumber(-7, 3)),
	MultiplyConverter(2.0),
	MultiplyConverter(0.001),
	MultiplyConverter(RationalNumber(3, 7)),
	PiPowerConverter(1),
	PiPowerConverter(-2),
	ExpConverter(),
	LogConverter(10.0),
	compose(AddConverter(3), MultiplyConverter(2.0)),
	compose(MultiplyConverter.of_ratio(1, 180), PiPowerConverter(1)),
]

LINEAR_CANDIDATES = [c for c in CANDIDATES if c.is_linear()]


def random_values(n: int, seed: int = 0) -> np.ndarray:
	rng = np.random.default_rng(seed)
	exps = rng.integers(-32, 33, size=n)
	return rng.uniform(-1.0, 1.0, size=n) * np.power(10.0, exps)


@pytest.fixture(scope="module")
def values():
	return random_values(100)
