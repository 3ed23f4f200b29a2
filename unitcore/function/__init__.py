from .converters import (
	UnitConverter, ConverterKind, IdentityConverter, IDENTITY, AddConverter,
	MultiplyConverter, PiPowerConverter, ExpConverter, LogConverter, ChainConverter,
)
from .composition import compose, compose_all, normalize, fuse
from .prefixes import MetricPrefix, BinaryPrefix, power_converter
from .equivalence import ConverterProbe, converters_equivalent

__all__ = [
	"UnitConverter", "ConverterKind", "IdentityConverter", "IDENTITY", "AddConverter",
	"MultiplyConverter", "PiPowerConverter", "ExpConverter", "LogConverter", "ChainConverter",
	"compose", "compose_all", "normalize", "fuse",
	"MetricPrefix", "BinaryPrefix", "power_converter",
	"ConverterProbe", "converters_equivalent",
]
