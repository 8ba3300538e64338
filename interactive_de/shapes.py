# interactive_de/shapes.py
"""
Shape requests: what a schema declares it needs next.

A request carries only structural parameters (names, arity, widths). The
children's own schemas stay with the schema owner and are handed to the
access objects one at a time.
"""

from dataclasses import dataclass

from interactive_de.errors import CustomError
from interactive_de.scalars import float_type_name, integer_type_name


@dataclass(frozen=True)
class ShapeRequest:
    """Base class for every request kind."""

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Bool(ShapeRequest):
    pass


@dataclass(frozen=True)
class Integer(ShapeRequest):
    bits: int = 64
    signed: bool = True

    @property
    def type_name(self) -> str:
        return integer_type_name(self.bits, self.signed)


@dataclass(frozen=True)
class Float(ShapeRequest):
    bits: int = 64

    @property
    def type_name(self) -> str:
        return float_type_name(self.bits)


@dataclass(frozen=True)
class String(ShapeRequest):
    pass


@dataclass(frozen=True)
class Bytes(ShapeRequest):
    pass


@dataclass(frozen=True)
class Char(ShapeRequest):
    pass


@dataclass(frozen=True)
class AnyValue(ShapeRequest):
    """Self-describing data with no declared shape."""


@dataclass(frozen=True)
class IgnoredAny(ShapeRequest):
    """A value the schema wants skipped."""


@dataclass(frozen=True)
class Option(ShapeRequest):
    pass


@dataclass(frozen=True)
class Unit(ShapeRequest):
    pass


@dataclass(frozen=True)
class UnitNamed(ShapeRequest):
    name: str


@dataclass(frozen=True)
class NewtypeWrap(ShapeRequest):
    name: str = ""


@dataclass(frozen=True)
class FixedTuple(ShapeRequest):
    length: int


@dataclass(frozen=True)
class OpenSequence(ShapeRequest):
    pass


@dataclass(frozen=True)
class Map(ShapeRequest):
    pass


@dataclass(frozen=True)
class Struct(ShapeRequest):
    name: str
    field_names: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(set(self.field_names)) != len(self.field_names):
            raise CustomError(f"struct {self.name} has duplicate field names")


@dataclass(frozen=True)
class Enum(ShapeRequest):
    type_name: str
    variant_names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.variant_names:
            raise CustomError(f"enum {self.type_name} has no variants")
        if len(set(self.variant_names)) != len(self.variant_names):
            raise CustomError(f"enum {self.type_name} has duplicate variant names")


@dataclass(frozen=True)
class Identifier(ShapeRequest):
    """Which field or variant is this? Resolved from the context when possible."""


UNSUPPORTED = (AnyValue, Bytes, Char, IgnoredAny)
