# interactive_de/schema/base.py
"""
Capability interface implemented by the schema owner.

A schema describes the shape it needs next and then receives the engine's
callbacks: a parsed scalar, an access object to pull children from, or a
deserializer to recurse into. Callbacks a schema does not override reject
the input with CustomError, so a mismatched shape never passes silently.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from interactive_de.errors import CustomError
from interactive_de.shapes import ShapeRequest

if TYPE_CHECKING:
    from interactive_de.drivers import EnumAccess, MapLikeAccess, SeqLikeAccess
    from interactive_de.engine import Deserializer


class Schema(ABC):
    """Declares a shape and builds a value from what the engine collects."""

    expecting = "a value"

    @abstractmethod
    def describe(self) -> ShapeRequest:
        """Return the shape request the engine should satisfy for this value."""

    def visit_bool(self, value: bool) -> Any:
        raise self.invalid_type("boolean")

    def visit_int(self, value: int) -> Any:
        raise self.invalid_type("integer")

    def visit_float(self, value: float) -> Any:
        raise self.invalid_type("floating point")

    def visit_str(self, value: str) -> Any:
        raise self.invalid_type("string")

    def visit_identifier(self, value: str) -> Any:
        return self.visit_str(value)

    def visit_none(self) -> Any:
        raise self.invalid_type("Option value")

    def visit_some(self, deserializer: "Deserializer") -> Any:
        raise self.invalid_type("Option value")

    def visit_unit(self) -> Any:
        raise self.invalid_type("unit value")

    def visit_newtype(self, deserializer: "Deserializer") -> Any:
        raise self.invalid_type("newtype struct")

    def visit_seq(self, access: "SeqLikeAccess") -> Any:
        raise self.invalid_type("sequence")

    def visit_map(self, access: "MapLikeAccess") -> Any:
        raise self.invalid_type("map")

    def visit_enum(self, access: "EnumAccess") -> Any:
        raise self.invalid_type("enum")

    def invalid_type(self, unexpected: str) -> CustomError:
        return CustomError(f"invalid type: {unexpected}, expected {self.expecting}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()!r}>"
