# interactive_de/drivers.py
"""
Access objects handed to a schema's visitor for composite shapes.

Each one owns a cursor over its children and derives the child's prompt
context before recursing. Children are always requested in order: tuple,
sequence and map indices ascend; struct fields follow declaration order.
Pulling past the end returns END.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from interactive_de.engine import Deserializer
    from interactive_de.schema.base import Schema

logger = logging.getLogger(__name__)


class _End:
    def __repr__(self) -> str:
        return "END"


END: Any = _End()


class SeqLikeAccess(ABC):
    """Pull elements one at a time with next_element()."""

    def __init__(self, parent: "Deserializer") -> None:
        self.parent = parent
        self.index = 0

    @abstractmethod
    def next_element(self, schema: "Schema") -> Any:
        """Return the next child, or END when there are none left."""

    def elements(self, schema: "Schema") -> Iterator[Any]:
        """Yield every remaining element, all built from the same schema."""
        while (value := self.next_element(schema)) is not END:
            yield value


class TupleAccess(SeqLikeAccess):
    """Exactly `length` elements, no confirmation between them."""

    def __init__(self, parent: "Deserializer", length: int) -> None:
        super().__init__(parent)
        self.length = length

    def next_element(self, schema: "Schema") -> Any:
        if self.index >= self.length:
            return END
        value = self.parent.child(f".{self.index}").deserialize(schema)
        self.index += 1
        return value


class SequenceAccess(SeqLikeAccess):
    """User-determined length: a yes/no question precedes every element."""

    def __init__(self, parent: "Deserializer") -> None:
        super().__init__(parent)
        self.done = False

    def next_element(self, schema: "Schema") -> Any:
        if self.done:
            return END
        question = "Any elements to add" if self.index == 0 else "Add another element"
        if not self.parent.confirm(question):
            self.done = True
            logger.debug(f"{self.parent.context.prefix}: sequence closed with {self.index} elements")
            return END
        value = self.parent.child(f"[{self.index}]").deserialize(schema)
        self.index += 1
        return value


class MapLikeAccess(ABC):
    """Pull keys with next_key(), then the matching value with next_value()."""

    def __init__(self, parent: "Deserializer") -> None:
        self.parent = parent
        self.index = 0

    @abstractmethod
    def next_key(self, schema: "Schema") -> Any:
        """Return the next key, or END when there are none left."""

    @abstractmethod
    def next_value(self, schema: "Schema") -> Any:
        """Return the value belonging to the key just pulled."""


class MapAccess(MapLikeAccess):
    """User-determined number of entries; keys are not checked for uniqueness."""

    def __init__(self, parent: "Deserializer") -> None:
        super().__init__(parent)
        self.done = False

    def next_key(self, schema: "Schema") -> Any:
        if self.done:
            return END
        question = "Any map entries to add" if self.index == 0 else "Add another map entry"
        if not self.parent.confirm(question):
            self.done = True
            return END
        return self.parent.child(f".entries[{self.index}].key").deserialize(schema)

    def next_value(self, schema: "Schema") -> Any:
        child = self.parent.child(f".entries[{self.index}].value")
        self.index += 1
        return child.deserialize(schema)


class StructAccess(MapLikeAccess):
    """
    One pass over the declared fields.

    The key for each field is resolved from a pending identifier on the
    child context, so the user is never asked which field comes next.
    """

    def __init__(self, parent: "Deserializer", field_names: tuple[str, ...]) -> None:
        super().__init__(parent)
        self.field_names = field_names

    def next_key(self, schema: "Schema") -> Any:
        if self.index >= len(self.field_names):
            return END
        name = self.field_names[self.index]
        return self.parent.child_with_identifier(f".{name}", name).deserialize(schema)

    def next_value(self, schema: "Schema") -> Any:
        child = self.parent.child(f".{self.field_names[self.index]}")
        self.index += 1
        return child.deserialize(schema)


class VariantAccess:
    """Collects the payload of the variant chosen by EnumAccess."""

    def __init__(self, parent: "Deserializer", enum_name: str, variant_name: str) -> None:
        self.parent = parent
        self.enum_name = enum_name
        self.variant_name = variant_name

    def unit_variant(self) -> None:
        return None

    def newtype_variant(self, schema: "Schema") -> Any:
        child = self.parent.child(f"(as {self.enum_name}::{self.variant_name})")
        return child.deserialize(schema)

    def tuple_variant(self, length: int, visitor: "Schema") -> Any:
        return visitor.visit_seq(TupleAccess(self.parent, length))

    def struct_variant(self, field_names: tuple[str, ...], visitor: "Schema") -> Any:
        return visitor.visit_map(StructAccess(self.parent, field_names))


class EnumAccess:
    """Menu selection for a tagged union."""

    def __init__(self, parent: "Deserializer", name: str, variant_names: tuple[str, ...]) -> None:
        self.parent = parent
        self.name = name
        self.variant_names = variant_names

    def variant(self, schema: "Schema") -> tuple[Any, VariantAccess]:
        """
        Ask the user for a variant, then resolve it through `schema`.

        The chosen name is pushed as a pending identifier, so the schema's
        identifier request is answered without another prompt.
        """
        i = self.parent.choose_one(self.name, self.variant_names)
        chosen = self.variant_names[i]
        logger.debug(f"{self.parent.context.prefix}: chose {self.name}::{chosen}")
        value = self.parent.child_with_identifier("", chosen).deserialize(schema)
        return value, VariantAccess(self.parent, self.name, chosen)
