# interactive_de/schema/builtins.py
"""
Ready-made schemas for scalars, containers, records and tagged unions.

Composite schemas take an optional `build` callable that turns the
collected children into the caller's own type. Exceptions raised by
`build` (including pydantic validation errors) are reported as
CustomError chained from the original exception.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from interactive_de import shapes
from interactive_de.drivers import END
from interactive_de.errors import CustomError
from interactive_de.schema.base import Schema

logger = logging.getLogger(__name__)

_MISSING: Any = object()


def _construct(build: Callable[..., Any], what: str, *args: Any, **kwargs: Any) -> Any:
    try:
        return build(*args, **kwargs)
    except (ValidationError, TypeError, ValueError) as e:
        raise CustomError(f"invalid value for {what}") from e


def _backticked(names: Iterable[str]) -> str:
    return ", ".join(f"`{n}`" for n in names)


class BoolSchema(Schema):
    expecting = "a boolean"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Bool()

    def visit_bool(self, value: bool) -> bool:
        return value


class IntSchema(Schema):
    """Fixed-width integer; the width only bounds what the prompt accepts."""

    expecting = "an integer"

    def __init__(self, bits: int = 64, signed: bool = True) -> None:
        if bits not in (8, 16, 32, 64, 128):
            raise ValueError(f"unsupported integer width: {bits}")
        self.bits = bits
        self.signed = signed

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Integer(self.bits, self.signed)

    def visit_int(self, value: int) -> int:
        return value


class FloatSchema(Schema):
    expecting = "a float"

    def __init__(self, bits: int = 64) -> None:
        if bits not in (32, 64):
            raise ValueError(f"unsupported float width: {bits}")
        self.bits = bits

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Float(self.bits)

    def visit_float(self, value: float) -> float:
        return value

    def visit_int(self, value: int) -> float:
        return float(value)


class StrSchema(Schema):
    expecting = "a string"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.String()

    def visit_str(self, value: str) -> str:
        return value


class BytesSchema(Schema):
    """Raw bytes. The engine refuses this shape; kept so schemas can declare it."""

    expecting = "a byte array"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Bytes()


class UnitSchema(Schema):
    expecting = "unit"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Unit()

    def visit_unit(self) -> None:
        return None


class UnitStructSchema(Schema):
    def __init__(self, name: str, build: Callable[[], Any] | None = None) -> None:
        self.name = name
        self.build = build
        self.expecting = f"unit struct {name}"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.UnitNamed(self.name)

    def visit_unit(self) -> Any:
        if self.build is None:
            return None
        return _construct(self.build, self.name)


class OptionalSchema(Schema):
    """Present/absent wrapper; transparent to prompt naming."""

    expecting = "option"

    def __init__(self, inner: Schema) -> None:
        self.inner = inner

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Option()

    def visit_none(self) -> None:
        return None

    def visit_some(self, deserializer) -> Any:
        return deserializer.deserialize(self.inner)


class NewtypeSchema(Schema):
    def __init__(self, name: str, inner: Schema, build: Callable[[Any], Any] | None = None) -> None:
        self.name = name
        self.inner = inner
        self.build = build
        self.expecting = f"tuple struct {name}"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.NewtypeWrap(self.name)

    def visit_newtype(self, deserializer) -> Any:
        value = deserializer.deserialize(self.inner)
        if self.build is None:
            return value
        return _construct(self.build, self.name, value)


class TupleSchema(Schema):
    """Fixed arity; element i is built from items[i]."""

    def __init__(self, items: Iterable[Schema], build: Callable[..., Any] | None = None, name: str = "tuple") -> None:
        self.items = list(items)
        self.build = build
        self.name = name
        self.expecting = f"a tuple of size {len(self.items)}"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.FixedTuple(len(self.items))

    def visit_seq(self, access) -> Any:
        values = []
        for i, item in enumerate(self.items):
            value = access.next_element(item)
            if value is END:
                raise CustomError(f"invalid length {i}, expected {self.expecting}")
            values.append(value)
        if self.build is None:
            return tuple(values)
        return _construct(self.build, self.name, *values)


class ListSchema(Schema):
    """Open-ended sequence; `build` receives the collected list."""

    expecting = "a sequence"

    def __init__(self, item: Schema, build: Callable[[list], Any] | None = None) -> None:
        self.item = item
        self.build = build

    def describe(self) -> shapes.ShapeRequest:
        return shapes.OpenSequence()

    def visit_seq(self, access) -> Any:
        values = list(access.elements(self.item))
        if self.build is None:
            return values
        return _construct(self.build, "sequence", values)


class DictSchema(Schema):
    """
    Key/value map.

    Later entries overwrite earlier ones with an equal key, like a dict
    literal. Unhashable keys are rejected as a CustomError.
    """

    expecting = "a map"

    def __init__(self, key: Schema, value: Schema, build: Callable[[dict], Any] | None = None) -> None:
        self.key = key
        self.value = value
        self.build = build

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Map()

    def visit_map(self, access) -> Any:
        result: dict = {}
        while (key := access.next_key(self.key)) is not END:
            value = access.next_value(self.value)
            try:
                if key in result:
                    logger.debug(f"Duplicate map key {key!r} replaces earlier entry")
                result[key] = value
            except TypeError as e:
                raise CustomError(f"map key {key!r} is not hashable") from e
        if self.build is None:
            return result
        return _construct(self.build, "map", result)


class FieldIdentifierSchema(Schema):
    """Resolves a struct key to one of the declared field names."""

    expecting = "field identifier"

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Identifier()

    def visit_str(self, value: str) -> str:
        if value not in self.names:
            raise CustomError(f"unknown field `{value}`, expected one of {_backticked(self.names)}")
        return value


class VariantIdentifierSchema(FieldIdentifierSchema):
    expecting = "variant identifier"

    def visit_str(self, value: str) -> str:
        if value not in self.names:
            raise CustomError(f"unknown variant `{value}`, expected one of {_backticked(self.names)}")
        return value


@dataclass
class Field:
    """A named struct field. `default` is used only if the field is never supplied."""

    name: str
    schema: Schema
    default: Any = field(default=_MISSING, repr=False)


def _normalize_fields(fields: Iterable[Field] | Mapping[str, Schema]) -> list[Field]:
    if isinstance(fields, Mapping):
        return [Field(name, schema) for name, schema in fields.items()]
    return list(fields)


class StructSchema(Schema):
    """
    Record with fixed, named fields collected in declared order.

    Without `build` the result is a dict of field name to value; with it,
    `build(**values)` is called.
    """

    def __init__(
        self,
        name: str,
        fields: Iterable[Field] | Mapping[str, Schema],
        build: Callable[..., Any] | None = None,
    ) -> None:
        self.name = name
        self.fields = _normalize_fields(fields)
        self.build = build
        self.expecting = f"struct {name}"

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Struct(self.name, self.field_names)

    def visit_map(self, access) -> Any:
        by_name = {f.name: f for f in self.fields}
        identifier = FieldIdentifierSchema(self.field_names)
        values: dict[str, Any] = {}
        while (key := access.next_key(identifier)) is not END:
            if key in values:
                raise CustomError(f"duplicate field `{key}`")
            values[key] = access.next_value(by_name[key].schema)

        for f in self.fields:
            if f.name in values:
                continue
            if f.default is _MISSING:
                raise CustomError(f"missing field `{f.name}`")
            values[f.name] = f.default

        if self.build is None:
            return values
        return _construct(self.build, self.name, **values)


@dataclass(frozen=True)
class EnumValue:
    """Default result of an EnumSchema without its own `build`."""

    type_name: str
    variant: str
    payload: Any = None


@dataclass
class Variant:
    """
    One alternative of a tagged union.

    `payload` is None for unit variants, a Schema for newtype variants and a
    list of Schemas (tuple) or Fields (struct) otherwise. A variant-level
    `build` shapes the payload before the enum-level `build` sees it.
    """

    name: str
    kind: str
    payload: Any = None
    build: Callable[..., Any] | None = None

    @classmethod
    def unit(cls, name: str, build: Callable[[], Any] | None = None) -> "Variant":
        return cls(name, "unit", None, build)

    @classmethod
    def newtype(cls, name: str, schema: Schema, build: Callable[[Any], Any] | None = None) -> "Variant":
        return cls(name, "newtype", schema, build)

    @classmethod
    def tuple(cls, name: str, items: Iterable[Schema], build: Callable[..., Any] | None = None) -> "Variant":
        return cls(name, "tuple", list(items), build)

    @classmethod
    def struct(
        cls, name: str, fields: Iterable[Field] | Mapping[str, Schema], build: Callable[..., Any] | None = None
    ) -> "Variant":
        return cls(name, "struct", _normalize_fields(fields), build)


class EnumSchema(Schema):
    """
    Tagged union. The user picks a variant from a menu, then its payload
    (if any) is collected.

    `build(variant_name, payload)` produces the final value; the default is
    an EnumValue.
    """

    def __init__(
        self,
        name: str,
        variants: Iterable[Variant],
        build: Callable[[str, Any], Any] | None = None,
    ) -> None:
        self.name = name
        self.variants = {v.name: v for v in variants}
        self.build = build
        self.expecting = f"enum {name}"

    def describe(self) -> shapes.ShapeRequest:
        return shapes.Enum(self.name, tuple(self.variants))

    def visit_enum(self, access) -> Any:
        chosen, variant_access = access.variant(VariantIdentifierSchema(self.variants))
        variant = self.variants[chosen]
        label = f"{self.name}::{chosen}"

        if variant.kind == "unit":
            variant_access.unit_variant()
            payload = None if variant.build is None else _construct(variant.build, label)
        elif variant.kind == "newtype":
            payload = variant_access.newtype_variant(variant.payload)
            if variant.build is not None:
                payload = _construct(variant.build, label, payload)
        elif variant.kind == "tuple":
            payload = variant_access.tuple_variant(
                len(variant.payload), TupleSchema(variant.payload, variant.build, name=label)
            )
        elif variant.kind == "struct":
            payload = variant_access.struct_variant(
                tuple(f.name for f in variant.payload),
                StructSchema(label, variant.payload, variant.build),
            )
        else:
            raise CustomError(f"unknown variant kind {variant.kind!r} for {label}")

        if self.build is None:
            return EnumValue(self.name, chosen, payload)
        return _construct(self.build, self.name, chosen, payload)
