# interactive_de/schema/derive.py
"""
Derive schemas from Python type annotations.

Supports scalars, Optional, list/set/tuple/dict, enum.Enum, dataclasses and
pydantic models (RootModel becomes a newtype, a model without fields a unit
struct). `Annotated[X, schema]` overrides derivation for X, which is how
fixed-width integers and tagged unions are declared:

    u8 = Annotated[int, IntSchema(8, signed=False)]

    class Pen(BaseModel):
        colour: str
        size: u8
"""

import collections.abc
import dataclasses
import enum
import logging
import types
import typing
from typing import Annotated, Any, Union

from pydantic import BaseModel, RootModel

from interactive_de.schema.base import Schema
from interactive_de.schema.builtins import (
    BoolSchema,
    BytesSchema,
    DictSchema,
    EnumSchema,
    Field,
    FloatSchema,
    IntSchema,
    ListSchema,
    NewtypeSchema,
    OptionalSchema,
    StrSchema,
    StructSchema,
    TupleSchema,
    UnitSchema,
    UnitStructSchema,
    Variant,
)

logger = logging.getLogger(__name__)

i8 = Annotated[int, IntSchema(8)]
i16 = Annotated[int, IntSchema(16)]
i32 = Annotated[int, IntSchema(32)]
i64 = Annotated[int, IntSchema(64)]
u8 = Annotated[int, IntSchema(8, signed=False)]
u16 = Annotated[int, IntSchema(16, signed=False)]
u32 = Annotated[int, IntSchema(32, signed=False)]
u64 = Annotated[int, IntSchema(64, signed=False)]
f32 = Annotated[float, FloatSchema(32)]
f64 = Annotated[float, FloatSchema(64)]


class _Deferred(Schema):
    """Placeholder for a class whose schema is still being derived (recursive types)."""

    def __init__(self, owner: type) -> None:
        self.owner = owner
        self.target: Schema | None = None

    def _resolved(self) -> Schema:
        if self.target is None:
            raise RuntimeError(f"schema for {self.owner.__name__} was never completed")
        return self.target

    def describe(self):
        return self._resolved().describe()

    def __getattribute__(self, name: str) -> Any:
        if name.startswith("visit_") or name == "expecting":
            return getattr(object.__getattribute__(self, "_resolved")(), name)
        return object.__getattribute__(self, name)

    def __repr__(self) -> str:
        return f"<_Deferred {self.owner.__name__}>"


def _schema_in(metadata: typing.Iterable[Any]) -> Schema | None:
    for item in metadata:
        if isinstance(item, Schema):
            return item
    return None


class _Deriver:
    def __init__(self) -> None:
        self._classes: dict[type, Schema] = {}

    def derive(self, tp: Any) -> Schema:
        if isinstance(tp, Schema):
            return tp

        origin = typing.get_origin(tp)
        args = typing.get_args(tp)

        if origin is Annotated:
            override = _schema_in(args[1:])
            return override if override is not None else self.derive(args[0])

        if origin is Union or origin is types.UnionType:
            members = [a for a in args if a is not type(None)]
            if len(members) == 1 and len(members) < len(args):
                return OptionalSchema(self.derive(members[0]))
            raise TypeError(
                f"untagged union {tp!r} is not supported; declare an EnumSchema with Annotated"
            )

        if origin in (list, set, frozenset) or origin is collections.abc.Sequence:
            item = self.derive(args[0]) if args else StrSchema()
            build = None if origin in (list, collections.abc.Sequence) else origin
            return ListSchema(item, build=build)

        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return ListSchema(self.derive(args[0]), build=tuple)
            if args == ((),):
                return TupleSchema([])
            return TupleSchema([self.derive(a) for a in args])

        if origin is dict or origin is collections.abc.Mapping:
            key, value = args if args else (str, str)
            return DictSchema(self.derive(key), self.derive(value))

        if tp is None or tp is type(None):
            return UnitSchema()
        if tp is bool:
            return BoolSchema()
        if tp is int:
            return IntSchema()
        if tp is float:
            return FloatSchema()
        if tp is str:
            return StrSchema()
        if tp is bytes:
            return BytesSchema()
        if tp is list:
            return ListSchema(StrSchema())
        if tp is dict:
            return DictSchema(StrSchema(), StrSchema())

        if isinstance(tp, type):
            if tp in self._classes:
                return self._classes[tp]
            return self._derive_class(tp)

        raise TypeError(f"cannot derive an interactive schema for {tp!r}")

    def _derive_class(self, cls: type) -> Schema:
        if issubclass(cls, enum.Enum):
            schema = EnumSchema(
                cls.__name__,
                [Variant.unit(member.name) for member in cls],
                build=lambda name, _payload, cls=cls: cls[name],
            )
            self._classes[cls] = schema
            return schema

        is_model = issubclass(cls, BaseModel)
        if not is_model and not dataclasses.is_dataclass(cls):
            raise TypeError(f"cannot derive an interactive schema for class {cls.__name__}")

        deferred = _Deferred(cls)
        self._classes[cls] = deferred
        if is_model and issubclass(cls, RootModel):
            info = cls.model_fields["root"]
            inner = _schema_in(info.metadata) or self.derive(info.annotation)
            schema: Schema = NewtypeSchema(cls.__name__, inner, build=cls)
        else:
            fields = self._model_fields(cls) if is_model else self._dataclass_fields(cls)
            if fields:
                schema = StructSchema(cls.__name__, fields, build=cls)
            else:
                schema = UnitStructSchema(cls.__name__, build=cls)

        deferred.target = schema
        self._classes[cls] = schema
        logger.debug(f"Derived {schema!r} for {cls.__name__}")
        return schema

    def _model_fields(self, cls: type[BaseModel]) -> list[Field]:
        fields = []
        for name, info in cls.model_fields.items():
            schema = _schema_in(info.metadata) or self.derive(info.annotation)
            fields.append(Field(name, schema))
        return fields

    def _dataclass_fields(self, cls: type) -> list[Field]:
        hints = typing.get_type_hints(cls, include_extras=True)
        return [
            Field(f.name, self.derive(hints[f.name]))
            for f in dataclasses.fields(cls)
            if f.init
        ]


def schema_for(tp: Any) -> Schema:
    """
    Derive a schema for a type annotation.

    Raises:
        TypeError: If the annotation (or anything nested in it) has no
            interactive representation
    """
    return _Deriver().derive(tp)
