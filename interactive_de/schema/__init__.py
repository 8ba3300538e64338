# interactive_de/schema/__init__.py
"""Schema-owner side: the visitor interface, built-in schemas and derivation."""

from .base import Schema
from .builtins import (
    BoolSchema,
    BytesSchema,
    DictSchema,
    EnumSchema,
    EnumValue,
    Field,
    FieldIdentifierSchema,
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
    VariantIdentifierSchema,
)
from .derive import schema_for

__all__ = [
    "Schema",
    "BoolSchema",
    "BytesSchema",
    "DictSchema",
    "EnumSchema",
    "EnumValue",
    "Field",
    "FieldIdentifierSchema",
    "FloatSchema",
    "IntSchema",
    "ListSchema",
    "NewtypeSchema",
    "OptionalSchema",
    "StrSchema",
    "StructSchema",
    "TupleSchema",
    "UnitSchema",
    "UnitStructSchema",
    "Variant",
    "VariantIdentifierSchema",
    "schema_for",
]
