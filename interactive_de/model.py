# interactive_de/model.py
"""
Demo schema: a zoo of animals.

Exercises every driver: struct (Zoo, Leg), open sequence (animals),
enum with unit, newtype, tuple and struct variants (Animal), newtype
structs (Head, Tail), a unit struct (Tongue) and a fixed-size tuple
(Kangaroo legs).
"""

from typing import Annotated, Literal

from pydantic import BaseModel, RootModel

from interactive_de.schema import EnumSchema, Variant, schema_for
from interactive_de.schema.derive import u32


class Head(RootModel[u32]):
    pass


class Tail(RootModel[u32]):
    pass


class Leg(BaseModel):
    name: str


class Tongue(BaseModel):
    pass


class Kangaroo(BaseModel):
    legs: tuple[Leg, Leg]
    tail: Tail


AnimalKind = Literal[
    "KimodoDragon",
    "Aardvark",
    "WhiteTiger",
    "Elephant",
    "Kangaroo",
    "Penguin",
    "Langur",
    "Giraffe",
    "Springbok",
    "Python",
    "Ruby",
    "Flamingo",
    "Panda",
]


class Animal(BaseModel):
    """One zoo resident; `payload` depends on the variant."""

    variant: AnimalKind
    payload: Tongue | tuple[Head, Tail] | Kangaroo | None = None


ANIMAL = EnumSchema(
    "Animal",
    [
        Variant.unit("KimodoDragon"),
        Variant.newtype("Aardvark", schema_for(Tongue)),
        Variant.unit("WhiteTiger"),
        Variant.unit("Elephant"),
        Variant.struct("Kangaroo", schema_for(Kangaroo).fields, build=Kangaroo),
        Variant.unit("Penguin"),
        Variant.unit("Langur"),
        Variant.unit("Giraffe"),
        Variant.unit("Springbok"),
        Variant.tuple("Python", [schema_for(Head), schema_for(Tail)]),
        Variant.unit("Ruby"),
        Variant.unit("Flamingo"),
        Variant.unit("Panda"),
    ],
    build=lambda variant, payload: Animal(variant=variant, payload=payload),
)


class Zoo(BaseModel):
    animals: list[Annotated[Animal, ANIMAL]]


ZOO = schema_for(Zoo)
