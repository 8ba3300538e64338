# interactive_de/engine.py
"""
Interactive deserialization engine.

A Deserializer pairs a LineChannel with one PromptContext. deserialize()
asks the schema for its shape request and dispatches to the matching
driver, which talks to the channel and recurses into child deserializers
with derived contexts. Nothing here catches InteractiveError: a quit at
any depth unwinds straight to the caller of deserialize_interactive().
"""

import logging
from typing import Any

from interactive_de import shapes
from interactive_de.channel import LineChannel
from interactive_de.config.schema import InteractiveConfig
from interactive_de.context import PromptContext
from interactive_de.drivers import (
    EnumAccess,
    MapAccess,
    SequenceAccess,
    StructAccess,
    TupleAccess,
)
from interactive_de.errors import UnsupportedShapeError
from interactive_de.scalars import integer_parser, parse_bool, parse_float
from interactive_de.schema.base import Schema

logger = logging.getLogger(__name__)

_MENU_INDEX = integer_parser(64, signed=False)

# ShapeRequest type -> driver method name
_DRIVERS: dict[type[shapes.ShapeRequest], str] = {
    shapes.Bool: "_deserialize_bool",
    shapes.Integer: "_deserialize_integer",
    shapes.Float: "_deserialize_float",
    shapes.String: "_deserialize_string",
    shapes.Option: "_deserialize_option",
    shapes.Unit: "_deserialize_unit",
    shapes.UnitNamed: "_deserialize_unit_named",
    shapes.NewtypeWrap: "_deserialize_newtype",
    shapes.FixedTuple: "_deserialize_tuple",
    shapes.OpenSequence: "_deserialize_sequence",
    shapes.Map: "_deserialize_map",
    shapes.Struct: "_deserialize_struct",
    shapes.Enum: "_deserialize_enum",
    shapes.Identifier: "_deserialize_identifier",
}


class Deserializer:
    """
    Engine bound to one node of the value being built.

    Instances are cheap and single-purpose: drivers create a fresh child
    for every recursive descent and never modify the parent's context.
    """

    def __init__(self, channel: LineChannel, context: PromptContext) -> None:
        self.channel = channel
        self.context = context

    def child(self, fragment: str) -> "Deserializer":
        return Deserializer(self.channel, self.context.child(fragment))

    def child_with_identifier(self, fragment: str, identifier: str) -> "Deserializer":
        return Deserializer(self.channel, self.context.child_with_identifier(fragment, identifier))

    def deserialize(self, schema: Schema) -> Any:
        """
        Build one value for `schema` at this node.

        Raises:
            UnsupportedShapeError: If the schema requests a shape with no driver
            QuitRequested: If the user quits at any nested prompt
            ChannelError: If the text channel fails
            CustomError: If the schema rejects what was entered
        """
        request = schema.describe()
        method = _DRIVERS.get(type(request))
        if method is None:
            raise UnsupportedShapeError(request.kind)
        logger.debug(f"{self.context.prefix}: {request.kind}")
        return getattr(self, method)(request, schema)

    # -- channel helpers -------------------------------------------------

    def confirm(self, question: str) -> bool:
        return self.channel.confirm(self.context.confirm_prompt(question))

    def choose_one(self, name: str, variant_names: tuple[str, ...]) -> int:
        """Print a numbered menu and read an index until it is in range."""
        pad = self.context.pad
        self.channel.echo(f"{pad}Choose one of:")
        for i, variant in enumerate(variant_names):
            self.channel.echo(f"{pad}  {i}. {variant}")
        prompt = self.context.line_prompt(name)
        while True:
            i = self.channel.read(prompt, _MENU_INDEX)
            if i < len(variant_names):
                return i
            self.channel.echo(f"  please choose a value in 0..{len(variant_names)}")

    # -- leaves ----------------------------------------------------------

    def _deserialize_bool(self, request: shapes.Bool, schema: Schema) -> Any:
        value = self.channel.read(self.context.typed_prompt("bool"), parse_bool)
        return schema.visit_bool(value)

    def _deserialize_integer(self, request: shapes.Integer, schema: Schema) -> Any:
        parser = integer_parser(request.bits, request.signed)
        value = self.channel.read(self.context.typed_prompt(request.type_name), parser)
        return schema.visit_int(value)

    def _deserialize_float(self, request: shapes.Float, schema: Schema) -> Any:
        value = self.channel.read(self.context.typed_prompt(request.type_name), parse_float)
        return schema.visit_float(value)

    def _deserialize_string(self, request: shapes.String, schema: Schema) -> Any:
        return schema.visit_str(self.channel.read_line(self.context.line_prompt("String")))

    def _deserialize_identifier(self, request: shapes.Identifier, schema: Schema) -> Any:
        identifier, context = self.context.pop_identifier()
        if identifier is None:
            identifier = self.channel.read_line(context.line_prompt("identifier"))
        return schema.visit_identifier(identifier)

    def _deserialize_unit(self, request: shapes.Unit, schema: Schema) -> Any:
        self.channel.echo(f"{self.context.typed_prompt('()')}(no input required)")
        return schema.visit_unit()

    def _deserialize_unit_named(self, request: shapes.UnitNamed, schema: Schema) -> Any:
        self.channel.echo(f"{self.context.typed_prompt(request.name)}(no input required)")
        return schema.visit_unit()

    # -- wrappers --------------------------------------------------------

    def _deserialize_option(self, request: shapes.Option, schema: Schema) -> Any:
        if self.confirm("option"):
            return schema.visit_some(self)
        return schema.visit_none()

    def _deserialize_newtype(self, request: shapes.NewtypeWrap, schema: Schema) -> Any:
        return schema.visit_newtype(self.child(".0"))

    # -- composites ------------------------------------------------------

    def _deserialize_tuple(self, request: shapes.FixedTuple, schema: Schema) -> Any:
        return schema.visit_seq(TupleAccess(self, request.length))

    def _deserialize_sequence(self, request: shapes.OpenSequence, schema: Schema) -> Any:
        return schema.visit_seq(SequenceAccess(self))

    def _deserialize_map(self, request: shapes.Map, schema: Schema) -> Any:
        return schema.visit_map(MapAccess(self))

    def _deserialize_struct(self, request: shapes.Struct, schema: Schema) -> Any:
        pad = self.context.pad
        self.channel.echo(f"{pad}struct {request.name} {{")
        for name in request.field_names:
            self.channel.echo(f"{pad}    {name},")
        self.channel.echo(f"{pad}}}")
        return schema.visit_map(StructAccess(self, request.field_names))

    def _deserialize_enum(self, request: shapes.Enum, schema: Schema) -> Any:
        return schema.visit_enum(EnumAccess(self, request.type_name, request.variant_names))


def deserialize_interactive(
    schema: Schema,
    name: str,
    channel: LineChannel | None = None,
    config: InteractiveConfig | None = None,
) -> Any:
    """
    Build a complete value for `schema` by prompting over `channel`.

    Args:
        schema: Root schema
        name: Display name of the root value (first segment of every prompt)
        channel: Line channel (stdin/stdout when omitted)
        config: Prompt settings (defaults when omitted)

    Returns:
        Whatever the root schema builds
    """
    config = config or InteractiveConfig()
    if channel is None:
        channel = LineChannel(quit_sentinels=config.prompt.quit_sentinels)
    context = PromptContext.root(name, indent_step=config.prompt.indent_step)
    logger.info(f"Starting interactive construction of '{name}'")
    value = Deserializer(channel, context).deserialize(schema)
    logger.info(f"Finished interactive construction of '{name}'")
    return value
