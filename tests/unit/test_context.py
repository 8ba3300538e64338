# tests/unit/test_context.py
"""Tests for PromptContext derivation and prompt rendering."""

import pytest

from interactive_de.context import PromptContext


class TestDerivation:
    def test_root(self):
        ctx = PromptContext.root("zoo")
        assert ctx.prefix == "zoo"
        assert ctx.indent == 0
        assert ctx.identifiers == ()

    def test_child_extends_prefix_and_indent(self):
        ctx = PromptContext.root("zoo").child(".animals").child("[0]")
        assert ctx.prefix == "zoo.animals[0]"
        assert ctx.indent == 8

    def test_parent_is_untouched(self):
        parent = PromptContext.root("zoo")
        parent.child(".a")
        parent.child_with_identifier(".b", "b")
        assert parent == PromptContext.root("zoo")

    def test_context_is_immutable(self):
        ctx = PromptContext.root("zoo")
        with pytest.raises(AttributeError):
            ctx.prefix = "other"

    def test_identifiers_are_not_inherited(self):
        ctx = PromptContext.root("p").child_with_identifier(".x", "x")
        assert ctx.identifiers == ("x",)
        assert ctx.child(".y").identifiers == ()

    def test_pop_identifier(self):
        ctx = PromptContext.root("p").child_with_identifier(".x", "x")
        identifier, rest = ctx.pop_identifier()
        assert identifier == "x"
        assert rest.identifiers == ()
        assert ctx.identifiers == ("x",)
        assert rest.pop_identifier() == (None, rest)

    def test_custom_indent_step(self):
        ctx = PromptContext.root("p", indent_step=2).child(".a").child(".b")
        assert ctx.indent == 4


class TestPrompts:
    def test_formats(self):
        ctx = PromptContext.root("zoo").child(".name")
        assert ctx.line_prompt("String") == "    zoo.name String> "
        assert ctx.typed_prompt("u32") == "    zoo.name - Enter a u32> "
        assert ctx.confirm_prompt("option") == "    zoo.name - option? "


class TestIndentStep:
    @pytest.mark.parametrize("step", [0, -4])
    def test_non_positive_step_rejected(self, step):
        with pytest.raises(ValueError, match="indent_step must be positive"):
            PromptContext.root("p", indent_step=step)

    def test_every_level_indents_further(self):
        ctx = PromptContext.root("p", indent_step=1)
        indents = []
        for fragment in (".a", "[0]", ".0"):
            ctx = ctx.child(fragment)
            indents.append(ctx.indent)
        assert indents == [1, 2, 3]
