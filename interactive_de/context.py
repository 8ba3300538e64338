# interactive_de/context.py
"""
Prompt context threaded through the recursive descent.

A context is a value: every descent derives a new one and the parent is
never modified. Pending identifiers are not inherited by children.
"""

from dataclasses import dataclass, field, replace

DEFAULT_INDENT_STEP = 4


@dataclass(frozen=True)
class PromptContext:
    """Naming, indentation and pending identifiers for one node."""

    prefix: str
    indent: int = 0
    identifiers: tuple[str, ...] = ()
    indent_step: int = field(default=DEFAULT_INDENT_STEP, repr=False)

    def __post_init__(self) -> None:
        if self.indent_step <= 0:
            raise ValueError(f"indent_step must be positive, got {self.indent_step}")

    @classmethod
    def root(cls, name: str, indent_step: int = DEFAULT_INDENT_STEP) -> "PromptContext":
        return cls(prefix=name, indent_step=indent_step)

    def child(self, fragment: str) -> "PromptContext":
        """Derive the context for a child reached via `fragment` (e.g. '.name', '[2]')."""
        return PromptContext(
            prefix=self.prefix + fragment,
            indent=self.indent + self.indent_step,
            indent_step=self.indent_step,
        )

    def child_with_identifier(self, fragment: str, identifier: str) -> "PromptContext":
        """Derive a child whose next identifier request resolves to `identifier`."""
        child = self.child(fragment)
        return replace(child, identifiers=child.identifiers + (identifier,))

    def pop_identifier(self) -> tuple[str | None, "PromptContext"]:
        """Return the top pending identifier (or None) and the context without it."""
        if not self.identifiers:
            return None, self
        return self.identifiers[-1], replace(self, identifiers=self.identifiers[:-1])

    @property
    def pad(self) -> str:
        return " " * self.indent

    def line_prompt(self, label: str) -> str:
        return f"{self.pad}{self.prefix} {label}> "

    def typed_prompt(self, type_name: str) -> str:
        return f"{self.pad}{self.prefix} - Enter a {type_name}> "

    def confirm_prompt(self, question: str) -> str:
        return f"{self.pad}{self.prefix} - {question}? "
