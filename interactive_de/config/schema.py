# interactive_de/config/schema.py
"""
Pydantic configuration models for interactive-de.

All models use extra="ignore" to allow unknown YAML keys without crashing.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PromptConfig(BaseModel):
    """Prompt rendering and input handling."""

    model_config = ConfigDict(extra="ignore")

    indent_step: int = Field(
        default=4, gt=0, description="Spaces added to the prompt indent per nesting level"
    )
    quit_sentinels: list[str] = Field(
        default_factory=lambda: [":quit", ":q"],
        description="Input lines that abort the whole interaction",
    )


class OutputConfig(BaseModel):
    """Console output configuration."""

    model_config = ConfigDict(extra="ignore")

    show_banner: bool = Field(
        default=True, description="Print the introductory banner before prompting"
    )
    verbosity: Literal["quiet", "normal", "verbose"] = Field(
        default="normal", description="Logging verbosity level"
    )


class InteractiveConfig(BaseModel):
    """Root configuration for interactive-de."""

    model_config = ConfigDict(extra="ignore")

    prompt: PromptConfig = Field(default_factory=PromptConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
