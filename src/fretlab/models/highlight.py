"""Highlight and diagnostic models produced by the core."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fretlab.colors import color_for_degree

from .color import Color
from .enums import DiagnosticCode


class HighlightEntry(BaseModel):
    """Display metadata for one highlighted MIDI note."""

    model_config = ConfigDict(frozen=True)

    midi: int = Field(description="Absolute MIDI note number")
    color_degree: int = Field(description="Extended degree used to pick the color")
    label: str = Field(description="Degree label shown on the note")

    @property
    def color(self) -> Color:
        return color_for_degree(self.color_degree)


class Diagnostic(BaseModel):
    """A soft failure: the engine degraded instead of raising."""

    model_config = ConfigDict(frozen=True)

    code: DiagnosticCode = Field(description="What degraded")
    message: str = Field(description="Human readable explanation")
    context: dict[str, Any] = Field(default_factory=dict, description="Offending values")

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"
