"""String instrument tunings."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fretlab.models.note import Note


class Tuning(BaseModel):
    """Open-string notes of a string instrument, lowest string first."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Tuning name")
    strings: tuple[str, ...] = Field(min_length=1, description="Open-string notes with octaves")

    @field_validator("strings")
    @classmethod
    def validate_strings(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Every string must be a parseable note."""
        for text in v:
            Note.parse(text)
        return v

    @property
    def notes(self) -> list[Note]:
        """Open-string notes in string order."""
        return [Note.parse(s) for s in self.strings]

    @property
    def string_count(self) -> int:
        return len(self.strings)


TUNINGS: dict[str, Tuning] = {
    name: Tuning(name=name, strings=strings)
    for name, strings in (
        ("Guitar (6-string)", ("E2", "A2", "D3", "G3", "B3", "E4")),
        ("Guitar (7-string)", ("B1", "E2", "A2", "D3", "G3", "B3", "E4")),
        ("Guitar (8-string)", ("F#1", "B1", "E2", "A2", "D3", "G3", "B3", "E4")),
        ("Bass (4-string)", ("E1", "A1", "D2", "G2")),
        ("Bass (5-string)", ("B0", "E1", "A1", "D2", "G2")),
        ("Bass (6-string)", ("B0", "E1", "A1", "D2", "G2", "C3")),
        ("Ukulele", ("G4", "C4", "E4", "A4")),
        ("Mandolin", ("G3", "D4", "A4", "E5")),
        ("Banjo (5-string)", ("G4", "D3", "G3", "B3", "D4")),
        ("Drop D", ("D2", "A2", "D3", "G3", "B3", "E4")),
        ("Drop C", ("C2", "G2", "C3", "F3", "A3", "D4")),
        ("Drop B", ("B1", "F#2", "B2", "E3", "G#3", "C#4")),
        ("Open G", ("D2", "G2", "D3", "G3", "B3", "D4")),
        ("Open D", ("D2", "A2", "D3", "F#3", "A3", "D4")),
        ("Open E", ("E2", "B2", "E3", "G#3", "B3", "E4")),
        ("DADGAD", ("D2", "A2", "D3", "G3", "A3", "D4")),
        ("Nashville", ("E3", "A3", "D4", "G3", "B3", "E4")),
    )
}


def get_tuning(name: str) -> Tuning | None:
    """Look up a tuning preset by name."""
    return TUNINGS.get(name)
