"""Grammar configuration shared with the presentation layer."""
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CategoryOption:
    """One selectable value of a grammatical category."""
    id: str | int
    label: str


@dataclass(slots=True)
class GrammarConfig:
    """Category vocabularies and input helpers for the drill frontend."""
    persons: list[CategoryOption] = field(default_factory=list)
    numbers: list[CategoryOption] = field(default_factory=list)
    moods: list[CategoryOption] = field(default_factory=list)
    tenses: list[CategoryOption] = field(default_factory=list)
    additional: list[CategoryOption] = field(default_factory=list)
    accents: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        def options(items: list[CategoryOption]) -> list[dict]:
            return [{"id": o.id, "label": o.label} for o in items]

        return {
            "persons": options(self.persons),
            "numbers": options(self.numbers),
            "moods": options(self.moods),
            "tenses": options(self.tenses),
            "additional": options(self.additional),
            "accents": list(self.accents),
        }
