from engines.conjugation import (
    ConjugationEntry,
    VerbParadigm,
    expand,
    fold_diacritics,
    stem_length,
    has_person_and_number,
)
from engines.drill import DrillSession, DrillState, Phase

__all__ = [
    "ConjugationEntry",
    "VerbParadigm",
    "expand",
    "fold_diacritics",
    "stem_length",
    "has_person_and_number",
    "DrillSession",
    "DrillState",
    "Phase",
]
