"""Language support: grammatical category types and grammar configuration.

Language content lives in subpackages (``languages.spanish``).
"""
from .base import CategoryOption, GrammarConfig
from .types import (
    Person,
    GrammaticalNumber,
    Mood,
    Tense,
    Additional,
    GuessCategory,
    PERSON_AND_NUMBER,
)

__all__ = [
    "CategoryOption",
    "GrammarConfig",
    "Person",
    "GrammaticalNumber",
    "Mood",
    "Tense",
    "Additional",
    "GuessCategory",
    "PERSON_AND_NUMBER",
]
