"""Spanish verb content and grammar labels."""
from .grammar import (
    ACCENTS,
    SPANISH_GRAMMAR_CONFIG,
    describe_entry,
    pronoun_hint,
)
from .verbs import load_paradigms, get_paradigms

__all__ = [
    "ACCENTS",
    "SPANISH_GRAMMAR_CONFIG",
    "describe_entry",
    "pronoun_hint",
    "load_paradigms",
    "get_paradigms",
]
