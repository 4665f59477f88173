"""Shared grammatical category types.

Categories are closed enumerations. Values match the keys used in the verb
content files, so ``Tense("presentConditional")`` parses dataset keys directly.
"""
from enum import Enum, IntEnum


class Person(IntEnum):
    FIRST = 1
    SECOND = 2
    THIRD = 3


class GrammaticalNumber(IntEnum):
    SINGULAR = 1
    PLURAL = 2


class Mood(str, Enum):
    INDICATIVE = "indicative"
    SUBJUNCTIVE = "subjunctive"
    IMPERATIVE = "imperative"


class Tense(str, Enum):
    PRESENT = "present"
    IMPERFECT = "imperfect"
    PRETERIT = "preterit"
    FUTURE = "future"
    PRESENT_CONDITIONAL = "presentConditional"


class Additional(str, Enum):
    """Forms that carry no person/number agreement."""
    INFINITIVE = "infinitive"
    IMPERATIVE = "imperative"
    GERUND = "gerund"
    PAST_PARTICIPLE = "pastParticiple"


class GuessCategory(str, Enum):
    """Categories quizzed after a finite form is typed, in validation order."""
    PERSON = "person"
    NUMBER = "number"
    MOOD = "mood"
    TENSE = "tense"


# Order of the six forms in every finite group: (person, number)
PERSON_AND_NUMBER: tuple[tuple[Person, GrammaticalNumber], ...] = (
    (Person.FIRST, GrammaticalNumber.SINGULAR),
    (Person.SECOND, GrammaticalNumber.SINGULAR),
    (Person.THIRD, GrammaticalNumber.SINGULAR),
    (Person.FIRST, GrammaticalNumber.PLURAL),
    (Person.SECOND, GrammaticalNumber.PLURAL),
    (Person.THIRD, GrammaticalNumber.PLURAL),
)
