"""Spanish conjugation grammar configuration and display labels."""
from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from languages.base import CategoryOption, GrammarConfig
from languages.types import Additional, GrammaticalNumber, Mood, Person, Tense

if TYPE_CHECKING:
    from engines.conjugation import ConjugationEntry

# Keys offered next to the answer field for vowels most keyboards lack
ACCENTS: tuple[str, ...] = ("á", "é", "í", "ó")


def person_label(person: Person) -> str:
    match person:
        case Person.FIRST:
            return "First"
        case Person.SECOND:
            return "Second"
        case Person.THIRD:
            return "Third"
        case _:
            assert_never(person)


def number_label(number: GrammaticalNumber) -> str:
    match number:
        case GrammaticalNumber.SINGULAR:
            return "Singular"
        case GrammaticalNumber.PLURAL:
            return "Plural"
        case _:
            assert_never(number)


def mood_label(mood: Mood) -> str:
    match mood:
        case Mood.INDICATIVE:
            return "Indicative"
        case Mood.SUBJUNCTIVE:
            return "Subjunctive"
        case Mood.IMPERATIVE:
            return "Imperative"
        case _:
            assert_never(mood)


def tense_label(tense: Tense) -> str:
    match tense:
        case Tense.PRESENT:
            return "Present"
        case Tense.IMPERFECT:
            return "Imperfect"
        case Tense.PRETERIT:
            return "Preterit"
        case Tense.FUTURE:
            return "Future"
        case Tense.PRESENT_CONDITIONAL:
            return "Present Conditional"
        case _:
            assert_never(tense)


def additional_label(additional: Additional) -> str:
    match additional:
        case Additional.INFINITIVE:
            return "Infinitive"
        case Additional.IMPERATIVE:
            return "Imperative"
        case Additional.GERUND:
            return "Gerund"
        case Additional.PAST_PARTICIPLE:
            return "Past Participle"
        case _:
            assert_never(additional)


def describe_entry(entry: ConjugationEntry) -> list[str]:
    """Chip labels shown above the prompt while the user is typing.

    Finite forms get one label per category; every other form gets a
    single label naming it.
    """
    if entry.person and entry.number:
        return [
            f"{person_label(entry.person)} Person",
            number_label(entry.number),
            f"{mood_label(entry.mood)} Mood",
            f"{tense_label(entry.tense)} Tense",
        ]
    if entry.additional is not None:
        return [additional_label(entry.additional)]
    return []


def pronoun_hint(entry: ConjugationEntry) -> str | None:
    """Subject pronoun for singular forms whose ending is ambiguous."""
    if entry.number != GrammaticalNumber.SINGULAR:
        return None
    if entry.person == Person.FIRST:
        return "yo"
    if entry.person == Person.THIRD:
        return "él/ella"
    return None


SPANISH_GRAMMAR_CONFIG = GrammarConfig(
    persons=[CategoryOption(id=int(p), label=person_label(p)) for p in Person],
    numbers=[CategoryOption(id=int(n), label=number_label(n)) for n in GrammaticalNumber],
    # Only finite moods can be guessed
    moods=[CategoryOption(id=m.value, label=mood_label(m)) for m in (Mood.INDICATIVE, Mood.SUBJUNCTIVE)],
    tenses=[CategoryOption(id=t.value, label=tense_label(t)) for t in Tense],
    additional=[CategoryOption(id=a.value, label=additional_label(a)) for a in Additional],
    accents=ACCENTS,
)
