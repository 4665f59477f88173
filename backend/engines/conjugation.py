"""Conjugation Table Expander

Turns a compact per-verb paradigm into a flat, ordered list of tagged
conjugation entries. Each six-form finite group gets a common stem so the
frontend can render the ending in bold.
"""
import unicodedata
from dataclasses import dataclass
from typing import Any, assert_never

from languages.types import (
    PERSON_AND_NUMBER,
    Additional,
    GrammaticalNumber,
    Mood,
    Person,
    Tense,
)

Forms = tuple[str, str, str, str, str, str]

# Finite groups in output order
FINITE_GROUPS: tuple[tuple[Mood, Tense], ...] = (
    (Mood.INDICATIVE, Tense.PRESENT),
    (Mood.INDICATIVE, Tense.IMPERFECT),
    (Mood.INDICATIVE, Tense.PRETERIT),
    (Mood.INDICATIVE, Tense.FUTURE),
    (Mood.INDICATIVE, Tense.PRESENT_CONDITIONAL),
    (Mood.SUBJUNCTIVE, Tense.PRESENT),
    (Mood.SUBJUNCTIVE, Tense.IMPERFECT),
    (Mood.SUBJUNCTIVE, Tense.FUTURE),
)

ENTRIES_PER_VERB = len(FINITE_GROUPS) * len(PERSON_AND_NUMBER) + len(Additional)


@dataclass(frozen=True, slots=True)
class IndicativeForms:
    present: Forms
    imperfect: Forms
    preterit: Forms
    future: Forms
    present_conditional: Forms


@dataclass(frozen=True, slots=True)
class SubjunctiveForms:
    present: Forms
    imperfect: Forms
    future: Forms


@dataclass(frozen=True, slots=True)
class VerbParadigm:
    """Every inflected form of one verb as shipped in the content files.

    Six-form sequences are ordered 1sg, 2sg, 3sg, 1pl, 2pl, 3pl.
    """
    infinitive: str
    indicative: IndicativeForms
    subjunctive: SubjunctiveForms
    imperative: str
    gerund: str
    past_participle: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VerbParadigm":
        """Build from the camelCase mapping used in verbs.yaml."""
        ind = data["indicative"]
        sub = data["subjunctive"]
        return cls(
            infinitive=data["infinitive"],
            indicative=IndicativeForms(
                present=tuple(ind["present"]),
                imperfect=tuple(ind["imperfect"]),
                preterit=tuple(ind["preterit"]),
                future=tuple(ind["future"]),
                present_conditional=tuple(ind["presentConditional"]),
            ),
            subjunctive=SubjunctiveForms(
                present=tuple(sub["present"]),
                imperfect=tuple(sub["imperfect"]),
                future=tuple(sub["future"]),
            ),
            imperative=data["imperative"],
            gerund=data["gerund"],
            past_participle=data["pastParticiple"],
        )

    def forms(self, mood: Mood, tense: Tense) -> Forms:
        """Six forms of one finite group."""
        match mood:
            case Mood.INDICATIVE:
                group = self.indicative
            case Mood.SUBJUNCTIVE:
                group = self.subjunctive
            case Mood.IMPERATIVE:
                raise KeyError(f"Imperative has no person/number group: {tense.value}")
            case _:
                assert_never(mood)
        match tense:
            case Tense.PRESENT:
                return group.present
            case Tense.IMPERFECT:
                return group.imperfect
            case Tense.PRETERIT:
                return group.preterit  # type: ignore[union-attr]
            case Tense.FUTURE:
                return group.future
            case Tense.PRESENT_CONDITIONAL:
                return group.present_conditional  # type: ignore[union-attr]
            case _:
                assert_never(tense)


@dataclass(frozen=True, slots=True)
class ConjugationEntry:
    """One flattened, taggable verb form."""
    term: str
    stem: str | None = None
    person: Person | None = None
    number: GrammaticalNumber | None = None
    mood: Mood | None = None
    tense: Tense | None = None
    additional: Additional | None = None


def fold_diacritics(text: str) -> str:
    """Strip accents for comparison: decompose to NFD and drop combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def stem_length(words: Forms) -> int:
    """Length of the leading substring shared by all forms, accents ignored.

    Scans adjacent pairs left to right, starting from the length of the
    first form and shrinking greedily until each pair agrees.
    """
    folded = [fold_diacritics(w) for w in words]
    length = len(folded[0])
    for previous, word in zip(folded, folded[1:]):
        length = min(length, len(word))
        while previous[:length] != word[:length]:
            length -= 1
    return length


def add_person_and_number(mood: Mood, tense: Tense, words: Forms) -> list[ConjugationEntry]:
    """Tag the six forms of a group and attach their common stem."""
    length = stem_length(words)
    return [
        ConjugationEntry(
            term=word,
            stem=word[:length],
            person=person,
            number=number,
            mood=mood,
            tense=tense,
        )
        for (person, number), word in zip(PERSON_AND_NUMBER, words)
    ]


def expand(paradigm: VerbParadigm) -> tuple[ConjugationEntry, ...]:
    """Flatten a paradigm into its 52 tagged entries, in display order."""
    entries: list[ConjugationEntry] = []
    for mood, tense in FINITE_GROUPS:
        entries.extend(add_person_and_number(mood, tense, paradigm.forms(mood, tense)))

    entries.extend([
        ConjugationEntry(term=paradigm.imperative, mood=Mood.IMPERATIVE, additional=Additional.IMPERATIVE),
        ConjugationEntry(term=paradigm.infinitive, additional=Additional.INFINITIVE),
        ConjugationEntry(term=paradigm.gerund, additional=Additional.GERUND),
        ConjugationEntry(term=paradigm.past_participle, additional=Additional.PAST_PARTICIPLE),
    ])
    return tuple(entries)


def has_person_and_number(entry: ConjugationEntry) -> bool:
    """True for finite forms, the only ones quizzed on their categories."""
    return bool(entry.person) and bool(entry.number)


def split_term(entry: ConjugationEntry) -> tuple[str, str]:
    """Split a term into (stem, ending) for display."""
    stem = entry.stem or ""
    return stem, entry.term[len(stem):]
