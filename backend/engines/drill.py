"""Drill Session Engine

Typing drill over one verb's expanded conjugation table. The user copies the
shown form; finite forms are then quizzed on person, number, mood and tense.

Transitions are pure functions over an immutable DrillState. The selected
entry is always re-derived from (seed, verb, current_index), never patched.
DrillSession wraps the state for a single user, validates incoming events
and logs transitions.
"""
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, assert_never

from core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    ensure,
    guess_mismatch,
    not_found,
    out_of_range,
    require,
    state_conflict,
)
from core.logging import drill_logger
from engines.conjugation import (
    ConjugationEntry,
    VerbParadigm,
    expand,
    has_person_and_number,
    split_term,
)
from languages.spanish.grammar import ACCENTS, describe_entry, pronoun_hint
from languages.types import GrammaticalNumber, GuessCategory, Mood, Person, Tense

log = drill_logger()


class Phase(str, Enum):
    TYPING = "typing"
    DESCRIBING = "describing"


@dataclass(frozen=True, slots=True)
class DrillState:
    """Snapshot of one drill session."""
    verb: str
    entries: tuple[ConjugationEntry, ...]
    selected: ConjugationEntry
    seed: int
    current_index: int = 0
    typed_text: str = ""
    describing: bool = False
    guessed_person: Person = Person.FIRST
    guessed_number: GrammaticalNumber = GrammaticalNumber.SINGULAR
    guessed_mood: Mood = Mood.INDICATIVE
    guessed_tense: Tense = Tense.PRESENT
    last_error: str | None = None

    @property
    def phase(self) -> Phase:
        return Phase.DESCRIBING if self.describing else Phase.TYPING


def select_entry(
    entries: tuple[ConjugationEntry, ...], seed: int, verb: str, index: int
) -> ConjugationEntry:
    """Uniform pick, deterministic for a given (seed, verb, index)."""
    rng = random.Random(f"{seed}:{verb}:{index}")
    return entries[rng.randrange(len(entries))]


def initial_state(verb: str, paradigm: VerbParadigm, seed: int) -> DrillState:
    entries = expand(paradigm)
    return DrillState(
        verb=verb,
        entries=entries,
        selected=select_entry(entries, seed, verb, 0),
        seed=seed,
    )


def _advance(state: DrillState) -> DrillState:
    index = state.current_index + 1
    return replace(
        state,
        current_index=index,
        selected=select_entry(state.entries, state.seed, state.verb, index),
    )


def _reset_guesses(state: DrillState) -> DrillState:
    return replace(
        state,
        guessed_person=Person.FIRST,
        guessed_number=GrammaticalNumber.SINGULAR,
        guessed_mood=Mood.INDICATIVE,
        guessed_tense=Tense.PRESENT,
    )


def select_verb(state: DrillState, verb: str, paradigm: VerbParadigm) -> DrillState:
    """Switch verbs: new table, new selection, back to typing with a clean slate.

    current_index carries over, so switching away and back to a verb at the
    same index shows the same entry again.
    """
    entries = expand(paradigm)
    switched = replace(
        state,
        verb=verb,
        entries=entries,
        selected=select_entry(entries, state.seed, verb, state.current_index),
        typed_text="",
        describing=False,
        last_error=None,
    )
    return _reset_guesses(switched)


def set_typed_text(state: DrillState, text: str) -> DrillState:
    """Record typed input; an exact match of the selected term moves the drill on."""
    if state.describing:
        return state
    if text != state.selected.term:
        return replace(state, typed_text=text)
    if has_person_and_number(state.selected):
        return replace(state, typed_text="", describing=True)
    return replace(_advance(state), typed_text="")


def append_accent(state: DrillState, accent: str) -> DrillState:
    if state.describing:
        return state
    return set_typed_text(state, state.typed_text + accent)


def set_guess(state: DrillState, category: GuessCategory, value: Any) -> DrillState:
    if not state.describing:
        return state
    match category:
        case GuessCategory.PERSON:
            return replace(state, guessed_person=value)
        case GuessCategory.NUMBER:
            return replace(state, guessed_number=value)
        case GuessCategory.MOOD:
            return replace(state, guessed_mood=value)
        case GuessCategory.TENSE:
            return replace(state, guessed_tense=value)
        case _:
            assert_never(category)


def check_guess(state: DrillState) -> Result[None, AppError]:
    """Compare guesses with the selected entry, reporting only the first mismatch."""
    entry = state.selected
    checks = (
        (GuessCategory.PERSON, state.guessed_person, entry.person),
        (GuessCategory.NUMBER, state.guessed_number, entry.number),
        (GuessCategory.MOOD, state.guessed_mood, entry.mood),
        (GuessCategory.TENSE, state.guessed_tense, entry.tense),
    )
    for category, guessed, actual in checks:
        if guessed != actual:
            return guess_mismatch(category.value, origin="drill")
    return Ok(None)


def submit_guess(state: DrillState) -> DrillState:
    if not state.describing:
        return state
    match check_guess(state):
        case Ok():
            advanced = replace(_advance(state), describing=False, last_error=None)
            return _reset_guesses(advanced)
        case Err(error):
            return replace(state, last_error=error.message)


def coerce_guess(category: str, value: Any) -> Result[tuple[GuessCategory, Any], AppError]:
    """Parse a raw (category, value) pair into the closed category types."""
    try:
        parsed_category = GuessCategory(category)
    except ValueError:
        return out_of_range("category", category, [c.value for c in GuessCategory], origin="drill")

    match parsed_category:
        case GuessCategory.PERSON:
            choices: type[Enum] = Person
        case GuessCategory.NUMBER:
            choices = GrammaticalNumber
        case GuessCategory.MOOD:
            choices = Mood
        case GuessCategory.TENSE:
            choices = Tense
        case _:
            assert_never(parsed_category)

    try:
        raw = int(value) if choices in (Person, GrammaticalNumber) else value
        return Ok((parsed_category, choices(raw)))
    except (TypeError, ValueError):
        allowed = [c.value for c in choices]
        return out_of_range(parsed_category.value, value, allowed, origin="drill")


def entry_view(entry: ConjugationEntry, *, reveal_labels: bool = True) -> dict:
    """Serializable view of an entry with its display helpers."""
    _, ending = split_term(entry)
    return {
        "term": entry.term,
        "stem": entry.stem,
        "ending": ending,
        "person": int(entry.person) if entry.person else None,
        "number": int(entry.number) if entry.number else None,
        "mood": entry.mood.value if entry.mood else None,
        "tense": entry.tense.value if entry.tense else None,
        "additional": entry.additional.value if entry.additional else None,
        "labels": describe_entry(entry) if reveal_labels else [],
        "pronoun": pronoun_hint(entry),
    }


class DrillSession:
    """The single user's drill, fed one event at a time."""

    __slots__ = ("_paradigms", "_state")

    def __init__(
        self,
        paradigms: Mapping[str, VerbParadigm],
        verb: str = "amar",
        seed: int | None = None,
    ):
        if verb not in paradigms:
            available = ", ".join(paradigms) or "none"
            raise ValueError(f"Verb '{verb}' not available. Available: {available}")
        self._paradigms = paradigms
        if seed is None:
            seed = random.randrange(2**32)
        self._state = initial_state(verb, paradigms[verb], seed)
        log.info("drill_started", verb=verb, seed=seed)

    @property
    def state(self) -> DrillState:
        return self._state

    @property
    def verbs(self) -> list[str]:
        return list(self._paradigms)

    def _require_phase(self, phase: Phase, event: str) -> Result[None, AppError]:
        return ensure(
            self._state.phase == phase,
            state_conflict(
                f"'{event}' is only available while {phase.value}",
                current_state=self._state.phase.value,
                origin="drill_session",
            ),
        )

    def _apply(self, new_state: DrillState, event: str) -> Result[DrillState, AppError]:
        old = self._state
        if new_state.current_index != old.current_index and new_state.verb == old.verb:
            log.info("drill_advanced", trigger=event, index=new_state.current_index)
        elif new_state.describing and not old.describing:
            log.info("term_matched", term=old.selected.term)
        self._state = new_state
        return Ok(new_state)

    def select_verb(self, verb: str) -> Result[DrillState, AppError]:
        result = require(self._paradigms.get(verb), not_found("Verb", verb, origin="drill_session"))
        if result.is_err():
            return result
        log.info("verb_selected", verb=verb)
        return self._apply(select_verb(self._state, verb, result.unwrap()), "select_verb")

    def set_typed_text(self, text: str) -> Result[DrillState, AppError]:
        return self._require_phase(Phase.TYPING, "set_typed_text").and_then(
            lambda _: self._apply(set_typed_text(self._state, text), "set_typed_text")
        )

    def append_accent(self, accent: str) -> Result[DrillState, AppError]:
        guard = self._require_phase(Phase.TYPING, "append_accent")
        if guard.is_err():
            return guard
        if accent not in ACCENTS:
            return out_of_range("accent", accent, list(ACCENTS), origin="drill_session")
        return self._apply(append_accent(self._state, accent), "append_accent")

    def set_guess(self, category: str, value: Any) -> Result[DrillState, AppError]:
        guard = self._require_phase(Phase.DESCRIBING, "set_guess")
        if guard.is_err():
            return guard
        return coerce_guess(category, value).and_then(
            lambda parsed: self._apply(set_guess(self._state, *parsed), "set_guess")
        )

    def submit_guess(self) -> Result[DrillState, AppError]:
        guard = self._require_phase(Phase.DESCRIBING, "submit_guess")
        if guard.is_err():
            return guard
        new_state = submit_guess(self._state)
        if new_state.last_error:
            log.info("guess_mismatch", error=new_state.last_error)
        else:
            log.info("guess_accepted", term=self._state.selected.term)
        return self._apply(new_state, "submit_guess")

    def snapshot(self) -> dict:
        """Read-only view of the session for the presentation layer."""
        state = self._state
        return {
            "verb": state.verb,
            "phase": state.phase.value,
            "current_index": state.current_index,
            "entry": entry_view(state.selected, reveal_labels=not state.describing),
            "typed_text": state.typed_text,
            "guesses": {
                "person": int(state.guessed_person),
                "number": int(state.guessed_number),
                "mood": state.guessed_mood.value,
                "tense": state.guessed_tense.value,
            },
            "error": state.last_error,
            "accents": list(ACCENTS) if not state.describing else [],
        }
