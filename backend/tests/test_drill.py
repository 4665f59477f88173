"""Tests for the pure drill transitions."""
from dataclasses import replace

import pytest

from core.errors import Err, ErrorCode, Ok
from engines.conjugation import expand
from engines.drill import (
    DrillState,
    Phase,
    append_accent,
    check_guess,
    coerce_guess,
    initial_state,
    select_entry,
    select_verb,
    set_guess,
    set_typed_text,
    submit_guess,
)
from languages.types import Additional, GrammaticalNumber, GuessCategory, Mood, Person, Tense


@pytest.fixture
def state(amar) -> DrillState:
    return initial_state("amar", amar, seed=7)


def with_selected(state: DrillState, term: str) -> DrillState:
    entry = next(e for e in state.entries if e.term == term)
    return replace(state, selected=entry)


def describing(state: DrillState, term: str) -> DrillState:
    return set_typed_text(with_selected(state, term), term)


class TestSelection:
    def test_initial_state(self, state):
        assert state.verb == "amar"
        assert state.current_index == 0
        assert state.phase == Phase.TYPING
        assert state.selected in state.entries
        assert state.typed_text == ""
        assert state.last_error is None

    def test_selection_is_deterministic(self, amar):
        entries = expand(amar)
        assert select_entry(entries, 3, "amar", 5) == select_entry(entries, 3, "amar", 5)

    def test_selection_covers_table(self, amar):
        entries = expand(amar)
        picked = {select_entry(entries, 1, "amar", i) for i in range(2000)}
        assert len(picked) > len(entries) // 2


class TestTyping:
    def test_partial_input_is_kept(self, state):
        state = with_selected(state, "amamos")
        new = set_typed_text(state, "ama")
        assert new.typed_text == "ama"
        assert new.phase == Phase.TYPING
        assert new.current_index == 0

    def test_match_is_case_and_accent_sensitive(self, state):
        state = with_selected(state, "amáis")
        assert set_typed_text(state, "amais").phase == Phase.TYPING
        assert set_typed_text(state, "Amáis").phase == Phase.TYPING

    def test_finite_form_enters_describing(self, state):
        state = with_selected(state, "amáis")
        new = set_typed_text(state, "amáis")
        assert new.phase == Phase.DESCRIBING
        assert new.typed_text == ""
        assert new.current_index == 0
        assert new.selected.term == "amáis"

    def test_non_finite_form_advances(self, state):
        state = with_selected(state, "amar")
        assert state.selected.additional == Additional.INFINITIVE
        new = set_typed_text(state, "amar")
        assert new.phase == Phase.TYPING
        assert new.typed_text == ""
        assert new.current_index == 1
        assert new.selected == select_entry(state.entries, state.seed, "amar", 1)

    def test_imperative_advances_without_quiz(self, state):
        state = replace(state, selected=state.entries[48])
        assert state.selected.mood == Mood.IMPERATIVE
        new = set_typed_text(state, "ama")
        assert new.phase == Phase.TYPING
        assert new.current_index == 1

    def test_typing_ignored_while_describing(self, state):
        state = describing(state, "amo")
        assert set_typed_text(state, "x") is state

    def test_append_accent(self, state):
        state = with_selected(state, "amamos")
        state = set_typed_text(state, "am")
        assert append_accent(state, "á").typed_text == "amá"

    def test_append_accent_completes_match(self, state):
        state = with_selected(state, "amé")
        state = set_typed_text(state, "am")
        new = append_accent(state, "é")
        assert new.phase == Phase.DESCRIBING
        assert new.typed_text == ""

    def test_append_accent_ignored_while_describing(self, state):
        state = describing(state, "amo")
        assert append_accent(state, "á") is state


class TestGuessing:
    def test_set_guess_only_while_describing(self, state):
        assert set_guess(state, GuessCategory.PERSON, Person.THIRD) is state

    def test_set_each_guess(self, state):
        state = describing(state, "amo")
        state = set_guess(state, GuessCategory.PERSON, Person.THIRD)
        state = set_guess(state, GuessCategory.NUMBER, GrammaticalNumber.PLURAL)
        state = set_guess(state, GuessCategory.MOOD, Mood.SUBJUNCTIVE)
        state = set_guess(state, GuessCategory.TENSE, Tense.FUTURE)
        assert (state.guessed_person, state.guessed_number, state.guessed_mood, state.guessed_tense) == (
            Person.THIRD, GrammaticalNumber.PLURAL, Mood.SUBJUNCTIVE, Tense.FUTURE,
        )

    def test_wrong_person_reported(self, state):
        # "amaban": 3rd plural indicative imperfect
        state = describing(state, "amaban")
        state = set_guess(state, GuessCategory.PERSON, Person.SECOND)
        state = set_guess(state, GuessCategory.NUMBER, GrammaticalNumber.PLURAL)
        state = set_guess(state, GuessCategory.TENSE, Tense.IMPERFECT)
        new = submit_guess(state)
        assert new.last_error == "Person doesn't match"
        assert new.phase == Phase.DESCRIBING
        assert new.guessed_person == Person.SECOND
        assert new.guessed_number == GrammaticalNumber.PLURAL
        assert new.guessed_tense == Tense.IMPERFECT
        assert new.current_index == state.current_index

    @pytest.mark.parametrize(
        "guesses,message",
        [
            ({GuessCategory.PERSON: Person.FIRST}, "Person doesn't match"),
            ({GuessCategory.PERSON: Person.THIRD}, "Number doesn't match"),
            (
                {GuessCategory.PERSON: Person.THIRD, GuessCategory.NUMBER: GrammaticalNumber.PLURAL},
                "Mood doesn't match",
            ),
            (
                {
                    GuessCategory.PERSON: Person.THIRD,
                    GuessCategory.NUMBER: GrammaticalNumber.PLURAL,
                    GuessCategory.MOOD: Mood.SUBJUNCTIVE,
                },
                "Tense doesn't match",
            ),
        ],
    )
    def test_first_mismatch_wins(self, state, guesses, message):
        # "amaren": 3rd plural subjunctive future; mood default is indicative
        state = describing(state, "amaren")
        for category, value in guesses.items():
            state = set_guess(state, category, value)
        assert submit_guess(state).last_error == message

    def test_error_replaced_on_next_mismatch(self, state):
        state = describing(state, "amaban")
        first = submit_guess(state)
        assert first.last_error == "Person doesn't match"
        second = submit_guess(set_guess(first, GuessCategory.PERSON, Person.THIRD))
        assert second.last_error == "Number doesn't match"

    def test_correct_guess_advances_and_resets(self, state):
        state = describing(state, "amaren")
        state = set_guess(state, GuessCategory.PERSON, Person.THIRD)
        state = set_guess(state, GuessCategory.NUMBER, GrammaticalNumber.PLURAL)
        state = set_guess(state, GuessCategory.MOOD, Mood.SUBJUNCTIVE)
        state = submit_guess(state)  # wrong tense first
        assert state.last_error is not None
        state = set_guess(state, GuessCategory.TENSE, Tense.FUTURE)
        new = submit_guess(state)
        assert new.last_error is None
        assert new.phase == Phase.TYPING
        assert new.current_index == state.current_index + 1
        assert (new.guessed_person, new.guessed_number, new.guessed_mood, new.guessed_tense) == (
            Person.FIRST, GrammaticalNumber.SINGULAR, Mood.INDICATIVE, Tense.PRESENT,
        )

    def test_defaults_match_first_person_present(self, state):
        new = submit_guess(describing(state, "amo"))
        assert new.last_error is None
        assert new.phase == Phase.TYPING

    def test_submit_ignored_while_typing(self, state):
        assert submit_guess(state) is state

    def test_check_guess_result(self, state):
        state = describing(state, "amas")
        match check_guess(state):
            case Err(error):
                assert error.code == ErrorCode.E2006_GUESS_MISMATCH
                assert error.metadata["category"] == "person"
            case Ok():
                pytest.fail("expected mismatch")


class TestCoerceGuess:
    @pytest.mark.parametrize(
        "category,value,expected",
        [
            ("person", 3, (GuessCategory.PERSON, Person.THIRD)),
            ("person", "2", (GuessCategory.PERSON, Person.SECOND)),
            ("number", 2, (GuessCategory.NUMBER, GrammaticalNumber.PLURAL)),
            ("mood", "subjunctive", (GuessCategory.MOOD, Mood.SUBJUNCTIVE)),
            ("tense", "presentConditional", (GuessCategory.TENSE, Tense.PRESENT_CONDITIONAL)),
        ],
    )
    def test_valid(self, category, value, expected):
        assert coerce_guess(category, value).unwrap() == expected

    @pytest.mark.parametrize(
        "category,value",
        [("aspect", "perfective"), ("person", 4), ("number", "many"), ("tense", "pluperfect")],
    )
    def test_invalid(self, category, value):
        result = coerce_guess(category, value)
        assert result.is_err()
        assert result.unwrap_err().code == ErrorCode.E2003_OUT_OF_RANGE


class TestSelectVerb:
    def test_switch_resets_everything(self, state, paradigms):
        state = describing(state, "amaban")
        state = set_guess(state, GuessCategory.TENSE, Tense.FUTURE)
        state = submit_guess(state)
        assert state.last_error is not None

        new = select_verb(state, "comer", paradigms["comer"])
        assert new.verb == "comer"
        assert new.entries == expand(paradigms["comer"])
        assert new.selected in new.entries
        assert new.phase == Phase.TYPING
        assert new.typed_text == ""
        assert new.last_error is None
        assert new.guessed_tense == Tense.PRESENT

    def test_switch_clears_typed_text(self, state, paradigms):
        state = set_typed_text(with_selected(state, "amamos"), "am")
        assert select_verb(state, "vivir", paradigms["vivir"]).typed_text == ""
