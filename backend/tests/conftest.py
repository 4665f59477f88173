"""Shared fixtures for the drill tests."""
import pytest

from core.config import settings
from engines.conjugation import VerbParadigm, expand, has_person_and_number
from engines.drill import DrillSession, select_entry
from languages.spanish import load_paradigms


AMAR = {
    "indicative": {
        "present": ["amo", "amas", "ama", "amamos", "amáis", "aman"],
        "imperfect": ["amaba", "amabas", "amaba", "amábamos", "amabais", "amaban"],
        "preterit": ["amé", "amaste", "amó", "amamos", "amasteis", "amaron"],
        "future": ["amaré", "amarás", "amará", "amaremos", "amaréis", "amarán"],
        "presentConditional": ["amaría", "amarías", "amaría", "amaríamos", "amaríais", "amarían"],
    },
    "subjunctive": {
        "present": ["ame", "ames", "ame", "amemos", "améis", "amen"],
        "imperfect": ["amara", "amaras", "amara", "amáramos", "amarais", "amaran"],
        "future": ["amare", "amares", "amare", "amáremos", "amareis", "amaren"],
    },
    "imperative": "ama",
    "gerund": "amando",
    "pastParticiple": "amado",
}


@pytest.fixture
def amar() -> VerbParadigm:
    return VerbParadigm.from_dict({"infinitive": "amar", **AMAR})


@pytest.fixture(scope="session")
def paradigms() -> dict[str, VerbParadigm]:
    return load_paradigms(settings.VERBS_PATH)


def find_seed(paradigms, verb: str, finite: bool) -> int:
    """First seed whose opening selection is (or is not) a finite form."""
    entries = expand(paradigms[verb])
    for seed in range(10_000):
        if has_person_and_number(select_entry(entries, seed, verb, 0)) == finite:
            return seed
    raise AssertionError("no seed found")


@pytest.fixture
def finite_session(paradigms) -> DrillSession:
    return DrillSession(paradigms, verb="amar", seed=find_seed(paradigms, "amar", finite=True))


@pytest.fixture
def nonfinite_session(paradigms) -> DrillSession:
    return DrillSession(paradigms, verb="amar", seed=find_seed(paradigms, "amar", finite=False))


@pytest.fixture
def seed_finder(paradigms):
    return lambda verb, finite: find_seed(paradigms, verb, finite)
