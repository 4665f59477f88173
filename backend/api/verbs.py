"""Verbs API Routes

Lists available verbs, their expanded conjugation tables and the grammar
configuration the frontend renders category pickers from.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from core.errors import not_found, raise_result, require
from core.logging import api_logger
from engines.conjugation import expand
from engines.drill import entry_view
from languages.spanish import SPANISH_GRAMMAR_CONFIG, get_paradigms

log = api_logger()

router = APIRouter()


# === Response Models ===

class CategoryOptionResponse(BaseModel):
    id: str | int
    label: str


class GrammarConfigResponse(BaseModel):
    persons: list[CategoryOptionResponse]
    numbers: list[CategoryOptionResponse]
    moods: list[CategoryOptionResponse]
    tenses: list[CategoryOptionResponse]
    additional: list[CategoryOptionResponse]
    accents: list[str]


class EntryResponse(BaseModel):
    term: str
    stem: str | None = None
    ending: str
    person: int | None = None
    number: int | None = None
    mood: str | None = None
    tense: str | None = None
    additional: str | None = None
    labels: list[str] = []
    pronoun: str | None = None


class ConjugationTableResponse(BaseModel):
    verb: str
    entries: list[EntryResponse]


# === Endpoints ===

@router.get("/", response_model=list[str])
async def list_verbs():
    """Infinitives available for drilling."""
    return list(get_paradigms())


@router.get("/grammar", response_model=GrammarConfigResponse)
async def get_grammar_config():
    """Category options, labels and accent keys for the drill frontend."""
    return SPANISH_GRAMMAR_CONFIG.to_dict()


@router.get("/{verb}/conjugations", response_model=ConjugationTableResponse)
async def get_conjugations(verb: str):
    """Full expanded table for one verb, in drill order."""
    result = require(get_paradigms().get(verb), not_found("Verb", verb, origin="verbs_api"))
    raise_result(result)
    entries = expand(result.unwrap())
    log.debug("conjugations_expanded", verb=verb, count=len(entries))
    return ConjugationTableResponse(
        verb=verb,
        entries=[EntryResponse(**entry_view(e)) for e in entries],
    )
