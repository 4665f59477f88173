"""Drill API Routes

The event surface of the single drill session. Every endpoint returns the
session snapshot after the transition.
"""
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from core.config import settings
from core.errors import raise_result
from core.logging import api_logger
from engines.drill import DrillSession
from languages.spanish import get_paradigms

from api.verbs import EntryResponse

log = api_logger()

router = APIRouter()


# === Request/Response Models ===

class VerbSelect(BaseModel):
    verb: str


class TypedText(BaseModel):
    text: str


class AccentInsert(BaseModel):
    accent: str


class GuessUpdate(BaseModel):
    category: str
    value: int | str


class GuessesResponse(BaseModel):
    person: int
    number: int
    mood: str
    tense: str


class DrillStateResponse(BaseModel):
    verb: str
    phase: str
    current_index: int
    entry: EntryResponse
    typed_text: str
    guesses: GuessesResponse
    error: str | None = None
    accents: list[str]


def new_session(seed: int | None = None) -> DrillSession:
    """Fresh session on the configured default verb."""
    return DrillSession(
        get_paradigms(),
        verb=settings.DEFAULT_VERB,
        seed=seed if seed is not None else settings.DRILL_SEED,
    )


def get_session(request: Request) -> DrillSession:
    """The application's drill session, created on first use."""
    session = getattr(request.app.state, "drill", None)
    if session is None:
        session = new_session()
        request.app.state.drill = session
    return session


# === Endpoints ===

@router.get("/state", response_model=DrillStateResponse)
async def get_state(session: DrillSession = Depends(get_session)):
    """Current snapshot."""
    return session.snapshot()


@router.post("/verb", response_model=DrillStateResponse)
async def select_verb(data: VerbSelect, session: DrillSession = Depends(get_session)):
    """Switch to another verb."""
    raise_result(session.select_verb(data.verb))
    return session.snapshot()


@router.post("/typed", response_model=DrillStateResponse)
async def set_typed_text(data: TypedText, session: DrillSession = Depends(get_session)):
    """Replace the typed answer text."""
    raise_result(session.set_typed_text(data.text))
    return session.snapshot()


@router.post("/accent", response_model=DrillStateResponse)
async def append_accent(data: AccentInsert, session: DrillSession = Depends(get_session)):
    """Append an accented vowel to the typed text."""
    raise_result(session.append_accent(data.accent))
    return session.snapshot()


@router.post("/guess", response_model=DrillStateResponse)
async def set_guess(data: GuessUpdate, session: DrillSession = Depends(get_session)):
    """Change one of the four category guesses."""
    raise_result(session.set_guess(data.category, data.value))
    return session.snapshot()


@router.post("/submit", response_model=DrillStateResponse)
async def submit_guess(session: DrillSession = Depends(get_session)):
    """Check the guesses. A mismatch is reported in the snapshot's error field."""
    raise_result(session.submit_guess())
    return session.snapshot()


@router.post("/reset", response_model=DrillStateResponse)
async def reset(request: Request, seed: int | None = None):
    """Start over on the default verb."""
    session = new_session(seed)
    request.app.state.drill = session
    log.info("drill_reset", seed=seed)
    return session.snapshot()
