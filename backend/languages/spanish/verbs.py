"""Spanish verb paradigms loaded from the YAML content file."""
from functools import lru_cache
from pathlib import Path

import yaml

from core.config import settings
from core.logging import engine_logger
from engines.conjugation import VerbParadigm

log = engine_logger()


def load_paradigms(path: Path) -> dict[str, VerbParadigm]:
    """Parse an infinitive -> paradigm mapping.

    Paradigms are trusted as-is: every finite group must already hold
    exactly six forms in person/number order.
    """
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    paradigms = {
        infinitive: VerbParadigm.from_dict({"infinitive": infinitive, **data})
        for infinitive, data in raw.items()
    }
    log.info("verbs_loaded", path=str(path), count=len(paradigms))
    return paradigms


@lru_cache(maxsize=1)
def get_paradigms() -> dict[str, VerbParadigm]:
    """Paradigms from the configured content file (loaded once)."""
    return load_paradigms(settings.VERBS_PATH)
