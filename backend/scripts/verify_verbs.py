#!/usr/bin/env python3
"""Print expanded conjugation tables and check every verb file entry expands cleanly.

Run with: python3 -m scripts.verify_verbs [--verb amar] [--path verbs.yaml]
"""
import argparse
from pathlib import Path

from core.config import settings
from engines.conjugation import ENTRIES_PER_VERB, expand, fold_diacritics, split_term
from languages.spanish import describe_entry, load_paradigms

# ANSI color codes
C_RESET = "\033[0m"
C_BOLD = "\033[1m"
C_DIM = "\033[2m"
C_GREEN = "\033[32m"
C_RED = "\033[31m"


def print_table(verb: str, paradigm) -> bool:
    entries = expand(paradigm)
    ok = len(entries) == ENTRIES_PER_VERB
    mark = f"{C_GREEN}✅{C_RESET}" if ok else f"{C_RED}❌{C_RESET}"
    print(f"{mark} {C_BOLD}{verb}{C_RESET} ({len(entries)} forms)")

    for entry in entries:
        stem, ending = split_term(entry)
        if entry.stem is not None and not all(
            fold_diacritics(e.term).startswith(fold_diacritics(entry.stem))
            for e in entries
            if e.mood == entry.mood and e.tense == entry.tense and e.stem is not None
        ):
            ok = False
            print(f"    {C_RED}stem '{entry.stem}' is not shared by its group{C_RESET}")
        labels = ", ".join(describe_entry(entry))
        print(f"    {C_DIM}{stem}{C_RESET}{C_BOLD}{ending}{C_RESET}  {C_DIM}{labels}{C_RESET}")
    return ok


def main():
    parser = argparse.ArgumentParser(description="Verify Spanish verb paradigms")
    parser.add_argument("--verb", help="Only print this infinitive")
    parser.add_argument("--path", type=Path, default=settings.VERBS_PATH, help="Verb content file")
    args = parser.parse_args()

    paradigms = load_paradigms(args.path)
    selected = [args.verb] if args.verb else list(paradigms)

    failures = 0
    for verb in selected:
        if verb not in paradigms:
            print(f"{C_RED}❌ Verb '{verb}' not found.{C_RESET}")
            failures += 1
            continue
        if not print_table(verb, paradigms[verb]):
            failures += 1

    raise SystemExit(1 if failures else 0)


if __name__ == "__main__":
    main()
