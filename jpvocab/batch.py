"""Bulk extraction over many scraped entries."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from pathlib import Path
from typing import Iterable

from .errors import DuplicateRecordError
from .store import RecordStore, VocabularyRecord
from .vocabulary import VocabularyEntry


LOGGER = logging.getLogger(__name__)


def _build_entry(pair: tuple[str | None, str | None]) -> VocabularyEntry:
    raw_source, definition_source = pair
    return VocabularyEntry.from_source(raw_source, definition_source)


def extract_entries(
    pairs: Iterable[tuple[str | None, str | None]],
    max_workers: int = 1,
) -> list[VocabularyEntry]:
    """Build entries from ``(raw_source, definition_source)`` pairs, keeping input order."""

    items = list(pairs)
    if max_workers <= 1 or len(items) < 2:
        return [_build_entry(p) for p in items]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(_build_entry, items))


def read_source_file(path: str | Path) -> list[tuple[str, str]]:
    """Read ``raw<TAB>definition`` lines from a UTF-8 text file."""

    src = Path(path)
    if not src.exists():
        raise FileNotFoundError(f"Source file not found: {src}")

    pairs: list[tuple[str, str]] = []
    with src.open(encoding="utf-8", newline="\n") as f:
        for line in f:
            line = line.rstrip("\n")
            if line.endswith("\r"):
                line = line[:-1]
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            # Only the line terminator is removed; fields are passed through as-is.
            raw, _, definition = line.partition("\t")
            pairs.append((raw, definition))
    LOGGER.info("Read %d source lines from %s", len(pairs), src)
    return pairs


def collect_records(
    entries: Iterable[VocabularyEntry],
    dictionary_type: str,
    store: RecordStore,
) -> tuple[int, int]:
    """Add entries to ``store``; duplicates are skipped. Returns (added, skipped)."""

    added = 0
    skipped = 0
    for entry in entries:
        if store.contains_entry(entry, dictionary_type):
            LOGGER.info("Skipping duplicate entry word=%s reading=%s", entry.word, entry.reading)
            skipped += 1
            continue
        try:
            store.add(VocabularyRecord.from_entry(entry, dictionary_type))
        except DuplicateRecordError as exc:
            LOGGER.warning("%s", exc)
            skipped += 1
            continue
        added += 1
    return added, skipped
