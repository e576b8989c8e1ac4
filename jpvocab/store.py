"""In-memory vocabulary record store with JSON/CSV persistence.

Records are unique per ``(word, dictionary_type)``. The store adds the
dictionary type, notes and reading context to what the engine extracts.
"""

from __future__ import annotations

import csv
from dataclasses import asdict, dataclass
from datetime import datetime
import json
import logging
from pathlib import Path
from typing import Any, Iterator

from .errors import DuplicateRecordError
from .extraction import compose_furigana
from .file_rules import ExportFiles
from .vocabulary import VocabularyEntry


LOGGER = logging.getLogger(__name__)

CSV_FIELDNAMES = [
    "word",
    "dictionary_type",
    "reading",
    "furigana",
    "definition",
    "pitch",
    "notes",
    "context",
]


@dataclass(frozen=True)
class VocabularyRecord:
    word: str
    dictionary_type: str
    reading: str
    definition: str
    pitch: str
    notes: str = ""
    context: str = ""

    @classmethod
    def from_entry(
        cls,
        entry: VocabularyEntry,
        dictionary_type: str,
        notes: str = "",
        context: str = "",
    ) -> "VocabularyRecord":
        return cls(
            word=entry.word,
            dictionary_type=dictionary_type,
            reading=entry.reading,
            definition=entry.definition,
            pitch=entry.pitch,
            notes=notes or "",
            context=context or "",
        )

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "VocabularyRecord":
        return cls(
            word=str(item.get("word", "") or ""),
            dictionary_type=str(item.get("dictionary_type", "") or ""),
            reading=str(item.get("reading", "") or ""),
            definition=str(item.get("definition", "") or ""),
            pitch=str(item.get("pitch", "") or ""),
            notes=str(item.get("notes", "") or ""),
            context=str(item.get("context", "") or ""),
        )

    @property
    def key(self) -> tuple[str, str]:
        return (self.word, self.dictionary_type)

    @property
    def furigana(self) -> str:
        return compose_furigana(self.word, self.reading)

    def to_entry(self) -> VocabularyEntry:
        return VocabularyEntry(
            word=self.word,
            reading=self.reading,
            definition=self.definition,
            pitch=self.pitch,
        )


class RecordStore:
    def __init__(self) -> None:
        self._records: dict[tuple[str, str], VocabularyRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VocabularyRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def add(self, record: VocabularyRecord) -> None:
        """Insert a new record; raises DuplicateRecordError on a key conflict."""
        if record.key in self._records:
            raise DuplicateRecordError(record.word, record.dictionary_type)
        self._records[record.key] = record

    def upsert(self, record: VocabularyRecord) -> None:
        self._records[record.key] = record

    def get(self, word: str, dictionary_type: str) -> VocabularyRecord | None:
        return self._records.get((word, dictionary_type))

    def remove(self, word: str, dictionary_type: str) -> bool:
        return self._records.pop((word, dictionary_type), None) is not None

    def contains_entry(self, entry: VocabularyEntry, dictionary_type: str) -> bool:
        """Check whether an equal entry is already stored under ``dictionary_type``.

        Uses entry equality, so a stored entry that differs only in pitch counts.
        """

        record = self.get(entry.word, dictionary_type)
        return record is not None and record.to_entry() == entry

    def save(self, paths: ExportFiles) -> tuple[str, str]:
        """Save all records to the JSON/CSV pair in ``paths``.

        The CSV is written as utf-8-sig so spreadsheet tools detect the encoding.
        """

        paths.json_path.parent.mkdir(parents=True, exist_ok=True)
        paths.csv_path.parent.mkdir(parents=True, exist_ok=True)

        items = [asdict(r) for r in self._records.values()]
        payload = {
            "created_at": datetime.now().isoformat(),
            "count": len(items),
            "items": items,
        }
        paths.json_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

        with paths.csv_path.open("w", encoding="utf-8-sig", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
            writer.writeheader()
            for record in self._records.values():
                row = asdict(record)
                row["furigana"] = record.furigana
                writer.writerow(row)

        LOGGER.info("Saved vocabulary json=%s csv=%s count=%d", paths.json_path, paths.csv_path, len(items))
        return str(paths.json_path), str(paths.csv_path)

    @classmethod
    def load(cls, json_path: str | Path) -> "RecordStore":
        path = Path(json_path)
        if not path.exists():
            raise FileNotFoundError(f"Vocabulary JSON not found: {path}")

        payload = json.loads(path.read_text(encoding="utf-8"))
        items = payload.get("items", [])
        store = cls()
        if not isinstance(items, list):
            LOGGER.warning("Vocabulary JSON has no item list: %s", path)
            return store
        for item in items:
            store.upsert(VocabularyRecord.from_dict(item))
        return store
