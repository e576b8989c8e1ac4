"""Vocabulary entry value object.

Equality covers ``word``, ``reading`` and ``definition`` only. ``pitch`` is
still part of the hash, so two equal entries with different pitch usually
hash differently. Sets and dict keys built from such entries can therefore
hold both; deduplication should compare entries with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any, Iterable

from .errors import SerializationError
from .extraction import compose_furigana, isolate_pitch, isolate_reading, isolate_word

ENCODING_VERSION = 1


@dataclass(frozen=True)
class VocabularyEntry:
    word: str
    reading: str
    definition: str
    # Generated annotation: hashed, not compared.
    pitch: str = field(default="", compare=False, hash=True)

    @classmethod
    def from_source(cls, raw_source: str | None, definition_source: str | None) -> "VocabularyEntry":
        """Extract an entry from the raw headword source and its definition text."""
        return cls(
            word=isolate_word(raw_source),
            reading=isolate_reading(raw_source),
            definition=definition_source or "",
            pitch=isolate_pitch(raw_source),
        )

    @property
    def furigana(self) -> str:
        return compose_furigana(self.word, self.reading)

    def to_fields(self) -> tuple[str, str, str, str]:
        return (self.word, self.reading, self.definition, self.pitch)

    @classmethod
    def from_fields(cls, fields: Iterable[Any]) -> "VocabularyEntry":
        """Rebuild an entry from its four ordered fields without re-extracting."""
        values = list(fields)
        if len(values) != 4 or not all(isinstance(v, str) for v in values):
            raise SerializationError(f"Expected 4 string fields, got: {values!r}")
        word, reading, definition, pitch = values
        return cls(word=word, reading=reading, definition=definition, pitch=pitch)

    def encode(self) -> str:
        payload = {"version": ENCODING_VERSION, "fields": list(self.to_fields())}
        return json.dumps(payload, ensure_ascii=False)

    @classmethod
    def decode(cls, payload: str) -> "VocabularyEntry":
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Invalid entry payload: {exc}") from exc

        if not isinstance(data, dict):
            raise SerializationError("Entry payload must be a JSON object")
        version = data.get("version")
        if version != ENCODING_VERSION:
            raise SerializationError(f"Unsupported entry encoding version: {version!r}")
        fields = data.get("fields")
        if not isinstance(fields, list):
            raise SerializationError("Entry payload is missing its field list")
        return cls.from_fields(fields)
