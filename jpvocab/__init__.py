"""Core module exports for jpvocab."""

from .batch import collect_records, extract_entries, read_source_file
from .config import DEFAULT_CONFIG, cfg_get, load_config
from .errors import DuplicateRecordError, SerializationError, VocabularyError
from .extraction import compose_furigana, isolate_pitch, isolate_reading, isolate_word, normalize
from .file_rules import ExportFiles, build_export_bundle, validate_bundle
from .store import RecordStore, VocabularyRecord
from .vocabulary import VocabularyEntry

__all__ = [
    "DEFAULT_CONFIG",
    "DuplicateRecordError",
    "ExportFiles",
    "RecordStore",
    "SerializationError",
    "VocabularyEntry",
    "VocabularyError",
    "VocabularyRecord",
    "build_export_bundle",
    "cfg_get",
    "collect_records",
    "compose_furigana",
    "extract_entries",
    "isolate_pitch",
    "isolate_reading",
    "isolate_word",
    "load_config",
    "normalize",
    "read_source_file",
    "validate_bundle",
]
