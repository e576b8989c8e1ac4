"""Exceptions raised by the collaborators around the extraction engine."""


class VocabularyError(Exception):
    """Base class for jpvocab errors."""


class DuplicateRecordError(VocabularyError):
    def __init__(self, word: str, dictionary_type: str) -> None:
        super().__init__(f"Record already exists: word={word} dictionary_type={dictionary_type}")
        self.word = word
        self.dictionary_type = dictionary_type


class SerializationError(VocabularyError):
    """Raised when an encoded entry cannot be decoded."""
