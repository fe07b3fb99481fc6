"""Exception types raised by the NER pipeline."""

from typing import Optional, Union
from pathlib import Path


class ChineseNerError(Exception):
    """Base class for all pipeline errors."""


class InputConsistencyError(ChineseNerError):
    """Segmentation (or gold labels) do not cover a sentence character for character."""

    def __init__(
        self,
        sentence: str,
        expected: int,
        actual: int,
        sentence_index: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.sentence = sentence
        self.expected = expected
        self.actual = actual
        self.sentence_index = sentence_index

        where = f"sentence {sentence_index}" if sentence_index is not None else "sentence"
        message = f"{where} {sentence!r}: expected {expected} characters, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ModelLoadError(ChineseNerError):
    """A model file is missing or could not be opened."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load model {self.path}: {reason}")


class MalformedCorpusLineError(ChineseNerError):
    """A training corpus line lacks the ``<token> <label>`` fields."""

    def __init__(self, line_number: int, line: str, path: Optional[Union[str, Path]] = None):
        self.line_number = line_number
        self.line = line
        self.path = Path(path) if path is not None else None

        location = f"{self.path}:{line_number}" if self.path else f"line {line_number}"
        super().__init__(f"{location}: expected '<token> <label>', got {line!r}")


class LabelerError(ChineseNerError):
    """The sequence labeler failed to train or tag."""
