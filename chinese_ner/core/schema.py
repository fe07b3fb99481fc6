"""Schema definitions for character tokens, entity spans and training sentences."""

from typing import List, Dict, Optional, Tuple, Any
from dataclasses import dataclass
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class BoundaryStatus(str, Enum):
    """Position of a character inside its segmenter-emitted word."""
    B = "B"  # First character of a multi-character word
    I = "I"  # Inside a multi-character word
    E = "E"  # Last character of a multi-character word
    S = "S"  # Single-character word


class EntityKind(str, Enum):
    """Entity types recognized by the extractor."""
    PERSON_NAME = "person_name"
    LOCATION = "location"
    ORG_NAME = "org_name"
    TIME = "time"
    PRODUCT_NAME = "product_name"
    UNKNOWN = "unknown"


# One feature vector per character token, one tag per character token.
FeatureVector = List[str]
TagSequence = List[str]


@dataclass
class CharacterToken:
    """A single character of a sentence with its segmentation annotations."""
    text: str
    boundary_status: Optional[BoundaryStatus] = None
    pos_tag: str = ""

    @property
    def is_annotated(self) -> bool:
        return self.boundary_status is not None and self.pos_tag != ""


class EntitySpan(BaseModel):
    """A typed entity over token indices ``[start, end)``."""
    start: int = Field(..., ge=0)
    end: int
    kind: EntityKind

    @model_validator(mode="after")
    def validate_bounds(self) -> "EntitySpan":
        if self.end <= self.start:
            raise ValueError(f"Span end ({self.end}) must be greater than start ({self.start})")
        return self

    def __len__(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> Tuple[int, int, str]:
        return (self.start, self.end, self.kind.value)

    def overlaps(self, other: "EntitySpan") -> bool:
        """Check if two spans share at least one token."""
        return not (self.end <= other.start or other.end <= self.start)


class NamedEntity(BaseModel):
    """An extracted entity with its surface text."""
    word: str = Field(..., min_length=1)
    kind: EntityKind
    start: int
    end: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "kind": self.kind.value,
            "start": self.start,
            "end": self.end,
        }

    @classmethod
    def from_span(cls, span: EntitySpan, texts: List[str]) -> "NamedEntity":
        """Build an entity from a span over a list of token texts."""
        return cls(
            word="".join(texts[span.start:span.end]),
            kind=span.kind,
            start=span.start,
            end=span.end,
        )


class LabeledTrainingSentence(BaseModel):
    """Annotated character tokens paired 1:1 with gold labels from a corpus."""
    tokens: List[CharacterToken] = Field(..., min_length=1)
    labels: List[str] = Field(..., min_length=1)

    @field_validator("tokens")
    @classmethod
    def validate_tokens_annotated(cls, v: List[CharacterToken]) -> List[CharacterToken]:
        for i, token in enumerate(v):
            if not token.is_annotated:
                raise ValueError(f"Token {i} ({token.text!r}) has not been annotated")
        return v

    @model_validator(mode="after")
    def validate_labels_length(self) -> "LabeledTrainingSentence":
        if len(self.labels) != len(self.tokens):
            raise ValueError("Number of labels must match number of tokens")
        return self

    @property
    def sentence(self) -> str:
        return "".join(token.text for token in self.tokens)
