"""Core components for chinese-ner."""

from .schema import BoundaryStatus, CharacterToken, EntityKind, EntitySpan, NamedEntity
from .annotator import annotate, split_by_words
from .features import sent2features, word2features
from .entities import classify_tag, extract_spans, build_entities
from .tagger import ChineseNER

__all__ = [
    "BoundaryStatus",
    "CharacterToken",
    "EntityKind",
    "EntitySpan",
    "NamedEntity",
    "annotate",
    "split_by_words",
    "sent2features",
    "word2features",
    "classify_tag",
    "extract_spans",
    "build_entities",
    "ChineseNER",
]
