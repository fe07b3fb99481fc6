"""Decode a flat tag sequence into typed entity spans."""

from typing import List, Sequence, Union

from .schema import CharacterToken, EntityKind, EntitySpan, NamedEntity

# Checked in order; the first substring found in the tag decides the kind.
TAG_KIND_RULES = [
    ("PRO", EntityKind.PRODUCT_NAME),
    ("PER", EntityKind.PERSON_NAME),
    ("TIM", EntityKind.TIME),
    ("ORG", EntityKind.ORG_NAME),
    ("LOC", EntityKind.LOCATION),
]

OUTSIDE_TAG = "O"


def classify_tag(tag: str) -> EntityKind:
    """Map a tag such as ``B-LOC`` to an entity kind (case-insensitive)."""
    upper = tag.upper()
    for needle, kind in TAG_KIND_RULES:
        if needle in upper:
            return kind
    return EntityKind.UNKNOWN


def extract_spans(tags: Sequence[str]) -> List[EntitySpan]:
    """
    Scan a tag sequence and return the entity spans it encodes.

    A span opens at any tag starting with ``B`` and closes at the next tag
    that is exactly ``O``; its kind comes from the opening tag. A ``B`` tag
    seen while a span is open does not start a new one, and a span still
    open at the end of the sequence is not emitted.

    Args:
        tags: Tag sequence aligned with the sentence's tokens

    Returns:
        Non-overlapping spans in order of their start index
    """
    spans = []
    start = None

    for i, tag in enumerate(tags):
        if start is None:
            if tag.startswith("B"):
                start = i
        elif tag == OUTSIDE_TAG:
            spans.append(EntitySpan(start=start, end=i, kind=classify_tag(tags[start])))
            start = None

    return spans


def build_entities(
    tokens: Union[str, Sequence[CharacterToken]],
    tags: Sequence[str],
) -> List[NamedEntity]:
    """
    Extract entities with their surface text.

    Args:
        tokens: The sentence itself or its character tokens
        tags: Tag sequence aligned with ``tokens``

    Returns:
        List of NamedEntity, in sentence order
    """
    if isinstance(tokens, str):
        texts = list(tokens)
    else:
        texts = [token.text for token in tokens]

    if len(texts) != len(tags):
        raise ValueError(f"Got {len(tags)} tags for {len(texts)} tokens")

    return [NamedEntity.from_span(span, texts) for span in extract_spans(tags)]
