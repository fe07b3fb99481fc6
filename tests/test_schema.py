"""Tests for schema module."""

import pytest
from chinese_ner.core.schema import (
    BoundaryStatus,
    CharacterToken,
    EntityKind,
    EntitySpan,
    NamedEntity,
    LabeledTrainingSentence,
)


class TestCharacterToken:
    """Test CharacterToken dataclass."""

    def test_new_token_is_unannotated(self):
        token = CharacterToken(text="洗")
        assert token.boundary_status is None
        assert token.pos_tag == ""
        assert not token.is_annotated

    def test_annotated_token(self):
        token = CharacterToken(text="洗", boundary_status=BoundaryStatus.B, pos_tag="n")
        assert token.is_annotated

    def test_status_without_pos_is_not_annotated(self):
        token = CharacterToken(text="洗", boundary_status=BoundaryStatus.B)
        assert not token.is_annotated


class TestEntitySpan:
    """Test EntitySpan model."""

    def test_create_span(self):
        span = EntitySpan(start=2, end=4, kind=EntityKind.LOCATION)
        assert len(span) == 2
        assert span.as_tuple() == (2, 4, "location")

    def test_kind_from_string(self):
        span = EntitySpan(start=0, end=1, kind="person_name")
        assert span.kind == EntityKind.PERSON_NAME

    def test_empty_span_rejected(self):
        with pytest.raises(ValueError):
            EntitySpan(start=3, end=3, kind=EntityKind.TIME)

    def test_reversed_span_rejected(self):
        with pytest.raises(ValueError):
            EntitySpan(start=4, end=2, kind=EntityKind.TIME)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            EntitySpan(start=-1, end=2, kind=EntityKind.TIME)

    def test_overlaps(self):
        a = EntitySpan(start=0, end=3, kind=EntityKind.ORG_NAME)
        b = EntitySpan(start=2, end=5, kind=EntityKind.ORG_NAME)
        c = EntitySpan(start=3, end=5, kind=EntityKind.ORG_NAME)
        assert a.overlaps(b)
        assert not a.overlaps(c)


class TestNamedEntity:
    """Test NamedEntity model."""

    def test_from_span(self):
        span = EntitySpan(start=2, end=4, kind=EntityKind.LOCATION)
        entity = NamedEntity.from_span(span, list("今天纽约的"))
        assert entity.word == "纽约"
        assert entity.to_dict() == {"word": "纽约", "kind": "location", "start": 2, "end": 4}


class TestLabeledTrainingSentence:
    """Test LabeledTrainingSentence model."""

    def make_tokens(self):
        return [
            CharacterToken(text="北", boundary_status=BoundaryStatus.B, pos_tag="ns"),
            CharacterToken(text="京", boundary_status=BoundaryStatus.E, pos_tag="ns"),
        ]

    def test_create_sentence(self):
        sentence = LabeledTrainingSentence(tokens=self.make_tokens(), labels=["B-LOC", "I-LOC"])
        assert sentence.sentence == "北京"
        assert sentence.labels == ["B-LOC", "I-LOC"]

    def test_mismatched_length(self):
        with pytest.raises(ValueError):
            LabeledTrainingSentence(tokens=self.make_tokens(), labels=["B-LOC"])

    def test_unannotated_tokens_rejected(self):
        with pytest.raises(ValueError):
            LabeledTrainingSentence(tokens=[CharacterToken(text="北")], labels=["B-LOC"])
