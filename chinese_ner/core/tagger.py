"""Main ChineseNER class for named entity recognition."""

from typing import List, Dict, Optional, Union, Any
from dataclasses import dataclass, field
from pathlib import Path
import logging

from .schema import CharacterToken, EntitySpan, FeatureVector, NamedEntity, TagSequence
from .segmenter import Segmenter, JiebaSegmenter
from .labeler import SequenceLabeler, CrfSuiteLabeler, ModelHandle
from .annotator import split_by_words
from .features import sent2features
from .entities import build_entities, extract_spans
from .errors import ChineseNerError

logger = logging.getLogger(__name__)


@dataclass
class SentencePrediction:
    """Result of predicting one sentence of a batch."""
    index: int
    sentence: str
    tags: TagSequence = field(default_factory=list)
    entities: List[NamedEntity] = field(default_factory=list)
    error: Optional[ChineseNerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "sentence": self.sentence,
            "tags": self.tags,
            "entities": [e.to_dict() for e in self.entities],
            "error": str(self.error) if self.error else None,
        }


class ChineseNER:
    """Chinese named entity recognizer: segmentation, features, CRF tagging, span decoding."""

    def __init__(
        self,
        model: ModelHandle,
        segmenter: Optional[Segmenter] = None,
        labeler: Optional[SequenceLabeler] = None,
    ):
        """
        Initialize the recognizer.

        Args:
            model: Loaded model handle (see ``SequenceLabeler.load_model``)
            segmenter: Word segmenter with POS tags (jieba if None)
            labeler: Sequence labeler that produced ``model`` (crfsuite if None)
        """
        self.model = model
        self.segmenter = segmenter or JiebaSegmenter()
        self.labeler = labeler or CrfSuiteLabeler()

    def annotate(self, sentence: str, sentence_index: Optional[int] = None) -> List[CharacterToken]:
        """Split a sentence into annotated character tokens."""
        return split_by_words(self.segmenter, sentence, sentence_index)

    def features(self, sentence: str) -> List[FeatureVector]:
        """Build the labeler input for a sentence."""
        return sent2features(self.annotate(sentence))

    def predict(self, sentence: str) -> TagSequence:
        """
        Tag every character of a sentence.

        Args:
            sentence: Raw text

        Returns:
            One tag per character
        """
        if not sentence:
            return []
        return self.labeler.tag(self.model, self.features(sentence))

    def extract_spans(self, sentence: str) -> List[EntitySpan]:
        """Predict a sentence and decode its entity spans."""
        return extract_spans(self.predict(sentence))

    def extract_entities(self, sentence: str) -> List[NamedEntity]:
        """Predict a sentence and return its entities with surface text."""
        return build_entities(sentence, self.predict(sentence))

    def predict_batch(self, sentences: List[str]) -> List[SentencePrediction]:
        """
        Predict independent sentences.

        A sentence that fails keeps its error on its own result; the others
        are still predicted.

        Args:
            sentences: Raw texts

        Returns:
            One SentencePrediction per input, in order
        """
        results = []
        for index, sentence in enumerate(sentences):
            result = SentencePrediction(index=index, sentence=sentence)
            try:
                tokens = self.annotate(sentence, sentence_index=index) if sentence else []
                result.tags = self.labeler.tag(self.model, sent2features(tokens)) if tokens else []
                result.entities = build_entities(tokens, result.tags)
            except ChineseNerError as exc:
                logger.warning("Prediction failed for sentence %d: %s", index, exc)
                result.tags = []
                result.error = exc
            results.append(result)
        return results

    @classmethod
    def from_model_file(
        cls,
        model_path: Union[str, Path],
        segmenter: Optional[Segmenter] = None,
        labeler: Optional[SequenceLabeler] = None,
    ) -> "ChineseNER":
        """
        Create a recognizer from a model file.

        Raises:
            ModelLoadError: If the model file is missing or unreadable
        """
        labeler = labeler or CrfSuiteLabeler()
        model = labeler.load_model(model_path)
        return cls(model, segmenter, labeler)
