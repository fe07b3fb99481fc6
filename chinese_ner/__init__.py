"""
chinese-ner - Chinese named entity recognition

Character-level CRF tagging over jieba segmentation features.
"""

__version__ = "0.1.0"

from .core.tagger import ChineseNER, SentencePrediction
from .core.schema import (
    BoundaryStatus,
    CharacterToken,
    EntityKind,
    EntitySpan,
    NamedEntity,
    LabeledTrainingSentence,
)
from .core.segmenter import Segmenter, JiebaSegmenter
from .core.labeler import SequenceLabeler, CrfSuiteLabeler, ModelHandle, TrainingReport
from .core.errors import (
    ChineseNerError,
    InputConsistencyError,
    ModelLoadError,
    MalformedCorpusLineError,
    LabelerError,
)
from .data.dataset import NerCorpus
from .training.trainer import NERTrainer

__all__ = [
    "ChineseNER",
    "SentencePrediction",
    "BoundaryStatus",
    "CharacterToken",
    "EntityKind",
    "EntitySpan",
    "NamedEntity",
    "LabeledTrainingSentence",
    "Segmenter",
    "JiebaSegmenter",
    "SequenceLabeler",
    "CrfSuiteLabeler",
    "ModelHandle",
    "TrainingReport",
    "ChineseNerError",
    "InputConsistencyError",
    "ModelLoadError",
    "MalformedCorpusLineError",
    "LabelerError",
    "NerCorpus",
    "NERTrainer",
]
