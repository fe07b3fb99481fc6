"""CRF sequence labeler backed by python-crfsuite."""

from typing import Dict, Optional, Sequence, Tuple, Union, Any, Protocol
from dataclasses import dataclass
from pathlib import Path
import logging
import time

import pycrfsuite

from .schema import FeatureVector, TagSequence
from .errors import LabelerError, ModelLoadError

logger = logging.getLogger(__name__)

TrainingExample = Tuple[Sequence[FeatureVector], Sequence[str]]


@dataclass(frozen=True)
class ModelHandle:
    """A loaded model, owned by the predictor that uses it."""
    path: Path
    tagger: Any


@dataclass
class TrainingReport:
    """Statistics from a training run."""
    model_path: Path
    sentence_count: int = 0
    token_count: int = 0
    training_time: float = 0.0
    last_iteration: Optional[int] = None
    loss: Optional[float] = None
    feature_count: Optional[int] = None
    holdout_count: int = 0
    metrics: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "model_path": str(self.model_path),
            "sentence_count": self.sentence_count,
            "token_count": self.token_count,
            "training_time": self.training_time,
            "last_iteration": self.last_iteration,
            "loss": self.loss,
            "feature_count": self.feature_count,
            "holdout_count": self.holdout_count,
            "metrics": self.metrics,
        }


class SequenceLabeler(Protocol):
    """Protocol for pluggable sequence labelers."""

    def train(
        self,
        training_set: Sequence[TrainingExample],
        params: Dict[str, Any],
        model_path: Union[str, Path],
    ) -> TrainingReport:
        """Train a model and write it to ``model_path``."""
        ...

    def load_model(self, model_path: Union[str, Path]) -> ModelHandle:
        """Open a model written by ``train``."""
        ...

    def tag(self, model: ModelHandle, features: Sequence[FeatureVector]) -> TagSequence:
        """Return the best tag sequence, one tag per feature vector."""
        ...


class CrfSuiteLabeler:
    """Linear-chain CRF trained and applied with crfsuite."""

    def __init__(
        self,
        algorithm: str = "lbfgs",
        graphical_model: str = "crf1d",
        verbose: bool = False,
    ):
        """
        Initialize the labeler.

        Args:
            algorithm: crfsuite training algorithm (lbfgs, l2sgd, ap, pa, arow)
            graphical_model: crfsuite graphical model type
            verbose: Print crfsuite's training log to stdout
        """
        self.algorithm = algorithm
        self.graphical_model = graphical_model
        self.verbose = verbose

    def train(
        self,
        training_set: Sequence[TrainingExample],
        params: Dict[str, Any],
        model_path: Union[str, Path],
    ) -> TrainingReport:
        """
        Train a CRF on ``(features, labels)`` pairs.

        Args:
            training_set: Feature sequences paired with gold label sequences
            params: crfsuite parameters (c1, c2, max_iterations, ...)
            model_path: Output path for the model file

        Returns:
            TrainingReport with training statistics

        Raises:
            LabelerError: If there is nothing to train on or crfsuite fails
        """
        model_path = Path(model_path)
        if not training_set:
            raise LabelerError("No training data provided")

        report = TrainingReport(model_path=model_path)

        try:
            trainer = pycrfsuite.Trainer(verbose=self.verbose)
            trainer.select(self.algorithm, self.graphical_model)
            for xseq, yseq in training_set:
                trainer.append(list(xseq), list(yseq))
                report.sentence_count += 1
                report.token_count += len(xseq)
            trainer.set_params(params)

            logger.info(
                "Training CRF (%s) on %d sentences, %d tokens",
                self.algorithm, report.sentence_count, report.token_count,
            )
            start = time.time()
            trainer.train(str(model_path))
            report.training_time = time.time() - start
        except Exception as exc:
            raise LabelerError(f"CRF training failed: {exc}") from exc

        info = trainer.logparser.last_iteration
        if info:
            report.last_iteration = info.get("num")
            report.loss = info.get("loss")
            report.feature_count = info.get("active_features")

        logger.info("Model written to %s in %.2fs", model_path, report.training_time)
        return report

    def load_model(self, model_path: Union[str, Path]) -> ModelHandle:
        """Open a crfsuite model file for tagging."""
        model_path = Path(model_path)
        if not model_path.is_file():
            raise ModelLoadError(model_path, "file does not exist")

        tagger = pycrfsuite.Tagger()
        try:
            tagger.open(str(model_path))
        except (OSError, ValueError) as exc:
            raise ModelLoadError(model_path, str(exc)) from exc

        logger.info("Loaded CRF model from %s", model_path)
        return ModelHandle(path=model_path, tagger=tagger)

    def tag(self, model: ModelHandle, features: Sequence[FeatureVector]) -> TagSequence:
        if not features:
            return []

        try:
            tags = model.tagger.tag([list(item) for item in features])
        except Exception as exc:
            raise LabelerError(f"CRF tagging failed: {exc}") from exc

        if len(tags) != len(features):
            raise LabelerError(f"Labeler returned {len(tags)} tags for {len(features)} tokens")
        return list(tags)
