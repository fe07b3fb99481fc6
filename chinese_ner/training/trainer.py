"""Training utilities for CRF NER models."""

from typing import Optional, Dict, Any, Union
from pathlib import Path
import logging

from ..config import NerSettings, get_settings
from ..core.segmenter import Segmenter, JiebaSegmenter
from ..core.labeler import SequenceLabeler, CrfSuiteLabeler, TrainingReport
from ..data.dataset import NerCorpus
from ..utils.metrics import evaluate_tags, compute_entity_metrics

logger = logging.getLogger(__name__)


class NERTrainer:
    """Trains a CRF model from a gold-labeled corpus."""

    def __init__(
        self,
        model_path: Optional[Union[str, Path]] = None,
        segmenter: Optional[Segmenter] = None,
        labeler: Optional[SequenceLabeler] = None,
        settings: Optional[NerSettings] = None,
    ):
        """
        Initialize the trainer.

        Args:
            model_path: Where to write the model (``settings.model_path`` if None)
            segmenter: Segmenter used to annotate corpus sentences
            labeler: Sequence labeler to train
            settings: Training settings (environment settings if None)
        """
        self.settings = settings or get_settings()
        self.model_path = Path(model_path) if model_path is not None else self.settings.model_path
        self.segmenter = segmenter or JiebaSegmenter(
            hmm=self.settings.hmm, user_dict=self.settings.user_dict
        )
        self.labeler = labeler or CrfSuiteLabeler(algorithm=self.settings.algorithm)

    def crf_params(self) -> Dict[str, Any]:
        return self.settings.crf_params()

    def train(self, dataset_path: Union[str, Path]) -> TrainingReport:
        """
        Train a model on a corpus file and write it to ``model_path``.

        When ``holdout_ratio`` is set, that share of the sentences is kept
        out of training and the trained model is evaluated on it.

        Args:
            dataset_path: ``<token> <label>`` per line corpus file

        Returns:
            TrainingReport, with holdout metrics when evaluated

        Raises:
            FileNotFoundError: If the dataset does not exist
            MalformedCorpusLineError: If the corpus has a malformed line
            LabelerError: If training fails
        """
        dataset_path = Path(dataset_path)
        if not dataset_path.is_file():
            raise FileNotFoundError(f"Training dataset does not exist: {dataset_path}")

        logger.info("Loading training corpus from %s", dataset_path)
        corpus = NerCorpus.from_file(dataset_path, self.segmenter)

        holdout = None
        if self.settings.holdout_ratio > 0:
            corpus, holdout = corpus.train_test_split(
                test_size=self.settings.holdout_ratio,
                random_state=self.settings.random_state,
            )
            logger.info("Holding out %d of %d sentences", len(holdout), len(corpus) + len(holdout))

        report = self.labeler.train(corpus.to_training_set(), self.crf_params(), self.model_path)

        if holdout is not None and len(holdout) > 0:
            report.holdout_count = len(holdout)
            report.metrics = self.evaluate(holdout)
            logger.info("Holdout f1: %.4f", report.metrics["f1"])

        return report

    def evaluate(self, corpus: NerCorpus) -> Dict[str, Any]:
        """
        Evaluate the model at ``model_path`` on a labeled corpus.

        Args:
            corpus: Evaluation corpus

        Returns:
            seqeval tag metrics merged with entity span metrics
        """
        model = self.labeler.load_model(self.model_path)

        true_tags = []
        pred_tags = []
        for features, labels in corpus.to_training_set():
            true_tags.append(labels)
            pred_tags.append(self.labeler.tag(model, features))

        metrics = evaluate_tags(true_tags, pred_tags)
        metrics.update(compute_entity_metrics(true_tags, pred_tags))
        return metrics
