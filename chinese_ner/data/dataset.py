"""Dataset utilities for CRF training and evaluation."""

from typing import List, Dict, Optional, Union, Tuple
from pathlib import Path
import random

from ..core.schema import FeatureVector, LabeledTrainingSentence
from ..core.segmenter import Segmenter
from ..core.features import sent2features
from .corpus import parse_corpus


class NerCorpus:
    """Labeled training sentences, ready to be turned into CRF training data."""

    def __init__(self, sentences: List[LabeledTrainingSentence]):
        self.sentences = sentences

    def __len__(self) -> int:
        return len(self.sentences)

    def __getitem__(self, idx: int) -> LabeledTrainingSentence:
        return self.sentences[idx]

    def to_training_set(self) -> List[Tuple[List[FeatureVector], List[str]]]:
        """Feature sequences paired with gold label sequences, in corpus order."""
        return [(sent2features(s.tokens), list(s.labels)) for s in self.sentences]

    @classmethod
    def from_file(cls, file_path: Union[str, Path], segmenter: Segmenter) -> "NerCorpus":
        """
        Load a corpus file.

        Args:
            file_path: Path to a ``<token> <label>`` per line file
            segmenter: Segmenter used to annotate the sentences

        Returns:
            NerCorpus instance
        """
        return cls(parse_corpus(file_path, segmenter))

    def train_test_split(
        self,
        test_size: float = 0.2,
        random_state: Optional[int] = None,
    ) -> Tuple["NerCorpus", "NerCorpus"]:
        """
        Split the corpus into train and test sets.

        Sentences keep their corpus order within each split.

        Args:
            test_size: Proportion of test set
            random_state: Random seed

        Returns:
            Tuple of (train_corpus, test_corpus)
        """
        if not 0.0 <= test_size < 1.0:
            raise ValueError(f"test_size must be in [0, 1), got {test_size}")

        rng = random.Random(random_state)
        indices = list(range(len(self.sentences)))
        rng.shuffle(indices)

        split_idx = int(len(indices) * (1 - test_size))
        train_indices = sorted(indices[:split_idx])
        test_indices = sorted(indices[split_idx:])

        train_corpus = NerCorpus([self.sentences[i] for i in train_indices])
        test_corpus = NerCorpus([self.sentences[i] for i in test_indices])

        return train_corpus, test_corpus

    def get_label_distribution(self) -> Dict[str, int]:
        """Get distribution of gold labels in the corpus."""
        label_counts = {}
        for sentence in self.sentences:
            for label in sentence.labels:
                label_counts[label] = label_counts.get(label, 0) + 1
        return label_counts
