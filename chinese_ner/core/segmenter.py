"""Word segmentation with part-of-speech tags."""

from typing import List, Optional, Tuple, Union, Protocol
from pathlib import Path
import logging

import jieba
import jieba.posseg

logger = logging.getLogger(__name__)


class Segmenter(Protocol):
    """Protocol for pluggable word segmenters.

    ``segment`` must return ``(word, pos_tag)`` pairs whose words concatenate
    back to the input text.
    """

    def segment(self, text: str) -> List[Tuple[str, str]]:
        ...


class JiebaSegmenter:
    """Segmenter backed by jieba's POS tokenizer."""

    def __init__(self, hmm: bool = True, user_dict: Optional[Union[str, Path]] = None):
        """
        Initialize the segmenter.

        Args:
            hmm: Use the HMM model to discover words missing from the dictionary
            user_dict: Optional jieba user dictionary file
        """
        self.hmm = hmm
        self.user_dict = Path(user_dict) if user_dict is not None else None
        self._tokenizer: Optional[jieba.posseg.POSTokenizer] = None

    @property
    def tokenizer(self) -> jieba.posseg.POSTokenizer:
        # jieba builds its prefix dictionary on first use, which takes a moment
        if self._tokenizer is None:
            base = jieba.Tokenizer()
            if self.user_dict is not None:
                logger.info("Loading jieba user dictionary from %s", self.user_dict)
                base.load_userdict(str(self.user_dict))
            self._tokenizer = jieba.posseg.POSTokenizer(base)
        return self._tokenizer

    def segment(self, text: str) -> List[Tuple[str, str]]:
        return [(pair.word, pair.flag) for pair in self.tokenizer.cut(text, HMM=self.hmm)]
