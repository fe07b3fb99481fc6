"""Parse line-oriented gold-labeled training corpora."""

from typing import Iterable, List, Optional, Tuple, Union
from pathlib import Path
import logging

from ..core.schema import LabeledTrainingSentence
from ..core.segmenter import Segmenter
from ..core.annotator import split_by_words
from ..core.errors import InputConsistencyError, MalformedCorpusLineError

logger = logging.getLogger(__name__)


def _build_sentence(
    buffer: List[Tuple[int, str, str]],
    segmenter: Segmenter,
    sentence_index: int,
) -> LabeledTrainingSentence:
    sentence = "".join(token for _, token, _ in buffer)
    labels = [label for _, _, label in buffer]
    lines = f"corpus lines {buffer[0][0]}-{buffer[-1][0]}"

    try:
        tokens = split_by_words(segmenter, sentence, sentence_index)
    except InputConsistencyError as exc:
        raise InputConsistencyError(
            sentence, exc.expected, exc.actual, sentence_index, detail=lines,
        ) from exc

    if len(tokens) != len(labels):
        raise InputConsistencyError(
            sentence,
            len(tokens),
            len(labels),
            sentence_index,
            detail=f"gold labels do not align with the sentence characters, {lines}",
        )
    return LabeledTrainingSentence(tokens=tokens, labels=labels)


def parse_corpus_lines(
    lines: Iterable[str],
    segmenter: Segmenter,
    source: Optional[Union[str, Path]] = None,
) -> List[LabeledTrainingSentence]:
    """
    Parse ``<token> <label>`` lines into labeled training sentences.

    A blank line ends a sentence; the sentence text is rebuilt from its
    tokens and re-segmented so each character gets boundary and POS
    annotations. Tokens left over after the last blank line are not
    returned.

    Args:
        lines: Corpus lines (trailing newlines allowed)
        segmenter: Segmenter used to annotate the rebuilt sentences
        source: Corpus path, for error messages

    Returns:
        Sentences in corpus order

    Raises:
        MalformedCorpusLineError: If a non-blank line has fewer than two fields
        InputConsistencyError: If a sentence's labels do not align with its characters
    """
    sentences = []
    buffer: List[Tuple[int, str, str]] = []

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            # Blank line indicates end of sentence
            if buffer:
                sentences.append(_build_sentence(buffer, segmenter, len(sentences)))
                buffer = []
            continue

        parts = line.split()
        if len(parts) < 2:
            raise MalformedCorpusLineError(line_number, line, source)
        buffer.append((line_number, parts[0], parts[1]))

    if buffer:
        logger.debug(
            "Ignoring %d trailing tokens not terminated by a blank line", len(buffer)
        )

    logger.info("Parsed %d training sentences", len(sentences))
    return sentences


def parse_corpus(file_path: Union[str, Path], segmenter: Segmenter) -> List[LabeledTrainingSentence]:
    """Parse a UTF-8 corpus file. See ``parse_corpus_lines``."""
    file_path = Path(file_path)
    with open(file_path, "r", encoding="utf-8") as f:
        return parse_corpus_lines(f, segmenter, source=file_path)
