"""Annotate each character of a sentence with its word boundary status and POS tag."""

from typing import List, Optional, Sequence, Tuple

from .schema import BoundaryStatus, CharacterToken
from .segmenter import Segmenter
from .errors import InputConsistencyError


def split_characters(sentence: str) -> List[CharacterToken]:
    """Split a sentence into one unannotated token per character."""
    return [CharacterToken(text=ch) for ch in sentence]


def boundary_status(position: int, length: int) -> BoundaryStatus:
    """Status of the character at ``position`` in a word of ``length`` characters."""
    if length == 1:
        return BoundaryStatus.S
    if position == 0:
        return BoundaryStatus.B
    if position == length - 1:
        return BoundaryStatus.E
    return BoundaryStatus.I


def annotate(
    sentence: str,
    segments: Sequence[Tuple[str, str]],
    sentence_index: Optional[int] = None,
) -> List[CharacterToken]:
    """
    Build the annotated character tokens of a sentence from its segmentation.

    Args:
        sentence: Raw sentence text
        segments: ``(word, pos_tag)`` pairs whose words concatenate to ``sentence``
        sentence_index: Position of the sentence in its batch or corpus, for error messages

    Returns:
        One CharacterToken per character, each with a boundary status and POS tag

    Raises:
        InputConsistencyError: If the segments do not cover the sentence exactly
    """
    tokens = split_characters(sentence)

    covered = sum(len(word) for word, _ in segments)
    if covered != len(tokens):
        raise InputConsistencyError(sentence, len(tokens), covered, sentence_index)

    index = 0
    for word, pos_tag in segments:
        if sentence[index:index + len(word)] != word:
            raise InputConsistencyError(
                sentence,
                len(tokens),
                covered,
                sentence_index,
                detail=f"segment {word!r} does not match the text at offset {index}",
            )
        for i in range(len(word)):
            token = tokens[index]
            token.boundary_status = boundary_status(i, len(word))
            token.pos_tag = pos_tag
            index += 1

    return tokens


def split_by_words(
    segmenter: Segmenter,
    sentence: str,
    sentence_index: Optional[int] = None,
) -> List[CharacterToken]:
    """Segment a sentence and annotate its characters."""
    return annotate(sentence, segmenter.segment(sentence), sentence_index)
