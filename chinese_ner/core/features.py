"""Context-window features for the CRF sequence labeler."""

from typing import List, Sequence
import string

from .schema import CharacterToken, FeatureVector


def is_ascii_digit(text: str) -> bool:
    """True if every character is one of ``0``-``9``.

    Full-width digits and Chinese numerals such as ``一`` are not digits here.
    """
    return all(ch in string.digits for ch in text)


def _require_annotated(token: CharacterToken, i: int) -> None:
    if not token.is_annotated:
        raise ValueError(f"Token {i} ({token.text!r}) has not been annotated")


def word2features(tokens: Sequence[CharacterToken], i: int) -> FeatureVector:
    """
    Build the feature strings of the token at position ``i``.

    The token contributes its own text, digit flag, POS tag and boundary
    status; its neighbours contribute the same minus the digit flag, or
    ``BOS``/``EOS`` at the sentence edges.
    """
    token = tokens[i]
    _require_annotated(token, i)

    features = [
        "bias",
        f"word={token.text}",
        f"word.isdigit={is_ascii_digit(token.text)}",
        f"postag={token.pos_tag}",
        f"cuttag={token.boundary_status.value}",
    ]

    if i > 0:
        prev = tokens[i - 1]
        _require_annotated(prev, i - 1)
        features.extend([
            f"-1:word={prev.text}",
            f"-1:postag={prev.pos_tag}",
            f"-1:cuttag={prev.boundary_status.value}",
        ])
    else:
        features.append("BOS")

    if i < len(tokens) - 1:
        nxt = tokens[i + 1]
        _require_annotated(nxt, i + 1)
        features.extend([
            f"+1:word={nxt.text}",
            f"+1:postag={nxt.pos_tag}",
            f"+1:cuttag={nxt.boundary_status.value}",
        ])
    else:
        features.append("EOS")

    return features


def sent2features(tokens: Sequence[CharacterToken]) -> List[FeatureVector]:
    """Build one feature vector per token, in order."""
    return [word2features(tokens, i) for i in range(len(tokens))]
