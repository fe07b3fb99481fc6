"""Evaluation metrics for NER tasks."""

from typing import List, Dict, Any, Sequence, Tuple
from collections import defaultdict
from seqeval.metrics import accuracy_score, classification_report, f1_score, precision_score, recall_score

from ..core.entities import extract_spans


def _check_aligned(true_tags: Sequence[Sequence[str]], pred_tags: Sequence[Sequence[str]]) -> None:
    if len(true_tags) != len(pred_tags):
        raise ValueError("Number of true and predicted sequences must match")
    for true_seq, pred_seq in zip(true_tags, pred_tags):
        if len(true_seq) != len(pred_seq):
            raise ValueError("Tag sequences must have the same length")


def evaluate_tags(
    true_tags: Sequence[Sequence[str]],
    pred_tags: Sequence[Sequence[str]],
) -> Dict[str, Any]:
    """
    Evaluate predicted tag sequences against gold tags with seqeval.

    Args:
        true_tags: Gold tag sequences
        pred_tags: Predicted tag sequences

    Returns:
        Dictionary with evaluation metrics
    """
    _check_aligned(true_tags, pred_tags)

    true_labels = [list(seq) for seq in true_tags]
    pred_labels = [list(seq) for seq in pred_tags]

    metrics = {
        "accuracy": accuracy_score(true_labels, pred_labels),
        "f1": f1_score(true_labels, pred_labels, zero_division=0),
        "precision": precision_score(true_labels, pred_labels, zero_division=0),
        "recall": recall_score(true_labels, pred_labels, zero_division=0),
    }

    # Detailed classification report
    report = classification_report(true_labels, pred_labels, output_dict=True, zero_division=0)
    metrics["classification_report"] = report

    return metrics


def compute_entity_metrics(
    true_tags: Sequence[Sequence[str]],
    pred_tags: Sequence[Sequence[str]],
) -> Dict[str, Any]:
    """
    Compute entity-level metrics over the spans the extractor decodes.

    Args:
        true_tags: Gold tag sequences
        pred_tags: Predicted tag sequences

    Returns:
        Dictionary with entity-level metrics
    """
    _check_aligned(true_tags, pred_tags)

    true_entities = []
    pred_entities = []

    for sent_idx, (true_seq, pred_seq) in enumerate(zip(true_tags, pred_tags)):
        true_entities.extend(_spans_with_sentence(sent_idx, true_seq))
        pred_entities.extend(_spans_with_sentence(sent_idx, pred_seq))

    true_set = set(true_entities)
    pred_set = set(pred_entities)

    tp = len(true_set & pred_set)
    fp = len(pred_set - true_set)
    fn = len(true_set - pred_set)

    precision, recall, f1 = _prf(tp, fp, fn)

    return {
        "entity_precision": precision,
        "entity_recall": recall,
        "entity_f1": f1,
        "true_positives": tp,
        "false_positives": fp,
        "false_negatives": fn,
        "per_entity_kind": _compute_per_kind_metrics(true_entities, pred_entities),
    }


def _spans_with_sentence(sent_idx: int, tags: Sequence[str]) -> List[Tuple[str, int, int, int]]:
    """(kind, sentence, start, end) tuples for one sentence."""
    return [(span.kind.value, sent_idx, span.start, span.end) for span in extract_spans(tags)]


def _prf(tp: int, fp: int, fn: int) -> Tuple[float, float, float]:
    precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
    recall = tp / (tp + fn) if (tp + fn) > 0 else 0.0
    f1 = 2 * precision * recall / (precision + recall) if (precision + recall) > 0 else 0.0
    return precision, recall, f1


def _compute_per_kind_metrics(
    true_entities: List[Tuple[str, int, int, int]],
    pred_entities: List[Tuple[str, int, int, int]],
) -> Dict[str, Dict[str, float]]:
    """Compute metrics per entity kind."""
    true_by_kind = defaultdict(set)
    pred_by_kind = defaultdict(set)

    for entity in true_entities:
        true_by_kind[entity[0]].add(entity)

    for entity in pred_entities:
        pred_by_kind[entity[0]].add(entity)

    metrics = {}
    for kind in set(true_by_kind) | set(pred_by_kind):
        true_set = true_by_kind[kind]
        pred_set = pred_by_kind[kind]

        precision, recall, f1 = _prf(
            len(true_set & pred_set),
            len(pred_set - true_set),
            len(true_set - pred_set),
        )
        metrics[kind] = {
            "precision": precision,
            "recall": recall,
            "f1": f1,
            "support": len(true_set),
        }

    return metrics
