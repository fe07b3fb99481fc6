"""Utility functions for chinese-ner."""

from .metrics import evaluate_tags, compute_entity_metrics

__all__ = ["evaluate_tags", "compute_entity_metrics"]
