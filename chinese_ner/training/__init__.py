"""Training utilities for chinese-ner."""

from .trainer import NERTrainer

__all__ = ["NERTrainer"]
