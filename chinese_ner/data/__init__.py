"""Data utilities for chinese-ner."""

from .corpus import parse_corpus, parse_corpus_lines
from .dataset import NerCorpus

__all__ = ["parse_corpus", "parse_corpus_lines", "NerCorpus"]
