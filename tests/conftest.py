"""Shared fixtures: deterministic stand-ins for the segmenter and labeler."""

from typing import List, Dict, Optional, Sequence, Tuple

import pytest

from chinese_ner.core.labeler import ModelHandle
from chinese_ner.core.errors import LabelerError

WASHER_SENTENCE = "洗衣机，国内掀起了大数据、云计算的热潮。仙鹤门地区。"
WASHER_SEGMENTS = [
    ("洗衣机", "n"), ("，", "x"), ("国内", "s"), ("掀起", "v"), ("了", "ul"),
    ("大", "a"), ("数据", "n"), ("、", "x"), ("云", "ns"), ("计算", "v"),
    ("的", "uj"), ("热潮", "n"), ("。", "x"), ("仙鹤", "n"), ("门", "n"),
    ("地区", "n"), ("。", "x"),
]

BEIJING_SENTENCE = "今天纽约的天气真好啊，京华大酒店的李白经理吃了一只北京烤鸭。"
BEIJING_SEGMENTS = [
    ("今天", "t"), ("纽约", "ns"), ("的", "uj"), ("天气", "n"), ("真好", "d"),
    ("啊", "zg"), ("，", "x"), ("京华", "nz"), ("大酒店", "n"), ("的", "uj"),
    ("李白", "nr"), ("经理", "n"), ("吃", "v"), ("了", "ul"), ("一只", "m"),
    ("北京烤鸭", "nr"), ("。", "x"),
]
BEIJING_TAGS = [
    "O", "O", "B-LOC", "I-LOC", "O", "O", "O", "O", "O", "O", "O",
    "B-ORG", "I-ORG", "I-ORG", "I-ORG", "I-ORG", "O", "B-PER", "I-PER", "O",
    "O", "O", "O", "O", "O", "B-LOC", "I-LOC", "O", "O", "O",
]


class FixedSegmenter:
    """Returns canned segmentations; unknown text is split into single characters."""

    def __init__(self, table: Optional[Dict[str, List[Tuple[str, str]]]] = None, default_tag: str = "x"):
        self.table = table or {}
        self.default_tag = default_tag
        self.calls: List[str] = []

    def segment(self, text: str) -> List[Tuple[str, str]]:
        self.calls.append(text)
        if text in self.table:
            return list(self.table[text])
        return [(ch, self.default_tag) for ch in text]


class ScriptedLabeler:
    """Returns canned tag sequences keyed by the sentence rebuilt from the features."""

    def __init__(self, script: Optional[Dict[str, List[str]]] = None):
        self.script = script or {}
        self.trained: List[Tuple[list, dict, str]] = []

    def train(self, training_set, params, model_path):
        self.trained.append((list(training_set), dict(params), str(model_path)))
        raise LabelerError("ScriptedLabeler cannot train")

    def load_model(self, model_path):
        return ModelHandle(path=model_path, tagger=None)

    def tag(self, model: ModelHandle, features: Sequence[List[str]]) -> List[str]:
        sentence = "".join(vector[1][len("word="):] for vector in features)
        if sentence in self.script:
            return list(self.script[sentence])
        return ["O"] * len(features)


@pytest.fixture
def segmenter():
    return FixedSegmenter({
        WASHER_SENTENCE: WASHER_SEGMENTS,
        BEIJING_SENTENCE: BEIJING_SEGMENTS,
    })


@pytest.fixture
def labeler():
    return ScriptedLabeler({BEIJING_SENTENCE: BEIJING_TAGS})
