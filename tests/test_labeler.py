"""Tests for the crfsuite sequence labeler."""

import pytest
from chinese_ner.core.labeler import CrfSuiteLabeler, ModelHandle
from chinese_ner.core.annotator import annotate
from chinese_ner.core.features import sent2features
from chinese_ner.core.errors import LabelerError, ModelLoadError

PARAMS = {
    "c1": 0.1,
    "c2": 1e-3,
    "max_iterations": 20,
    "feature.possible_transitions": True,
}


def make_training_set():
    examples = [
        ("北京很大", [("北京", "ns"), ("很", "d"), ("大", "a")], ["B-LOC", "I-LOC", "O", "O"]),
        ("李白来了", [("李白", "nr"), ("来", "v"), ("了", "ul")], ["B-PER", "I-PER", "O", "O"]),
        ("去北京", [("去", "v"), ("北京", "ns")], ["O", "B-LOC", "I-LOC"]),
    ]
    return [
        (sent2features(annotate(sentence, segments)), labels)
        for sentence, segments, labels in examples
    ]


@pytest.fixture
def trained_model(tmp_path):
    model_path = tmp_path / "ner.model"
    labeler = CrfSuiteLabeler()
    report = labeler.train(make_training_set(), PARAMS, model_path)
    return labeler, model_path, report


class TestCrfSuiteTraining:
    """Test CRF training."""

    def test_train_writes_model(self, trained_model):
        _, model_path, report = trained_model

        assert model_path.is_file()
        assert report.model_path == model_path
        assert report.sentence_count == 3
        assert report.token_count == 11
        assert report.training_time >= 0.0
        assert report.last_iteration is not None and report.last_iteration > 0
        assert report.loss is not None
        assert report.feature_count is not None and report.feature_count > 0

    def test_report_to_dict(self, trained_model):
        _, model_path, report = trained_model
        data = report.to_dict()
        assert data["model_path"] == str(model_path)
        assert data["sentence_count"] == 3

    def test_empty_training_set(self, tmp_path):
        with pytest.raises(LabelerError):
            CrfSuiteLabeler().train([], PARAMS, tmp_path / "ner.model")

    def test_misaligned_labels(self, tmp_path):
        features, _ = make_training_set()[0]
        with pytest.raises(LabelerError):
            CrfSuiteLabeler().train([(features, ["O"])], PARAMS, tmp_path / "ner.model")


class TestCrfSuiteTagging:
    """Test loading and tagging."""

    def test_tag_length_matches_features(self, trained_model):
        labeler, model_path, _ = trained_model
        model = labeler.load_model(model_path)

        features = sent2features(annotate("北京来了", [("北京", "ns"), ("来", "v"), ("了", "ul")]))
        tags = labeler.tag(model, features)

        assert len(tags) == len(features)
        assert set(tags) <= {"B-LOC", "I-LOC", "B-PER", "I-PER", "O"}

    def test_tag_empty(self, trained_model):
        labeler, model_path, _ = trained_model
        model = labeler.load_model(model_path)
        assert labeler.tag(model, []) == []

    def test_handle_records_path(self, trained_model):
        labeler, model_path, _ = trained_model
        model = labeler.load_model(model_path)
        assert isinstance(model, ModelHandle)
        assert model.path == model_path

    def test_missing_model(self, tmp_path):
        with pytest.raises(ModelLoadError) as excinfo:
            CrfSuiteLabeler().load_model(tmp_path / "missing.model")
        assert excinfo.value.path == tmp_path / "missing.model"

    def test_corrupt_model(self, tmp_path):
        path = tmp_path / "corrupt.model"
        path.write_bytes(b"not a crfsuite model")
        with pytest.raises(ModelLoadError):
            CrfSuiteLabeler().load_model(path)
