"""chinese-ner command line utility."""

from typing import List, Optional
import argparse
import json
import logging
import sys

from . import __version__
from .config import get_settings
from .core.errors import ChineseNerError
from .core.segmenter import JiebaSegmenter
from .core.labeler import CrfSuiteLabeler
from .core.tagger import ChineseNER
from .training.trainer import NERTrainer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chinese-ner", description="chinese-ner command line utility")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--model", default=None, help="Model file path (default: CHINESE_NER_MODEL_PATH or ner.model)")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    subparsers = parser.add_subparsers(dest="command")

    train_parser = subparsers.add_parser("train", help="Train a new NER model")
    train_parser.add_argument("dataset", metavar="DATASET_PATH", help="Training dataset path")

    predict_parser = subparsers.add_parser("predict", help="Predict named entities")
    predict_parser.add_argument("text", metavar="TEXT", help="Text to predict")
    predict_parser.add_argument("--tags", action="store_true", help="Print the raw tag sequence instead of entities")

    return parser


def train(args: argparse.Namespace) -> int:
    settings = get_settings()
    trainer = NERTrainer(model_path=args.model, settings=settings)
    report = trainer.train(args.dataset)

    print(f"Trained on {report.sentence_count} sentences ({report.token_count} tokens) "
          f"in {report.training_time:.2f}s")
    print(f"Model saved to: {report.model_path}")
    if report.metrics:
        print(f"Holdout F1: {report.metrics['f1']:.3f} ({report.holdout_count} sentences)")
    return 0


def predict(args: argparse.Namespace) -> int:
    settings = get_settings()
    ner = ChineseNER.from_model_file(
        args.model or settings.model_path,
        segmenter=JiebaSegmenter(hmm=settings.hmm, user_dict=settings.user_dict),
        labeler=CrfSuiteLabeler(algorithm=settings.algorithm),
    )

    if args.tags:
        output = ner.predict(args.text)
    else:
        output = [entity.to_dict() for entity in ner.extract_entities(args.text)]
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "train":
        handler = train
    elif args.command == "predict":
        handler = predict
    else:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (ChineseNerError, FileNotFoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
