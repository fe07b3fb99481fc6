"""Settings for training and prediction.

All settings can be overridden via environment variables with the
CHINESE_NER_ prefix, e.g. ``CHINESE_NER_MODEL_PATH=/models/ner.model``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, Dict, Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NerSettings(BaseSettings):
    """
    Configuration for the NER pipeline.

    Attributes:
        model_path: CRF model file written by training and read by prediction.
        user_dict: Optional jieba user dictionary.
        hmm: Let jieba's HMM discover words missing from its dictionary.
        algorithm: crfsuite training algorithm.
        c1: L1 regularization coefficient.
        c2: L2 regularization coefficient.
        max_iterations: Maximum number of optimizer iterations.
        possible_transitions: Generate transition features for label pairs not seen in training.
        holdout_ratio: Share of the corpus held out for evaluation after training.
        random_state: Seed for the holdout split.
        log_level: Logging level used by the command line.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHINESE_NER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model_path: Path = Field(default=Path("ner.model"))
    user_dict: Optional[Path] = None
    hmm: bool = True

    # CRF training
    algorithm: Literal["lbfgs", "l2sgd", "ap", "pa", "arow"] = "lbfgs"
    c1: float = Field(default=1.0, ge=0.0)
    c2: float = Field(default=1e-3, ge=0.0)
    max_iterations: int = Field(default=50, ge=1)
    possible_transitions: bool = True

    # Evaluation
    holdout_ratio: float = Field(default=0.0, ge=0.0, lt=1.0)
    random_state: Optional[int] = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def crf_params(self) -> Dict[str, Any]:
        """crfsuite training parameters."""
        params: Dict[str, Any] = {
            "max_iterations": self.max_iterations,
            "feature.possible_transitions": self.possible_transitions,
        }
        # Regularization coefficients are L-BFGS / L2-SGD specific
        if self.algorithm == "lbfgs":
            params["c1"] = self.c1
            params["c2"] = self.c2
        elif self.algorithm == "l2sgd":
            params["c2"] = self.c2
        return params


@lru_cache
def get_settings() -> NerSettings:
    """
    Get cached settings instance.

    Clear cache with get_settings.cache_clear() if needed.
    """
    return NerSettings()
