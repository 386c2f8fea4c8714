from __future__ import annotations
from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr
from typing import Callable, Dict, Literal, Union

from vivaldi.logging import LoggingConfig
from vivaldi.models import VivaldiConfig

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    VIVALDI_DIMENSIONS: StrictInt = 8
    VIVALDI_CE: StrictFloat = 0.25
    VIVALDI_CC: StrictFloat = 0.25
    VIVALDI_SEED: StrictInt | None = None
    VIVALDI_CONVERGENCE_ERROR_THRESHOLD: StrictFloat = 0.05
    VIVALDI_CONVERGENCE_MIN_SAMPLES: StrictInt = 10
    VIVALDI_LOG_LEVEL: StrictStr = "info"
    VIVALDI_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "VIVALDI_DIMENSIONS": int,
            "VIVALDI_CE": float,
            "VIVALDI_CC": float,
            "VIVALDI_SEED": int,
            "VIVALDI_CONVERGENCE_ERROR_THRESHOLD": float,
            "VIVALDI_CONVERGENCE_MIN_SAMPLES": int,
            "VIVALDI_LOG_LEVEL": str,
            "VIVALDI_LOG_OUTPUT": str,
        }

    def get_vivaldi_config(self) -> VivaldiConfig:
        """
        Build the model configuration from environment settings.

        The returned config is validated, so bad tuning constants fail here
        rather than on the first update.
        """
        config = VivaldiConfig(
            dimensions=self.VIVALDI_DIMENSIONS,
            ce=self.VIVALDI_CE,
            cc=self.VIVALDI_CC,
            convergence_error_threshold=self.VIVALDI_CONVERGENCE_ERROR_THRESHOLD,
            convergence_min_samples=self.VIVALDI_CONVERGENCE_MIN_SAMPLES,
            seed=self.VIVALDI_SEED,
        )
        config.validate()

        return config

    def configure_logging(self) -> LoggingConfig:
        logging_config = LoggingConfig()
        logging_config.update(
            log_level=self.VIVALDI_LOG_LEVEL,
            log_output=self.VIVALDI_LOG_OUTPUT,
        )

        return logging_config
