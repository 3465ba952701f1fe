from pathlib import Path
from typing import List, Optional

from hydra import compose, initialize_config_dir
from omegaconf import DictConfig, OmegaConf

from ..utils.logging import log_call
from ..utils.validation import validate_config
from .schemas import AppConfig

CONFIG_DIR = Path(__file__).resolve().parent / "configs"


@log_call
def load_config(overrides: Optional[List[str]] = None) -> DictConfig:
    """Load and validate the run configuration using Hydra."""

    overrides = overrides or []
    with initialize_config_dir(
        CONFIG_DIR.resolve().as_posix(), version_base=None
    ):
        cfg = compose(config_name="config", overrides=overrides)
    # Typed merge rejects values that do not fit the schema
    cfg = OmegaConf.merge(OmegaConf.structured(AppConfig), cfg)
    validate_config(cfg)
    return cfg
