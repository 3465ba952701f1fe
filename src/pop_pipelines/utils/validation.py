from omegaconf import DictConfig

from .logging import log_call


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@log_call
def validate_config(cfg: DictConfig) -> None:
    """Simple validation for run configs."""

    if not _is_int(cfg.population.size):
        raise ValueError("population.size must be an integer")
    if cfg.population.size < 0:
        raise ValueError("population.size must be non-negative")
    if cfg.population.seed is not None and not _is_int(cfg.population.seed):
        raise ValueError("population.seed must be an integer or null")
    if not _is_int(cfg.query.lower_age) or not _is_int(cfg.query.upper_age):
        raise ValueError("query bounds must be integers")
