"""Print a population and check that both age filters agree on it."""

import logging
import sys
from typing import List, Optional

from .config import load_config
from .population import initialize_population
from .queries import average_agrees, average_age_imperative, within_agrees
from .utils.logging import log_call

logger = logging.getLogger(__name__)


@log_call
def main(overrides: Optional[List[str]] = None) -> int:
    """
    Build the population, print it, then print the filter consistency check.

    Parameters
    ----------
    overrides : list of str, optional
        Hydra-style config overrides, e.g. ``["query.lower_age=30"]``.

    Returns
    -------
    exit_code : int
    """
    cfg = load_config(overrides)
    population = initialize_population(size=cfg.population.size,
                                       seed=cfg.population.seed)
    logger.info("Generated %d people (seed=%s)", len(population),
                cfg.population.seed)

    print(population.to_frame().to_string())
    print(within_agrees(population, cfg.query.lower_age,
                        cfg.query.upper_age))

    logger.info("Mean age %.2f, implementations agree: %s",
                average_age_imperative(population),
                average_agrees(population))
    return 0


@log_call
def run() -> None:
    """Console script entry point; arguments are config overrides."""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
