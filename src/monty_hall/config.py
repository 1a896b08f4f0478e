"""
Configuration loading for Monty Hall simulations.

Reads the ``monty_hall`` section of a YAML file:

    monty_hall:
      n_games: 100
      random_seed: 42

Example:
    >>> from monty_hall.config import load_config
    >>> config = load_config('config/simulation_config.yaml')
    >>> config.n_games
    100
"""

from dataclasses import fields
from pathlib import Path
from typing import Optional, Union

import yaml
from loguru import logger

from .exceptions import InvalidArgumentError
from .simulator import SimulationConfig

CONFIG_SECTION = 'monty_hall'


def load_config(config_path: Optional[Union[str, Path]] = None) -> SimulationConfig:
    """
    Load simulation configuration.

    Args:
        config_path: Path to a YAML config file; defaults are used when the
            path is omitted or does not exist

    Returns:
        Simulation configuration

    Raises:
        InvalidArgumentError: If the file is not a mapping, or the configured
            number of games or seed is invalid
    """
    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            full_config = yaml.safe_load(f) or {}
        if not isinstance(full_config, dict):
            raise InvalidArgumentError(
                f"Config file {config_path} must contain a mapping, "
                f"got {type(full_config).__name__}"
            )
        section = full_config.get(CONFIG_SECTION) or {}
        if not isinstance(section, dict):
            raise InvalidArgumentError(
                f"Config section '{CONFIG_SECTION}' must be a mapping, "
                f"got {type(section).__name__}"
            )
        logger.info(f"Loaded configuration from {config_path}")
    else:
        if config_path:
            logger.warning(f"Config file {config_path} not found, using defaults")
        section = {}

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {unknown}")

    return SimulationConfig(**{k: v for k, v in section.items() if k in known})
