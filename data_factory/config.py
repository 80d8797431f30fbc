"""
Factory configuration: fake-value locale and random seed.

Values come from, in increasing priority:
- FactoryConfig defaults
- an optional YAML file (top-level keys or a ``data_factory:`` section)
- DATA_FACTORY_LOCALE / DATA_FACTORY_SEED environment variables (.env honoured)
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml
from dotenv import find_dotenv, load_dotenv
from faker import Faker

logger = logging.getLogger(__name__)

ENV_LOCALE = "DATA_FACTORY_LOCALE"
ENV_SEED = "DATA_FACTORY_SEED"


@dataclass(frozen=True)
class FactoryConfig:
    """Settings shared by every factory built while this config is active."""
    locale: str = "en_US"
    seed: Optional[int] = None


_active_config = FactoryConfig()

# One seeded stream per activated config; each factory draws its own child seed
_seed_source: Optional[np.random.Generator] = None


def _parse_seed(raw: Any) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid seed: {raw!r}. Expected an integer.")


def load_config(path: Optional[Union[str, Path]] = None) -> FactoryConfig:
    """
    Build a FactoryConfig from a YAML file and the environment.

    Args:
        path: Optional YAML file. Missing keys keep their defaults.

    Returns:
        The loaded config (not activated; pass it to set_config).
    """
    data: Dict[str, Any] = {}

    if path is not None:
        with open(path, "r") as f:
            spec = yaml.safe_load(f) or {}
        data = dict(spec.get("data_factory") or spec)
        logger.debug(f"Loaded factory config from {path}")

    load_dotenv(find_dotenv(usecwd=True))
    if os.getenv(ENV_LOCALE):
        data["locale"] = os.environ[ENV_LOCALE]
    if os.getenv(ENV_SEED):
        data["seed"] = os.environ[ENV_SEED]

    defaults = FactoryConfig()
    return FactoryConfig(
        locale=str(data.get("locale", defaults.locale)),
        seed=_parse_seed(data.get("seed", defaults.seed)),
    )


def get_config() -> FactoryConfig:
    """Return the active config."""
    return _active_config


def set_config(config: FactoryConfig) -> None:
    """Activate a config. A seeded config restarts the shared seed stream."""
    global _active_config, _seed_source
    _active_config = config
    _seed_source = np.random.default_rng(config.seed) if config.seed is not None else None


def _child_seed(config: FactoryConfig) -> Optional[int]:
    if config.seed is None:
        return None
    if config is _active_config and _seed_source is not None:
        return int(_seed_source.integers(2**32))
    return config.seed


def configure(**kwargs: Any) -> FactoryConfig:
    """Replace individual fields of the active config and return it."""
    if "seed" in kwargs:
        kwargs["seed"] = _parse_seed(kwargs["seed"])
    set_config(replace(_active_config, **kwargs))
    return _active_config


def create_fake(config: Optional[FactoryConfig] = None) -> Faker:
    """
    Fake-value provider for the given (or active) config.

    Under the active seeded config each call gets the next seed from the
    shared stream, so factories differ from each other while the run as a
    whole replays after set_config() with the same seed. A config that is not
    active is seeded with its own seed directly.
    """
    config = config or get_config()
    fake = Faker(config.locale)
    seed = _child_seed(config)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def create_rng(config: Optional[FactoryConfig] = None) -> np.random.Generator:
    """Numpy generator for weighted picks and numeric sampling."""
    config = config or get_config()
    return np.random.default_rng(_child_seed(config))
