"""
Test data factories.

Declare default field values once, then build one or many populated objects
(or plain dict records) with overrides, nested factories and sequences.
"""

from .exceptions import DataFactoryError, InvalidConstruction, ResolutionFailure
from .sequence import Sequence
from .factory import Factory, ValueKind, kind_of
from .array_factory import ArrayFactory
from .concerns import HasDataFactory
from .config import (
    FactoryConfig,
    configure,
    create_fake,
    create_rng,
    get_config,
    load_config,
    set_config,
)

__all__ = [
    # Engine
    "Factory",
    "ArrayFactory",
    "Sequence",
    "HasDataFactory",
    "ValueKind",
    "kind_of",
    # Errors
    "DataFactoryError",
    "InvalidConstruction",
    "ResolutionFailure",
    # Configuration
    "FactoryConfig",
    "configure",
    "create_fake",
    "create_rng",
    "get_config",
    "load_config",
    "set_config",
]
