"""Session and sequence number generation."""

from .generator import (
    MAX_ID_VALUE,
    FixedIdGenerator,
    IdentifierGenerator,
    IdStrategy,
    RandomSequenceIdGenerator,
    SequentialIdGenerator,
    create_generator,
)
from .sources import DefaultRandomSource, RandomSource, default_random_source

__all__ = [
    "MAX_ID_VALUE",
    "IdStrategy",
    "IdentifierGenerator",
    "SequentialIdGenerator",
    "RandomSequenceIdGenerator",
    "FixedIdGenerator",
    "create_generator",
    "RandomSource",
    "DefaultRandomSource",
    "default_random_source",
]
