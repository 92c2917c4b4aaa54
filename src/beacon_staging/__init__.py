"""Beacon staging - identifiers, payload buffering and wire encoding for telemetry."""

from .completion import BroadcastState, CompletionBroadcaster
from .config import StagingConfig
from .errors import ConfigurationError, StagingError
from .identifiers import IdStrategy, IdentifierGenerator, create_generator
from .payload import PayloadQueryBuilder, PayloadQueue, UrlBuilder
from .stager import PayloadStager

__version__ = "0.1.0"

__all__ = [
    "BroadcastState",
    "CompletionBroadcaster",
    "StagingConfig",
    "StagingError",
    "ConfigurationError",
    "IdStrategy",
    "IdentifierGenerator",
    "create_generator",
    "PayloadQueryBuilder",
    "PayloadQueue",
    "UrlBuilder",
    "PayloadStager",
]
