"""Configuration for the beacon staging layer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .errors import ConfigurationError
from .identifiers import IdStrategy
from .payload.size import EVENT_MAX_PAYLOAD, MAX_VALUE_LENGTH


@dataclass
class IdentifierConfig:
    """Identifier generation configuration."""
    session_strategy: IdStrategy = IdStrategy.DEFAULT
    sequence_strategy: IdStrategy = IdStrategy.DEFAULT

    # Seed for a dedicated random source (None = process-wide source)
    random_seed: int | None = None

    def __post_init__(self):
        self.session_strategy = _parse_strategy(self.session_strategy, "session_strategy")
        self.sequence_strategy = _parse_strategy(self.sequence_strategy, "sequence_strategy")


@dataclass
class EncodingConfig:
    """Query encoding configuration."""
    max_value_length: int = MAX_VALUE_LENGTH

    def __post_init__(self):
        if self.max_value_length <= 0:
            raise ConfigurationError(
                f"max_value_length must be positive, got {self.max_value_length}",
                field_name="max_value_length",
            )


@dataclass
class QueueConfig:
    """Payload queue configuration."""
    # Payloads larger than this (UTF-8 bytes) are not staged
    max_payload_bytes: int = EVENT_MAX_PAYLOAD

    def __post_init__(self):
        if self.max_payload_bytes <= 0:
            raise ConfigurationError(
                f"max_payload_bytes must be positive, got {self.max_payload_bytes}",
                field_name="max_payload_bytes",
            )


@dataclass
class StagingConfig:
    """Main configuration container."""
    identifiers: IdentifierConfig = field(default_factory=IdentifierConfig)
    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    queue: QueueConfig = field(default_factory=QueueConfig)

    @classmethod
    def from_dict(cls, data: dict) -> StagingConfig:
        """Create config from dictionary. Missing or empty sections use defaults."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Staging config must be a mapping, got {type(data).__name__}"
            )

        try:
            return cls(
                identifiers=IdentifierConfig(**_section(data, "identifiers")),
                encoding=EncodingConfig(**_section(data, "encoding")),
                queue=QueueConfig(**_section(data, "queue")),
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid staging config: {e}") from e

    @classmethod
    def from_yaml(cls, path: str) -> StagingConfig:
        """Load config from YAML file."""
        import yaml
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        return cls.from_dict(data or {})

    @classmethod
    def from_json(cls, path: str) -> StagingConfig:
        """Load config from JSON file."""
        import json
        with open(path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> StagingConfig:
        """
        Load config from BEACON_* environment variables.

        Unset variables keep their defaults:
            BEACON_SESSION_STRATEGY, BEACON_SEQUENCE_STRATEGY,
            BEACON_RANDOM_SEED, BEACON_MAX_VALUE_LENGTH,
            BEACON_MAX_PAYLOAD_BYTES
        """
        env = os.environ if environ is None else environ
        data: dict[str, dict] = {"identifiers": {}, "encoding": {}, "queue": {}}

        if "BEACON_SESSION_STRATEGY" in env:
            data["identifiers"]["session_strategy"] = env["BEACON_SESSION_STRATEGY"]
        if "BEACON_SEQUENCE_STRATEGY" in env:
            data["identifiers"]["sequence_strategy"] = env["BEACON_SEQUENCE_STRATEGY"]
        if "BEACON_RANDOM_SEED" in env:
            data["identifiers"]["random_seed"] = _parse_int(env["BEACON_RANDOM_SEED"], "BEACON_RANDOM_SEED")
        if "BEACON_MAX_VALUE_LENGTH" in env:
            data["encoding"]["max_value_length"] = _parse_int(env["BEACON_MAX_VALUE_LENGTH"], "BEACON_MAX_VALUE_LENGTH")
        if "BEACON_MAX_PAYLOAD_BYTES" in env:
            data["queue"]["max_payload_bytes"] = _parse_int(env["BEACON_MAX_PAYLOAD_BYTES"], "BEACON_MAX_PAYLOAD_BYTES")

        return cls.from_dict(data)


def _section(data: dict, name: str) -> dict:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Config section '{name}' must be a mapping, got {type(section).__name__}",
            field_name=name,
        )
    return section


def _parse_strategy(value: IdStrategy | str, field_name: str) -> IdStrategy:
    try:
        return IdStrategy(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise ConfigurationError(
            f"Unknown identifier strategy for {field_name}: {value!r}",
            field_name=field_name,
        ) from None


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}", field_name=name) from None
