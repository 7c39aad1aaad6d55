"""Domain models shared by the codec, the manager and the config loader."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..utils.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_CONNECTION_NAME,
    DEFAULT_PREFIX_SEPARATOR,
)


@dataclass(frozen=True)
class AlphabetPartition:
    """Disjoint character sets derived once from a salt and a base alphabet.

    ``alphabet`` renders digit values, ``seps`` delimit the segments of
    consecutive numbers and ``guards`` pad short outputs.
    """

    alphabet: str
    seps: str
    guards: str


@dataclass(frozen=True)
class ConnectionConfig:
    """Settings for one named codec connection."""

    name: str
    salt: str = ""
    min_length: int = 0
    alphabet: str = DEFAULT_ALPHABET
    prefix: Optional[str] = None
    driver: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, name: str, data: Mapping[str, Any]) -> "ConnectionConfig":
        known = {"salt", "min_length", "alphabet", "prefix", "driver", "name"}
        return cls(
            name=name,
            salt=str(data.get("salt", "")),
            min_length=int(data.get("min_length", 0)),
            alphabet=str(data.get("alphabet", DEFAULT_ALPHABET)),
            prefix=data.get("prefix"),
            driver=data.get("driver"),
            extra={k: v for k, v in data.items() if k not in known},
        )


@dataclass(frozen=True)
class ManagerConfig:
    """All named connections plus the name used when none is given."""

    connections: Dict[str, ConnectionConfig] = field(default_factory=dict)
    default: str = DEFAULT_CONNECTION_NAME
    prefix_separator: str = DEFAULT_PREFIX_SEPARATOR

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ManagerConfig":
        raw_connections = data.get("connections", {}) or {}
        connections = {
            str(name): ConnectionConfig.from_mapping(str(name), settings or {})
            for name, settings in raw_connections.items()
        }
        return cls(
            connections=connections,
            default=str(data.get("default", DEFAULT_CONNECTION_NAME)),
            prefix_separator=str(data.get("prefix_separator", DEFAULT_PREFIX_SEPARATOR)),
        )
