"""Salted, reversible integer-to-string obfuscation (Hashids)."""
from __future__ import annotations

from .core import Hashids, bigmath
from .domain.models import AlphabetPartition, ConnectionConfig, ManagerConfig
from .manager import HashidsManager, make_codec
from .parser.config_loader import load_manager_config
from .utils.errors import (
    ConnectionNotConfigured,
    HashcodecError,
    InvalidAlphabet,
)

__all__ = [
    "AlphabetPartition",
    "ConnectionConfig",
    "ConnectionNotConfigured",
    "HashcodecError",
    "Hashids",
    "HashidsManager",
    "InvalidAlphabet",
    "ManagerConfig",
    "bigmath",
    "load_manager_config",
    "make_codec",
]
