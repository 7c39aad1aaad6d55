"""Shared constants for the codec and its configuration layer."""
from __future__ import annotations

from pathlib import Path

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
DEFAULT_SEPS = "cfhistuCFHISTU"
DEFAULT_PREFIX_SEPARATOR = "-"

MIN_ALPHABET_LENGTH = 10
MIN_DATA_ALPHABET_LENGTH = 2
SEP_DIV = 3.5
GUARD_DIV = 12

# Offset added to the position of each number when deriving the lottery seed.
LOTTERY_MODULO_OFFSET = 100

HEX_CHUNK_LENGTH = 12

# Largest value handed back as a plain ``int``; bigger results are decimal strings.
NATIVE_INT_MAX = 2**63 - 1

SCHEMA_JSON_PATH = Path(__file__).resolve().parents[1] / "data" / "schema.json"
DEFAULT_CONNECTION_NAME = "main"
