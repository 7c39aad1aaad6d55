"""Load and validate connection configuration files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from jsonschema import Draft7Validator

from ..domain.models import ManagerConfig
from ..utils.constants import SCHEMA_JSON_PATH
from ..utils.errors import (
    ConfigFileNotFound,
    InvalidConfigurationError,
    SchemaFileNotFound,
    SchemaValidationError,
)
from ..utils.logging import get_logger

LOG = get_logger()


def load_json_file(json_path: Path) -> Dict:
    if not json_path.exists():
        raise ConfigFileNotFound(f"JSON not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        config_json = json.load(f)
    LOG.info("loaded JSON: %s", json_path)
    return config_json


def load_schema_file(schema_path: Path) -> Dict:
    if not schema_path.exists():
        raise SchemaFileNotFound(f"Schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        schema_json = json.load(f)
    LOG.debug("loaded Schema: %s", schema_path)
    return schema_json


def _format_json_path(path_iterable) -> str:
    parts: List[str] = ["root"]
    for p in path_iterable:
        if isinstance(p, int):
            parts[-1] = parts[-1] + f"[{p}]"
        else:
            parts.append(str(p))
    return ".".join(parts)


def _connection_name(path) -> str:
    """Name of the connection an error path points into, or ``-``."""
    path = list(path)
    if len(path) >= 2 and path[0] == "connections":
        return str(path[1])
    return "-"


def validate_json_schema(config_json: Dict, schema_json: Dict) -> None:
    validator = Draft7Validator(schema_json)
    errors = sorted(validator.iter_errors(config_json), key=lambda e: (list(e.path), list(e.schema_path)))
    if not errors:
        LOG.info("connection config validation: PASSED")
        return
    LOG.error("[SCH] connection config validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "[SCH] #%d connection=%s path=%s | msg=%s | validator=%s",
            i,
            _connection_name(err.path),
            _format_json_path(err.path),
            err.message,
            err.validator,
        )
    raise SchemaValidationError(
        f"connection config failed schema validation with {len(errors)} error(s)"
    )


def parse_manager_config(config_json: Dict, schema_json: Optional[Dict] = None) -> ManagerConfig:
    """Validate ``config_json`` and turn it into a :class:`ManagerConfig`."""
    if schema_json is None:
        schema_json = load_schema_file(SCHEMA_JSON_PATH)
    validate_json_schema(config_json, schema_json)

    config = ManagerConfig.from_mapping(config_json)
    if config.default not in config.connections:
        raise InvalidConfigurationError(
            f'default connection "{config.default}" is not defined '
            f"(available: {', '.join(sorted(config.connections))})"
        )
    LOG.info(
        "connections: %s (default=%s)",
        ", ".join(sorted(config.connections)),
        config.default,
    )
    return config


def load_manager_config(json_path: Path, schema_path: Path = SCHEMA_JSON_PATH) -> ManagerConfig:
    config_json = load_json_file(Path(json_path))
    schema_json = load_schema_file(Path(schema_path))
    return parse_manager_config(config_json, schema_json)


__all__ = [
    "load_json_file",
    "load_manager_config",
    "load_schema_file",
    "parse_manager_config",
    "validate_json_schema",
]
