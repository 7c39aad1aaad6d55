"""Exception hierarchy shared across the codec, manager and loaders."""
from __future__ import annotations


class HashcodecError(Exception):
    """Base class for all hashcodec failures."""


class InvalidAlphabet(HashcodecError, ValueError):
    """The alphabet cannot be partitioned into a usable codec."""


class BigMathError(HashcodecError, ValueError):
    """An arithmetic operand is negative or not a canonical decimal string."""


class ConfigurationError(HashcodecError):
    """Base class for configuration related failures."""


class ConfigFileNotFound(ConfigurationError):
    pass


class SchemaFileNotFound(ConfigurationError):
    pass


class SchemaValidationError(ConfigurationError):
    pass


class InvalidConfigurationError(ConfigurationError):
    pass


class ConnectionNotConfigured(ConfigurationError, ValueError):
    pass
