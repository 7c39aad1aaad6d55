"""Hashids-specific manager and the default codec factory."""
from __future__ import annotations

from ..core.codec import Hashids
from ..domain.models import ConnectionConfig, ManagerConfig
from ..utils.constants import DEFAULT_PREFIX_SEPARATOR
from .base import ConnectionManager


def make_codec(config: ConnectionConfig, prefix_separator: str = DEFAULT_PREFIX_SEPARATOR) -> Hashids:
    return Hashids(
        salt=config.salt,
        min_length=config.min_length,
        alphabet=config.alphabet,
        prefix=config.prefix,
        prefix_separator=prefix_separator,
    )


class HashidsManager(ConnectionManager[Hashids]):
    """Manage one :class:`Hashids` codec per configured connection name.

    >>> manager = HashidsManager(ManagerConfig(connections={"main": ConnectionConfig("main")}))
    >>> manager.decode(manager.encode([1, 2, 3]))
    1
    """

    def create_connection(self, config: ConnectionConfig) -> Hashids:
        return make_codec(config, self.config.prefix_separator)


__all__ = ["HashidsManager", "make_codec"]
