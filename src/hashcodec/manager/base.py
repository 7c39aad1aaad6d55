"""Generic keyed connection manager with lazily created, cached instances."""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from ..domain.models import ConnectionConfig, ManagerConfig
from ..utils.errors import ConnectionNotConfigured
from ..utils.logging import get_logger

LOG = get_logger()

T = TypeVar("T")
Resolver = Callable[[ConnectionConfig], Any]


class ConnectionManager(ABC, Generic[T]):
    """Look up named configurations and cache one instance per name.

    Resolvers registered through :meth:`extend` take precedence over
    :meth:`create_connection`: first one keyed by the connection name, then
    one keyed by the configuration's ``driver``.
    """

    def __init__(self, config: ManagerConfig) -> None:
        self._config = config
        self._default = config.default
        self._connections: Dict[str, T] = {}
        self._extensions: Dict[str, Resolver] = {}
        self._lock = threading.Lock()

    @abstractmethod
    def create_connection(self, config: ConnectionConfig) -> T:
        """Build a new instance from ``config``."""

    @property
    def config(self) -> ManagerConfig:
        return self._config

    @property
    def default_connection(self) -> str:
        return self._default

    @default_connection.setter
    def default_connection(self, name: str) -> None:
        self._default = name

    def _resolve_name(self, name: Optional[str]) -> str:
        return name or self._default

    def connection(self, name: Optional[str] = None) -> T:
        name = self._resolve_name(name)
        with self._lock:
            if name in self._connections:
                return self._connections[name]
        # Resolvers may ask this manager for other connections.
        instance = self._make_connection(name)
        with self._lock:
            return self._connections.setdefault(name, instance)

    def reconnect(self, name: Optional[str] = None) -> T:
        name = self._resolve_name(name)
        self.disconnect(name)
        return self.connection(name)

    def disconnect(self, name: Optional[str] = None) -> None:
        name = self._resolve_name(name)
        with self._lock:
            if self._connections.pop(name, None) is not None:
                LOG.debug("disconnected connection [%s]", name)

    def extend(self, name: str, resolver: Resolver) -> None:
        self._extensions[name] = resolver

    def get_connections(self) -> Dict[str, T]:
        with self._lock:
            return dict(self._connections)

    def get_connection_config(self, name: Optional[str] = None) -> ConnectionConfig:
        name = self._resolve_name(name)
        try:
            return self._config.connections[name]
        except KeyError as exc:
            raise ConnectionNotConfigured(f"Connection [{name}] not configured.") from exc

    def _make_connection(self, name: str) -> T:
        config = self.get_connection_config(name)

        if name in self._extensions:
            LOG.info("creating connection [%s] via extension", name)
            return self._extensions[name](config)

        if config.driver and config.driver in self._extensions:
            LOG.info("creating connection [%s] via driver extension %r", name, config.driver)
            return self._extensions[config.driver](config)

        LOG.info("creating connection [%s]", name)
        return self.create_connection(config)

    def __getattr__(self, attribute: str) -> Any:
        # Only reached for names missing on the manager itself.
        if attribute.startswith("_"):
            raise AttributeError(attribute)
        return getattr(self.connection(), attribute)
