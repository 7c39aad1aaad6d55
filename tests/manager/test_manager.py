from __future__ import annotations

import threading

import pytest

from hashcodec import ConnectionConfig, ConnectionNotConfigured, Hashids, HashidsManager, ManagerConfig


def _manager(**overrides) -> HashidsManager:
    connections = {
        "main": ConnectionConfig("main", salt="main salt", min_length=10),
        "alternative": ConnectionConfig("alternative", salt="other"),
        "custom": ConnectionConfig("custom", salt="custom", driver="tagged"),
    }
    return HashidsManager(ManagerConfig(connections=connections, **overrides))


def test_default_connection_is_created_lazily_and_cached() -> None:
    manager = _manager()
    assert manager.get_connections() == {}

    codec = manager.connection()

    assert isinstance(codec, Hashids)
    assert manager.connection("main") is codec
    assert manager.get_connections() == {"main": codec}
    assert codec.encode([5, 10]) == "1XMloHLYjw"


def test_named_connection_uses_its_own_settings() -> None:
    manager = _manager()

    assert manager.connection("alternative").encode([5, 10]) == "yKhK"


def test_disconnect_and_reconnect() -> None:
    manager = _manager()
    first = manager.connection()

    manager.disconnect()
    assert manager.get_connections() == {}

    second = manager.reconnect()
    assert second is not first
    assert manager.connection() is second
    assert manager.reconnect("main") is not second


def test_disconnect_of_unknown_connection_is_a_no_op() -> None:
    manager = _manager()
    manager.disconnect("never-created")
    assert manager.get_connections() == {}


def test_unknown_connection_raises() -> None:
    manager = _manager()

    with pytest.raises(ConnectionNotConfigured, match=r"Connection \[missing\] not configured"):
        manager.connection("missing")


def test_default_connection_can_be_changed() -> None:
    manager = _manager()
    manager.default_connection = "alternative"

    assert manager.default_connection == "alternative"
    assert manager.connection() is manager.connection("alternative")


def test_get_connection_config() -> None:
    manager = _manager()

    config = manager.get_connection_config()
    assert config.name == "main"
    assert config.min_length == 10


def test_extension_by_name_takes_precedence() -> None:
    manager = _manager()
    seen: list[ConnectionConfig] = []

    def resolver(config: ConnectionConfig) -> Hashids:
        seen.append(config)
        return Hashids(config.salt, 30)

    manager.extend("main", resolver)
    codec = manager.connection()

    assert seen and seen[0].name == "main"
    assert codec.min_length == 30


def test_extension_by_driver() -> None:
    manager = _manager()
    sentinel = object()
    manager.extend("tagged", lambda config: sentinel)

    assert manager.connection("custom") is sentinel
    assert isinstance(manager.connection("main"), Hashids)


def test_prefix_separator_is_passed_to_codecs() -> None:
    connections = {"main": ConnectionConfig("main", salt="this is my salt", prefix="inv")}
    manager = HashidsManager(ManagerConfig(connections=connections, prefix_separator="_"))

    assert manager.encode([42, 7]) == "inv_rkUE"


def test_attribute_access_is_proxied_to_default_connection() -> None:
    manager = _manager()
    hashid = manager.encode([1, 2, 3])

    assert manager.decode(hashid) == 1
    assert manager.decode_all(hashid) == (1, 2, 3)
    with pytest.raises(AttributeError):
        manager.no_such_method


def test_extension_may_resolve_another_connection() -> None:
    manager = _manager()
    manager.extend("alternative", lambda config: manager.connection("main"))
    resolved: list[Hashids] = []

    worker = threading.Thread(target=lambda: resolved.append(manager.connection("alternative")))
    worker.start()
    worker.join(2)

    assert not worker.is_alive()
    assert resolved == [manager.connection("main")]
    assert manager.get_connections() == {"main": resolved[0], "alternative": resolved[0]}
