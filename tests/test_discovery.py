import pytest

from miku.discovery import Discovery, ServiceEntry


def test_register_and_resolve():
    d = Discovery("etcd.example.com:2379")
    d.register("auth", "10.0.0.1", 10100, 30)
    assert d.resolve("auth") == [ServiceEntry("auth", "10.0.0.1", 10100, 30)]


def test_resolve_unknown_is_empty():
    d = Discovery("etcd.example.com:2379")
    assert d.resolve("missing") == []


def test_register_again_updates():
    d = Discovery("etcd.example.com:2379")
    d.register("user", "10.0.0.1", 10110, 10)
    d.register("user", "10.0.0.2", 10111, 20)
    assert d.resolve("user") == [ServiceEntry("user", "10.0.0.2", 10111, 20)]


def test_deregister():
    d = Discovery("etcd.example.com:2379")
    d.register("a", "h1", 1)
    d.register("b", "h2", 2)
    d.deregister("a")
    assert d.resolve("a") == []
    assert d.resolve("b")[0].host == "h2"


def test_deregister_missing_raises():
    d = Discovery("etcd.example.com:2379")
    with pytest.raises(KeyError):
        d.deregister("nope")


def test_max_entries_zero():
    d = Discovery("etcd.example.com:2379")
    d.register("a", "h1", 1)
    assert d.resolve("a", 0) == []


def test_resolve_returns_copies():
    d = Discovery("etcd.example.com:2379")
    d.register("a", "h1", 1)
    d.resolve("a")[0].port = 999
    assert d.resolve("a")[0].port == 1


def test_missing_endpoints_rejected():
    with pytest.raises(ValueError):
        Discovery(None)


def test_missing_host_rejected():
    d = Discovery("etcd.example.com:2379")
    with pytest.raises(ValueError):
        d.register("a", None, 1)


def test_heartbeat_keeps_entries():
    d = Discovery("etcd.example.com:2379")
    d.register("a", "h1", 1)
    d.heartbeat()
    assert len(d.resolve("a")) == 1


def test_many_registrations_grow():
    d = Discovery("etcd.example.com:2379")
    names = [f"svc{i}" for i in range(40)]
    for i, name in enumerate(names):
        d.register(name, "h", i)
    assert [d.resolve(n)[0].port for n in names] == list(range(40))