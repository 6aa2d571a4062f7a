import threading

from miku.stats import Stats


def test_http_stats_endpoint_snapshot():
    stats = Stats("miku-api", 19082)
    stats.request_inc()
    stats.request_inc()
    stats.request_inc()
    snap = stats.snapshot()
    assert snap.requests_total == 3
    assert snap.service_name == "miku-api"
    assert snap.port == 19082
    assert snap.uptime_ms >= 0


def test_failures_and_connections():
    stats = Stats("svc", 1)
    stats.fail_inc()
    stats.conn_open()
    stats.conn_open()
    stats.conn_close()
    snap = stats.snapshot()
    assert snap.requests_failed == 1
    assert snap.connections_active == 1
    assert snap.connections_total == 2


def test_bytes():
    stats = Stats("svc", 1)
    stats.add_bytes_sent(100)
    stats.add_bytes_sent(28)
    stats.add_bytes_recv(7)
    snap = stats.snapshot()
    assert snap.bytes_sent == 128
    assert snap.bytes_recv == 7


def test_snapshot_is_independent_of_later_updates():
    stats = Stats("svc", 1)
    stats.request_inc()
    snap = stats.snapshot()
    stats.request_inc()
    assert snap.requests_total == 1
    assert stats.snapshot().requests_total == 2


def test_service_name_truncated():
    stats = Stats("x" * 100, 1)
    assert stats.snapshot().service_name == "x" * 63


def test_concurrent_increments():
    stats = Stats("svc", 1)

    def work():
        for _ in range(1000):
            stats.request_inc()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert stats.snapshot().requests_total == 4000


def test_uptime_does_not_decrease():
    stats = Stats("svc", 1)
    first = stats.uptime_ms()
    assert stats.uptime_ms() >= first >= 0