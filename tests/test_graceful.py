import signal
import threading

import pytest

from miku.graceful import Graceful


@pytest.fixture(autouse=True)
def _restore_handlers():
    saved = {s: signal.getsignal(s) for s in (signal.SIGTERM, signal.SIGINT, signal.SIGHUP)}
    yield
    for s, handler in saved.items():
        signal.signal(s, handler)


def test_running_until_stopped():
    with Graceful(0) as g:
        assert g.running() is True
        g.stop()
        assert g.running() is False


def test_sigterm_stops():
    with Graceful(0) as g:
        signal.raise_signal(signal.SIGTERM)
        assert g.running() is False


def test_sigint_stops():
    with Graceful(0) as g:
        signal.raise_signal(signal.SIGINT)
        assert g.running() is False


def test_sighup_calls_reload_hook():
    calls = []
    with Graceful(0) as g:
        g.on_reload(lambda: calls.append("reload"))
        signal.raise_signal(signal.SIGHUP)
        assert calls == ["reload"]
        assert g.running() is True


def test_wait_runs_drain_after_stop():
    drained = []
    with Graceful(0) as g:
        g.stop()
        g.wait(lambda: drained.append(True))
        assert drained == [True]


def test_wait_returns_when_stopped_from_thread():
    with Graceful(0) as g:
        timer = threading.Timer(0.1, g.stop)
        timer.start()
        g.wait()
        timer.join()
        assert g.running() is False


def test_cleanup_restores_defaults():
    calls = []
    g = Graceful(0)
    g.on_reload(lambda: calls.append("reload"))
    assert g.running() is True
    signal.raise_signal(signal.SIGHUP)
    assert calls == ["reload"]
    g.cleanup()
    signal.raise_signal(signal.SIGHUP)
    assert calls == ["reload"]
    assert signal.getsignal(signal.SIGTERM) == signal.SIG_DFL
    assert signal.getsignal(signal.SIGINT) == signal.SIG_DFL
    assert signal.getsignal(signal.SIGHUP) == signal.SIG_IGN