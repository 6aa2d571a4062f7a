import pytest

from miku import log
from miku.log import LogLevel


@pytest.fixture(autouse=True)
def _reset_log():
    log.shutdown()
    log.set_level(LogLevel.INFO)
    log.set_rotation(10 * 1024 * 1024, 5)
    yield
    log.shutdown()
    log.set_level(LogLevel.INFO)
    log.set_rotation(10 * 1024 * 1024, 5)


def test_stderr_line_has_level_source_and_message(capsys):
    log.init(None, LogLevel.DEBUG)
    log.debug("hello debug")
    err = capsys.readouterr().err
    assert "[DEBUG]" in err
    assert "test_log.py:" in err
    assert err.rstrip("\n").endswith("hello debug")


def test_messages_below_level_are_dropped(capsys):
    log.init(None, LogLevel.WARN)
    log.info("quiet")
    log.write(LogLevel.TRACE, "quieter")
    log.error("loud")
    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err
    assert "[ERROR]" in err


def test_write_with_explicit_level(capsys):
    log.init(None, LogLevel.TRACE)
    log.write(LogLevel.FATAL, "boom")
    err = capsys.readouterr().err
    assert "[FATAL]" in err
    assert "boom" in err


def test_set_level_changes_filter(capsys):
    log.init(None, LogLevel.INFO)
    log.debug("first")
    log.set_level(LogLevel.DEBUG)
    log.debug("second")
    err = capsys.readouterr().err
    assert "first" not in err
    assert "second" in err


def test_file_output(tmp_path, capsys):
    log.init(tmp_path, LogLevel.INFO)
    log.info("to file")
    log.warn("also to file")
    log.shutdown()
    lines = (tmp_path / "miku.log").read_text().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[INFO] [")
    assert lines[0].endswith("to file")
    assert lines[1].startswith("[WARN] [")
    assert "\033[" not in lines[0]


def test_second_init_is_ignored(tmp_path, capsys):
    log.init(tmp_path, LogLevel.INFO)
    other = tmp_path / "other"
    other.mkdir()
    log.init(other, LogLevel.TRACE)
    log.write(LogLevel.TRACE, "hidden")
    log.info("shown")
    log.shutdown()
    assert not (other / "miku.log").exists()
    text = (tmp_path / "miku.log").read_text()
    assert "hidden" not in text
    assert "shown" in text


def test_rotation_shifts_backups(tmp_path, capsys):
    log.set_rotation(256, 3)
    log.init(tmp_path, LogLevel.INFO)
    log.info("alpha")
    log.info("beta")
    log.info("gamma")
    log.shutdown()
    assert "alpha" in (tmp_path / "miku.log.3").read_text()
    assert "beta" in (tmp_path / "miku.log.2").read_text()
    assert "gamma" in (tmp_path / "miku.log.1").read_text()
    assert (tmp_path / "miku.log").read_text() == ""


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        log.set_level(99)