"""Tests for the debug manager."""

from connect_four.debug import DebugLevel, DebugManager


def make_manager():
    return DebugManager(logger_name="connect_four.tests")


def test_level_filtering():
    manager = make_manager()
    manager.configure(level=DebugLevel.WARNING)

    assert manager._should_log(DebugLevel.ERROR)
    assert manager._should_log(DebugLevel.WARNING)
    assert not manager._should_log(DebugLevel.INFO)


def test_component_filtering():
    manager = make_manager()
    manager.configure(level=DebugLevel.TRACE, components=["engine"])

    assert manager._should_log(DebugLevel.DEBUG, "engine")
    assert not manager._should_log(DebugLevel.DEBUG, "env")
    assert manager._should_log(DebugLevel.DEBUG)


def test_disabled_manager_logs_nothing():
    manager = make_manager()
    manager.configure(enabled=False)

    assert not manager.enabled
    assert not manager._should_log(DebugLevel.ERROR)


def test_set_from_string():
    manager = make_manager()

    assert manager.set_from_string("Debug") is True
    assert manager.level is DebugLevel.DEBUG
    assert manager.set_from_string("verbose") is False
    assert manager.level is DebugLevel.DEBUG


def test_timers():
    manager = make_manager()

    assert manager.end_timer("missing") is None

    manager.start_timer("work")
    elapsed = manager.end_timer("work")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_log_file(tmp_path):
    manager = make_manager()
    log_file = tmp_path / "connect_four.log"
    manager.configure(level=DebugLevel.INFO, log_file=str(log_file))

    manager.info("written to file", "engine")
    manager.configure(log_file="")

    assert "[engine] written to file" in log_file.read_text()
