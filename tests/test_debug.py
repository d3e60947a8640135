"""
Tests for the shared debug manager.
"""

import logging

import pytest

from connect4_replay.debug import DebugLevel, DebugManager, LEVEL_MAP, TRACE, debug


@pytest.fixture
def manager():
    return DebugManager("connect4_replay.test")


def messages(caplog):
    return [record.getMessage() for record in caplog.records]


class TestLevels:

    def test_default_level(self, manager):
        assert manager.level is DebugLevel.WARNING
        assert manager.logger.level == logging.WARNING

    def test_messages_above_level_are_dropped(self, manager, caplog):
        manager.warning("shown")
        manager.info("hidden")
        assert messages(caplog) == ["shown"]

    def test_trace_level(self, manager, caplog):
        manager.configure(level=DebugLevel.TRACE)
        manager.trace("step")
        assert caplog.records[0].levelno == TRACE
        assert caplog.records[0].levelname == "TRACE"

    def test_none_silences_everything(self, manager, caplog):
        manager.configure(level=DebugLevel.NONE)
        manager.error("boom")
        assert caplog.records == []

    def test_disabled(self, manager, caplog):
        manager.configure(enabled=False)
        manager.error("boom")
        assert caplog.records == []

    @pytest.mark.parametrize("name, level", [
        ("debug", DebugLevel.DEBUG), ("WARNING", DebugLevel.WARNING), (" trace ", DebugLevel.TRACE),
    ])
    def test_set_from_string(self, manager, name, level):
        assert manager.set_from_string(name) is True
        assert manager.level is level
        assert manager.logger.level == LEVEL_MAP[level]

    def test_set_from_unknown_string(self, manager):
        assert manager.set_from_string("loud") is False
        assert manager.level is DebugLevel.WARNING


class TestComponents:

    def test_component_prefix(self, manager, caplog):
        manager.warning("careful", "board")
        assert messages(caplog) == ["[board] careful"]

    def test_component_filter(self, manager, caplog):
        manager.configure(level=DebugLevel.INFO, components=["rules"])
        manager.info("kept", "rules")
        manager.info("dropped", "board")
        manager.info("no component")
        assert messages(caplog) == ["[rules] kept", "no component"]


class TestTimers:

    def test_timer_round_trip(self, manager):
        manager.start_timer("work")
        elapsed = manager.end_timer("work")
        assert elapsed is not None and elapsed >= 0

    def test_unknown_timer(self, manager, caplog):
        assert manager.end_timer("never") is None
        assert "Timer 'never' not started" in messages(caplog)[0]


class TestLogFile:

    def test_log_file(self, tmp_path):
        path = tmp_path / "replay.log"
        debug.configure(log_file=str(path))
        debug.warning("written to file", "cli")
        debug.configure(log_file="")
        assert "[cli] written to file" in path.read_text()

    def test_shared_logger_has_one_console_handler(self):
        again = DebugManager()
        console = [h for h in again.logger.handlers if getattr(h, "_connect4_console", False)]
        assert again.logger is debug.logger
        assert len(console) == 1
