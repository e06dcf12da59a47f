"""Tests for logger dispatch"""

import io
import re
import threading

import pytest

from nanologger import Logger, LoggerConfig, LogLevel, LogOutput, TermOutput
from nanologger.core.logger import current_thread_info


def make_logger(outputs, **options):
    options.setdefault("level", LogLevel.TRACE)
    return Logger(LoggerConfig(**options), outputs)


class TestGlobalGate:
    """Test the process-wide level gate."""

    @pytest.mark.parametrize("global_level", list(LogLevel))
    @pytest.mark.parametrize("level", list(LogLevel))
    def test_emits_iff_at_least_global(self, buffer, global_level, level):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], level=global_level)
        logger.log(level, "event", "mod", "f.py", 1)
        assert (buffer.getvalue() != "") is (level >= global_level)

    def test_global_gate_dominates_permissive_output(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], level=LogLevel.ERROR)
        logger.log(LogLevel.WARN, "dropped", "mod", "f.py", 1)
        assert buffer.getvalue() == ""

    def test_dropped_events_capture_nothing(self, buffer, monkeypatch):
        logger = make_logger(
            [LogOutput.writer(LogLevel.TRACE, buffer)],
            level=LogLevel.INFO, timestamps=True, thread_info=True,
        )
        calls = []
        monkeypatch.setattr(logger, "_capture", lambda *args: calls.append(args))
        logger.log(LogLevel.DEBUG, "dropped", "mod", "f.py", 1)
        assert calls == []

    def test_set_level(self, buffer):
        output = LogOutput.writer(LogLevel.TRACE, buffer)
        logger = make_logger([output], level=LogLevel.INFO)
        logger.set_level(LogLevel.DEBUG)
        logger.log(LogLevel.DEBUG, "now visible", "mod", "f.py", 1)
        assert logger.level is LogLevel.DEBUG
        assert output.level is LogLevel.TRACE
        assert "now visible" in buffer.getvalue()

    def test_set_level_type_checked(self):
        logger = make_logger([LogOutput.test(LogLevel.INFO)])
        with pytest.raises(TypeError):
            logger.set_level("debug")


class TestPerOutputFiltering:
    """Test fan-out with independent thresholds."""

    def test_terminal_scenario(self, capsys):
        logger = make_logger([LogOutput.term(LogLevel.WARN)], level=LogLevel.INFO)
        logger.log(LogLevel.ERROR, "e", "mod", "f.py", 1)
        logger.log(LogLevel.WARN, "w", "mod", "f.py", 2)
        logger.log(LogLevel.INFO, "i", "mod", "f.py", 3)
        logger.log(LogLevel.DEBUG, "d", "mod", "f.py", 4)
        assert capsys.readouterr().err == "[ERROR] e\n[WARN]  w\n"

    def test_two_writers(self):
        verbose = io.StringIO()
        quiet = io.StringIO()
        logger = make_logger([
            LogOutput.writer(LogLevel.TRACE, verbose),
            LogOutput.writer(LogLevel.WARN, quiet),
        ])
        logger.log(LogLevel.INFO, "service ready", "mod", "f.py", 1)
        assert "service ready" in verbose.getvalue()
        assert quiet.getvalue() == ""

    def test_combined_outputs(self, buffer, capsys):
        logger = make_logger([
            LogOutput.term(LogLevel.ERROR),
            LogOutput.writer(LogLevel.DEBUG, buffer),
            LogOutput.test(LogLevel.INFO),
        ])
        for level in LogLevel:
            logger.log(level, level.name.lower(), "mod", "f.py", 1)
        captured = capsys.readouterr()
        assert captured.err == "[ERROR] error\n"
        assert captured.out == "[ERROR] error\n[WARN]  warn\n[INFO]  info\n"
        assert buffer.getvalue().count("\n") == 4

    def test_failing_output_does_not_stop_others(self, buffer, failing_writer):
        logger = make_logger([
            LogOutput.writer(LogLevel.TRACE, failing_writer),
            LogOutput.writer(LogLevel.TRACE, buffer),
        ])
        logger.log(LogLevel.ERROR, "still delivered", "mod", "f.py", 1)
        assert buffer.getvalue() == "[ERROR] still delivered\n"

    def test_default_output_is_terminal(self):
        logger = Logger(LoggerConfig(level=LogLevel.WARN))
        assert len(logger.outputs) == 1
        assert isinstance(logger.outputs[0], TermOutput)
        assert logger.outputs[0].level is LogLevel.WARN


class TestModuleGate:
    """Test module filtering inside the logger."""

    def test_allow_and_deny(self, buffer):
        logger = make_logger(
            [LogOutput.writer(LogLevel.TRACE, buffer)],
            module_allow=["svc.db"], module_deny=["svc.db.pool"],
        )
        for path in ["svc.db", "svc.db.query", "svc.db.pool", "svc.web"]:
            logger.log(LogLevel.INFO, path, path, "f.py", 1)
        assert buffer.getvalue() == "[INFO]  svc.db\n[INFO]  svc.db.query\n"

    def test_is_enabled(self):
        logger = make_logger([LogOutput.test(LogLevel.TRACE)], level=LogLevel.INFO, module_deny=["noisy"])
        assert logger.is_enabled(LogLevel.INFO, "app") is True
        assert logger.is_enabled(LogLevel.DEBUG, "app") is False
        assert logger.is_enabled(LogLevel.ERROR, "noisy.lib") is False


class TestContext:
    """Test timestamp, location and thread context."""

    def test_no_context_by_default(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)])
        logger.log(LogLevel.INFO, "bare", "mod", "main.py", 12)
        assert buffer.getvalue() == "[INFO]  bare\n"

    def test_timestamp(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], timestamps=True)
        logger.log(LogLevel.INFO, "timestamped msg", "mod", "main.py", 1)
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}\.\d{3} \[INFO\]  timestamped msg\n", buffer.getvalue())

    def test_custom_timestamp_format(self, buffer):
        logger = make_logger(
            [LogOutput.writer(LogLevel.TRACE, buffer)],
            timestamps=True, timestamp_format="%H:%M",
        )
        logger.log(LogLevel.INFO, "m", "mod", "main.py", 1)
        assert re.fullmatch(r"\d{2}:\d{2} \[INFO\]  m\n", buffer.getvalue())

    def test_source_location(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], source_location=True)
        logger.log(LogLevel.WARN, "here", "mod", "main.py", 12)
        assert buffer.getvalue() == "[WARN]  [main.py:12] here\n"

    def test_thread_info_named_thread(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], thread_info=True)
        thread = threading.Thread(
            target=logger.log,
            args=(LogLevel.INFO, "from named thread", "mod", "f.py", 1),
            name="test-worker",
        )
        thread.start()
        thread.join()
        assert buffer.getvalue() == "(test-worker) [INFO]  from named thread\n"

    def test_unnamed_thread_fallback(self, monkeypatch):
        thread = threading.current_thread()
        monkeypatch.setattr(thread, "name", "")
        assert current_thread_info() == f"ThreadId({threading.get_ident()})"

    def test_context_shared_across_outputs(self):
        first = io.StringIO()
        second = io.StringIO()
        logger = make_logger(
            [LogOutput.writer(LogLevel.TRACE, first), LogOutput.writer(LogLevel.TRACE, second)],
            timestamps=True, thread_info=True, source_location=True,
        )
        logger.log(LogLevel.INFO, "same line", "mod", "f.py", 3)
        assert first.getvalue() == second.getvalue()

    def test_all_context_segments_in_order(self, buffer):
        logger = make_logger(
            [LogOutput.writer(LogLevel.TRACE, buffer)],
            timestamps=True, thread_info=True, source_location=True,
        )
        logger.log(LogLevel.DEBUG, "ordered", "mod", "f.py", 9)
        pattern = r"\d{2}:\d{2}:\d{2}\.\d{3} \(MainThread\) \[DEBUG\] \[f\.py:9\] ordered\n"
        assert re.fullmatch(pattern, buffer.getvalue())


class TestConcurrency:
    """Test concurrent dispatch."""

    def test_concurrent_logging_and_level_changes(self, buffer):
        logger = make_logger([LogOutput.writer(LogLevel.TRACE, buffer)], level=LogLevel.INFO)

        def writer(n):
            for i in range(100):
                logger.log(LogLevel.ERROR, f"{n}-{i}", "mod", "f.py", 1)

        def toggler():
            for i in range(100):
                logger.set_level(LogLevel.TRACE if i % 2 else LogLevel.WARN)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads.append(threading.Thread(target=toggler))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        lines = buffer.getvalue().splitlines()
        assert len(lines) == 400
        assert all(line.startswith("[ERROR] ") for line in lines)
