import json
import logging

import pytest

from drills.core.config import Config
from drills.core.config import LoggerConfig
from drills.utils.logging import ColouredFormatter
from drills.utils.logging import DrillsFormatter
from drills.utils.logging import JSONFormatter
from drills.utils.logging import configure
from drills.utils.logging import perf_logger
from drills.utils.opentelemetry import get_tracer


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("drills")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def record():
    return logging.makeLogRecord(
        {
            "name": "drills.core.runner",
            "msg": "Finished %r",
            "args": ("ranges",),
            "levelname": "DEBUG",
            "levelno": logging.DEBUG,
            "funcName": "run",
            "exercise": "ranges",
            "lines": 108,
        }
    )


@pytest.mark.unit
class TestFormatters:
    def test_extras_are_rendered(self, record):
        formatter = DrillsFormatter(
            fmt="%(qualName)s %(extra)s: %(message)s",
            extra_format="[{key}: {value}]",
        )
        output = formatter.format(record)
        assert output.startswith("drills.core.runner.run ")
        assert "[exercise: ranges]" in output
        assert "[lines: 108]" in output
        assert output.endswith(": Finished 'ranges'")

    def test_record_is_not_modified(self, record):
        DrillsFormatter(fmt="%(qualName)s %(message)s").format(record)
        assert not hasattr(record, "qualName")

    def test_coloured_only_on_tty(self, record):
        formatter = ColouredFormatter(fmt="%(levelname)s %(qualName)s")
        assert "\x1b[" not in formatter.format(record)
        formatter.is_tty = True
        assert formatter.format(record).startswith(
            ColouredFormatter.COLORS["DEBUG"]
        )

    def test_json(self, record):
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "Finished 'ranges'"
        assert payload["level"] == "DEBUG"
        assert payload["exercise"] == "ranges"
        assert payload["lines"] == 108

    def test_json_without_extras(self, record):
        payload = json.loads(JSONFormatter(extras=False).format(record))
        assert "exercise" not in payload


@pytest.mark.integration
class TestConfigure:
    def test_console_goes_to_stderr(self, capsys):
        logger = configure(LoggerConfig())
        logger.warning("careful", extra={"exercise": "spread"})
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "careful" in captured.err
        assert "[exercise: spread]" in captured.err

    def test_console_level(self, capsys):
        logger = configure(LoggerConfig())
        logger.info("quiet")
        assert capsys.readouterr().err == ""

    def test_file_handler(self, tmp_path):
        config = LoggerConfig()
        config.tty.enable = False
        config.file.enable = True
        config.file.path = str(tmp_path / "logs")
        logger = configure(config)
        logger.getChild("runner").info("written")
        content = (tmp_path / "logs" / "drills.log").read_text("utf-8")
        assert "written" in content
        assert "\x1b[" not in content

    def test_json_output(self, capsys):
        config = LoggerConfig()
        config.as_json = True
        configure(config).error("broken")
        payload = json.loads(capsys.readouterr().err)
        assert payload["message"] == "broken"
        assert payload["level"] == "ERROR"

    def test_reconfigure_replaces_handlers(self):
        configure(LoggerConfig())
        logger = configure(LoggerConfig())
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_all_disabled(self):
        config = LoggerConfig()
        config.tty.enable = False
        logger = configure(config)
        assert isinstance(logger.handlers[0], logging.NullHandler)


@pytest.mark.unit
class TestPerfLogger:
    def test_success(self, caplog):
        @perf_logger
        def add(a, b):
            return a + b

        caplog.set_level(logging.DEBUG)
        assert add(2, 3) == 5
        assert "completed in" in caplog.records[-1].getMessage()
        assert caplog.records[-1].elapsed >= 0

    def test_failure(self, caplog):
        @perf_logger
        def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            fail()
        assert caplog.records[-1].levelno == logging.ERROR
        assert "failed after" in caplog.records[-1].getMessage()


@pytest.mark.unit
class TestTracer:
    def test_disabled_tracer_still_records_spans(self):
        tracer = get_tracer(Config())
        with tracer.start_as_current_span("closures") as span:
            assert span.is_recording()

    def test_console_exporter(self, capsys):
        config = Config()
        config.debug = True
        config.telemetry.enabled = True
        tracer = get_tracer(config, name="drills-test")
        with tracer.start_as_current_span("spread"):
            pass
        err = capsys.readouterr().err
        assert '"name": "spread"' in err
        assert "drills-test" in err

    def test_console_fallback_when_otlp_fails(self, monkeypatch, capsys):
        def broken():
            raise RuntimeError("no collector")

        monkeypatch.setattr(
            "drills.utils.opentelemetry.OTLPSpanExporter", broken
        )
        config = Config()
        config.telemetry.enabled = True
        tracer = get_tracer(config)
        with tracer.start_as_current_span("ranges"):
            pass
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"name": "ranges"' in captured.err
