"""Tests for lintlens.kernel.logging."""

from __future__ import annotations

import json

from lintlens.kernel import logging as lintlens_logging
from lintlens.kernel.config import LoggingConfig
from lintlens.kernel.logging import configure_logging, get_logger


class TestConfigureLogging:
    def test_file_sink_writes_json_lines(self, tmp_path) -> None:
        path = tmp_path / "logs" / "lintlens.log"
        configure_logging(LoggingConfig(level="DEBUG", format="json", output_file=str(path)))

        get_logger("lintlens.test_file_sink").info("hello {who}", who="file")
        # Dropping the file sink closes and flushes it
        configure_logging(LoggingConfig(level="WARNING", format="console"))

        records = [json.loads(line)["record"] for line in path.read_text().splitlines()]
        assert [record["message"] for record in records] == ["hello file"]
        assert records[0]["extra"]["module"] == "lintlens.test_file_sink"
        assert records[0]["level"]["name"] == "INFO"

    def test_file_sink_respects_level(self, tmp_path) -> None:
        path = tmp_path / "lintlens.log"
        configure_logging(LoggingConfig(level="WARNING", format="console", output_file=str(path)))

        get_logger("lintlens.test_level").info("dropped")
        get_logger("lintlens.test_level").warning("kept")
        configure_logging(LoggingConfig(level="ERROR", format="console"))

        messages = [json.loads(line)["record"]["message"] for line in path.read_text().splitlines()]
        assert messages == ["kept"]

    def test_equal_config_is_not_reinstalled(self) -> None:
        config = LoggingConfig(level="INFO", format="structured")
        configure_logging(config)
        handler_ids = list(lintlens_logging._handler_ids)

        configure_logging(LoggingConfig(level="INFO", format="structured"))
        assert lintlens_logging._handler_ids == handler_ids

        configure_logging(config, force_reconfigure=True)
        assert lintlens_logging._handler_ids != handler_ids

    def test_one_stderr_sink_per_config(self, tmp_path) -> None:
        configure_logging(LoggingConfig(format="rich"))
        assert len(lintlens_logging._handler_ids) == 1

        configure_logging(LoggingConfig(format="json", output_file=str(tmp_path / "x.log")))
        assert len(lintlens_logging._handler_ids) == 2

        configure_logging(LoggingConfig(format="console"))
        assert len(lintlens_logging._handler_ids) == 1

    def test_none_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("LINTLENS_LOG_LEVEL", "debug")
        monkeypatch.setenv("LINTLENS_LOG_FORMAT", "JSON")

        configure_logging()

        assert lintlens_logging._active_config == LoggingConfig(level="DEBUG", format="json")


class TestLineFormat:
    def test_console_format(self) -> None:
        config = LoggingConfig(format="console", include_timestamp=False)
        assert lintlens_logging._line_format(config) == "{level: <8} | {name} | {message}"

    def test_structured_format_has_location(self) -> None:
        line_format = lintlens_logging._line_format(LoggingConfig(format="structured"))
        assert line_format.startswith("<green>{time:YYYY-MM-DD HH:mm:ss}</green> ")
        assert "<cyan>{name}:{function}:{line}</cyan>" in line_format


def test_get_logger_binds_module() -> None:
    records: list[dict] = []
    bound = get_logger("lintlens.test_bind")
    handler_id = bound.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        bound.debug("bound")
    finally:
        bound.remove(handler_id)

    assert records[0]["extra"]["module"] == "lintlens.test_bind"
    assert get_logger("lintlens.test_bind") is bound
