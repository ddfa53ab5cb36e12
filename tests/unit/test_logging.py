"""
Tests for the hashreg diagnostic logger.
"""

import logging

from hashreg.core.identity import Hash
from hashreg.core.models.config import LoggingConfig
from hashreg.core.registry import HashRegistry
from hashreg.services.logging import HashregLogger, NullLogger


class TestHashregLogger:
    """Tests for HashregLogger."""

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "hashreg.log"
        logger = HashregLogger(
            LoggingConfig(level="debug", file=True), name="hashreg.test.file", log_file=log_file
        )
        logger.debug("registered %s", "SHA-256")
        assert "registered SHA-256" in log_file.read_text()
        logger.close()

    def test_level_filters_messages(self, tmp_path):
        log_file = tmp_path / "hashreg.log"
        logger = HashregLogger(
            LoggingConfig(level="warning", file=True), name="hashreg.test.level", log_file=log_file
        )
        logger.info("hidden")
        logger.warning("shown")
        content = log_file.read_text()
        assert "hidden" not in content
        assert "shown" in content
        logger.close()

    def test_console_output(self, capsys):
        logger = HashregLogger(LoggingConfig(level="info", console=True), name="hashreg.test.console")
        logger.info("to stderr")
        assert "to stderr" in capsys.readouterr().err
        logger.close()

    def test_no_handlers_by_default(self):
        logger = HashregLogger(name="hashreg.test.quiet")
        assert logger.handlers == []
        assert logging.getLogger("hashreg.test.quiet").handlers == []
        logger.error("dropped")

    def test_rebuild_closes_previous_file_handler(self, tmp_path):
        config = LoggingConfig(file=True)
        first = HashregLogger(config, name="hashreg.test.rebuild", log_file=tmp_path / "a.log")
        [old_handler] = first.handlers

        second = HashregLogger(config, name="hashreg.test.rebuild", log_file=tmp_path / "b.log")

        assert old_handler.stream is None
        assert len(second.handlers) == 1
        assert second.handlers[0] is not old_handler
        second.close()

    def test_close_detaches_handlers(self, tmp_path):
        logger = HashregLogger(
            LoggingConfig(file=True, console=True), name="hashreg.test.close", log_file=tmp_path / "x.log"
        )
        assert len(logger.handlers) == 2
        logger.close()
        assert logger.handlers == []

    def test_registry_writes_through_logger(self, tmp_path):
        log_file = tmp_path / "hashreg.log"
        logger = HashregLogger(
            LoggingConfig(level="debug", file=True), name="hashreg.test.registry", log_file=log_file
        )
        registry = HashRegistry(logger=logger)
        registry.register(Hash.MD5SHA1, None)
        assert "Registered MD5+SHA1 as unavailable" in log_file.read_text()
        logger.close()


class TestNullLogger:
    def test_all_methods_are_noops(self):
        logger = NullLogger()
        logger.debug("x")
        logger.info("x")
        logger.warning("x")
        logger.error("x")
        logger.close()
