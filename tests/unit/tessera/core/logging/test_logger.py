import json
import logging

import pytest
import structlog

from tessera.core.logging.logger import ROOT_LOGGER, get_logger, logger_name, setup_logger


@pytest.fixture
def restore_root():
    yield
    structlog.reset_defaults()
    setup_logger(use_structlog=False)
    logging.getLogger(ROOT_LOGGER).propagate = True


class TestLoggerName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "tessera"),
            ("", "tessera"),
            ("tessera", "tessera"),
            ("ui.styling", "tessera.ui.styling"),
            ("tessera.ui.js", "tessera.ui.js"),
            ("tesseract", "tessera.tesseract"),
        ],
    )
    def test_rooted_at_tessera(self, name, expected):
        assert logger_name(name) == expected


class TestSetupLogger:
    def test_single_stream_handler(self, restore_root):
        logger = setup_logger(stream_level="WARNING", use_structlog=False)
        assert logger.name == "tessera"
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert type(logger.handlers[0]) is logging.StreamHandler
        assert logger.handlers[0].level == logging.WARNING

    def test_repeated_setup_does_not_stack_handlers(self, restore_root):
        setup_logger(use_structlog=False)
        logger = setup_logger(use_structlog=False)
        assert len(logger.handlers) == 1

    def test_stream_level_from_config(self, restore_root, monkeypatch):
        monkeypatch.setenv("TESSERA_LOGGER__STREAM_LEVEL", "INFO")
        assert setup_logger(use_structlog=False).handlers[0].level == logging.INFO


class TestGetLogger:
    def test_children_use_the_root_handler(self):
        logger = get_logger("unit.child", use_structlog=False)
        assert logger.name == "tessera.unit.child"
        assert logger.handlers == []
        assert logger.propagate is True

    def test_records_reach_caplog(self, caplog):
        get_logger("unit.caplog", use_structlog=False).debug("visible to %s", "caplog")
        assert "visible to caplog" in caplog.text
        assert caplog.records[-1].name == "tessera.unit.caplog"

    def test_structlog_renders_json(self, restore_root, caplog):
        setup_logger(use_structlog=True)
        logging.getLogger(ROOT_LOGGER).propagate = True
        logger = get_logger("unit.struct", use_structlog=True)
        logger.info("opened %s", "modal", cid="confirm")

        record = json.loads(caplog.records[-1].getMessage())
        assert record["event"] == "opened modal"
        assert record["cid"] == "confirm"
        assert record["logger"] == "tessera.unit.struct"
        assert record["level"] == "info"
        assert "timestamp" in record
