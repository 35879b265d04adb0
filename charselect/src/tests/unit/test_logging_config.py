"""
Tests for preview logging setup.
"""

import logging

from charselect.src.logging_config import ROOT_LOGGER_NAME, get_logger, log_with_context, setup_logging


class TestLoggingConfig:
    """Logger hierarchy and handlers."""

    def test_child_loggers_share_root(self):
        assert get_logger("frame_resolver").name == f"{ROOT_LOGGER_NAME}.frame_resolver"

    def test_setup_logging_file_handler(self, tmp_path):
        log_file = tmp_path / "preview.log"
        root = setup_logging(log_level="DEBUG", log_file=log_file, log_to_console=False)
        try:
            get_logger("test").debug("hello preview")
            for handler in root.handlers:
                handler.flush()

            assert root.level == logging.DEBUG
            assert "hello preview" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers.clear()
            root.setLevel(logging.NOTSET)

    def test_unknown_level_defaults_to_info(self):
        root = setup_logging(log_level="chatty", log_to_console=False)
        try:
            assert root.level == logging.INFO
        finally:
            root.setLevel(logging.NOTSET)

    def test_log_with_context(self, caplog):
        logger = get_logger("context")

        with caplog.at_level(logging.INFO, logger=logger.name):
            log_with_context(logger, logging.INFO, "Pool resolved", class_name="Mage", frames=4)

        assert "Pool resolved [class_name=Mage | frames=4]" in caplog.text
