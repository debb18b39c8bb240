"""
Tests for logger configuration
"""

from loguru import logger

from artlens.utils.logger_config import LOG_MODE_ENV, configure_logger, reset_logger


def test_configure_logger_writes_to_log_file(tmp_path, monkeypatch):
    monkeypatch.delenv(LOG_MODE_ENV, raising=False)
    log_file = tmp_path / "logs" / "artlens.log"

    reset_logger()
    try:
        configure_logger(level="DEBUG", log_file=str(log_file))
        logger.bind(component="DescriptionGenerator").debug("Reading image")
    finally:
        reset_logger()

    content = log_file.read_text(encoding="utf-8")
    assert "[DescriptionGenerator]" in content
    assert "Reading image" in content


def test_configure_logger_respects_level(tmp_path):
    log_file = tmp_path / "artlens.log"

    reset_logger()
    try:
        configure_logger(level="WARNING", log_file=str(log_file))
        logger.info("hidden")
        logger.warning("shown")
    finally:
        reset_logger()

    content = log_file.read_text(encoding="utf-8")
    assert "shown" in content
    assert "hidden" not in content
