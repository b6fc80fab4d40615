import logging

import pytest
from pydantic import ValidationError

from pdfsnap.core.config import Settings, get_settings
from pdfsnap.core.logging import LOG_FORMAT, configure_logging


def test_log_level_is_normalised():
    assert Settings(log_level="debug").log_level == "DEBUG"
    assert Settings(log_level=" warning ").log_level == "WARNING"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_defaults():
    settings = Settings()
    assert settings.port == 5000
    assert settings.toast_duration_seconds == 3.0
    assert settings.session_cookie == "pdfsnap_session"


def test_logger_uses_configured_level():
    settings = get_settings()
    logger = configure_logging()

    assert logger.name == settings.app_name
    assert logger.level == logging.getLevelName(settings.log_level)
    assert not logger.propagate
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert configure_logging() is logger


def test_top_level_package_is_a_namespace_package():
    import pdfsnap

    assert getattr(pdfsnap, "__file__", None) is None
    assert len(list(pdfsnap.__path__)) >= 1
