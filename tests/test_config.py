import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pairrelay.config.provider import EnvConfigProvider
from pairrelay.logging_config import StatusCheckFilter, get_logging_config


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("PORT", "HOST", "DEBUG", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_api_config_defaults(clean_env):
    config = EnvConfigProvider().get_api_config()

    assert config.port == 3000
    assert config.host == "0.0.0.0"
    assert config.debug is False
    assert config.cors_origins == ["*"]


def test_api_config_from_env(clean_env):
    clean_env.setenv("PORT", "8443")
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("DEBUG", "True")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    config = EnvConfigProvider().get_api_config()

    assert config.port == 8443
    assert config.host == "127.0.0.1"
    assert config.debug is True
    assert config.cors_origins == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("value", ["abc", "0", "70000"])
def test_invalid_port_rejected(clean_env, value):
    clean_env.setenv("PORT", value)

    with pytest.raises(ValueError, match="PORT"):
        EnvConfigProvider().get_api_config()


def test_log_level(clean_env):
    clean_env.setenv("LOG_LEVEL", "debug")

    assert EnvConfigProvider().get_logging_config().level == "DEBUG"


def test_invalid_log_level_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        EnvConfigProvider().get_logging_config()


def _access_record(message: str) -> logging.LogRecord:
    return logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, message, None, None)


def test_status_polls_suppressed():
    status_filter = StatusCheckFilter()

    assert not status_filter.filter(_access_record('127.0.0.1:5000 - "GET /status HTTP/1.1" 200'))
    assert not status_filter.filter(_access_record('127.0.0.1:5000 - "GET /healthz HTTP/1.1" 200'))
    assert status_filter.filter(_access_record('127.0.0.1:5000 - "GET / HTTP/1.1" 200'))


def test_other_loggers_not_filtered():
    record = logging.LogRecord("pairrelay.main", logging.INFO, __file__, 1, "GET /status ", None, None)

    assert StatusCheckFilter().filter(record)


def test_logging_config_level_applied():
    config = get_logging_config("WARNING")

    assert config["loggers"]["pairrelay"]["level"] == "WARNING"
    assert config["root"]["level"] == "WARNING"


def test_app_import_configures_pairrelay_logger():
    """Importing the app module wires the pairrelay logger even without uvicorn's log_config."""
    import pairrelay.main  # noqa: F401

    logger = logging.getLogger("pairrelay")
    assert logger.handlers
    assert logger.propagate is False
