import logging

import pytest

from placenorm.core.logging import DIAGNOSTICS_LOGGER, build_logging_config, setup_logging
from placenorm.core.settings import Settings


@pytest.fixture
def restore_logger_levels():
    names = ["", DIAGNOSTICS_LOGGER, "uvicorn.access"]
    saved = {name: logging.getLogger(name).level for name in names}
    root_handlers = list(logging.getLogger().handlers)
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    logging.getLogger().handlers = root_handlers


def test_config_uses_settings_levels():
    settings = Settings(LOG_LEVEL="debug", DIAGNOSTICS_LOG_LEVEL="error")
    config = build_logging_config(settings)

    assert config["loggers"][""]["level"] == "DEBUG"
    assert config["loggers"][DIAGNOSTICS_LOGGER]["level"] == "ERROR"
    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"


def test_diagnostics_logger_covers_normalizer_module():
    assert "placenorm.normalization.place_normalizer".startswith(DIAGNOSTICS_LOGGER + ".")


def test_setup_logging_silences_diagnostics(restore_logger_levels):
    setup_logging(Settings(LOG_LEVEL="INFO", DIAGNOSTICS_LOG_LEVEL="ERROR"))

    normalizer_logger = logging.getLogger("placenorm.normalization.place_normalizer")
    assert logging.getLogger().level == logging.INFO
    assert not normalizer_logger.isEnabledFor(logging.WARNING)
    assert normalizer_logger.isEnabledFor(logging.ERROR)


def test_setup_logging_reads_environment(restore_logger_levels, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    setup_logging()

    assert logging.getLogger().level == logging.WARNING
