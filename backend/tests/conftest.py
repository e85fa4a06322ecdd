import logging
import os

import pytest

from passcheck.config import PolicySettings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in list(os.environ):
        if name.upper().startswith("PASSCHECK_"):
            monkeypatch.delenv(name)
    monkeypatch.setitem(PolicySettings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("passcheck")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
