import logging

import pytest

from app.core.logging import NOISY_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    saved = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    setup_logging("INFO")


def test_noisy_loggers_quiet_at_info():
    setup_logging("INFO")

    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_noisy_loggers_follow_debug():
    setup_logging("debug")

    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG


def test_noisy_loggers_never_louder_than_app_level():
    setup_logging("ERROR")

    assert logging.getLogger("uvicorn.access").level == logging.ERROR
