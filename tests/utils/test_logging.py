import logging

import pytest

from apicalypse import QueryBuilder
from apicalypse.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_get_logger_is_namespaced_and_unconfigured(package_logger):
    logger = get_logger("tests.logging")
    assert logger.name == "apicalypse.tests.logging"
    assert package_logger.level == logging.NOTSET
    assert package_logger.handlers == []


def test_configure_logging_is_opt_in_and_idempotent(package_logger):
    configure_logging()
    assert package_logger.level == logging.NOTSET
    configure_logging(logging.DEBUG)
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_debug_records_reach_root_configuration(caplog):
    caplog.set_level(logging.DEBUG)
    QueryBuilder().select("name", "rating").search("secret term")
    messages = [r.getMessage() for r in caplog.records if r.name == "apicalypse.query"]
    assert any("Selected fields" in m for m in messages)
    assert any("11 chars" in m for m in messages)
    assert not any("secret term" in m for m in messages)
