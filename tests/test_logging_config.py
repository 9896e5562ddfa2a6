import logging

import pytest

from wordrank import logging_config


@pytest.fixture(autouse=True)
def restore_package_level():
    logger = logging.getLogger("wordrank")
    level = logger.level
    yield
    logger.setLevel(level)


def test_configure_logging_sets_package_level(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    logging_config.configure_logging("DEBUG", force=True)
    assert logging.getLogger("wordrank").level == logging.DEBUG


def test_configure_logging_reads_env(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv("WORDRANK_LOG_LEVEL", "warning")
    logging_config.configure_logging(force=True)
    assert logging.getLogger("wordrank").level == logging.WARNING


def test_configure_logging_runs_once(monkeypatch):
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    logging_config.configure_logging("ERROR", force=True)
    logging_config.configure_logging("DEBUG")
    assert logging.getLogger("wordrank").level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    assert logging_config._resolve_level("chatty") == logging.INFO
    assert logging_config._resolve_level("10") == logging.DEBUG
    assert logging_config._resolve_level(None) == logging.INFO
