"""Unit tests for per-category logging levels."""

import logging

from newsroom.config import Settings
from newsroom.infrastructure.logging.log_config import _parse_level, setup_logging


def test_category_levels_are_applied():
    settings = Settings(
        _env_file=None,
        log_level="WARNING",
        log_level_sql="ERROR",
        log_level_articles="DEBUG",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("newsroom.application").level == logging.DEBUG


def test_unknown_level_defaults_to_info():
    assert _parse_level("chatty") == logging.INFO
    assert _parse_level("debug") == logging.DEBUG
