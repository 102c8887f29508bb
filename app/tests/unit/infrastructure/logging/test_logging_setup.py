"""Unit tests for logging setup helpers."""

import logging

import pytest

from infrastructure.logging import configure_logging, get_module_logger

pytestmark = pytest.mark.unit


def test_configure_logging_is_silent_under_pytest():
    configure_logging()

    assert logging.root.level > logging.CRITICAL


def test_get_module_logger_binds_component():
    logger = get_module_logger()

    assert "component" in logger._context
