"""
Unit tests for kyopro.core.logger module.
"""

import logging

import pytest

from kyopro.core.logger import PACKAGE_NAME, get_logger, set_level


class TestLogger:
    def test_get_logger_is_child_of_package(self):
        logger = get_logger("kyopro.services.problem")

        assert logger.name == "kyopro.services.problem"
        assert logging.getLogger(PACKAGE_NAME).handlers

    def test_set_level_by_name(self):
        set_level("debug")
        assert logging.getLogger(PACKAGE_NAME).level == logging.DEBUG

        set_level(logging.WARNING)
        assert logging.getLogger(PACKAGE_NAME).level == logging.WARNING

    def test_set_level_unknown_name(self):
        with pytest.raises(ValueError):
            set_level("LOUD")
