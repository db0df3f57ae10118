"""Logger naming checks."""

import logging

from cropkit.utils.logging import ROOT_LOGGER_NAME, get_logger


def test_root_logger():
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("cropkit") is logging.getLogger("cropkit")


def test_module_loggers_are_children():
    assert get_logger("cropkit.geometry.view").name == "cropkit.geometry.view"
    assert get_logger("plugins").name == "cropkit.plugins"


def test_library_installs_null_handler():
    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
