# test_logger.py

import logging

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from viewstyle.logger import Logger
from viewstyle.configuration import LabelConfiguration
from viewstyle.views import LabelView


def test_logger_methods(caplog):
    caplog.set_level(logging.DEBUG, logger="viewstyle.test")
    logger = Logger("viewstyle.test")

    logger.debug("applying style")
    logger.error("render failed")

    assert "applying style" in caplog.text
    assert "render failed" in caplog.text


def test_disabled_logger_adds_single_null_handler():
    Logger("viewstyle.quiet")
    Logger("viewstyle.quiet")
    handlers = logging.getLogger("viewstyle.quiet").handlers
    assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1


def test_style_application_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="viewstyle.configurable")
    LabelView("hi").view_style = LabelConfiguration()
    assert "Applying LabelConfiguration to LabelView" in caplog.text
